"""Repository pattern implementation for rosters feature.

Provides a set-like interface over the account references of a channel.
"""

from abc import ABC, abstractmethod

import structlog
from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from elo_api.features.accounts.models import PlayerReference
from .orm_models import RosterAccountORM, RosterORM

logger = structlog.get_logger(__name__)


class RosterRepositoryInterface(ABC):
    """Interface for roster repository."""

    @abstractmethod
    async def get_references(self, identifier: str) -> list[PlayerReference]:
        """Get all references of a roster in insertion order.

        :param identifier: Channel identifier
        :returns: References, empty when the roster does not exist
        """
        pass

    @abstractmethod
    async def add_reference(self, identifier: str, reference: PlayerReference) -> bool:
        """Add a reference if absent, creating the roster when needed.

        :param identifier: Channel identifier
        :param reference: Reference to add
        :returns: True if added, False if it was already present
        """
        pass

    @abstractmethod
    async def remove_reference(
        self, identifier: str, reference: PlayerReference
    ) -> bool:
        """Remove a reference from a roster.

        :param identifier: Channel identifier
        :param reference: Reference to remove
        :returns: True if removed, False if it was not present
        """
        pass


class SQLAlchemyRosterRepository(RosterRepositoryInterface):
    """SQLAlchemy implementation of roster repository."""

    def __init__(self, db: AsyncSession):
        """Initialize repository with database session.

        :param db: Async database session
        """
        self.db = db

    async def get_references(self, identifier: str) -> list[PlayerReference]:
        """Get all references of a roster in insertion order."""
        stmt = (
            select(RosterAccountORM.reference)
            .where(RosterAccountORM.roster_identifier == identifier)
            .order_by(RosterAccountORM.id)
        )
        result = await self.db.execute(stmt)
        return [PlayerReference.parse(value) for value in result.scalars().all()]

    async def _has_reference(self, identifier: str, value: str) -> bool:
        stmt = select(RosterAccountORM.id).where(
            RosterAccountORM.roster_identifier == identifier,
            RosterAccountORM.reference == value,
        )
        result = await self.db.execute(stmt)
        return result.first() is not None

    async def _add_once(self, identifier: str, value: str) -> bool:
        if await self.db.get(RosterORM, identifier) is None:
            self.db.add(RosterORM(identifier=identifier))
            await self.db.flush()

        if await self._has_reference(identifier, value):
            await self.db.commit()
            return False

        self.db.add(RosterAccountORM(roster_identifier=identifier, reference=value))
        await self.db.commit()
        return True

    async def add_reference(self, identifier: str, reference: PlayerReference) -> bool:
        """Add a reference if absent, creating the roster when needed."""
        value = reference.serialize()

        try:
            added = await self._add_once(identifier, value)
        except IntegrityError:
            # Lost a race with a concurrent insert of the roster or reference
            await self.db.rollback()
            logger.debug("roster_add_conflict", identifier=identifier, reference=value)
            added = await self._add_once(identifier, value)

        logger.info(
            "roster_reference_added" if added else "roster_reference_present",
            identifier=identifier,
            reference=value,
        )
        return added

    async def remove_reference(
        self, identifier: str, reference: PlayerReference
    ) -> bool:
        """Remove a reference from a roster."""
        value = reference.serialize()
        stmt = delete(RosterAccountORM).where(
            RosterAccountORM.roster_identifier == identifier,
            RosterAccountORM.reference == value,
        )
        result = await self.db.execute(stmt)
        await self.db.commit()

        removed = (result.rowcount or 0) > 0
        logger.info(
            "roster_reference_removed" if removed else "roster_reference_absent",
            identifier=identifier,
            reference=value,
        )
        return removed
