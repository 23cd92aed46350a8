"""Dependencies for the rosters feature.

Injects repository and resolver into the service.
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from elo_api.core import get_db
from elo_api.features.accounts.dependencies import AccountResolverDep
from .repository import RosterRepositoryInterface, SQLAlchemyRosterRepository
from .service import RosterService


async def get_roster_repository(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> RosterRepositoryInterface:
    """Get roster repository instance.

    :param db: Database session
    :returns: Roster repository implementation
    """
    return SQLAlchemyRosterRepository(db)


async def get_roster_service(
    repository: Annotated[RosterRepositoryInterface, Depends(get_roster_repository)],
    resolver: AccountResolverDep,
) -> RosterService:
    """Get roster service instance.

    :param repository: Roster repository
    :param resolver: Account resolver
    :returns: Roster service with injected dependencies
    """
    return RosterService(repository, resolver)


# Type aliases for cleaner dependency injection
RosterRepositoryDep = Annotated[
    RosterRepositoryInterface, Depends(get_roster_repository)
]
RosterServiceDep = Annotated[RosterService, Depends(get_roster_service)]

__all__ = [
    "get_roster_repository",
    "get_roster_service",
    "RosterRepositoryDep",
    "RosterServiceDep",
]
