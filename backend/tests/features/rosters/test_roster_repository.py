"""
Tests for the SQLAlchemy roster repository, run against in-memory SQLite.
"""

import pytest
import pytest_asyncio
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from elo_api.features.accounts.models import PlayerReference
from elo_api.features.rosters.orm_models import RosterORM
from elo_api.features.rosters.repository import SQLAlchemyRosterRepository
from elo_api.init_db import init_db


@pytest_asyncio.fixture
async def session():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await init_db(engine)
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session
    await engine.dispose()


@pytest.fixture
def repository(session):
    return SQLAlchemyRosterRepository(session)


BR = PlayerReference(shard="br1", puuid="puuid-br")
EUW = PlayerReference(shard="euw1", puuid="puuid-euw")
KR = PlayerReference(shard="kr", puuid="puuid-kr")


class TestSQLAlchemyRosterRepository:
    """Test cases for the roster repository."""

    @pytest.mark.asyncio
    async def test_unknown_roster_is_empty(self, repository):
        assert await repository.get_references("nobody") == []

    @pytest.mark.asyncio
    async def test_add_creates_roster(self, repository, session):
        assert await repository.add_reference("channel", BR) is True

        roster = await session.get(RosterORM, "channel")
        assert roster is not None
        assert await repository.get_references("channel") == [BR]

    @pytest.mark.asyncio
    async def test_add_is_idempotent(self, repository):
        assert await repository.add_reference("channel", BR) is True
        assert await repository.add_reference("channel", BR) is False

        assert await repository.get_references("channel") == [BR]

    @pytest.mark.asyncio
    async def test_insertion_order(self, repository):
        for reference in (KR, BR, EUW):
            await repository.add_reference("channel", reference)

        assert await repository.get_references("channel") == [KR, BR, EUW]

    @pytest.mark.asyncio
    async def test_rosters_are_isolated(self, repository):
        await repository.add_reference("first", BR)
        await repository.add_reference("second", EUW)

        assert await repository.get_references("first") == [BR]
        assert await repository.get_references("second") == [EUW]

    @pytest.mark.asyncio
    async def test_same_puuid_on_other_shard_is_distinct(self, repository):
        other = PlayerReference(shard="na1", puuid=BR.puuid)

        await repository.add_reference("channel", BR)
        assert await repository.add_reference("channel", other) is True
        assert await repository.get_references("channel") == [BR, other]

    @pytest.mark.asyncio
    async def test_remove(self, repository):
        await repository.add_reference("channel", BR)
        await repository.add_reference("channel", EUW)

        assert await repository.remove_reference("channel", BR) is True
        assert await repository.get_references("channel") == [EUW]

    @pytest.mark.asyncio
    async def test_remove_absent(self, repository, session):
        assert await repository.remove_reference("ghost", BR) is False

        assert await session.get(RosterORM, "ghost") is None

    @pytest.mark.asyncio
    async def test_roster_kept_after_last_removal(self, repository, session):
        await repository.add_reference("channel", BR)
        await repository.remove_reference("channel", BR)

        assert await repository.get_references("channel") == []
        result = await session.execute(
            select(RosterORM.identifier).where(RosterORM.identifier == "channel")
        )
        assert result.scalar_one() == "channel"
