"""Shared fixtures for the Elo API test suite."""

import pytest

from elo_api.core.riot_api.cache import RiotAPICache, TTLCache
from elo_api.main import app
from tests.factories import FakeClock


@pytest.fixture
def clock():
    """Fake monotonic clock."""
    return FakeClock()


@pytest.fixture
def riot_cache(clock):
    """Riot API cache driven by the fake clock."""
    return RiotAPICache(
        cache=TTLCache(default_ttl=3600, clock=clock), account_ttl=3600, rank_ttl=60
    )


@pytest.fixture
def sample_account_data():
    """Sample account-v1 payload."""
    return {"puuid": "test-puuid-123", "gameName": "TestPlayer", "tagLine": "BR1"}


@pytest.fixture
def sample_league_entries():
    """Sample league-v4 payload with flex and solo entries."""
    return [
        {
            "leagueId": "league-flex",
            "queueType": "RANKED_FLEX_SR",
            "tier": "SILVER",
            "rank": "I",
            "puuid": "test-puuid-123",
            "leaguePoints": 12,
            "wins": 10,
            "losses": 9,
        },
        {
            "leagueId": "league-solo",
            "queueType": "RANKED_SOLO_5x5",
            "tier": "GOLD",
            "rank": "II",
            "puuid": "test-puuid-123",
            "leaguePoints": 40,
            "wins": 30,
            "losses": 25,
        },
    ]


@pytest.fixture
def clean_overrides():
    """Reset FastAPI dependency overrides after a test."""
    yield app.dependency_overrides
    app.dependency_overrides.clear()
