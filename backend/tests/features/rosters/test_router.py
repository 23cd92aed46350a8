"""
Tests for the HTTP surface: liveness, rank summaries and roster commands.
"""

from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from elo_api.core.config import Settings
from elo_api.core.dependencies import get_app_settings, get_riot_cache
from elo_api.core.exceptions import ACCOUNT_FORMAT_HINT
from elo_api.core.riot_api.cache import RiotAPICache
from elo_api.core.riot_api.errors import (
    ForbiddenError,
    NotFoundError,
    RateLimitError,
    ServiceUnavailableError,
)
from elo_api.features.accounts.models import PlayerReference
from elo_api.features.accounts.service import AccountResolver
from elo_api.features.ranks.dependencies import get_rank_aggregator
from elo_api.features.ranks.formatting import NO_ACCOUNTS_MESSAGE
from elo_api.features.rosters.dependencies import (
    get_roster_repository,
    get_roster_service,
)
from elo_api.features.rosters.service import RosterService
from elo_api.main import LIVENESS_MESSAGE, app
from tests.factories import make_account

client = TestClient(app)

SUMMARY = " ── A#BR1 - Ouro II 40 LP ── "
REFERENCE = PlayerReference(shard="br1", puuid="puuid-1")


@pytest.fixture
def aggregator(clean_overrides):
    aggregator = AsyncMock()
    aggregator.render_rank_summary.return_value = SUMMARY
    clean_overrides[get_rank_aggregator] = lambda: aggregator
    return aggregator


@pytest.fixture
def repository():
    repository = AsyncMock()
    repository.add_reference.return_value = True
    repository.remove_reference.return_value = True
    return repository


@pytest.fixture
def riot_client():
    riot_client = AsyncMock()
    riot_client.get_account_by_riot_id.return_value = make_account(
        puuid="puuid-1", name="Player", tag="BR1"
    )
    return riot_client


@pytest.fixture
def roster_service(clean_overrides, repository, riot_client):
    service = RosterService(repository, AccountResolver(riot_client))
    clean_overrides[get_roster_service] = lambda: service
    return service


class TestHealth:
    """Test cases for liveness and health endpoints."""

    def test_liveness(self):
        response = client.get("/")

        assert response.status_code == 200
        assert response.text == LIVENESS_MESSAGE
        assert response.headers["content-type"].startswith("text/plain")

    def test_health(self):
        response = client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert "hits" in data["cache"]

    def test_health_channel_reachable_through_command(self, aggregator, roster_service):
        response = client.get("/health/elo")

        assert response.status_code == 200
        assert response.text == SUMMARY
        aggregator.render_rank_summary.assert_awaited_once_with("health")


class TestRankSummary:
    """Test cases for the summary routes."""

    def test_summary(self, aggregator, roster_service):
        response = client.get("/somechannel")

        assert response.status_code == 200
        assert response.text == SUMMARY
        assert response.headers["content-type"].startswith("text/plain")
        aggregator.render_rank_summary.assert_awaited_once_with("somechannel")

    def test_empty_roster(self, aggregator, roster_service):
        aggregator.render_rank_summary.return_value = NO_ACCOUNTS_MESSAGE

        response = client.get("/empty")

        assert response.status_code == 200
        assert response.text == NO_ACCOUNTS_MESSAGE

    @pytest.mark.parametrize("command", ["elo", "set", "remove+", "ADD"])
    def test_other_commands_render_summary(self, aggregator, roster_service, command):
        response = client.get(f"/somechannel/{command}")

        assert response.status_code == 200
        assert response.text == SUMMARY
        aggregator.render_rank_summary.assert_awaited_once_with("somechannel")

    def test_lookup_failure(self, aggregator, roster_service):
        aggregator.render_rank_summary.side_effect = ForbiddenError(
            "Failed to fetch account data: Forbidden", status_code=403
        )

        response = client.get("/somechannel")

        assert response.status_code == 502
        assert "Forbidden" in response.text

    def test_rate_limited(self, aggregator, roster_service):
        aggregator.render_rank_summary.side_effect = RateLimitError(
            "Failed to fetch account data: Too Many Requests",
            status_code=429,
            retry_after=7,
        )

        response = client.get("/somechannel")

        assert response.status_code == 429
        assert response.headers["retry-after"] == "7"

    def test_upstream_unavailable(self, aggregator, roster_service):
        aggregator.render_rank_summary.side_effect = ServiceUnavailableError(
            "Failed to fetch account data: Service Unavailable", status_code=503
        )

        response = client.get("/somechannel")

        assert response.status_code == 502


class TestRosterCommands:
    """Test cases for add and remove commands."""

    @pytest.mark.parametrize("command", ["set", "add", "SET"])
    def test_add(self, aggregator, roster_service, repository, command):
        response = client.get(f"/somechannel/{command}+Player%23BR1")

        assert response.status_code == 200
        assert response.text == "A conta Player#BR1(br1) foi adicionada!"
        repository.add_reference.assert_awaited_once_with("somechannel", REFERENCE)
        aggregator.render_rank_summary.assert_not_awaited()

    @pytest.mark.parametrize("command", ["remove", "del", "delete"])
    def test_remove(self, aggregator, roster_service, repository, command):
        response = client.get(f"/somechannel/{command}+Player%23BR1")

        assert response.status_code == 200
        assert response.text == "A conta Player#BR1(br1) foi removida!"
        repository.remove_reference.assert_awaited_once_with("somechannel", REFERENCE)

    def test_add_with_shard_and_spaces(
        self, aggregator, roster_service, repository, riot_client
    ):
        response = client.get("/somechannel/add+Some+Player%23BR1(na1)")

        assert response.status_code == 200
        assert response.text == "A conta Player#BR1(na1) foi adicionada!"
        args = riot_client.get_account_by_riot_id.await_args.args
        assert args[:2] == ("Some Player", "BR1")

    def test_malformed_account(self, aggregator, roster_service, repository):
        response = client.get("/somechannel/add+NoTag")

        assert response.status_code == 400
        assert response.text == ACCOUNT_FORMAT_HINT
        repository.add_reference.assert_not_awaited()

    def test_forbidden_leaves_roster_untouched(
        self, aggregator, roster_service, repository, riot_client
    ):
        riot_client.get_account_by_riot_id.side_effect = ForbiddenError(
            "Failed to fetch account data: Forbidden",
            status_code=403,
            status_text="Forbidden",
        )

        response = client.get("/somechannel/add+Player%23BR1")

        assert response.status_code == 502
        assert "Forbidden" in response.text
        repository.add_reference.assert_not_awaited()

    def test_unknown_account(self, aggregator, roster_service, repository, riot_client):
        riot_client.get_account_by_riot_id.side_effect = NotFoundError(
            "Failed to fetch account data: Not Found", status_code=404
        )

        response = client.get("/somechannel/remove+Ghost%23BR1")

        assert response.status_code == 404
        repository.remove_reference.assert_not_awaited()


class TestMissingKey:
    """A missing Riot API key only fails requests that reach the Riot API."""

    @pytest.fixture
    def no_key(self, clean_overrides, repository):
        clean_overrides[get_app_settings] = lambda: Settings(riot_api_key="")
        clean_overrides[get_roster_repository] = lambda: repository
        clean_overrides[get_riot_cache] = lambda: RiotAPICache()
        return clean_overrides

    def test_empty_roster_needs_no_key(self, no_key, repository):
        repository.get_references.return_value = []

        response = client.get("/emptychannel")

        assert response.status_code == 200
        assert response.text == NO_ACCOUNTS_MESSAGE

    def test_summary(self, no_key, repository):
        repository.get_references.return_value = [REFERENCE]

        response = client.get("/somechannel")

        assert response.status_code == 503
        assert response.text == "Riot API key not configured"

    def test_add(self, no_key, repository):
        response = client.get("/somechannel/add+Player%23BR1")

        assert response.status_code == 503
        repository.add_reference.assert_not_awaited()
