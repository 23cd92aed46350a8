"""
Tests for AccountResolver.
"""

from unittest.mock import AsyncMock

import pytest

from elo_api.core.exceptions import MalformedAccountInputError
from elo_api.core.riot_api.constants import Region
from elo_api.core.riot_api.errors import ForbiddenError, NotFoundError
from elo_api.features.accounts.models import PlayerReference
from elo_api.features.accounts.service import AccountResolver
from tests.factories import make_account


@pytest.fixture
def client():
    client = AsyncMock()
    client.get_account_by_riot_id.return_value = make_account(
        puuid="puuid-xyz", name="Faker", tag="KR1"
    )
    return client


class TestAccountResolver:
    """Test cases for AccountResolver."""

    @pytest.mark.asyncio
    async def test_default_shard(self, client):
        resolver = AccountResolver(client)

        account = await resolver.resolve_account("Faker#KR1")

        assert account.reference == PlayerReference(shard="br1", puuid="puuid-xyz")
        assert account.label == "Faker#KR1(br1)"
        client.get_account_by_riot_id.assert_awaited_once_with(
            "Faker", "KR1", Region.AMERICAS
        )

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "value,shard,region",
        [
            ("Faker#KR1(kr)", "kr", Region.ASIA),
            ("Faker#KR1(jp1)", "jp1", Region.ASIA),
            ("Faker#KR1(euw1)", "euw1", Region.EUROPE),
            ("Faker#KR1(tr1)", "tr1", Region.EUROPE),
            ("Faker#KR1(na1)", "na1", Region.AMERICAS),
        ],
    )
    async def test_region_routing(self, client, value, shard, region):
        resolver = AccountResolver(client)

        account = await resolver.resolve_account(value)

        assert account.reference.shard == shard
        client.get_account_by_riot_id.assert_awaited_once_with("Faker", "KR1", region)

    @pytest.mark.asyncio
    async def test_configured_default_shard(self, client):
        resolver = AccountResolver(client, default_shard="euw1")

        account = await resolver.resolve_account("Faker#KR1")

        assert account.reference.shard == "euw1"
        client.get_account_by_riot_id.assert_awaited_once_with(
            "Faker", "KR1", Region.EUROPE
        )

    @pytest.mark.asyncio
    async def test_uses_canonical_names(self, client):
        resolver = AccountResolver(client)

        account = await resolver.resolve_account("faker#kr1")

        assert (account.game_name, account.tag_line) == ("Faker", "KR1")

    @pytest.mark.asyncio
    async def test_malformed_input_skips_lookup(self, client):
        resolver = AccountResolver(client)

        with pytest.raises(MalformedAccountInputError):
            await resolver.resolve_account("NoTagHere")
        client.get_account_by_riot_id.assert_not_awaited()

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "error",
        [
            NotFoundError("Failed to fetch account data: Not Found", status_code=404),
            ForbiddenError("Failed to fetch account data: Forbidden", status_code=403),
        ],
    )
    async def test_lookup_errors_propagate(self, client, error):
        client.get_account_by_riot_id.side_effect = error
        resolver = AccountResolver(client)

        with pytest.raises(type(error)):
            await resolver.resolve_account("Faker#KR1")
