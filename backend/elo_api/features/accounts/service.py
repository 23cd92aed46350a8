"""Account resolution service.

Turns user-typed Riot IDs into shard-qualified player references by asking
the account-v1 endpoint of the shard's macro-region.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from elo_api.core.riot_api.constants import DEFAULT_SHARD
from elo_api.core.riot_api.routing import resolve_macro_region

from .models import PlayerReference, ResolvedAccount
from .parsing import parse_account_string

if TYPE_CHECKING:
    from elo_api.core.riot_api.client import RiotAPIClient

logger = structlog.get_logger(__name__)


class AccountResolver:
    """Resolve ``Name#Tag(shard)`` strings to player references."""

    def __init__(self, client: "RiotAPIClient", default_shard: str = DEFAULT_SHARD):
        """
        :param client: Riot API client
        :param default_shard: Shard assumed when the input has no suffix
        """
        self._client = client
        self.default_shard = default_shard

    async def resolve_account(self, value: str) -> ResolvedAccount:
        """Resolve an account string against the Riot API.

        :raises MalformedAccountInputError: If the input is malformed
        :raises RemoteLookupError: If the Riot API lookup fails
        """
        parsed = parse_account_string(value, self.default_shard)
        region = resolve_macro_region(parsed.shard)

        logger.debug(
            "Resolving account",
            riot_id=parsed.riot_id,
            shard=parsed.shard,
            region=region.value,
        )

        account = await self._client.get_account_by_riot_id(
            parsed.game_name, parsed.tag_line, region
        )

        return ResolvedAccount(
            reference=PlayerReference(shard=parsed.shard, puuid=account.puuid),
            game_name=account.game_name,
            tag_line=account.tag_line,
        )
