"""
Riot API gateway for the ranks feature.

Wraps the raw client lookups with the shared TTL cache. Every remote fetch
writes the cache; whether a lookup reads it first is chosen per call.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

import structlog

from elo_api.core.riot_api.routing import resolve_macro_region
from elo_api.features.accounts.models import PlayerReference

from .models import PlayerRankRecord, RankTuple

if TYPE_CHECKING:
    from elo_api.core.riot_api.cache import RiotAPICache
    from elo_api.core.riot_api.client import RiotAPIClient

logger = structlog.get_logger(__name__)


class RankGateway:
    """Display name and solo queue rank lookups for player references."""

    def __init__(
        self,
        client: "RiotAPIClient",
        cache: "RiotAPICache",
        use_cache: bool = True,
    ):
        """
        :param client: Riot API client
        :param cache: Shared Riot API cache
        :param use_cache: Default for reading the cache before fetching
        """
        self._client = client
        self._cache = cache
        self.use_cache = use_cache

    def _reads_cache(self, use_cache: Optional[bool]) -> bool:
        return self.use_cache if use_cache is None else use_cache

    async def fetch_display_name(
        self, reference: PlayerReference, use_cache: Optional[bool] = None
    ) -> str:
        """Current ``GameName#Tag`` of a player."""
        if self._reads_cache(use_cache):
            cached = self._cache.get_account_name(reference.puuid)
            if cached is not None:
                return cached

        account = await self._client.get_account_by_puuid(
            reference.puuid, resolve_macro_region(reference.shard)
        )
        self._cache.set_account_name(reference.puuid, account.riot_id)
        return account.riot_id

    async def fetch_rank(
        self, reference: PlayerReference, use_cache: Optional[bool] = None
    ) -> RankTuple:
        """Solo queue rank of a player, unranked when there is no entry."""
        if self._reads_cache(use_cache):
            cached = self._cache.get_rank(reference.puuid)
            if cached is not None:
                return cached

        entries = await self._client.get_league_entries_by_puuid(
            reference.puuid, reference.shard
        )
        rank = RankTuple.from_entries(entries)
        self._cache.set_rank(reference.puuid, rank)

        logger.debug(
            "Fetched rank",
            puuid=reference.puuid,
            shard=reference.shard,
            tier=rank.tier.value,
            league_points=rank.league_points,
        )
        return rank

    async def fetch_record(
        self, reference: PlayerReference, use_cache: Optional[bool] = None
    ) -> PlayerRankRecord:
        """Display name and rank of one player."""
        display_name = await self.fetch_display_name(reference, use_cache)
        rank = await self.fetch_rank(reference, use_cache)
        return PlayerRankRecord(
            display_name=display_name, rank=rank, reference=reference
        )
