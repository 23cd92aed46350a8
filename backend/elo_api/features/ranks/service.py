"""Rank summary aggregation for a channel roster."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, List

import structlog

from elo_api.features.accounts.models import PlayerReference

from .formatting import NO_ACCOUNTS_MESSAGE, render_summary
from .models import PlayerRankRecord

if TYPE_CHECKING:
    from elo_api.features.rosters.repository import RosterRepositoryInterface
    from .gateway import RankGateway

logger = structlog.get_logger(__name__)


class RankAggregator:
    """Render the rank line of every account in a roster."""

    def __init__(
        self,
        repository: "RosterRepositoryInterface",
        gateway: "RankGateway",
        max_concurrency: int = 5,
    ):
        """
        :param repository: Roster repository
        :param gateway: Rank gateway (cached Riot API lookups)
        :param max_concurrency: Maximum players looked up at the same time
        """
        self.repository = repository
        self.gateway = gateway
        self.max_concurrency = max_concurrency

    async def collect_records(
        self, references: List[PlayerReference]
    ) -> List[PlayerRankRecord]:
        """Look up every reference with bounded concurrency.

        The first failure cancels the remaining lookups and is re-raised.
        """
        semaphore = asyncio.Semaphore(self.max_concurrency)

        async def lookup(reference: PlayerReference) -> PlayerRankRecord:
            async with semaphore:
                return await self.gateway.fetch_record(reference)

        tasks = [asyncio.ensure_future(lookup(reference)) for reference in references]
        try:
            return list(await asyncio.gather(*tasks))
        except BaseException:
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise

    async def render_rank_summary(self, identifier: str) -> str:
        """Sorted, formatted summary of a roster, or the no-accounts message."""
        references = await self.repository.get_references(identifier)
        if not references:
            logger.debug("Roster empty", identifier=identifier)
            return NO_ACCOUNTS_MESSAGE

        try:
            records = await self.collect_records(references)
        except Exception as e:
            logger.warning(
                "Rank summary failed",
                identifier=identifier,
                players=len(references),
                error=str(e),
                error_type=type(e).__name__,
            )
            raise

        logger.info("Rank summary rendered", identifier=identifier, players=len(records))
        return render_summary(records, identifier)
