"""Dependencies for the ranks feature."""

from typing import Annotated

from fastapi import Depends

from elo_api.core.dependencies import RiotCacheDep, RiotClientDep, SettingsDep
from elo_api.features.rosters.dependencies import RosterRepositoryDep
from .gateway import RankGateway
from .service import RankAggregator


async def get_rank_gateway(
    riot_client: RiotClientDep,
    cache: RiotCacheDep,
    settings: SettingsDep,
) -> RankGateway:
    """Get rank gateway instance.

    :param riot_client: Riot API client
    :param cache: Process-wide Riot API cache
    :param settings: Application settings
    :returns: Rank gateway
    """
    return RankGateway(riot_client, cache, use_cache=settings.cache_reads_enabled)


async def get_rank_aggregator(
    repository: RosterRepositoryDep,
    gateway: Annotated[RankGateway, Depends(get_rank_gateway)],
    settings: SettingsDep,
) -> RankAggregator:
    """Get rank aggregator instance.

    :param repository: Roster repository
    :param gateway: Rank gateway
    :param settings: Application settings
    :returns: Rank aggregator
    """
    return RankAggregator(
        repository, gateway, max_concurrency=settings.rank_lookup_concurrency
    )


# Type aliases for cleaner dependency injection
RankGatewayDep = Annotated[RankGateway, Depends(get_rank_gateway)]
RankAggregatorDep = Annotated[RankAggregator, Depends(get_rank_aggregator)]

__all__ = [
    "get_rank_gateway",
    "get_rank_aggregator",
    "RankGatewayDep",
    "RankAggregatorDep",
]
