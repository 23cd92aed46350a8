"""Core dependencies for FastAPI application."""

from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import Depends

from .config import Settings, get_global_settings
from .riot_api import RiotAPICache, RiotAPIClient

# Shared by every request in the process
_riot_cache: RiotAPICache | None = None


def get_app_settings() -> Settings:
    """Settings dependency, overridable in tests."""
    return get_global_settings()


def get_riot_cache() -> RiotAPICache:
    """Get the process-wide Riot API cache."""
    global _riot_cache
    if _riot_cache is None:
        settings = get_global_settings()
        _riot_cache = RiotAPICache(
            account_ttl=settings.account_cache_ttl,
            rank_ttl=settings.rank_cache_ttl,
        )
    return _riot_cache


async def get_riot_client(
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> AsyncGenerator[RiotAPIClient, None]:
    """Get Riot API client instance for one request.

    A missing key is reported by the client on its first request, so routes
    that never reach the Riot API still work.
    """
    client = RiotAPIClient(
        api_key=settings.riot_api_key,
        timeout=settings.riot_request_timeout,
        max_retries=settings.riot_max_retries,
    )
    await client.start_session()
    try:
        yield client
    finally:
        await client.close()


# Type aliases for cleaner dependency injection
SettingsDep = Annotated[Settings, Depends(get_app_settings)]
RiotClientDep = Annotated[RiotAPIClient, Depends(get_riot_client)]
RiotCacheDep = Annotated[RiotAPICache, Depends(get_riot_cache)]

__all__ = [
    "get_app_settings",
    "get_riot_cache",
    "get_riot_client",
    "SettingsDep",
    "RiotClientDep",
    "RiotCacheDep",
]
