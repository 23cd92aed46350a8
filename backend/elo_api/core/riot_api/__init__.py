"""
Riot API client package.

Provides the HTTP client for the account-v1 and league-v4 endpoints, shard to
region routing, response DTOs, the error family and the TTL cache.
"""

from .client import RiotAPIClient
from .cache import RiotAPICache, TTLCache
from .constants import DEFAULT_SHARD, RANKED_SOLO_QUEUE, Platform, Region
from .errors import (
    RemoteLookupError,
    RateLimitError,
    AuthenticationError,
    MissingAPIKeyError,
    ForbiddenError,
    NotFoundError,
    BadRequestError,
    ServiceUnavailableError,
    ResponseShapeError,
)
from .models import AccountDTO, LeagueEntryDTO
from .endpoints import RiotAPIEndpoints
from .routing import resolve_macro_region

__all__ = [
    "RiotAPIClient",
    "RiotAPICache",
    "TTLCache",
    "DEFAULT_SHARD",
    "RANKED_SOLO_QUEUE",
    "Platform",
    "Region",
    "RemoteLookupError",
    "RateLimitError",
    "AuthenticationError",
    "MissingAPIKeyError",
    "ForbiddenError",
    "NotFoundError",
    "BadRequestError",
    "ServiceUnavailableError",
    "ResponseShapeError",
    "AccountDTO",
    "LeagueEntryDTO",
    "RiotAPIEndpoints",
    "resolve_macro_region",
]
