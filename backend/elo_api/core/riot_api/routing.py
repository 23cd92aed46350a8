"""Shard to macro-region routing for the account-v1 endpoints."""

from typing import Optional

from .constants import DEFAULT_SHARD, Region

ASIA_SHARDS = frozenset({"kr", "kr1", "jp1", "oc1", "ph2", "sg2", "th2", "vn2"})
EUROPE_SHARDS = frozenset({"eun1", "euw1", "ru", "tr1"})


def resolve_macro_region(shard: Optional[str] = None) -> Region:
    """Map a platform shard code to the macro-region serving its accounts.

    Unknown shards fall into ``americas``.
    """
    code = (shard or DEFAULT_SHARD).strip().lower() or DEFAULT_SHARD

    if code in ASIA_SHARDS:
        return Region.ASIA
    if code in EUROPE_SHARDS:
        return Region.EUROPE
    return Region.AMERICAS
