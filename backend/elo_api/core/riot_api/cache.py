"""
Caching layer for Riot API responses using TTL-based in-memory cache.
"""

import time
import threading
from typing import Any, Callable, Optional, Dict, Tuple

import structlog

logger = structlog.get_logger(__name__)

DEFAULT_TTL = 60 * 60


class TTLCache:
    """Simple TTL cache with thread-safe operations and per-key TTLs."""

    def __init__(
        self,
        default_ttl: float = DEFAULT_TTL,
        clock: Callable[[], float] = time.monotonic,
    ):
        """
        Initialize TTL cache.

        Args:
            default_ttl: Time to live in seconds for entries set without a TTL
            clock: Monotonic time source, replaceable in tests
        """
        self.default_ttl = default_ttl
        self.clock = clock
        self.cache: Dict[str, Tuple[Any, float]] = {}
        self.lock = threading.RLock()
        self._hits = 0
        self._misses = 0

    def get(self, key: str) -> Optional[Any]:
        """
        Get value from cache if not expired.

        Args:
            key: Cache key

        Returns:
            Cached value if exists and not expired, None otherwise
        """
        with self.lock:
            if key in self.cache:
                value, expiry = self.cache[key]
                if self.clock() < expiry:
                    self._hits += 1
                    logger.debug("Cache hit", key=key, hits=self._hits)
                    return value
                else:
                    # Remove expired entry
                    del self.cache[key]
                    self._misses += 1
                    logger.debug("Cache expired", key=key)
            else:
                self._misses += 1
            return None

    def set(self, key: str, value: Any, ttl: Optional[float] = None) -> None:
        """
        Set value in cache, overwriting any previous entry.

        Args:
            key: Cache key
            value: Value to cache
            ttl: Time to live in seconds, defaults to ``default_ttl``
        """
        ttl = self.default_ttl if ttl is None else ttl
        with self.lock:
            self.cache[key] = (value, self.clock() + ttl)
            logger.debug("Cache set", key=key, ttl=ttl)

    def delete(self, key: str) -> None:
        """Remove a key if present."""
        with self.lock:
            self.cache.pop(key, None)

    def purge_expired(self) -> int:
        """Drop every expired entry and return how many were removed."""
        with self.lock:
            now = self.clock()
            expired = [key for key, (_, expiry) in self.cache.items() if expiry <= now]
            for key in expired:
                del self.cache[key]
            if expired:
                logger.debug("Cache purged", entries_removed=len(expired))
            return len(expired)

    def clear(self) -> None:
        """Clear all entries from cache."""
        with self.lock:
            count = len(self.cache)
            self.cache.clear()
            self._hits = 0
            self._misses = 0
            logger.info("Cache cleared", entries_removed=count)

    def stats(self) -> Dict[str, Any]:
        """Get cache statistics."""
        with self.lock:
            total = self._hits + self._misses
            return {
                "size": len(self.cache),
                "hits": self._hits,
                "misses": self._misses,
                "hit_rate": self._hits / total if total > 0 else 0.0,
            }

    def __len__(self) -> int:
        """Get number of entries in cache."""
        return len(self.cache)


class RiotAPICache:
    """
    Cache interface for the lookups used by rank summaries.

    Account names change rarely and use the cache default TTL; ranks use a
    short TTL.
    """

    def __init__(
        self,
        cache: Optional[TTLCache] = None,
        account_ttl: float = DEFAULT_TTL,
        rank_ttl: float = 60,
    ):
        self.cache = cache if cache is not None else TTLCache(default_ttl=account_ttl)
        self.account_ttl = account_ttl
        self.rank_ttl = rank_ttl

    @staticmethod
    def _account_key(puuid: str) -> str:
        return f"account_puuid:{puuid}"

    @staticmethod
    def _league_key(puuid: str) -> str:
        return f"league:{puuid}"

    def get_account_name(self, puuid: str) -> Optional[str]:
        """Get cached display name by PUUID."""
        return self.cache.get(self._account_key(puuid))

    def set_account_name(self, puuid: str, name: str) -> None:
        """Cache display name by PUUID."""
        self.cache.set(self._account_key(puuid), name, self.account_ttl)

    def get_rank(self, puuid: str) -> Optional[Any]:
        """Get cached solo queue rank by PUUID."""
        return self.cache.get(self._league_key(puuid))

    def set_rank(self, puuid: str, rank: Any) -> None:
        """Cache solo queue rank by PUUID."""
        self.cache.set(self._league_key(puuid), rank, self.rank_ttl)

    def get_stats(self) -> Dict[str, Any]:
        """Get statistics from the backing cache."""
        return self.cache.stats()

    def clear_all(self) -> None:
        """Clear the backing cache."""
        self.cache.clear()
