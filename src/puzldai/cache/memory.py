"""In-memory cache backend implementations."""

import logging
import time
from typing import Callable

from puzldai.cache.base import AsyncCache, CacheEntry, SyncCache, T

logger = logging.getLogger(__name__)


def _now_ms() -> float:
    """Wall-clock time in milliseconds since epoch."""
    return time.time() * 1000


class MemoryCache(SyncCache[T]):
    """
    Synchronous in-memory cache using a simple dictionary.

    Entries never expire; they stay until deleted, overwritten
    or cleared.
    """

    def __init__(self) -> None:
        self._store: dict[str, T] = {}

    @property
    def name(self) -> str:
        return "memory"

    def get(self, key: str) -> T | None:
        return self._store.get(key)

    def set(self, key: str, value: T) -> None:
        self._store[key] = value

    def delete(self, key: str) -> None:
        self._store.pop(key, None)

    def clear(self) -> None:
        self._store.clear()

    def has(self, key: str) -> bool:
        return key in self._store

    def size(self) -> int:
        """Get current number of entries."""
        return len(self._store)


class AsyncMemoryCache(AsyncCache[T]):
    """
    Asynchronous in-memory cache with lazy TTL expiry.

    Expiry is checked only when a key is read. An expired entry stays
    in memory until its key is read again or the cache is disconnected;
    there is no background sweep.
    """

    def __init__(self, clock: Callable[[], float] | None = None) -> None:
        """
        Initialize async in-memory cache.

        Args:
            clock: Returns the current time in milliseconds since epoch
        """
        self._store: dict[str, CacheEntry[T]] = {}
        self._clock = clock or _now_ms

    @property
    def name(self) -> str:
        return "memory"

    async def get(self, key: str) -> T | None:
        """Get a value, evicting it first if it has expired."""
        entry = self._store.get(key)
        if entry is None:
            return None

        if entry.is_expired(self._clock()):
            del self._store[key]
            logger.debug(f"Evicted expired cache entry {key}")
            return None

        return entry.value

    async def set(
        self,
        key: str,
        value: T,
        ttl_seconds: int | None = None,
    ) -> None:
        """Set a value in the cache."""
        expires_at = None
        if ttl_seconds:
            expires_at = self._clock() + ttl_seconds * 1000
        self._store[key] = CacheEntry(value=value, expires_at=expires_at)

    async def delete(self, key: str) -> None:
        self._store.pop(key, None)

    async def disconnect(self) -> None:
        """Drop all entries."""
        self._store.clear()

    def size(self) -> int:
        """Get number of stored entries, including expired ones not yet read."""
        return len(self._store)
