"""Capability contracts and shared types for cache backends."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Generic, Protocol, TypeVar

T = TypeVar("T")


class CacheError(Exception):
    """Base class for cache errors."""


class SerializationError(CacheError):
    """Raised when a value cannot be encoded to or decoded from the store."""


class BackendError(CacheError):
    """Raised when a backend client cannot be built from configuration."""


@dataclass
class CacheEntry(Generic[T]):
    """
    A stored value with an optional expiry.

    Attributes:
        value: Cached payload
        expires_at: Expiry as milliseconds since epoch (None = never)
    """

    value: T
    expires_at: float | None = None

    def is_expired(self, now_ms: float) -> bool:
        """Check whether the entry has expired at the given time."""
        if self.expires_at is None:
            return False
        return self.expires_at <= now_ms


class KeyValueClient(Protocol):
    """
    Minimal shape of an external key-value store client.

    Matches the synchronous ``redis.Redis`` client. ``flushall`` is
    optional and is probed for once, when an adapter is built.
    """

    def get(self, key: str) -> str | bytes | None: ...

    def set(self, key: str, value: str) -> Any: ...

    def delete(self, key: str) -> Any: ...

    def exists(self, key: str) -> int: ...


class SyncCache(ABC, Generic[T]):
    """
    Synchronous cache capability.

    Every operation completes immediately and is total over any key.
    There is no expiry.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Backend name (e.g., 'memory', 'redis')."""
        ...

    @abstractmethod
    def get(self, key: str) -> T | None:
        """
        Get a value from the cache.

        Args:
            key: Cache key

        Returns:
            Cached value, or None if absent
        """
        ...

    @abstractmethod
    def set(self, key: str, value: T) -> None:
        """Store a value, replacing any existing one."""
        ...

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove a key. Does nothing if the key is absent."""
        ...

    @abstractmethod
    def clear(self) -> None:
        """Remove all entries."""
        ...

    @abstractmethod
    def has(self, key: str) -> bool:
        """Check if a key is present."""
        ...


class AsyncCache(ABC, Generic[T]):
    """
    Asynchronous cache capability with per-entry expiry.

    Operations are coroutines so that a remote backend can be
    substituted. Expired entries are never returned.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Backend name (e.g., 'memory')."""
        ...

    @abstractmethod
    async def get(self, key: str) -> T | None:
        """
        Get a value from the cache.

        Args:
            key: Cache key

        Returns:
            Cached value, or None if absent or expired
        """
        ...

    @abstractmethod
    async def set(
        self,
        key: str,
        value: T,
        ttl_seconds: int | None = None,
    ) -> None:
        """
        Set a value in the cache.

        Args:
            key: Cache key
            value: Value to cache
            ttl_seconds: Time-to-live in seconds (None or 0 = no expiry)
        """
        ...

    @abstractmethod
    async def delete(self, key: str) -> None:
        """Remove a key. Does nothing if the key is absent."""
        ...

    @abstractmethod
    async def disconnect(self) -> None:
        """Release the backend and every stored entry."""
        ...
