"""Cache factory for creating cache instances based on configuration."""

import logging
from typing import Any

import redis
from pydantic import BaseModel, Field

from puzldai.cache.base import AsyncCache, BackendError, SyncCache
from puzldai.cache.memory import AsyncMemoryCache, MemoryCache
from puzldai.cache.redis import RedisCache
from puzldai.config import settings

logger = logging.getLogger(__name__)

# Global cache instance
_cache_instance: SyncCache[Any] | None = None


class CacheOptions(BaseModel):
    """Options accepted when constructing a cache."""

    ttl: int | None = Field(default=None, ge=0, description="Default TTL in seconds (advisory)")
    # Accepted for forward compatibility; no backend enforces it.
    max_size: int | None = Field(default=None, ge=0, description="Maximum entries (not enforced)")
    redis_url: str | None = Field(default=None, description="Redis connection URL")
    backend: str = Field(default="memory", description="Cache backend: memory or redis")

    @classmethod
    def from_settings(cls) -> "CacheOptions":
        """Build options from application settings."""
        return cls(
            ttl=settings.cache_ttl_seconds,
            max_size=settings.cache_max_size,
            redis_url=settings.redis_url,
            backend=settings.cache_backend,
        )


def _connect_redis(url: str) -> redis.Redis:
    """Build a Redis client from a URL without opening a connection."""
    try:
        return redis.Redis.from_url(url, decode_responses=True)
    except ValueError as e:
        raise BackendError(f"Invalid Redis URL {url!r}: {e}") from e


def create_cache(options: CacheOptions | None = None) -> SyncCache[Any]:
    """
    Create a synchronous cache instance.

    The in-memory cache is returned unless ``backend`` is "redis" and a
    ``redis_url`` is configured. A ``redis_url`` on its own selects
    nothing.

    Args:
        options: Cache options, defaults to application settings

    Returns:
        SyncCache instance

    Raises:
        ValueError: If backend type is unknown
        BackendError: If the Redis URL cannot be parsed
    """
    options = options or CacheOptions.from_settings()

    if options.backend == "memory":
        return MemoryCache()

    elif options.backend == "redis":
        if not options.redis_url:
            logger.warning(
                "Redis URL not configured, falling back to in-memory cache. "
                "Set REDIS_URL environment variable to enable Redis caching."
            )
            return MemoryCache()

        return RedisCache(_connect_redis(options.redis_url))

    else:
        raise ValueError(f"Unknown cache backend: {options.backend}")


def create_async_cache(options: CacheOptions | None = None) -> AsyncCache[Any]:
    """
    Create an asynchronous cache instance.

    Only the in-memory backend exists for the async capability, so
    every configuration yields an AsyncMemoryCache.

    Args:
        options: Cache options, defaults to application settings

    Returns:
        AsyncCache instance

    Raises:
        ValueError: If backend type is unknown
    """
    options = options or CacheOptions.from_settings()

    if options.backend == "redis":
        # TODO: add an AsyncCache over redis.asyncio with native key expiry
        logger.warning("No async Redis backend available, using in-memory cache")
    elif options.backend != "memory":
        raise ValueError(f"Unknown cache backend: {options.backend}")

    return AsyncMemoryCache()


def get_cache() -> SyncCache[Any]:
    """
    Get the global cache instance.

    Creates the cache on first access using configuration settings.

    Returns:
        SyncCache instance
    """
    global _cache_instance

    if _cache_instance is None:
        _cache_instance = create_cache()
        logger.info(f"Initialized {_cache_instance.name} cache backend")

    return _cache_instance


def reset_cache() -> None:
    """
    Reset the global cache instance.

    Useful for testing or when configuration changes.
    """
    global _cache_instance
    _cache_instance = None
