"""
Cache module for memoizing and time-bounding values.

Provides a synchronous and an asynchronous cache capability with
in-memory implementations, a Redis-backed synchronous adapter, and a
factory that picks one from configuration.
"""

from puzldai.cache.base import (
    AsyncCache,
    BackendError,
    CacheEntry,
    CacheError,
    KeyValueClient,
    SerializationError,
    SyncCache,
)
from puzldai.cache.memory import AsyncMemoryCache, MemoryCache
from puzldai.cache.redis import RedisCache
from puzldai.cache.factory import (
    CacheOptions,
    create_async_cache,
    create_cache,
    get_cache,
    reset_cache,
)
from puzldai.cache.tasks import TaskEntry, cache_task, evict_finished_task, get_cached_task

__all__ = [
    "AsyncCache",
    "AsyncMemoryCache",
    "BackendError",
    "CacheEntry",
    "CacheError",
    "CacheOptions",
    "KeyValueClient",
    "MemoryCache",
    "RedisCache",
    "SerializationError",
    "SyncCache",
    "TaskEntry",
    "cache_task",
    "create_async_cache",
    "create_cache",
    "evict_finished_task",
    "get_cache",
    "get_cached_task",
    "reset_cache",
]
