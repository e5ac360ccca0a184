"""Task records and helpers for keeping them in a cache."""

import logging
from dataclasses import asdict, dataclass
from typing import Any

from puzldai.cache.base import SyncCache

logger = logging.getLogger(__name__)

FINISHED_STATUSES = frozenset({"completed", "failed"})


@dataclass
class TaskEntry:
    """
    A task tracked by the orchestration commands.

    Timestamps are milliseconds since epoch. The cache treats the
    record as an opaque payload.
    """

    id: str
    status: str
    created_at: int
    updated_at: int
    result: str | None = None

    @property
    def is_finished(self) -> bool:
        """Check if the task reached a terminal status."""
        return self.status in FINISHED_STATUSES


def _task_key(task_id: str) -> str:
    return f"task:{task_id}"


def cache_task(cache: SyncCache[Any], entry: TaskEntry) -> None:
    """
    Store a task in the cache.

    The record is stored as a plain dict so JSON-backed caches can
    carry it.

    Args:
        cache: Target cache
        entry: Task to store
    """
    cache.set(_task_key(entry.id), asdict(entry))


def get_cached_task(cache: SyncCache[Any], task_id: str) -> TaskEntry | None:
    """
    Get a cached task.

    Args:
        cache: Source cache
        task_id: Task identifier

    Returns:
        TaskEntry or None if not cached
    """
    data = cache.get(_task_key(task_id))
    if data is None:
        return None
    return TaskEntry(**data)


def evict_finished_task(cache: SyncCache[Any], task_id: str) -> bool:
    """
    Remove a task from the cache once it has completed or failed.

    Running and queued tasks are left in place.

    Args:
        cache: Cache holding the task
        task_id: Task identifier

    Returns:
        True if the task was evicted
    """
    task = get_cached_task(cache, task_id)
    if task is None or not task.is_finished:
        return False

    cache.delete(_task_key(task_id))
    logger.info(f"Evicted task {task_id} from cache (status: {task.status})")
    return True
