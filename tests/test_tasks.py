"""Tests for task cache helpers."""

from dataclasses import asdict

import pytest

from puzldai.cache.memory import MemoryCache
from puzldai.cache.redis import RedisCache
from puzldai.cache.tasks import (
    TaskEntry,
    cache_task,
    evict_finished_task,
    get_cached_task,
)


def make_task(status: str = "running", result: str | None = None) -> TaskEntry:
    return TaskEntry(
        id="task_1",
        status=status,
        result=result,
        created_at=1_700_000_000_000,
        updated_at=1_700_000_001_000,
    )


class TestTaskEntry:
    """Tests for TaskEntry."""

    @pytest.mark.parametrize(
        "status,finished",
        [
            ("queued", False),
            ("running", False),
            ("completed", True),
            ("failed", True),
        ],
    )
    def test_is_finished(self, status: str, finished: bool) -> None:
        """Test terminal statuses."""
        assert make_task(status).is_finished is finished

    def test_result_optional(self) -> None:
        """Test result defaults to None."""
        task = TaskEntry(id="t", status="queued", created_at=0, updated_at=0)
        assert task.result is None


class TestTaskCacheHelpers:
    """Tests for storing tasks in a cache."""

    @pytest.fixture(params=["memory", "redis"])
    def cache(self, request, kv_client):
        """Run each test against both sync backends."""
        if request.param == "memory":
            return MemoryCache()
        return RedisCache(kv_client)

    def test_cache_and_get_task(self, cache) -> None:
        """Test a task round-trips through the cache."""
        task = make_task("completed", result="done")
        cache_task(cache, task)

        assert cache.has("task:task_1") is True
        assert get_cached_task(cache, "task_1") == task

    def test_get_missing_task(self, cache) -> None:
        """Test missing task returns None."""
        assert get_cached_task(cache, "nope") is None

    def test_stored_as_dict(self, cache) -> None:
        """Test the raw payload is a plain dict."""
        task = make_task()
        cache_task(cache, task)
        assert cache.get("task:task_1") == asdict(task)

    def test_evict_finished_task(self, cache, caplog) -> None:
        """Test completed tasks are evicted."""
        cache_task(cache, make_task("completed"))

        with caplog.at_level("INFO"):
            assert evict_finished_task(cache, "task_1") is True

        assert get_cached_task(cache, "task_1") is None
        assert "Evicted task task_1" in caplog.text

    def test_running_task_kept(self, cache) -> None:
        """Test unfinished tasks stay cached."""
        cache_task(cache, make_task("running"))

        assert evict_finished_task(cache, "task_1") is False
        assert get_cached_task(cache, "task_1") is not None

    def test_evict_missing_task(self, cache) -> None:
        """Test evicting an unknown task returns False."""
        assert evict_finished_task(cache, "nope") is False
