"""Pytest configuration and fixtures."""

from collections.abc import Generator

import pytest

from puzldai.cache.factory import reset_cache


class FakeKeyValueClient:
    """Dict-backed stand-in for a synchronous Redis client."""

    def __init__(self) -> None:
        self.data: dict[str, str] = {}

    def get(self, key: str) -> str | None:
        return self.data.get(key)

    def set(self, key: str, value: str) -> bool:
        self.data[key] = value
        return True

    def delete(self, key: str) -> int:
        return 1 if self.data.pop(key, None) is not None else 0

    def exists(self, key: str) -> int:
        return 1 if key in self.data else 0


class FlushableKeyValueClient(FakeKeyValueClient):
    """Fake client that also supports bulk clearing."""

    def __init__(self) -> None:
        super().__init__()
        self.flush_calls = 0

    def flushall(self) -> bool:
        self.flush_calls += 1
        self.data.clear()
        return True


class FakeClock:
    """Manually advanced clock returning milliseconds."""

    def __init__(self, start_ms: float = 1_700_000_000_000) -> None:
        self.now_ms = start_ms

    def __call__(self) -> float:
        return self.now_ms

    def advance(self, ms: float) -> None:
        self.now_ms += ms


@pytest.fixture
def kv_client() -> FakeKeyValueClient:
    """Key-value client without flushall."""
    return FakeKeyValueClient()


@pytest.fixture
def flushable_client() -> FlushableKeyValueClient:
    """Key-value client with flushall."""
    return FlushableKeyValueClient()


@pytest.fixture
def clock() -> FakeClock:
    """Controllable clock for expiry tests."""
    return FakeClock()


@pytest.fixture(autouse=True)
def fresh_global_cache() -> Generator[None, None, None]:
    """Drop the global cache around each test."""
    reset_cache()
    yield
    reset_cache()
