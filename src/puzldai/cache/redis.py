"""Cache adapter over an external key-value store client."""

import json
import logging

from puzldai.cache.base import KeyValueClient, SerializationError, SyncCache, T

logger = logging.getLogger(__name__)


class RedisCache(SyncCache[T]):
    """
    Synchronous cache backed by an injected Redis-like client.

    Values are stored as JSON strings. The client is used as-is: no
    key prefixing, retries or timeouts are added, and errors raised by
    the client reach the caller unchanged.

    Limitations:
    - ``clear`` only works if the client has ``flushall``; otherwise
      it does nothing
    - Values must be JSON-serializable
    """

    def __init__(self, client: KeyValueClient) -> None:
        """
        Initialize the adapter.

        Args:
            client: Connected key-value client (e.g. ``redis.Redis``)
        """
        self._client = client
        flushall = getattr(client, "flushall", None)
        self._flushall = flushall if callable(flushall) else None

    @property
    def name(self) -> str:
        return "redis"

    @property
    def supports_bulk_clear(self) -> bool:
        """Whether ``clear`` can flush the backend."""
        return self._flushall is not None

    def _serialize(self, value: T) -> str:
        """Serialize value to JSON string."""
        try:
            return json.dumps(value)
        except (TypeError, ValueError) as e:
            raise SerializationError(f"Cannot encode value: {e}") from e

    def _deserialize(self, data: str | bytes) -> T:
        """Deserialize JSON string to value."""
        try:
            if isinstance(data, bytes):
                data = data.decode("utf-8")
            return json.loads(data)
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise SerializationError(f"Cannot decode stored value: {e}") from e

    def get(self, key: str) -> T | None:
        data = self._client.get(key)
        if not data:
            return None
        return self._deserialize(data)

    def set(self, key: str, value: T) -> None:
        self._client.set(key, self._serialize(value))

    def delete(self, key: str) -> None:
        self._client.delete(key)

    def clear(self) -> None:
        if self._flushall is None:
            logger.debug("Backend has no flushall, clear() skipped")
            return
        self._flushall()

    def has(self, key: str) -> bool:
        return bool(self._client.exists(key))
