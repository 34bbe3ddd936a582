"""In-memory cache for testing."""

import time
from typing import Callable

from peerrate.adapter.cache.base import Cache


class InMemoryCache(Cache):
    """Process-local cache honouring the fixed TTL.

    ``clock`` returns monotonic seconds and can be replaced in tests.
    """

    def __init__(
        self, ttl_seconds: int, clock: Callable[[], float] = time.monotonic
    ) -> None:
        super().__init__(ttl_seconds)
        self._clock = clock
        self._entries: dict[str, tuple[str, float]] = {}

    async def get(self, key: str) -> str | None:
        entry = self._entries.get(key)
        if entry is None:
            return None
        value, expires_at = entry
        if self._clock() >= expires_at:
            del self._entries[key]
            return None
        return value

    async def set(self, key: str, value: str) -> None:
        self._entries[key] = (value, self._clock() + self.ttl_seconds)

    async def delete(self, key: str) -> None:
        self._entries.pop(key, None)
