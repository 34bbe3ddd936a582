"""Cache interface and key builders for the read-through path."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Awaitable, Callable

import logfire

from peerrate.adapter.error import CacheError


def rating_key(nickname: str) -> str:
    return f"user-rating-{nickname}"


def profile_key(nickname: str) -> str:
    return f"user-profile-{nickname}"


def listing_key(page: int) -> str:
    return f"/users/{page}"


@dataclass(frozen=True)
class CachedValue:
    """A value served by ``Cache.get_or_load``."""

    value: str
    hit: bool


class Cache(ABC):
    """Key/value cache with one fixed TTL for every entry."""

    def __init__(self, ttl_seconds: int) -> None:
        self.ttl_seconds = ttl_seconds

    @abstractmethod
    async def get(self, key: str) -> str | None:
        """Return the live value for ``key``, or None.

        Raises:
            CacheError: If the backend cannot be reached
        """
        pass

    @abstractmethod
    async def set(self, key: str, value: str) -> None:
        """Store ``value`` under ``key`` for ``ttl_seconds``.

        Raises:
            CacheError: If the backend cannot be reached
        """
        pass

    @abstractmethod
    async def delete(self, key: str) -> None:
        """Drop ``key`` if present.

        Raises:
            CacheError: If the backend cannot be reached
        """
        pass

    async def get_or_load(
        self, key: str, loader: Callable[[], Awaitable[str | None]]
    ) -> CachedValue | None:
        """Cache-aside lookup.

        A hit is returned verbatim. On a miss ``loader`` runs and its
        result is stored with the fixed TTL; a loader returning None
        (nothing found) is not cached. A failed read counts as a miss,
        a failed store propagates.

        Args:
            key: Cache key
            loader: Coroutine factory producing the value from storage

        Returns:
            The value and whether it came from the cache, or None

        Raises:
            CacheError: If storing a freshly loaded value fails
        """
        try:
            cached = await self.get(key)
        except CacheError as e:
            logfire.warn("Cache read failed, loading from storage", key=key, error=str(e))
            cached = None

        if cached is not None:
            logfire.debug("Cache hit", key=key)
            return CachedValue(value=cached, hit=True)

        value = await loader()
        if value is None:
            return None

        await self.set(key, value)
        logfire.debug("Cache filled", key=key, ttl_seconds=self.ttl_seconds)
        return CachedValue(value=value, hit=False)
