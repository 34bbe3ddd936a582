"""Redis-backed cache.

All keys are namespaced under a configurable prefix so several
environments can share a single Redis instance.
"""

import redis.asyncio as aioredis
from redis.exceptions import RedisError

from peerrate.adapter.cache.base import Cache
from peerrate.adapter.error import CacheError


class RedisCache(Cache):
    """Cache stored in Redis with a per-key expiry.

    Args:
        client: Connected ``redis.asyncio`` client
        ttl_seconds: Expiry applied to every stored key
        prefix: Key namespace prefix
    """

    def __init__(
        self, client: aioredis.Redis, ttl_seconds: int, *, prefix: str = "peerrate:"
    ) -> None:
        super().__init__(ttl_seconds)
        self._redis = client
        self._prefix = prefix

    def _key(self, key: str) -> str:
        return f"{self._prefix}{key}"

    async def get(self, key: str) -> str | None:
        try:
            raw = await self._redis.get(self._key(key))
        except RedisError as e:
            raise CacheError(str(e)) from e
        if raw is None:
            return None
        if isinstance(raw, bytes):
            raw = raw.decode("utf-8")
        return raw

    async def set(self, key: str, value: str) -> None:
        try:
            await self._redis.set(self._key(key), value, ex=self.ttl_seconds)
        except RedisError as e:
            raise CacheError(str(e)) from e

    async def delete(self, key: str) -> None:
        try:
            await self._redis.delete(self._key(key))
        except RedisError as e:
            raise CacheError(str(e)) from e
