"""Cache infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import redis.asyncio as aioredis

from peerrate.adapter.cache import Cache, RedisCache
from peerrate.config import CacheSettings
from peerrate.util.di.base import ProviderBase
from peerrate.util.observability import instrument_redis


class CacheProvider(ProviderBase):
    """Cache component base."""

    __mock_component__ = "cache"


class ProdCacheProvider(CacheProvider):
    """Production cache provider backed by Redis."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def get_redis(self, cache_settings: CacheSettings) -> AsyncIterator[aioredis.Redis]:
        """Provide the shared Redis client, closed on container close."""
        instrument_redis()
        client = aioredis.Redis.from_url(cache_settings.url, decode_responses=True)
        yield client
        await client.aclose()

    @provide(scope=Scope.APP)
    def get_cache(self, client: aioredis.Redis, cache_settings: CacheSettings) -> Cache:
        """Provide the read-through cache."""
        return RedisCache(
            client, cache_settings.ttl_seconds, prefix=cache_settings.prefix
        )
