"""Unit tests for RedisCache against a mocked client."""

from unittest.mock import AsyncMock

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from peerrate.adapter.cache import RedisCache, rating_key
from peerrate.adapter.error import CacheError


@pytest.fixture
def client():
    return AsyncMock()


@pytest.fixture
def cache(client):
    return RedisCache(client, ttl_seconds=60, prefix="test:")


@pytest.mark.asyncio
async def test_set_uses_prefix_and_ttl(cache, client):
    await cache.set(rating_key("alice"), "user has 1")

    client.set.assert_awaited_once_with("test:user-rating-alice", "user has 1", ex=60)


@pytest.mark.asyncio
async def test_get_decodes_bytes(cache, client):
    client.get.return_value = b"user has 1"

    assert await cache.get(rating_key("alice")) == "user has 1"
    client.get.assert_awaited_once_with("test:user-rating-alice")


@pytest.mark.asyncio
async def test_get_missing_key(cache, client):
    client.get.return_value = None

    assert await cache.get(rating_key("alice")) is None


@pytest.mark.asyncio
async def test_backend_errors_become_cache_errors(cache, client):
    client.set.side_effect = RedisConnectionError("connection refused")
    client.delete.side_effect = RedisConnectionError("connection refused")

    with pytest.raises(CacheError, match="connection refused"):
        await cache.set("k", "v")
    with pytest.raises(CacheError):
        await cache.delete("k")


@pytest.mark.asyncio
async def test_read_error_is_treated_as_miss(cache, client):
    client.get.side_effect = RedisConnectionError("timeout")

    async def load():
        return "user has 4"

    result = await cache.get_or_load(rating_key("alice"), load)

    assert result.value == "user has 4"
    assert not result.hit
