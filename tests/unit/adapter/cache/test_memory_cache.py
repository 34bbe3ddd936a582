"""Unit tests for the cache-aside read path."""

import pytest

from peerrate.adapter.cache import InMemoryCache
from peerrate.adapter.error import CacheError


class ManualClock:
    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


class BrokenReadCache(InMemoryCache):
    async def get(self, key):
        raise CacheError("connection refused")


class BrokenWriteCache(InMemoryCache):
    async def set(self, key, value):
        raise CacheError("connection refused")


@pytest.fixture
def clock():
    return ManualClock()


@pytest.fixture
def cache(clock):
    return InMemoryCache(ttl_seconds=60, clock=clock)


class Loader:
    """Counts storage reads."""

    def __init__(self, value):
        self.value = value
        self.calls = 0

    async def __call__(self):
        self.calls += 1
        return self.value


@pytest.mark.asyncio
async def test_miss_loads_and_stores(cache):
    loader = Loader("user has 2")

    result = await cache.get_or_load("user-rating-alice", loader)

    assert result.value == "user has 2"
    assert not result.hit
    assert await cache.get("user-rating-alice") == "user has 2"


@pytest.mark.asyncio
async def test_hit_skips_loader(cache):
    await cache.set("user-rating-alice", "user has 1")
    loader = Loader("user has 2")

    result = await cache.get_or_load("user-rating-alice", loader)

    assert result.value == "user has 1"
    assert result.hit
    assert loader.calls == 0


@pytest.mark.asyncio
async def test_entry_expires_after_ttl(cache, clock):
    loader = Loader("user has 2")
    await cache.get_or_load("user-rating-alice", loader)

    clock.now = 59.9
    assert (await cache.get_or_load("user-rating-alice", loader)).hit

    clock.now = 60.0
    assert not (await cache.get_or_load("user-rating-alice", loader)).hit
    assert loader.calls == 2


@pytest.mark.asyncio
async def test_not_found_is_not_cached(cache):
    loader = Loader(None)

    assert await cache.get_or_load("user-rating-nobody", loader) is None
    assert await cache.get("user-rating-nobody") is None


@pytest.mark.asyncio
async def test_empty_value_is_cached(cache):
    loader = Loader("")
    await cache.get_or_load("/users/9", loader)

    result = await cache.get_or_load("/users/9", loader)

    assert result.hit
    assert result.value == ""


@pytest.mark.asyncio
async def test_failed_read_falls_back_to_storage():
    cache = BrokenReadCache(ttl_seconds=60)

    result = await cache.get_or_load("user-rating-alice", Loader("user has 3"))

    assert result.value == "user has 3"
    assert not result.hit


@pytest.mark.asyncio
async def test_failed_write_propagates():
    cache = BrokenWriteCache(ttl_seconds=60)

    with pytest.raises(CacheError):
        await cache.get_or_load("user-rating-alice", Loader("user has 3"))


@pytest.mark.asyncio
async def test_delete_drops_entry(cache):
    await cache.set("user-rating-alice", "user has 1")

    await cache.delete("user-rating-alice")
    await cache.delete("user-rating-alice")

    assert await cache.get("user-rating-alice") is None
