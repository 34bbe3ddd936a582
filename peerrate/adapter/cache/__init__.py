"""Read-through cache adapters."""

from .base import Cache, CachedValue, listing_key, profile_key, rating_key
from .memory_cache import InMemoryCache
from .redis_cache import RedisCache

__all__ = [
    "Cache",
    "CachedValue",
    "InMemoryCache",
    "RedisCache",
    "listing_key",
    "profile_key",
    "rating_key",
]
