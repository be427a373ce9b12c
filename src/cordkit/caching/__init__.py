"""Transparent caching for the Discord REST API.

Reads go through the cache, writes update it and deletions evict from it.
Gateway responders keep it current from dispatch events.

Example:
    >>> from cordkit.rest import RestClient
    >>> from cordkit.caching import with_caching
    >>> async with with_caching(RestClient.from_settings()) as rest:
    ...     guild = (await rest.guilds.get_guild(guild_id)).unwrap()
"""

from .client import CachingRestClient, build_cache_service, build_provider, with_caching
from .keys import CacheKey, EvictedKey, LocalizedStringKey, StringKey, evicted
from .providers import CacheProvider, MemoryCacheProvider
from .responders import CacheResponder, EarlyCacheResponder, LateCacheResponder
from .service import CacheService
from .settings import CacheEntryOptions, CacheSettings

__all__ = [
    "CacheService", "CacheSettings", "CacheEntryOptions",
    "CacheProvider", "MemoryCacheProvider", "RedisCacheProvider",
    "CacheKey", "StringKey", "LocalizedStringKey", "EvictedKey", "evicted",
    "CacheResponder", "EarlyCacheResponder", "LateCacheResponder",
    "CachingRestClient", "with_caching", "build_cache_service", "build_provider",
]


def __getattr__(name: str) -> object:
    """Lazy import the Redis backend to avoid an import-time dependency."""
    if name == "RedisCacheProvider":
        from .providers.redis import RedisCacheProvider
        return RedisCacheProvider
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
