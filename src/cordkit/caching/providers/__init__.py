"""Cache storage backends.

Backends:
    - MemoryCacheProvider: thread-safe in-process store (default)
    - RedisCacheProvider: redis.asyncio store (requires cordkit[redis])
"""

from .base import CacheProvider
from .memory import CacheEntry, MemoryCacheProvider

__all__ = ["CacheProvider", "CacheEntry", "MemoryCacheProvider", "RedisCacheProvider"]


def __getattr__(name: str) -> object:
    """Lazy import the Redis backend to avoid an import-time dependency."""
    if name == "RedisCacheProvider":
        from .redis import RedisCacheProvider
        return RedisCacheProvider
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
