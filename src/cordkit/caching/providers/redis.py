"""Redis cache provider (requires ``cordkit[redis]``).

Values are stored as a JSON envelope ``{"data", "sliding", "expires_at"}``;
``data`` is dumped and validated through a pydantic TypeAdapter for the key's
value type. Redis TTLs enforce expiry; sliding windows are re-armed on read.
"""

from __future__ import annotations

import logging
import math
import time
from functools import lru_cache
from typing import TYPE_CHECKING, Any, Callable, Protocol, runtime_checkable

import orjson
from pydantic import TypeAdapter, ValidationError

from cordkit.foundation import Err, ErrorCode, Ok, RestError, Result

from .base import CacheProvider

if TYPE_CHECKING:
    from ..keys import CacheKey
    from ..settings import CacheEntryOptions

logger = logging.getLogger("cordkit.caching.redis")

DEFAULT_PREFIX = "cordkit:"


@runtime_checkable
class AsyncRedisClient(Protocol):
    """Protocol for the subset of ``redis.asyncio.Redis`` in use."""
    async def get(self, name: str) -> bytes | None: ...
    async def set(self, name: str, value: bytes | str, ex: int | None = None) -> bool | None: ...
    async def expire(self, name: str, time: int) -> bool: ...
    async def delete(self, *names: str) -> int: ...
    def scan_iter(self, match: str) -> object: ...
    async def ping(self) -> bool: ...


@lru_cache(maxsize=256)
def _adapter(type_: Any) -> TypeAdapter[Any]:
    return TypeAdapter(type_)


def _ttl(seconds: float) -> int:
    return max(1, math.ceil(seconds))


class RedisCacheProvider(CacheProvider):
    """Distributed provider backed by ``redis.asyncio``.

    Args:
        client: Existing async Redis client
        prefix: Key prefix for namespacing (default: "cordkit:")
        clock: Wall clock in seconds, used for absolute deadlines

    Example:
        >>> provider = RedisCacheProvider.from_url("redis://localhost:6379/0")
        >>> await provider.ping()
        True
    """

    __slots__ = ("_client", "_prefix", "_clock")

    def __init__(
        self,
        client: AsyncRedisClient,
        prefix: str = DEFAULT_PREFIX,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._client = client
        self._prefix = prefix
        self._clock = clock

    @classmethod
    def from_url(cls, url: str, prefix: str = DEFAULT_PREFIX, **redis_kwargs: Any) -> RedisCacheProvider:
        """Create a provider from a Redis URL.

        Example:
            >>> provider = RedisCacheProvider.from_url("redis://localhost:6379/0", prefix="bot:")
        """
        try:
            import redis.asyncio as aioredis
        except ImportError as e:
            raise ImportError(
                "Redis cache requires redis package. "
                "Install with: pip install cordkit[redis]"
            ) from e
        return cls(aioredis.from_url(url, **redis_kwargs), prefix)

    def _key(self, key: CacheKey) -> str:
        return f"{self._prefix}{key.to_canonical_string()}"

    async def cache(self, key: CacheKey, instance: Any, options: CacheEntryOptions) -> None:
        if options.disabled:
            return
        absolute = options.absolute_expiration
        sliding = options.sliding_expiration
        now = self._clock()
        envelope = {
            "data": _adapter(key.value_type).dump_python(instance, mode="json"),
            "sliding": None if sliding is None else sliding.total_seconds(),
            "expires_at": None if absolute is None else now + absolute.total_seconds(),
        }
        windows = [d.total_seconds() for d in (absolute, sliding) if d is not None]
        ttl = _ttl(min(windows)) if windows else None
        await self._client.set(self._key(key), orjson.dumps(envelope), ex=ttl)

    async def retrieve(self, key: CacheKey, type_: Any = None) -> Result[Any, RestError]:
        name = self._key(key)
        raw = await self._client.get(name)
        if raw is None:
            return Err(RestError.not_found(key))
        result = self._decode(key, raw, type_)
        if result.is_ok():
            await self._refresh(name, raw)
        return result

    async def evict(self, key: CacheKey, type_: Any = None) -> Result[Any, RestError]:
        name = self._key(key)
        raw = await self._client.get(name)
        if raw is None:
            return Err(RestError.not_found(key))
        await self._client.delete(name)
        return self._decode(key, raw, type_)

    async def clear(self) -> None:
        if keys := [k async for k in self._client.scan_iter(match=f"{self._prefix}*")]:
            await self._client.delete(*keys)

    async def ping(self) -> bool:
        """Check Redis connection health."""
        return bool(await self._client.ping())

    def _decode(self, key: CacheKey, raw: bytes, type_: Any) -> Result[Any, RestError]:
        type_ = key.value_type if type_ is None else type_
        try:
            envelope = orjson.loads(raw)
            return Ok(_adapter(type_).validate_python(envelope["data"]))
        except (orjson.JSONDecodeError, KeyError, TypeError, ValidationError) as e:
            logger.warning(f"Discarding unreadable cache entry {key}: {e}")
            return Err(RestError(
                message=f"Cached value under {key} could not be read as {getattr(type_, '__name__', type_)}",
                code=ErrorCode.CACHE_ERROR,
                details=str(e),
            ))

    async def _refresh(self, name: str, raw: bytes) -> None:
        """Re-arm the sliding window, never past the absolute deadline."""
        envelope = orjson.loads(raw)
        sliding = envelope.get("sliding")
        if sliding is None:
            return
        ttl = sliding
        if (expires_at := envelope.get("expires_at")) is not None:
            ttl = min(ttl, expires_at - self._clock())
            if ttl <= 0:
                return
        await self._client.expire(name, _ttl(ttl))
