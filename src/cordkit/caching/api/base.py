"""Shared plumbing for the caching REST wrappers."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Awaitable, Callable, Generic, Iterable, TypeVar

from cordkit.foundation import RestError, Result

if TYPE_CHECKING:
    from ..keys import CacheKey
    from ..service import CacheService

A = TypeVar("A")
T = TypeVar("T")

KeyFor = Callable[[Any], "CacheKey | Iterable[CacheKey] | None"]


class CachingAPI(Generic[A]):
    """Decorates one REST endpoint group with a cache.

    Overridden methods read through, write through or evict; every other
    attribute is looked up on the wrapped API unchanged. Failed results
    never touch the cache.
    """

    __slots__ = ("_inner", "_cache")

    def __init__(self, inner: A, cache: CacheService) -> None:
        self._inner = inner
        self._cache = cache

    @property
    def inner(self) -> A:
        return self._inner

    @property
    def cache(self) -> CacheService:
        return self._cache

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        return getattr(self._inner, name)

    async def _read_through(
        self,
        key: CacheKey,
        fetch: Callable[[], Awaitable[Result[T, RestError]]],
        also: KeyFor | None = None,
    ) -> Result[T, RestError]:
        """Serve ``key`` from the cache, or fetch and store it on a miss.

        ``also`` derives further keys the fetched value is stored under;
        it is not consulted on a hit.
        """
        cached = await self._cache.try_get_value(key)
        if cached.is_ok():
            return cached
        result = await fetch()
        if result.is_ok() and result.unwrap() is not None:
            await self._cache.cache(key, result.unwrap())
            if also is not None:
                await self._store(result, also)
        return result

    async def _read_through_collection(
        self,
        key: CacheKey,
        fetch: Callable[[], Awaitable[Result[list[T], RestError]]],
        key_for: Callable[[T], CacheKey | None],
    ) -> Result[list[T], RestError]:
        """Like ``_read_through``, also storing each element under ``key_for(element)``."""
        cached = await self._cache.try_get_value(key)
        if cached.is_ok():
            return cached
        result = await fetch()
        if result.is_ok():
            await self._cache.cache_collection(key, result.unwrap(), key_for)
        return result

    async def _store(self, result: Result[T, RestError], key_for: KeyFor) -> Result[T, RestError]:
        """Write a successful, non-null result under every key ``key_for`` derives from it."""
        if result.is_err() or (value := result.unwrap()) is None:
            return result
        keys = key_for(value)
        if keys is None:
            return result
        for key in (keys,) if not isinstance(keys, Iterable) else keys:
            if key is not None:
                await self._cache.cache(key, value)
        return result

    async def _store_each(self, result: Result[list[T], RestError], key_for: Callable[[T], CacheKey | None]) -> Result[list[T], RestError]:
        """Write each element of a successful list result under its own key."""
        if result.is_ok():
            for item in result.unwrap():
                if (key := key_for(item)) is not None:
                    await self._cache.cache(key, item)
        return result

    async def _evict(self, result: Result[T, RestError], *keys: CacheKey) -> Result[T, RestError]:
        """Evict ``keys`` once the mutating call succeeded."""
        if result.is_ok():
            for key in keys:
                await self._cache.evict(key)
        return result
