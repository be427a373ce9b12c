"""Storage backend contract for the cache service."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from cordkit.foundation import RestError, Result

    from ..keys import CacheKey
    from ..settings import CacheEntryOptions


class CacheProvider(ABC):
    """Abstract key-value store for cached Discord entities.

    ``type_`` defaults to the key's ``value_type``. Misses are reported as a
    NOT_FOUND error rather than ``None`` so cached nulls stay distinguishable.
    """

    @abstractmethod
    async def cache(self, key: CacheKey, instance: Any, options: CacheEntryOptions) -> None:
        """Store ``instance`` under ``key``, replacing any existing value."""
        ...

    @abstractmethod
    async def retrieve(self, key: CacheKey, type_: Any = None) -> Result[Any, RestError]:
        """Get the live value under ``key``."""
        ...

    @abstractmethod
    async def evict(self, key: CacheKey, type_: Any = None) -> Result[Any, RestError]:
        """Remove the value under ``key`` and return it."""
        ...

    @abstractmethod
    async def clear(self) -> None:
        """Drop every entry owned by this provider."""
        ...
