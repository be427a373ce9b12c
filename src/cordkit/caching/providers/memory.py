"""In-process cache provider with absolute and sliding expiration."""

from __future__ import annotations

import logging
import math
import threading
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, get_origin

from cordkit.foundation import Err, Ok, RestError, Result

from .base import CacheProvider

if TYPE_CHECKING:
    from ..keys import CacheKey
    from ..settings import CacheEntryOptions

logger = logging.getLogger("cordkit.caching.memory")

DEFAULT_MAX_ENTRIES = 10_000


@dataclass(slots=True)
class CacheEntry:
    """A stored value with its expiration bookkeeping (clock seconds)."""

    value: Any
    expires_at: float | None
    sliding: float | None
    last_access: float

    def deadline(self) -> float:
        """Earliest instant at which the entry stops being live."""
        candidates = [math.inf]
        if self.expires_at is not None:
            candidates.append(self.expires_at)
        if self.sliding is not None:
            candidates.append(self.last_access + self.sliding)
        return min(candidates)

    def expired(self, now: float) -> bool:
        return now >= self.deadline()


def _matches(instance: Any, type_: Any) -> bool:
    """Best-effort runtime check that a stored value fits the requested type."""
    if type_ is Any:
        return True
    origin = get_origin(type_) or type_
    return not isinstance(origin, type) or isinstance(instance, origin)


class MemoryCacheProvider(CacheProvider):
    """Thread-safe in-memory provider.

    Stores the instances themselves, so a retrieval returns the very (frozen)
    object that was cached. Collections are handed out as shallow copies so
    callers cannot reorder or extend the cached list. When ``max_entries`` is
    reached, expired entries are dropped first, then the quarter closest to
    expiring.

    Args:
        max_entries: Capacity before eviction
        clock: Monotonic time source in seconds, injectable for tests

    Example:
        >>> provider = MemoryCacheProvider()
        >>> await provider.cache(UserKey(user.id), user, CacheEntryOptions(timedelta(seconds=30)))
        >>> (await provider.retrieve(UserKey(user.id))).unwrap() is user
        True
    """

    __slots__ = ("_entries", "_max_entries", "_clock", "_lock")

    def __init__(self, max_entries: int = DEFAULT_MAX_ENTRIES, clock: Callable[[], float] = time.monotonic) -> None:
        self._entries: dict[CacheKey, CacheEntry] = {}
        self._max_entries = max_entries
        self._clock = clock
        self._lock = threading.RLock()

    async def cache(self, key: CacheKey, instance: Any, options: CacheEntryOptions) -> None:
        if options.disabled:
            return
        now = self._clock()
        absolute = options.absolute_expiration
        sliding = options.sliding_expiration
        entry = CacheEntry(
            value=instance,
            expires_at=None if absolute is None else now + absolute.total_seconds(),
            sliding=None if sliding is None else sliding.total_seconds(),
            last_access=now,
        )
        with self._lock:
            if key not in self._entries and len(self._entries) >= self._max_entries:
                self._evict_unlocked(now)
            self._entries[key] = entry

    async def retrieve(self, key: CacheKey, type_: Any = None) -> Result[Any, RestError]:
        type_ = key.value_type if type_ is None else type_
        now = self._clock()
        with self._lock:
            entry = self._live_unlocked(key, now)
            if entry is None or not _matches(entry.value, type_):
                return Err(RestError.not_found(key))
            entry.last_access = now
            value = entry.value
        return Ok(list(value) if isinstance(value, list) else value)

    async def evict(self, key: CacheKey, type_: Any = None) -> Result[Any, RestError]:
        type_ = key.value_type if type_ is None else type_
        with self._lock:
            entry = self._live_unlocked(key, self._clock())
            if entry is None or not _matches(entry.value, type_):
                return Err(RestError.not_found(key))
            del self._entries[key]
            return Ok(entry.value)

    async def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    @property
    def size(self) -> int:
        with self._lock:
            return len(self._entries)

    def _live_unlocked(self, key: CacheKey, now: float) -> CacheEntry | None:
        entry = self._entries.get(key)
        if entry is not None and entry.expired(now):
            del self._entries[key]
            return None
        return entry

    def _evict_unlocked(self, now: float) -> None:
        """Remove expired entries, then those closest to expiring. Caller must hold lock."""
        for key in [k for k, v in self._entries.items() if v.expired(now)]:
            del self._entries[key]
        if len(self._entries) >= self._max_entries:
            ordered = sorted(self._entries, key=lambda k: self._entries[k].deadline())
            victims = ordered[: max(1, self._max_entries // 4)]
            logger.debug(f"Memory cache full; dropping {len(victims)} entries")
            for key in victims:
                del self._entries[key]
