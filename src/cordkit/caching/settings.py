"""Expiration policy for cached values, resolved per stored type."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import TYPE_CHECKING, Any, Self

if TYPE_CHECKING:
    from cordkit.foundation.config import CacheSettings as CacheConfig

DEFAULT_ABSOLUTE_EXPIRATION = timedelta(seconds=30)
DEFAULT_SLIDING_EXPIRATION = timedelta(seconds=10)


@dataclass(frozen=True, slots=True)
class CacheEntryOptions:
    """Expirations applied to one stored entry. ``None`` means no limit."""

    absolute_expiration: timedelta | None = None
    sliding_expiration: timedelta | None = None

    @property
    def disabled(self) -> bool:
        """A zero (or negative) absolute expiration means the entry is not stored at all."""
        return self.absolute_expiration is not None and self.absolute_expiration <= timedelta(0)


class CacheSettings:
    """Default and per-type expirations for live and evicted entries.

    Types are the ``value_type`` of cache keys, e.g. ``Channel`` or
    ``list[Role]``. Setters return ``self`` for chaining.

    Example:
        >>> settings = (
        ...     CacheSettings()
        ...     .set_absolute_expiration(Message, timedelta(minutes=5))
        ...     .set_absolute_expiration(Presence, timedelta(0))  # never cache presences
        ... )
        >>> settings.get_entry_options(Message).absolute_expiration
        datetime.timedelta(seconds=300)
    """

    __slots__ = (
        "_default_absolute", "_default_sliding", "_eviction_absolute", "_eviction_sliding",
        "_absolute", "_sliding", "_evicted_absolute", "_evicted_sliding",
    )

    def __init__(
        self,
        default_absolute_expiration: timedelta | None = DEFAULT_ABSOLUTE_EXPIRATION,
        default_sliding_expiration: timedelta | None = DEFAULT_SLIDING_EXPIRATION,
        *,
        eviction_absolute_expiration: timedelta | None = DEFAULT_ABSOLUTE_EXPIRATION,
        eviction_sliding_expiration: timedelta | None = DEFAULT_SLIDING_EXPIRATION,
    ) -> None:
        self._default_absolute = default_absolute_expiration
        self._default_sliding = default_sliding_expiration
        self._eviction_absolute = eviction_absolute_expiration
        self._eviction_sliding = eviction_sliding_expiration
        self._absolute: dict[Any, timedelta | None] = {}
        self._sliding: dict[Any, timedelta | None] = {}
        self._evicted_absolute: dict[Any, timedelta | None] = {}
        self._evicted_sliding: dict[Any, timedelta | None] = {}

    @classmethod
    def from_config(cls, config: CacheConfig) -> CacheSettings:
        """Build from the environment-driven ``CORDKIT_CACHE_*`` configuration."""
        def seconds(value: float | None) -> timedelta | None:
            return None if value is None else timedelta(seconds=value)

        absolute = config.absolute_expiration if config.enabled else 0.0
        return cls(
            seconds(absolute),
            seconds(config.sliding_expiration),
            eviction_absolute_expiration=seconds(config.eviction_absolute_expiration),
            eviction_sliding_expiration=seconds(config.eviction_sliding_expiration),
        )

    # ─── Live entries ─────────────────────────────────────────────────

    def set_default_absolute_expiration(self, expiration: timedelta | None) -> Self:
        self._default_absolute = expiration
        return self

    def set_default_sliding_expiration(self, expiration: timedelta | None) -> Self:
        self._default_sliding = expiration
        return self

    def set_absolute_expiration(self, type_: Any, expiration: timedelta | None) -> Self:
        """Override the absolute expiration for ``type_``; ``timedelta(0)`` disables caching it."""
        self._absolute[type_] = expiration
        return self

    def set_sliding_expiration(self, type_: Any, expiration: timedelta | None) -> Self:
        self._sliding[type_] = expiration
        return self

    def get_absolute_expiration(self, type_: Any) -> timedelta | None:
        return self._absolute.get(type_, self._default_absolute)

    def get_sliding_expiration(self, type_: Any) -> timedelta | None:
        return self._sliding.get(type_, self._default_sliding)

    def get_entry_options(self, type_: Any) -> CacheEntryOptions:
        return CacheEntryOptions(self.get_absolute_expiration(type_), self.get_sliding_expiration(type_))

    # ─── Evicted entries ──────────────────────────────────────────────

    def set_default_eviction_absolute_expiration(self, expiration: timedelta | None) -> Self:
        self._eviction_absolute = expiration
        return self

    def set_default_eviction_sliding_expiration(self, expiration: timedelta | None) -> Self:
        self._eviction_sliding = expiration
        return self

    def set_eviction_absolute_expiration(self, type_: Any, expiration: timedelta | None) -> Self:
        self._evicted_absolute[type_] = expiration
        return self

    def set_eviction_sliding_expiration(self, type_: Any, expiration: timedelta | None) -> Self:
        self._evicted_sliding[type_] = expiration
        return self

    def get_eviction_absolute_expiration(self, type_: Any) -> timedelta | None:
        return self._evicted_absolute.get(type_, self._eviction_absolute)

    def get_eviction_sliding_expiration(self, type_: Any) -> timedelta | None:
        return self._evicted_sliding.get(type_, self._eviction_sliding)

    def get_eviction_options(self, type_: Any) -> CacheEntryOptions:
        return CacheEntryOptions(
            self.get_eviction_absolute_expiration(type_), self.get_eviction_sliding_expiration(type_),
        )
