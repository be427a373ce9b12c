"""Delays between retries of 5xx responses and dropped connections."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@runtime_checkable
class Backoff(Protocol):
    def delay(self, attempt: int) -> float:
        """Seconds to wait before retry number ``attempt`` (first retry is 0)."""
        ...


@dataclass(frozen=True, slots=True)
class ExponentialBackoff:
    """Doubling delays capped at ``max_delay``.

    With ``jitter`` each delay is scaled by a random factor in [0.5, 1.5) so
    that clients which failed together do not retry in lockstep.

    Example:
        >>> ExponentialBackoff(base=0.5, max_delay=4.0, jitter=False).delay(3)
        4.0
    """

    base: float = 1.0
    max_delay: float = 30.0
    factor: float = 2.0
    jitter: bool = True

    def delay(self, attempt: int) -> float:
        capped = min(self.max_delay, self.base * self.factor ** attempt)
        if not self.jitter:
            return capped
        return capped * random.uniform(0.5, 1.5)


@dataclass(frozen=True, slots=True)
class ConstantBackoff:
    seconds: float = 1.0

    def delay(self, attempt: int) -> float:
        return self.seconds
