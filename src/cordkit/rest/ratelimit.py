"""Client-side tracking of Discord rate limit buckets.

Each response carries ``X-RateLimit-*`` headers describing the bucket the
route belongs to. The limiter remembers the most recent bucket per endpoint
and refuses requests locally once a bucket is exhausted, instead of letting
Discord answer with a 429 (which counts toward the invalid request limit).
"""

from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass, field
from typing import Callable, Mapping

from cordkit.foundation import Err, ErrorCode, Ok, RestError, Result

logger = logging.getLogger("cordkit.rest.ratelimit")

GLOBAL_LIMIT = 10_000


@dataclass(slots=True)
class RateLimitBucket:
    """Snapshot of one rate limit bucket.

    Attributes:
        limit: Requests allowed per window
        remaining: Requests left in the current window
        resets_at: Unix time (seconds) at which the window resets
        id: Bucket hash reported by Discord
        is_global: Whether this is the global limit
    """

    limit: int
    remaining: int
    resets_at: float
    id: str
    is_global: bool = False
    _lock: asyncio.Lock = field(default_factory=asyncio.Lock, repr=False, compare=False)

    @classmethod
    def from_headers(cls, headers: Mapping[str, str], *, now: float | None = None) -> RateLimitBucket | None:
        """Parse the bucket from response headers; None when any header is missing or malformed."""
        try:
            limit = int(headers["X-RateLimit-Limit"])
            remaining = int(headers["X-RateLimit-Remaining"])
            bucket_id = headers["X-RateLimit-Bucket"]
            if "X-RateLimit-Reset-After" in headers:
                resets_at = (time.time() if now is None else now) + float(headers["X-RateLimit-Reset-After"])
            else:
                resets_at = float(headers["X-RateLimit-Reset"])
        except (KeyError, ValueError):
            return None
        is_global = "X-RateLimit-Global" in headers
        return cls(limit=limit, remaining=remaining, resets_at=resets_at, id=bucket_id, is_global=is_global)

    async def try_take(self, now: float | None = None) -> bool:
        """Consume one request; an exhausted bucket only allows once its reset has passed."""
        async with self._lock:
            if self.remaining <= 0:
                return self.resets_at < (time.time() if now is None else now)
            self.remaining -= 1
            return True


class RateLimiter:
    """Per-endpoint buckets with a global fallback bucket.

    Args:
        clock: Returns the current Unix time; injectable for tests
    """

    __slots__ = ("_buckets", "_global", "_clock")

    def __init__(self, clock: Callable[[], float] = time.time) -> None:
        self._clock = clock
        self._buckets: dict[str, RateLimitBucket] = {}
        self._global = RateLimitBucket(
            limit=GLOBAL_LIMIT,
            remaining=GLOBAL_LIMIT,
            resets_at=clock() + 86_400,
            id="global",
            is_global=True,
        )

    @property
    def global_bucket(self) -> RateLimitBucket:
        return self._global

    def bucket_for(self, endpoint: str) -> RateLimitBucket:
        return self._buckets.get(endpoint, self._global)

    async def acquire(self, endpoint: str) -> Result[None, RestError]:
        """Take a slot for ``endpoint`` or fail with a synthetic 429 carrying the wait time."""
        bucket = self.bucket_for(endpoint)
        now = self._clock()
        if await bucket.try_take(now):
            return Ok(None)
        retry_after = max(bucket.resets_at - now, 0.0)
        logger.warning(f"Rate limit bucket {bucket.id} exhausted for {endpoint}; retry in {retry_after:.2f}s")
        return Err(RestError(
            message=f"Rate limited locally on bucket {bucket.id}",
            code=ErrorCode.RATE_LIMITED,
            status_code=429,
            retry_after=retry_after,
        ))

    def update(self, endpoint: str, headers: Mapping[str, str]) -> None:
        """Record the bucket from a response; newer reset times win."""
        bucket = RateLimitBucket.from_headers(headers, now=self._clock())
        if bucket is None:
            return
        if bucket.is_global:
            if self._global.resets_at < bucket.resets_at:
                self._global = bucket
            return
        current = self._buckets.get(endpoint)
        if current is None or current.resets_at <= bucket.resets_at:
            self._buckets[endpoint] = bucket
