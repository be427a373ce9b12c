"""Tests for rate limit bucket tracking and backoff."""

from __future__ import annotations

import pytest

from cordkit.foundation import ErrorCode
from cordkit.rest import ConstantBackoff, ExponentialBackoff, RateLimitBucket, RateLimiter


def _headers(remaining: int, reset_after: float = 2.0, bucket: str = "abc", **extra: str) -> dict[str, str]:
    return {
        "X-RateLimit-Limit": "5",
        "X-RateLimit-Remaining": str(remaining),
        "X-RateLimit-Reset-After": str(reset_after),
        "X-RateLimit-Bucket": bucket,
        **extra,
    }


class FakeClock:
    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


# ─── Buckets ─────────────────────────────────────────────────────────


def test_bucket_from_headers() -> None:
    bucket = RateLimitBucket.from_headers(_headers(3, 1.5), now=100.0)
    assert bucket is not None
    assert (bucket.limit, bucket.remaining, bucket.resets_at, bucket.id) == (5, 3, 101.5, "abc")
    assert not bucket.is_global


def test_bucket_from_absolute_reset() -> None:
    headers = {"X-RateLimit-Limit": "1", "X-RateLimit-Remaining": "0", "X-RateLimit-Reset": "1700000000.5",
               "X-RateLimit-Bucket": "b"}
    bucket = RateLimitBucket.from_headers(headers)
    assert bucket is not None and bucket.resets_at == 1700000000.5


def test_bucket_missing_or_bad_headers() -> None:
    assert RateLimitBucket.from_headers({}) is None
    assert RateLimitBucket.from_headers(_headers(3) | {"X-RateLimit-Remaining": "lots"}) is None


@pytest.mark.asyncio
async def test_bucket_try_take() -> None:
    bucket = RateLimitBucket(limit=1, remaining=1, resets_at=10.0, id="x")
    assert await bucket.try_take(now=5.0)
    assert bucket.remaining == 0
    assert not await bucket.try_take(now=5.0)
    assert await bucket.try_take(now=11.0)


# ─── Limiter ─────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_unknown_endpoint_uses_global_bucket() -> None:
    limiter = RateLimiter(clock=FakeClock())
    assert limiter.bucket_for("users/@me") is limiter.global_bucket
    assert (await limiter.acquire("users/@me")).is_ok()


@pytest.mark.asyncio
async def test_exhausted_bucket_refuses_locally() -> None:
    clock = FakeClock()
    limiter = RateLimiter(clock=clock)
    limiter.update("channels/1/messages", _headers(0, reset_after=3.0))

    result = await limiter.acquire("channels/1/messages")
    error = result.unwrap_err()
    assert error.code is ErrorCode.RATE_LIMITED
    assert error.status_code == 429
    assert error.retry_after == pytest.approx(3.0)

    clock.now += 3.5
    assert (await limiter.acquire("channels/1/messages")).is_ok()


def test_older_bucket_does_not_replace_newer() -> None:
    clock = FakeClock()
    limiter = RateLimiter(clock=clock)
    limiter.update("e", _headers(4, reset_after=10.0))
    limiter.update("e", _headers(1, reset_after=2.0))
    assert limiter.bucket_for("e").remaining == 4


def test_global_bucket_update() -> None:
    clock = FakeClock()
    limiter = RateLimiter(clock=clock)
    limiter.update("e", _headers(0, reset_after=90_000.0, bucket="g", **{"X-RateLimit-Global": "true"}))
    assert limiter.global_bucket.id == "g"
    assert limiter.bucket_for("e") is limiter.global_bucket


# ─── Backoff ─────────────────────────────────────────────────────────


def test_exponential_backoff_without_jitter() -> None:
    backoff = ExponentialBackoff(base=1.0, max_delay=5.0, jitter=False)
    assert [backoff.delay(i) for i in range(4)] == [1.0, 2.0, 4.0, 5.0]


def test_exponential_backoff_jitter_bounds() -> None:
    backoff = ExponentialBackoff(base=2.0)
    assert all(1.0 <= backoff.delay(0) <= 3.0 for _ in range(20))


def test_constant_backoff() -> None:
    assert ConstantBackoff(0.25).delay(7) == 0.25
