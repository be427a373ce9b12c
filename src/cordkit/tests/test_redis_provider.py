"""Tests for the Redis cache provider against an in-memory fake client."""

from __future__ import annotations

import fnmatch
from datetime import timedelta
from typing import AsyncIterator

import orjson
import pytest

from cordkit.api.objects import Message, Role, User
from cordkit.caching import CacheEntryOptions, StringKey
from cordkit.caching.keys import GuildRolesKey, MessageKey, UserKey
from cordkit.caching.providers.redis import AsyncRedisClient, RedisCacheProvider
from cordkit.foundation import ErrorCode, Snowflake

from .factories import message, role, user


class MockAsyncRedisClient:
    """In-memory stand-in for ``redis.asyncio.Redis`` recording TTLs."""

    def __init__(self) -> None:
        self.data: dict[str, bytes] = {}
        self.ttls: dict[str, int | None] = {}

    async def get(self, name: str) -> bytes | None:
        return self.data.get(name)

    async def set(self, name: str, value: bytes | str, ex: int | None = None) -> bool:
        self.data[name] = value if isinstance(value, bytes) else value.encode()
        self.ttls[name] = ex
        return True

    async def expire(self, name: str, time: int) -> bool:
        if name not in self.data:
            return False
        self.ttls[name] = time
        return True

    async def delete(self, *names: str) -> int:
        removed = [n for n in names if self.data.pop(n, None) is not None]
        return len(removed)

    async def scan_iter(self, match: str) -> AsyncIterator[str]:
        for name in list(self.data):
            if fnmatch.fnmatch(name, match):
                yield name

    async def ping(self) -> bool:
        return True


class FakeClock:
    def __init__(self) -> None:
        self.now = 1_000.0

    def __call__(self) -> float:
        return self.now


def opts(absolute: float | None = 30, sliding: float | None = 10) -> CacheEntryOptions:
    return CacheEntryOptions(
        None if absolute is None else timedelta(seconds=absolute),
        None if sliding is None else timedelta(seconds=sliding),
    )


@pytest.fixture
def redis() -> MockAsyncRedisClient:
    return MockAsyncRedisClient()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def provider(redis: MockAsyncRedisClient, clock: FakeClock) -> RedisCacheProvider:
    return RedisCacheProvider(redis, prefix="test:", clock=clock)


def test_mock_satisfies_protocol(redis: MockAsyncRedisClient) -> None:
    assert isinstance(redis, AsyncRedisClient)


@pytest.mark.asyncio
async def test_round_trip_rebuilds_models(provider: RedisCacheProvider, redis: MockAsyncRedisClient) -> None:
    original = message(author=user(7, "bob"))
    key = MessageKey(original.channel_id, original.id)
    await provider.cache(key, original, opts())

    envelope = orjson.loads(redis.data["test:Channel:10:Message:100"])
    assert envelope["data"]["id"] == "100"
    assert envelope["sliding"] == 10
    assert envelope["expires_at"] == 1_030.0

    restored = (await provider.retrieve(key)).unwrap()
    assert isinstance(restored, Message)
    assert restored == original


@pytest.mark.asyncio
async def test_lists_round_trip(provider: RedisCacheProvider) -> None:
    roles = [role(1, "a"), role(2, "b")]
    await provider.cache(GuildRolesKey(Snowflake(5)), roles, opts())
    assert (await provider.retrieve(GuildRolesKey(Snowflake(5)))).unwrap() == roles


@pytest.mark.asyncio
async def test_ttl_is_shorter_window(provider: RedisCacheProvider, redis: MockAsyncRedisClient) -> None:
    await provider.cache(StringKey("a"), 1, opts(absolute=30, sliding=10))
    await provider.cache(StringKey("b"), 1, opts(absolute=5, sliding=10))
    await provider.cache(StringKey("c"), 1, opts(absolute=None, sliding=None))
    await provider.cache(StringKey("d"), 1, opts(absolute=0.2, sliding=None))
    assert redis.ttls == {"test:a": 10, "test:b": 5, "test:c": None, "test:d": 1}


@pytest.mark.asyncio
async def test_disabled_options_store_nothing(provider: RedisCacheProvider, redis: MockAsyncRedisClient) -> None:
    await provider.cache(StringKey("a"), 1, opts(absolute=0))
    assert redis.data == {}


@pytest.mark.asyncio
async def test_read_rearms_sliding_window(provider: RedisCacheProvider, redis: MockAsyncRedisClient, clock: FakeClock) -> None:
    await provider.cache(UserKey(Snowflake(1)), user(), opts(absolute=30, sliding=10))
    redis.ttls["test:User:1"] = 3
    clock.now += 5
    assert (await provider.retrieve(UserKey(Snowflake(1)))).is_ok()
    assert redis.ttls["test:User:1"] == 10


@pytest.mark.asyncio
async def test_refresh_never_passes_absolute_deadline(
    provider: RedisCacheProvider, redis: MockAsyncRedisClient, clock: FakeClock,
) -> None:
    await provider.cache(UserKey(Snowflake(1)), user(), opts(absolute=30, sliding=10))
    clock.now += 26
    await provider.retrieve(UserKey(Snowflake(1)))
    assert redis.ttls["test:User:1"] == 4


@pytest.mark.asyncio
async def test_miss_and_evict(provider: RedisCacheProvider, redis: MockAsyncRedisClient) -> None:
    assert (await provider.retrieve(UserKey(Snowflake(1)))).unwrap_err().code is ErrorCode.NOT_FOUND
    await provider.cache(UserKey(Snowflake(1)), user(), opts())
    evicted = await provider.evict(UserKey(Snowflake(1)))
    assert evicted.unwrap() == user()
    assert redis.data == {}
    assert (await provider.evict(UserKey(Snowflake(1)))).is_err()


@pytest.mark.asyncio
async def test_unreadable_entry_is_cache_error(provider: RedisCacheProvider, redis: MockAsyncRedisClient) -> None:
    redis.data["test:User:1"] = b"not json"
    assert (await provider.retrieve(UserKey(Snowflake(1)))).unwrap_err().code is ErrorCode.CACHE_ERROR

    redis.data["test:User:1"] = orjson.dumps({"data": {"id": "x"}, "sliding": None, "expires_at": None})
    assert (await provider.retrieve(UserKey(Snowflake(1)))).unwrap_err().code is ErrorCode.CACHE_ERROR


@pytest.mark.asyncio
async def test_requested_type_overrides_key_type(provider: RedisCacheProvider) -> None:
    await provider.cache(StringKey("me"), user().model_dump(mode="json"), opts())
    assert (await provider.retrieve(StringKey("me"), User)).unwrap() == user()


@pytest.mark.asyncio
async def test_clear_only_touches_prefix(provider: RedisCacheProvider, redis: MockAsyncRedisClient) -> None:
    redis.data["other:key"] = b"1"
    await provider.cache(StringKey("a"), 1, opts())
    await provider.cache(StringKey("b"), 2, opts())
    await provider.clear()
    assert list(redis.data) == ["other:key"]


@pytest.mark.asyncio
async def test_ping(provider: RedisCacheProvider) -> None:
    assert await provider.ping()
