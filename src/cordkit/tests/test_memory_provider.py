"""Tests for the in-memory cache provider."""

from __future__ import annotations

from datetime import timedelta

import pytest

from cordkit.api.objects import Channel, User
from cordkit.caching import CacheEntryOptions, MemoryCacheProvider, StringKey
from cordkit.caching.keys import ChannelKey, UserKey
from cordkit.foundation import ErrorCode, Snowflake

from .factories import channel, user


class FakeClock:
    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


def opts(absolute: float | None = 30, sliding: float | None = None) -> CacheEntryOptions:
    return CacheEntryOptions(
        None if absolute is None else timedelta(seconds=absolute),
        None if sliding is None else timedelta(seconds=sliding),
    )


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def provider(clock: FakeClock) -> MemoryCacheProvider:
    return MemoryCacheProvider(clock=clock)


# ─── Basic operations ────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_retrieve_returns_same_instance(provider: MemoryCacheProvider) -> None:
    alice = user()
    await provider.cache(UserKey(alice.id), alice, opts())
    assert (await provider.retrieve(UserKey(Snowflake(1)))).unwrap() is alice


@pytest.mark.asyncio
async def test_miss_is_not_found(provider: MemoryCacheProvider) -> None:
    result = await provider.retrieve(UserKey(Snowflake(404)))
    assert result.unwrap_err().code is ErrorCode.NOT_FOUND
    assert "User:404" in result.unwrap_err().message


@pytest.mark.asyncio
async def test_type_mismatch_is_not_found(provider: MemoryCacheProvider) -> None:
    await provider.cache(StringKey("x"), user(), opts())
    assert (await provider.retrieve(StringKey("x"), User)).is_ok()
    assert (await provider.retrieve(StringKey("x"), Channel)).is_err()
    assert (await provider.evict(StringKey("x"), Channel)).is_err()
    assert provider.size == 1


@pytest.mark.asyncio
async def test_list_values_check_origin(provider: MemoryCacheProvider) -> None:
    await provider.cache(StringKey("users"), [user()], opts())
    assert (await provider.retrieve(StringKey("users"), list[User])).unwrap() == [user()]
    assert (await provider.retrieve(StringKey("users"), User)).is_err()


@pytest.mark.asyncio
async def test_retrieved_list_is_a_copy(provider: MemoryCacheProvider) -> None:
    await provider.cache(StringKey("users"), [user(1), user(2, "bob")], opts())
    listed = (await provider.retrieve(StringKey("users"), list[User])).unwrap()
    listed.append(user(3, "carol"))
    listed.reverse()
    assert [u.id for u in (await provider.retrieve(StringKey("users"), list[User])).unwrap()] == [1, 2]


@pytest.mark.asyncio
async def test_evict_returns_removed_value(provider: MemoryCacheProvider) -> None:
    general = channel()
    await provider.cache(ChannelKey(general.id), general, opts())
    assert (await provider.evict(ChannelKey(general.id))).unwrap() is general
    assert (await provider.retrieve(ChannelKey(general.id))).is_err()
    assert (await provider.evict(ChannelKey(general.id))).is_err()


@pytest.mark.asyncio
async def test_disabled_options_store_nothing(provider: MemoryCacheProvider) -> None:
    await provider.cache(StringKey("x"), 1, opts(absolute=0))
    assert provider.size == 0


@pytest.mark.asyncio
async def test_clear(provider: MemoryCacheProvider) -> None:
    await provider.cache(StringKey("a"), 1, opts())
    await provider.cache(StringKey("b"), 2, opts())
    await provider.clear()
    assert provider.size == 0


# ─── Expiration ──────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_absolute_expiration(provider: MemoryCacheProvider, clock: FakeClock) -> None:
    await provider.cache(StringKey("x"), 1, opts(absolute=30))
    clock.now = 29.9
    assert (await provider.retrieve(StringKey("x"))).is_ok()
    clock.now = 30.0
    assert (await provider.retrieve(StringKey("x"))).is_err()
    assert provider.size == 0


@pytest.mark.asyncio
async def test_sliding_expiration_extends_on_read(provider: MemoryCacheProvider, clock: FakeClock) -> None:
    await provider.cache(StringKey("x"), 1, opts(absolute=30, sliding=10))
    for now in (8.0, 16.0, 24.0):
        clock.now = now
        assert (await provider.retrieve(StringKey("x"))).is_ok()
    clock.now = 30.0
    assert (await provider.retrieve(StringKey("x"))).is_err()


@pytest.mark.asyncio
async def test_sliding_expiration_lapses_without_reads(provider: MemoryCacheProvider, clock: FakeClock) -> None:
    await provider.cache(StringKey("x"), 1, opts(absolute=None, sliding=10))
    clock.now = 10.0
    assert (await provider.retrieve(StringKey("x"))).is_err()


@pytest.mark.asyncio
async def test_no_expiration(provider: MemoryCacheProvider, clock: FakeClock) -> None:
    await provider.cache(StringKey("x"), 1, opts(absolute=None))
    clock.now = 1e9
    assert (await provider.retrieve(StringKey("x"))).unwrap() == 1


# ─── Capacity ────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_capacity_drops_expired_first(clock: FakeClock) -> None:
    provider = MemoryCacheProvider(max_entries=4, clock=clock)
    await provider.cache(StringKey("short"), 0, opts(absolute=1))
    for i in range(3):
        await provider.cache(StringKey(f"k{i}"), i, opts(absolute=100))
    clock.now = 5.0
    await provider.cache(StringKey("new"), 9, opts(absolute=100))
    assert provider.size == 4
    assert (await provider.retrieve(StringKey("k0"))).is_ok()
    assert (await provider.retrieve(StringKey("short"))).is_err()


@pytest.mark.asyncio
async def test_capacity_drops_nearest_deadline(clock: FakeClock) -> None:
    provider = MemoryCacheProvider(max_entries=4, clock=clock)
    for i, ttl in enumerate((50, 10, 40, 30)):
        await provider.cache(StringKey(f"k{i}"), i, opts(absolute=ttl))
    await provider.cache(StringKey("new"), 9, opts(absolute=100))
    assert provider.size == 4
    assert (await provider.retrieve(StringKey("k1"))).is_err()
    assert (await provider.retrieve(StringKey("new"))).is_ok()


@pytest.mark.asyncio
async def test_overwrite_at_capacity_keeps_others(clock: FakeClock) -> None:
    provider = MemoryCacheProvider(max_entries=2, clock=clock)
    await provider.cache(StringKey("a"), 1, opts())
    await provider.cache(StringKey("b"), 2, opts())
    await provider.cache(StringKey("a"), 3, opts())
    assert provider.size == 2
    assert (await provider.retrieve(StringKey("a"))).unwrap() == 3
