"""Tests for the gateway cache responders."""

from __future__ import annotations

from datetime import datetime
from typing import Any

import pytest

from cordkit.api.events import parse_event
from cordkit.api.objects import Ban, GuildMember, Invite
from cordkit.caching import CacheService, EarlyCacheResponder, LateCacheResponder, MemoryCacheProvider
from cordkit.caching.keys import (
    ChannelKey,
    CurrentUserKey,
    EmojiKey,
    GuildBanKey,
    GuildEmojisKey,
    GuildKey,
    GuildMemberKey,
    GuildRoleKey,
    InviteKey,
    MessageKey,
    PresenceKey,
    UserKey,
)
from cordkit.foundation import ErrorCode, Snowflake

from .factories import channel, guild, member, message, role, user

S = Snowflake

USER = {"id": "1", "username": "alice"}
CHANNEL = {"id": "10", "type": 0, "guild_id": "5", "name": "general"}
MESSAGE = {"id": "100", "channel_id": "10", "author": USER, "timestamp": "2024-01-01T00:00:00+00:00"}
JOINED = "2024-01-01T00:00:00+00:00"


@pytest.fixture
def cache() -> CacheService:
    return CacheService(MemoryCacheProvider())


async def early(cache: CacheService, name: str, data: dict[str, Any]) -> None:
    assert (await EarlyCacheResponder(cache).respond(parse_event(name, data))).is_ok()


async def late(cache: CacheService, name: str, data: dict[str, Any]) -> None:
    assert (await LateCacheResponder(cache).respond(parse_event(name, data))).is_ok()


# ═════════════════════════════════════════════════════════════════════════════
# Early responder
# ═════════════════════════════════════════════════════════════════════════════


@pytest.mark.asyncio
async def test_channel_create_and_update(cache: CacheService) -> None:
    await early(cache, "CHANNEL_CREATE", CHANNEL)
    await early(cache, "CHANNEL_UPDATE", CHANNEL | {"name": "renamed"})
    assert (await cache.try_get_value(ChannelKey(S(10)))).unwrap().name == "renamed"
    assert (await cache.try_get_previous_value(ChannelKey(S(10)))).unwrap().name == "general"


@pytest.mark.asyncio
async def test_guild_create_fans_out(cache: CacheService) -> None:
    payload = {
        "id": "5", "name": "Guild",
        "channels": [{"id": "11", "type": 0, "name": "general"}],
        "roles": [{"id": "50", "name": "@everyone"}],
        "members": [{"user": USER, "roles": [], "joined_at": JOINED}],
    }
    await early(cache, "GUILD_CREATE", payload)
    assert (await cache.try_get_value(GuildKey(S(5)))).is_ok()
    assert (await cache.try_get_value(ChannelKey(S(11)))).unwrap().guild_id == 5
    assert (await cache.try_get_value(GuildRoleKey(S(5), S(50)))).is_ok()
    assert (await cache.try_get_value(GuildMemberKey(S(5), S(1)))).is_ok()


@pytest.mark.asyncio
async def test_ban_add(cache: CacheService) -> None:
    await early(cache, "GUILD_BAN_ADD", {"guild_id": "5", "user": USER})
    assert (await cache.try_get_value(GuildBanKey(S(5), S(1)))).unwrap().user.username == "alice"


@pytest.mark.asyncio
async def test_emojis_update(cache: CacheService) -> None:
    await early(cache, "GUILD_EMOJIS_UPDATE", {"guild_id": "5", "emojis": [{"id": "70", "name": "blob"}]})
    assert len((await cache.try_get_value(GuildEmojisKey(S(5)))).unwrap()) == 1
    assert (await cache.try_get_value(EmojiKey(S(5), S(70)))).is_ok()


@pytest.mark.asyncio
async def test_member_add_is_stored_as_plain_member(cache: CacheService) -> None:
    await early(cache, "GUILD_MEMBER_ADD", {"guild_id": "5", "user": USER, "roles": [], "joined_at": JOINED})
    cached = (await cache.try_get_value(GuildMemberKey(S(5), S(1)))).unwrap()
    assert type(cached) is GuildMember
    assert (await cache.try_get_value(UserKey(S(1)))).is_ok()


@pytest.mark.asyncio
async def test_members_chunk_with_presences(cache: CacheService) -> None:
    await early(cache, "GUILD_MEMBERS_CHUNK", {
        "guild_id": "5", "chunk_index": 0, "chunk_count": 1,
        "members": [{"user": USER, "roles": [], "joined_at": JOINED}],
        "presences": [{"user": {"id": "1"}, "status": "online"}],
    })
    assert (await cache.try_get_value(GuildMemberKey(S(5), S(1)))).is_ok()
    assert (await cache.try_get_value(PresenceKey(S(5), S(1)))).unwrap().status == "online"


@pytest.mark.asyncio
async def test_member_update_merges_into_cached_member(cache: CacheService) -> None:
    await cache.cache(GuildMemberKey(S(5), S(1)), member(1, nick="old", deaf=True))
    await early(cache, "GUILD_MEMBER_UPDATE", {"guild_id": "5", "user": USER, "roles": ["50"], "nick": "new"})
    cached = (await cache.try_get_value(GuildMemberKey(S(5), S(1)))).unwrap()
    assert cached.nick == "new"
    assert cached.roles == [50]
    assert cached.deaf is True
    assert cached.user.username == "alice"


@pytest.mark.asyncio
async def test_member_update_can_clear_fields(cache: CacheService) -> None:
    await cache.cache(GuildMemberKey(S(5), S(1)), member(1, nick="old"))
    await early(cache, "GUILD_MEMBER_UPDATE", {"guild_id": "5", "user": USER, "roles": [], "nick": None})
    assert (await cache.try_get_value(GuildMemberKey(S(5), S(1)))).unwrap().nick is None


@pytest.mark.asyncio
async def test_member_update_without_cached_member_needs_join_date(cache: CacheService) -> None:
    await early(cache, "GUILD_MEMBER_UPDATE", {"guild_id": "5", "user": USER, "roles": []})
    assert (await cache.try_get_value(GuildMemberKey(S(5), S(1)))).is_err()

    await early(cache, "GUILD_MEMBER_UPDATE", {
        "guild_id": "5", "user": USER, "roles": [], "joined_at": JOINED, "deaf": None, "nick": "n",
    })
    cached = (await cache.try_get_value(GuildMemberKey(S(5), S(1)))).unwrap()
    assert cached.joined_at == datetime.fromisoformat(JOINED)
    assert cached.nick == "n"
    assert cached.deaf is False


@pytest.mark.asyncio
async def test_role_create_and_update(cache: CacheService) -> None:
    await early(cache, "GUILD_ROLE_CREATE", {"guild_id": "5", "role": {"id": "50", "name": "mods"}})
    await early(cache, "GUILD_ROLE_UPDATE", {"guild_id": "5", "role": {"id": "50", "name": "admins"}})
    assert (await cache.try_get_value(GuildRoleKey(S(5), S(50)))).unwrap().name == "admins"


@pytest.mark.asyncio
async def test_message_create(cache: CacheService) -> None:
    await early(cache, "MESSAGE_CREATE", MESSAGE)
    assert (await cache.try_get_value(MessageKey(S(10), S(100)))).is_ok()
    assert (await cache.try_get_value(UserKey(S(1)))).is_ok()


@pytest.mark.asyncio
async def test_reaction_add_caches_member(cache: CacheService) -> None:
    await early(cache, "MESSAGE_REACTION_ADD", {
        "user_id": "1", "channel_id": "10", "message_id": "100", "guild_id": "5",
        "member": {"user": USER, "roles": [], "joined_at": JOINED}, "emoji": {"name": "👍"},
    })
    assert (await cache.try_get_value(GuildMemberKey(S(5), S(1)))).is_ok()


@pytest.mark.asyncio
async def test_user_update_refreshes_current_user(cache: CacheService) -> None:
    await early(cache, "USER_UPDATE", USER | {"username": "alicia"})
    assert (await cache.try_get_value(UserKey(S(1)))).unwrap().username == "alicia"
    assert (await cache.try_get_value(CurrentUserKey())).unwrap().username == "alicia"


@pytest.mark.asyncio
async def test_interaction_resolved_data(cache: CacheService) -> None:
    await early(cache, "INTERACTION_CREATE", {
        "id": "900", "application_id": "901", "type": 2, "token": "tok", "guild_id": "5",
        "data": {
            "id": "902", "name": "info", "type": 1,
            "resolved": {
                "users": {"2": {"id": "2", "username": "bob"}},
                "members": {"2": {"roles": [], "joined_at": JOINED}},
                "roles": {"50": {"id": "50", "name": "mods"}},
            },
        },
    })
    assert (await cache.try_get_value(UserKey(S(2)))).unwrap().username == "bob"
    stitched = (await cache.try_get_value(GuildMemberKey(S(5), S(2)))).unwrap()
    assert stitched.user.username == "bob"
    assert (await cache.try_get_value(GuildRoleKey(S(5), S(50)))).is_ok()


@pytest.mark.asyncio
async def test_unhandled_events_are_ignored(cache: CacheService) -> None:
    await early(cache, "MESSAGE_DELETE", {"id": "100", "channel_id": "10"})
    assert (await EarlyCacheResponder(cache).respond(object())).is_ok()


@pytest.mark.asyncio
async def test_store_failures_become_err() -> None:
    class BrokenProvider(MemoryCacheProvider):
        async def cache(self, *args: Any, **kwargs: Any) -> None:
            raise ConnectionError("redis connection lost")

    cache = CacheService(BrokenProvider())
    result = await EarlyCacheResponder(cache).respond(parse_event("CHANNEL_CREATE", CHANNEL))
    assert result.unwrap_err().code is ErrorCode.NETWORK_ERROR


# ═════════════════════════════════════════════════════════════════════════════
# Late responder
# ═════════════════════════════════════════════════════════════════════════════


@pytest.mark.parametrize(("name", "data", "key", "value"), [
    ("CHANNEL_DELETE", CHANNEL, ChannelKey(S(10)), channel()),
    ("GUILD_BAN_REMOVE", {"guild_id": "5", "user": USER}, GuildBanKey(S(5), S(1)), Ban(user=user())),
    ("GUILD_DELETE", {"id": "5"}, GuildKey(S(5)), guild()),
    ("GUILD_MEMBER_REMOVE", {"guild_id": "5", "user": USER}, GuildMemberKey(S(5), S(1)), member(1)),
    ("GUILD_ROLE_DELETE", {"guild_id": "5", "role_id": "50"}, GuildRoleKey(S(5), S(50)), role(50)),
    ("INVITE_DELETE", {"channel_id": "10", "code": "abc"}, InviteKey("abc"), Invite(code="abc")),
    ("MESSAGE_DELETE", {"id": "100", "channel_id": "10"}, MessageKey(S(10), S(100)), message()),
])
@pytest.mark.asyncio
async def test_delete_events_evict(cache: CacheService, name: str, data: dict[str, Any], key: Any, value: Any) -> None:
    await cache.cache(key, value)
    await late(cache, name, data)
    assert (await cache.try_get_value(key)).is_err()
    assert (await cache.try_get_previous_value(key)).unwrap() is value


@pytest.mark.asyncio
async def test_bulk_delete_evicts_each(cache: CacheService) -> None:
    for mid in (100, 101):
        await cache.cache(MessageKey(S(10), S(mid)), message(mid))
    await late(cache, "MESSAGE_DELETE_BULK", {"ids": ["100", "101"], "channel_id": "10"})
    assert (await cache.try_get_value(MessageKey(S(10), S(100)))).is_err()
    assert (await cache.try_get_value(MessageKey(S(10), S(101)))).is_err()


@pytest.mark.asyncio
async def test_late_responder_ignores_misses(cache: CacheService) -> None:
    await late(cache, "GUILD_DELETE", {"id": "404"})


def test_parse_event_unknown_name() -> None:
    assert parse_event("TYPING_START", {}) is None
