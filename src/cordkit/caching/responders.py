"""Gateway event responders that keep the cache in step with Discord.

The early responder runs before user handlers and stores the entities an
event carries; the late responder runs after them and evicts what the event
deleted, so handlers can still read the doomed value.

Example:
    >>> early, late = EarlyCacheResponder(service), LateCacheResponder(service)
    >>> event = parse_event(payload["t"], payload["d"])
    >>> await early.respond(event)
    >>> await dispatch_to_handlers(event)
    >>> await late.respond(event)
"""

from __future__ import annotations

import logging
from typing import Any

from cordkit.api.events import (
    ChannelCreate,
    ChannelDelete,
    ChannelUpdate,
    GuildBanAdd,
    GuildBanRemove,
    GuildCreate,
    GuildDelete,
    GuildEmojisUpdate,
    GuildMemberAdd,
    GuildMemberRemove,
    GuildMembersChunk,
    GuildMemberUpdate,
    GuildRoleCreate,
    GuildRoleDelete,
    GuildRoleUpdate,
    InteractionCreate,
    InviteDelete,
    MessageCreate,
    MessageDelete,
    MessageDeleteBulk,
    MessageReactionAdd,
    UserUpdate,
)
from cordkit.api.objects import Ban, GuildMember
from cordkit.foundation import Err, Ok, RestError, Result

from .keys import (
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
from .service import CacheService

logger = logging.getLogger("cordkit.caching.responders")

# Fields of a member update that replace the cached member's values when present
_MEMBER_UPDATE_FIELDS = frozenset({
    "nick", "avatar", "joined_at", "premium_since", "deaf", "mute", "pending",
    "communication_disabled_until", "flags",
})


class CacheResponder:
    """Base for responders: ``respond`` never raises, store failures come back as Err."""

    __slots__ = ("_cache",)

    def __init__(self, cache: CacheService) -> None:
        self._cache = cache

    async def respond(self, event: Any) -> Result[None, RestError]:
        try:
            await self._handle(event)
        except Exception as e:
            logger.warning(f"Cache update for {type(event).__name__} failed: {e}")
            return Err(RestError.from_exception(e, f"Handling {type(event).__name__}"))
        return Ok(None)

    async def _handle(self, event: Any) -> None:
        raise NotImplementedError


class EarlyCacheResponder(CacheResponder):
    """Stores entities delivered by gateway events."""

    __slots__ = ()

    async def _handle(self, event: Any) -> None:
        cache = self._cache
        match event:
            case ChannelCreate() | ChannelUpdate():
                await cache.cache(ChannelKey(event.id), event)
            case GuildCreate():
                await cache.cache(GuildKey(event.id), event)
            case GuildBanAdd():
                await cache.cache(GuildBanKey(event.guild_id, event.user.id), Ban(user=event.user))
            case GuildEmojisUpdate():
                await cache.cache_collection(
                    GuildEmojisKey(event.guild_id),
                    event.emojis,
                    lambda e: EmojiKey(event.guild_id, e.id) if e.id is not None else None,
                )
            case GuildMemberAdd():
                if event.user is not None:
                    member = GuildMember.model_validate(event.model_dump(exclude={"guild_id"}))
                    await cache.cache(GuildMemberKey(event.guild_id, event.user.id), member)
            case GuildMembersChunk():
                for member in event.members:
                    if member.user is not None:
                        await cache.cache(GuildMemberKey(event.guild_id, member.user.id), member)
                for presence in event.presences or ():
                    await cache.cache(PresenceKey(event.guild_id, presence.user.id), presence)
            case GuildMemberUpdate():
                await self._merge_member(event)
            case GuildRoleCreate() | GuildRoleUpdate():
                await cache.cache(GuildRoleKey(event.guild_id, event.role.id), event.role)
            case MessageCreate():
                await cache.cache(MessageKey(event.channel_id, event.id), event)
            case MessageReactionAdd():
                member = event.member
                if event.guild_id is not None and member is not None and member.user is not None:
                    await cache.cache(GuildMemberKey(event.guild_id, member.user.id), member)
            case UserUpdate():
                await cache.cache(UserKey(event.id), event)
                await cache.cache(CurrentUserKey(), event)
            case InteractionCreate():
                await self._cache_resolved(event)

    async def _merge_member(self, event: GuildMemberUpdate) -> None:
        """Apply a partial member update over the cached member.

        Without a cached member, one is only built when the update carries a
        join date.
        """
        key = GuildMemberKey(event.guild_id, event.user.id)
        updates = {name: getattr(event, name) for name in event.model_fields_set & _MEMBER_UPDATE_FIELDS}
        cached = await self._cache.try_get_value(key)
        if cached.is_ok():
            member = cached.unwrap().model_copy(update={**updates, "user": event.user, "roles": event.roles})
        elif event.joined_at is not None:
            present = {name: value for name, value in updates.items() if value is not None}
            member = GuildMember(user=event.user, roles=event.roles, **present)
        else:
            return
        await self._cache.cache(key, member)

    async def _cache_resolved(self, event: InteractionCreate) -> None:
        resolved = event.data.resolved if event.data is not None else None
        if resolved is None:
            return
        users = resolved.users or {}
        for user_id, user in users.items():
            await self._cache.cache(UserKey(user_id), user)
        if event.guild_id is None:
            return
        for user_id, member in (resolved.members or {}).items():
            # Resolved members omit their user; stitch it back from the resolved users
            if member.user is None and user_id in users:
                member = member.model_copy(update={"user": users[user_id]})
            await self._cache.cache(GuildMemberKey(event.guild_id, user_id), member)
        for role_id, role in (resolved.roles or {}).items():
            await self._cache.cache(GuildRoleKey(event.guild_id, role_id), role)


class LateCacheResponder(CacheResponder):
    """Evicts entities deleted by gateway events. Missing entries are not an error."""

    __slots__ = ()

    async def _handle(self, event: Any) -> None:
        match event:
            case ChannelDelete():
                keys = [ChannelKey(event.id)]
            case GuildBanRemove():
                keys = [GuildBanKey(event.guild_id, event.user.id)]
            case GuildDelete():
                keys = [GuildKey(event.id)]
            case GuildMemberRemove():
                keys = [GuildMemberKey(event.guild_id, event.user.id)]
            case GuildRoleDelete():
                keys = [GuildRoleKey(event.guild_id, event.role_id)]
            case InviteDelete():
                keys = [InviteKey(event.code)]
            case MessageDelete():
                keys = [MessageKey(event.channel_id, event.id)]
            case MessageDeleteBulk():
                keys = [MessageKey(event.channel_id, message_id) for message_id in event.ids]
            case _:
                return
        for key in keys:
            await self._cache.evict(key)
