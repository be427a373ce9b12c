from __future__ import annotations

from typing import Any

from cordkit.api.objects import Channel, Connection, GuildMember, User
from cordkit.foundation import RestError, Result, Snowflake
from cordkit.rest.api import RestUserAPI

from ..keys import (
    ChannelKey,
    ConnectionKey,
    CurrentUserConnectionsKey,
    CurrentUserDMsKey,
    CurrentUserGuildMemberKey,
    CurrentUserKey,
    GuildMemberKey,
    UserKey,
)
from .base import CachingAPI


class CachingUserAPI(CachingAPI[RestUserAPI]):
    """The current user is stored both as ``User:@me`` and under its own id."""

    __slots__ = ()

    async def get_user(self, user_id: Snowflake) -> Result[User, RestError]:
        return await self._read_through(UserKey(user_id), lambda: self._inner.get_user(user_id))

    async def get_current_user(self) -> Result[User, RestError]:
        return await self._read_through(CurrentUserKey(), self._inner.get_current_user, lambda u: UserKey(u.id))

    async def modify_current_user(self, **kwargs: Any) -> Result[User, RestError]:
        result = await self._inner.modify_current_user(**kwargs)
        return await self._store(result, lambda u: (CurrentUserKey(), UserKey(u.id)))

    async def get_current_user_guild_member(self, guild_id: Snowflake) -> Result[GuildMember, RestError]:
        return await self._read_through(
            CurrentUserGuildMemberKey(guild_id),
            lambda: self._inner.get_current_user_guild_member(guild_id),
            lambda m: GuildMemberKey(guild_id, m.user.id) if m.user is not None else None,
        )

    async def leave_guild(self, guild_id: Snowflake) -> Result[None, RestError]:
        result = await self._inner.leave_guild(guild_id)
        return await self._evict(result, CurrentUserGuildMemberKey(guild_id))

    async def get_user_dms(self) -> Result[list[Channel], RestError]:
        return await self._read_through_collection(
            CurrentUserDMsKey(), self._inner.get_user_dms, lambda c: ChannelKey(c.id),
        )

    async def create_dm(self, recipient_id: Snowflake) -> Result[Channel, RestError]:
        result = await self._inner.create_dm(recipient_id)
        return await self._store(result, lambda c: ChannelKey(c.id))

    async def get_user_connections(self) -> Result[list[Connection], RestError]:
        return await self._read_through_collection(
            CurrentUserConnectionsKey(), self._inner.get_user_connections, lambda c: ConnectionKey(c.id),
        )
