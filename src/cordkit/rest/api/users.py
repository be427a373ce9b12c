"""User endpoints."""

from __future__ import annotations

from cordkit.api.objects import Channel, Connection, GuildMember, PartialGuild, User
from cordkit.foundation import UNSET, RestError, Result, Snowflake, Unset

from .base import RestAPI


class RestUserAPI(RestAPI):
    """Endpoints under ``/users``."""

    __slots__ = ()

    async def get_current_user(self) -> Result[User, RestError]:
        return await self._http.get("users/@me", User)

    async def get_user(self, user_id: Snowflake) -> Result[User, RestError]:
        return await self._http.get(f"users/{user_id}", User)

    async def modify_current_user(
        self, *, username: str | Unset = UNSET, avatar: str | None | Unset = UNSET, banner: str | None | Unset = UNSET,
    ) -> Result[User, RestError]:
        return await self._http.patch(
            "users/@me", User,
            configure=lambda b: b.with_json({"username": username, "avatar": avatar, "banner": banner}),
        )

    async def get_current_user_guilds(
        self,
        *,
        before: Snowflake | Unset = UNSET,
        after: Snowflake | Unset = UNSET,
        limit: int | Unset = UNSET,
        with_counts: bool | Unset = UNSET,
    ) -> Result[list[PartialGuild], RestError]:
        return await self._http.get(
            "users/@me/guilds", list[PartialGuild],
            configure=lambda b: (
                b.add_query_parameter("before", before)
                .add_query_parameter("after", after)
                .add_query_parameter("limit", limit)
                .add_query_parameter("with_counts", with_counts)
            ),
        )

    async def get_current_user_guild_member(self, guild_id: Snowflake) -> Result[GuildMember, RestError]:
        return await self._http.get(f"users/@me/guilds/{guild_id}/member", GuildMember)

    async def leave_guild(self, guild_id: Snowflake) -> Result[None, RestError]:
        return await self._http.delete(f"users/@me/guilds/{guild_id}")

    async def get_user_dms(self) -> Result[list[Channel], RestError]:
        return await self._http.get("users/@me/channels", list[Channel])

    async def create_dm(self, recipient_id: Snowflake) -> Result[Channel, RestError]:
        return await self._http.post(
            "users/@me/channels", Channel, configure=lambda b: b.with_json({"recipient_id": recipient_id}),
        )

    async def get_user_connections(self) -> Result[list[Connection], RestError]:
        return await self._http.get("users/@me/connections", list[Connection])
