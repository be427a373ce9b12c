from __future__ import annotations

from typing import Any, Callable, Sequence

from cordkit.api.objects import (
    Ban,
    Channel,
    Guild,
    GuildMember,
    GuildPreview,
    GuildWidgetSettings,
    Integration,
    Invite,
    Role,
    RolePosition,
    VoiceRegion,
    WelcomeScreen,
)
from cordkit.foundation import UNSET, RestError, Result, Snowflake, Unset, is_set
from cordkit.rest.api import RestGuildAPI

from ..keys import (
    ChannelKey,
    GuildBanKey,
    GuildBansKey,
    GuildChannelsKey,
    GuildIntegrationKey,
    GuildIntegrationsKey,
    GuildInvitesKey,
    GuildKey,
    GuildMemberKey,
    GuildMembersKey,
    GuildPreviewKey,
    GuildRoleKey,
    GuildRolesKey,
    GuildVoiceRegionKey,
    GuildVoiceRegionsKey,
    GuildWelcomeScreenKey,
    GuildWidgetSettingsKey,
    InviteKey,
)
from .base import CachingAPI


def _member_key(guild_id: Snowflake) -> Callable[[GuildMember], GuildMemberKey | None]:
    return lambda m: GuildMemberKey(guild_id, m.user.id) if m.user is not None else None


class CachingGuildAPI(CachingAPI[RestGuildAPI]):
    """Guilds and their channels, members, bans, roles, invites and settings."""

    __slots__ = ()

    # ─── Guild ───────────────────────────────────────────────────────

    async def create_guild(self, name: str, **kwargs: Any) -> Result[Guild, RestError]:
        result = await self._inner.create_guild(name, **kwargs)
        return await self._store(result, lambda g: GuildKey(g.id))

    async def get_guild(self, guild_id: Snowflake, **kwargs: Any) -> Result[Guild, RestError]:
        return await self._read_through(GuildKey(guild_id), lambda: self._inner.get_guild(guild_id, **kwargs))

    async def get_guild_preview(self, guild_id: Snowflake) -> Result[GuildPreview, RestError]:
        return await self._read_through(GuildPreviewKey(guild_id), lambda: self._inner.get_guild_preview(guild_id))

    async def modify_guild(self, guild_id: Snowflake, **kwargs: Any) -> Result[Guild, RestError]:
        result = await self._inner.modify_guild(guild_id, **kwargs)
        return await self._store(result, lambda g: GuildKey(g.id))

    async def delete_guild(self, guild_id: Snowflake) -> Result[None, RestError]:
        result = await self._inner.delete_guild(guild_id)
        return await self._evict(result, GuildKey(guild_id))

    # ─── Channels ────────────────────────────────────────────────────

    async def get_guild_channels(self, guild_id: Snowflake) -> Result[list[Channel], RestError]:
        return await self._read_through_collection(
            GuildChannelsKey(guild_id), lambda: self._inner.get_guild_channels(guild_id), lambda c: ChannelKey(c.id),
        )

    async def create_guild_channel(self, guild_id: Snowflake, name: str, **kwargs: Any) -> Result[Channel, RestError]:
        result = await self._inner.create_guild_channel(guild_id, name, **kwargs)
        await self._store(result, lambda c: ChannelKey(c.id))
        return await self._evict(result, GuildChannelsKey(guild_id))

    # ─── Members ─────────────────────────────────────────────────────

    async def get_guild_member(self, guild_id: Snowflake, user_id: Snowflake) -> Result[GuildMember, RestError]:
        return await self._read_through(
            GuildMemberKey(guild_id, user_id), lambda: self._inner.get_guild_member(guild_id, user_id),
        )

    async def list_guild_members(
        self, guild_id: Snowflake, *, limit: int | Unset = UNSET, after: Snowflake | Unset = UNSET,
    ) -> Result[list[GuildMember], RestError]:
        """Each page (limit, after) is cached under its own collection key."""
        key = GuildMembersKey(guild_id, limit if is_set(limit) else None, after if is_set(after) else None)
        return await self._read_through_collection(
            key, lambda: self._inner.list_guild_members(guild_id, limit=limit, after=after), _member_key(guild_id),
        )

    async def search_guild_members(self, guild_id: Snowflake, query: str, **kwargs: Any) -> Result[list[GuildMember], RestError]:
        result = await self._inner.search_guild_members(guild_id, query, **kwargs)
        return await self._store_each(result, _member_key(guild_id))

    async def add_guild_member(
        self, guild_id: Snowflake, user_id: Snowflake, access_token: str, **kwargs: Any,
    ) -> Result[GuildMember | None, RestError]:
        result = await self._inner.add_guild_member(guild_id, user_id, access_token, **kwargs)
        return await self._store(result, lambda _: GuildMemberKey(guild_id, user_id))

    async def modify_guild_member(self, guild_id: Snowflake, user_id: Snowflake, **kwargs: Any) -> Result[GuildMember, RestError]:
        result = await self._inner.modify_guild_member(guild_id, user_id, **kwargs)
        return await self._store(result, lambda _: GuildMemberKey(guild_id, user_id))

    async def modify_current_member(self, guild_id: Snowflake, **kwargs: Any) -> Result[GuildMember, RestError]:
        result = await self._inner.modify_current_member(guild_id, **kwargs)
        return await self._store(result, _member_key(guild_id))

    async def add_guild_member_role(
        self, guild_id: Snowflake, user_id: Snowflake, role_id: Snowflake, **kwargs: Any,
    ) -> Result[None, RestError]:
        result = await self._inner.add_guild_member_role(guild_id, user_id, role_id, **kwargs)
        return await self._evict(result, GuildMemberKey(guild_id, user_id))

    async def remove_guild_member_role(
        self, guild_id: Snowflake, user_id: Snowflake, role_id: Snowflake, **kwargs: Any,
    ) -> Result[None, RestError]:
        result = await self._inner.remove_guild_member_role(guild_id, user_id, role_id, **kwargs)
        return await self._evict(result, GuildMemberKey(guild_id, user_id))

    async def remove_guild_member(self, guild_id: Snowflake, user_id: Snowflake, **kwargs: Any) -> Result[None, RestError]:
        result = await self._inner.remove_guild_member(guild_id, user_id, **kwargs)
        return await self._evict(result, GuildMemberKey(guild_id, user_id))

    # ─── Bans ────────────────────────────────────────────────────────

    async def get_guild_bans(self, guild_id: Snowflake, **kwargs: Any) -> Result[list[Ban], RestError]:
        """Unpaged listings are read through; paged ones are fetched and cached per ban."""
        key_for = lambda b: GuildBanKey(guild_id, b.user.id)  # noqa: E731
        if any(is_set(v) for v in kwargs.values()):
            return await self._store_each(await self._inner.get_guild_bans(guild_id, **kwargs), key_for)
        return await self._read_through_collection(GuildBansKey(guild_id), lambda: self._inner.get_guild_bans(guild_id), key_for)

    async def get_guild_ban(self, guild_id: Snowflake, user_id: Snowflake) -> Result[Ban, RestError]:
        return await self._read_through(GuildBanKey(guild_id, user_id), lambda: self._inner.get_guild_ban(guild_id, user_id))

    async def create_guild_ban(self, guild_id: Snowflake, user_id: Snowflake, **kwargs: Any) -> Result[None, RestError]:
        result = await self._inner.create_guild_ban(guild_id, user_id, **kwargs)
        return await self._evict(result, GuildMemberKey(guild_id, user_id), GuildBansKey(guild_id))

    async def remove_guild_ban(self, guild_id: Snowflake, user_id: Snowflake, **kwargs: Any) -> Result[None, RestError]:
        result = await self._inner.remove_guild_ban(guild_id, user_id, **kwargs)
        return await self._evict(result, GuildBanKey(guild_id, user_id), GuildBansKey(guild_id))

    # ─── Roles ───────────────────────────────────────────────────────

    async def get_guild_roles(self, guild_id: Snowflake) -> Result[list[Role], RestError]:
        return await self._read_through_collection(
            GuildRolesKey(guild_id), lambda: self._inner.get_guild_roles(guild_id), lambda r: GuildRoleKey(guild_id, r.id),
        )

    async def create_guild_role(self, guild_id: Snowflake, **kwargs: Any) -> Result[Role, RestError]:
        result = await self._inner.create_guild_role(guild_id, **kwargs)
        await self._store(result, lambda r: GuildRoleKey(guild_id, r.id))
        return await self._evict(result, GuildRolesKey(guild_id))

    async def modify_guild_role_positions(
        self, guild_id: Snowflake, positions: Sequence[RolePosition], **kwargs: Any,
    ) -> Result[list[Role], RestError]:
        result = await self._inner.modify_guild_role_positions(guild_id, positions, **kwargs)
        if result.is_ok():
            await self._cache.cache_collection(GuildRolesKey(guild_id), result.unwrap(), lambda r: GuildRoleKey(guild_id, r.id))
        return result

    async def modify_guild_role(self, guild_id: Snowflake, role_id: Snowflake, **kwargs: Any) -> Result[Role, RestError]:
        result = await self._inner.modify_guild_role(guild_id, role_id, **kwargs)
        return await self._store(result, lambda r: GuildRoleKey(guild_id, r.id))

    async def delete_guild_role(self, guild_id: Snowflake, role_id: Snowflake, **kwargs: Any) -> Result[None, RestError]:
        result = await self._inner.delete_guild_role(guild_id, role_id, **kwargs)
        return await self._evict(result, GuildRoleKey(guild_id, role_id), GuildRolesKey(guild_id))

    # ─── Regions, invites, integrations ─────────────────────────────

    async def get_guild_voice_regions(self, guild_id: Snowflake) -> Result[list[VoiceRegion], RestError]:
        return await self._read_through_collection(
            GuildVoiceRegionsKey(guild_id),
            lambda: self._inner.get_guild_voice_regions(guild_id),
            lambda v: GuildVoiceRegionKey(guild_id, v.id),
        )

    async def get_guild_invites(self, guild_id: Snowflake) -> Result[list[Invite], RestError]:
        return await self._read_through_collection(
            GuildInvitesKey(guild_id), lambda: self._inner.get_guild_invites(guild_id), lambda i: InviteKey(i.code),
        )

    async def get_guild_integrations(self, guild_id: Snowflake) -> Result[list[Integration], RestError]:
        return await self._read_through_collection(
            GuildIntegrationsKey(guild_id),
            lambda: self._inner.get_guild_integrations(guild_id),
            lambda i: GuildIntegrationKey(guild_id, i.id),
        )

    async def delete_guild_integration(self, guild_id: Snowflake, integration_id: Snowflake, **kwargs: Any) -> Result[None, RestError]:
        result = await self._inner.delete_guild_integration(guild_id, integration_id, **kwargs)
        return await self._evict(result, GuildIntegrationKey(guild_id, integration_id), GuildIntegrationsKey(guild_id))

    # ─── Widget, welcome screen ──────────────────────────────────────

    async def get_guild_widget_settings(self, guild_id: Snowflake) -> Result[GuildWidgetSettings, RestError]:
        return await self._read_through(
            GuildWidgetSettingsKey(guild_id), lambda: self._inner.get_guild_widget_settings(guild_id),
        )

    async def modify_guild_widget(self, guild_id: Snowflake, **kwargs: Any) -> Result[GuildWidgetSettings, RestError]:
        result = await self._inner.modify_guild_widget(guild_id, **kwargs)
        return await self._store(result, lambda _: GuildWidgetSettingsKey(guild_id))

    async def get_guild_welcome_screen(self, guild_id: Snowflake) -> Result[WelcomeScreen, RestError]:
        return await self._read_through(
            GuildWelcomeScreenKey(guild_id), lambda: self._inner.get_guild_welcome_screen(guild_id),
        )

    async def modify_guild_welcome_screen(self, guild_id: Snowflake, **kwargs: Any) -> Result[WelcomeScreen, RestError]:
        result = await self._inner.modify_guild_welcome_screen(guild_id, **kwargs)
        return await self._store(result, lambda _: GuildWelcomeScreenKey(guild_id))
