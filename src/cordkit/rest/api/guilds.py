"""Guild, member, ban, role, prune, integration and widget endpoints."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Sequence

from cordkit.api.objects import (
    Ban,
    Channel,
    ChannelPosition,
    ChannelType,
    Guild,
    GuildMember,
    GuildPreview,
    GuildWidgetSettings,
    Integration,
    Invite,
    PermissionOverwrite,
    PruneCount,
    Role,
    RolePosition,
    ThreadList,
    VanityUrl,
    VoiceRegion,
    WelcomeScreen,
    WelcomeScreenChannel,
)
from cordkit.foundation import UNSET, RestError, Result, Snowflake, Unset

from .base import RestAPI


def _csv(ids: Sequence[Snowflake] | Unset) -> str | Unset:
    return UNSET if ids is UNSET else ",".join(str(i) for i in ids)


class RestGuildAPI(RestAPI):
    """Endpoints under ``/guilds``."""

    __slots__ = ()

    async def create_guild(
        self,
        name: str,
        *,
        icon: str | Unset = UNSET,
        verification_level: int | Unset = UNSET,
        default_message_notifications: int | Unset = UNSET,
        explicit_content_filter: int | Unset = UNSET,
        roles: Sequence[dict[str, Any]] | Unset = UNSET,
        channels: Sequence[dict[str, Any]] | Unset = UNSET,
        afk_channel_id: Snowflake | Unset = UNSET,
        afk_timeout: int | Unset = UNSET,
        system_channel_id: Snowflake | Unset = UNSET,
        system_channel_flags: int | Unset = UNSET,
    ) -> Result[Guild, RestError]:
        body = {
            "name": name, "icon": icon, "verification_level": verification_level,
            "default_message_notifications": default_message_notifications,
            "explicit_content_filter": explicit_content_filter, "roles": roles, "channels": channels,
            "afk_channel_id": afk_channel_id, "afk_timeout": afk_timeout,
            "system_channel_id": system_channel_id, "system_channel_flags": system_channel_flags,
        }
        return await self._http.post("guilds", Guild, configure=lambda b: b.with_json(body))

    async def get_guild(self, guild_id: Snowflake, *, with_counts: bool | Unset = UNSET) -> Result[Guild, RestError]:
        return await self._http.get(
            f"guilds/{guild_id}", Guild, configure=lambda b: b.add_query_parameter("with_counts", with_counts),
        )

    async def get_guild_preview(self, guild_id: Snowflake) -> Result[GuildPreview, RestError]:
        return await self._http.get(f"guilds/{guild_id}/preview", GuildPreview)

    async def modify_guild(
        self,
        guild_id: Snowflake,
        *,
        name: str | Unset = UNSET,
        verification_level: int | None | Unset = UNSET,
        default_message_notifications: int | None | Unset = UNSET,
        explicit_content_filter: int | None | Unset = UNSET,
        afk_channel_id: Snowflake | None | Unset = UNSET,
        afk_timeout: int | Unset = UNSET,
        icon: str | None | Unset = UNSET,
        owner_id: Snowflake | Unset = UNSET,
        splash: str | None | Unset = UNSET,
        discovery_splash: str | None | Unset = UNSET,
        banner: str | None | Unset = UNSET,
        system_channel_id: Snowflake | None | Unset = UNSET,
        system_channel_flags: int | Unset = UNSET,
        rules_channel_id: Snowflake | None | Unset = UNSET,
        public_updates_channel_id: Snowflake | None | Unset = UNSET,
        preferred_locale: str | None | Unset = UNSET,
        features: Sequence[str] | Unset = UNSET,
        description: str | None | Unset = UNSET,
        premium_progress_bar_enabled: bool | Unset = UNSET,
        reason: str | Unset = UNSET,
    ) -> Result[Guild, RestError]:
        body = {
            "name": name, "verification_level": verification_level,
            "default_message_notifications": default_message_notifications,
            "explicit_content_filter": explicit_content_filter, "afk_channel_id": afk_channel_id,
            "afk_timeout": afk_timeout, "icon": icon, "owner_id": owner_id, "splash": splash,
            "discovery_splash": discovery_splash, "banner": banner, "system_channel_id": system_channel_id,
            "system_channel_flags": system_channel_flags, "rules_channel_id": rules_channel_id,
            "public_updates_channel_id": public_updates_channel_id, "preferred_locale": preferred_locale,
            "features": features, "description": description,
            "premium_progress_bar_enabled": premium_progress_bar_enabled,
        }
        return await self._http.patch(
            f"guilds/{guild_id}", Guild, configure=lambda b: b.with_json(body).with_reason(reason),
        )

    async def delete_guild(self, guild_id: Snowflake) -> Result[None, RestError]:
        return await self._http.delete(f"guilds/{guild_id}")

    # ─── Channels ────────────────────────────────────────────────────

    async def get_guild_channels(self, guild_id: Snowflake) -> Result[list[Channel], RestError]:
        return await self._http.get(f"guilds/{guild_id}/channels", list[Channel])

    async def create_guild_channel(
        self,
        guild_id: Snowflake,
        name: str,
        *,
        type: ChannelType | Unset = UNSET,  # noqa: A002
        topic: str | Unset = UNSET,
        bitrate: int | Unset = UNSET,
        user_limit: int | Unset = UNSET,
        rate_limit_per_user: int | Unset = UNSET,
        position: int | Unset = UNSET,
        permission_overwrites: Sequence[PermissionOverwrite] | Unset = UNSET,
        parent_id: Snowflake | Unset = UNSET,
        nsfw: bool | Unset = UNSET,
        rtc_region: str | None | Unset = UNSET,
        video_quality_mode: int | Unset = UNSET,
        default_auto_archive_duration: int | Unset = UNSET,
        reason: str | Unset = UNSET,
    ) -> Result[Channel, RestError]:
        body = {
            "name": name, "type": type, "topic": topic, "bitrate": bitrate, "user_limit": user_limit,
            "rate_limit_per_user": rate_limit_per_user, "position": position,
            "permission_overwrites": permission_overwrites, "parent_id": parent_id, "nsfw": nsfw,
            "rtc_region": rtc_region, "video_quality_mode": video_quality_mode,
            "default_auto_archive_duration": default_auto_archive_duration,
        }
        return await self._http.post(
            f"guilds/{guild_id}/channels", Channel, configure=lambda b: b.with_json(body).with_reason(reason),
        )

    async def modify_guild_channel_positions(
        self, guild_id: Snowflake, positions: Sequence[ChannelPosition], *, reason: str | Unset = UNSET,
    ) -> Result[None, RestError]:
        return await self._http.patch(
            f"guilds/{guild_id}/channels", configure=lambda b: b.with_json_array(positions).with_reason(reason),
        )

    async def list_active_guild_threads(self, guild_id: Snowflake) -> Result[ThreadList, RestError]:
        return await self._http.get(f"guilds/{guild_id}/threads/active", ThreadList)

    # ─── Members ─────────────────────────────────────────────────────

    async def get_guild_member(self, guild_id: Snowflake, user_id: Snowflake) -> Result[GuildMember, RestError]:
        return await self._http.get(f"guilds/{guild_id}/members/{user_id}", GuildMember)

    async def list_guild_members(
        self, guild_id: Snowflake, *, limit: int | Unset = UNSET, after: Snowflake | Unset = UNSET,
    ) -> Result[list[GuildMember], RestError]:
        return await self._http.get(
            f"guilds/{guild_id}/members", list[GuildMember],
            configure=lambda b: b.add_query_parameter("limit", limit).add_query_parameter("after", after),
        )

    async def search_guild_members(
        self, guild_id: Snowflake, query: str, *, limit: int | Unset = UNSET,
    ) -> Result[list[GuildMember], RestError]:
        return await self._http.get(
            f"guilds/{guild_id}/members/search", list[GuildMember],
            configure=lambda b: b.add_query_parameter("query", query).add_query_parameter("limit", limit),
        )

    async def add_guild_member(
        self,
        guild_id: Snowflake,
        user_id: Snowflake,
        access_token: str,
        *,
        nick: str | Unset = UNSET,
        roles: Sequence[Snowflake] | Unset = UNSET,
        mute: bool | Unset = UNSET,
        deaf: bool | Unset = UNSET,
    ) -> Result[GuildMember | None, RestError]:
        """Add a user via an OAuth2 token. Ok(None) when the user already was a member."""
        body = {"access_token": access_token, "nick": nick, "roles": roles, "mute": mute, "deaf": deaf}
        return await self._http.put(
            f"guilds/{guild_id}/members/{user_id}", GuildMember,
            configure=lambda b: b.with_json(body), allow_null=True,
        )

    async def modify_guild_member(
        self,
        guild_id: Snowflake,
        user_id: Snowflake,
        *,
        nick: str | None | Unset = UNSET,
        roles: Sequence[Snowflake] | None | Unset = UNSET,
        mute: bool | None | Unset = UNSET,
        deaf: bool | None | Unset = UNSET,
        channel_id: Snowflake | None | Unset = UNSET,
        communication_disabled_until: datetime | None | Unset = UNSET,
        flags: int | None | Unset = UNSET,
        reason: str | Unset = UNSET,
    ) -> Result[GuildMember, RestError]:
        body = {
            "nick": nick, "roles": roles, "mute": mute, "deaf": deaf, "channel_id": channel_id,
            "communication_disabled_until": communication_disabled_until, "flags": flags,
        }
        return await self._http.patch(
            f"guilds/{guild_id}/members/{user_id}", GuildMember,
            configure=lambda b: b.with_json(body).with_reason(reason),
        )

    async def modify_current_member(
        self, guild_id: Snowflake, *, nick: str | None | Unset = UNSET, reason: str | Unset = UNSET,
    ) -> Result[GuildMember, RestError]:
        return await self._http.patch(
            f"guilds/{guild_id}/members/@me", GuildMember,
            configure=lambda b: b.with_json({"nick": nick}).with_reason(reason),
        )

    async def add_guild_member_role(
        self, guild_id: Snowflake, user_id: Snowflake, role_id: Snowflake, *, reason: str | Unset = UNSET,
    ) -> Result[None, RestError]:
        return await self._http.put(
            f"guilds/{guild_id}/members/{user_id}/roles/{role_id}", configure=lambda b: b.with_reason(reason),
        )

    async def remove_guild_member_role(
        self, guild_id: Snowflake, user_id: Snowflake, role_id: Snowflake, *, reason: str | Unset = UNSET,
    ) -> Result[None, RestError]:
        return await self._http.delete(
            f"guilds/{guild_id}/members/{user_id}/roles/{role_id}", configure=lambda b: b.with_reason(reason),
        )

    async def remove_guild_member(
        self, guild_id: Snowflake, user_id: Snowflake, *, reason: str | Unset = UNSET,
    ) -> Result[None, RestError]:
        return await self._http.delete(f"guilds/{guild_id}/members/{user_id}", configure=lambda b: b.with_reason(reason))

    # ─── Bans ────────────────────────────────────────────────────────

    async def get_guild_bans(
        self,
        guild_id: Snowflake,
        *,
        limit: int | Unset = UNSET,
        before: Snowflake | Unset = UNSET,
        after: Snowflake | Unset = UNSET,
    ) -> Result[list[Ban], RestError]:
        return await self._http.get(
            f"guilds/{guild_id}/bans", list[Ban],
            configure=lambda b: (
                b.add_query_parameter("limit", limit)
                .add_query_parameter("before", before)
                .add_query_parameter("after", after)
            ),
        )

    async def get_guild_ban(self, guild_id: Snowflake, user_id: Snowflake) -> Result[Ban, RestError]:
        return await self._http.get(f"guilds/{guild_id}/bans/{user_id}", Ban)

    async def create_guild_ban(
        self,
        guild_id: Snowflake,
        user_id: Snowflake,
        *,
        delete_message_seconds: int | Unset = UNSET,
        reason: str | Unset = UNSET,
    ) -> Result[None, RestError]:
        return await self._http.put(
            f"guilds/{guild_id}/bans/{user_id}",
            configure=lambda b: b.with_json({"delete_message_seconds": delete_message_seconds}).with_reason(reason),
        )

    async def remove_guild_ban(
        self, guild_id: Snowflake, user_id: Snowflake, *, reason: str | Unset = UNSET,
    ) -> Result[None, RestError]:
        return await self._http.delete(f"guilds/{guild_id}/bans/{user_id}", configure=lambda b: b.with_reason(reason))

    # ─── Roles ───────────────────────────────────────────────────────

    async def get_guild_roles(self, guild_id: Snowflake) -> Result[list[Role], RestError]:
        return await self._http.get(f"guilds/{guild_id}/roles", list[Role])

    async def create_guild_role(
        self,
        guild_id: Snowflake,
        *,
        name: str | Unset = UNSET,
        permissions: str | Unset = UNSET,
        color: int | Unset = UNSET,
        hoist: bool | Unset = UNSET,
        icon: str | None | Unset = UNSET,
        unicode_emoji: str | None | Unset = UNSET,
        mentionable: bool | Unset = UNSET,
        reason: str | Unset = UNSET,
    ) -> Result[Role, RestError]:
        body = {
            "name": name, "permissions": permissions, "color": color, "hoist": hoist, "icon": icon,
            "unicode_emoji": unicode_emoji, "mentionable": mentionable,
        }
        return await self._http.post(
            f"guilds/{guild_id}/roles", Role, configure=lambda b: b.with_json(body).with_reason(reason),
        )

    async def modify_guild_role_positions(
        self, guild_id: Snowflake, positions: Sequence[RolePosition], *, reason: str | Unset = UNSET,
    ) -> Result[list[Role], RestError]:
        return await self._http.patch(
            f"guilds/{guild_id}/roles", list[Role],
            configure=lambda b: b.with_json_array(positions).with_reason(reason),
        )

    async def modify_guild_role(
        self,
        guild_id: Snowflake,
        role_id: Snowflake,
        *,
        name: str | None | Unset = UNSET,
        permissions: str | None | Unset = UNSET,
        color: int | None | Unset = UNSET,
        hoist: bool | None | Unset = UNSET,
        icon: str | None | Unset = UNSET,
        unicode_emoji: str | None | Unset = UNSET,
        mentionable: bool | None | Unset = UNSET,
        reason: str | Unset = UNSET,
    ) -> Result[Role, RestError]:
        body = {
            "name": name, "permissions": permissions, "color": color, "hoist": hoist, "icon": icon,
            "unicode_emoji": unicode_emoji, "mentionable": mentionable,
        }
        return await self._http.patch(
            f"guilds/{guild_id}/roles/{role_id}", Role, configure=lambda b: b.with_json(body).with_reason(reason),
        )

    async def delete_guild_role(
        self, guild_id: Snowflake, role_id: Snowflake, *, reason: str | Unset = UNSET,
    ) -> Result[None, RestError]:
        return await self._http.delete(f"guilds/{guild_id}/roles/{role_id}", configure=lambda b: b.with_reason(reason))

    # ─── Prune ───────────────────────────────────────────────────────

    async def get_guild_prune_count(
        self, guild_id: Snowflake, *, days: int | Unset = UNSET, include_roles: Sequence[Snowflake] | Unset = UNSET,
    ) -> Result[PruneCount, RestError]:
        return await self._http.get(
            f"guilds/{guild_id}/prune", PruneCount,
            configure=lambda b: b.add_query_parameter("days", days).add_query_parameter("include_roles", _csv(include_roles)),
        )

    async def begin_guild_prune(
        self,
        guild_id: Snowflake,
        *,
        days: int | Unset = UNSET,
        compute_prune_count: bool | Unset = UNSET,
        include_roles: Sequence[Snowflake] | Unset = UNSET,
        reason: str | Unset = UNSET,
    ) -> Result[PruneCount, RestError]:
        body = {"days": days, "compute_prune_count": compute_prune_count, "include_roles": include_roles}
        return await self._http.post(
            f"guilds/{guild_id}/prune", PruneCount, configure=lambda b: b.with_json(body).with_reason(reason),
        )

    # ─── Voice regions, invites, integrations ───────────────────────

    async def get_guild_voice_regions(self, guild_id: Snowflake) -> Result[list[VoiceRegion], RestError]:
        return await self._http.get(f"guilds/{guild_id}/regions", list[VoiceRegion])

    async def get_guild_invites(self, guild_id: Snowflake) -> Result[list[Invite], RestError]:
        return await self._http.get(f"guilds/{guild_id}/invites", list[Invite])

    async def get_guild_integrations(self, guild_id: Snowflake) -> Result[list[Integration], RestError]:
        return await self._http.get(f"guilds/{guild_id}/integrations", list[Integration])

    async def delete_guild_integration(
        self, guild_id: Snowflake, integration_id: Snowflake, *, reason: str | Unset = UNSET,
    ) -> Result[None, RestError]:
        return await self._http.delete(
            f"guilds/{guild_id}/integrations/{integration_id}", configure=lambda b: b.with_reason(reason),
        )

    # ─── Widget, vanity URL, welcome screen ─────────────────────────

    async def get_guild_widget_settings(self, guild_id: Snowflake) -> Result[GuildWidgetSettings, RestError]:
        return await self._http.get(f"guilds/{guild_id}/widget", GuildWidgetSettings)

    async def modify_guild_widget(
        self,
        guild_id: Snowflake,
        *,
        enabled: bool | Unset = UNSET,
        channel_id: Snowflake | None | Unset = UNSET,
        reason: str | Unset = UNSET,
    ) -> Result[GuildWidgetSettings, RestError]:
        return await self._http.patch(
            f"guilds/{guild_id}/widget", GuildWidgetSettings,
            configure=lambda b: b.with_json({"enabled": enabled, "channel_id": channel_id}).with_reason(reason),
        )

    async def get_guild_widget_image(self, guild_id: Snowflake, *, style: str | Unset = UNSET) -> Result[bytes, RestError]:
        return await self._http.get_content(
            f"guilds/{guild_id}/widget.png", configure=lambda b: b.add_query_parameter("style", style).skip_authorization(),
        )

    async def get_guild_vanity_url(self, guild_id: Snowflake) -> Result[VanityUrl, RestError]:
        return await self._http.get(f"guilds/{guild_id}/vanity-url", VanityUrl)

    async def get_guild_welcome_screen(self, guild_id: Snowflake) -> Result[WelcomeScreen, RestError]:
        return await self._http.get(f"guilds/{guild_id}/welcome-screen", WelcomeScreen)

    async def modify_guild_welcome_screen(
        self,
        guild_id: Snowflake,
        *,
        enabled: bool | None | Unset = UNSET,
        welcome_channels: Sequence[WelcomeScreenChannel] | None | Unset = UNSET,
        description: str | None | Unset = UNSET,
        reason: str | Unset = UNSET,
    ) -> Result[WelcomeScreen, RestError]:
        body = {"enabled": enabled, "welcome_channels": welcome_channels, "description": description}
        return await self._http.patch(
            f"guilds/{guild_id}/welcome-screen", WelcomeScreen,
            configure=lambda b: b.with_json(body).with_reason(reason),
        )
