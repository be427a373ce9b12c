"""Guilds, members, roles, bans, integrations and related settings."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from cordkit.foundation import Snowflake

from .base import DiscordModel
from .channels import Channel
from .emojis import Emoji
from .users import Presence, User


class RoleTags(DiscordModel):
    bot_id: Snowflake | None = None
    integration_id: Snowflake | None = None
    subscription_listing_id: Snowflake | None = None


class Role(DiscordModel):
    id: Snowflake
    name: str
    color: int = 0
    hoist: bool = False
    icon: str | None = None
    unicode_emoji: str | None = None
    position: int = 0
    permissions: str = "0"
    managed: bool = False
    mentionable: bool = False
    tags: RoleTags | None = None
    flags: int = 0

    @property
    def mention(self) -> str:
        return f"<@&{self.id}>"


class GuildMember(DiscordModel):
    """Guild member. ``user`` is absent on members embedded in message payloads."""
    user: User | None = None
    nick: str | None = None
    avatar: str | None = None
    roles: list[Snowflake] = Field(default_factory=list)
    joined_at: datetime | None = None
    premium_since: datetime | None = None
    deaf: bool = False
    mute: bool = False
    flags: int = 0
    pending: bool | None = None
    permissions: str | None = None
    communication_disabled_until: datetime | None = None


class Ban(DiscordModel):
    reason: str | None = None
    user: User


class IntegrationAccount(DiscordModel):
    id: str
    name: str


class IntegrationApplication(DiscordModel):
    id: Snowflake
    name: str
    icon: str | None = None
    description: str = ""
    bot: User | None = None


class Integration(DiscordModel):
    id: Snowflake
    name: str
    type: str
    enabled: bool | None = None
    syncing: bool | None = None
    role_id: Snowflake | None = None
    enable_emoticons: bool | None = None
    expire_behavior: int | None = None
    expire_grace_period: int | None = None
    user: User | None = None
    account: IntegrationAccount
    synced_at: datetime | None = None
    subscriber_count: int | None = None
    revoked: bool | None = None
    application: IntegrationApplication | None = None
    scopes: list[str] | None = None


class GuildPreview(DiscordModel):
    id: Snowflake
    name: str
    icon: str | None = None
    splash: str | None = None
    discovery_splash: str | None = None
    emojis: list[Emoji] = Field(default_factory=list)
    features: list[str] = Field(default_factory=list)
    approximate_member_count: int = 0
    approximate_presence_count: int = 0
    description: str | None = None


class PartialGuild(DiscordModel):
    """Guild summary as returned by the current-user guild listing and invites."""
    id: Snowflake
    name: str | None = None
    icon: str | None = None
    owner: bool | None = None
    permissions: str | None = None
    features: list[str] = Field(default_factory=list)
    approximate_member_count: int | None = None
    approximate_presence_count: int | None = None


class Guild(DiscordModel):
    id: Snowflake
    name: str
    icon: str | None = None
    splash: str | None = None
    discovery_splash: str | None = None
    owner: bool | None = None
    owner_id: Snowflake | None = None
    permissions: str | None = None
    afk_channel_id: Snowflake | None = None
    afk_timeout: int = 0
    widget_enabled: bool | None = None
    widget_channel_id: Snowflake | None = None
    verification_level: int = 0
    default_message_notifications: int = 0
    explicit_content_filter: int = 0
    roles: list[Role] = Field(default_factory=list)
    emojis: list[Emoji] = Field(default_factory=list)
    features: list[str] = Field(default_factory=list)
    mfa_level: int = 0
    application_id: Snowflake | None = None
    system_channel_id: Snowflake | None = None
    system_channel_flags: int = 0
    rules_channel_id: Snowflake | None = None
    max_presences: int | None = None
    max_members: int | None = None
    vanity_url_code: str | None = None
    description: str | None = None
    banner: str | None = None
    premium_tier: int = 0
    premium_subscription_count: int | None = None
    preferred_locale: str = "en-US"
    public_updates_channel_id: Snowflake | None = None
    approximate_member_count: int | None = None
    approximate_presence_count: int | None = None
    nsfw_level: int = 0
    # Only present on GUILD_CREATE
    joined_at: datetime | None = None
    large: bool | None = None
    unavailable: bool | None = None
    member_count: int | None = None
    members: list[GuildMember] | None = None
    channels: list[Channel] | None = None
    threads: list[Channel] | None = None
    presences: list[Presence] | None = None


class GuildWidgetSettings(DiscordModel):
    enabled: bool
    channel_id: Snowflake | None = None


class WelcomeScreenChannel(DiscordModel):
    channel_id: Snowflake
    description: str
    emoji_id: Snowflake | None = None
    emoji_name: str | None = None


class WelcomeScreen(DiscordModel):
    description: str | None = None
    welcome_channels: list[WelcomeScreenChannel] = Field(default_factory=list)


class PruneCount(DiscordModel):
    pruned: int | None = None


class VanityUrl(DiscordModel):
    code: str | None = None
    uses: int = 0


class ChannelPosition(DiscordModel):
    """Element of a channel position modification request."""
    id: Snowflake
    position: int | None = None
    lock_permissions: bool | None = None
    parent_id: Snowflake | None = None


class RolePosition(DiscordModel):
    """Element of a role position modification request."""
    id: Snowflake
    position: int | None = None

