"""Typed cache keys.

Every key renders to a canonical string of ``:``-joined segments and keys
nest hierarchically, so a message key starts with its channel key::

    >>> MessageKey(Snowflake(1), Snowflake(2)).to_canonical_string()
    'Channel:1:Message:2'

Each key class declares ``value_type``, the type of the value stored under
it. Cache settings look expirations up by that type and serializing
providers use it to rebuild values.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, ClassVar

from cordkit.api.objects import (
    Application,
    AuthorizationInformation,
    Ban,
    Channel,
    Connection,
    Emoji,
    Guild,
    GuildMember,
    GuildPreview,
    GuildWidgetSettings,
    Integration,
    Invite,
    Message,
    PermissionOverwrite,
    Presence,
    Role,
    Template,
    ThreadMember,
    User,
    VoiceRegion,
    Webhook,
    WelcomeScreen,
)
from cordkit.foundation import Snowflake

EVICTED = "Evicted"
SELF = "@me"


@dataclass(frozen=True, slots=True)
class CacheKey(ABC):
    """Base type for cache keys. Equal keys render equal canonical strings."""

    value_type: ClassVar[Any] = Any

    @abstractmethod
    def parts(self) -> tuple[object, ...]:
        """Segments of the canonical string, outermost first."""

    def to_canonical_string(self) -> str:
        return ":".join(str(part) for part in self.parts())

    def __str__(self) -> str:
        return self.to_canonical_string()


# ═════════════════════════════════════════════════════════════════════════════
# Free-form Keys
# ═════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class StringKey(CacheKey):
    """Key made of a single caller-chosen string."""

    value: str

    def parts(self) -> tuple[object, ...]:
        return (self.value,)


@dataclass(frozen=True, slots=True)
class LocalizedStringKey(CacheKey):
    """String key scoped to a context (an application name, a GUID).

    The context should not contain ``:``.
    """

    context: str
    value: str

    def parts(self) -> tuple[object, ...]:
        return (self.context, self.value)


@dataclass(frozen=True, slots=True)
class EvictedKey(CacheKey):
    """Namespace holding the last value removed or replaced under ``key``."""

    key: CacheKey

    @property
    def value_type(self) -> Any:  # type: ignore[override]
        return self.key.value_type

    def parts(self) -> tuple[object, ...]:
        return (EVICTED, *self.key.parts())


def evicted(key: CacheKey) -> EvictedKey:
    return EvictedKey(key)


# ═════════════════════════════════════════════════════════════════════════════
# Channels & Messages
# ═════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class ChannelKey(CacheKey):
    value_type: ClassVar[Any] = Channel

    channel_id: Snowflake

    def parts(self) -> tuple[object, ...]:
        return ("Channel", self.channel_id)


@dataclass(frozen=True, slots=True)
class MessageKey(CacheKey):
    value_type: ClassVar[Any] = Message

    channel_id: Snowflake
    message_id: Snowflake

    def parts(self) -> tuple[object, ...]:
        return (*ChannelKey(self.channel_id).parts(), "Message", self.message_id)


@dataclass(frozen=True, slots=True)
class PinnedMessagesKey(CacheKey):
    value_type: ClassVar[Any] = list[Message]

    channel_id: Snowflake

    def parts(self) -> tuple[object, ...]:
        return (*ChannelKey(self.channel_id).parts(), "Pins")


@dataclass(frozen=True, slots=True)
class PermissionOverwriteKey(CacheKey):
    value_type: ClassVar[Any] = PermissionOverwrite

    channel_id: Snowflake
    overwrite_id: Snowflake

    def parts(self) -> tuple[object, ...]:
        return (*ChannelKey(self.channel_id).parts(), "Overwrite", self.overwrite_id)


@dataclass(frozen=True, slots=True)
class ChannelInvitesKey(CacheKey):
    value_type: ClassVar[Any] = list[Invite]

    channel_id: Snowflake

    def parts(self) -> tuple[object, ...]:
        return (*ChannelKey(self.channel_id).parts(), "Invites")


@dataclass(frozen=True, slots=True)
class ThreadMemberKey(CacheKey):
    value_type: ClassVar[Any] = ThreadMember

    channel_id: Snowflake
    user_id: Snowflake

    def parts(self) -> tuple[object, ...]:
        return (*ChannelKey(self.channel_id).parts(), "Member", self.user_id)


@dataclass(frozen=True, slots=True)
class ThreadMembersKey(CacheKey):
    value_type: ClassVar[Any] = list[ThreadMember]

    channel_id: Snowflake

    def parts(self) -> tuple[object, ...]:
        return (*ChannelKey(self.channel_id).parts(), "Members")


@dataclass(frozen=True, slots=True)
class InviteKey(CacheKey):
    value_type: ClassVar[Any] = Invite

    code: str

    def parts(self) -> tuple[object, ...]:
        return ("Invite", self.code)


# ═════════════════════════════════════════════════════════════════════════════
# Users
# ═════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class UserKey(CacheKey):
    value_type: ClassVar[Any] = User

    user_id: Snowflake

    def parts(self) -> tuple[object, ...]:
        return ("User", self.user_id)


@dataclass(frozen=True, slots=True)
class CurrentUserKey(CacheKey):
    value_type: ClassVar[Any] = User

    def parts(self) -> tuple[object, ...]:
        return ("User", SELF)


@dataclass(frozen=True, slots=True)
class CurrentUserConnectionsKey(CacheKey):
    value_type: ClassVar[Any] = list[Connection]

    def parts(self) -> tuple[object, ...]:
        return (*CurrentUserKey().parts(), "Connections")


@dataclass(frozen=True, slots=True)
class ConnectionKey(CacheKey):
    value_type: ClassVar[Any] = Connection

    connection_id: str

    def parts(self) -> tuple[object, ...]:
        return (*CurrentUserKey().parts(), "Connection", self.connection_id)


@dataclass(frozen=True, slots=True)
class CurrentUserDMsKey(CacheKey):
    value_type: ClassVar[Any] = list[Channel]

    def parts(self) -> tuple[object, ...]:
        return (*CurrentUserKey().parts(), "Channels")


@dataclass(frozen=True, slots=True)
class CurrentUserGuildMemberKey(CacheKey):
    value_type: ClassVar[Any] = GuildMember

    guild_id: Snowflake

    def parts(self) -> tuple[object, ...]:
        return (*CurrentUserKey().parts(), "Guild", self.guild_id, "Member")


# ═════════════════════════════════════════════════════════════════════════════
# Guilds
# ═════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class GuildKey(CacheKey):
    value_type: ClassVar[Any] = Guild

    guild_id: Snowflake

    def parts(self) -> tuple[object, ...]:
        return ("Guild", self.guild_id)


@dataclass(frozen=True, slots=True)
class GuildPreviewKey(CacheKey):
    value_type: ClassVar[Any] = GuildPreview

    guild_id: Snowflake

    def parts(self) -> tuple[object, ...]:
        return (*GuildKey(self.guild_id).parts(), "Preview")


@dataclass(frozen=True, slots=True)
class GuildChannelsKey(CacheKey):
    value_type: ClassVar[Any] = list[Channel]

    guild_id: Snowflake

    def parts(self) -> tuple[object, ...]:
        return (*GuildKey(self.guild_id).parts(), "Channels")


@dataclass(frozen=True, slots=True)
class EmojiKey(CacheKey):
    value_type: ClassVar[Any] = Emoji

    guild_id: Snowflake
    emoji_id: Snowflake

    def parts(self) -> tuple[object, ...]:
        return (*GuildKey(self.guild_id).parts(), "Emoji", self.emoji_id)


@dataclass(frozen=True, slots=True)
class GuildEmojisKey(CacheKey):
    value_type: ClassVar[Any] = list[Emoji]

    guild_id: Snowflake

    def parts(self) -> tuple[object, ...]:
        return (*GuildKey(self.guild_id).parts(), "Emojis")


@dataclass(frozen=True, slots=True)
class GuildMemberKey(CacheKey):
    value_type: ClassVar[Any] = GuildMember

    guild_id: Snowflake
    user_id: Snowflake

    def parts(self) -> tuple[object, ...]:
        return (*GuildKey(self.guild_id).parts(), "Member", self.user_id)


@dataclass(frozen=True, slots=True)
class GuildMembersKey(CacheKey):
    """One page of the member listing; each distinct page is cached separately."""

    value_type: ClassVar[Any] = list[GuildMember]

    guild_id: Snowflake
    limit: int | None = None
    after: Snowflake | None = None

    def parts(self) -> tuple[object, ...]:
        parts: tuple[object, ...] = (*GuildKey(self.guild_id).parts(), "Members")
        if self.limit is not None:
            parts += ("Limit", self.limit)
        if self.after is not None:
            parts += ("After", self.after)
        return parts


@dataclass(frozen=True, slots=True)
class GuildBanKey(CacheKey):
    value_type: ClassVar[Any] = Ban

    guild_id: Snowflake
    user_id: Snowflake

    def parts(self) -> tuple[object, ...]:
        return (*GuildKey(self.guild_id).parts(), "Ban", self.user_id)


@dataclass(frozen=True, slots=True)
class GuildBansKey(CacheKey):
    value_type: ClassVar[Any] = list[Ban]

    guild_id: Snowflake

    def parts(self) -> tuple[object, ...]:
        return (*GuildKey(self.guild_id).parts(), "Bans")


@dataclass(frozen=True, slots=True)
class GuildRoleKey(CacheKey):
    value_type: ClassVar[Any] = Role

    guild_id: Snowflake
    role_id: Snowflake

    def parts(self) -> tuple[object, ...]:
        return (*GuildKey(self.guild_id).parts(), "Role", self.role_id)


@dataclass(frozen=True, slots=True)
class GuildRolesKey(CacheKey):
    value_type: ClassVar[Any] = list[Role]

    guild_id: Snowflake

    def parts(self) -> tuple[object, ...]:
        return (*GuildKey(self.guild_id).parts(), "Roles")


@dataclass(frozen=True, slots=True)
class GuildVoiceRegionKey(CacheKey):
    value_type: ClassVar[Any] = VoiceRegion

    guild_id: Snowflake
    region_id: str

    def parts(self) -> tuple[object, ...]:
        return (*GuildKey(self.guild_id).parts(), "VoiceRegion", self.region_id)


@dataclass(frozen=True, slots=True)
class GuildVoiceRegionsKey(CacheKey):
    value_type: ClassVar[Any] = list[VoiceRegion]

    guild_id: Snowflake

    def parts(self) -> tuple[object, ...]:
        return (*GuildKey(self.guild_id).parts(), "VoiceRegions")


@dataclass(frozen=True, slots=True)
class GuildInvitesKey(CacheKey):
    value_type: ClassVar[Any] = list[Invite]

    guild_id: Snowflake

    def parts(self) -> tuple[object, ...]:
        return (*GuildKey(self.guild_id).parts(), "Invites")


@dataclass(frozen=True, slots=True)
class GuildIntegrationKey(CacheKey):
    value_type: ClassVar[Any] = Integration

    guild_id: Snowflake
    integration_id: Snowflake

    def parts(self) -> tuple[object, ...]:
        return (*GuildKey(self.guild_id).parts(), "Integration", self.integration_id)


@dataclass(frozen=True, slots=True)
class GuildIntegrationsKey(CacheKey):
    value_type: ClassVar[Any] = list[Integration]

    guild_id: Snowflake

    def parts(self) -> tuple[object, ...]:
        return (*GuildKey(self.guild_id).parts(), "Integrations")


@dataclass(frozen=True, slots=True)
class GuildWidgetSettingsKey(CacheKey):
    value_type: ClassVar[Any] = GuildWidgetSettings

    guild_id: Snowflake

    def parts(self) -> tuple[object, ...]:
        return (*GuildKey(self.guild_id).parts(), "WidgetSettings")


@dataclass(frozen=True, slots=True)
class GuildWelcomeScreenKey(CacheKey):
    value_type: ClassVar[Any] = WelcomeScreen

    guild_id: Snowflake

    def parts(self) -> tuple[object, ...]:
        return (*GuildKey(self.guild_id).parts(), "WelcomeScreen")


@dataclass(frozen=True, slots=True)
class PresenceKey(CacheKey):
    value_type: ClassVar[Any] = Presence

    guild_id: Snowflake
    user_id: Snowflake

    def parts(self) -> tuple[object, ...]:
        return (*GuildKey(self.guild_id).parts(), "Presence", self.user_id)


# ═════════════════════════════════════════════════════════════════════════════
# Webhooks & Interactions
# ═════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class WebhookKey(CacheKey):
    value_type: ClassVar[Any] = Webhook

    webhook_id: Snowflake

    def parts(self) -> tuple[object, ...]:
        return ("Webhook", self.webhook_id)


@dataclass(frozen=True, slots=True)
class ChannelWebhooksKey(CacheKey):
    value_type: ClassVar[Any] = list[Webhook]

    channel_id: Snowflake

    def parts(self) -> tuple[object, ...]:
        return (*ChannelKey(self.channel_id).parts(), "Webhooks")


@dataclass(frozen=True, slots=True)
class GuildWebhooksKey(CacheKey):
    value_type: ClassVar[Any] = list[Webhook]

    guild_id: Snowflake

    def parts(self) -> tuple[object, ...]:
        return (*GuildKey(self.guild_id).parts(), "Webhooks")


@dataclass(frozen=True, slots=True)
class WebhookMessageKey(CacheKey):
    value_type: ClassVar[Any] = Message

    webhook_id: Snowflake
    token: str
    message_id: Snowflake

    def parts(self) -> tuple[object, ...]:
        return (*WebhookKey(self.webhook_id).parts(), self.token, "Message", self.message_id)


@dataclass(frozen=True, slots=True)
class OriginalInteractionMessageKey(CacheKey):
    value_type: ClassVar[Any] = Message

    token: str

    def parts(self) -> tuple[object, ...]:
        return ("Interaction", self.token, "Message", "@original")


@dataclass(frozen=True, slots=True)
class FollowupMessageKey(CacheKey):
    value_type: ClassVar[Any] = Message

    token: str
    message_id: Snowflake

    def parts(self) -> tuple[object, ...]:
        return ("Interaction", self.token, "Message", self.message_id)


# ═════════════════════════════════════════════════════════════════════════════
# Templates & Applications
# ═════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class TemplateKey(CacheKey):
    value_type: ClassVar[Any] = Template

    code: str

    def parts(self) -> tuple[object, ...]:
        return ("Template", self.code)


@dataclass(frozen=True, slots=True)
class GuildTemplatesKey(CacheKey):
    value_type: ClassVar[Any] = list[Template]

    guild_id: Snowflake

    def parts(self) -> tuple[object, ...]:
        return (*GuildKey(self.guild_id).parts(), "Templates")


@dataclass(frozen=True, slots=True)
class CurrentApplicationKey(CacheKey):
    value_type: ClassVar[Any] = Application

    def parts(self) -> tuple[object, ...]:
        return ("Application", SELF)


@dataclass(frozen=True, slots=True)
class CurrentAuthorizationInformationKey(CacheKey):
    value_type: ClassVar[Any] = AuthorizationInformation

    def parts(self) -> tuple[object, ...]:
        return ("Authorization", SELF)
