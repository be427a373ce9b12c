"""Discord payload models."""

from .applications import (
    Application,
    ApplicationCommand,
    ApplicationCommandOption,
    ApplicationCommandOptionChoice,
    ApplicationCommandOptionType,
    ApplicationCommandType,
    AuthorizationInformation,
    Team,
    TeamMember,
)
from .audit_logs import AuditLog, AuditLogChange, AuditLogEntry, AuditLogEvent
from .base import DiscordModel
from .channels import (
    Channel,
    ChannelType,
    FollowedChannel,
    ForumTag,
    PermissionOverwrite,
    PermissionOverwriteType,
    ThreadList,
    ThreadMember,
    ThreadMetadata,
)
from .emojis import Emoji
from .gateway import BotGatewayEndpoint, GatewayEndpoint, SessionStartLimit
from .guilds import (
    Ban,
    ChannelPosition,
    Guild,
    GuildMember,
    GuildPreview,
    GuildWidgetSettings,
    Integration,
    IntegrationAccount,
    PartialGuild,
    PruneCount,
    Role,
    RolePosition,
    RoleTags,
    VanityUrl,
    WelcomeScreen,
    WelcomeScreenChannel,
)
from .interactions import (
    Interaction,
    InteractionCallbackType,
    InteractionData,
    InteractionDataOption,
    InteractionMessageCallbackData,
    InteractionResponse,
    InteractionType,
    ResolvedData,
)
from .invites import Invite, InviteChannel, InviteTargetType
from .messages import (
    AllowedMentions,
    Attachment,
    Embed,
    EmbedAuthor,
    EmbedField,
    EmbedFooter,
    EmbedMedia,
    Message,
    MessageReference,
    MessageType,
    Reaction,
)
from .templates import Template
from .users import Connection, PartialUser, PremiumType, Presence, User
from .voice import VoiceRegion
from .webhooks import Webhook, WebhookType

__all__ = [
    "DiscordModel",
    "User", "PartialUser", "PremiumType", "Connection", "Presence",
    "Channel", "ChannelType", "PermissionOverwrite", "PermissionOverwriteType", "ThreadMetadata",
    "ThreadMember", "ThreadList", "ForumTag", "FollowedChannel",
    "Message", "MessageType", "MessageReference", "Attachment", "Reaction", "AllowedMentions",
    "Embed", "EmbedAuthor", "EmbedField", "EmbedFooter", "EmbedMedia",
    "Emoji",
    "Guild", "GuildMember", "GuildPreview", "PartialGuild", "Role", "RoleTags", "Ban", "Integration",
    "IntegrationAccount", "GuildWidgetSettings", "WelcomeScreen", "WelcomeScreenChannel", "PruneCount",
    "VanityUrl", "ChannelPosition", "RolePosition",
    "Invite", "InviteChannel", "InviteTargetType",
    "Webhook", "WebhookType",
    "Template",
    "Application", "AuthorizationInformation", "Team", "TeamMember",
    "ApplicationCommand", "ApplicationCommandOption", "ApplicationCommandOptionChoice",
    "ApplicationCommandOptionType", "ApplicationCommandType",
    "Interaction", "InteractionType", "InteractionData", "InteractionDataOption", "ResolvedData",
    "InteractionResponse", "InteractionCallbackType", "InteractionMessageCallbackData",
    "AuditLog", "AuditLogEntry", "AuditLogChange", "AuditLogEvent",
    "VoiceRegion",
    "GatewayEndpoint", "BotGatewayEndpoint", "SessionStartLimit",
]
