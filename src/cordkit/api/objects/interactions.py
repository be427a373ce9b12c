"""Interactions and interaction responses."""

from __future__ import annotations

from enum import IntEnum
from typing import Any

from pydantic import Field

from cordkit.foundation import Snowflake

from .base import DiscordModel
from .channels import Channel
from .guilds import GuildMember, Role
from .messages import AllowedMentions, Attachment, Embed, Message
from .users import User


class InteractionType(IntEnum):
    PING = 1
    APPLICATION_COMMAND = 2
    MESSAGE_COMPONENT = 3
    APPLICATION_COMMAND_AUTOCOMPLETE = 4
    MODAL_SUBMIT = 5


class InteractionCallbackType(IntEnum):
    PONG = 1
    CHANNEL_MESSAGE_WITH_SOURCE = 4
    DEFERRED_CHANNEL_MESSAGE_WITH_SOURCE = 5
    DEFERRED_UPDATE_MESSAGE = 6
    UPDATE_MESSAGE = 7
    APPLICATION_COMMAND_AUTOCOMPLETE_RESULT = 8
    MODAL = 9


class ResolvedData(DiscordModel):
    """Entities referenced by command options, keyed by id."""
    users: dict[Snowflake, User] | None = None
    members: dict[Snowflake, GuildMember] | None = None
    roles: dict[Snowflake, Role] | None = None
    channels: dict[Snowflake, Channel] | None = None
    messages: dict[Snowflake, Message] | None = None
    attachments: dict[Snowflake, Attachment] | None = None


class InteractionDataOption(DiscordModel):
    name: str
    type: int
    value: str | int | float | bool | None = None
    options: list[InteractionDataOption] | None = None
    focused: bool | None = None


class InteractionData(DiscordModel):
    id: Snowflake | None = None
    name: str | None = None
    type: int | None = None
    resolved: ResolvedData | None = None
    options: list[InteractionDataOption] | None = None
    guild_id: Snowflake | None = None
    target_id: Snowflake | None = None
    custom_id: str | None = None
    component_type: int | None = None
    values: list[str] | None = None
    components: list[dict[str, Any]] | None = None


class Interaction(DiscordModel):
    id: Snowflake
    application_id: Snowflake
    type: InteractionType
    data: InteractionData | None = None
    guild_id: Snowflake | None = None
    channel_id: Snowflake | None = None
    channel: Channel | None = None
    member: GuildMember | None = None
    user: User | None = None
    token: str
    version: int = 1
    message: Message | None = None
    app_permissions: str | None = None
    locale: str | None = None
    guild_locale: str | None = None


class InteractionMessageCallbackData(DiscordModel):
    tts: bool | None = None
    content: str | None = None
    embeds: list[Embed] | None = None
    allowed_mentions: AllowedMentions | None = None
    flags: int | None = None
    components: list[dict[str, Any]] | None = None
    choices: list[dict[str, Any]] | None = None
    custom_id: str | None = None
    title: str | None = None


class InteractionResponse(DiscordModel):
    type: InteractionCallbackType
    data: InteractionMessageCallbackData | None = Field(default=None)
