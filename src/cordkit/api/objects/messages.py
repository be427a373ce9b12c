"""Messages, embeds, attachments and reactions."""

from __future__ import annotations

from datetime import datetime
from enum import IntEnum
from typing import Literal

from pydantic import Field

from cordkit.foundation import Snowflake

from .base import DiscordModel
from .channels import Channel
from .emojis import Emoji
from .users import User


class MessageType(IntEnum):
    DEFAULT = 0
    RECIPIENT_ADD = 1
    RECIPIENT_REMOVE = 2
    CALL = 3
    CHANNEL_NAME_CHANGE = 4
    CHANNEL_ICON_CHANGE = 5
    CHANNEL_PINNED_MESSAGE = 6
    USER_JOIN = 7
    GUILD_BOOST = 8
    GUILD_BOOST_TIER_1 = 9
    GUILD_BOOST_TIER_2 = 10
    GUILD_BOOST_TIER_3 = 11
    CHANNEL_FOLLOW_ADD = 12
    GUILD_DISCOVERY_DISQUALIFIED = 14
    GUILD_DISCOVERY_REQUALIFIED = 15
    GUILD_DISCOVERY_GRACE_PERIOD_INITIAL_WARNING = 16
    GUILD_DISCOVERY_GRACE_PERIOD_FINAL_WARNING = 17
    THREAD_CREATED = 18
    REPLY = 19
    CHAT_INPUT_COMMAND = 20
    THREAD_STARTER_MESSAGE = 21
    GUILD_INVITE_REMINDER = 22
    CONTEXT_MENU_COMMAND = 23
    AUTO_MODERATION_ACTION = 24
    ROLE_SUBSCRIPTION_PURCHASE = 25
    INTERACTION_PREMIUM_UPSELL = 26
    STAGE_START = 27
    STAGE_END = 28
    STAGE_SPEAKER = 29
    STAGE_TOPIC = 31
    GUILD_APPLICATION_PREMIUM_SUBSCRIPTION = 32


class Attachment(DiscordModel):
    id: Snowflake
    filename: str
    description: str | None = None
    content_type: str | None = None
    size: int = 0
    url: str
    proxy_url: str | None = None
    height: int | None = None
    width: int | None = None
    ephemeral: bool | None = None


class EmbedFooter(DiscordModel):
    text: str
    icon_url: str | None = None
    proxy_icon_url: str | None = None


class EmbedMedia(DiscordModel):
    """Image, thumbnail or video of an embed."""
    url: str | None = None
    proxy_url: str | None = None
    height: int | None = None
    width: int | None = None


class EmbedProvider(DiscordModel):
    name: str | None = None
    url: str | None = None


class EmbedAuthor(DiscordModel):
    name: str
    url: str | None = None
    icon_url: str | None = None
    proxy_icon_url: str | None = None


class EmbedField(DiscordModel):
    name: str
    value: str
    inline: bool | None = None


class Embed(DiscordModel):
    title: str | None = None
    type: str | None = None
    description: str | None = None
    url: str | None = None
    timestamp: datetime | None = None
    color: int | None = None
    footer: EmbedFooter | None = None
    image: EmbedMedia | None = None
    thumbnail: EmbedMedia | None = None
    video: EmbedMedia | None = None
    provider: EmbedProvider | None = None
    author: EmbedAuthor | None = None
    fields: list[EmbedField] | None = None


class Reaction(DiscordModel):
    count: int
    me: bool = False
    emoji: Emoji


class MessageReference(DiscordModel):
    message_id: Snowflake | None = None
    channel_id: Snowflake | None = None
    guild_id: Snowflake | None = None
    fail_if_not_exists: bool | None = None


class AllowedMentions(DiscordModel):
    parse: list[Literal["roles", "users", "everyone"]] | None = None
    roles: list[Snowflake] | None = None
    users: list[Snowflake] | None = None
    replied_user: bool | None = None


class StickerItem(DiscordModel):
    id: Snowflake
    name: str
    format_type: int


class ChannelMention(DiscordModel):
    id: Snowflake
    guild_id: Snowflake
    type: int
    name: str


class Message(DiscordModel):
    id: Snowflake
    channel_id: Snowflake
    author: User
    content: str = ""
    timestamp: datetime
    edited_timestamp: datetime | None = None
    tts: bool = False
    mention_everyone: bool = False
    mentions: list[User] = Field(default_factory=list)
    mention_roles: list[Snowflake] = Field(default_factory=list)
    mention_channels: list[ChannelMention] | None = None
    attachments: list[Attachment] = Field(default_factory=list)
    embeds: list[Embed] = Field(default_factory=list)
    reactions: list[Reaction] | None = None
    nonce: int | str | None = None
    pinned: bool = False
    webhook_id: Snowflake | None = None
    type: MessageType = MessageType.DEFAULT
    application_id: Snowflake | None = None
    message_reference: MessageReference | None = None
    flags: int | None = None
    referenced_message: Message | None = None
    thread: Channel | None = None
    components: list[dict] | None = None
    sticker_items: list[StickerItem] | None = None
    position: int | None = None

    @property
    def jump_url(self) -> str:
        return f"https://discord.com/channels/{self.channel_id}/{self.id}"
