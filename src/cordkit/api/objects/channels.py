"""Channels, threads and permission overwrites."""

from __future__ import annotations

from datetime import datetime
from enum import IntEnum

from pydantic import Field

from cordkit.foundation import Snowflake

from .base import DiscordModel
from .users import User


class ChannelType(IntEnum):
    GUILD_TEXT = 0
    DM = 1
    GUILD_VOICE = 2
    GROUP_DM = 3
    GUILD_CATEGORY = 4
    GUILD_ANNOUNCEMENT = 5
    ANNOUNCEMENT_THREAD = 10
    PUBLIC_THREAD = 11
    PRIVATE_THREAD = 12
    GUILD_STAGE_VOICE = 13
    GUILD_DIRECTORY = 14
    GUILD_FORUM = 15
    GUILD_MEDIA = 16

    @property
    def is_private(self) -> bool:
        return self in (ChannelType.DM, ChannelType.GROUP_DM)

    @property
    def is_thread(self) -> bool:
        return self in (ChannelType.ANNOUNCEMENT_THREAD, ChannelType.PUBLIC_THREAD, ChannelType.PRIVATE_THREAD)


class PermissionOverwriteType(IntEnum):
    ROLE = 0
    MEMBER = 1


class PermissionOverwrite(DiscordModel):
    id: Snowflake
    type: PermissionOverwriteType
    allow: str = "0"
    deny: str = "0"


class ThreadMetadata(DiscordModel):
    archived: bool = False
    auto_archive_duration: int = 1440
    archive_timestamp: datetime | None = None
    locked: bool = False
    invitable: bool | None = None
    create_timestamp: datetime | None = None


class ThreadMember(DiscordModel):
    id: Snowflake | None = None
    user_id: Snowflake | None = None
    join_timestamp: datetime | None = None
    flags: int = 0


class ForumTag(DiscordModel):
    id: Snowflake
    name: str
    moderated: bool = False
    emoji_id: Snowflake | None = None
    emoji_name: str | None = None


class Channel(DiscordModel):
    id: Snowflake
    type: ChannelType
    guild_id: Snowflake | None = None
    position: int | None = None
    permission_overwrites: list[PermissionOverwrite] | None = None
    name: str | None = None
    topic: str | None = None
    nsfw: bool | None = None
    last_message_id: Snowflake | None = None
    bitrate: int | None = None
    user_limit: int | None = None
    rate_limit_per_user: int | None = None
    recipients: list[User] | None = None
    icon: str | None = None
    owner_id: Snowflake | None = None
    application_id: Snowflake | None = None
    parent_id: Snowflake | None = None
    last_pin_timestamp: datetime | None = None
    rtc_region: str | None = None
    video_quality_mode: int | None = None
    message_count: int | None = None
    member_count: int | None = None
    thread_metadata: ThreadMetadata | None = None
    member: ThreadMember | None = None
    default_auto_archive_duration: int | None = None
    permissions: str | None = None
    flags: int | None = None
    available_tags: list[ForumTag] | None = None
    applied_tags: list[Snowflake] | None = None

    @property
    def mention(self) -> str:
        return f"<#{self.id}>"


class FollowedChannel(DiscordModel):
    channel_id: Snowflake
    webhook_id: Snowflake


class ThreadList(DiscordModel):
    """Response of the archived/active thread listing endpoints."""
    threads: list[Channel] = Field(default_factory=list)
    members: list[ThreadMember] = Field(default_factory=list)
    has_more: bool = False
