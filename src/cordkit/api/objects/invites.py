"""Invites and invite metadata."""

from __future__ import annotations

from datetime import datetime
from enum import IntEnum

from cordkit.foundation import Snowflake

from .base import DiscordModel
from .guilds import PartialGuild
from .users import User


class InviteTargetType(IntEnum):
    STREAM = 1
    EMBEDDED_APPLICATION = 2


class InviteChannel(DiscordModel):
    id: Snowflake
    name: str | None = None
    type: int


class Invite(DiscordModel):
    """Invite object; the metadata fields are only filled on channel/guild listings."""
    code: str
    guild: PartialGuild | None = None
    channel: InviteChannel | None = None
    inviter: User | None = None
    target_type: InviteTargetType | None = None
    target_user: User | None = None
    approximate_presence_count: int | None = None
    approximate_member_count: int | None = None
    expires_at: datetime | None = None
    # Metadata
    uses: int | None = None
    max_uses: int | None = None
    max_age: int | None = None
    temporary: bool | None = None
    created_at: datetime | None = None

    @property
    def url(self) -> str:
        return f"https://discord.gg/{self.code}"
