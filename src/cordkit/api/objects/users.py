"""Users, connections and presences."""

from __future__ import annotations

from enum import IntEnum
from typing import Any

from pydantic import Field

from cordkit.foundation import Snowflake

from .base import DiscordModel


class PremiumType(IntEnum):
    NONE = 0
    NITRO_CLASSIC = 1
    NITRO = 2
    NITRO_BASIC = 3


class User(DiscordModel):
    id: Snowflake
    username: str
    discriminator: str = "0"
    global_name: str | None = None
    avatar: str | None = None
    bot: bool = False
    system: bool = False
    mfa_enabled: bool | None = None
    banner: str | None = None
    accent_color: int | None = None
    locale: str | None = None
    verified: bool | None = None
    email: str | None = None
    flags: int | None = None
    premium_type: PremiumType | None = None
    public_flags: int | None = None

    @property
    def mention(self) -> str:
        return f"<@{self.id}>"


class PartialUser(DiscordModel):
    """User object as sent inside presence updates; only the id is guaranteed."""
    id: Snowflake
    username: str | None = None
    avatar: str | None = None


class Connection(DiscordModel):
    id: str
    name: str
    type: str
    revoked: bool = False
    integrations: list[dict[str, Any]] = Field(default_factory=list)
    verified: bool = False
    friend_sync: bool = False
    show_activity: bool = False
    two_way_link: bool = False
    visibility: int = 0


class Presence(DiscordModel):
    user: PartialUser
    guild_id: Snowflake | None = None
    status: str = "offline"
    activities: list[dict[str, Any]] = Field(default_factory=list)
    client_status: dict[str, str] = Field(default_factory=dict)
