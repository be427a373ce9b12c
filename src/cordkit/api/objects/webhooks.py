"""Webhooks."""

from __future__ import annotations

from enum import IntEnum

from cordkit.foundation import Snowflake

from .base import DiscordModel
from .users import User


class WebhookType(IntEnum):
    INCOMING = 1
    CHANNEL_FOLLOWER = 2
    APPLICATION = 3


class Webhook(DiscordModel):
    id: Snowflake
    type: WebhookType
    guild_id: Snowflake | None = None
    channel_id: Snowflake | None = None
    user: User | None = None
    name: str | None = None
    avatar: str | None = None
    token: str | None = None
    application_id: Snowflake | None = None
    url: str | None = None
