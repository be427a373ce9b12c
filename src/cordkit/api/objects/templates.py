"""Guild templates."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from cordkit.foundation import Snowflake

from .base import DiscordModel
from .users import User


class Template(DiscordModel):
    code: str
    name: str
    description: str | None = None
    usage_count: int = 0
    creator_id: Snowflake
    creator: User
    created_at: datetime
    updated_at: datetime
    source_guild_id: Snowflake
    serialized_source_guild: dict[str, Any]
    is_dirty: bool | None = None
