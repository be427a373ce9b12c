"""Custom and unicode emoji."""

from __future__ import annotations

from pydantic import Field

from cordkit.foundation import Snowflake

from .base import DiscordModel
from .users import User


class Emoji(DiscordModel):
    """Emoji object. Unicode emoji have no id."""
    id: Snowflake | None = None
    name: str | None = None
    roles: list[Snowflake] = Field(default_factory=list)
    user: User | None = None
    require_colons: bool | None = None
    managed: bool | None = None
    animated: bool | None = None
    available: bool | None = None

    @property
    def reaction_code(self) -> str:
        """The ``name:id`` form used in reaction endpoints (or the raw unicode)."""
        return f"{self.name}:{self.id}" if self.id is not None else (self.name or "")
