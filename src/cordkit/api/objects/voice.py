"""Voice regions."""

from __future__ import annotations

from .base import DiscordModel


class VoiceRegion(DiscordModel):
    id: str
    name: str
    optimal: bool = False
    deprecated: bool = False
    custom: bool = False
