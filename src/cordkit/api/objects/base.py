"""Common base for Discord payload models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class DiscordModel(BaseModel):
    """Immutable payload model.

    Unknown fields are ignored so new API additions never break parsing.
    Field names follow the wire format (snake_case), so models validate
    straight from response JSON.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        revalidate_instances="never",
    )
