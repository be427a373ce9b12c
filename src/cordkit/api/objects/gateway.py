"""Gateway connection info returned by the REST API."""

from __future__ import annotations

from .base import DiscordModel


class GatewayEndpoint(DiscordModel):
    url: str


class SessionStartLimit(DiscordModel):
    total: int
    remaining: int
    reset_after: int
    max_concurrency: int


class BotGatewayEndpoint(GatewayEndpoint):
    shards: int
    session_start_limit: SessionStartLimit
