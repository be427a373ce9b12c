"""Aggregate entry point for every REST endpoint group."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from cordkit.foundation.config import RestSettings, get_settings

from .api import (
    RestApplicationAPI,
    RestAuditLogAPI,
    RestChannelAPI,
    RestEmojiAPI,
    RestGatewayAPI,
    RestGuildAPI,
    RestInteractionAPI,
    RestInviteAPI,
    RestOAuth2API,
    RestTemplateAPI,
    RestUserAPI,
    RestVoiceAPI,
    RestWebhookAPI,
)
from .http import RestHttpClient

if TYPE_CHECKING:
    from types import TracebackType


class RestClient:
    """One shared transport, one attribute per endpoint group.

    Example:
        >>> async with RestClient.from_settings() as rest:
        ...     me = (await rest.users.get_current_user()).unwrap()
    """

    __slots__ = (
        "http", "applications", "audit_log", "channels", "emojis", "gateway", "guilds",
        "interactions", "invites", "oauth2", "templates", "users", "voice", "webhooks",
    )

    def __init__(self, http: RestHttpClient) -> None:
        self.http = http
        self.applications = RestApplicationAPI(http)
        self.audit_log = RestAuditLogAPI(http)
        self.channels = RestChannelAPI(http)
        self.emojis = RestEmojiAPI(http)
        self.gateway = RestGatewayAPI(http)
        self.guilds = RestGuildAPI(http)
        self.interactions = RestInteractionAPI(http)
        self.invites = RestInviteAPI(http)
        self.oauth2 = RestOAuth2API(http)
        self.templates = RestTemplateAPI(http)
        self.users = RestUserAPI(http)
        self.voice = RestVoiceAPI(http)
        self.webhooks = RestWebhookAPI(http)

    @classmethod
    def from_settings(cls, settings: RestSettings | None = None, **http_kwargs: Any) -> RestClient:
        """Build a client from explicit settings or the cached environment settings."""
        return cls(RestHttpClient(settings or get_settings().rest, **http_kwargs))

    async def aclose(self) -> None:
        await self.http.aclose()

    async def __aenter__(self) -> RestClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()
