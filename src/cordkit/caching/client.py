"""Caching REST client assembly."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from cordkit.foundation.config import CacheSettings as CacheConfig
from cordkit.foundation.config import get_settings

from .api import (
    CachingAuditLogAPI,
    CachingChannelAPI,
    CachingEmojiAPI,
    CachingGuildAPI,
    CachingInteractionAPI,
    CachingInviteAPI,
    CachingOAuth2API,
    CachingTemplateAPI,
    CachingUserAPI,
    CachingVoiceAPI,
    CachingWebhookAPI,
)
from .providers import CacheProvider, MemoryCacheProvider
from .service import CacheService
from .settings import CacheSettings

if TYPE_CHECKING:
    from types import TracebackType

    from cordkit.rest import RestClient

logger = logging.getLogger("cordkit.caching")


def build_provider(config: CacheConfig) -> CacheProvider:
    """Memory provider by default, Redis when ``redis_url`` is configured."""
    if config.backend == "redis" and config.redis_url is not None:
        from .providers.redis import RedisCacheProvider

        logger.info(f"Using redis cache provider (prefix {config.prefix!r})")
        return RedisCacheProvider.from_url(config.redis_url.get_secret_value(), prefix=config.prefix)
    return MemoryCacheProvider(max_entries=config.max_entries)


def build_cache_service(config: CacheConfig | None = None) -> CacheService:
    """Create a CacheService from ``CORDKIT_CACHE_*`` configuration."""
    config = config or get_settings().cache
    return CacheService(build_provider(config), CacheSettings.from_config(config))


class CachingRestClient:
    """A RestClient whose endpoint groups read and write through a cache.

    Groups with nothing to cache (applications, gateway) are exposed
    unwrapped.

    Example:
        >>> rest = with_caching(RestClient.from_settings())
        >>> await rest.channels.get_channel(channel_id)  # network
        >>> await rest.channels.get_channel(channel_id)  # cache
    """

    __slots__ = (
        "rest", "cache", "applications", "audit_log", "channels", "emojis", "gateway", "guilds",
        "interactions", "invites", "oauth2", "templates", "users", "voice", "webhooks",
    )

    def __init__(self, rest: RestClient, cache: CacheService) -> None:
        self.rest = rest
        self.cache = cache
        self.applications = rest.applications
        self.gateway = rest.gateway
        self.audit_log = CachingAuditLogAPI(rest.audit_log, cache)
        self.channels = CachingChannelAPI(rest.channels, cache)
        self.emojis = CachingEmojiAPI(rest.emojis, cache)
        self.guilds = CachingGuildAPI(rest.guilds, cache)
        self.interactions = CachingInteractionAPI(rest.interactions, cache)
        self.invites = CachingInviteAPI(rest.invites, cache)
        self.oauth2 = CachingOAuth2API(rest.oauth2, cache)
        self.templates = CachingTemplateAPI(rest.templates, cache)
        self.users = CachingUserAPI(rest.users, cache)
        self.voice = CachingVoiceAPI(rest.voice, cache)
        self.webhooks = CachingWebhookAPI(rest.webhooks, cache)

    async def aclose(self) -> None:
        await self.rest.aclose()

    async def __aenter__(self) -> CachingRestClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()


def with_caching(rest: RestClient, cache: CacheService | None = None) -> CachingRestClient:
    """Wrap ``rest`` with a cache; builds one from configuration when not given."""
    return CachingRestClient(rest, cache or build_cache_service())
