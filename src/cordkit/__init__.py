"""Cordkit - Typed Discord REST client with a transparent caching layer.

Every endpoint returns a ``Result``: ``Ok`` with a validated pydantic model,
or ``Err`` with a ``RestError`` describing what went wrong. Wrapping the
client with ``with_caching`` serves reads from a cache that writes and
deletions keep current.

Quick Start:
    >>> from cordkit import RestClient
    >>>
    >>> async with RestClient.from_settings() as rest:  # CORDKIT_REST_TOKEN=...
    ...     result = await rest.channels.get_channel(channel_id)
    ...     if result.is_ok():
    ...         print(result.unwrap().name)

With Caching:
    >>> from cordkit import RestClient, with_caching
    >>>
    >>> async with with_caching(RestClient.from_settings()) as rest:
    ...     await rest.guilds.get_guild(guild_id)  # fetched and cached
    ...     await rest.guilds.get_guild(guild_id)  # served from the cache

Gateway Events:
    >>> from cordkit import EarlyCacheResponder, LateCacheResponder, parse_event
    >>> early = EarlyCacheResponder(rest.cache)
    >>> await early.respond(parse_event("MESSAGE_CREATE", payload))

Configuration (environment):
    CORDKIT_REST_TOKEN, CORDKIT_CACHE_ABSOLUTE_EXPIRATION,
    CORDKIT_CACHE_REDIS_URL, CORDKIT_LOG_LEVEL
"""

from .api.events import parse_event
from .caching import (
    CacheKey,
    CacheService,
    CacheSettings,
    CachingRestClient,
    EarlyCacheResponder,
    LateCacheResponder,
    MemoryCacheProvider,
    build_cache_service,
    with_caching,
)
from .foundation import (
    UNSET,
    CordkitError,
    DiscordErrorCode,
    Err,
    ErrorCode,
    Ok,
    RestError,
    RestResult,
    Result,
    Snowflake,
    unwrap_or_raise,
)
from .foundation.config import CordkitSettings, get_settings
from .foundation.logging import configure_logging
from .rest import BearerAuth, BotAuth, RestClient, RestHttpClient

__version__ = "0.1.0"

__all__ = [
    # Core
    "Snowflake", "UNSET",
    "Result", "Ok", "Err", "RestResult", "RestError", "ErrorCode", "DiscordErrorCode",
    "CordkitError", "unwrap_or_raise",
    # REST
    "RestClient", "RestHttpClient", "BotAuth", "BearerAuth",
    # Caching
    "CachingRestClient", "with_caching", "build_cache_service",
    "CacheService", "CacheSettings", "CacheKey", "MemoryCacheProvider",
    "EarlyCacheResponder", "LateCacheResponder",
    # Events
    "parse_event",
    # Config
    "CordkitSettings", "get_settings", "configure_logging",
    # Version
    "__version__",
]
