"""Settings for the REST transport, the cache and logging.

Values come from ``CORDKIT_*`` environment variables (or a ``.env`` file)
and are validated once; ``get_settings`` hands out the same instance until
``clear_settings_cache`` is called.

Example:
    >>> from cordkit.foundation.config import get_settings
    >>> settings = get_settings()
    >>> settings.cache.absolute_expiration
    30.0
    >>> settings.rest.base_url
    'https://discord.com/api/v10/'

    # CORDKIT_REST_TOKEN=...
    # CORDKIT_CACHE_REDIS_URL=redis://localhost:6379/0
    # CORDKIT_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

from functools import lru_cache
from typing import Annotated, Literal

from pydantic import Field, NonNegativeFloat, PositiveFloat, PositiveInt, SecretStr, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class RestSettings(BaseSettings):
    """REST transport configuration."""

    model_config = SettingsConfigDict(
        env_prefix="CORDKIT_REST_",
        extra="ignore",
    )

    token: SecretStr | None = Field(default=None, description="Bot or OAuth2 bearer token")
    token_type: Literal["bot", "bearer"] = "bot"
    base_url: str = "https://discord.com/api/v10/"
    timeout: PositiveFloat = Field(default=30.0, description="Request timeout in seconds")
    user_agent: str = "DiscordBot (https://github.com/cordkit/cordkit, 0.1.0)"
    max_retries: Annotated[int, Field(ge=0, le=10)] = 3
    retry_base_delay: PositiveFloat = Field(default=1.0, description="Base backoff delay in seconds")
    retry_max_delay: PositiveFloat = Field(default=30.0, description="Backoff ceiling in seconds")

    @field_validator("base_url")
    @classmethod
    def _trailing_slash(cls, v: str) -> str:
        """Relative endpoints resolve under the versioned path only with a trailing slash."""
        return v if v.endswith("/") else f"{v}/"


class CacheSettings(BaseSettings):
    """Cache-related configuration. Durations are in seconds; 0 disables caching."""

    model_config = SettingsConfigDict(
        env_prefix="CORDKIT_CACHE_",
        extra="ignore",
    )

    enabled: bool = True
    absolute_expiration: NonNegativeFloat = 30.0
    sliding_expiration: NonNegativeFloat | None = 10.0
    eviction_absolute_expiration: NonNegativeFloat = 30.0
    eviction_sliding_expiration: NonNegativeFloat | None = 10.0
    max_entries: PositiveInt = Field(default=10_000, description="In-memory capacity before eviction")
    redis_url: SecretStr | None = Field(default=None, description="Redis URL for a distributed cache")
    prefix: str = "cordkit:"

    @computed_field
    @property
    def backend(self) -> Literal["memory", "redis"]:
        """Redis whenever a URL is configured."""
        return "redis" if self.redis_url else "memory"


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="CORDKIT_LOG_",
        extra="ignore",
    )

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: Literal["json", "text"] = "text"


class CordkitSettings(BaseSettings):
    """Root settings.

    Example environment variables:
        CORDKIT_REST_TOKEN=...
        CORDKIT_REST_TOKEN_TYPE=bearer
        CORDKIT_CACHE_ABSOLUTE_EXPIRATION=60
        CORDKIT_LOG_LEVEL=DEBUG
    """

    model_config = SettingsConfigDict(
        env_prefix="CORDKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    rest: RestSettings = Field(default_factory=RestSettings)
    cache: CacheSettings = Field(default_factory=CacheSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


@lru_cache(maxsize=1)
def get_settings() -> CordkitSettings:
    """Get the global settings instance (cached)."""
    return CordkitSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing)."""
    get_settings.cache_clear()
