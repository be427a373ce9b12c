"""Configuration loaded from CORDKIT_* environment variables."""

from .settings import (
    CacheSettings,
    CordkitSettings,
    LoggingSettings,
    RestSettings,
    clear_settings_cache,
    get_settings,
)

__all__ = [
    "CordkitSettings", "RestSettings", "CacheSettings", "LoggingSettings",
    "get_settings", "clear_settings_cache",
]
