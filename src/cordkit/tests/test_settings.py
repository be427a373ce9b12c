"""Tests for environment configuration and cache expiration settings."""

from __future__ import annotations

from datetime import timedelta

import pytest

from cordkit.api.objects import Message, Presence, Role
from cordkit.caching import CacheEntryOptions, CacheSettings, MemoryCacheProvider, build_cache_service
from cordkit.foundation.config import CacheSettings as CacheConfig
from cordkit.foundation.config import RestSettings, clear_settings_cache, get_settings
from cordkit.rest import BearerAuth, BotAuth, auth_from_settings


@pytest.fixture(autouse=True)
def fresh_settings() -> object:
    clear_settings_cache()
    yield
    clear_settings_cache()


# ═════════════════════════════════════════════════════════════════════════════
# Environment
# ═════════════════════════════════════════════════════════════════════════════


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("CORDKIT_REST_TOKEN", "CORDKIT_CACHE_REDIS_URL", "CORDKIT_CACHE_ABSOLUTE_EXPIRATION"):
        monkeypatch.delenv(name, raising=False)
    settings = get_settings()
    assert settings.rest.base_url == "https://discord.com/api/v10/"
    assert settings.cache.absolute_expiration == 30.0
    assert settings.cache.backend == "memory"
    assert get_settings() is settings


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CORDKIT_REST_TOKEN", "abc")
    monkeypatch.setenv("CORDKIT_REST_TOKEN_TYPE", "bearer")
    monkeypatch.setenv("CORDKIT_CACHE_ABSOLUTE_EXPIRATION", "60")
    monkeypatch.setenv("CORDKIT_CACHE_REDIS_URL", "redis://localhost:6379/0")
    settings = get_settings()
    assert settings.rest.token is not None and settings.rest.token.get_secret_value() == "abc"
    assert settings.cache.absolute_expiration == 60.0
    assert settings.cache.backend == "redis"
    assert isinstance(auth_from_settings(settings.rest), BearerAuth)


def test_base_url_gets_trailing_slash() -> None:
    assert RestSettings(base_url="https://example.test/api").base_url == "https://example.test/api/"


def test_auth_from_settings() -> None:
    assert auth_from_settings(RestSettings(token=None)) is None
    assert auth_from_settings(RestSettings(token="  ")) is None
    auth = auth_from_settings(RestSettings(token="t"))
    assert isinstance(auth, BotAuth)
    assert auth.apply({}) == {"Authorization": "Bot t"}
    assert auth.model_dump()["token"] == "***"


# ═════════════════════════════════════════════════════════════════════════════
# Cache expirations
# ═════════════════════════════════════════════════════════════════════════════


def test_default_expirations() -> None:
    settings = CacheSettings()
    assert settings.get_entry_options(Message) == CacheEntryOptions(timedelta(seconds=30), timedelta(seconds=10))
    assert settings.get_eviction_options(Message) == CacheEntryOptions(timedelta(seconds=30), timedelta(seconds=10))


def test_per_type_overrides() -> None:
    settings = (
        CacheSettings()
        .set_absolute_expiration(Message, timedelta(minutes=5))
        .set_sliding_expiration(Message, None)
        .set_absolute_expiration(Presence, timedelta(0))
        .set_eviction_absolute_expiration(list[Role], timedelta(seconds=1))
    )
    assert settings.get_entry_options(Message) == CacheEntryOptions(timedelta(minutes=5), None)
    assert settings.get_entry_options(Presence).disabled
    assert not settings.get_entry_options(Role).disabled
    assert settings.get_eviction_absolute_expiration(list[Role]) == timedelta(seconds=1)
    assert settings.get_eviction_absolute_expiration(Role) == timedelta(seconds=30)


def test_default_setters() -> None:
    settings = CacheSettings().set_default_absolute_expiration(None).set_default_eviction_sliding_expiration(None)
    assert settings.get_absolute_expiration(Role) is None
    assert settings.get_eviction_sliding_expiration(Role) is None


def test_from_config() -> None:
    config = CacheConfig(absolute_expiration=5, sliding_expiration=None, eviction_absolute_expiration=0)
    settings = CacheSettings.from_config(config)
    assert settings.get_entry_options(Role) == CacheEntryOptions(timedelta(seconds=5), None)
    assert settings.get_eviction_options(Role).disabled


def test_disabled_config_disables_every_type() -> None:
    settings = CacheSettings.from_config(CacheConfig(enabled=False))
    assert settings.get_entry_options(Message).disabled


def test_build_cache_service_defaults_to_memory() -> None:
    service = build_cache_service(CacheConfig(redis_url=None, max_entries=50))
    assert isinstance(service.provider, MemoryCacheProvider)


def test_build_provider_uses_redis_url() -> None:
    from cordkit.caching import RedisCacheProvider, build_provider

    provider = build_provider(CacheConfig(redis_url="redis://localhost:6379/0", prefix="bot:"))
    assert isinstance(provider, RedisCacheProvider)
