from __future__ import annotations

import pytest
from pydantic import ValidationError

from govee_web import __version__
from govee_web.main.config import AppSettings, CacheSettings, get_settings
from govee_web.shared.consts import (
    DEFAULT_BIND_ADDR,
    DEFAULT_CACHE_TTL_SECONDS,
    DEFAULT_GOVEE_API_URL,
    DEFAULT_PORT,
    EnumEnvironment,
)


def test_get_settings_loads_defaults(monkeypatch) -> None:
    for key in (
        "GOVEE_REDIS_TTL_SECONDS",
        "GOVEE_BIND_ADDR",
        "GOVEE_PORT",
        "GOVEE_REMOTE_API_URL",
        "ENVIRONMENT",
    ):
        monkeypatch.delenv(key, raising=False)

    settings = get_settings()

    assert settings.environment == EnumEnvironment.DEVELOPMENT
    assert settings.cache.redis_ttl_seconds == DEFAULT_CACHE_TTL_SECONDS
    assert settings.server.bind_addr == DEFAULT_BIND_ADDR
    assert settings.server.port == DEFAULT_PORT
    assert settings.govee.remote_api_url == DEFAULT_GOVEE_API_URL
    assert settings.app.version == __version__


def test_settings_respect_environment_variables(monkeypatch) -> None:
    monkeypatch.setenv("GOVEE_API_KEY", "from-env")
    monkeypatch.setenv("GOVEE_REDIS_URI", "redis://cache:6380/2")
    monkeypatch.setenv("GOVEE_REDIS_TTL_SECONDS", "60")
    monkeypatch.setenv("GOVEE_BIND_ADDR", "0.0.0.0")
    monkeypatch.setenv("GOVEE_PORT", "8080")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")

    settings = AppSettings()

    assert settings.govee.api_key == "from-env"
    assert settings.cache.redis_uri == "redis://cache:6380/2"
    assert settings.cache.redis_ttl_seconds == 60
    assert settings.server.bind_addr == "0.0.0.0"
    assert settings.server.port == 8080
    assert settings.logging.level.value == "DEBUG"


@pytest.mark.parametrize("ttl", ["0", "-5"])
def test_cache_ttl_must_be_positive(monkeypatch, ttl) -> None:
    monkeypatch.setenv("GOVEE_REDIS_TTL_SECONDS", ttl)

    with pytest.raises(ValidationError):
        CacheSettings()


def test_redis_uri_is_required(monkeypatch) -> None:
    monkeypatch.delenv("GOVEE_REDIS_URI", raising=False)

    with pytest.raises(ValidationError):
        CacheSettings(_env_file=None)


def test_summary_masks_api_key(monkeypatch) -> None:
    monkeypatch.setenv("GOVEE_API_KEY", "super-secret-key")

    summary = AppSettings().summary()

    assert "super-secret-key" not in summary
    assert "******" in summary
    assert "redis_ttl:" in summary
