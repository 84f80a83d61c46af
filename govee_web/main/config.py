"""
Application Settings - Main Layer

Use Pydantic Settings for configuration management.
Settings come from environment variables, a ``.env`` file and defaults,
and are loaded once at startup. The Govee and Redis settings share the
``GOVEE_`` prefix, e.g. ``GOVEE_API_KEY`` and ``GOVEE_REDIS_URI``.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from govee_web import __version__
from govee_web.shared import (
    DEFAULT_BIND_ADDR,
    DEFAULT_CACHE_TTL_SECONDS,
    DEFAULT_GOVEE_API_URL,
    DEFAULT_PORT,
    EnumEnvironment,
    EnumLogLevel,
)
from govee_web.shared.env import load_secret_file_variables

load_secret_file_variables()


class GoveeSettings(BaseSettings):
    """Govee API configuration settings."""

    api_key: str = Field(description="Govee developer API key")
    remote_api_url: str = Field(
        default=DEFAULT_GOVEE_API_URL, description="Govee API base URL"
    )
    request_timeout_seconds: float = Field(
        default=10.0, gt=0, description="Timeout for Govee API requests"
    )

    model_config = SettingsConfigDict(
        env_prefix="GOVEE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


class CacheSettings(BaseSettings):
    """Redis cache configuration settings."""

    redis_uri: str = Field(description="Redis connection URI")
    redis_ttl_seconds: int = Field(
        default=DEFAULT_CACHE_TTL_SECONDS,
        gt=0,
        description="Expiry of the cached device directory",
    )
    redis_socket_timeout_seconds: float = Field(
        default=5.0, gt=0, description="Redis connect and socket timeout"
    )

    model_config = SettingsConfigDict(
        env_prefix="GOVEE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


class ServerSettings(BaseSettings):
    """HTTP server configuration settings."""

    bind_addr: str = Field(default=DEFAULT_BIND_ADDR, description="Bind address")
    port: int = Field(default=DEFAULT_PORT, ge=0, le=65535, description="Port")

    model_config = SettingsConfigDict(
        env_prefix="GOVEE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


class AppInfoSettings(BaseSettings):
    """Service metadata settings."""

    title: str = Field(default="Govee Web", description="Service title")
    description: str = Field(
        default="A small web service for controlling Govee light strips",
        description="Service description",
    )
    version: str = Field(default=__version__, description="Service version")

    model_config = SettingsConfigDict(
        env_prefix="APP_", case_sensitive=False, extra="ignore"
    )


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    level: EnumLogLevel = Field(default=EnumLogLevel.INFO, description="Logging level")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Logging format",
    )
    file_path: Optional[str] = Field(
        default=None, description="Log file path (if None, logs to console)"
    )

    model_config = SettingsConfigDict(
        env_prefix="LOG_", case_sensitive=False, extra="ignore"
    )


class AppSettings(BaseSettings):
    """Main application settings, aggregating all sub-settings."""

    environment: EnumEnvironment = Field(
        default=EnumEnvironment.DEVELOPMENT, description="Application environment"
    )

    govee: GoveeSettings = Field(default_factory=GoveeSettings)
    cache: CacheSettings = Field(default_factory=CacheSettings)
    server: ServerSettings = Field(default_factory=ServerSettings)
    app: AppInfoSettings = Field(default_factory=AppInfoSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_nested_delimiter="__",
        extra="ignore",
    )

    def summary(self) -> str:
        """Human readable summary with the API key masked."""
        return "\n".join(
            [
                "Settings: ",
                "  api_key:        ******",
                f"  remote_api_url: {self.govee.remote_api_url}",
                f"  redis_uri:      {self.cache.redis_uri}",
                f"  redis_ttl:      {self.cache.redis_ttl_seconds}s",
                f"  bind_addr:      {self.server.bind_addr}",
                f"  port:           {self.server.port}",
            ]
        )


def get_settings() -> AppSettings:
    """
    Get application settings instance Factory.

    Used to be mocked in tests, allowing different settings per test.
    """
    return AppSettings()
