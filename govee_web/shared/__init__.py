"""
Shared module - Cross-cutting concerns / Shared Layer

This module provides shared utilities, constants, and enums that are used
across multiple layers of the service.

Its primary responsibilities include:
- Defining cross-layer constants (environment names, log levels, defaults)
- Configuring structured logging
- Resolving Docker-style secret files into environment variables

The shared module must not depend on Infrastructure or Frameworks.
"""

from .consts import (
    DEFAULT_BIND_ADDR,
    DEFAULT_CACHE_TTL_SECONDS,
    DEFAULT_GOVEE_API_URL,
    DEFAULT_PORT,
    EnumEnvironment,
    EnumLogLevel,
)
from .logging import (
    bind_request_context,
    clear_request_context,
    configure_logging,
    get_logger,
    update_logging_from_settings,
)

__all__ = [
    "DEFAULT_BIND_ADDR",
    "DEFAULT_CACHE_TTL_SECONDS",
    "DEFAULT_GOVEE_API_URL",
    "DEFAULT_PORT",
    "EnumEnvironment",
    "EnumLogLevel",
    "bind_request_context",
    "clear_request_context",
    "configure_logging",
    "get_logger",
    "update_logging_from_settings",
]
