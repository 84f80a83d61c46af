"""
Domain Entities Package

This package contains the core domain entities and errors.
"""

from .device import (
    Color,
    ColorTemperatureRange,
    Device,
    DeviceDirectory,
    DeviceState,
    PowerState,
)
from .errors import (
    CacheConnectionError,
    CacheHealthCheckError,
    CacheReadError,
    CacheWriteError,
    DeviceNotFoundError,
    DeviceRepositoryError,
    DirectorySerializationError,
    DomainError,
    InvalidColorError,
    UpstreamError,
)
from .health import HealthStatus, ServiceHealth

__all__ = [
    "Color",
    "ColorTemperatureRange",
    "Device",
    "DeviceDirectory",
    "DeviceState",
    "PowerState",
    "HealthStatus",
    "ServiceHealth",
    "DomainError",
    "DeviceNotFoundError",
    "InvalidColorError",
    "UpstreamError",
    "DeviceRepositoryError",
    "CacheConnectionError",
    "CacheReadError",
    "CacheWriteError",
    "CacheHealthCheckError",
    "DirectorySerializationError",
]
