"""
Domain Errors

This module defines the error taxonomy shared by every layer. Errors that
wrap a lower-level failure keep it on ``cause`` and are raised with
``raise ... from`` so the original traceback is preserved.
"""

from typing import Any, Dict, Optional


class DomainError(Exception):
    """Base class for domain errors."""

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[BaseException] = None,
    ):
        self.message = message
        self.details = details or {}
        self.cause = cause
        super().__init__(message)


class DeviceNotFoundError(DomainError):
    """Raised when a device identifier is not in the directory."""

    def __init__(self, device_id: str, details: Optional[Dict[str, Any]] = None):
        self.device_id = device_id
        super().__init__(f"Unknown device '{device_id}'", details)


class InvalidColorError(DomainError):
    """Raised when a color string cannot be parsed."""

    def __init__(self, value: str, details: Optional[Dict[str, Any]] = None):
        self.value = value
        super().__init__(f"Invalid color '{value}'", details)


class UpstreamError(DomainError):
    """Raised when a call to the Govee API fails."""


class DeviceRepositoryError(DomainError):
    """Base class for failures of the device directory cache."""


class CacheConnectionError(DeviceRepositoryError):
    """The cache backend is unreachable or timed out."""


class CacheReadError(DeviceRepositoryError):
    """The cache backend is reachable but reading the directory failed."""


class CacheWriteError(DeviceRepositoryError):
    """The cache backend is reachable but storing the directory failed."""


class CacheHealthCheckError(DeviceRepositoryError):
    """The cache backend rejected the health check write."""


class DirectorySerializationError(DeviceRepositoryError):
    """A directory payload could not be encoded or decoded."""
