"""
Repositories Package - Infrastructure Layer

This package contains concrete implementations of the repository
interfaces defined in the domain layer.
"""

from .redis_device_repository import RedisDeviceRepository, create_redis_client

__all__ = ["RedisDeviceRepository", "create_redis_client"]
