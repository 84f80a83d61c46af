"""
Device Repository Interface - Domain Layer

This module defines the interface for the device directory cache.
"""

from abc import ABC, abstractmethod

from govee_web.domain.entities.device import DeviceDirectory


class IDeviceRepository(ABC):
    """Interface for serving the device directory."""

    @abstractmethod
    async def list(self) -> DeviceDirectory:
        """
        Return the device directory, from cache when possible.

        Raises:
            DeviceRepositoryError: If the cache backend fails
            UpstreamError: If the directory had to be fetched and that failed
        """
        pass

    @abstractmethod
    async def health_check(self) -> None:
        """
        Verify that the backing store accepts writes.

        Raises:
            DeviceRepositoryError: If the sentinel write fails
        """
        pass
