"""
Govee Gateway Interface - Domain Layer

This module defines the interface for communicating with the Govee API.
"""

from abc import ABC, abstractmethod

from govee_web.domain.entities.device import (
    Color,
    Device,
    DeviceDirectory,
    DeviceState,
    PowerState,
)


class IGoveeGateway(ABC):
    """Interface for the upstream Govee API client."""

    @abstractmethod
    async def fetch_devices(self) -> DeviceDirectory:
        """
        Retrieve the live device directory.

        Raises:
            UpstreamError: If the Govee API call fails
        """
        pass

    @abstractmethod
    async def get_state(self, device: Device) -> DeviceState:
        """Retrieve the live state of a device."""
        pass

    @abstractmethod
    async def turn(self, device: Device, state: PowerState) -> None:
        """Switch a device on or off."""
        pass

    @abstractmethod
    async def set_color(self, device: Device, color: Color) -> None:
        """Set the color of a device."""
        pass
