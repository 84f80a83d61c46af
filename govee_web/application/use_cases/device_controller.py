"""
Device Controller - Application Layer

Resolves device identifiers against the cached directory and forwards
commands to the Govee API.
"""

from govee_web.domain.entities.device import (
    Color,
    Device,
    DeviceDirectory,
    DeviceState,
    PowerState,
)
from govee_web.domain.entities.errors import DeviceNotFoundError
from govee_web.domain.gateways.govee_gateway import IGoveeGateway
from govee_web.domain.repositories.device_repository import IDeviceRepository
from govee_web.shared import get_logger

logger = get_logger(__name__)


class DeviceController:
    """Device listing, lookup and control."""

    def __init__(
        self,
        device_repository: IDeviceRepository,
        govee_gateway: IGoveeGateway,
    ) -> None:
        self._repository = device_repository
        self._gateway = govee_gateway

    async def list_devices(self) -> DeviceDirectory:
        return await self._repository.list()

    async def resolve(self, device_id: str) -> Device:
        """
        Find a device by its exact identifier.

        Directories are household sized, so this is a linear scan over a
        fresh listing rather than an index.

        Raises:
            DeviceNotFoundError: If no device has this identifier
        """
        directory = await self.list_devices()
        device = directory.find(device_id)
        if device is None:
            logger.info("devices.resolve.not_found", device=device_id)
            raise DeviceNotFoundError(device_id)
        return device

    async def get_state(self, device_id: str) -> DeviceState:
        device = await self.resolve(device_id)
        return await self._gateway.get_state(device)

    async def set_power(self, device_id: str, state: PowerState) -> None:
        device = await self.resolve(device_id)
        await self._gateway.turn(device, state)

    async def set_color(self, device_id: str, color: Color) -> None:
        device = await self.resolve(device_id)
        await self._gateway.set_color(device, color)

    async def health_check(self) -> None:
        await self._repository.health_check()
