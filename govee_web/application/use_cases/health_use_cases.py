"""Use cases for the health endpoint."""

from govee_web.application.dtos.health_dto import HealthDTO
from govee_web.application.use_cases.device_controller import DeviceController
from govee_web.domain.entities.health import HealthStatus, ServiceHealth
from govee_web.shared import get_logger

logger = get_logger(__name__)


class GetHealthStatusUseCase:
    """Use case responsible for returning the service health."""

    def __init__(self, device_controller: DeviceController, version: str) -> None:
        self._device_controller = device_controller
        self._version = version

    async def execute(self) -> HealthDTO:
        health = ServiceHealth(version=self._version, status=HealthStatus.OK)

        try:
            await self._device_controller.health_check()
        except Exception as exc:
            logger.warning("health.check.failed", error=str(exc))
            health.status = HealthStatus.ERROR

        return HealthDTO.from_domain(health)
