"""System endpoints exposing health."""

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from govee_web.application.dtos.health_dto import HealthDTO
from govee_web.application.use_cases.health_use_cases import GetHealthStatusUseCase
from govee_web.domain.entities.health import HealthStatus
from govee_web.shared import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["System"])


@router.get(
    "/health",
    response_model=HealthDTO,
    responses={500: {"model": HealthDTO, "description": "Cache backend unavailable"}},
)
@inject
async def health(
    get_health_status_use_case: GetHealthStatusUseCase = Depends(
        Provide["get_health_status_use_case"]
    ),
) -> JSONResponse:
    """Return 200 when the cache backend accepts writes, 500 otherwise."""
    health_status = await get_health_status_use_case.execute()
    logger.debug("health.check.completed", status=health_status.status.value)

    status_code = (
        status.HTTP_200_OK
        if health_status.status is HealthStatus.OK
        else status.HTTP_500_INTERNAL_SERVER_ERROR
    )
    return JSONResponse(status_code=status_code, content=health_status.model_dump(mode="json"))
