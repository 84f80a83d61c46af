"""
Devices Router - Presentation Layer

This module defines the FastAPI router for device endpoints.
"""

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, Response, status

from govee_web.application.dtos.device_dto import (
    ColorRequestDTO,
    DevicesResponseDTO,
    DeviceStateDTO,
    ToggleRequestDTO,
)
from govee_web.application.use_cases.device_controller import DeviceController
from govee_web.domain.entities.device import Color
from govee_web.presentation.errors import to_http_exception
from govee_web.shared import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/api/v1/devices", tags=["Devices"])


@router.get(
    "",
    response_model=DevicesResponseDTO,
    response_model_exclude_none=True,
)
@router.get(
    "/",
    response_model=DevicesResponseDTO,
    response_model_exclude_none=True,
    include_in_schema=False,
)
@inject
async def get_devices(
    device_controller: DeviceController = Depends(Provide["device_controller"]),
) -> DevicesResponseDTO:
    """
    Return the device directory.

    Served from the Redis cache when present, otherwise fetched from the
    Govee API and cached.

    Raises:
        HTTPException: 500 if the cache or the Govee API fails
    """
    try:
        directory = await device_controller.list_devices()
    except Exception as e:
        logger.error("devices.list.failed", error=str(e), exc_info=e)
        raise to_http_exception(e) from e

    logger.debug("devices.list.retrieved", device_count=len(directory))
    return DevicesResponseDTO.from_domain(directory)


@router.get("/{device}", response_model=DeviceStateDTO)
@router.get("/{device}/", response_model=DeviceStateDTO, include_in_schema=False)
@inject
async def get_device_state(
    device: str,
    device_controller: DeviceController = Depends(Provide["device_controller"]),
) -> DeviceStateDTO:
    """Return the live state of a device, 404 if it is not in the directory."""
    try:
        state = await device_controller.get_state(device)
    except Exception as e:
        logger.error("devices.state.failed", device=device, error=str(e))
        raise to_http_exception(e) from e

    return DeviceStateDTO.from_domain(state)


@router.put("/{device}/toggle", response_class=Response)
@inject
async def toggle_device(
    device: str,
    body: ToggleRequestDTO,
    device_controller: DeviceController = Depends(Provide["device_controller"]),
) -> Response:
    """Set the power state of a device."""
    logger.info("devices.toggle.requested", device=device, state=body.state.value)

    try:
        await device_controller.set_power(device, body.state)
    except Exception as e:
        logger.error("devices.toggle.failed", device=device, error=str(e))
        raise to_http_exception(e) from e

    return Response(status_code=status.HTTP_200_OK)


@router.put("/{device}/color", response_class=Response)
@inject
async def color_device(
    device: str,
    body: ColorRequestDTO,
    device_controller: DeviceController = Depends(Provide["device_controller"]),
) -> Response:
    """Set the color of a device. Unparsable colors are rejected with 400."""
    logger.info("devices.color.requested", device=device, color=body.color)

    try:
        color = Color.parse(body.color)
        await device_controller.set_color(device, color)
    except Exception as e:
        logger.error("devices.color.failed", device=device, error=str(e))
        raise to_http_exception(e) from e

    return Response(status_code=status.HTTP_200_OK)
