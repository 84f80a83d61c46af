"""
DTOs Package - Application Layer

This package contains Data Transfer Objects (DTOs) used for data exchange
between the application layer and the presentation layer.
"""

from .device_dto import (
    ColorDTO,
    ColorRequestDTO,
    DeviceDTO,
    DevicesResponseDTO,
    DeviceStateDTO,
    ToggleRequestDTO,
)
from .health_dto import HealthDTO

__all__ = [
    "ColorDTO",
    "ColorRequestDTO",
    "DeviceDTO",
    "DevicesResponseDTO",
    "DeviceStateDTO",
    "ToggleRequestDTO",
    "HealthDTO",
]
