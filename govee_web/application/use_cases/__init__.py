"""
Use Cases Package - Application Layer

This package contains the device controller and the health use case.
"""

from .device_controller import DeviceController
from .health_use_cases import GetHealthStatusUseCase

__all__ = ["DeviceController", "GetHealthStatusUseCase"]
