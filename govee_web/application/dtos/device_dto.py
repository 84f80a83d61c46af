"""
Device DTOs - Application Layer

This module defines Data Transfer Objects (DTOs) for devices. Field
aliases follow the Govee API naming so the directory returned to callers
has the same shape as the upstream one.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from govee_web.domain.entities.device import (
    Device,
    DeviceDirectory,
    DeviceState,
    PowerState,
)


class ColorDTO(BaseModel):
    """DTO for an RGB color."""

    r: int = Field(ge=0, le=255)
    g: int = Field(ge=0, le=255)
    b: int = Field(ge=0, le=255)


class ColorTemRangeDTO(BaseModel):
    min: int
    max: int


class ColorTemPropertyDTO(BaseModel):
    range: ColorTemRangeDTO


class DevicePropertiesDTO(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    color_tem: ColorTemPropertyDTO = Field(alias="colorTem")


class DeviceDTO(BaseModel):
    """DTO for a device in the directory."""

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "device": "AA:BB:CC:DD:EE:FF:00:11",
                "model": "H6159",
                "deviceName": "Desk",
                "controllable": True,
                "retrievable": True,
                "supportCmds": ["turn", "brightness", "color", "colorTem"],
                "properties": {"colorTem": {"range": {"min": 2000, "max": 9000}}},
            }
        },
    )

    device: str = Field(description="Device identifier")
    model: str = Field(description="Device model")
    device_name: str = Field(alias="deviceName", description="Human readable name")
    controllable: bool = Field(description="Whether the device accepts commands")
    retrievable: bool = Field(description="Whether the device state can be read")
    support_cmds: List[str] = Field(
        alias="supportCmds", description="Commands supported by the device"
    )
    properties: Optional[DevicePropertiesDTO] = Field(
        default=None, description="Device capability properties"
    )

    @classmethod
    def from_domain(cls, device: Device) -> "DeviceDTO":
        properties = None
        if device.color_temperature_range is not None:
            properties = DevicePropertiesDTO(
                color_tem=ColorTemPropertyDTO(
                    range=ColorTemRangeDTO(
                        min=device.color_temperature_range.min,
                        max=device.color_temperature_range.max,
                    )
                )
            )
        return cls(
            device=device.device,
            model=device.model,
            device_name=device.device_name,
            controllable=device.controllable,
            retrievable=device.retrievable,
            support_cmds=list(device.supported_commands),
            properties=properties,
        )


class DevicesResponseDTO(BaseModel):
    """DTO for the device directory."""

    devices: List[DeviceDTO] = Field(description="Known devices")

    @classmethod
    def from_domain(cls, directory: DeviceDirectory) -> "DevicesResponseDTO":
        return cls(devices=[DeviceDTO.from_domain(d) for d in directory])


class DeviceStateDTO(BaseModel):
    """DTO for the live state of a device."""

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "device": "AA:BB:CC:DD:EE:FF:00:11",
                "model": "H6159",
                "online": True,
                "powerState": "on",
                "brightness": 80,
                "color": {"r": 255, "g": 128, "b": 0},
                "colorTem": None,
            }
        },
    )

    device: str
    model: str
    online: bool
    power_state: Optional[PowerState] = Field(default=None, alias="powerState")
    brightness: Optional[int] = None
    color: Optional[ColorDTO] = None
    color_tem: Optional[int] = Field(default=None, alias="colorTem")

    @classmethod
    def from_domain(cls, state: DeviceState) -> "DeviceStateDTO":
        return cls(
            device=state.device,
            model=state.model,
            online=state.online,
            power_state=state.power_state,
            brightness=state.brightness,
            color=ColorDTO(r=state.color.r, g=state.color.g, b=state.color.b)
            if state.color
            else None,
            color_tem=state.color_temperature,
        )


class ToggleRequestDTO(BaseModel):
    """Body of a power toggle request."""

    state: PowerState = Field(description="Desired power state")

    model_config = {"json_schema_extra": {"example": {"state": "on"}}}


class ColorRequestDTO(BaseModel):
    """Body of a color change request."""

    color: str = Field(description="Color as #rrggbb, #rgb or rgb(r, g, b)")

    model_config = {"json_schema_extra": {"example": {"color": "#ff8000"}}}
