"""Domain entities for Govee devices and their directory."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Optional, Tuple

from govee_web.domain.entities.errors import InvalidColorError

_HEX_COLOR = re.compile(r"^#?(?P<hex>[0-9a-f]{3}|[0-9a-f]{6})$")
_RGB_COLOR = re.compile(
    r"^rgb\(\s*(?P<r>\d{1,3})\s*,\s*(?P<g>\d{1,3})\s*,\s*(?P<b>\d{1,3})\s*\)$"
)


class PowerState(str, Enum):
    """Power state accepted and reported by the Govee API."""

    ON = "on"
    OFF = "off"


@dataclass(frozen=True, slots=True)
class Color:
    """An RGB color with 8-bit channels."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b):
            if not 0 <= channel <= 255:
                raise InvalidColorError(f"rgb({self.r}, {self.g}, {self.b})")

    @classmethod
    def parse(cls, value: str) -> "Color":
        """
        Parse a color from user input.

        Accepts ``#rrggbb``, ``rrggbb``, ``#rgb``, ``rgb`` and
        ``rgb(r, g, b)``, case-insensitively.

        Raises:
            InvalidColorError: If the value is not a recognised color.
        """
        text = value.strip().lower()

        match = _HEX_COLOR.match(text)
        if match:
            digits = match.group("hex")
            if len(digits) == 3:
                digits = "".join(ch * 2 for ch in digits)
            return cls(
                r=int(digits[0:2], 16),
                g=int(digits[2:4], 16),
                b=int(digits[4:6], 16),
            )

        match = _RGB_COLOR.match(text)
        if match:
            try:
                return cls(
                    r=int(match.group("r")),
                    g=int(match.group("g")),
                    b=int(match.group("b")),
                )
            except InvalidColorError:
                raise InvalidColorError(value) from None

        raise InvalidColorError(value)

    def to_hex(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"


@dataclass(frozen=True, slots=True)
class ColorTemperatureRange:
    """Supported color temperature range in kelvin."""

    min: int
    max: int


@dataclass(frozen=True, slots=True)
class Device:
    """A device as listed by the upstream directory. Immutable once fetched."""

    device: str
    model: str = ""
    device_name: str = ""
    controllable: bool = False
    retrievable: bool = False
    supported_commands: Tuple[str, ...] = ()
    color_temperature_range: Optional[ColorTemperatureRange] = None


@dataclass(frozen=True, slots=True)
class DeviceDirectory:
    """The full device inventory, always read and replaced as a whole."""

    devices: Tuple[Device, ...] = field(default_factory=tuple)

    def __iter__(self) -> Iterator[Device]:
        return iter(self.devices)

    def __len__(self) -> int:
        return len(self.devices)

    def find(self, device_id: str) -> Optional[Device]:
        """Return the first device whose identifier matches exactly."""
        for device in self.devices:
            if device.device == device_id:
                return device
        return None


@dataclass(frozen=True, slots=True)
class DeviceState:
    """Point-in-time state of one device. Fetched live, never cached."""

    device: str
    model: str
    online: bool = False
    power_state: Optional[PowerState] = None
    brightness: Optional[int] = None
    color: Optional[Color] = None
    color_temperature: Optional[int] = None
