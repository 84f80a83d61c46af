from __future__ import annotations

import asyncio
import os
import sys
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# Required settings, so AppSettings() can be built without a .env file
os.environ.setdefault("GOVEE_API_KEY", "test-api-key")
os.environ.setdefault("GOVEE_REDIS_URI", "redis://localhost:6379/0")

from govee_web.domain.entities.device import (  # noqa: E402
    Color,
    ColorTemperatureRange,
    Device,
    DeviceDirectory,
    DeviceState,
    PowerState,
)
from govee_web.domain.entities.errors import UpstreamError  # noqa: E402
from govee_web.domain.gateways.govee_gateway import IGoveeGateway  # noqa: E402


class FakeRedis:
    """In-memory stand-in for ``redis.asyncio.Redis`` with failure injection."""

    def __init__(self) -> None:
        self.store: Dict[str, str] = {}
        self.ttls: Dict[str, int] = {}
        self.get_calls: List[str] = []
        self.setex_calls: List[Tuple[str, int, str]] = []
        self.set_calls: List[Tuple[str, str]] = []
        self.get_error: Optional[Exception] = None
        self.set_error: Optional[Exception] = None
        self.closed = False

    async def get(self, key: str) -> Optional[str]:
        self.get_calls.append(key)
        if self.get_error is not None:
            raise self.get_error
        return self.store.get(key)

    async def setex(self, key: str, ttl: int, value: str) -> bool:
        self.setex_calls.append((key, ttl, value))
        if self.set_error is not None:
            raise self.set_error
        self.store[key] = value
        self.ttls[key] = ttl
        return True

    async def set(self, key: str, value: str) -> bool:
        self.set_calls.append((key, value))
        if self.set_error is not None:
            raise self.set_error
        self.store[key] = value
        return True

    def expire_all(self) -> None:
        self.store.clear()
        self.ttls.clear()

    async def aclose(self) -> None:
        self.closed = True


class StubGoveeGateway(IGoveeGateway):
    """Gateway double that records calls and serves a fixed directory."""

    def __init__(self, directory: DeviceDirectory) -> None:
        self.directory = directory
        self.fetch_calls = 0
        self.state_calls: List[str] = []
        self.turn_calls: List[Tuple[str, PowerState]] = []
        self.color_calls: List[Tuple[str, Color]] = []
        self.fetch_error: Optional[Exception] = None
        self.closed = False

    async def fetch_devices(self) -> DeviceDirectory:
        self.fetch_calls += 1
        # Yield like a real network call would
        await asyncio.sleep(0)
        if self.fetch_error is not None:
            raise self.fetch_error
        return self.directory

    async def get_state(self, device: Device) -> DeviceState:
        self.state_calls.append(device.device)
        return DeviceState(
            device=device.device,
            model=device.model,
            online=True,
            power_state=PowerState.ON,
            brightness=80,
            color=Color(255, 128, 0),
        )

    async def turn(self, device: Device, state: PowerState) -> None:
        self.turn_calls.append((device.device, state))

    async def set_color(self, device: Device, color: Color) -> None:
        self.color_calls.append((device.device, color))

    async def close(self) -> None:
        self.closed = True


@pytest.fixture()
def desk_lamp() -> Device:
    return Device(
        device="bulb1",
        model="H6159",
        device_name="Desk",
        controllable=True,
        retrievable=True,
        supported_commands=("turn", "brightness", "color", "colorTem"),
        color_temperature_range=ColorTemperatureRange(min=2000, max=9000),
    )


@pytest.fixture()
def sample_directory(desk_lamp: Device) -> DeviceDirectory:
    return DeviceDirectory(
        devices=(
            desk_lamp,
            Device(
                device="AA:BB:CC:DD:EE:FF:00:11",
                model="H6199",
                device_name="TV Strip",
                controllable=True,
                retrievable=True,
                supported_commands=("turn", "color"),
            ),
        )
    )


@pytest.fixture()
def fake_redis() -> FakeRedis:
    return FakeRedis()


@pytest.fixture()
def stub_gateway(sample_directory: DeviceDirectory) -> StubGoveeGateway:
    return StubGoveeGateway(sample_directory)


@pytest.fixture()
def upstream_failure() -> UpstreamError:
    return UpstreamError("Govee API returned HTTP 429", details={"status_code": 429})
