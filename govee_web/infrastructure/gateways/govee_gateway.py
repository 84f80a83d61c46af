"""Govee API gateway implementation - Infrastructure layer."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import httpx

from govee_web.domain.entities.device import (
    Color,
    Device,
    DeviceDirectory,
    DeviceState,
    PowerState,
)
from govee_web.domain.entities.errors import (
    DirectorySerializationError,
    InvalidColorError,
    UpstreamError,
)
from govee_web.domain.gateways.govee_gateway import IGoveeGateway
from govee_web.infrastructure.serialization import DirectoryCodec
from govee_web.shared import DEFAULT_GOVEE_API_URL, get_logger

logger = get_logger(__name__)

API_KEY_HEADER = "Govee-API-Key"
DEVICES_PATH = "/v1/devices"
STATE_PATH = "/v1/devices/state"
CONTROL_PATH = "/v1/devices/control"


class GoveeGateway(IGoveeGateway):
    """HTTP client for the Govee developer API."""

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_GOVEE_API_URL,
        timeout: float = 10.0,
        client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Initialize the Govee gateway.

        Args:
            api_key: Govee developer API key
            base_url: Base URL of the Govee API
            timeout: Request timeout in seconds
            client: Pre-built client, used by tests to inject a transport
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.client = client or httpx.AsyncClient(
            base_url=self.base_url,
            headers={API_KEY_HEADER: api_key, "Content-Type": "application/json"},
            timeout=timeout,
        )
        self.codec = DirectoryCodec()

    async def fetch_devices(self) -> DeviceDirectory:
        """
        Retrieve the device directory.

        Returns:
            DeviceDirectory: Devices in the order the API lists them

        Raises:
            UpstreamError: If the request fails or the payload is malformed
        """
        logger.info("govee.devices.request", url=f"{self.base_url}{DEVICES_PATH}")
        data = await self._request("GET", DEVICES_PATH)

        try:
            directory = self.codec.from_document(data)
        except DirectorySerializationError as exc:
            raise UpstreamError(
                f"Govee API returned a malformed device list: {exc.message}",
                cause=exc,
            ) from exc

        logger.info("govee.devices.response", count=len(directory))
        return directory

    async def get_state(self, device: Device) -> DeviceState:
        logger.debug("govee.state.request", device=device.device, model=device.model)
        data = await self._request(
            "GET",
            STATE_PATH,
            params={"device": device.device, "model": device.model},
        )

        try:
            return self._to_state(device, data.get("properties") or [])
        except (AttributeError, KeyError, TypeError, ValueError, InvalidColorError) as exc:
            raise UpstreamError(
                f"Govee API returned a malformed device state: {exc}", cause=exc
            ) from exc

    async def turn(self, device: Device, state: PowerState) -> None:
        logger.info("govee.control.turn", device=device.device, state=state.value)
        await self._control(device, {"name": "turn", "value": state.value})

    async def set_color(self, device: Device, color: Color) -> None:
        logger.info("govee.control.color", device=device.device, color=color.to_hex())
        await self._control(
            device,
            {"name": "color", "value": {"r": color.r, "g": color.g, "b": color.b}},
        )

    async def close(self) -> None:
        await self.client.aclose()

    async def _control(self, device: Device, cmd: Dict[str, Any]) -> None:
        await self._request(
            "PUT",
            CONTROL_PATH,
            json={"device": device.device, "model": device.model, "cmd": cmd},
        )

    async def _request(self, method: str, path: str, **kwargs: Any) -> Dict[str, Any]:
        """
        Perform a request and return the ``data`` member of the envelope.

        Raises:
            UpstreamError: On transport failures, non-2xx responses, non-JSON
                bodies, or an envelope whose ``code`` is not 200.
        """
        try:
            response = await self.client.request(method, path, **kwargs)
            response.raise_for_status()
            payload = response.json()

        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            logger.error(
                "govee.request.http_error",
                method=method,
                path=path,
                status_code=status_code,
                response_text=e.response.text,
            )
            raise UpstreamError(
                f"Govee API returned HTTP {status_code}",
                details={"status_code": status_code, "path": path},
                cause=e,
            ) from e

        except httpx.RequestError as e:
            logger.error(
                "govee.request.transport_error",
                method=method,
                path=path,
                error=str(e),
            )
            raise UpstreamError(
                f"Failed to communicate with the Govee API: {e}",
                details={"path": path},
                cause=e,
            ) from e

        except ValueError as e:
            raise UpstreamError(
                "Govee API returned a non-JSON body",
                details={"path": path},
                cause=e,
            ) from e

        if not isinstance(payload, dict):
            raise UpstreamError(
                "Govee API returned an unexpected body", details={"path": path}
            )

        code = payload.get("code", 200)
        if code != 200:
            raise UpstreamError(
                f"Govee API error {code}: {payload.get('message', '')}",
                details={"code": code, "path": path},
            )

        data = payload.get("data")
        return data if isinstance(data, dict) else {}

    def _to_state(self, device: Device, properties: List[Dict[str, Any]]) -> DeviceState:
        merged: Dict[str, Any] = {}
        for item in properties:
            merged.update(item)

        online = merged.get("online", False)
        if isinstance(online, str):
            online = online.lower() == "true"

        power = merged.get("powerState")
        color = merged.get("color")
        brightness = merged.get("brightness")
        color_tem = merged.get("colorTem") or merged.get("colorTemInKelvin")

        return DeviceState(
            device=device.device,
            model=device.model,
            online=bool(online),
            power_state=PowerState(power) if power else None,
            brightness=int(brightness) if brightness is not None else None,
            color=Color(r=int(color["r"]), g=int(color["g"]), b=int(color["b"]))
            if color
            else None,
            color_temperature=int(color_tem) if color_tem else None,
        )
