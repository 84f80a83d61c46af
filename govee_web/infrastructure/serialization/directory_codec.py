"""
Directory Codec - Infrastructure Layer

Converts ``DeviceDirectory`` entities to and from the JSON shape used by
the Govee API. The same text is stored in the cache, so a directory read
back from Redis is identical to the one that was fetched.
"""

import json
from typing import Any, Dict, List

from govee_web.domain.entities.device import (
    ColorTemperatureRange,
    Device,
    DeviceDirectory,
)
from govee_web.domain.entities.errors import DirectorySerializationError


def _mapping(value: Any, name: str) -> Dict[str, Any]:
    """Return an optional nested object, treating a missing value as empty."""
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise TypeError(f"'{name}' must be an object, got {type(value).__name__}")
    return value


class DirectoryCodec:
    """JSON codec for the device directory."""

    @staticmethod
    def device_to_document(device: Device) -> Dict[str, Any]:
        document: Dict[str, Any] = {
            "device": device.device,
            "model": device.model,
            "deviceName": device.device_name,
            "controllable": device.controllable,
            "retrievable": device.retrievable,
            "supportCmds": list(device.supported_commands),
        }
        if device.color_temperature_range is not None:
            document["properties"] = {
                "colorTem": {
                    "range": {
                        "min": device.color_temperature_range.min,
                        "max": device.color_temperature_range.max,
                    }
                }
            }
        return document

    @staticmethod
    def device_from_document(document: Dict[str, Any]) -> Device:
        """
        Build a ``Device`` from a Govee device object.

        Raises:
            KeyError, TypeError, ValueError: If the document is malformed.
        """
        if not isinstance(document, dict):
            raise TypeError(f"expected an object, got {type(document).__name__}")

        device_id = document["device"]
        if not isinstance(device_id, str):
            raise TypeError("'device' must be a string")

        temperature_range = None
        properties = _mapping(document.get("properties"), "properties")
        color_tem = _mapping(properties.get("colorTem"), "colorTem")
        range_doc = _mapping(color_tem.get("range"), "range")
        if range_doc:
            temperature_range = ColorTemperatureRange(
                min=int(range_doc["min"]), max=int(range_doc["max"])
            )

        commands = document.get("supportCmds") or []
        if not isinstance(commands, list):
            raise TypeError("'supportCmds' must be a list")

        return Device(
            device=device_id,
            model=str(document.get("model") or ""),
            device_name=str(document.get("deviceName") or ""),
            controllable=bool(document.get("controllable", False)),
            retrievable=bool(document.get("retrievable", False)),
            supported_commands=tuple(str(cmd) for cmd in commands),
            color_temperature_range=temperature_range,
        )

    def to_document(self, directory: DeviceDirectory) -> Dict[str, List[Dict[str, Any]]]:
        return {"devices": [self.device_to_document(d) for d in directory]}

    def from_document(self, document: Any) -> DeviceDirectory:
        """
        Build a directory from a ``{"devices": [...]}`` object.

        Raises:
            DirectorySerializationError: If the document has the wrong shape.
        """
        try:
            devices = document["devices"]
            if not isinstance(devices, list):
                raise TypeError("'devices' must be a list")
            return DeviceDirectory(
                devices=tuple(self.device_from_document(d) for d in devices)
            )
        except (KeyError, TypeError, ValueError) as exc:
            raise DirectorySerializationError(
                f"Malformed device directory: {exc}", cause=exc
            ) from exc

    def dumps(self, directory: DeviceDirectory) -> str:
        try:
            return json.dumps(self.to_document(directory), separators=(",", ":"))
        except (TypeError, ValueError) as exc:
            raise DirectorySerializationError(
                f"Failed to serialize device directory: {exc}", cause=exc
            ) from exc

    def loads(self, payload: str | bytes) -> DeviceDirectory:
        try:
            document = json.loads(payload)
        except (UnicodeDecodeError, ValueError) as exc:
            raise DirectorySerializationError(
                f"Stored device directory is not valid JSON: {exc}", cause=exc
            ) from exc
        return self.from_document(document)
