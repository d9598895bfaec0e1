"""Virtual device model shared by the DarkSky integration.

A device type is published once from a JSON definition, instances are built
from it by model id and attached to the bridge. Each channel holds named
values; `update_value` pushes a new value and notifies listeners (the Home
Assistant entities) when it changed or the update is forced.
"""
from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from functools import lru_cache
import json
import logging
from pathlib import Path
from typing import Any

_LOGGER = logging.getLogger(__name__)

ValueListener = Callable[[str, Any, bool], None]


@lru_cache(maxsize=None)
def load_definition(path: str) -> dict:
    """Read a device definition file (cached, call from the executor first)."""
    with open(path, encoding="utf-8") as fh:
        return json.load(fh)


@dataclass
class DeviceType:
    type_id: str
    model_id: str
    channels: list[dict]


class DeviceChannel:
    def __init__(self, channel_type: str, index: int, defaults: dict[str, Any]) -> None:
        self.type = channel_type
        self.index = index
        self._values: dict[str, Any] = dict(defaults)
        self._listeners: list[ValueListener] = []

    def get_value(self, key: str) -> Any:
        return self._values.get(key)

    @property
    def value_keys(self) -> list[str]:
        return list(self._values)

    def add_listener(self, listener: ValueListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def _remove() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _remove

    def update_value(self, key: str, value: Any, notify: bool = True, force: bool = False) -> bool:
        """Store a value; notify listeners if it changed or `force` is set."""
        if key not in self._values:
            _LOGGER.debug("Channel %s:%s has no value %s", self.type, self.index, key)
            return False

        changed = self._values[key] != value
        self._values[key] = value

        if notify and (changed or force):
            for listener in list(self._listeners):
                listener(key, value, force)
        return changed


@dataclass
class VirtualDevice:
    name: str
    type_id: str | None = None
    model_id: str | None = None
    channels: list[DeviceChannel] = field(default_factory=list)

    def get_channel_with_type_and_index(self, channel_type: str, index: int) -> DeviceChannel | None:
        for channel in self.channels:
            if channel.type == channel_type and channel.index == int(index):
                return channel
        return None


class DeviceBridge:
    """Published device types and the set of active devices."""

    def __init__(self) -> None:
        self._types: dict[str, DeviceType] = {}
        self._devices: dict[str, VirtualDevice] = {}

    def publish_device(self, type_id: str, model_id: str, definition_path: str | Path,
                       channel_count: int) -> DeviceType:
        definition = load_definition(str(definition_path))
        channels = definition.get("channels") or []
        if len(channels) != channel_count:
            raise ValueError(
                f"{model_id}: definition has {len(channels)} channels, expected {channel_count}"
            )
        device_type = DeviceType(type_id=type_id, model_id=model_id, channels=channels)
        self._types[model_id] = device_type
        _LOGGER.debug("Published device type %s (%s)", type_id, model_id)
        return device_type

    def is_published(self, model_id: str) -> bool:
        return model_id in self._types

    def create_device(self, name: str, model_id: str, type_id: str) -> VirtualDevice:
        device = VirtualDevice(name)
        self.init_with_type(device, model_id, type_id)
        return device

    def init_with_type(self, device: VirtualDevice, model_id: str, type_id: str) -> None:
        device_type = self._types[model_id]
        device.type_id = type_id
        device.model_id = model_id
        device.channels = [
            DeviceChannel(ch["type"], int(ch["index"]), ch.get("values") or {})
            for ch in device_type.channels
        ]

    def add_device(self, device: VirtualDevice) -> None:
        self._devices[device.name] = device

    def remove_device(self, device: VirtualDevice) -> None:
        self._devices.pop(device.name, None)

    def get_device(self, name: str) -> VirtualDevice | None:
        return self._devices.get(name)

    @property
    def devices(self) -> list[VirtualDevice]:
        return list(self._devices.values())
