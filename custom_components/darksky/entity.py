from __future__ import annotations

from typing import Any

from homeassistant.config_entries import ConfigEntry
from homeassistant.core import callback
from homeassistant.helpers.device_registry import DeviceInfo
from homeassistant.helpers.entity import Entity, EntityDescription

from .bridge import DeviceChannel
from .const import CHANNEL_WEATHER, CHANNEL_WEATHER_INDEX, DEVICE_MODEL, DOMAIN, MANUFACTURER
from .platform import DarkSkyPlatform


class DarkSkyChannelEntity(Entity):
    """Mirrors one value of the WEATHER channel."""

    _attr_should_poll = False
    _attr_has_entity_name = True

    def __init__(self, platform: DarkSkyPlatform, entry: ConfigEntry, description: EntityDescription) -> None:
        self.entity_description = description
        self._platform = platform
        self._attr_unique_id = f"{entry.entry_id}_{description.key.lower()}"
        self._attr_device_info = DeviceInfo(
            identifiers={(DOMAIN, entry.entry_id)},
            name=platform.name,
            manufacturer=MANUFACTURER,
            model=DEVICE_MODEL,
        )

    @property
    def channel(self) -> DeviceChannel | None:
        device = self._platform.hm_device
        if device is None:
            return None
        return device.get_channel_with_type_and_index(CHANNEL_WEATHER, CHANNEL_WEATHER_INDEX)

    async def async_added_to_hass(self) -> None:
        channel = self.channel
        if channel is None:
            return
        self._set_value(channel.get_value(self.entity_description.key))
        self.async_on_remove(channel.add_listener(self._handle_channel_value))

    @callback
    def _handle_channel_value(self, key: str, value: Any, force: bool) -> None:
        if key != self.entity_description.key:
            return
        self._attr_force_update = force
        self._set_value(value)
        self.async_write_ha_state()

    def _set_value(self, value: Any) -> None:
        raise NotImplementedError
