from __future__ import annotations

from typing import Any

from homeassistant.components.binary_sensor import (
    BinarySensorDeviceClass,
    BinarySensorEntity,
    BinarySensorEntityDescription,
)
from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant

from .const import DOMAIN
from .entity import DarkSkyChannelEntity

RAINING = BinarySensorEntityDescription(
    key="RAINING",
    name="Regen",
    device_class=BinarySensorDeviceClass.MOISTURE,
)


async def async_setup_entry(hass: HomeAssistant, entry: ConfigEntry, async_add_entities):
    platform = hass.data[DOMAIN].platforms[entry.entry_id]
    async_add_entities([DarkSkyRainingSensor(platform, entry, RAINING)])


class DarkSkyRainingSensor(DarkSkyChannelEntity, BinarySensorEntity):
    def _set_value(self, value: Any) -> None:
        self._attr_is_on = bool(value)
