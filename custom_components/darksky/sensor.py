from __future__ import annotations

from typing import Any

from homeassistant.components.sensor import (
    SensorDeviceClass,
    SensorEntity,
    SensorEntityDescription,
    SensorStateClass,
)
from homeassistant.config_entries import ConfigEntry
from homeassistant.const import (
    DEGREE,
    PERCENTAGE,
    UnitOfSpeed,
    UnitOfTemperature,
    UnitOfTime,
    UnitOfVolumetricFlux,
)
from homeassistant.core import HomeAssistant

from .const import DOMAIN
from .entity import DarkSkyChannelEntity

SENSORS: tuple[SensorEntityDescription, ...] = (
    SensorEntityDescription(
        key="TEMPERATURE",
        name="Temperatur",
        native_unit_of_measurement=UnitOfTemperature.CELSIUS,
        device_class=SensorDeviceClass.TEMPERATURE,
        state_class=SensorStateClass.MEASUREMENT,
    ),
    SensorEntityDescription(
        key="HUMIDITY",
        name="Luftfeuchtigkeit",
        native_unit_of_measurement=PERCENTAGE,
        device_class=SensorDeviceClass.HUMIDITY,
        state_class=SensorStateClass.MEASUREMENT,
    ),
    SensorEntityDescription(
        key="RAIN_COUNTER",
        name="Niederschlag",
        native_unit_of_measurement=UnitOfVolumetricFlux.MILLIMETERS_PER_HOUR,
        device_class=SensorDeviceClass.PRECIPITATION_INTENSITY,
        state_class=SensorStateClass.MEASUREMENT,
    ),
    SensorEntityDescription(
        key="WIND_SPEED",
        name="Windgeschwindigkeit",
        native_unit_of_measurement=UnitOfSpeed.KILOMETERS_PER_HOUR,
        device_class=SensorDeviceClass.WIND_SPEED,
        state_class=SensorStateClass.MEASUREMENT,
    ),
    SensorEntityDescription(
        key="WIND_DIRECTION",
        name="Windrichtung",
        native_unit_of_measurement=DEGREE,
    ),
    SensorEntityDescription(
        key="WIND_DIRECTION_RANGE",
        name="Windrichtung Schwankung",
        native_unit_of_measurement=DEGREE,
        entity_registry_enabled_default=False,
    ),
    SensorEntityDescription(
        key="SUNSHINEDURATION",
        name="Sonnenscheindauer",
        native_unit_of_measurement=UnitOfTime.MINUTES,
        entity_registry_enabled_default=False,
    ),
    # Dark Sky has no brightness, the UV index is reported instead
    SensorEntityDescription(
        key="BRIGHTNESS",
        name="UV-Index",
        state_class=SensorStateClass.MEASUREMENT,
    ),
    SensorEntityDescription(
        key="SUMMARY",
        name="Wetter",
    ),
    SensorEntityDescription(
        key="DEWPOINT",
        name="Taupunkt",
        native_unit_of_measurement=UnitOfTemperature.CELSIUS,
        device_class=SensorDeviceClass.TEMPERATURE,
        state_class=SensorStateClass.MEASUREMENT,
    ),
)


async def async_setup_entry(hass: HomeAssistant, entry: ConfigEntry, async_add_entities):
    platform = hass.data[DOMAIN].platforms[entry.entry_id]
    async_add_entities(DarkSkySensor(platform, entry, description) for description in SENSORS)


class DarkSkySensor(DarkSkyChannelEntity, SensorEntity):
    def _set_value(self, value: Any) -> None:
        self._attr_native_value = value
