"""Config flow for DarkSky integration."""
from __future__ import annotations

import logging

import voluptuous as vol

from homeassistant import config_entries
from homeassistant.core import HomeAssistant
from homeassistant.helpers import selector

from .const import (
    CONF_KEY_SECRET,
    CONF_LATITUDE,
    CONF_LONGITUDE,
    CONF_NAME,
    DEFAULT_NAME,
    DOMAIN,
)

_LOGGER = logging.getLogger(__name__)


def _key_selector() -> selector.TextSelector:
    return selector.TextSelector(selector.TextSelectorConfig(type=selector.TextSelectorType.PASSWORD))


def _text_selector() -> selector.TextSelector:
    return selector.TextSelector(selector.TextSelectorConfig(type=selector.TextSelectorType.TEXT))


def _ha_lat_lon_defaults(hass: HomeAssistant) -> tuple[str | None, str | None]:
    """Return HA core location (Home zone) lat/lon as strings, if available."""
    lat = hass.config.latitude
    lon = hass.config.longitude
    return (
        str(lat) if lat is not None else None,
        str(lon) if lon is not None else None,
    )


def _validate_lat_lon(user_input: dict, errors: dict) -> None:
    """Validate lat/lon range when given. Values are stored as entered."""
    for key, limit in ((CONF_LATITUDE, 90.0), (CONF_LONGITUDE, 180.0)):
        value = user_input.get(key)
        if value in (None, ""):
            continue
        try:
            number = float(value)
        except ValueError:
            errors[key] = "invalid_lat_lon"
            continue
        if not (-limit <= number <= limit):
            errors[key] = "invalid_lat" if key == CONF_LATITUDE else "invalid_lon"


class DarkSkyConfigFlow(config_entries.ConfigFlow, domain=DOMAIN):
    """Handle a config flow for DarkSky."""

    VERSION = 1

    async def async_step_user(self, user_input=None):
        errors = {}
        ha_lat, ha_lon = _ha_lat_lon_defaults(self.hass)

        if user_input is not None:
            name = (user_input.get(CONF_NAME) or "").strip()
            if not name:
                errors[CONF_NAME] = "required"
            _validate_lat_lon(user_input, errors)

            if not errors:
                await self.async_set_unique_id(name)
                self._abort_if_unique_id_configured()
                data = {CONF_NAME: name}
                for key in (CONF_KEY_SECRET, CONF_LATITUDE, CONF_LONGITUDE):
                    if user_input.get(key):
                        data[key] = user_input[key]
                return self.async_create_entry(title=name, data=data)

        schema = vol.Schema(
            {
                vol.Required(CONF_NAME, default=DEFAULT_NAME): _text_selector(),
                vol.Optional(CONF_KEY_SECRET): _key_selector(),
                # Defaults pulled from HA "Home" location:
                vol.Optional(CONF_LATITUDE, description={"suggested_value": ha_lat}): _text_selector(),
                vol.Optional(CONF_LONGITUDE, description={"suggested_value": ha_lon}): _text_selector(),
            }
        )
        return self.async_show_form(step_id="user", data_schema=schema, errors=errors)

    @staticmethod
    def async_get_options_flow(config_entry: config_entries.ConfigEntry):
        return DarkSkyOptionsFlowHandler()


class DarkSkyOptionsFlowHandler(config_entries.OptionsFlow):
    """Settings form; values are written through the platform."""

    def _platform(self):
        data = self.hass.data.get(DOMAIN)
        if data is None:
            return None
        return data.platforms.get(self.config_entry.entry_id)

    async def async_step_init(self, user_input=None):
        platform = self._platform()
        if platform is None:
            return self.async_abort(reason="not_loaded")

        errors = {}
        if user_input is not None:
            _validate_lat_lon(user_input, errors)
            if not errors:
                platform.save_settings(user_input)
                return self.async_create_entry(title="", data=dict(self.config_entry.options))

        fields = platform.show_settings(self.hass.config.language)
        schema_dict = {}
        for field in fields:
            control = _key_selector() if field["name"] == CONF_KEY_SECRET else _text_selector()
            schema_dict[vol.Optional(field["name"], description={"suggested_value": field["value"]})] = control

        return self.async_show_form(
            step_id="init",
            data_schema=vol.Schema(schema_dict),
            errors=errors,
            description_placeholders={field["name"]: field["description"] for field in fields},
        )
