"""DarkSky weather device: lifecycle, settings and the 15 minute refresh."""
from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
import logging
from pathlib import Path
from typing import Any

import aiohttp

from homeassistant.core import HomeAssistant, callback
from homeassistant.helpers.event import async_call_later

from .bridge import DeviceBridge, VirtualDevice
from .const import (
    CHANNEL_WEATHER,
    CHANNEL_WEATHER_INDEX,
    CONF_KEY_SECRET,
    CONF_LATITUDE,
    CONF_LONGITUDE,
    DEVICE_CHANNEL_COUNT,
    DEVICE_DEFINITION_PATH,
    DEVICE_MODEL,
    DEVICE_TYPE_ID,
    LOCALIZATION_PATH,
    PLUGIN_PATH,
    REFRESH_INTERVAL,
    SETTINGS_KEYS,
    TEMPLATE_APP,
    TEMPLATE_INDEX,
)
from .coordinator import DarkSkyError, async_fetch_forecast, iter_channel_values
from .dispatch import DispatchedRequest
from .localization import Localization
from .store import ConfigEntryStore

_LOGGER = logging.getLogger(__name__)

SETTINGS_FIELDS = (
    (CONF_KEY_SECRET, "DarkSky Secret Key", "Register your secret key at https://darksky.net/dev"),
    (CONF_LATITUDE, "Latitude", "Enter Latitude"),
    (CONF_LONGITUDE, "Longitude", "Enter Longitude"),
)


@dataclass
class DarkSkyPlugin:
    name: str
    instance: str
    plugin_path: Path = PLUGIN_PATH
    initialized: bool = False


class DarkSkyPlatform:
    def __init__(
        self,
        plugin: DarkSkyPlugin,
        hass: HomeAssistant,
        bridge: DeviceBridge,
        config: ConfigEntryStore,
        session: aiohttp.ClientSession,
    ) -> None:
        self.plugin = plugin
        self.name = plugin.name
        self.hass = hass
        self.bridge = bridge
        self.config = config
        self.session = session

        self.hm_device: VirtualDevice | None = None
        self.localization: Localization | None = None
        self._refresh_timer: Callable[[], None] | None = None

        bridge.publish_device(DEVICE_TYPE_ID, DEVICE_MODEL, DEVICE_DEFINITION_PATH, DEVICE_CHANNEL_COUNT)

    @property
    def refresh_timer_pending(self) -> bool:
        return self._refresh_timer is not None

    def init(self) -> None:
        self.hm_device = self.bridge.create_device(self.name, DEVICE_MODEL, DEVICE_TYPE_ID)
        self.bridge.add_device(self.hm_device)
        self.plugin.initialized = True
        self.localization = Localization(LOCALIZATION_PATH)
        _LOGGER.info("initialization completed %s", self.plugin.initialized)
        self.fetch_weather(True)

    def shutdown(self) -> None:
        try:
            self._cancel_refresh_timer()
        except Exception:  # noqa: BLE001
            _LOGGER.exception("Shutdown error")
        if self.hm_device is not None:
            self.bridge.remove_device(self.hm_device)

    # ------------------------
    # Settings
    # ------------------------

    def show_settings(self, request: Any = None) -> list[dict[str, Any]]:
        loc = self.localization or Localization(LOCALIZATION_PATH)
        loc.set_language(request)

        result = []
        for key, label, description in SETTINGS_FIELDS:
            result.append({
                "control": "text",
                "name": key,
                "label": loc.localize(label),
                "value": self.config.get_value_for_plugin(self.name, key),
                "description": loc.localize(description),
            })
        return result

    def save_settings(self, settings: dict[str, Any]) -> None:
        for key in SETTINGS_KEYS:
            value = settings.get(key)
            if value:
                self.config.set_value_for_plugin(self.name, key, value)
        self._cancel_refresh_timer()
        self.fetch_weather(True)

    def handle_configuration_request(self, dispatched_request: DispatchedRequest) -> None:
        template = TEMPLATE_INDEX
        if dispatched_request.query.get("do") == TEMPLATE_APP:
            template = TEMPLATE_APP
        dispatched_request.dispatch_file(self.plugin.plugin_path, template, {"listDevices": ""})

    # ------------------------
    # Refresh
    # ------------------------

    def fetch_weather(self, force: bool) -> None:
        _LOGGER.debug("Fetch DarkSky Weather (force update: %s)", force)
        key_secret, latitude, longitude = (
            self.config.get_value_for_plugin(self.name, key) for key in SETTINGS_KEYS
        )
        if not key_secret or not latitude or not longitude:
            _LOGGER.error("%s: data missing - abort", self.name)
            return

        # Next run is armed right after dispatch, not after the response.
        self.hass.async_create_task(
            self._async_update(key_secret, latitude, longitude, force),
            name=f"{DEVICE_TYPE_ID} fetch {self.name} ({self.plugin.instance})",
        )
        self._cancel_refresh_timer()
        self._refresh_timer = async_call_later(self.hass, REFRESH_INTERVAL, self._handle_refresh_timer)

    @callback
    def _handle_refresh_timer(self, _now: datetime) -> None:
        self._refresh_timer = None
        self.fetch_weather(False)

    def _cancel_refresh_timer(self) -> None:
        if self._refresh_timer is not None:
            cancel, self._refresh_timer = self._refresh_timer, None
            cancel()

    async def _async_update(self, key_secret: str, latitude: str, longitude: str, force: bool) -> None:
        try:
            body = await async_fetch_forecast(self.session, key_secret, latitude, longitude)
        except DarkSkyError as err:
            _LOGGER.error("%s: %s", self.name, err)
            return

        if self.hm_device is None:
            return
        channel = self.hm_device.get_channel_with_type_and_index(CHANNEL_WEATHER, CHANNEL_WEATHER_INDEX)
        if channel is None:
            return

        try:
            for key, value in iter_channel_values(body["currently"]):
                channel.update_value(key, value, True, force)
        except Exception as err:  # noqa: BLE001
            _LOGGER.error("Unable to parse weather %s", err)
