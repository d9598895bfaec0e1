"""Per-plugin settings backed by Home Assistant config entries."""
from __future__ import annotations

import logging
from typing import Any

from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant

_LOGGER = logging.getLogger(__name__)


class ConfigEntryStore:
    """get/set of named plugin settings, keyed by plugin name.

    Values are read from the entry options first, then from the entry data
    written by the config flow. Writes always go to the options.
    """

    def __init__(self, hass: HomeAssistant) -> None:
        self.hass = hass
        self._entries: dict[str, ConfigEntry] = {}

    def register(self, plugin_name: str, entry: ConfigEntry) -> None:
        self._entries[plugin_name] = entry

    def unregister(self, plugin_name: str) -> None:
        self._entries.pop(plugin_name, None)

    def get_value_for_plugin(self, plugin_name: str, key: str) -> Any:
        entry = self._entries.get(plugin_name)
        if entry is None:
            return None
        if key in entry.options:
            return entry.options.get(key)
        return entry.data.get(key)

    def set_value_for_plugin(self, plugin_name: str, key: str, value: Any) -> None:
        entry = self._entries[plugin_name]
        options = dict(entry.options)
        options[key] = value
        _LOGGER.debug("Saving %s for %s", key, plugin_name)
        self.hass.config_entries.async_update_entry(entry, options=options)
