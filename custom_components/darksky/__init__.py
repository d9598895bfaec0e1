"""The DarkSky weather integration."""
from __future__ import annotations

from dataclasses import dataclass, field
import logging

from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant
from homeassistant.helpers.aiohttp_client import async_get_clientsession

from .bridge import DeviceBridge, load_definition
from .const import CONF_NAME, DEVICE_DEFINITION_PATH, DOMAIN, LOCALIZATION_PATH, PLATFORMS
from .localization import load_strings
from .platform import DarkSkyPlatform, DarkSkyPlugin
from .store import ConfigEntryStore

_LOGGER = logging.getLogger(__name__)


@dataclass
class DarkSkyData:
    bridge: DeviceBridge
    store: ConfigEntryStore
    platforms: dict[str, DarkSkyPlatform] = field(default_factory=dict)
    view_registered: bool = False

    def platform_by_name(self, name: str) -> DarkSkyPlatform | None:
        for platform in self.platforms.values():
            if platform.name == name:
                return platform
        return None


def _preload_resources() -> None:
    # Warm the file caches so nothing reads from disk inside the event loop
    load_definition(str(DEVICE_DEFINITION_PATH))
    load_strings(str(LOCALIZATION_PATH))


async def async_setup_entry(hass: HomeAssistant, entry: ConfigEntry) -> bool:
    data: DarkSkyData | None = hass.data.get(DOMAIN)
    if data is None:
        data = hass.data[DOMAIN] = DarkSkyData(bridge=DeviceBridge(), store=ConfigEntryStore(hass))

    await hass.async_add_executor_job(_preload_resources)

    name = entry.data.get(CONF_NAME) or entry.title
    data.store.register(name, entry)

    plugin = DarkSkyPlugin(name=name, instance=entry.entry_id)
    platform = DarkSkyPlatform(plugin, hass, data.bridge, data.store, async_get_clientsession(hass))
    platform.init()
    data.platforms[entry.entry_id] = platform

    await hass.config_entries.async_forward_entry_setups(entry, PLATFORMS)

    if not data.view_registered:
        from .views import DarkSkyConfigView

        hass.http.register_view(DarkSkyConfigView(hass, data))
        data.view_registered = True

    return True


async def async_unload_entry(hass: HomeAssistant, entry: ConfigEntry) -> bool:
    unload_ok = await hass.config_entries.async_unload_platforms(entry, PLATFORMS)
    if not unload_ok:
        return False

    data: DarkSkyData = hass.data[DOMAIN]
    platform = data.platforms.pop(entry.entry_id, None)
    if platform is not None:
        platform.shutdown()
        data.store.unregister(platform.name)
    _LOGGER.debug("Unloaded %s", entry.title)
    return True
