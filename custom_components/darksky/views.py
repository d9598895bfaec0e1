"""Settings page served under /api/darksky/<name>."""
from __future__ import annotations

from typing import TYPE_CHECKING

from aiohttp import web

from homeassistant.components.http import HomeAssistantView
from homeassistant.core import HomeAssistant

from .const import DOMAIN
from .dispatch import DispatchedRequest

if TYPE_CHECKING:
    from . import DarkSkyData


class DarkSkyConfigView(HomeAssistantView):
    url = f"/api/{DOMAIN}/{{name}}"
    name = f"api:{DOMAIN}:config"
    requires_auth = True

    def __init__(self, hass: HomeAssistant, data: DarkSkyData) -> None:
        self.hass = hass
        self._data = data

    async def get(self, request: web.Request, name: str) -> web.Response:
        platform = self._data.platform_by_name(name)
        if platform is None:
            return web.Response(status=404, text="Not found")

        dispatched = DispatchedRequest(request)
        # templates are read from disk
        await self.hass.async_add_executor_job(platform.handle_configuration_request, dispatched)
        return dispatched.response
