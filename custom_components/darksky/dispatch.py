"""Wrapper around incoming settings page requests."""
from __future__ import annotations

import logging
import mimetypes
from pathlib import Path
from typing import Any

from aiohttp import web
from jinja2 import Environment, FileSystemLoader, TemplateNotFound, select_autoescape

_LOGGER = logging.getLogger(__name__)


class DispatchedRequest:
    def __init__(self, request: web.BaseRequest) -> None:
        self.request = request
        self.response: web.Response | None = None

    @property
    def query(self):
        return self.request.query

    def dispatch_file(self, plugin_path: str | Path, template: str, context: dict[str, Any]) -> web.Response:
        """Render `<plugin_path>/www/<template>` into `self.response`."""
        env = Environment(
            loader=FileSystemLoader(str(Path(plugin_path) / "www")),
            autoescape=select_autoescape(["html"]),
        )
        try:
            body = env.get_template(template).render(**context)
        except TemplateNotFound:
            _LOGGER.error("Template %s not found in %s", template, plugin_path)
            self.response = web.Response(status=404, text="Not found")
            return self.response

        content_type = mimetypes.guess_type(template)[0] or "text/plain"
        self.response = web.Response(text=body, content_type=content_type)
        return self.response
