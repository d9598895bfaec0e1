"""
Pytest fixtures for the DarkSky integration tests.

Home Assistant itself is replaced by MagicMock objects: background tasks are
collected instead of scheduled, and the refresh timer is patched so tests can
fire or inspect it.
"""

from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import pytest

from custom_components.darksky.bridge import DeviceBridge
from custom_components.darksky.platform import DarkSkyPlatform, DarkSkyPlugin
from custom_components.darksky.store import ConfigEntryStore

PLUGIN_NAME = "Wetter"

CURRENTLY = {
    "temperature": 12.3,
    "humidity": 0.57,
    "precipIntensity": 0.25,
    "windSpeed": 5,
    "windBearing": 270,
    "uvIndex": 3,
    "summary": "Böig",
    "dewPoint": 4.1,
}


class FakeResponse:
    def __init__(self, status, payload):
        self.status = status
        self._payload = payload

    async def json(self):
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        return False


class FakeSession:
    """Records GET calls and answers with a fixed payload or error."""

    def __init__(self, payload=None, status=200, error=None):
        self.payload = payload if payload is not None else {"currently": dict(CURRENTLY)}
        self.status = status
        self.error = error
        self.calls = []

    def get(self, url, **kwargs):
        self.calls.append((url, kwargs))
        if self.error is not None:
            raise self.error
        return FakeResponse(self.status, self.payload)


@pytest.fixture
def hass():
    hass = MagicMock()
    hass.created_tasks = []

    def _create_task(coro, *args, **kwargs):
        hass.created_tasks.append(coro)
        return MagicMock()

    hass.async_create_task.side_effect = _create_task
    yield hass
    for coro in hass.created_tasks:
        coro.close()


@pytest.fixture
def entry():
    return SimpleNamespace(
        entry_id="entry1",
        title=PLUGIN_NAME,
        data={"name": PLUGIN_NAME, "key_secret": "secret", "latitude": "49.0", "longitude": "8.4"},
        options={},
    )


@pytest.fixture
def store(hass, entry):
    def _update_entry(config_entry, options=None, **kwargs):
        config_entry.options = options

    hass.config_entries.async_update_entry.side_effect = _update_entry
    store = ConfigEntryStore(hass)
    store.register(PLUGIN_NAME, entry)
    return store


@pytest.fixture
def session():
    return FakeSession()


@pytest.fixture
def call_later():
    """Patched async_call_later; each call returns a new cancel mock."""
    with patch("custom_components.darksky.platform.async_call_later") as mock_call_later:
        mock_call_later.side_effect = lambda hass, delay, action: MagicMock(name="cancel")
        yield mock_call_later


@pytest.fixture
def bridge():
    return DeviceBridge()


@pytest.fixture
def platform(hass, bridge, store, session, call_later):
    plugin = DarkSkyPlugin(name=PLUGIN_NAME, instance="entry1")
    return DarkSkyPlatform(plugin, hass, bridge, store, session)
