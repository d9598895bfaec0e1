"""
Tests for the virtual device model: publishing, channels and value updates.
"""

import json

import pytest

from custom_components.darksky.bridge import DeviceBridge, VirtualDevice
from custom_components.darksky.const import (
    DEVICE_CHANNEL_COUNT,
    DEVICE_DEFINITION_PATH,
    DEVICE_MODEL,
    DEVICE_TYPE_ID,
)


@pytest.fixture
def published(bridge):
    bridge.publish_device(DEVICE_TYPE_ID, DEVICE_MODEL, DEVICE_DEFINITION_PATH, DEVICE_CHANNEL_COUNT)
    return bridge


@pytest.fixture
def channel(published):
    device = published.create_device("Wetter", DEVICE_MODEL, DEVICE_TYPE_ID)
    return device.get_channel_with_type_and_index("WEATHER", 1)


class TestPublish:
    def test_publish_definition(self, published):
        assert published.is_published(DEVICE_MODEL)

    def test_channel_count_mismatch(self, bridge):
        with pytest.raises(ValueError, match="expected 3"):
            bridge.publish_device(DEVICE_TYPE_ID, DEVICE_MODEL, DEVICE_DEFINITION_PATH, 3)
        assert not bridge.is_published(DEVICE_MODEL)

    def test_missing_definition_file(self, bridge, tmp_path):
        with pytest.raises(FileNotFoundError):
            bridge.publish_device("X", "X-1", tmp_path / "missing.json", 1)

    def test_custom_definition(self, bridge, tmp_path):
        path = tmp_path / "dev.json"
        path.write_text(json.dumps({"channels": [{"index": 1, "type": "SWITCH", "values": {"STATE": False}}]}))

        bridge.publish_device("Test", "TEST-1", path, 1)
        device = bridge.create_device("d", "TEST-1", "Test")

        assert device.get_channel_with_type_and_index("SWITCH", 1).get_value("STATE") is False

    def test_unknown_model(self, bridge):
        with pytest.raises(KeyError):
            bridge.create_device("Wetter", "HM-UNKNOWN", DEVICE_TYPE_ID)


class TestDevice:
    def test_create_device_channels(self, published):
        device = published.create_device("Wetter", DEVICE_MODEL, DEVICE_TYPE_ID)

        assert device.name == "Wetter"
        assert device.model_id == DEVICE_MODEL
        assert device.type_id == DEVICE_TYPE_ID
        assert [c.type for c in device.channels] == ["MAINTENANCE", "WEATHER"]
        weather = device.get_channel_with_type_and_index("WEATHER", "1")
        assert "SUMMARY" in weather.value_keys
        assert "DEWPOINT" in weather.value_keys
        assert device.get_channel_with_type_and_index("WEATHER", 0) is None

    def test_add_remove_device(self, published):
        device = published.create_device("Wetter", DEVICE_MODEL, DEVICE_TYPE_ID)

        published.add_device(device)
        assert published.get_device("Wetter") is device
        assert published.devices == [device]

        published.remove_device(device)
        assert published.get_device("Wetter") is None
        published.remove_device(device)

    def test_uninitialized_device_has_no_channels(self):
        assert VirtualDevice("x").get_channel_with_type_and_index("WEATHER", 1) is None


class TestUpdateValue:
    def test_changed_value_notifies(self, channel):
        events = []
        channel.add_listener(lambda key, value, force: events.append((key, value, force)))

        assert channel.update_value("TEMPERATURE", 20.5, True, False) is True
        assert channel.get_value("TEMPERATURE") == 20.5
        assert events == [("TEMPERATURE", 20.5, False)]

    def test_unchanged_value_is_silent_unless_forced(self, channel):
        events = []
        channel.add_listener(lambda key, value, force: events.append((key, value, force)))
        channel.update_value("HUMIDITY", 57, True, False)

        assert channel.update_value("HUMIDITY", 57, True, False) is False
        assert len(events) == 1

        channel.update_value("HUMIDITY", 57, True, True)
        assert events[-1] == ("HUMIDITY", 57, True)
        assert len(events) == 2

    def test_no_notify(self, channel):
        events = []
        channel.add_listener(lambda *args: events.append(args))

        channel.update_value("TEMPERATURE", 1.0, False, True)

        assert channel.get_value("TEMPERATURE") == 1.0
        assert events == []

    def test_unknown_key_ignored(self, channel):
        events = []
        channel.add_listener(lambda *args: events.append(args))

        assert channel.update_value("PRESSURE", 1013, True, True) is False
        assert channel.get_value("PRESSURE") is None
        assert events == []

    def test_remove_listener(self, channel):
        events = []
        remove = channel.add_listener(lambda *args: events.append(args))
        remove()
        remove()

        channel.update_value("TEMPERATURE", 3.0, True, True)
        assert events == []
