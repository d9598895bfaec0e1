"""Constants for the DarkSky integration."""

from pathlib import Path

DOMAIN = "darksky"

PLATFORMS = ["sensor", "binary_sensor"]

# ------------------------
# Config / Options keys
# ------------------------

CONF_NAME = "name"
CONF_KEY_SECRET = "key_secret"
CONF_LATITUDE = "latitude"
CONF_LONGITUDE = "longitude"

SETTINGS_KEYS = (CONF_KEY_SECRET, CONF_LATITUDE, CONF_LONGITUDE)

DEFAULT_NAME = "DarkSky"

# ------------------------
# Device model
# ------------------------

DEVICE_TYPE_ID = "DarkSky"
DEVICE_MODEL = "HM-WDS100-C6-O"
DEVICE_CHANNEL_COUNT = 2
MANUFACTURER = "Dark Sky"

CHANNEL_WEATHER = "WEATHER"
CHANNEL_WEATHER_INDEX = 1

# ------------------------
# Dark Sky API
# ------------------------

DARKSKY_URL = "https://api.darksky.net/forecast/{key}/{latitude},{longitude}"
DARKSKY_PARAMS = {
    "lang": "de",
    "units": "si",
    "exclude": "minutely,hourly,daily,alerts,flags",
}
REQUEST_TIMEOUT = 20  # seconds
REFRESH_INTERVAL = 900  # seconds (15 min)

RAINING_THRESHOLD = 0.1  # mm/h

# ------------------------
# Resources
# ------------------------

PLUGIN_PATH = Path(__file__).parent
DEVICE_DEFINITION_PATH = PLUGIN_PATH / "devices" / f"{DEVICE_MODEL}.json"
LOCALIZATION_PATH = PLUGIN_PATH / "localizable.json"

TEMPLATE_INDEX = "index.html"
TEMPLATE_APP = "app.js"
