from __future__ import annotations

import asyncio
from collections.abc import Iterator
import logging
from typing import Any

import aiohttp

from .const import DARKSKY_PARAMS, DARKSKY_URL, RAINING_THRESHOLD, REQUEST_TIMEOUT

_LOGGER = logging.getLogger(__name__)

UMLAUTS = (
    ("ä", "ae"),
    ("ü", "ue"),
    ("ö", "oe"),
    ("Ä", "Ae"),
    ("Ü", "Ue"),
    ("Ö", "Oe"),
)


class DarkSkyError(Exception):
    """Dark Sky request failed (transport error, bad HTTP status or body)."""


def humidity_percent(fraction: float | None) -> int | None:
    # 0..1 -> 0..100, truncated
    if fraction is None:
        return None
    return int(fraction * 100)


def ms_to_kmh(value: float | None) -> float | None:
    if value is None:
        return None
    return value * 3.6


def precip_intensity(value: float | None) -> float:
    return value if value else 0


def is_raining(value: float | None) -> bool:
    return bool(value) and value > RAINING_THRESHOLD


def transliterate(text: str) -> str:
    for char, replacement in UMLAUTS:
        text = text.replace(char, replacement)
    return text


def build_request_url(key: str, latitude: str, longitude: str) -> str:
    return DARKSKY_URL.format(key=key, latitude=latitude, longitude=longitude)


def iter_channel_values(currently: dict[str, Any]) -> Iterator[tuple[str, Any]]:
    """Yield (value key, value) pairs for the WEATHER channel.

    Each value is computed only when the previous one has been consumed, so a
    bad field stops the update there and leaves the earlier values applied.
    """
    precip = currently.get("precipIntensity")

    yield "TEMPERATURE", currently.get("temperature")
    yield "HUMIDITY", humidity_percent(currently.get("humidity"))
    yield "RAIN_COUNTER", precip_intensity(precip)
    yield "RAINING", is_raining(precip)
    yield "WIND_SPEED", ms_to_kmh(currently.get("windSpeed"))
    yield "WIND_DIRECTION", currently.get("windBearing")
    yield "WIND_DIRECTION_RANGE", 0
    yield "SUNSHINEDURATION", 0
    yield "BRIGHTNESS", currently.get("uvIndex")
    yield "SUMMARY", transliterate(currently.get("summary"))
    yield "DEWPOINT", currently.get("dewPoint")


async def async_fetch_forecast(session: aiohttp.ClientSession, key: str, latitude: str,
                               longitude: str) -> dict:
    url = build_request_url(key, latitude, longitude)
    headers = {"Accept-Encoding": "gzip"}
    try:
        async with session.get(
            url,
            params=DARKSKY_PARAMS,
            headers=headers,
            timeout=aiohttp.ClientTimeout(total=REQUEST_TIMEOUT),
        ) as resp:
            _LOGGER.debug("response: %s", resp.status)
            if resp.status != 200:
                raise DarkSkyError(f"Dark Sky HTTP {resp.status}")
            return await resp.json()
    except (aiohttp.ClientError, asyncio.TimeoutError) as err:
        raise DarkSkyError(f"Dark Sky request failed: {err}") from err
    except ValueError as err:
        # body announced as JSON but not decodable
        raise DarkSkyError(f"Unable to parse weather response: {err}") from err
