"""Localized strings for the settings page."""
from __future__ import annotations

from functools import lru_cache
import json
from pathlib import Path
from typing import Any

DEFAULT_LANGUAGE = "en"


@lru_cache(maxsize=None)
def load_strings(path: str) -> dict[str, dict[str, str]]:
    with open(path, encoding="utf-8") as fh:
        data = json.load(fh)
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected an object of languages")
    return data


def _request_languages(request: Any) -> list[str]:
    """Primary language subtags, in order of preference."""
    if request is None:
        return []
    if isinstance(request, str):
        header = request
    else:
        headers = getattr(request, "headers", None)
        if headers is None:
            # DispatchedRequest keeps the aiohttp request on .request
            headers = getattr(getattr(request, "request", None), "headers", None) or {}
        header = headers.get("Accept-Language", "")

    languages = []
    for part in header.split(","):
        tag = part.split(";", 1)[0].strip()
        if tag and tag != "*":
            languages.append(tag.replace("_", "-").split("-", 1)[0].lower())
    return languages


class Localization:
    def __init__(self, path: str | Path) -> None:
        self._strings = load_strings(str(path))
        self.language = DEFAULT_LANGUAGE

    def set_language(self, request: Any) -> str:
        """Pick the language from a language code or a request's Accept-Language."""
        self.language = DEFAULT_LANGUAGE
        for lang in _request_languages(request):
            if lang == DEFAULT_LANGUAGE or lang in self._strings:
                self.language = lang
                break
        return self.language

    def localize(self, key: str) -> str:
        return self._strings.get(self.language, {}).get(key, key)
