"""Load theme documents and media registries from JSON sources."""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from theme_preview.models.media import MediaEntry
from theme_preview.models.theme import ThemeDocument

from .settings_data_parser import parse_settings_data


def theme_document_from_json(payload: str | bytes | Mapping[str, Any]) -> ThemeDocument:
    """Validate a theme-data payload.

    Raw ``settings_data.json`` payloads (recognised by their ``current`` key)
    are converted first.
    """
    data = _decode(payload)
    if not isinstance(data, Mapping):
        raise TypeError(f"Theme document must be a JSON object, received {type(data).__name__}")
    if "current" in data and "pages" not in data and "components" not in data:
        return parse_settings_data(data)
    return ThemeDocument.model_validate(data)


def load_theme_path(path: str | Path) -> ThemeDocument:
    content = Path(path).expanduser().read_text(encoding="utf-8")
    return theme_document_from_json(content)


def media_registry_from_json(payload: str | bytes | list[Any] | Mapping[str, Any]) -> list[MediaEntry]:
    """Validate a media registry.

    Accepts a bare list or an API envelope ``{"data": [...]}`` / ``{"media": [...]}``.
    """
    data = _decode(payload)
    if isinstance(data, Mapping):
        data = data.get("data", data.get("media", []))
    if not isinstance(data, list):
        raise TypeError(f"Media registry must be a JSON array, received {type(data).__name__}")
    return [MediaEntry.model_validate(entry) for entry in data if isinstance(entry, Mapping)]


def load_media_path(path: str | Path) -> list[MediaEntry]:
    content = Path(path).expanduser().read_text(encoding="utf-8")
    return media_registry_from_json(content)


def _decode(payload: Any) -> Any:
    if isinstance(payload, (str, bytes, bytearray)):
        return json.loads(payload)
    if hasattr(payload, "read"):
        return json.load(payload)
    return payload


__all__ = [
    "load_media_path",
    "load_theme_path",
    "media_registry_from_json",
    "theme_document_from_json",
]
