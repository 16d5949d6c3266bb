"""Defensive readers for free-form theme settings.

Theme settings carry no declared schema and the same concept often arrives
under several historical key spellings. Readers here never raise: a missing or
malformed value is reported as absent and the caller's default applies.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Mapping

_FALSE_STRINGS = frozenset({"", "false", "0", "no", "off"})


@dataclass(frozen=True, slots=True)
class SettingAlias:
    """One logical style property and the ordered keys it may arrive under."""

    prop: str
    keys: tuple[str, ...]
    default: Any = None
    length: bool = False

    def lookup(self, settings: Mapping[str, Any]) -> Any:
        return first_setting(settings, *self.keys, default=self.default)


# Hyphenated (CSS logical) spellings come first; underscore forms are the
# older theme schema names.
SECTION_STYLE_ALIASES: tuple[SettingAlias, ...] = (
    SettingAlias("padding-top", ("padding-block-start", "padding_top"), default=0, length=True),
    SettingAlias("padding-bottom", ("padding-block-end", "padding_bottom"), default=0, length=True),
    SettingAlias("padding-left", ("padding-inline-start",), default=0, length=True),
    SettingAlias("padding-right", ("padding-inline-end",), default=0, length=True),
    SettingAlias("background-color", ("background_color",)),
    SettingAlias("gap", ("gap",), length=True),
    SettingAlias("flex-direction", ("content_direction",), default="column"),
    SettingAlias("align-items", ("horizontal_alignment",), default="center"),
    SettingAlias("justify-content", ("vertical_alignment",), default="center"),
)

SECTION_HEIGHTS: dict[str, str] = {
    "small": "300px",
    "medium": "500px",
    "large": "700px",
}


def is_present(value: Any) -> bool:
    return value is not None and value != ""


def is_truthy(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() not in _FALSE_STRINGS
    return bool(value)


def first_setting(settings: Mapping[str, Any] | None, *keys: str, default: Any = None) -> Any:
    """Return the first present value among ``keys`` in order."""
    if not settings:
        return default
    for key in keys:
        value = settings.get(key)
        if is_present(value):
            return value
    return default


def setting_str(settings: Mapping[str, Any] | None, *keys: str, default: str | None = None) -> str | None:
    """Return the first scalar value among ``keys`` as a string.

    Nested maps and lists are not text and are skipped.
    """
    if not settings:
        return default
    for key in keys:
        value = settings.get(key)
        if not is_present(value) or isinstance(value, (dict, list, tuple)):
            continue
        if isinstance(value, bool):
            return "true" if value else "false"
        return str(value)
    return default


def setting_int(settings: Mapping[str, Any] | None, *keys: str, default: int) -> int:
    value = first_setting(settings, *keys)
    if isinstance(value, bool):
        return default
    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            return default
    if isinstance(value, int):
        return value
    if isinstance(value, float) and math.isfinite(value):
        return int(value)
    return default


def setting_list(settings: Mapping[str, Any] | None, key: str) -> list[Any]:
    value = settings.get(key) if settings else None
    return list(value) if isinstance(value, (list, tuple)) else []


def css_length(value: Any) -> str | None:
    """Format a length the way inline style objects do: bare numbers are pixels."""
    if isinstance(value, bool) or not is_present(value):
        return None
    if isinstance(value, (int, float)):
        return "0" if value == 0 else f"{value:g}px"
    if isinstance(value, str):
        return value.strip() or None
    return None


def css_value(value: Any) -> str | None:
    if isinstance(value, bool) or not is_present(value):
        return None
    if isinstance(value, (int, float, str)):
        return str(value)
    return None


def section_height(value: Any) -> str:
    """Bucket a ``section_height`` setting into a fixed minimum height."""
    if isinstance(value, str):
        return SECTION_HEIGHTS.get(value, "auto")
    return "auto"


def resolve_style(
    settings: Mapping[str, Any] | None,
    aliases: tuple[SettingAlias, ...] = SECTION_STYLE_ALIASES,
) -> dict[str, str]:
    """Build a style-property bag from ``settings`` using an alias table."""
    style: dict[str, str] = {}
    for alias in aliases:
        raw = alias.lookup(settings or {})
        value = _format(raw, alias.length)
        if value is None and alias.default is not None:
            value = _format(alias.default, alias.length)
        if value is not None:
            style[alias.prop] = value
    return style


def _format(value: Any, length: bool) -> str | None:
    return css_length(value) if length else css_value(value)


def compact_style(props: Mapping[str, Any]) -> dict[str, str]:
    """Drop absent entries and stringify the rest."""
    style: dict[str, str] = {}
    for key, raw in props.items():
        value = css_value(raw)
        if value is not None:
            style[key] = value
    return style


__all__ = [
    "SECTION_HEIGHTS",
    "SECTION_STYLE_ALIASES",
    "SettingAlias",
    "compact_style",
    "css_length",
    "css_value",
    "first_setting",
    "is_present",
    "is_truthy",
    "resolve_style",
    "section_height",
    "setting_int",
    "setting_list",
    "setting_str",
]
