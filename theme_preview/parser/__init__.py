"""Parsing and loading helpers."""

from .settings_data_parser import parse_section, parse_settings_data, to_pascal_case
from .theme_document import (
    load_media_path,
    load_theme_path,
    media_registry_from_json,
    theme_document_from_json,
)

__all__ = [
    "load_media_path",
    "load_theme_path",
    "media_registry_from_json",
    "parse_section",
    "parse_settings_data",
    "theme_document_from_json",
    "to_pascal_case",
]
