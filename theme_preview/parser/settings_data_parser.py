"""Shopify ``settings_data.json`` → ThemeDocument conversion."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from theme_preview.models.section import Block, ComponentType, Section
from theme_preview.models.theme import DEFAULT_PAGE, PageData, ThemeDocument
from theme_preview.settings import is_truthy

logger = logging.getLogger(__name__)

SECTION_COMPONENTS: dict[str, ComponentType] = {
    "header": ComponentType.HEADER,
    "announcement-bar": ComponentType.ANNOUNCEMENT_BAR,
    "slideshow": ComponentType.BANNER,
    "image-banner": ComponentType.BANNER,
    "featured-collection": ComponentType.FEATURED_COLLECTION,
    "featured-product": ComponentType.FEATURED_PRODUCT,
    "collection-list": ComponentType.COLLECTION_LIST,
    "multicolumn": ComponentType.MULTI_COLUMN,
    "rich-text": ComponentType.RICH_TEXT,
    "footer": ComponentType.FOOTER,
    "image-with-text": ComponentType.IMAGE_WITH_TEXT,
    "video": ComponentType.VIDEO,
    "newsletter": ComponentType.NEWSLETTER,
}

_NON_SETTING_KEYS = frozenset({"sections", "order", "content_for_index", "color_schemes"})
_TYPOGRAPHY_MARKERS = ("font", "type_", "heading", "body_scale")


def parse_settings_data(
    data: Mapping[str, Any],
    *,
    page: str = DEFAULT_PAGE,
    version: int | str | None = 1,
) -> ThemeDocument:
    """Convert a raw theme settings payload into a ThemeDocument.

    Sections listed in ``order`` come first, in that order; sections missing
    from the order list follow in payload order.
    """
    if not isinstance(data, Mapping):
        raise TypeError(f"Expected a settings_data mapping, received {type(data).__name__}")

    current = _current_settings(data)
    sections = current.get("sections") or {}
    if not isinstance(sections, Mapping):
        raise ValueError("settings_data 'sections' must be an object")
    order = [section_id for section_id in current.get("order") or [] if section_id in sections]
    remaining = [section_id for section_id in sections if section_id not in order]

    components = tuple(
        parse_section(section_id, sections[section_id])
        for section_id in [*order, *remaining]
        if isinstance(sections[section_id], Mapping)
    )
    logger.debug("Parsed %d sections from settings_data", len(components))

    return ThemeDocument(
        version=version,
        theme={
            "colors": extract_colors(current),
            "typography": extract_typography(current),
            "colorSchemes": current.get("color_schemes") or {},
            "settings": extract_settings(current),
        },
        pages={page: PageData(components=components)},
        components=components,
        raw_data=dict(data),
    )


def parse_section(section_id: str, section: Mapping[str, Any]) -> Section:
    section_type = str(section.get("type") or "")
    component = SECTION_COMPONENTS.get(section_type)
    component_name = component.value if component else to_pascal_case(section_type)
    settings = dict(section.get("settings") or {})
    settings["disabled"] = is_truthy(section.get("disabled"))

    blocks = section.get("blocks") or {}
    if not isinstance(blocks, Mapping):
        blocks = {}
    block_order = section.get("block_order") or []
    parsed_blocks = tuple(
        _parse_block(block_id, blocks[block_id])
        for block_id in block_order
        if isinstance(blocks.get(block_id), Mapping)
    )
    return Section(
        id=section_id,
        component_type=component_name,
        schema_type=section_type,
        settings=settings,
        blocks=parsed_blocks,
    )


def _parse_block(block_id: str, block: Mapping[str, Any]) -> Block:
    return Block(
        id=block_id,
        type=str(block.get("type") or ""),
        settings=dict(block.get("settings") or {}),
        disabled=block.get("disabled", False),
    )


def extract_colors(current: Mapping[str, Any]) -> dict[str, str]:
    return {
        key: value
        for key, value in current.items()
        if ("color" in key or "background" in key) and key != "color_schemes" and isinstance(value, str)
    }


def extract_typography(current: Mapping[str, Any]) -> dict[str, Any]:
    return {
        key: value
        for key, value in current.items()
        if any(marker in key for marker in _TYPOGRAPHY_MARKERS) and not isinstance(value, (dict, list))
    }


def extract_settings(current: Mapping[str, Any]) -> dict[str, Any]:
    return {
        key: value
        for key, value in current.items()
        if key not in _NON_SETTING_KEYS and not isinstance(value, (dict, list))
    }


def to_pascal_case(value: str) -> str:
    """``product-list`` → ``ProductList``."""
    parts = value.replace("_", "-").split("-")
    return "".join(part[:1].upper() + part[1:] for part in parts if part)


def _current_settings(data: Mapping[str, Any]) -> Mapping[str, Any]:
    current = data.get("current")
    if isinstance(current, str):
        # A preset name; the live settings sit under ``presets``.
        presets = data.get("presets") or {}
        current = presets.get(current) if isinstance(presets, Mapping) else None
    if current is None:
        return {}
    if not isinstance(current, Mapping):
        raise ValueError("settings_data 'current' must be an object or a preset name")
    return current


__all__ = [
    "SECTION_COMPONENTS",
    "extract_colors",
    "extract_settings",
    "extract_typography",
    "parse_section",
    "parse_settings_data",
    "to_pascal_case",
]
