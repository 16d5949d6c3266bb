"""Shared preview state (theme document, media registry, renderer)."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from theme_preview.config import PreviewConfig, load_config
from theme_preview.models.media import MediaEntry
from theme_preview.models.theme import ThemeDocument
from theme_preview.parser import load_media_path, load_theme_path
from theme_preview.renderers import RenderOptions, ThemeRenderer

PROJECT_ROOT = Path(__file__).resolve().parents[2]
DOTENV_PATH = PROJECT_ROOT / ".env"
SAMPLE_DATA_DIR = PROJECT_ROOT / "data"
SAMPLE_THEME = SAMPLE_DATA_DIR / "sample_theme.json"
SAMPLE_MEDIA = SAMPLE_DATA_DIR / "sample_media.json"

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class PreviewContext:
    config: PreviewConfig
    document: ThemeDocument
    registry: list[MediaEntry]
    renderer: ThemeRenderer


_CONTEXT: Optional[PreviewContext] = None


def get_context() -> PreviewContext:
    """Return a singleton preview context, loading inputs on first access."""

    global _CONTEXT
    if _CONTEXT is None:
        _CONTEXT = _bootstrap_context()
    return _CONTEXT


def reload_context() -> PreviewContext:
    global _CONTEXT
    _CONTEXT = None
    return get_context()


def _bootstrap_context() -> PreviewContext:
    config = load_config(DOTENV_PATH if DOTENV_PATH.exists() else None)
    theme_path = config.theme_path or SAMPLE_THEME
    media_path = config.media_path or SAMPLE_MEDIA

    if theme_path.exists():
        document = load_theme_path(theme_path)
        logger.info("Loaded theme document from %s", theme_path)
    else:
        logger.warning("Theme document missing: %s", theme_path)
        document = ThemeDocument()

    registry = load_media_path(media_path) if media_path.exists() else []
    renderer = ThemeRenderer.from_registry(
        registry,
        config=config,
        options=RenderOptions(ensure_chrome=True),
    )
    return PreviewContext(config=config, document=document, registry=registry, renderer=renderer)


__all__ = ["PreviewContext", "get_context", "reload_context"]
