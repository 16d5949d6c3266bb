"""Renderer implementations and helpers."""

from .base import RenderOptions
from .preview import BlockDispatcher, SectionDispatcher, ThemeRenderer

__all__ = ["BlockDispatcher", "RenderOptions", "SectionDispatcher", "ThemeRenderer"]
