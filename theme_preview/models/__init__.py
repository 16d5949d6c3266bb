"""Typed models for theme documents, media and render output."""

from __future__ import annotations

from .media import MediaEntry
from .render import NodeKind, PageRender, RenderNode
from .section import Block, BlockType, ComponentType, Section, Settings
from .theme import DEFAULT_PAGE, PageData, ThemeDocument

__all__ = [
    "Block",
    "BlockType",
    "ComponentType",
    "DEFAULT_PAGE",
    "MediaEntry",
    "NodeKind",
    "PageData",
    "PageRender",
    "RenderNode",
    "Section",
    "Settings",
    "ThemeDocument",
]
