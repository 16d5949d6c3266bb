"""Render-tree renderer for theme previews."""

from .blocks import BlockDispatcher
from .context import RenderContext
from .dispatcher import SectionDispatcher
from .renderer import ThemeRenderer, css_variables
from .sections import GenericSectionComponent

__all__ = [
    "BlockDispatcher",
    "GenericSectionComponent",
    "RenderContext",
    "SectionDispatcher",
    "ThemeRenderer",
    "css_variables",
]
