"""Renderer entry-point wiring section dispatch over theme documents."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from theme_preview.config import PreviewConfig
from theme_preview.media.resolver import MediaResolver
from theme_preview.models.media import MediaEntry
from theme_preview.models.render import PageRender, RenderNode
from theme_preview.models.section import ComponentType, Section
from theme_preview.models.theme import ThemeDocument
from theme_preview.renderers.base import RenderOptions

from .dispatcher import SectionDispatcher

logger = logging.getLogger(__name__)

# CSS custom property -> (theme color key, default)
CSS_VARIABLES: dict[str, tuple[str, str]] = {
    "--primary-color": ("color_primary", "#000"),
    "--secondary-color": ("color_secondary", "#666"),
    "--background-color": ("background_color", "#fff"),
}


@dataclass(slots=True)
class ThemeRenderer:
    media: MediaResolver = field(default_factory=MediaResolver)
    options: RenderOptions = field(default_factory=RenderOptions)
    _dispatcher: SectionDispatcher | None = None

    def __post_init__(self) -> None:
        if self._dispatcher is None:
            self._dispatcher = SectionDispatcher(media=self.media, options=self.options)

    @classmethod
    def from_registry(
        cls,
        registry: Iterable[MediaEntry | Mapping[str, Any]] | None = None,
        *,
        config: PreviewConfig | None = None,
        options: RenderOptions | None = None,
    ) -> ThemeRenderer:
        """Bind the media registry and origin once for every render."""
        cfg = config or PreviewConfig()
        media = MediaResolver.from_entries(registry, origin=cfg.origin or "")
        return cls(media=media, options=options or RenderOptions())

    @property
    def dispatcher(self) -> SectionDispatcher:
        assert self._dispatcher is not None, "Section dispatcher must be configured"
        return self._dispatcher

    def render_sections(self, sections: Iterable[Section]) -> tuple[RenderNode, ...]:
        sections = list(sections)
        if self.options.ensure_chrome:
            sections = _with_chrome(sections)
        nodes = (self.dispatcher.dispatch(section) for section in sections)
        return tuple(node for node in nodes if node is not None)

    def render_page(self, document: ThemeDocument, page: str | None = None) -> PageRender:
        sections = document.sections_for(page)
        nodes = self.render_sections(sections)
        logger.info(
            "Rendered page %s: %d of %d sections",
            page or "<default>",
            len(nodes),
            len(sections),
        )
        return PageRender(page=page, nodes=nodes, css_variables=css_variables(document.colors))

    def render_document(self, document: ThemeDocument) -> dict[str, PageRender]:
        if not document.pages:
            return {"index": self.render_page(document)}
        return {name: self.render_page(document, name) for name in document.page_names}


def css_variables(colors: Mapping[str, Any] | None) -> dict[str, str]:
    colors = colors or {}
    variables: dict[str, str] = {}
    for name, (key, default) in CSS_VARIABLES.items():
        value = colors.get(key)
        variables[name] = value if isinstance(value, str) and value else default
    return variables


# Helper utilities -----------------------------------------------------------


def _with_chrome(sections: list[Section]) -> list[Section]:
    """Frame the page with a default header and footer when it lacks them."""
    has_header = any(_is_kind(section, ComponentType.HEADER) for section in sections)
    has_footer = any(_is_kind(section, ComponentType.FOOTER) for section in sections)
    framed = list(sections)
    if not has_header:
        framed.insert(0, Section(id="default-header", component_type="Header", schema_type="header"))
    if not has_footer:
        framed.append(Section(id="default-footer", component_type="Footer", schema_type="footer"))
    return framed


def _is_kind(section: Section, component_type: ComponentType) -> bool:
    return (
        section.component_type == component_type.value
        or (section.schema_type or "").lower() == component_type.value.lower()
    )


__all__ = ["CSS_VARIABLES", "ThemeRenderer", "css_variables"]
