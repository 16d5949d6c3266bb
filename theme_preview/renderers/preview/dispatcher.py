"""Section dispatch: specialized renderer by exact type, else the generic one."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum

from theme_preview.media.resolver import MediaResolver
from theme_preview.models.render import NodeKind, RenderNode
from theme_preview.models.section import ComponentType, Section
from theme_preview.renderers.base import RenderOptions, SectionComponent

from .blocks import BlockDispatcher
from .context import RenderContext
from .sections import DEFAULT_SECTION_COMPONENTS, GenericSectionComponent

logger = logging.getLogger(__name__)


def _default_components() -> dict[str, SectionComponent]:
    return dict(DEFAULT_SECTION_COMPONENTS)


@dataclass(slots=True)
class SectionDispatcher:
    media: MediaResolver = field(default_factory=MediaResolver)
    options: RenderOptions = field(default_factory=RenderOptions)
    _components: dict[str, SectionComponent] = field(default_factory=dict)
    _fallback_component: SectionComponent | None = None
    _block_dispatcher: BlockDispatcher | None = None

    def __post_init__(self) -> None:
        if not self._components:
            self._components = _default_components()
        if self._fallback_component is None:
            self._fallback_component = GenericSectionComponent()
        if self._block_dispatcher is None:
            self._block_dispatcher = BlockDispatcher(media=self.media)

    @property
    def blocks(self) -> BlockDispatcher:
        assert self._block_dispatcher is not None, "Block dispatcher must be configured"
        return self._block_dispatcher

    def register(self, component_type: ComponentType | str, component: SectionComponent) -> None:
        self._components[_key(component_type)] = component

    def has_component(self, component_type: ComponentType | str) -> bool:
        return _key(component_type) in self._components

    def dispatch(self, section: Section) -> RenderNode | None:
        """Render ``section`` wrapped in a labelled section node.

        Disabled sections produce nothing at all. An unknown component type is
        routine and goes to the generic renderer.
        """
        if section.is_disabled:
            logger.debug("Skipping disabled section %s", section.id)
            return None

        component = self._components.get(section.component_type)
        if component is None:
            logger.debug(
                "No section component for %r (%s); using generic renderer",
                section.component_type,
                section.id,
            )
            component = self._fallback_component
        assert component is not None, "Fallback component must be configured"

        ctx = RenderContext(media=self.media, blocks=self.blocks, options=self.options)
        body = component.render(section.settings, section.blocks, ctx=ctx)
        return RenderNode(
            kind=NodeKind.SECTION,
            tag=section.label or "section",
            key=section.id or None,
            attrs={"component": section.component_type} if section.component_type else {},
            children=(body,),
        )


def _key(component_type: ComponentType | str) -> str:
    return component_type.value if isinstance(component_type, Enum) else str(component_type)


__all__ = ["SectionDispatcher"]
