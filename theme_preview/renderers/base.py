"""Renderer interfaces and shared helpers."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol

from theme_preview.models.render import NodeKind, RenderNode
from theme_preview.models.section import Block
from theme_preview.settings import compact_style

if TYPE_CHECKING:  # pragma: no cover - type checking only
    from theme_preview.media.resolver import MediaResolver
    from theme_preview.renderers.preview.context import RenderContext


@dataclass(slots=True)
class RenderOptions:
    ensure_chrome: bool = False
    placeholder_products: bool = True


class BlockComponent(Protocol):
    def render(self, block: Block, *, media: MediaResolver) -> RenderNode | None:
        ...


class SectionComponent(Protocol):
    def render(
        self,
        settings: Mapping[str, Any],
        blocks: Sequence[Block],
        *,
        ctx: RenderContext,
    ) -> RenderNode:
        ...


def leaf(
    tag: str,
    *,
    style: Mapping[str, Any] | None = None,
    key: str | None = None,
    **attrs: Any,
) -> RenderNode:
    """Build a leaf node, dropping absent attributes and style entries."""
    return RenderNode(
        kind=NodeKind.LEAF,
        tag=tag,
        key=key,
        style_props=compact_style(style or {}),
        attrs=_present(attrs),
    )


def group(
    tag: str,
    children: Sequence[RenderNode | None],
    *,
    kind: NodeKind = NodeKind.LEAF,
    style: Mapping[str, Any] | None = None,
    key: str | None = None,
    **attrs: Any,
) -> RenderNode:
    """Build a container node; ``None`` children are skipped."""
    return RenderNode(
        kind=kind,
        tag=tag,
        key=key,
        style_props=compact_style(style or {}),
        attrs=_present(attrs),
        children=tuple(child for child in children if child is not None),
    )


def _present(attrs: Mapping[str, Any]) -> dict[str, Any]:
    return {name: value for name, value in attrs.items() if value is not None and value != ""}


__all__ = ["BlockComponent", "RenderOptions", "SectionComponent", "group", "leaf"]
