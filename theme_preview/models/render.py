"""Render tree produced for the presentation layer."""

from __future__ import annotations

from collections.abc import Iterator
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class NodeKind(str, Enum):
    SECTION = "section"
    BLOCK = "block"
    LEAF = "leaf"


class RenderNode(BaseModel):
    """Presentation-agnostic UI node.

    ``style_props`` holds resolved inline style values; ``attrs`` carries the
    remaining payload (``src``, ``href``, ``text``, raw ``html`` and so on).
    """

    kind: NodeKind
    tag: str
    style_props: dict[str, str] = Field(default_factory=dict)
    attrs: dict[str, Any] = Field(default_factory=dict)
    children: tuple[RenderNode, ...] = Field(default_factory=tuple)
    key: str | None = None

    model_config = ConfigDict(frozen=True)

    def walk(self) -> Iterator[RenderNode]:
        """Depth-first, pre-order traversal including ``self``."""
        yield self
        for child in self.children:
            yield from child.walk()

    def find_all(self, tag: str) -> list[RenderNode]:
        return [node for node in self.walk() if node.tag == tag]

    def find(self, tag: str) -> RenderNode | None:
        return next((node for node in self.walk() if node.tag == tag), None)

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)


class PageRender(BaseModel):
    """Rendered page: ordered section nodes plus theme CSS variables."""

    page: str | None = None
    nodes: tuple[RenderNode, ...] = Field(default_factory=tuple)
    css_variables: dict[str, str] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)

    @property
    def is_empty(self) -> bool:
        return not self.nodes

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)


__all__ = ["NodeKind", "PageRender", "RenderNode"]
