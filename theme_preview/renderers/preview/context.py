"""Per-render context shared by section components."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import Any

from theme_preview.media.resolver import MediaResolver
from theme_preview.models.render import RenderNode
from theme_preview.models.section import Block
from theme_preview.renderers.base import RenderOptions

from .blocks import BlockDispatcher


@dataclass(slots=True)
class RenderContext:
    media: MediaResolver
    blocks: BlockDispatcher
    options: RenderOptions = field(default_factory=RenderOptions)

    def resolve(self, url: Any) -> str | None:
        if not url or not isinstance(url, str):
            return None
        return self.media.resolve(url)

    def render_blocks(self, blocks: Iterable[Block]) -> list[RenderNode]:
        return self.blocks.render_all(blocks)

    def enabled(self, blocks: Iterable[Block]) -> list[Block]:
        return [block for block in blocks if not block.disabled]

    def first_block(self, blocks: Sequence[Block], block_type: str | None = None) -> Block | None:
        """First enabled block, optionally restricted to ``block_type``."""
        return next(
            (
                block
                for block in blocks
                if not block.disabled and (block_type is None or block.type == block_type)
            ),
            None,
        )


__all__ = ["RenderContext"]
