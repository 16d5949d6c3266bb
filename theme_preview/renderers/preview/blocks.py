"""Block components and the dispatcher that selects between them."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum

from theme_preview.media.resolver import MediaResolver
from theme_preview.media.video import is_native_video, normalize_video_url
from theme_preview.models.render import NodeKind, RenderNode
from theme_preview.models.section import Block, BlockType
from theme_preview.renderers.base import BlockComponent, group, leaf
from theme_preview.settings import css_length, is_truthy, setting_str

logger = logging.getLogger(__name__)

IFRAME_ALLOW = "accelerometer; autoplay; clipboard-write; encrypted-media; gyroscope; picture-in-picture"


# ---------------------------------------------------------------------------
# Component implementations


class TextComponent:
    """Rich text passes through verbatim; sanitizing is the painter's job."""

    def render(self, block: Block, *, media: MediaResolver) -> RenderNode | None:
        settings = block.settings
        return leaf(
            "rich-text",
            class_name="text-block",
            html=setting_str(settings, "text", "heading"),
            style={
                "font-size": css_length(settings.get("font_size")),
                "color": settings.get("color"),
                "text-align": settings.get("alignment"),
                "max-width": css_length(settings.get("max_width")),
            },
        )


class ButtonComponent:
    def render(self, block: Block, *, media: MediaResolver) -> RenderNode | None:
        return button_leaf(
            label=setting_str(block.settings, "label"),
            href=setting_str(block.settings, "link"),
            style_class=setting_str(block.settings, "style_class"),
            new_tab=is_truthy(block.settings.get("open_in_new_tab")),
            width=block.settings.get("width"),
        )


class ImageComponent:
    def render(self, block: Block, *, media: MediaResolver) -> RenderNode | None:
        image = setting_str(block.settings, "image")
        if not image:
            return None
        return leaf(
            "image",
            class_name="block-image",
            src=media.resolve(image),
            alt=setting_str(block.settings, "alt"),
            style={
                "width": css_length(block.settings.get("width")),
                "border-radius": css_length(block.settings.get("corner_radius")),
            },
        )


class VideoComponent:
    def render(self, block: Block, *, media: MediaResolver) -> RenderNode | None:
        url = setting_str(block.settings, "video_url")
        return video_leaf(
            normalize_video_url(media.resolve(url)),
            title=setting_str(block.settings, "title", default="Video content"),
        )


class RowComponent:
    """Composite row: image, caption, heading, rich text, button; each optional."""

    def render(self, block: Block, *, media: MediaResolver) -> RenderNode | None:
        settings = block.settings
        image = setting_str(settings, "image")
        caption = setting_str(settings, "caption")
        heading = setting_str(settings, "heading", "title")
        text = setting_str(settings, "text")
        label = setting_str(settings, "button_label", "button_text")

        parts = [
            leaf("image", class_name="row-image", src=media.resolve(image), alt=setting_str(settings, "alt"))
            if image
            else None,
            leaf("caption", text=caption) if caption else None,
            leaf("heading", level=3, text=heading) if heading else None,
            leaf("rich-text", class_name="row-text", html=text) if text else None,
            button_leaf(
                label=label,
                href=setting_str(settings, "button_link", "link"),
                style_class=setting_str(settings, "style_class"),
                new_tab=is_truthy(settings.get("open_in_new_tab")),
                width=settings.get("button_width"),
            )
            if label
            else None,
        ]
        return group("row", parts, class_name="block-row")


class DefaultBlockComponent:
    """Labels the raw type so unknown schemas are still visible."""

    def render(self, block: Block, *, media: MediaResolver) -> RenderNode | None:
        return leaf(
            "block-default",
            label=block.type or "block",
            text=setting_str(block.settings, "text"),
            title=setting_str(block.settings, "title"),
        )


DEFAULT_BLOCK_COMPONENTS: dict[str, BlockComponent] = {
    BlockType.TEXT.value: TextComponent(),
    BlockType.HEADING.value: TextComponent(),
    BlockType.BUTTON.value: ButtonComponent(),
    BlockType.IMAGE.value: ImageComponent(),
    BlockType.VIDEO.value: VideoComponent(),
    BlockType.ROW.value: RowComponent(),
}


# ---------------------------------------------------------------------------
# Dispatcher


def _default_components() -> dict[str, BlockComponent]:
    return dict(DEFAULT_BLOCK_COMPONENTS)


@dataclass(slots=True)
class BlockDispatcher:
    media: MediaResolver = field(default_factory=MediaResolver)
    _components: dict[str, BlockComponent] = field(default_factory=dict)
    _fallback_component: BlockComponent | None = None

    def __post_init__(self) -> None:
        if not self._components:
            self._components = _default_components()
        if self._fallback_component is None:
            self._fallback_component = DefaultBlockComponent()

    def register(self, block_type: BlockType | str, component: BlockComponent) -> None:
        self._components[_key(block_type)] = component

    def render(self, block: Block) -> RenderNode:
        """Render ``block`` inside its wrapper node.

        The wrapper is always emitted so sibling order and count survive even
        when the leaf itself has nothing to show.
        """
        content = self.render_content(block)
        return RenderNode(
            kind=NodeKind.BLOCK,
            tag=f"block-{block.type}" if block.type else "block",
            key=block.id or None,
            attrs={"class_name": f"block block-{block.type}".strip()},
            children=(content,) if content is not None else (),
        )

    def render_content(self, block: Block) -> RenderNode | None:
        component = self._components.get(block.type)
        if component is None:
            logger.debug("No block component for %r; using default", block.type)
            component = self._fallback_component
        assert component is not None, "Fallback component must be configured"
        return component.render(block, media=self.media)

    def render_all(self, blocks: Iterable[Block]) -> list[RenderNode]:
        return [self.render(block) for block in blocks if not block.disabled]


# Helper utilities -----------------------------------------------------------


def button_leaf(
    *,
    label: str | None,
    href: str | None,
    style_class: str | None = None,
    new_tab: bool = False,
    width: object = None,
) -> RenderNode:
    return leaf(
        "button",
        class_name=f"button {style_class or 'button-primary'}",
        href=href,
        label=label,
        target="_blank" if new_tab else "_self",
        rel="noopener noreferrer" if new_tab else None,
        style={"width": "100%" if width == "full-width" else css_length(width)},
    )


def video_leaf(embed_url: str | None, *, title: str | None = None) -> RenderNode | None:
    """Native player for direct files, an embedded frame for everything else."""
    if not embed_url:
        return None
    if is_native_video(embed_url):
        return leaf("video", src=embed_url, controls=True, class_name="native-video")
    return leaf(
        "iframe",
        src=embed_url,
        title=title or "Video",
        allow=IFRAME_ALLOW,
        allowfullscreen=True,
        class_name="video-embed",
    )


def _key(block_type: BlockType | str) -> str:
    return block_type.value if isinstance(block_type, Enum) else str(block_type)


__all__ = [
    "BlockDispatcher",
    "ButtonComponent",
    "DEFAULT_BLOCK_COMPONENTS",
    "DefaultBlockComponent",
    "ImageComponent",
    "RowComponent",
    "TextComponent",
    "VideoComponent",
    "button_leaf",
    "video_leaf",
]
