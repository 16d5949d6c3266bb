"""Section component implementations."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from theme_preview.media.video import normalize_video_url
from theme_preview.models.render import NodeKind, RenderNode
from theme_preview.models.section import Block, ComponentType
from theme_preview.renderers.base import SectionComponent, group, leaf
from theme_preview.settings import (
    css_length,
    first_setting,
    resolve_style,
    section_height,
    setting_int,
    setting_list,
    setting_str,
)

from .blocks import button_leaf, video_leaf
from .context import RenderContext

DEFAULT_BANNER_BACKGROUND = "linear-gradient(135deg, #667eea 0%, #764ba2 100%)"

HEADER_LINKS: tuple[tuple[str, str], ...] = (
    ("Home", "/"),
    ("Shop", "/collections"),
    ("About", "/pages/about"),
    ("Cart", "/cart"),
)

PLACEHOLDER_PRODUCTS: tuple[dict[str, str], ...] = tuple(
    {
        "title": f"Product {index}",
        "price": price,
        "image": f"https://via.placeholder.com/300x300?text=Product+{index}",
    }
    for index, price in enumerate(("$29.99", "$39.99", "$49.99", "$59.99"), start=1)
)

PRODUCT_LIST_MAX = 8

Parts = list[RenderNode | None]


# ---------------------------------------------------------------------------
# Base component


class BaseSectionComponent(SectionComponent):
    tag = "section"

    def render(
        self,
        settings: Mapping[str, Any],
        blocks: Sequence[Block],
        *,
        ctx: RenderContext,
    ) -> RenderNode:
        return group(
            self.tag,
            self.render_parts(settings, blocks, ctx),
            kind=NodeKind.SECTION,
            style=self.style(settings, blocks, ctx),
            class_name=self.tag,
        )

    def render_parts(
        self,
        settings: Mapping[str, Any],
        blocks: Sequence[Block],
        ctx: RenderContext,
    ) -> Parts:  # pragma: no cover - abstract
        raise NotImplementedError

    def style(
        self,
        settings: Mapping[str, Any],
        blocks: Sequence[Block],
        ctx: RenderContext,
    ) -> Mapping[str, Any]:
        return {}


# ---------------------------------------------------------------------------
# Generic fallback


class GenericSectionComponent(BaseSectionComponent):
    """Schema-agnostic container for sections without a dedicated renderer."""

    tag = "universal-section"

    def render(
        self,
        settings: Mapping[str, Any],
        blocks: Sequence[Block],
        *,
        ctx: RenderContext,
    ) -> RenderNode:
        color_scheme = setting_str(settings, "color_scheme", default="")
        return RenderNode(
            kind=NodeKind.SECTION,
            tag=self.tag,
            style_props=section_style(settings),
            attrs={
                "class_name": f"{self.tag} {color_scheme}".strip(),
                "width_class": setting_str(settings, "section_width", default="page-width"),
            },
            children=tuple(ctx.render_blocks(blocks)),
        )


def section_style(settings: Mapping[str, Any]) -> dict[str, str]:
    style = resolve_style(settings)
    style["min-height"] = section_height(settings.get("section_height"))
    style["display"] = "flex"
    return style


# ---------------------------------------------------------------------------
# Specialized components


class HeaderComponent(BaseSectionComponent):
    tag = "header"

    def render_parts(self, settings: Mapping[str, Any], blocks: Sequence[Block], ctx: RenderContext) -> Parts:
        logo = ctx.resolve(setting_str(settings, "logo"))
        if logo:
            brand = leaf(
                "image",
                class_name="logo",
                src=logo,
                alt="Logo",
                style={"height": css_length(settings.get("logo_height")) or "36px"},
            )
        else:
            brand = leaf("logo-text", text=setting_str(settings, "logo_text", default="Store"))
        nav = group("nav", [leaf("link", href=href, text=label) for label, href in HEADER_LINKS])
        return [brand, nav]

    def style(self, settings: Mapping[str, Any], blocks: Sequence[Block], ctx: RenderContext) -> Mapping[str, Any]:
        return {"background-color": setting_str(settings, "bg_color")}


class AnnouncementBarComponent(BaseSectionComponent):
    tag = "announcement-bar"

    def render_parts(self, settings: Mapping[str, Any], blocks: Sequence[Block], ctx: RenderContext) -> Parts:
        text = setting_str(settings, "text")
        if not text:
            first = ctx.first_block(blocks)
            text = setting_str(first.settings, "text") if first else None
        return [leaf("paragraph", text=text) if text else None]

    def style(self, settings: Mapping[str, Any], blocks: Sequence[Block], ctx: RenderContext) -> Mapping[str, Any]:
        return {"background": setting_str(settings, "background")}


class BannerComponent(BaseSectionComponent):
    tag = "banner"

    def render_parts(self, settings: Mapping[str, Any], blocks: Sequence[Block], ctx: RenderContext) -> Parts:
        return [
            leaf("heading", level=2, text=setting_str(settings, "heading", "title", default="Welcome to our store")),
            leaf("paragraph", text=setting_str(settings, "text", "description", default="Discover amazing products")),
            button_leaf(
                label=setting_str(settings, "button_label", "button_text", default="Shop Now"),
                href=setting_str(settings, "button_link", "link"),
                style_class="banner-btn",
            ),
        ]

    def style(self, settings: Mapping[str, Any], blocks: Sequence[Block], ctx: RenderContext) -> Mapping[str, Any]:
        image = self._image(settings, blocks, ctx)
        return {
            "background-image": f"url({image})" if image else DEFAULT_BANNER_BACKGROUND,
            "min-height": css_length(settings.get("height")) or "400px",
            "background-size": "cover",
            "background-position": "center",
        }

    def _image(self, settings: Mapping[str, Any], blocks: Sequence[Block], ctx: RenderContext) -> str | None:
        image = setting_str(settings, "image", "image_url", "desktop_image")
        if not image:
            first = ctx.first_block(blocks)
            image = setting_str(first.settings, "image_slide", "image") if first else None
        return ctx.resolve(image)


class HeroComponent(BaseSectionComponent):
    tag = "hero"

    def render_parts(self, settings: Mapping[str, Any], blocks: Sequence[Block], ctx: RenderContext) -> Parts:
        image = setting_str(settings, "image", "background_image")
        if not image:
            first = ctx.first_block(blocks)
            image = setting_str(first.settings, "image") if first else None

        heading = setting_str(settings, "heading")
        if not heading:
            heading_block = ctx.first_block(blocks, "heading")
            heading = setting_str(heading_block.settings, "heading") if heading_block else None

        label = setting_str(settings, "button_label")
        if not label:
            buttons_block = ctx.first_block(blocks, "buttons")
            label = setting_str(buttons_block.settings, "button_label_1") if buttons_block else None

        subheading = setting_str(settings, "subheading", "text")
        src = ctx.resolve(image)
        return [
            leaf("image", class_name="hero-image", src=src, alt="Hero") if src else None,
            leaf("heading", level=2, text=heading) if heading else None,
            leaf("paragraph", text=subheading) if subheading else None,
            button_leaf(label=label, href=setting_str(settings, "button_link", "link")) if label else None,
        ]


class FeaturedCollectionComponent(BaseSectionComponent):
    tag = "featured-collection"

    def render_parts(self, settings: Mapping[str, Any], blocks: Sequence[Block], ctx: RenderContext) -> Parts:
        products = setting_list(settings, "products")
        if not products and ctx.options.placeholder_products:
            products = list(PLACEHOLDER_PRODUCTS)
        title = setting_str(settings, "title", "heading", default="Featured Collection")
        return [
            leaf("heading", level=2, text=title),
            product_grid(products[:4], ctx),
        ]


class FeaturedProductComponent(BaseSectionComponent):
    tag = "featured-product"

    def render_parts(self, settings: Mapping[str, Any], blocks: Sequence[Block], ctx: RenderContext) -> Parts:
        title = setting_str(settings, "title", default="Featured Product")
        image = ctx.resolve(setting_str(settings, "image"))
        details = group(
            "product-info",
            [
                leaf("heading", level=3, text=setting_str(settings, "product_title")),
                leaf("paragraph", text=setting_str(settings, "description")),
                leaf("price", text=setting_str(settings, "price")),
            ],
        )
        return [
            leaf("heading", level=2, text=title),
            group("product-details", [leaf("image", src=image, alt=title) if image else None, details]),
        ]


class ProductListComponent(BaseSectionComponent):
    tag = "product-list"

    def render_parts(self, settings: Mapping[str, Any], blocks: Sequence[Block], ctx: RenderContext) -> Parts:
        title = setting_str(settings, "product_block_title", "title", "heading", default="Products")
        limit = setting_int(settings, "product_block_limit", "products_to_show", "limit", default=6)
        products = setting_list(settings, "products")[: max(0, min(limit, PRODUCT_LIST_MAX))]
        if not products:
            return [
                leaf("heading", level=3, text=title),
                leaf("empty-state", text="No products available"),
            ]
        return [
            leaf("heading", level=3, text=title),
            product_grid(products, ctx),
        ]


class CollectionListComponent(BaseSectionComponent):
    tag = "collection-list"

    def render_parts(self, settings: Mapping[str, Any], blocks: Sequence[Block], ctx: RenderContext) -> Parts:
        cards = []
        for collection in setting_list(settings, "collections"):
            if not isinstance(collection, Mapping):
                continue
            title = setting_str(collection, "title")
            image = ctx.resolve(_image_src(collection.get("image")))
            cards.append(
                group(
                    "collection-item",
                    [leaf("image", src=image, alt=title) if image else None, leaf("heading", level=3, text=title)],
                )
            )
        return [
            leaf("heading", level=2, text=setting_str(settings, "title", default="Collections")),
            group("collections-grid", cards),
        ]


class MultiColumnComponent(BaseSectionComponent):
    tag = "multi-column"

    def render_parts(self, settings: Mapping[str, Any], blocks: Sequence[Block], ctx: RenderContext) -> Parts:
        columns = []
        for block in ctx.enabled(blocks):
            image = ctx.resolve(setting_str(block.settings, "image"))
            title = setting_str(block.settings, "title")
            text = setting_str(block.settings, "text")
            columns.append(
                RenderNode(
                    kind=NodeKind.BLOCK,
                    tag="column",
                    key=block.id or None,
                    children=tuple(
                        node
                        for node in (
                            leaf("image", src=image) if image else None,
                            leaf("heading", level=3, text=title) if title else None,
                            leaf("paragraph", text=text) if text else None,
                        )
                        if node is not None
                    ),
                )
            )
        title = setting_str(settings, "title")
        return [leaf("heading", level=2, text=title) if title else None, group("columns", columns)]


class RichTextComponent(BaseSectionComponent):
    tag = "rich-text-section"

    def render_parts(self, settings: Mapping[str, Any], blocks: Sequence[Block], ctx: RenderContext) -> Parts:
        heading = setting_str(settings, "heading")
        if not heading:
            heading_block = ctx.first_block(blocks, "heading")
            heading = setting_str(heading_block.settings, "heading") if heading_block else None
        text = setting_str(settings, "text")
        if not text:
            text_block = ctx.first_block(blocks, "text")
            text = setting_str(text_block.settings, "text") if text_block else None
        return [
            leaf("heading", level=2, text=heading) if heading else None,
            leaf("rich-text", html=text) if text else None,
        ]


class FooterComponent(BaseSectionComponent):
    tag = "footer"

    def render_parts(self, settings: Mapping[str, Any], blocks: Sequence[Block], ctx: RenderContext) -> Parts:
        links = [
            leaf("link", href=setting_str(link, "url"), text=setting_str(link, "platform"))
            for link in setting_list(settings, "social_links")
            if isinstance(link, Mapping)
        ]
        return [
            leaf("paragraph", text=setting_str(settings, "copyright", default="© 2024 Store")),
            group("social-links", links) if links else None,
        ]


class ImageWithTextComponent(BaseSectionComponent):
    tag = "image-with-text"

    def render_parts(self, settings: Mapping[str, Any], blocks: Sequence[Block], ctx: RenderContext) -> Parts:
        image = ctx.resolve(setting_str(settings, "image"))
        heading = setting_str(settings, "heading")
        text = setting_str(settings, "text")
        return [
            leaf("image", src=image) if image else None,
            group(
                "text-content",
                [
                    leaf("heading", level=2, text=heading) if heading else None,
                    leaf("paragraph", text=text) if text else None,
                ],
            ),
        ]


class VideoSectionComponent(BaseSectionComponent):
    tag = "video-section"

    def render_parts(self, settings: Mapping[str, Any], blocks: Sequence[Block], ctx: RenderContext) -> Parts:
        title = setting_str(settings, "video_block_title", "heading")
        description = setting_str(settings, "video_block_des", "description")
        embed_url = normalize_video_url(ctx.resolve(setting_str(settings, "video_url")))
        player = video_leaf(embed_url, title=title)
        if player is None:
            frame = leaf("placeholder", text="Video section (no video configured)")
        else:
            frame = group(
                "video-frame",
                [player],
                style={"padding-bottom": f"{setting_int(settings, 'video_height', default=54)}%"},
            )
        return [
            leaf("heading", level=2, text=title) if title else None,
            leaf("paragraph", text=description) if description else None,
            frame,
        ]


class NewsletterComponent(BaseSectionComponent):
    tag = "newsletter"

    def render_parts(self, settings: Mapping[str, Any], blocks: Sequence[Block], ctx: RenderContext) -> Parts:
        form = group(
            "form",
            [
                leaf("input", input_type="email", placeholder=setting_str(settings, "placeholder", default="Enter your email")),
                leaf("submit", label=setting_str(settings, "button_label", default="Subscribe")),
            ],
            class_name="newsletter-form",
        )
        return [
            leaf("heading", level=2, text=setting_str(settings, "heading", default="Subscribe to our newsletter")),
            form,
        ]


DEFAULT_SECTION_COMPONENTS: dict[str, SectionComponent] = {
    ComponentType.HEADER.value: HeaderComponent(),
    ComponentType.ANNOUNCEMENT_BAR.value: AnnouncementBarComponent(),
    ComponentType.BANNER.value: BannerComponent(),
    ComponentType.HERO.value: HeroComponent(),
    ComponentType.FEATURED_COLLECTION.value: FeaturedCollectionComponent(),
    ComponentType.FEATURED_PRODUCT.value: FeaturedProductComponent(),
    ComponentType.PRODUCT_LIST.value: ProductListComponent(),
    ComponentType.COLLECTION_LIST.value: CollectionListComponent(),
    ComponentType.MULTI_COLUMN.value: MultiColumnComponent(),
    ComponentType.RICH_TEXT.value: RichTextComponent(),
    ComponentType.FOOTER.value: FooterComponent(),
    ComponentType.IMAGE_WITH_TEXT.value: ImageWithTextComponent(),
    ComponentType.VIDEO.value: VideoSectionComponent(),
    ComponentType.NEWSLETTER.value: NewsletterComponent(),
}


# Helper utilities -----------------------------------------------------------


def product_grid(products: Sequence[Any], ctx: RenderContext) -> RenderNode:
    cards = [product_card(product, ctx) for product in products if isinstance(product, Mapping)]
    return group("product-grid", cards)


def product_card(product: Mapping[str, Any], ctx: RenderContext) -> RenderNode:
    """Card for either a flat ``{title, price, image}`` record or a synced product."""
    title = setting_str(product, "title")
    image = product.get("image")
    if not image:
        images = product.get("images")
        image = images[0] if isinstance(images, list) and images else None
    price = setting_str(product, "price")
    if price is None:
        variants = product.get("variants")
        if isinstance(variants, list) and variants and isinstance(variants[0], Mapping):
            price = setting_str(variants[0], "price")
    src = ctx.resolve(_image_src(image))
    return group(
        "product-card",
        [
            leaf("image", src=src, alt=title) if src else None,
            leaf("heading", level=3, text=title),
            leaf("paragraph", class_name="vendor", text=setting_str(product, "vendor")),
            leaf("price", text=price),
        ],
        key=setting_str(product, "productId", "id"),
    )


def _image_src(image: Any) -> str | None:
    if isinstance(image, Mapping):
        image = first_setting(image, "src", "url")
    return image if isinstance(image, str) and image else None


__all__ = [
    "AnnouncementBarComponent",
    "BannerComponent",
    "BaseSectionComponent",
    "CollectionListComponent",
    "DEFAULT_SECTION_COMPONENTS",
    "FeaturedCollectionComponent",
    "FeaturedProductComponent",
    "FooterComponent",
    "GenericSectionComponent",
    "HeaderComponent",
    "HeroComponent",
    "ImageWithTextComponent",
    "MultiColumnComponent",
    "NewsletterComponent",
    "ProductListComponent",
    "RichTextComponent",
    "VideoSectionComponent",
    "product_card",
    "product_grid",
    "section_style",
]
