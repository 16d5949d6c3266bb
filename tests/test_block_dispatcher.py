from __future__ import annotations

from theme_preview.models.render import NodeKind, RenderNode
from theme_preview.models.section import Block, BlockType
from theme_preview.renderers import BlockDispatcher
from theme_preview.renderers.preview.blocks import IFRAME_ALLOW

ORIGIN = "http://localhost:3000"


def _content(node: RenderNode) -> RenderNode:
    assert node.kind is NodeKind.BLOCK
    assert len(node.children) == 1
    return node.children[0]


def test_text_block_passes_html_through(block_dispatcher, block_factory):
    block = block_factory("text", text="<p>Hello <b>world</b></p>", font_size=18, alignment="center")

    node = block_dispatcher.render(block)
    text = _content(node)

    assert node.tag == "block-text"
    assert node.key == "text-1"
    assert text.tag == "rich-text"
    assert text.attrs["html"] == "<p>Hello <b>world</b></p>"
    assert text.style_props == {"font-size": "18px", "text-align": "center"}


def test_heading_block_uses_text_renderer(block_dispatcher, block_factory):
    node = block_dispatcher.render(block_factory("heading", heading="<h2>Title</h2>"))
    assert _content(node).attrs["html"] == "<h2>Title</h2>"


def test_button_targets_and_full_width(block_dispatcher, block_factory):
    same_tab = _content(block_dispatcher.render(block_factory("button", label="Go", link="/shop")))
    new_tab = _content(
        block_dispatcher.render(
            block_factory("button", label="Go", link="/shop", open_in_new_tab=True, width="full-width")
        )
    )

    assert same_tab.attrs["target"] == "_self"
    assert "rel" not in same_tab.attrs
    assert same_tab.attrs["class_name"] == "button button-primary"
    assert new_tab.attrs["target"] == "_blank"
    assert new_tab.attrs["rel"] == "noopener noreferrer"
    assert new_tab.style_props["width"] == "100%"


def test_button_string_flag_false_stays_in_tab(block_dispatcher, block_factory):
    node = _content(block_dispatcher.render(block_factory("button", label="Go", open_in_new_tab="false")))
    assert node.attrs["target"] == "_self"


def test_image_resolved_through_registry(block_dispatcher, block_factory):
    node = _content(
        block_dispatcher.render(block_factory("image", image="https://shop.example/files/hero.jpg", alt="Hero"))
    )
    assert node.tag == "image"
    assert node.attrs["src"] == f"{ORIGIN}/media/hero.jpg"
    assert node.attrs["alt"] == "Hero"


def test_image_without_source_keeps_empty_wrapper(block_dispatcher, block_factory):
    node = block_dispatcher.render(block_factory("image"))
    assert node.tag == "block-image"
    assert node.children == ()


def test_video_embed_uses_iframe(block_dispatcher, block_factory):
    node = _content(block_dispatcher.render(block_factory("video", video_url="https://youtu.be/xyz789?si=1")))
    assert node.tag == "iframe"
    assert node.attrs["src"] == "https://www.youtube.com/embed/xyz789"
    assert node.attrs["allow"] == IFRAME_ALLOW
    assert node.attrs["allowfullscreen"] is True
    assert node.attrs["title"] == "Video content"


def test_native_video_resolved_before_normalizing(block_dispatcher, block_factory):
    node = _content(block_dispatcher.render(block_factory("video", video_url="https://shop.example/files/clip.mp4")))
    assert node.tag == "video"
    assert node.attrs["src"] == f"{ORIGIN}/media/clip.mp4"
    assert node.attrs["controls"] is True


def test_video_without_url_emits_no_leaf(block_dispatcher, block_factory):
    assert block_dispatcher.render(block_factory("video", video_url="")).children == ()


def test_row_parts_are_optional_and_ordered(block_dispatcher, block_factory):
    full = _content(
        block_dispatcher.render(
            block_factory(
                "row",
                image="https://cdn.shop.example/files/hero.jpg",
                caption="New",
                heading="Linen shirt",
                text="<p>Breathable.</p>",
                button_label="Buy",
                button_link="/products/linen",
            )
        )
    )
    sparse = _content(block_dispatcher.render(block_factory("row", heading="Only heading")))

    assert [child.tag for child in full.children] == ["image", "caption", "heading", "rich-text", "button"]
    assert full.children[0].attrs["src"] == f"{ORIGIN}/media/hero.jpg"
    assert [child.tag for child in sparse.children] == ["heading"]


def test_unknown_type_gets_labelled_fallback(block_dispatcher, block_factory):
    node = _content(block_dispatcher.render(block_factory("testimonial", text="Great!", title="Jane")))
    assert node.tag == "block-default"
    assert node.attrs == {"label": "testimonial", "text": "Great!", "title": "Jane"}


def test_render_all_skips_disabled(block_dispatcher, block_factory):
    blocks = [
        block_factory("text", block_id="a", text="one"),
        block_factory("text", block_id="b", text="two", disabled=True),
        block_factory("image", block_id="c"),
    ]
    assert [node.key for node in block_dispatcher.render_all(blocks)] == ["a", "c"]


def test_register_overrides_component(media):
    class Upper:
        def render(self, block: Block, *, media):
            return RenderNode(kind=NodeKind.LEAF, tag="upper", attrs={"text": block.settings["text"].upper()})

    dispatcher = BlockDispatcher(media=media)
    dispatcher.register(BlockType.TEXT, Upper())

    node = _content(dispatcher.render(Block(id="t", type="text", settings={"text": "hi"})))
    assert node.tag == "upper"
    assert node.attrs["text"] == "HI"
