from __future__ import annotations

from theme_preview.models.render import NodeKind
from theme_preview.renderers import SectionDispatcher


def _body(dispatcher: SectionDispatcher, section):
    wrapper = dispatcher.dispatch(section)
    assert wrapper is not None
    return wrapper.children[0]


def test_layout_defaults(media, section_factory):
    body = _body(SectionDispatcher(media=media), section_factory("CustomThing", schema_type="custom-thing"))

    assert body.kind is NodeKind.SECTION
    assert body.tag == "universal-section"
    assert body.style_props["display"] == "flex"
    assert body.style_props["flex-direction"] == "column"
    assert body.style_props["align-items"] == "center"
    assert body.style_props["justify-content"] == "center"
    assert body.style_props["min-height"] == "auto"
    assert body.style_props["padding-top"] == "0"
    assert body.attrs["width_class"] == "page-width"


def test_style_from_settings(media, section_factory):
    section = section_factory(
        settings={
            "padding_top": 12,
            "padding-block-end": "3rem",
            "background_color": "#fafafa",
            "content_direction": "row",
            "section_height": "large",
            "color_scheme": "scheme-2",
            "gap": 8,
        }
    )
    body = _body(SectionDispatcher(media=media), section)

    assert body.style_props["padding-top"] == "12px"
    assert body.style_props["padding-bottom"] == "3rem"
    assert body.style_props["background-color"] == "#fafafa"
    assert body.style_props["flex-direction"] == "row"
    assert body.style_props["min-height"] == "700px"
    assert body.style_props["gap"] == "8px"
    assert body.attrs["class_name"] == "universal-section scheme-2"


def test_blocks_keep_order_and_skip_disabled(media, section_factory, block_factory):
    blocks = [
        block_factory("heading", block_id="h", heading="Title"),
        block_factory("text", block_id="hidden", text="draft", disabled=True),
        block_factory("image", block_id="img"),
        block_factory("mystery", block_id="m"),
        block_factory("button", block_id="b", label="Go"),
    ]
    body = _body(SectionDispatcher(media=media), section_factory(blocks=blocks))

    assert [child.key for child in body.children] == ["h", "img", "m", "b"]
    assert [child.tag for child in body.children] == [
        "block-heading",
        "block-image",
        "block-mystery",
        "block-button",
    ]


def test_settings_with_wrong_types_do_not_raise(media, section_factory):
    section = section_factory(settings={"section_height": 3, "padding_top": {"x": 1}, "color_scheme": ["a"]})
    body = _body(SectionDispatcher(media=media), section)
    assert body.style_props["min-height"] == "auto"
    assert body.style_props["padding-top"] == "0"
    assert body.attrs["class_name"] == "universal-section"
