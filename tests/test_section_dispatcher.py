from __future__ import annotations

from theme_preview.models.render import NodeKind, RenderNode
from theme_preview.models.section import ComponentType, Section
from theme_preview.renderers import SectionDispatcher
from theme_preview.renderers.preview.sections import DEFAULT_BANNER_BACKGROUND, PRODUCT_LIST_MAX

ORIGIN = "http://localhost:3000"


def test_disabled_section_renders_nothing(media, section_factory):
    dispatcher = SectionDispatcher(media=media)
    assert dispatcher.dispatch(section_factory("Header", settings={"disabled": True})) is None
    assert dispatcher.dispatch(section_factory("Header", settings={"disabled": "true"})) is None
    assert dispatcher.dispatch(section_factory("Header", settings={"disabled": "false"})) is not None


def test_wrapper_labels_and_keys(media, section_factory):
    dispatcher = SectionDispatcher(media=media)

    labelled = dispatcher.dispatch(section_factory("Header", section_id="hdr", schema_type="header"))
    unlabelled = dispatcher.dispatch(section_factory("Header", section_id="hdr2"))
    anonymous = dispatcher.dispatch(section_factory(section_id=""))

    assert labelled.kind is NodeKind.SECTION
    assert labelled.tag == "header"
    assert labelled.key == "hdr"
    assert labelled.attrs == {"component": "Header"}
    assert unlabelled.tag == "Header"
    assert anonymous.tag == "section"
    assert anonymous.key is None


def test_every_known_type_has_a_component(media):
    dispatcher = SectionDispatcher(media=media)
    for component_type in ComponentType:
        assert dispatcher.has_component(component_type)
        assert dispatcher.has_component(component_type.value)


def test_unknown_type_falls_back_to_generic(media, section_factory):
    node = SectionDispatcher(media=media).dispatch(section_factory("SomethingNew", schema_type="something-new"))
    assert node.tag == "something-new"
    assert node.children[0].tag == "universal-section"


def test_register_custom_component(media, section_factory):
    class Marquee:
        def render(self, settings, blocks, *, ctx):
            return RenderNode(kind=NodeKind.SECTION, tag="marquee", attrs={"text": settings.get("text")})

    dispatcher = SectionDispatcher(media=media)
    dispatcher.register("Marquee", Marquee())

    node = dispatcher.dispatch(section_factory("Marquee", settings={"text": "Sale"}))
    assert node.children[0].tag == "marquee"
    assert node.children[0].attrs["text"] == "Sale"


def test_header_defaults_and_logo(media, section_factory):
    dispatcher = SectionDispatcher(media=media)
    plain = dispatcher.dispatch(section_factory("Header")).children[0]
    with_logo = dispatcher.dispatch(
        section_factory("Header", settings={"logo": "https://shop.example/files/hero.jpg"})
    ).children[0]

    assert plain.find("logo-text").attrs["text"] == "Store"
    assert [link.attrs["text"] for link in plain.find_all("link")] == ["Home", "Shop", "About", "Cart"]
    assert with_logo.find("image").attrs["src"] == f"{ORIGIN}/media/hero.jpg"


def test_banner_background(media, section_factory, block_factory):
    dispatcher = SectionDispatcher(media=media)
    default = dispatcher.dispatch(section_factory("Banner")).children[0]
    from_block = dispatcher.dispatch(
        section_factory(
            "Banner",
            blocks=[block_factory("slide", image_slide="https://cdn.shop.example/files/hero.jpg")],
        )
    ).children[0]

    assert default.style_props["background-image"] == DEFAULT_BANNER_BACKGROUND
    assert default.style_props["min-height"] == "400px"
    assert default.find("heading").attrs["text"] == "Welcome to our store"
    assert from_block.style_props["background-image"] == f"url({ORIGIN}/media/hero.jpg)"


def test_product_list_caps_and_empty_state(media, section_factory):
    dispatcher = SectionDispatcher(media=media)
    products = [{"id": str(index), "title": f"P{index}", "price": "$1"} for index in range(12)]

    capped = dispatcher.dispatch(
        section_factory("ProductList", settings={"products": products, "product_block_limit": 20})
    ).children[0]
    default_limit = dispatcher.dispatch(section_factory("ProductList", settings={"products": products})).children[0]
    empty = dispatcher.dispatch(section_factory("ProductList")).children[0]

    assert len(capped.find_all("product-card")) == PRODUCT_LIST_MAX
    assert len(default_limit.find_all("product-card")) == 6
    assert empty.find("empty-state").attrs["text"] == "No products available"


def test_product_card_reads_synced_products(media, section_factory):
    product = {
        "productId": "gid-1",
        "title": "Linen shirt",
        "vendor": "Acme",
        "images": [{"src": "https://shop.example/files/hero.jpg"}],
        "variants": [{"price": "45.00"}],
    }
    node = SectionDispatcher(media=media).dispatch(
        section_factory("ProductList", settings={"products": [product]})
    )
    card = node.find("product-card")

    assert card.key == "gid-1"
    assert card.find("image").attrs["src"] == f"{ORIGIN}/media/hero.jpg"
    assert card.find("price").attrs["text"] == "45.00"


def test_featured_collection_placeholders(media, section_factory):
    node = SectionDispatcher(media=media).dispatch(section_factory("FeaturedCollection"))
    assert len(node.find_all("product-card")) == 4


def test_video_section_player_and_placeholder(media, section_factory):
    dispatcher = SectionDispatcher(media=media)
    embedded = dispatcher.dispatch(
        section_factory("Video", settings={"video_url": "https://vimeo.com/123456?foo=bar"})
    )
    empty = dispatcher.dispatch(section_factory("Video"))

    frame = embedded.find("video-frame")
    assert frame.style_props == {"padding-bottom": "54%"}
    assert frame.find("iframe").attrs["src"] == "https://player.vimeo.com/video/123456"
    assert empty.find("placeholder").attrs["text"] == "Video section (no video configured)"


def test_multi_column_skips_disabled_blocks(media, section_factory, block_factory):
    node = SectionDispatcher(media=media).dispatch(
        section_factory(
            "MultiColumn",
            blocks=[
                block_factory("column", block_id="a", title="One"),
                block_factory("column", block_id="b", title="Two", disabled=True),
                block_factory("column", block_id="c", text="Three"),
            ],
        )
    )
    assert [column.key for column in node.find_all("column")] == ["a", "c"]


def test_section_models_accept_wire_names():
    section = Section.model_validate(
        {"id": 7, "component": "Footer", "type": "footer", "props": None, "blocks": None}
    )
    assert section.id == "7"
    assert section.component_type == "Footer"
    assert section.schema_type == "footer"
    assert section.settings == {}
    assert section.blocks == ()


def test_non_finite_numeric_settings_fall_back_to_defaults(media, section_factory):
    dispatcher = SectionDispatcher(media=media)
    products = [{"id": str(index), "title": f"P{index}"} for index in range(10)]

    video = dispatcher.dispatch(
        section_factory("Video", settings={"video_url": "https://vimeo.com/1", "video_height": "1e400"})
    )
    video_nan = dispatcher.dispatch(
        section_factory("Video", settings={"video_url": "https://vimeo.com/1", "video_height": float("nan")})
    )
    listing = dispatcher.dispatch(
        section_factory("ProductList", settings={"products": products, "limit": float("inf")})
    )

    assert video.find("video-frame").style_props == {"padding-bottom": "54%"}
    assert video_nan.find("video-frame").style_props == {"padding-bottom": "54%"}
    assert len(listing.find_all("product-card")) == 6


def test_rich_text_section_tag_differs_from_rich_text_leaf(media, section_factory):
    dispatcher = SectionDispatcher(media=media)
    filled = dispatcher.dispatch(section_factory("RichText", settings={"text": "<p>Body</p>"}))
    empty = dispatcher.dispatch(section_factory("RichText"))

    assert filled.children[0].tag == "rich-text-section"
    assert [node.attrs["html"] for node in filled.find_all("rich-text")] == ["<p>Body</p>"]
    assert empty.find("rich-text") is None
