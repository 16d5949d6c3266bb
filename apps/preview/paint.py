"""Paint render trees onto NiceGUI elements."""

from __future__ import annotations

from html import escape
from typing import Callable

from nicegui import ui

from theme_preview.models.render import NodeKind, RenderNode

_HEADING_CLASSES = {
    1: "text-3xl font-bold",
    2: "text-2xl font-semibold",
    3: "text-lg font-semibold",
}


def style_string(node: RenderNode) -> str:
    return "; ".join(f"{name}: {value}" for name, value in node.style_props.items())


def paint_nodes(nodes: tuple[RenderNode, ...] | list[RenderNode]) -> None:  # pragma: no cover - UI wiring
    for node in nodes:
        paint(node)


def paint(node: RenderNode) -> None:  # pragma: no cover - UI wiring
    painter = _LEAF_PAINTERS.get(node.tag)
    if painter is not None and not node.children:
        element = painter(node)
    elif node.tag == "nav" or node.tag == "social-links":
        element = ui.row().classes("gap-4 items-center")
        with element:
            paint_nodes(node.children)
    elif node.tag in {"product-grid", "collections-grid", "columns"}:
        element = ui.grid(columns=_grid_columns(node)).classes("w-full gap-4")
        with element:
            paint_nodes(node.children)
    else:
        element = ui.column().classes("w-full gap-2")
        if node.kind is NodeKind.SECTION:
            element.classes("py-2")
        with element:
            paint_nodes(node.children)

    class_name = node.attrs.get("class_name")
    if class_name:
        element.classes(str(class_name))
    style = style_string(node)
    if style:
        element.style(style)


def _grid_columns(node: RenderNode) -> int:
    return max(1, min(len(node.children), 4))


def _heading(node: RenderNode) -> ui.element:
    level = int(node.attrs.get("level", 2))
    return ui.label(str(node.attrs.get("text", ""))).classes(_HEADING_CLASSES.get(level, "font-semibold"))


def _text(extra: str = "") -> Callable[[RenderNode], ui.element]:
    def painter(node: RenderNode) -> ui.element:
        return ui.label(str(node.attrs.get("text", ""))).classes(extra)

    return painter


def _rich_text(node: RenderNode) -> ui.element:
    # Theme rich text is authored HTML; render it as-is inside the preview.
    return ui.html(str(node.attrs.get("html", "")), sanitize=False)


def _image(node: RenderNode) -> ui.element:
    return ui.image(str(node.attrs.get("src", ""))).props(f'alt="{escape(str(node.attrs.get("alt", "")))}"')


def _link(node: RenderNode) -> ui.element:
    return ui.link(str(node.attrs.get("text", "")), str(node.attrs.get("href", "#")))


def _button(node: RenderNode) -> ui.element:
    return ui.link(
        str(node.attrs.get("label", "")),
        str(node.attrs.get("href", "#")),
        new_tab=node.attrs.get("target") == "_blank",
    ).classes("inline-block px-4 py-2 rounded bg-slate-900 text-white no-underline")


def _video(node: RenderNode) -> ui.element:
    return ui.video(str(node.attrs.get("src", ""))).classes("w-full")


def _iframe(node: RenderNode) -> ui.element:
    src = escape(str(node.attrs.get("src", "")))
    title = escape(str(node.attrs.get("title", "Video")))
    allow = escape(str(node.attrs.get("allow", "")))
    markup = (
        f'<iframe src="{src}" title="{title}" allow="{allow}" allowfullscreen '
        'style="position:absolute;top:0;left:0;width:100%;height:100%;border:0"></iframe>'
    )
    return ui.html(markup, sanitize=False).classes("relative w-full h-full")


def _input(node: RenderNode) -> ui.element:
    return ui.input(placeholder=str(node.attrs.get("placeholder", ""))).props(
        f'type={node.attrs.get("input_type", "text")}'
    )


def _submit(node: RenderNode) -> ui.element:
    return ui.button(str(node.attrs.get("label", "Submit")))


def _block_default(node: RenderNode) -> ui.element:
    card = ui.card().classes("w-full p-3 bg-slate-50")
    with card:
        ui.badge(str(node.attrs.get("label", "block"))).classes("self-start")
        for name in ("title", "text"):
            value = node.attrs.get(name)
            if value:
                ui.label(str(value))
    return card


_LEAF_PAINTERS: dict[str, Callable[[RenderNode], ui.element]] = {
    "heading": _heading,
    "paragraph": _text(),
    "caption": _text("text-sm text-slate-500"),
    "price": _text("font-semibold"),
    "logo-text": _text("text-xl font-bold"),
    "placeholder": _text("italic text-slate-400"),
    "empty-state": _text("italic text-slate-400"),
    "rich-text": _rich_text,
    "image": _image,
    "link": _link,
    "button": _button,
    "video": _video,
    "iframe": _iframe,
    "input": _input,
    "submit": _submit,
    "block-default": _block_default,
}


def tree_nodes(node: RenderNode, path: str = "0") -> dict:
    """Convert a render node into the dict shape ``ui.tree`` expects."""

    label = node.tag if node.key is None else f"{node.tag} ({node.key})"
    return {
        "id": path,
        "label": label,
        "children": [tree_nodes(child, f"{path}.{index}") for index, child in enumerate(node.children)],
    }


__all__ = ["paint", "paint_nodes", "style_string", "tree_nodes"]
