"""Render tree explorer page."""

from __future__ import annotations

import json

from nicegui import ui

from theme_preview.models.render import RenderNode

from ..layout import empty_state, page_frame
from ..paint import tree_nodes
from ..state import get_context


@ui.page("/tree")
def tree_page() -> None:  # pragma: no cover - UI wiring
    ctx = get_context()
    result = ctx.renderer.render_page(ctx.document)

    with page_frame(
        current="/tree",
        title="Render Tree Explorer",
        subtitle="Inspect the node tree the preview paints from.",
    ):
        if result.is_empty:
            empty_state("No sections rendered.")
            return

        lookup: dict[str, RenderNode] = {}
        nodes = []
        for index, node in enumerate(result.nodes):
            nodes.append(tree_nodes(node, str(index)))
            _index(node, str(index), lookup)

        with ui.row().classes("w-full gap-6 flex-wrap"):
            tree_component = ui.tree(
                nodes,
                on_select=lambda e: _show_node(e.value, lookup, details_panel),
            ).classes("min-w-[320px] flex-1 bg-white shadow-sm p-3 rounded")
            tree_component.props("node-key=id dense")
            details_panel = ui.markdown("Select a node to inspect.").classes(
                "flex-1 bg-white shadow-sm p-4"
            )


def _index(node: RenderNode, path: str, lookup: dict[str, RenderNode]) -> None:
    lookup[path] = node
    for index, child in enumerate(node.children):
        _index(child, f"{path}.{index}", lookup)


def _show_node(value, lookup: dict[str, RenderNode], details_panel) -> None:
    node = lookup.get(value) if isinstance(value, str) else None
    if node is None:
        return
    payload = node.to_dict()
    payload.pop("children", None)
    details_panel.set_content(
        f"**Tag:** {node.tag}\n\n**Kind:** {node.kind.value}\n\n```json\n"
        + json.dumps(payload, indent=2)
        + "\n```"
    )


__all__ = ["tree_page"]
