"""Phone-frame preview of a rendered theme page."""

from __future__ import annotations

from nicegui import ui
from starlette.requests import Request

from ..layout import empty_state, page_frame
from ..paint import paint_nodes
from ..state import get_context


@ui.page("/preview")
def preview_page(request: Request) -> None:  # pragma: no cover - UI wiring
    ctx = get_context()
    pages = ctx.document.page_names or ["index"]
    requested = request.query_params.get("page") if request else None
    current_page = requested if requested in pages else pages[0]

    with page_frame(
        current="/preview",
        title="Theme Preview",
        subtitle="Sections render top to bottom exactly as the storefront orders them.",
    ):
        page_select = ui.select(label="Page", options=pages, value=current_page).classes("min-w-[220px]")
        frame = ui.column().classes(
            "w-[390px] min-h-[640px] mx-auto border-8 border-slate-900 rounded-[2rem] overflow-hidden bg-white"
        )

        def show(page: str | None) -> None:
            result = ctx.renderer.render_page(ctx.document, page if ctx.document.page_names else None)
            frame.clear()
            variables = "; ".join(f"{name}: {value}" for name, value in result.css_variables.items())
            frame.style(variables)
            with frame:
                if result.is_empty:
                    empty_state("No sections to preview", "Sync a theme or point THEME_PREVIEW_THEME at one.")
                else:
                    paint_nodes(result.nodes)

        page_select.on_value_change(lambda e: show(e.value))
        show(current_page)


__all__ = ["preview_page"]
