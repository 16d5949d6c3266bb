"""Landing page for the theme preview."""

from __future__ import annotations

from nicegui import ui

from ..layout import page_frame, stat_card
from ..state import get_context, reload_context


@ui.page("/")
def home_page() -> None:  # pragma: no cover - UI wiring
    ctx = get_context()
    document = ctx.document
    pages = document.page_names or ["index"]

    with page_frame(
        current="/",
        title="Theme Preview",
        subtitle="Render synced storefront themes section by section.",
    ):
        with ui.row().classes("gap-4 flex-wrap"):
            stat_card("Pages", len(pages), icon="description")
            stat_card("Sections", len(document.sections_for()), icon="view_agenda")
            stat_card("Media entries", len(ctx.registry), icon="perm_media")

        ui.separator()

        ui.markdown(
            f"""
## Inputs

- **Theme document:** `{ctx.config.theme_path or "data/sample_theme.json"}`
- **Media registry:** `{ctx.config.media_path or "data/sample_media.json"}`
- **Media origin:** `{ctx.config.origin or "(relative)"}`
"""
        ).classes("text-slate-600 w-full")

        def _reload() -> None:
            reload_context()
            ui.notify("Theme reloaded")
            ui.navigate.to("/")

        with ui.row().classes("gap-3 flex-wrap"):
            ui.button("Open preview", on_click=lambda: ui.navigate.to("/preview"))
            ui.button("Render tree explorer", on_click=lambda: ui.navigate.to("/tree"))
            ui.button("Reload inputs", on_click=_reload).props("outline")


__all__ = ["home_page"]
