"""Page chrome shared by the preview pages."""

from __future__ import annotations

from contextlib import contextmanager

from nicegui import ui

from .state import get_context

PAGES = (
    ("/", "Overview"),
    ("/preview", "Phone preview"),
    ("/tree", "Render tree"),
)


def _toolbar(current: str) -> None:
    ctx = get_context()
    with ui.header().classes("bg-white text-slate-900 border-b border-slate-200"):
        with ui.row().classes("w-full items-center gap-6 px-6 py-2"):
            ui.icon("smartphone").classes("text-2xl text-indigo-600")
            ui.label("Theme Preview").classes("text-lg font-semibold")
            with ui.tabs(value=current).props("dense no-caps") as tabs:
                for path, label in PAGES:
                    ui.tab(path, label=label)
            tabs.on_value_change(lambda e: ui.navigate.to(e.value))
            ui.space()
            origin = ctx.config.origin or "relative media URLs"
            ui.chip(origin, icon="cloud").props("outline dense")


@contextmanager
def page_frame(*, current: str, title: str, subtitle: str | None = None):
    """Toolbar with page tabs, then a content column for the page body."""

    _toolbar(current)
    with ui.column().classes("w-full max-w-5xl mx-auto gap-4 px-4 py-6"):
        with ui.row().classes("items-baseline gap-3"):
            ui.label(title).classes("text-2xl font-semibold")
            if subtitle:
                ui.label(subtitle).classes("text-sm text-slate-500")
        yield


def stat_card(label: str, value: int, *, icon: str) -> None:
    with ui.card().tight().classes("min-w-[160px]"):
        with ui.row().classes("items-center gap-3 p-4"):
            ui.icon(icon).classes("text-3xl text-indigo-500")
            with ui.column().classes("gap-0"):
                ui.label(str(value)).classes("text-2xl font-semibold")
                ui.label(label).classes("text-xs uppercase tracking-wide text-slate-500")


def empty_state(message: str, hint: str | None = None) -> None:
    with ui.column().classes("w-full items-center py-12 text-slate-500"):
        ui.icon("web_asset_off").classes("text-5xl")
        ui.label(message).classes("text-lg font-semibold")
        if hint:
            ui.label(hint).classes("text-sm")


__all__ = ["empty_state", "page_frame", "stat_card"]
