"""Reusable layout helpers for the NiceGUI demo."""

from __future__ import annotations

from contextlib import contextmanager

from nicegui import ui


def _nav_bar() -> None:
    with ui.header().classes("bg-slate-900 text-white shadow-sm"):
        with ui.row().classes("w-full items-center justify-between px-6 py-3"):
            ui.link(text="Employee Posts", target="/").classes(
                "text-lg font-semibold no-underline text-white"
            )


@contextmanager
def page_frame(
    *,
    title: str,
    subtitle: str | None = None,
) -> None:
    """Render shared navigation and yield a central content column."""

    _nav_bar()
    with ui.column().classes("max-w-4xl mx-auto w-full gap-4 py-8 px-4"):
        ui.label(title).classes("text-3xl font-semibold text-slate-900")
        if subtitle:
            ui.label(subtitle).classes("text-slate-500")
        yield


__all__ = ["page_frame"]
