"""Employee posts page mirroring the rendered document into NiceGUI widgets."""

from __future__ import annotations

from nicegui import ui

from post_browser import PageInitFailure, PostPage, SelectionRefreshFailure, create_post_page, init_app
from post_browser.dom import Element
from post_browser.renderers import HIDDEN_CLASS, PLACEHOLDER_CLASS

from ..layout import page_frame
from ..state import get_context


@ui.page("/")
async def posts_page() -> None:  # pragma: no cover - UI wiring
    ctx = get_context()
    page = create_post_page(ctx.gateway)

    with page_frame(
        title="Employee Posts",
        subtitle="Pick an employee to load their posts; expand a post to read its comments.",
    ):
        try:
            await init_app(page)
        except PageInitFailure as exc:
            ui.label(f"Could not load employees: {exc}").classes("text-red-600")
            return

        options = {option.value: option.text_content for option in page.selector.query_selector_all("option")}
        select = ui.select(label="Employee", options=options).classes("min-w-[260px]")
        surface_column = ui.column().classes("w-full gap-4")
        with ui.expansion("Document source").classes("w-full"):
            source = ui.code("", language="html").classes("w-full")

        def rerender() -> None:
            surface_column.clear()
            with surface_column:
                for node in page.surface.children:
                    _mirror(node, page, rerender)
            source.set_content(page.to_html(indent=2))

        async def on_change(event) -> None:
            if event.value is None:
                return
            select.disable()
            try:
                await page.select(event.value)
            except SelectionRefreshFailure as exc:
                ui.notify(str(exc), type="negative")
            finally:
                if not page.selector.disabled:
                    select.enable()
            rerender()

        select.on_value_change(on_change)
        rerender()


def _mirror(node: Element, page: PostPage, rerender) -> None:
    if node.tag == "article" and node.query_selector("button") is not None:
        with ui.card().classes("w-full bg-white shadow-sm p-4 gap-1"):
            for child in node.children:
                _mirror(child, page, rerender)
    elif node.tag == "article":
        with ui.column().classes("gap-0 border-l-2 border-slate-200 pl-3"):
            for child in node.children:
                _mirror(child, page, rerender)
    elif node.tag == "h2":
        ui.label(node.text_content).classes("text-xl font-semibold text-slate-900")
    elif node.tag == "h3":
        ui.label(node.text_content).classes("font-semibold text-slate-800")
    elif node.tag == "button":
        post_id = node.dataset.get("post_id")

        def on_click(post_id=post_id) -> None:
            page.toggle(post_id)
            rerender()

        ui.button(node.text_content, on_click=on_click).props("flat dense")
    elif node.tag == "section":
        with ui.column().classes("w-full gap-2") as column:
            for child in node.children:
                _mirror(child, page, rerender)
        column.set_visibility(not node.class_list.contains(HIDDEN_CLASS))
    elif node.class_list.contains(PLACEHOLDER_CLASS):
        ui.label(node.text_content).classes("text-slate-500 italic")
    else:
        ui.label(node.text_content).classes("text-slate-600")


__all__ = ["posts_page"]
