"""Startup helpers: load employees into the selector and wire change events."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from post_browser.dom import Document, Element, Event
from post_browser.errors import FetchFailure, PageInitFailure, SelectionRefreshFailure
from post_browser.gateway import RemoteDataGateway
from post_browser.models import Employee
from post_browser.renderers import build_options, render_collection

if TYPE_CHECKING:  # pragma: no cover - type checking only
    from post_browser.page import PostPage

logger = logging.getLogger(__name__)


def populate_select_menu(
    document: Document,
    selector: Element,
    employees: Sequence[Employee] | None,
) -> Element | None:
    if not isinstance(employees, list):
        return None
    options = build_options(document, employees)
    if options is None:
        return None
    for option in options:
        selector.append_child(option)
    return selector


async def initialize_page(
    document: Document,
    gateway: RemoteDataGateway,
    selector: Element,
) -> tuple[list[Employee] | None, Element | None]:
    """Fetch every employee and add one selector option per employee.

    Returns ``(None, None)`` when the store has no employees.
    """
    try:
        employees = await gateway.list_employees()
    except FetchFailure as exc:
        logger.error("Error initialising the page: %s", exc)
        raise PageInitFailure("Failed to initialize the page") from exc

    if not employees:
        logger.warning("No employees returned; selector left empty")
        return None, None
    populated = populate_select_menu(document, selector, employees)
    if populated is None:
        return None, None
    return employees, populated


async def init_app(page: PostPage) -> tuple[list[Employee] | None, Element | None]:
    """Populate the selector, show the placeholder and listen for changes.

    Runs once per page; later calls return ``(None, None)`` and wire nothing.
    """
    if page.initialized:
        logger.debug("Page already initialized; skipping")
        return None, None
    employees, selector = await initialize_page(page.document, page.gateway, page.selector)
    page.initialized = True
    if not page.surface.children:
        await render_collection(page.render_context, page.surface, None)

    async def on_change(event: Event) -> None:
        try:
            await page.handle_change(event)
        except SelectionRefreshFailure:
            logger.exception("Selection change failed")

    page.selector.add_event_listener("change", on_change)
    return employees, selector


__all__ = ["init_app", "initialize_page", "populate_select_menu"]
