"""Façade bundling the document, its two shared elements and the controllers."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from post_browser.controllers import (
    CLICK,
    ListenerManager,
    RefreshOrchestrator,
    RefreshResult,
    SelectionHandler,
    SelectionResult,
    ToggleController,
)
from post_browser.dom import Document, Element, Event
from post_browser.errors import ToggleControlNotFound
from post_browser.gateway import RemoteDataGateway
from post_browser.models import Post
from post_browser.renderers import HtmlRenderer, RenderContext, RenderOptions


@dataclass(slots=True)
class PostPage:
    """Explicit handles on the rendering surface and selector.

    All surface mutation goes through ``refresh``; prefer
    ``create_post_page`` over building this by hand.
    """

    document: Document
    surface: Element
    selector: Element
    gateway: RemoteDataGateway
    toggles: ToggleController
    listeners: ListenerManager
    orchestrator: RefreshOrchestrator
    selection: SelectionHandler
    initialized: bool = False

    @property
    def render_context(self) -> RenderContext:
        return RenderContext(document=self.document, gateway=self.gateway)

    async def refresh(self, posts: Sequence[Post] | None) -> RefreshResult | None:
        return await self.orchestrator.refresh(posts)

    async def handle_change(self, event: Event | None) -> SelectionResult | None:
        return await self.selection.handle_change(event)

    async def select(self, user_id: int | str) -> SelectionResult | None:
        """Set the selector value and process the resulting change."""
        self.selector.value = user_id
        return await self.handle_change(Event("change", target=self.selector))

    def toggle(self, post_id: int | str) -> list:
        """Dispatch a click on the toggle control for ``post_id``."""
        control = self.toggles.locate_toggle_control(post_id)
        if control is None:
            raise ToggleControlNotFound(post_id)
        return control.dispatch_event(Event(CLICK))

    def to_html(self, *, indent: int | None = None, include_hidden: bool = True) -> str:
        options = RenderOptions(indent=indent, include_hidden=include_hidden)
        return HtmlRenderer().render(self.document.body, options=options)


__all__ = ["PostPage"]
