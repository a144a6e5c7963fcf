"""Single entry point that swaps the rendered posts on the surface."""

from __future__ import annotations

import itertools
import logging
from collections.abc import Sequence
from dataclasses import dataclass

from post_browser.dom import Element, ParentNode
from post_browser.models import Post
from post_browser.renderers.base import RenderContext
from post_browser.renderers.posts import build_collection

from .listeners import ListenerManager

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class RefreshResult:
    detached: list[Element]
    surface: Element
    rendered: ParentNode
    attached: list[Element]


def delete_child_elements(parent: Element | None) -> Element | None:
    """Remove every child of ``parent``; ``None`` when it is not an element."""
    if not isinstance(parent, Element):
        return None
    child = parent.last_element_child
    while child is not None:
        parent.remove_child(child)
        child = parent.last_element_child
    return parent


class RefreshOrchestrator:
    """Detach listeners, clear the surface, render posts, reattach listeners.

    Each refresh runs under a generation token. A refresh whose token has been
    superseded by the time its posts finish rendering drops its output instead
    of appending it, so a slow, stale selection cannot overwrite a newer one.
    """

    def __init__(self, ctx: RenderContext, surface: Element, listeners: ListenerManager):
        self._ctx = ctx
        self._surface = surface
        self._listeners = listeners
        self._counter = itertools.count(1)
        self._generation = 0

    @property
    def surface(self) -> Element:
        return self._surface

    @property
    def generation(self) -> int:
        return self._generation

    def begin(self) -> int:
        """Start a new generation and return its token."""
        self._generation = next(self._counter)
        return self._generation

    def is_current(self, token: int) -> bool:
        return token == self._generation

    async def refresh(
        self,
        posts: Sequence[Post] | None,
        *,
        generation: int | None = None,
    ) -> RefreshResult | None:
        if posts is None:
            return None
        token = self.begin() if generation is None else generation
        if not self.is_current(token):
            logger.info(
                "Skipping refresh for superseded generation %s (current %s)",
                token,
                self._generation,
            )
            return None

        # No await between detaching and clearing.
        detached = self._listeners.detach_all()
        delete_child_elements(self._surface)

        rendered = await build_collection(self._ctx, posts)
        if not self.is_current(token):
            logger.info(
                "Discarding stale refresh (generation %s, current %s)",
                token,
                self._generation,
            )
            return None

        # No await between appending and attaching.
        self._surface.append_child(rendered)
        attached = self._listeners.attach_all()
        return RefreshResult(
            detached=detached,
            surface=self._surface,
            rendered=rendered,
            attached=attached,
        )


__all__ = ["RefreshOrchestrator", "RefreshResult", "delete_child_elements"]
