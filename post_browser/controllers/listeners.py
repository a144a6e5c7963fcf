"""Click listener bookkeeping for the toggle controls under the surface."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping

from post_browser.dom import Element, Event

from .toggle import ToggleController

logger = logging.getLogger(__name__)

CLICK = "click"


@dataclass(frozen=True, slots=True)
class ListenerBinding:
    """Handler attached to one control, retained so it can be removed later."""

    post_id: str
    handler: Any
    control: Element
    panel: Element | None


class ListenerManager:
    def __init__(self, surface: Element, toggles: ToggleController):
        self._surface = surface
        self._toggles = toggles
        self._bindings: list[ListenerBinding] = []

    @property
    def bindings(self) -> Mapping[str, ListenerBinding]:
        """First binding per post id; duplicates stay bound but are not listed."""
        by_post: dict[str, ListenerBinding] = {}
        for binding in self._bindings:
            by_post.setdefault(binding.post_id, binding)
        return MappingProxyType(by_post)

    def attach_all(self) -> list[Element]:
        """Attach one click handler per toggle control under the surface."""
        controls = self._surface.query_selector_all("button")
        for control in controls:
            post_id = control.dataset.get("post_id")
            if not post_id:
                continue
            self._release(control)
            if any(binding.post_id == post_id for binding in self._bindings):
                logger.warning("Duplicate toggle control for post %s", post_id)
            handler = self._make_handler(post_id)
            control.add_event_listener(CLICK, handler)
            self._bindings.append(
                ListenerBinding(
                    post_id=post_id,
                    handler=handler,
                    control=control,
                    panel=self._toggles.locate_detail_panel(post_id),
                )
            )
        logger.debug("Attached %d toggle listeners", len(self._bindings))
        return controls

    def detach_all(self) -> list[Element]:
        """Remove every retained handler and forget the bindings."""
        detached = []
        for binding in self._bindings:
            self._detach(binding)
            detached.append(binding.control)
        self._bindings.clear()
        logger.debug("Detached %d toggle listeners", len(detached))
        return detached

    def _release(self, control: Element) -> None:
        # A control is bound at most once.
        kept = []
        for binding in self._bindings:
            if binding.control is control:
                self._detach(binding)
            else:
                kept.append(binding)
        self._bindings = kept

    def _make_handler(self, post_id: str):
        def on_click(event: Event):
            return self._toggles.toggle_comments(event, post_id)

        return on_click

    @staticmethod
    def _detach(binding: ListenerBinding) -> None:
        if not binding.control.remove_event_listener(CLICK, binding.handler):
            logger.warning("Listener for post %s was already removed", binding.post_id)


__all__ = ["CLICK", "ListenerBinding", "ListenerManager"]
