"""Expand/collapse state for a post's comments panel.

The state lives entirely in the document: the panel's ``hide`` class and the
control's label. Both are always flipped in the same call.
"""

from __future__ import annotations

import logging

from post_browser.dom import Document, Element, Event
from post_browser.errors import ToggleControlNotFound
from post_browser.renderers.base import HIDDEN_CLASS, HIDE_LABEL, SHOW_LABEL

logger = logging.getLogger(__name__)

PostId = int | str


class ToggleController:
    def __init__(self, document: Document):
        self._document = document

    # ---------------------------------------------------------------- Lookup
    def locate_detail_panel(self, post_id: PostId | None) -> Element | None:
        if not post_id:
            return None
        return self._document.query_selector("section", data_post_id=post_id)

    def locate_toggle_control(self, post_id: PostId | None) -> Element | None:
        """Return the control for ``post_id``.

        ``None`` means no id was requested; a requested id without a matching
        control raises ``ToggleControlNotFound``.
        """
        if not post_id:
            return None
        control = self._document.query_selector("button", data_post_id=post_id)
        if control is None:
            raise ToggleControlNotFound(post_id)
        return control

    def ensure_toggle_control(self, post_id: PostId) -> Element | None:
        """Return the existing control, creating a collapsed one if missing."""
        try:
            return self.locate_toggle_control(post_id)
        except ToggleControlNotFound:
            control = self._document.create_element("button")
            control.dataset["post_id"] = post_id
            control.text_content = SHOW_LABEL
            self._document.body.append_child(control)
            logger.debug("Created toggle control for post %s", post_id)
            return control

    # ----------------------------------------------------------- Transitions
    def toggle_comments(
        self,
        event: Event | None,
        post_id: PostId | None,
    ) -> tuple[Element | None, Element | None] | None:
        """Flip panel visibility and control label for ``post_id`` together.

        When either half is missing nothing changes, so the pair never drifts
        out of sync.
        """
        if event is None or not post_id:
            return None

        section = self.locate_detail_panel(post_id)
        try:
            button = self.locate_toggle_control(post_id)
        except ToggleControlNotFound:
            button = None
        if section is None or button is None:
            logger.warning(
                "Post %s is missing its %s; leaving toggle state unchanged",
                post_id,
                "comments panel" if section is None else "toggle control",
            )
            return section, button

        hidden = section.class_list.toggle(HIDDEN_CLASS)
        button.text_content = SHOW_LABEL if hidden else HIDE_LABEL
        return section, button

    def is_expanded(self, post_id: PostId) -> bool:
        section = self.locate_detail_panel(post_id)
        return section is not None and not section.class_list.contains(HIDDEN_CLASS)


__all__ = ["PostId", "ToggleController"]
