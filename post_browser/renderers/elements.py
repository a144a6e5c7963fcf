"""Pure element constructors for text nodes and selector options."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from post_browser.dom import Document, Element
from post_browser.models import Employee


def build_labeled_text(
    document: Document,
    tag: str = "p",
    text: Any = "",
    class_name: str | None = None,
) -> Element:
    element = document.create_element(tag)
    element.text_content = text
    if class_name:
        element.class_name = class_name
    return element


def build_options(document: Document, employees: Sequence[Employee] | None) -> list[Element] | None:
    """Return one ``<option>`` per employee, or ``None`` when there is no data."""
    if employees is None:
        return None
    options = []
    for employee in employees:
        option = document.create_element("option")
        option.value = employee.id
        option.text_content = employee.name
        options.append(option)
    return options


__all__ = ["build_labeled_text", "build_options"]
