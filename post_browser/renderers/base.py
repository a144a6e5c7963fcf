"""Shared rendering context and document contract constants."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from post_browser.dom import Document

if TYPE_CHECKING:  # pragma: no cover - type checking only
    from post_browser.gateway import RemoteDataGateway

SHOW_LABEL = "Show Comments"
HIDE_LABEL = "Hide Comments"
HIDDEN_CLASS = "hide"
PANEL_CLASS = "comments"
PLACEHOLDER_CLASS = "default-text"
PLACEHOLDER_TEXT = "Select an Employee to display their posts."


@dataclass(slots=True)
class RenderContext:
    document: Document
    gateway: "RemoteDataGateway"


__all__ = [
    "HIDDEN_CLASS",
    "HIDE_LABEL",
    "PANEL_CLASS",
    "PLACEHOLDER_CLASS",
    "PLACEHOLDER_TEXT",
    "RenderContext",
    "SHOW_LABEL",
]
