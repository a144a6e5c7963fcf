"""Renderers building post and comment blocks into the document tree."""

from .base import (
    HIDDEN_CLASS,
    HIDE_LABEL,
    PANEL_CLASS,
    PLACEHOLDER_CLASS,
    PLACEHOLDER_TEXT,
    SHOW_LABEL,
    RenderContext,
)
from .comments import build_comment_list, build_detail_panel
from .elements import build_labeled_text, build_options
from .html import HtmlRenderer, RenderOptions
from .posts import (
    build_collection,
    build_placeholder,
    build_post_block,
    build_post_blocks,
    render_collection,
)

__all__ = [
    "HIDDEN_CLASS",
    "HIDE_LABEL",
    "PANEL_CLASS",
    "PLACEHOLDER_CLASS",
    "PLACEHOLDER_TEXT",
    "SHOW_LABEL",
    "HtmlRenderer",
    "RenderContext",
    "RenderOptions",
    "build_collection",
    "build_comment_list",
    "build_detail_panel",
    "build_labeled_text",
    "build_options",
    "build_placeholder",
    "build_post_block",
    "build_post_blocks",
    "render_collection",
]
