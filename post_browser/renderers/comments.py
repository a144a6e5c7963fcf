"""Comments panel rendering for a single post."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from post_browser.dom import Document, DocumentFragment, Element
from post_browser.errors import FetchFailure, PanelRenderFailure
from post_browser.models import Comment

from .base import HIDDEN_CLASS, PANEL_CLASS, RenderContext
from .elements import build_labeled_text

logger = logging.getLogger(__name__)


def build_comment_list(document: Document, comments: Sequence[Comment] | None) -> DocumentFragment | None:
    if comments is None:
        return None
    fragment = document.create_document_fragment()
    for comment in comments:
        article = document.create_element("article")
        article.append_child(build_labeled_text(document, "h3", comment.name))
        article.append_child(build_labeled_text(document, "p", comment.body))
        article.append_child(build_labeled_text(document, "p", f"From: {comment.email}"))
        fragment.append_child(article)
    return fragment


async def build_detail_panel(ctx: RenderContext, post_id: int | str) -> Element:
    """Return the hidden ``<section>`` holding the post's comments.

    The section is created before the fetch so it always carries the post id
    and the hidden marker; a failed fetch surfaces as ``PanelRenderFailure``.
    """
    section = ctx.document.create_element("section")
    section.dataset["post_id"] = post_id
    section.class_list.add(PANEL_CLASS, HIDDEN_CLASS)

    try:
        comments = await ctx.gateway.list_comments(post_id)
    except FetchFailure as exc:
        logger.error("Error displaying comments for post %s: %s", post_id, exc)
        raise PanelRenderFailure(post_id) from exc

    section.append_child(build_comment_list(ctx.document, comments))
    return section


__all__ = ["build_comment_list", "build_detail_panel"]
