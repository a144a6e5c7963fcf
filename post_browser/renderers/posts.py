"""Post blocks and the page-level collection rendering."""

from __future__ import annotations

from collections.abc import Sequence

from post_browser.dom import DocumentFragment, Element, ParentNode
from post_browser.models import Post

from .base import PLACEHOLDER_CLASS, PLACEHOLDER_TEXT, SHOW_LABEL, RenderContext
from .comments import build_detail_panel
from .elements import build_labeled_text


async def build_post_block(ctx: RenderContext, post: Post) -> Element:
    """Compose one ``<article>`` for ``post``, awaiting its author and comments."""
    document = ctx.document
    article = document.create_element("article")
    article.append_child(build_labeled_text(document, "h2", post.title))
    article.append_child(build_labeled_text(document, "p", post.body))
    article.append_child(build_labeled_text(document, "p", f"Post ID: {post.id}"))

    author = await ctx.gateway.get_employee(post.user_id)
    article.append_child(build_labeled_text(document, "p", author.byline))
    article.append_child(build_labeled_text(document, "p", author.company.catch_phrase))

    button = build_labeled_text(document, "button", SHOW_LABEL)
    button.dataset["post_id"] = post.id
    article.append_child(button)

    article.append_child(await build_detail_panel(ctx, post.id))
    return article


async def build_post_blocks(ctx: RenderContext, posts: Sequence[Post]) -> DocumentFragment:
    # Sequential on purpose: output order matches input and at most one
    # request is outstanding at a time.
    fragment = ctx.document.create_document_fragment()
    for post in posts:
        fragment.append_child(await build_post_block(ctx, post))
    return fragment


def build_placeholder(ctx: RenderContext) -> Element:
    return build_labeled_text(ctx.document, "p", PLACEHOLDER_TEXT, PLACEHOLDER_CLASS)


async def build_collection(ctx: RenderContext, posts: Sequence[Post] | None) -> ParentNode:
    if posts:
        return await build_post_blocks(ctx, posts)
    return build_placeholder(ctx)


async def render_collection(
    ctx: RenderContext,
    surface: Element,
    posts: Sequence[Post] | None,
) -> ParentNode:
    """Build the collection and append it to ``surface``."""
    node = await build_collection(ctx, posts)
    surface.append_child(node)
    return node


__all__ = [
    "build_collection",
    "build_placeholder",
    "build_post_block",
    "build_post_blocks",
    "render_collection",
]
