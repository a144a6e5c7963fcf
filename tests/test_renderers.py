from __future__ import annotations

import pytest

from post_browser.errors import FetchFailure, PanelRenderFailure
from post_browser.models import Comment, Employee, Post
from post_browser.renderers import (
    PLACEHOLDER_TEXT,
    HtmlRenderer,
    RenderContext,
    RenderOptions,
    build_collection,
    build_comment_list,
    build_detail_panel,
    build_labeled_text,
    build_options,
    build_post_block,
    render_collection,
)


@pytest.fixture
def ctx(document, gateway) -> RenderContext:
    return RenderContext(document=document, gateway=gateway)


def test_build_labeled_text_sets_optional_class(document):
    plain = build_labeled_text(document, "h2", "Title")
    styled = build_labeled_text(document, "p", "Body", "default-text")

    assert (plain.tag, plain.text_content, plain.class_name) == ("h2", "Title", "")
    assert styled.class_list.contains("default-text")


def test_build_options_maps_id_and_name(document):
    employees = [
        Employee(id=1, name="Ann", company={"name": "Co"}),
        Employee(id=2, name="Bob", company={"name": "Widgets"}),
    ]
    options = build_options(document, employees)

    assert [(option.value, option.text_content) for option in options] == [("1", "Ann"), ("2", "Bob")]
    assert build_options(document, None) is None


def test_build_comment_list_renders_articles(document):
    fragment = build_comment_list(
        document,
        [Comment(name="Nice", body="Great post", email="c1@example.com")],
    )

    (article,) = fragment.children
    assert [child.tag for child in article.children] == ["h3", "p", "p"]
    assert [child.text_content for child in article.children] == [
        "Nice",
        "Great post",
        "From: c1@example.com",
    ]
    assert build_comment_list(document, None) is None


@pytest.mark.asyncio
async def test_detail_panel_is_hidden_and_tagged(ctx):
    section = await build_detail_panel(ctx, 11)

    assert section.tag == "section"
    assert section.dataset["post_id"] == "11"
    assert section.class_name == "comments hide"
    assert len(section.children) == 2


@pytest.mark.asyncio
async def test_detail_panel_failure_is_wrapped(ctx, remote_store):
    remote_store.respond("/posts/11/comments", 500)

    with pytest.raises(PanelRenderFailure) as excinfo:
        await build_detail_panel(ctx, 11)
    assert excinfo.value.post_id == 11
    assert isinstance(excinfo.value.__cause__, FetchFailure)


@pytest.mark.asyncio
async def test_post_block_layout(ctx):
    article = await build_post_block(ctx, Post(id=10, user_id=1, title="T", body="B"))

    assert [child.tag for child in article.children] == ["h2", "p", "p", "p", "p", "button", "section"]
    assert [child.text_content for child in article.children[:6]] == [
        "T",
        "B",
        "Post ID: 10",
        "Author: Ann with Co",
        "CP",
        "Show Comments",
    ]
    button = article.children[5]
    assert button.dataset["post_id"] == "10"
    assert article.children[6].class_list.contains("hide")


@pytest.mark.asyncio
async def test_post_block_propagates_missing_author(ctx):
    with pytest.raises(FetchFailure):
        await build_post_block(ctx, Post(id=30, user_id=99, title="Orphan", body=""))


@pytest.mark.asyncio
async def test_collection_renders_in_input_order(ctx, remote_store):
    posts = [
        Post(id=11, user_id=1, title="Second", body=""),
        Post(id=10, user_id=1, title="First", body=""),
        Post(id=20, user_id=2, title="Bob's post", body=""),
    ]

    fragment = await build_collection(ctx, posts)

    assert [article.children[0].text_content for article in fragment.children] == [
        "Second",
        "First",
        "Bob's post",
    ]
    # Each post's author and comments resolve before the next post starts.
    assert remote_store.requests == [
        "/users/1",
        "/posts/11/comments",
        "/users/1",
        "/posts/10/comments",
        "/users/2",
        "/posts/20/comments",
    ]


@pytest.mark.asyncio
@pytest.mark.parametrize("posts", [None, []])
async def test_collection_placeholder_without_posts(ctx, remote_store, posts):
    node = await build_collection(ctx, posts)

    assert node.tag == "p"
    assert node.text_content == PLACEHOLDER_TEXT
    assert node.class_name == "default-text"
    assert remote_store.requests == []


@pytest.mark.asyncio
async def test_render_collection_appends_to_surface(ctx, document):
    surface = document.create_element("main")

    node = await render_collection(ctx, surface, None)

    assert surface.children == [node]


def test_html_renderer_escapes_and_orders_attributes(document):
    section = document.create_element("section")
    section.dataset["post_id"] = 3
    section.class_list.add("comments", "hide")
    section.append_child(build_labeled_text(document, "p", "Hi <there>"))

    output = HtmlRenderer().render(section)

    assert output == '<section class="comments hide" data-post-id="3"><p>Hi &lt;there&gt;</p></section>'
    assert HtmlRenderer().render(section, options=RenderOptions(include_hidden=False)) == ""


def test_html_renderer_indents_nested_elements(document):
    article = document.create_element("article")
    article.append_child(build_labeled_text(document, "h2", "T"))

    output = HtmlRenderer().render(article, options=RenderOptions(indent=2))

    assert output.splitlines() == ["<article>", "  <h2>T</h2>", "</article>"]
