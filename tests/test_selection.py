from __future__ import annotations

import asyncio

import pytest

from post_browser.dom import Event
from post_browser.errors import SelectionRefreshFailure
from post_browser.renderers import HIDE_LABEL, SHOW_LABEL
from post_browser.startup import populate_select_menu
from post_browser.models import Employee, Post


def _titles(page):
    return [article.children[0].text_content for article in page.surface.children]


@pytest.mark.asyncio
async def test_selecting_employee_renders_single_post_scenario(store_factory, page_factory):
    store = store_factory(
        employees=[{"id": 1, "name": "Ann", "company": {"name": "Co", "catchPhrase": "CP"}}],
        posts=[{"id": 10, "userId": 1, "title": "T", "body": "B"}],
        comments={10: []},
    )
    page = page_factory(store)

    result = await page.select(1)

    (article,) = page.surface.children
    texts = [child.text_content for child in article.children]
    assert "Author: Ann with Co" in texts
    panel = page.toggles.locate_detail_panel(10)
    assert panel.class_list.contains("hide")
    assert panel.children == []
    control = page.toggles.locate_toggle_control(10)
    assert control.text_content == SHOW_LABEL
    assert control.dataset["post_id"] == "10"
    assert result.user_id == "1"
    assert [post.id for post in result.posts] == [10]

    page.toggle(10)
    assert not panel.class_list.contains("hide")
    assert control.text_content == HIDE_LABEL
    page.toggle(10)
    assert panel.class_list.contains("hide")
    assert control.text_content == SHOW_LABEL


@pytest.mark.asyncio
async def test_selector_disabled_while_loading(page, remote_store):
    gate = remote_store.hold("/posts?userId=2")
    task = asyncio.create_task(page.select(2))
    await gate.arrived.wait()

    assert page.selector.disabled

    gate.release()
    await task
    assert not page.selector.disabled
    assert _titles(page) == ["Bob's post"]


@pytest.mark.asyncio
async def test_failure_reenables_selector_and_reraises(page, remote_store):
    remote_store.respond("/posts/11/comments", 500)

    with pytest.raises(SelectionRefreshFailure):
        await page.select(1)

    assert not page.selector.disabled
    assert page.surface.children == []


@pytest.mark.asyncio
async def test_degraded_posts_leave_surface_untouched(page, remote_store):
    await page.select(2)
    remote_store.respond("/posts?userId=1", 404)

    result = await page.select(1)

    assert result.posts is None
    assert result.refresh is None
    assert not result.stale
    assert _titles(page) == ["Bob's post"]
    assert not page.selector.disabled


@pytest.mark.asyncio
async def test_missing_value_defaults_to_first_option(page, remote_store):
    populate_select_menu(page.document, page.selector, [Employee(id=2, name="Bob", company={"name": "Widgets"})])

    result = await page.handle_change(Event("change", target=page.selector))

    assert result.user_id == "2"
    assert remote_store.requests[0] == "/posts?userId=2"


@pytest.mark.asyncio
async def test_missing_event_is_ignored(page, remote_store):
    assert await page.handle_change(None) is None
    assert remote_store.requests == []


@pytest.mark.asyncio
async def test_superseded_selection_does_not_render(page, remote_store):
    gate = remote_store.hold("/posts?userId=1")
    first = asyncio.create_task(page.select(1))
    await gate.arrived.wait()

    second = await page.select(2)
    assert not page.selector.disabled
    gate.release()
    first_result = await first

    assert first_result.stale
    assert first_result.refresh is None
    assert second.refresh is not None
    assert _titles(page) == ["Bob's post"]
    assert not page.selector.disabled


@pytest.mark.asyncio
async def test_direct_refresh_during_selection_reenables_selector(page, remote_store):
    gate = remote_store.hold("/posts?userId=1")
    selecting = asyncio.create_task(page.select(1))
    await gate.arrived.wait()

    await page.refresh([Post(id=20, user_id=2, title="Bob's post", body="")])
    assert page.selector.disabled
    gate.release()
    result = await selecting

    assert result.stale
    assert not page.selector.disabled
    assert _titles(page) == ["Bob's post"]
