"""Selector change handling: fetch the chosen employee's posts and refresh."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from post_browser.dom import Element, Event
from post_browser.errors import FetchFailure, PanelRenderFailure, SelectionRefreshFailure
from post_browser.gateway import RemoteDataGateway
from post_browser.models import Post

from .refresh import RefreshOrchestrator, RefreshResult

logger = logging.getLogger(__name__)

DEFAULT_EMPLOYEE_ID = "1"


@dataclass(slots=True)
class SelectionResult:
    user_id: str
    posts: list[Post] | None
    refresh: RefreshResult | None
    stale: bool = False


def resolve_employee_id(selector: Element) -> str:
    """Return the selected id, falling back to the first option."""
    if selector.value:
        return selector.value
    first = selector.query_selector("option")
    if first is not None and first.value:
        return first.value
    return DEFAULT_EMPLOYEE_ID


class SelectionHandler:
    def __init__(self, gateway: RemoteDataGateway, orchestrator: RefreshOrchestrator):
        self._gateway = gateway
        self._orchestrator = orchestrator
        self._latest_selection = 0

    async def handle_change(self, event: Event | None) -> SelectionResult | None:
        """React to a selector ``change`` event.

        The selector stays disabled while the posts load. It is re-enabled
        whether or not the refresh succeeds, unless a newer change has taken
        it over in the meantime. Only selections count as newer here; a
        direct refresh can discard this output but never owns the selector.
        """
        selector = event.target if event is not None else None
        if selector is None:
            return None

        user_id = resolve_employee_id(selector)
        self._latest_selection += 1
        selection = self._latest_selection
        token = self._orchestrator.begin()
        selector.disabled = True
        try:
            posts = await self._gateway.list_posts(user_id)
            if not self._orchestrator.is_current(token):
                logger.info("Selection of employee %s superseded; skipping refresh", user_id)
                return SelectionResult(user_id=user_id, posts=posts, refresh=None, stale=True)
            result = await self._orchestrator.refresh(posts, generation=token)
        except (FetchFailure, PanelRenderFailure) as exc:
            logger.error("Error refreshing posts for employee %s: %s", user_id, exc)
            raise SelectionRefreshFailure(f"Failed to refresh posts for employee {user_id}") from exc
        finally:
            if selection == self._latest_selection:
                selector.disabled = False

        return SelectionResult(
            user_id=user_id,
            posts=posts,
            refresh=result,
            stale=result is None and posts is not None,
        )


__all__ = ["DEFAULT_EMPLOYEE_ID", "SelectionHandler", "SelectionResult", "resolve_employee_id"]
