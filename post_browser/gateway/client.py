"""Read-only client for the remote collection store.

Each operation issues exactly one GET and validates the JSON body into the
typed models. Failure handling is a per-operation contract:

================  ==========================  ==============================
Operation         Policy                      Behaviour on failure
================  ==========================  ==============================
list_employees    ``FetchPolicy.RAISE``       ``FetchFailure(EMPLOYEES)``
list_posts        ``FetchPolicy.DEGRADE``     ``None`` for a missing id or a
                                              non-success status; only
                                              transport/parse errors raise
                                              ``FetchFailure(POSTS)``
get_employee      ``FetchPolicy.RAISE``       ``FetchFailure(EMPLOYEE)``
list_comments     ``FetchPolicy.RAISE``       ``FetchFailure(COMMENTS)``
================  ==========================  ==============================

Callers of ``list_posts`` must treat ``None`` as "show the placeholder".
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, TypeVar

import httpx
from pydantic import TypeAdapter

from post_browser.config import GatewayConfig, create_http_client
from post_browser.errors import FetchFailure, FetchKind
from post_browser.models import Comment, Employee, Post

logger = logging.getLogger(__name__)

T = TypeVar("T")

_EMPLOYEES = TypeAdapter(list[Employee])
_POSTS = TypeAdapter(list[Post])
_EMPLOYEE = TypeAdapter(Employee)
_COMMENTS = TypeAdapter(list[Comment])


class FetchPolicy(str, Enum):
    RAISE = "raise"
    DEGRADE = "degrade"


class _DegradedResponse(Exception):
    """Internal signal for a non-success status on a degrading operation."""


class RemoteDataGateway:
    """Async façade over the four remote reads used by the page."""

    POLICIES: dict[str, FetchPolicy] = {
        "list_employees": FetchPolicy.RAISE,
        "list_posts": FetchPolicy.DEGRADE,
        "get_employee": FetchPolicy.RAISE,
        "list_comments": FetchPolicy.RAISE,
    }

    def __init__(self, client: httpx.AsyncClient):
        self._client = client

    @classmethod
    def from_config(
        cls,
        config: GatewayConfig | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> RemoteDataGateway:
        return cls(create_http_client(config, transport=transport))

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> RemoteDataGateway:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    # ------------------------------------------------------------- Reads
    async def list_employees(self) -> list[Employee]:
        try:
            return await self._get(_EMPLOYEES, "/users", operation="list_employees")
        except (httpx.HTTPError, ValueError) as exc:
            logger.error("Error fetching employees data: %s", exc)
            raise FetchFailure(FetchKind.EMPLOYEES) from exc

    async def list_posts(self, user_id: int | str | None) -> list[Post] | None:
        """Return the employee's posts, or ``None`` on the degraded paths."""
        if user_id is None or user_id == "":
            logger.error("No employee id provided; skipping posts fetch")
            return None
        try:
            return await self._get(
                _POSTS,
                "/posts",
                params={"userId": str(user_id)},
                operation="list_posts",
            )
        except _DegradedResponse as exc:
            logger.warning("Error fetching posts for employee %s: %s", user_id, exc)
            return None
        except (httpx.HTTPError, ValueError) as exc:
            logger.error("Error fetching posts for employee %s: %s", user_id, exc)
            raise FetchFailure(FetchKind.POSTS, f"Failed to fetch posts for employee {user_id}") from exc

    async def get_employee(self, user_id: int | str | None) -> Employee:
        if user_id is None or user_id == "":
            logger.error("No employee id provided; cannot resolve author")
            raise FetchFailure(FetchKind.EMPLOYEE, "No employee id provided")
        try:
            return await self._get(_EMPLOYEE, f"/users/{user_id}", operation="get_employee")
        except (httpx.HTTPError, ValueError) as exc:
            logger.error("Error fetching employee %s data: %s", user_id, exc)
            raise FetchFailure(FetchKind.EMPLOYEE, f"Failed to fetch employee {user_id} data") from exc

    async def list_comments(self, post_id: int | str | None) -> list[Comment]:
        if post_id is None or post_id == "":
            logger.error("No post id provided; cannot fetch comments")
            raise FetchFailure(FetchKind.COMMENTS, "No post id provided")
        try:
            return await self._get(_COMMENTS, f"/posts/{post_id}/comments", operation="list_comments")
        except (httpx.HTTPError, ValueError) as exc:
            logger.error("Error fetching comments for post %s: %s", post_id, exc)
            raise FetchFailure(FetchKind.COMMENTS, f"Failed to fetch comments for post {post_id}") from exc

    # ----------------------------------------------------------- Helpers
    async def _get(
        self,
        adapter: TypeAdapter[T],
        path: str,
        *,
        params: dict[str, str] | None = None,
        operation: str,
    ) -> T:
        degrade = self.POLICIES[operation] is FetchPolicy.DEGRADE
        logger.debug("GET %s params=%s", path, params)
        response = await self._client.get(path, params=params)
        if degrade and not response.is_success:
            raise _DegradedResponse(f"HTTP {response.status_code}")
        response.raise_for_status()
        # ValidationError and JSONDecodeError are both ValueError subclasses.
        return adapter.validate_python(response.json())


__all__ = ["FetchPolicy", "RemoteDataGateway"]
