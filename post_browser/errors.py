"""Exception types shared across the gateway, renderers and controllers."""

from __future__ import annotations

from enum import Enum


class PostBrowserError(RuntimeError):
    """Base class for failures raised by the post browser."""


class FetchKind(str, Enum):
    EMPLOYEES = "employees"
    POSTS = "posts"
    EMPLOYEE = "employee"
    COMMENTS = "comments"


class FetchFailure(PostBrowserError):
    """Raised when a gateway read fails in transport, status or parsing."""

    def __init__(self, kind: FetchKind, message: str | None = None):
        self.kind = kind
        super().__init__(message or f"Failed to fetch {kind.value} data")


class PanelRenderFailure(PostBrowserError):
    """Raised when a post's comments panel cannot be populated."""

    def __init__(self, post_id: int | str):
        self.post_id = post_id
        super().__init__(f"Failed to display comments for post {post_id}")


class SelectionRefreshFailure(PostBrowserError):
    """Raised when a selector change could not refresh the posts."""


class PageInitFailure(PostBrowserError):
    """Raised when the page could not load its employees."""


class ToggleControlNotFound(PostBrowserError, LookupError):
    """Raised when a post id is given but no toggle control carries it."""

    def __init__(self, post_id: int | str):
        self.post_id = post_id
        super().__init__(f"No toggle control for post {post_id}")


__all__ = [
    "FetchFailure",
    "FetchKind",
    "PageInitFailure",
    "PanelRenderFailure",
    "PostBrowserError",
    "SelectionRefreshFailure",
    "ToggleControlNotFound",
]
