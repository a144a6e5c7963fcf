"""Top-level package for the employee post browser."""

__version__ = "0.1.0"

from .errors import (  # noqa: E402
    FetchFailure,
    FetchKind,
    PageInitFailure,
    PanelRenderFailure,
    PostBrowserError,
    SelectionRefreshFailure,
    ToggleControlNotFound,
)
from .page import PostPage, create_post_page  # noqa: E402
from .startup import init_app  # noqa: E402

__all__ = [
    "__version__",
    "FetchFailure",
    "FetchKind",
    "PageInitFailure",
    "PanelRenderFailure",
    "PostBrowserError",
    "PostPage",
    "SelectionRefreshFailure",
    "ToggleControlNotFound",
    "create_post_page",
    "init_app",
]
