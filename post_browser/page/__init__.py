"""Page façade and construction helpers."""

from .factory import SELECTOR_ID, create_document, create_post_page
from .post_page import PostPage

__all__ = ["PostPage", "SELECTOR_ID", "create_document", "create_post_page"]
