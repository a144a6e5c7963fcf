"""Factory helpers for constructing a wired ``PostPage``."""

from __future__ import annotations

from post_browser.config import GatewayConfig
from post_browser.controllers import (
    ListenerManager,
    RefreshOrchestrator,
    SelectionHandler,
    ToggleController,
)
from post_browser.dom import Document
from post_browser.gateway import RemoteDataGateway
from post_browser.renderers import RenderContext, build_labeled_text

from .post_page import PostPage

SELECTOR_ID = "selectMenu"


def create_document(title: str = "Employee Posts") -> Document:
    """Return a document with a header, the selector and an empty ``<main>``."""
    document = Document()
    header = document.create_element("header")
    header.append_child(build_labeled_text(document, "h1", title))
    selector = document.create_element("select")
    selector.id = SELECTOR_ID
    header.append_child(selector)
    document.body.append_child(header)
    document.body.append_child(document.create_element("main"))
    return document


def create_post_page(
    gateway: RemoteDataGateway | None = None,
    *,
    config: GatewayConfig | None = None,
    document: Document | None = None,
) -> PostPage:
    """Build a PostPage around ``document`` (a fresh skeleton by default)."""
    gateway = gateway or RemoteDataGateway.from_config(config)
    document = document or create_document()
    surface = document.query_selector("main")
    selector = document.get_element_by_id(SELECTOR_ID)
    if surface is None or selector is None:
        raise ValueError(f"Document needs a <main> surface and a #{SELECTOR_ID} selector")

    toggles = ToggleController(document)
    listeners = ListenerManager(surface, toggles)
    orchestrator = RefreshOrchestrator(
        RenderContext(document=document, gateway=gateway),
        surface,
        listeners,
    )
    return PostPage(
        document=document,
        surface=surface,
        selector=selector,
        gateway=gateway,
        toggles=toggles,
        listeners=listeners,
        orchestrator=orchestrator,
        selection=SelectionHandler(gateway, orchestrator),
    )


__all__ = ["SELECTOR_ID", "create_document", "create_post_page"]
