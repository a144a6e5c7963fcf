from __future__ import annotations

import asyncio
import json
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

import httpx
import pytest
import pytest_asyncio

from post_browser.config import GatewayConfig
from post_browser.dom import Document
from post_browser.gateway import RemoteDataGateway
from post_browser.page import PostPage, create_post_page

BASE_URL = "https://api.test"

EMPLOYEES = [
    {
        "id": 1,
        "name": "Ann",
        "username": "ann",
        "email": "ann@example.com",
        "company": {"name": "Co", "catchPhrase": "CP", "bs": "synergy"},
    },
    {
        "id": 2,
        "name": "Bob",
        "company": {"name": "Widgets", "catchPhrase": "Make it so"},
    },
]

POSTS = [
    {"id": 10, "userId": 1, "title": "First", "body": "Hello"},
    {"id": 11, "userId": 1, "title": "Second", "body": "Again"},
    {"id": 20, "userId": 2, "title": "Bob's post", "body": "Hi <there>"},
]

COMMENTS = {
    10: [],
    11: [
        {"id": 1, "postId": 11, "name": "Nice", "body": "Great post", "email": "c1@example.com"},
        {"id": 2, "postId": 11, "name": "Meh", "body": "Could be better", "email": "c2@example.com"},
    ],
    20: [{"id": 3, "postId": 20, "name": "Hey", "body": "Hi Bob", "email": "c3@example.com"}],
}


@dataclass
class Gate:
    """Holds a request until released, for ordering tests."""

    arrived: asyncio.Event = field(default_factory=asyncio.Event)
    released: asyncio.Event = field(default_factory=asyncio.Event)

    def release(self) -> None:
        self.released.set()


class FakeRemoteStore:
    """In-memory stand-in for the remote JSON API behind ``httpx.MockTransport``."""

    def __init__(self, employees=None, posts=None, comments=None):
        self.employees = list(EMPLOYEES if employees is None else employees)
        self.posts = list(POSTS if posts is None else posts)
        self.comments = dict(COMMENTS if comments is None else comments)
        self.requests: list[str] = []
        self._overrides: dict[str, Callable[[httpx.Request], httpx.Response]] = {}
        self._gates: dict[str, Gate] = {}

    def respond(self, target: str, status: int = 200, *, content: bytes | None = None, payload: Any = None) -> None:
        def _override(request: httpx.Request) -> httpx.Response:
            if content is not None:
                return httpx.Response(status, content=content)
            return httpx.Response(status, json=payload)

        self._overrides[target] = _override

    def fail_transport(self, target: str) -> None:
        def _override(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        self._overrides[target] = _override

    def hold(self, target: str) -> Gate:
        gate = Gate()
        self._gates[target] = gate
        return gate

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    async def handler(self, request: httpx.Request) -> httpx.Response:
        target = request.url.raw_path.decode()
        self.requests.append(target)
        gate = self._gates.get(target)
        if gate is not None:
            gate.arrived.set()
            await gate.released.wait()
        if target in self._overrides:
            return self._overrides[target](request)
        return self._route(request)

    def _route(self, request: httpx.Request) -> httpx.Response:
        parts = [part for part in request.url.path.split("/") if part]
        if parts == ["users"]:
            return httpx.Response(200, json=self.employees)
        if len(parts) == 2 and parts[0] == "users":
            for employee in self.employees:
                if str(employee["id"]) == parts[1]:
                    return httpx.Response(200, json=employee)
            return httpx.Response(404, json={})
        if parts == ["posts"]:
            user_id = request.url.params.get("userId")
            matching = [post for post in self.posts if str(post["userId"]) == user_id]
            return httpx.Response(200, json=matching)
        if len(parts) == 3 and parts[0] == "posts" and parts[2] == "comments":
            return httpx.Response(200, content=json.dumps(self.comments.get(int(parts[1]), [])).encode())
        return httpx.Response(404, json={})


@pytest.fixture
def remote_store() -> FakeRemoteStore:
    return FakeRemoteStore()


@pytest_asyncio.fixture
async def gateway(remote_store: FakeRemoteStore):
    gateway = RemoteDataGateway.from_config(
        GatewayConfig(base_url=BASE_URL, timeout=5.0),
        transport=remote_store.transport,
    )
    yield gateway
    await gateway.aclose()


@pytest.fixture
def document() -> Document:
    return Document()


@pytest.fixture
def page(gateway: RemoteDataGateway) -> PostPage:
    return create_post_page(gateway)


@pytest.fixture
def store_factory():
    return FakeRemoteStore


@pytest_asyncio.fixture
async def page_factory():
    """Build pages over custom ``FakeRemoteStore`` datasets; closes their gateways."""
    gateways: list[RemoteDataGateway] = []

    def _factory(store: FakeRemoteStore) -> PostPage:
        gateway = RemoteDataGateway.from_config(
            GatewayConfig(base_url=BASE_URL, timeout=5.0),
            transport=store.transport,
        )
        gateways.append(gateway)
        return create_post_page(gateway)

    yield _factory
    for gateway in gateways:
        await gateway.aclose()
