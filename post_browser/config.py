"""Runtime configuration for the remote data gateway."""

from __future__ import annotations

import os
from dataclasses import dataclass

import httpx

DEFAULT_BASE_URL = "https://jsonplaceholder.typicode.com"
DEFAULT_TIMEOUT = 10.0


@dataclass(slots=True)
class GatewayConfig:
    """Endpoint and timeout for the remote collection store.

    Unset fields fall back to ``POST_BROWSER_API_URL`` and
    ``POST_BROWSER_TIMEOUT`` from the environment, then to the defaults.
    """

    base_url: str | None = None
    timeout: float | None = None

    def __post_init__(self) -> None:
        if self.base_url is None:
            self.base_url = os.getenv("POST_BROWSER_API_URL", DEFAULT_BASE_URL)
        if self.timeout is None:
            raw_timeout = os.getenv("POST_BROWSER_TIMEOUT")
            self.timeout = float(raw_timeout) if raw_timeout else DEFAULT_TIMEOUT
        self.base_url = self.base_url.rstrip("/")


def create_http_client(
    config: GatewayConfig | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Return an ``httpx.AsyncClient`` bound to the configured endpoint."""
    cfg = config or GatewayConfig()
    return httpx.AsyncClient(
        base_url=cfg.base_url,
        timeout=cfg.timeout,
        transport=transport,
        headers={"Accept": "application/json"},
    )


__all__ = ["DEFAULT_BASE_URL", "DEFAULT_TIMEOUT", "GatewayConfig", "create_http_client"]
