"""Shared NiceGUI demo state (gateway configuration)."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from post_browser.config import GatewayConfig
from post_browser.gateway import RemoteDataGateway

PROJECT_ROOT = Path(__file__).resolve().parents[2]
DOTENV_PATH = PROJECT_ROOT / ".env"


@dataclass(slots=True)
class DemoContext:
    config: GatewayConfig
    gateway: RemoteDataGateway


_CONTEXT: Optional[DemoContext] = None


def get_context() -> DemoContext:
    """Return a singleton demo context, reading ``.env`` on first access."""

    global _CONTEXT
    if _CONTEXT is None:
        load_dotenv(DOTENV_PATH)
        config = GatewayConfig()
        print(f"[demo] using remote store at {config.base_url}")
        _CONTEXT = DemoContext(config=config, gateway=RemoteDataGateway.from_config(config))
    return _CONTEXT


async def close_context() -> None:
    global _CONTEXT
    if _CONTEXT is not None:
        await _CONTEXT.gateway.aclose()
        _CONTEXT = None


__all__ = ["DemoContext", "close_context", "get_context"]
