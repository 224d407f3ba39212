"""Shared pytest fixtures for gateway tests."""

from __future__ import annotations

from collections.abc import Callable

import httpx
import pytest

from app.core.config import Settings


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def settings() -> Settings:
    """Default settings, independent of the process environment."""
    return Settings()


@pytest.fixture
def recorder() -> Callable[..., tuple[httpx.MockTransport, list[httpx.Request]]]:
    """Build a MockTransport that answers with a fixed response and records requests."""

    def make(status: int = 200, body: dict | str | None = None) -> tuple[httpx.MockTransport, list[httpx.Request]]:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            if isinstance(body, str):
                return httpx.Response(status, text=body)
            return httpx.Response(status, json=body if body is not None else {})

        return httpx.MockTransport(handler), seen

    return make
