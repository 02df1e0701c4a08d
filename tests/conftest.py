"""Pytest configuration and fixtures.

Provides environment isolation, logging configuration and a fake transport
factory. All fixtures here are autouse unless noted.
"""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING

import httpx
import pytest

if TYPE_CHECKING:
    from collections.abc import Callable

BASE_URL = "https://store.test"

# =============================================================================
# Environment Isolation (Autouse)
# =============================================================================


@pytest.fixture(autouse=True)
def isolate_fakestore_env(request, monkeypatch):
    """Clear FAKESTORE_* env vars so tests see the built-in defaults.

    This is the only guard against a project .env: fakestore.config runs
    load_dotenv() at import, before any fixture, so values it loaded are
    removed here instead.

    Opt-out: @pytest.mark.allow_env_pollution
    """
    if request.node.get_closest_marker("allow_env_pollution"):
        return
    for key in list(os.environ.keys()):
        if key.startswith("FAKESTORE_"):
            monkeypatch.delenv(key, raising=False)


# =============================================================================
# Logging
# =============================================================================


@pytest.fixture(scope="session", autouse=True)
def quiet_noisy_libraries():
    """Suppress noisy third-party loggers."""
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


# =============================================================================
# Transport Doubles
# =============================================================================


@pytest.fixture
def base_url() -> str:
    """Base URL used by client-level tests (never resolved)."""
    return BASE_URL


@pytest.fixture
def mock_http_client() -> Callable[..., httpx.AsyncClient]:
    """Return a factory building httpx clients backed by a handler function.

    Not autouse. The handler receives each ``httpx.Request`` and returns an
    ``httpx.Response`` or raises a transport error.
    """

    def _factory(
        handler: Callable[[httpx.Request], httpx.Response],
    ) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))

    return _factory
