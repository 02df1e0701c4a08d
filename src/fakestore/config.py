"""Configuration: frozen Config carrying the API base URL."""

from __future__ import annotations

from dataclasses import dataclass, field
import os
from urllib.parse import urlparse

from dotenv import load_dotenv

from fakestore.errors import ConfigurationError

load_dotenv()

DEFAULT_BASE_URL = "https://fakestoreapi.com"
BASE_URL_ENV_VAR = "FAKESTORE_BASE_URL"


def _resolve_base_url() -> str:
    return os.environ.get(BASE_URL_ENV_VAR) or DEFAULT_BASE_URL


@dataclass(frozen=True)
class Config:
    """Immutable configuration for fakestore clients.

    The base URL is auto-resolved from ``FAKESTORE_BASE_URL`` when not given,
    falling back to the public Fake Store API.

    Example:
        config = Config()  # https://fakestoreapi.com unless overridden
        config = Config(base_url="http://localhost:8080")
    """

    #: Auto-resolved from ``FAKESTORE_BASE_URL`` when omitted.
    base_url: str = field(default_factory=_resolve_base_url)
    #: Transport timeout handed to httpx; *None* disables it.
    timeout_s: float | None = None

    def __post_init__(self) -> None:
        """Validate configuration."""
        base_url = self.base_url
        if not isinstance(base_url, str) or not base_url.strip():
            raise ConfigurationError(
                "base_url must not be empty",
                hint=f"Set {BASE_URL_ENV_VAR} or pass base_url=...",
            )
        parsed = urlparse(base_url)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ConfigurationError(
                f"base_url must be an absolute http(s) URL, got {base_url!r}",
                hint="Example: https://fakestoreapi.com",
            )

        if self.timeout_s is not None and self.timeout_s < 0:
            raise ConfigurationError(
                f"timeout_s must be ≥ 0 or None, got {self.timeout_s}",
                hint="Use None to leave requests without a client timeout.",
            )
