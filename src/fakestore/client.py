"""Fake Store API client bound to a Config."""

from __future__ import annotations

from typing import TYPE_CHECKING, Self, TypeVar

import httpx

from fakestore import networking
from fakestore.config import Config

if TYPE_CHECKING:
    from collections.abc import Mapping
    from types import TracebackType

    from fakestore.errors import NetworkError
    from fakestore.result import Result

T = TypeVar("T")


class FakeStoreClient:
    """Issues GET requests against ``config.base_url``.

    An ``httpx.AsyncClient`` is created on first use unless one is injected.
    Only a client created here is closed by :meth:`aclose`.
    """

    def __init__(
        self,
        config: Config | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize with a config and an optional shared httpx client."""
        self.config = config if config is not None else Config()
        self._client = http_client
        self._owns_client = http_client is None

    @property
    def base_url(self) -> str:
        """Base URL every route is joined onto."""
        return self.config.base_url

    def _get_client(self) -> httpx.AsyncClient:
        """Lazily initialize and return the httpx client."""
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.config.timeout_s)
        return self._client

    async def get(
        self,
        route: str,
        response_type: type[T],
        query_parameters: Mapping[str, object | None] | None = None,
    ) -> Result[T, NetworkError]:
        """GET *route* and decode the body into *response_type*."""
        return await networking.get(
            self._get_client(),
            route,
            response_type,
            query_parameters,
            base_url=self.base_url,
        )

    async def aclose(self) -> None:
        """Close the underlying httpx client when this instance created it."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()
