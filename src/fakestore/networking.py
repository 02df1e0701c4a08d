"""HTTP GET helpers that turn every outcome into a ``Result``.

Nothing raised by the transport or by payload decoding escapes these helpers;
each failure is logged and classified into a :class:`NetworkError`. The one
exception is ``asyncio.CancelledError``, which always propagates so the
caller's own cancellation handling runs.
"""

from __future__ import annotations

import asyncio
from functools import cache
import logging
from typing import TYPE_CHECKING, Any, TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError

from fakestore._http import classify_status
from fakestore.errors import NetworkError
from fakestore.result import Error, Result, Success

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Mapping

log = logging.getLogger(__name__)

T = TypeVar("T")


def construct_route(route: str, *, base_url: str) -> str:
    """Join *route* onto *base_url*.

    Routes that already contain the base URL are returned as-is. Slashes are
    not normalized.
    """
    if base_url in route:
        return route
    if route.startswith("/"):
        return base_url + route
    return base_url + "/" + route


def _is_empty_type(response_type: Any) -> bool:
    return response_type is None or response_type is type(None)


@cache
def _adapter(response_type: Any) -> TypeAdapter[Any]:
    return TypeAdapter(response_type)


async def response_to_result(
    response: httpx.Response, response_type: type[T]
) -> Result[T, NetworkError]:
    """Classify a completed response by status code.

    A 2xx body is decoded into *response_type*; decoding errors propagate to
    the enclosing :func:`safe_call`. A *response_type* of ``None`` skips the
    body entirely, so no-content endpoints succeed with ``Success(None)``.
    """
    error = classify_status(response.status_code)
    if error is not None:
        return Error(error)
    if _is_empty_type(response_type):
        return Success(None)  # type: ignore[arg-type]
    body = await response.aread()
    return Success(_adapter(response_type).validate_json(body))


async def safe_call(
    execute: Callable[[], Awaitable[httpx.Response]],
    response_type: type[T],
) -> Result[T, NetworkError]:
    """Run *execute* and classify its response or failure.

    An unsupported *response_type* raises before any request is sent.
    """
    if not _is_empty_type(response_type):
        _adapter(response_type)
    try:
        response = await execute()
        return await response_to_result(response, response_type)
    except asyncio.CancelledError:
        raise
    except httpx.ConnectError:
        log.warning("Network call failed: host unreachable", exc_info=True)
        return Error(NetworkError.NO_INTERNET)
    except ValidationError:
        log.warning("Network call failed: payload did not decode", exc_info=True)
        return Error(NetworkError.SERIALIZATION_ERROR)
    except Exception:
        log.warning("Network call failed", exc_info=True)
        return Error(NetworkError.UNKNOWN)


async def get(
    client: httpx.AsyncClient,
    route: str,
    response_type: type[T],
    query_parameters: Mapping[str, object | None] | None = None,
    *,
    base_url: str,
) -> Result[T, NetworkError]:
    """Issue a GET for *route* and decode the body into *response_type*.

    Query parameters with a ``None`` value are left out; the rest are sent as
    ``str(value)``.

    Example:
        result = await get(
            client, "/products", list[Product], {"limit": 10}, base_url=base
        )
    """
    url = construct_route(route, base_url=base_url)
    params = {
        key: str(value)
        for key, value in (query_parameters or {}).items()
        if value is not None
    }
    log.debug("GET %s", url)
    return await safe_call(lambda: client.get(url, params=params), response_type)
