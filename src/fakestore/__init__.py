"""fakestore: thin HTTP layer for the Fake Store catalog API.

Public API:
    - FakeStoreClient: GET requests bound to a Config
    - get(): GET helper over any httpx.AsyncClient
    - Result / Success / Error: outcome of every call
    - NetworkError: classification of failed calls
    - Config: configuration dataclass
"""

from __future__ import annotations

import logging

from fakestore.client import FakeStoreClient
from fakestore.config import Config
from fakestore.errors import (
    ConfigurationError,
    DataError,
    FakeStoreError,
    NetworkError,
)
from fakestore.networking import construct_route, get, response_to_result, safe_call
from fakestore.result import (
    EmptyResult,
    Error,
    Result,
    Success,
    as_empty_data_result,
    map_result,
)

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("fakestore-net")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("fakestore").addHandler(logging.NullHandler())

__all__ = [
    "Config",
    "ConfigurationError",
    "DataError",
    "EmptyResult",
    "Error",
    "FakeStoreClient",
    "FakeStoreError",
    "NetworkError",
    "Result",
    "Success",
    "as_empty_data_result",
    "construct_route",
    "get",
    "map_result",
    "response_to_result",
    "safe_call",
]
