"""Error taxonomy and exception hierarchy for fakestore.

Request failures are values (:class:`NetworkError` members carried by
``fakestore.result.Error``). Exceptions are reserved for setup mistakes such
as an invalid :class:`~fakestore.config.Config`.
"""

from __future__ import annotations

from enum import Enum


class DataError(Enum):
    """Marker base for every error kind a ``Result`` may carry."""


class NetworkError(DataError):
    """Classification of a failed network call.

    Members are pure tags: no status code or underlying cause travels with
    them. The exception detail is logged where it is captured.
    """

    NO_INTERNET = "no_internet"
    SERIALIZATION_ERROR = "serialization_error"
    UNKNOWN = "unknown"
    UNAUTHORIZED = "unauthorized"
    REQUEST_TIMEOUT = "request_timeout"
    CONFLICT = "conflict"
    PAYLOAD_TOO_LARGE = "payload_too_large"
    TOO_MANY_REQUESTS = "too_many_requests"
    SERVER_ERROR = "server_error"


class FakeStoreError(Exception):
    """Base exception for all fakestore errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class ConfigurationError(FakeStoreError):
    """Configuration validation or resolution failed."""
