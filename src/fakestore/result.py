"""Success/error tagged union returned by every network call.

A ``Result`` is exactly one of :class:`Success` or :class:`Error`. Both are
frozen, so a value never changes after the call that produced it. Consumers
branch with ``match``::

    match result:
        case Success(data=products):
            ...
        case Error(error=kind):
            ...
"""

from __future__ import annotations

from collections.abc import Callable
import dataclasses
import typing

from fakestore.errors import DataError

TData = typing.TypeVar("TData")
TError = typing.TypeVar("TError", bound=DataError)
TOut = typing.TypeVar("TOut")


@dataclasses.dataclass(frozen=True, slots=True)
class Success(typing.Generic[TData]):
    """A successful call, holding the decoded payload."""

    data: TData

    def map(self, transform: Callable[[TData], TOut]) -> Success[TOut]:
        """Apply *transform* to the payload and wrap the outcome."""
        return Success(transform(self.data))

    def as_empty_data_result(self) -> Success[None]:
        """Drop the payload, keeping only the fact that the call succeeded."""
        return self.map(lambda _: None)


@dataclasses.dataclass(frozen=True, slots=True)
class Error(typing.Generic[TError]):
    """A failed call, holding its error kind."""

    error: TError

    def map(self, transform: Callable[[typing.Any], typing.Any]) -> Error[TError]:
        """Return the error unchanged; *transform* is never called."""
        del transform
        return self

    def as_empty_data_result(self) -> Error[TError]:
        """Return the error unchanged."""
        return self


Result = Success[TData] | Error[TError]

# Success payload carries no information; only success/failure matters.
EmptyResult = Success[None] | Error[TError]


def map_result(
    result: Result[TData, TError], transform: Callable[[TData], TOut]
) -> Result[TOut, TError]:
    """Transform the payload of a successful result, passing errors through."""
    match result:
        case Success():
            return result.map(transform)
        case Error():
            return result
        case _:
            typing.assert_never(result)


def as_empty_data_result(result: Result[TData, TError]) -> EmptyResult[TError]:
    """Equivalent to ``map_result(result, lambda _: None)``."""
    return map_result(result, lambda _: None)
