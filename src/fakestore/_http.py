"""HTTP status classification shared by the networking helpers.

This module is intentionally tiny: it is the status table as data.
"""

from __future__ import annotations

from fakestore.errors import NetworkError

# Individually classified client error codes.
STATUS_ERRORS: dict[int, NetworkError] = {
    401: NetworkError.UNAUTHORIZED,
    408: NetworkError.REQUEST_TIMEOUT,
    409: NetworkError.CONFLICT,
    413: NetworkError.PAYLOAD_TOO_LARGE,
    429: NetworkError.TOO_MANY_REQUESTS,
}

SUCCESS_STATUS_CODES = range(200, 300)
SERVER_ERROR_STATUS_CODES = range(500, 600)


def classify_status(status_code: int) -> NetworkError | None:
    """Return the error for *status_code*, or None when it denotes success."""
    if status_code in SUCCESS_STATUS_CODES:
        return None
    if status_code in STATUS_ERRORS:
        return STATUS_ERRORS[status_code]
    if status_code in SERVER_ERROR_STATUS_CODES:
        return NetworkError.SERVER_ERROR
    return NetworkError.UNKNOWN
