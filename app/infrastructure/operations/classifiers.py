"""Error classifier for outbound HTTP exceptions.

Converts httpx exceptions raised while talking to third-party services into
standardized OperationResult objects, so clients never raise into their
callers.

Usage:
    from infrastructure.operations.classifiers import classify_http_error

    try:
        response = await http_client.get(url)
        response.raise_for_status()
    except httpx.HTTPError as exc:
        return classify_http_error(exc)
"""

from typing import Optional

import httpx

from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus

DEFAULT_RETRY_AFTER_SECONDS = 60

# ip-api.com reports its rate limit window in X-Ttl instead of Retry-After
RETRY_AFTER_HEADERS = ("retry-after", "x-ttl")


def _retry_after(response: httpx.Response) -> int:
    for header in RETRY_AFTER_HEADERS:
        value = response.headers.get(header)
        if not value:
            continue
        try:
            return int(value)
        except ValueError:
            continue
    return DEFAULT_RETRY_AFTER_SECONDS


def classify_http_error(exc: Exception) -> OperationResult:
    """Classify an httpx exception into an OperationResult.

    Status Code Mapping:
    - 429: Rate limiting → TRANSIENT_ERROR with retry_after
    - 401: Unauthorized → UNAUTHORIZED
    - 403: Forbidden → PERMANENT_ERROR
    - 404: Not found → NOT_FOUND
    - 5xx: Server error → TRANSIENT_ERROR
    - Other 4xx → PERMANENT_ERROR

    Timeouts, connection failures and any non-status exception are treated as
    transient connection errors.

    Args:
        exc: Exception raised by httpx (or while handling an httpx call)

    Returns:
        OperationResult with appropriate status, message, error_code and
        retry_after (if applicable)
    """
    if not isinstance(exc, httpx.HTTPStatusError):
        return OperationResult.transient_error(
            f"Connection error: {type(exc).__name__}: {str(exc)}",
            error_code="CONNECTION_ERROR",
        )

    status_code: Optional[int] = exc.response.status_code

    if status_code == 429:
        return OperationResult.error(
            OperationStatus.TRANSIENT_ERROR,
            "Provider rate limited",
            error_code="RATE_LIMITED",
            retry_after=_retry_after(exc.response),
        )

    if status_code == 401:
        return OperationResult.error(
            OperationStatus.UNAUTHORIZED,
            "Provider authentication failed",
            error_code="UNAUTHORIZED",
        )

    if status_code == 403:
        return OperationResult.permanent_error(
            "Provider authorization denied",
            error_code="FORBIDDEN",
        )

    if status_code == 404:
        return OperationResult.error(
            OperationStatus.NOT_FOUND,
            "Provider resource not found",
            error_code="NOT_FOUND",
        )

    if 500 <= status_code < 600:
        return OperationResult.transient_error(
            f"Provider server error ({status_code})",
            error_code="SERVER_ERROR",
        )

    return OperationResult.permanent_error(
        f"Provider client error ({status_code}): {str(exc)}",
        error_code="HTTP_ERROR",
    )
