"""Operation status enumeration.

Status codes for operation results, used to classify outcomes of the
best-effort operations (geolocation lookup, log append, log read).
"""

from enum import Enum


class OperationStatus(Enum):
    """Status codes for operation results.

    Attributes:
        SUCCESS: Operation completed successfully
        TRANSIENT_ERROR: Error that may clear on its own (network, timeout, rate limit, disk)
        PERMANENT_ERROR: Error that will not clear without a change (bad input, malformed payload)
        UNAUTHORIZED: Provider refused the caller
        NOT_FOUND: Resource not found (unknown IP, missing log file)
    """

    SUCCESS = "success"
    TRANSIENT_ERROR = "transient_error"
    PERMANENT_ERROR = "permanent_error"
    UNAUTHORIZED = "unauthorized"
    NOT_FOUND = "not_found"
