"""Operation status enumeration.

Status codes used to classify the outcome of an operation so callers can
tell a usable result from a recoverable failure.
"""

from enum import Enum


class OperationStatus(Enum):
    """Status codes for operation results.

    Attributes:
        SUCCESS: Operation completed successfully
        NOT_FOUND: Requested resource not found
    """

    SUCCESS = "success"
    NOT_FOUND = "not_found"
