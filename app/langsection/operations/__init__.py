"""Operation result types and status enums."""

from langsection.operations.result import OperationResult
from langsection.operations.status import OperationStatus

__all__ = [
    "OperationResult",
    "OperationStatus",
]
