"""Result types and error classification for upstream operations."""

from infrastructure.operations.classifiers import classify_request_error
from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus

__all__ = [
    "OperationResult",
    "OperationStatus",
    "classify_request_error",
]
