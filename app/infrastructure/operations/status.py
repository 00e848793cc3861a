"""Outcome kinds for upstream operations."""

from enum import Enum


class OperationStatus(Enum):
    """How an upstream operation ended.

    Routes map TRANSIENT_ERROR to 502 and PERMANENT_ERROR to 500.
    """

    SUCCESS = "success"
    TRANSIENT_ERROR = "transient_error"
    PERMANENT_ERROR = "permanent_error"
