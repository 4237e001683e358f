"""
Error handling utilities for Lambda functions.

Provides standardized error codes and the discriminated result type that
every book operation returns before the GraphQL boundary unwraps it.
"""

import traceback
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Generic, Optional, TypeVar

T = TypeVar("T")


class AppError(Exception):
    """
    Application error with error code and message.

    Raised inside book operations and converted to a failed BookResult.
    """

    def __init__(self, error_code: str, message: str, details: Optional[Dict[str, Any]] = None):
        self.error_code = error_code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for logging."""
        return {
            "errorCode": self.error_code,
            "message": self.message,
            **self.details,
        }


# Common error codes
class ErrorCode:
    """Standard error codes for the application."""

    # Configuration errors
    MISCONFIGURED = "MISCONFIGURED"

    # Resource errors
    NOT_FOUND = "NOT_FOUND"

    # Validation errors
    INVALID_INPUT = "INVALID_INPUT"

    # System errors
    INTERNAL_ERROR = "INTERNAL_ERROR"
    DATABASE_ERROR = "DATABASE_ERROR"


class Outcome(str, Enum):
    """How a book operation finished."""

    OK = "OK"
    NOT_FOUND = "NOT_FOUND"
    MISCONFIGURED = "MISCONFIGURED"
    INVALID_INPUT = "INVALID_INPUT"
    FAULT = "FAULT"


_OUTCOME_BY_CODE = {
    ErrorCode.MISCONFIGURED: Outcome.MISCONFIGURED,
    ErrorCode.NOT_FOUND: Outcome.NOT_FOUND,
    ErrorCode.INVALID_INPUT: Outcome.INVALID_INPUT,
}


@dataclass(frozen=True)
class BookResult(Generic[T]):
    """
    Tagged result of a book operation.

    Callers inside the package can tell a missing record from a fault or a
    misconfigured deployment. ``unwrap_or_none`` collapses every non-OK
    outcome to ``None`` for the GraphQL field result.
    """

    outcome: Outcome
    value: Optional[T] = None
    error: Optional[Dict[str, Any]] = None
    trace: Optional[str] = None

    @classmethod
    def ok(cls, value: T) -> "BookResult[T]":
        return cls(Outcome.OK, value=value)

    @classmethod
    def not_found(cls, details: Optional[Dict[str, Any]] = None) -> "BookResult[T]":
        return cls(
            Outcome.NOT_FOUND,
            error={"errorCode": ErrorCode.NOT_FOUND, "message": "Book not found", **(details or {})},
        )

    @classmethod
    def failed(cls, error: Exception) -> "BookResult[T]":
        """Tag a failure; the traceback of the underlying exception is kept for logging."""
        if isinstance(error, AppError):
            outcome = _OUTCOME_BY_CODE.get(error.error_code, Outcome.FAULT)
            cause = error.__cause__
        else:
            outcome = Outcome.FAULT
            cause = error
        trace = "".join(traceback.format_exception(cause)) if cause is not None else None
        return cls(outcome, error=handle_error(error), trace=trace)

    @property
    def is_ok(self) -> bool:
        return self.outcome is Outcome.OK

    def unwrap_or_none(self) -> Optional[T]:
        return self.value if self.is_ok else None


def handle_error(error: Exception) -> Dict[str, Any]:
    """
    Convert exception to standardized error response.

    Args:
        error: Exception to handle

    Returns:
        Error dictionary suitable for structured logs
    """
    if isinstance(error, AppError):
        return error.to_dict()

    # Unexpected error - keep the exception type, hide the message
    return {
        "errorCode": ErrorCode.INTERNAL_ERROR,
        "message": "An unexpected error occurred. Please try again.",
        "errorType": type(error).__name__,
    }
