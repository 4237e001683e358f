"""GraphQL boundary helpers shared by the book resolvers."""

from typing import Optional, TypeVar

from .appsync_types import AppSyncEvent, get_field_name
from .errors import BookResult, Outcome
from .logging import StructuredLogger, get_correlation_id

T = TypeVar("T")


def begin_invocation(logger: StructuredLogger, event: AppSyncEvent) -> Optional[str]:
    """Bind the request's correlation ID and log the field being resolved."""
    logger.bind(get_correlation_id(event))
    field = get_field_name(event)
    logger.info("Resolver invoked", field=field)
    return field


def finish_invocation(
    logger: StructuredLogger, result: BookResult[T], field: Optional[str] = None
) -> Optional[T]:
    """
    Log the outcome and unwrap it into the nullable field result.

    Not-found is informational; every other failure is logged as an error
    with its error dict under ``error`` and, for store faults, the traceback
    of the underlying exception under ``exception``. All non-OK outcomes
    resolve to None.
    """
    if result.outcome is Outcome.OK:
        logger.info("Resolver succeeded", field=field)
    elif result.outcome is Outcome.NOT_FOUND:
        logger.info("Book not found", field=field, error=result.error)
    elif result.outcome is Outcome.INVALID_INPUT:
        logger.warning("Invalid resolver input", field=field, error=result.error)
    else:
        logger.error(
            "Resolver failed",
            field=field,
            outcome=result.outcome.value,
            error=result.error,
            exception=result.trace,
        )
    return result.unwrap_or_none()
