"""Lambda resolver for Query.getBookById."""

import time
from typing import Any, Optional

# Handle both Lambda (absolute) and unit test (relative) imports
try:  # pragma: no cover
    from utils.appsync_types import AppSyncEvent, get_argument  # type: ignore[import-not-found]
    from utils.config import BooksConfig, get_config  # type: ignore[import-not-found]
    from utils.dynamodb import get_books_table, store_error  # type: ignore[import-not-found]
    from utils.errors import AppError, BookResult, ErrorCode  # type: ignore[import-not-found]
    from utils.logging import get_logger  # type: ignore[import-not-found]
    from utils.resolvers import begin_invocation, finish_invocation  # type: ignore[import-not-found]
    from utils.responses import BookResponse, build_book_response  # type: ignore[import-not-found]
except ModuleNotFoundError:  # pragma: no cover
    from ..utils.appsync_types import AppSyncEvent, get_argument
    from ..utils.config import BooksConfig, get_config
    from ..utils.dynamodb import get_books_table, store_error
    from ..utils.errors import AppError, BookResult, ErrorCode
    from ..utils.logging import get_logger
    from ..utils.resolvers import begin_invocation, finish_invocation
    from ..utils.responses import BookResponse, build_book_response

logger = get_logger(__name__)

# Unit tests assign a BooksConfig here to bypass the environment
config: Optional[BooksConfig] = None


def _wait(delay_ms: int) -> None:
    """Artificial latency before the lookup (GET_BOOK_DELAY_MS)."""
    if delay_ms > 0:
        logger.debug("Delaying lookup", delayMs=delay_ms)
        time.sleep(delay_ms / 1000)


def fetch_book(settings: BooksConfig, book_id: Any) -> BookResult[BookResponse]:
    """
    Look up one book by its partition key.

    Args:
        settings: Handler configuration
        book_id: Value of the bookId argument

    Returns:
        OK with the book, NOT_FOUND when no item exists, or a failed result
    """
    try:
        table_name = settings.require_table_name()
        if not isinstance(book_id, str) or not book_id:
            raise AppError(ErrorCode.INVALID_INPUT, "Argument 'bookId' is required")
    except AppError as e:
        return BookResult.failed(e)

    _wait(settings.get_delay_ms)

    try:
        response = get_books_table(table_name, settings.endpoint_url).get_item(Key={"id": book_id})
    except Exception as e:
        return BookResult.failed(store_error("GetItem", table_name, e))

    book = build_book_response(response.get("Item"))
    if book is None:
        return BookResult.not_found({"bookId": book_id})
    return BookResult.ok(book)


def get_book_by_id(event: AppSyncEvent, context: Any) -> Optional[BookResponse]:
    """
    Resolve Query.getBookById(bookId: ID!).

    Args:
        event: AppSync resolver event with arguments.bookId
        context: Lambda context (unused)

    Returns:
        The book, or None if it does not exist, the table is not configured,
        or the lookup failed
    """
    field = begin_invocation(logger, event)
    book_id = get_argument(event, "bookId")
    return finish_invocation(logger, fetch_book(config or get_config(), book_id), field)
