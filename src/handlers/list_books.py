"""Lambda resolver for Query.listBooks."""

from typing import Any, List, Optional

# Handle both Lambda (absolute) and unit test (relative) imports
try:  # pragma: no cover
    from utils.appsync_types import AppSyncEvent  # type: ignore[import-not-found]
    from utils.config import BooksConfig, get_config  # type: ignore[import-not-found]
    from utils.dynamodb import get_books_table, store_error  # type: ignore[import-not-found]
    from utils.errors import AppError, BookResult  # type: ignore[import-not-found]
    from utils.logging import get_logger  # type: ignore[import-not-found]
    from utils.resolvers import begin_invocation, finish_invocation  # type: ignore[import-not-found]
    from utils.responses import BookResponse, build_book_response  # type: ignore[import-not-found]
except ModuleNotFoundError:  # pragma: no cover
    from ..utils.appsync_types import AppSyncEvent
    from ..utils.config import BooksConfig, get_config
    from ..utils.dynamodb import get_books_table, store_error
    from ..utils.errors import AppError, BookResult
    from ..utils.logging import get_logger
    from ..utils.resolvers import begin_invocation, finish_invocation
    from ..utils.responses import BookResponse, build_book_response

logger = get_logger(__name__)

# Unit tests assign a BooksConfig here to bypass the environment
config: Optional[BooksConfig] = None


def scan_books(settings: BooksConfig) -> BookResult[List[BookResponse]]:
    """
    Read every book with a single scan.

    Only the first page is returned: a LastEvaluatedKey from DynamoDB is
    dropped (logged at debug level), so tables larger than 1 MB are truncated.

    Args:
        settings: Handler configuration

    Returns:
        OK with the (possibly empty) list of books, or a failed result
    """
    try:
        table_name = settings.require_table_name()
    except AppError as e:
        return BookResult.failed(e)

    try:
        response = get_books_table(table_name, settings.endpoint_url).scan()
    except Exception as e:
        return BookResult.failed(store_error("Scan", table_name, e))

    if "LastEvaluatedKey" in response:
        logger.debug("Scan returned a continuation key; remaining pages ignored", table=table_name)

    books = [build_book_response(item) for item in response.get("Items", [])]
    return BookResult.ok([book for book in books if book is not None])


def list_books(event: AppSyncEvent, context: Any) -> Optional[List[BookResponse]]:
    """
    Resolve Query.listBooks.

    Args:
        event: AppSync resolver event (no arguments)
        context: Lambda context (unused)

    Returns:
        List of books in scan order, or None if the table is not configured
        or the scan failed
    """
    field = begin_invocation(logger, event)
    return finish_invocation(logger, scan_books(config or get_config()), field)
