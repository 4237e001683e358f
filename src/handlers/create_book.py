"""Lambda resolver for Mutation.createBook."""

from typing import Any, Optional

# Handle both Lambda (absolute) and unit test (relative) imports
try:  # pragma: no cover
    from utils.appsync_types import AppSyncEvent, get_argument  # type: ignore[import-not-found]
    from utils.config import BooksConfig, get_config  # type: ignore[import-not-found]
    from utils.dynamodb import get_books_table, store_error  # type: ignore[import-not-found]
    from utils.errors import AppError, BookResult  # type: ignore[import-not-found]
    from utils.logging import get_logger  # type: ignore[import-not-found]
    from utils.resolvers import begin_invocation, finish_invocation  # type: ignore[import-not-found]
    from utils.responses import (  # type: ignore[import-not-found]
        BookResponse,
        normalize_book_input,
        to_dynamo_item,
    )
except ModuleNotFoundError:  # pragma: no cover
    from ..utils.appsync_types import AppSyncEvent, get_argument
    from ..utils.config import BooksConfig, get_config
    from ..utils.dynamodb import get_books_table, store_error
    from ..utils.errors import AppError, BookResult
    from ..utils.logging import get_logger
    from ..utils.resolvers import begin_invocation, finish_invocation
    from ..utils.responses import BookResponse, normalize_book_input, to_dynamo_item

logger = get_logger(__name__)

# Unit tests assign a BooksConfig here to bypass the environment
config: Optional[BooksConfig] = None


def put_book(settings: BooksConfig, book: Any) -> BookResult[BookResponse]:
    """
    Write a book as a full item.

    The put is unconditional: an existing item with the same id is replaced
    (create behaves as an upsert). PutItem returns no item body, so the
    normalized input is echoed back instead of re-reading the table.

    Args:
        settings: Handler configuration
        book: Value of the book argument (BookInput)

    Returns:
        OK with the written book, or a failed result
    """
    try:
        table_name = settings.require_table_name()
        normalized = normalize_book_input(book)
    except AppError as e:
        return BookResult.failed(e)

    logger.info("Creating book", bookId=normalized["id"])

    try:
        get_books_table(table_name, settings.endpoint_url).put_item(Item=to_dynamo_item(normalized))
    except Exception as e:
        return BookResult.failed(store_error("PutItem", table_name, e))

    return BookResult.ok(BookResponse(**normalized))  # type: ignore[typeddict-item]


def create_book(event: AppSyncEvent, context: Any) -> Optional[BookResponse]:
    """
    Resolve Mutation.createBook(book: BookInput!).

    Args:
        event: AppSync resolver event with arguments.book
        context: Lambda context (unused)

    Returns:
        The created book, or None if the input was invalid, the table is not
        configured, or the put failed
    """
    field = begin_invocation(logger, event)
    return finish_invocation(logger, put_book(config or get_config(), get_argument(event, "book")), field)
