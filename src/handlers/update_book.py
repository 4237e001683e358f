"""Lambda resolver for Mutation.updateBook."""

from typing import Any, Dict, Optional

# Handle both Lambda (absolute) and unit test (relative) imports
try:  # pragma: no cover
    from utils.appsync_types import AppSyncEvent, get_argument  # type: ignore[import-not-found]
    from utils.config import BooksConfig, get_config  # type: ignore[import-not-found]
    from utils.dynamodb import get_books_table, store_error  # type: ignore[import-not-found]
    from utils.errors import AppError, BookResult  # type: ignore[import-not-found]
    from utils.expressions import UpdatePatch  # type: ignore[import-not-found]
    from utils.logging import get_logger  # type: ignore[import-not-found]
    from utils.resolvers import begin_invocation, finish_invocation  # type: ignore[import-not-found]
    from utils.responses import (  # type: ignore[import-not-found]
        BookResponse,
        build_book_response,
        normalize_book_input,
        to_dynamo_value,
    )
except ModuleNotFoundError:  # pragma: no cover
    from ..utils.appsync_types import AppSyncEvent, get_argument
    from ..utils.config import BooksConfig, get_config
    from ..utils.dynamodb import get_books_table, store_error
    from ..utils.errors import AppError, BookResult
    from ..utils.expressions import UpdatePatch
    from ..utils.logging import get_logger
    from ..utils.resolvers import begin_invocation, finish_invocation
    from ..utils.responses import (
        BookResponse,
        build_book_response,
        normalize_book_input,
        to_dynamo_value,
    )

logger = get_logger(__name__)

# Attributes BookUpdateInput may change
UPDATABLE_ATTRIBUTES = ("title", "rating", "completed")

# Unit tests assign a BooksConfig here to bypass the environment
config: Optional[BooksConfig] = None


def build_patch(book: Dict[str, Any]) -> UpdatePatch:
    """Collect the updatable attributes the caller supplied, converted for DynamoDB."""
    return UpdatePatch(
        (name, to_dynamo_value(value))
        for name, value in book.items()
        if name in UPDATABLE_ATTRIBUTES
    )


def patch_book(settings: BooksConfig, book: Any) -> BookResult[BookResponse]:
    """
    Merge the supplied attributes into an existing book.

    Attributes missing from the input (or null) are left untouched. An input
    carrying only the id is a no-op: the current item is read back unchanged
    instead of sending an UpdateItem with an empty SET clause.

    Args:
        settings: Handler configuration
        book: Value of the book argument (BookUpdateInput)

    Returns:
        OK with the complete post-update item, or a failed result
    """
    try:
        table_name = settings.require_table_name()
        normalized = normalize_book_input(book)
    except AppError as e:
        return BookResult.failed(e)

    key = {"id": normalized["id"]}
    patch = build_patch(normalized)

    if not patch:
        logger.info("Update has no attributes to change; returning current item", bookId=key["id"])
        try:
            response = get_books_table(table_name, settings.endpoint_url).get_item(Key=key)
        except Exception as e:
            return BookResult.failed(store_error("GetItem", table_name, e))
        current = build_book_response(response.get("Item"))
        if current is None:
            return BookResult.not_found({"bookId": key["id"]})
        return BookResult.ok(current)

    expression = patch.render()
    logger.info("Updating book", bookId=key["id"], attributes=patch.attribute_names)

    try:
        table = get_books_table(table_name, settings.endpoint_url)
        response = table.update_item(Key=key, ReturnValues="ALL_NEW", **expression.as_kwargs())
    except Exception as e:
        return BookResult.failed(store_error("UpdateItem", table_name, e))

    updated = build_book_response(response.get("Attributes"))
    if updated is None:
        return BookResult.not_found({"bookId": key["id"]})
    return BookResult.ok(updated)


def update_book(event: AppSyncEvent, context: Any) -> Optional[BookResponse]:
    """
    Resolve Mutation.updateBook(book: BookUpdateInput!).

    Args:
        event: AppSync resolver event with arguments.book
        context: Lambda context (unused)

    Returns:
        The full post-update book, or None if the input was invalid, the
        table is not configured, or the update failed
    """
    field = begin_invocation(logger, event)
    return finish_invocation(logger, patch_book(config or get_config(), get_argument(event, "book")), field)
