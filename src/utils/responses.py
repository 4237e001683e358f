"""
GraphQL response builders for the book resolvers.

Converts between GraphQL-shaped Book dicts and DynamoDB items. The boto3
resource API returns numbers as Decimal, which the Lambda runtime cannot
serialize, and rejects Python floats on write.
"""

from decimal import Decimal
from typing import Any, Dict, List, Optional, TypedDict

from .errors import AppError, ErrorCode

# Attributes a Book may carry, in schema order
BOOK_ATTRIBUTES = ("id", "title", "completed", "rating", "reviews")

# Older items and clients carry the title under this name
LEGACY_TITLE_ATTRIBUTE = "name"


class BookResponse(TypedDict, total=False):
    """GraphQL Book response type."""

    id: str
    title: Optional[str]
    completed: Optional[bool]
    rating: Optional[float]
    reviews: Optional[List[str]]


def _from_dynamo_value(value: Any) -> Any:
    if isinstance(value, Decimal):
        return int(value) if value == value.to_integral_value() else float(value)
    if isinstance(value, list):
        return [_from_dynamo_value(v) for v in value]
    if isinstance(value, set):
        return sorted(_from_dynamo_value(v) for v in value)
    if isinstance(value, dict):
        return {k: _from_dynamo_value(v) for k, v in value.items()}
    return value


def to_dynamo_value(value: Any) -> Any:
    """Convert a Python value for the boto3 resource API (float -> Decimal)."""
    if isinstance(value, bool):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    if isinstance(value, list):
        return [to_dynamo_value(v) for v in value]
    if isinstance(value, dict):
        return {k: to_dynamo_value(v) for k, v in value.items()}
    return value


def normalize_book_input(book: Any) -> Dict[str, Any]:
    """
    Validate a book argument and canonicalize its attribute names.

    The legacy ``name`` attribute is accepted as ``title``. Unknown attributes
    and attributes explicitly set to null are dropped.

    Raises:
        AppError: INVALID_INPUT if the book is not an object or has no id
    """
    if not isinstance(book, dict):
        raise AppError(ErrorCode.INVALID_INPUT, "Argument 'book' must be an object")

    book_id = book.get("id")
    if not isinstance(book_id, str) or not book_id:
        raise AppError(ErrorCode.INVALID_INPUT, "Book id is required")

    normalized = dict(book)
    if LEGACY_TITLE_ATTRIBUTE in normalized and normalized.get("title") is None:
        normalized["title"] = normalized[LEGACY_TITLE_ATTRIBUTE]

    return {k: normalized[k] for k in BOOK_ATTRIBUTES if normalized.get(k) is not None}


def to_dynamo_item(book: Dict[str, Any]) -> Dict[str, Any]:
    """Build the DynamoDB item for a normalized book."""
    return {k: to_dynamo_value(v) for k, v in book.items()}


def build_book_response(item: Optional[Dict[str, Any]]) -> Optional[BookResponse]:
    """
    Build a Book response from a DynamoDB item.

    Args:
        item: DynamoDB item dictionary (or None)

    Returns:
        BookResponse with JSON-safe values, or None when there is no item
    """
    if item is None:
        return None

    converted = _from_dynamo_value(item)
    if "title" not in converted and LEGACY_TITLE_ATTRIBUTE in converted:
        converted["title"] = converted[LEGACY_TITLE_ATTRIBUTE]

    response: BookResponse = {}
    for attribute in BOOK_ATTRIBUTES:
        if attribute in converted:
            response[attribute] = converted[attribute]  # type: ignore[literal-required]
    return response
