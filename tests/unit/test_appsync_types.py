"""Tests for src/utils/appsync_types.py - AppSync event type utilities."""

from src.utils.appsync_types import AppSyncEvent, get_argument, get_field_name
from src.utils.logging import get_correlation_id


class TestGetArgument:
    """Tests for get_argument function."""

    def test_returns_argument(self) -> None:
        event: AppSyncEvent = {"arguments": {"bookId": "42"}}
        assert get_argument(event, "bookId") == "42"

    def test_returns_default_when_missing(self) -> None:
        event: AppSyncEvent = {"arguments": {}}
        assert get_argument(event, "bookId", "fallback") == "fallback"

    def test_handles_null_arguments(self) -> None:
        event: AppSyncEvent = {"arguments": None}
        assert get_argument(event, "bookId") is None


class TestGetFieldName:
    """Tests for get_field_name function."""

    def test_type_and_field(self) -> None:
        event: AppSyncEvent = {"info": {"fieldName": "listBooks", "parentTypeName": "Query"}}
        assert get_field_name(event) == "Query.listBooks"

    def test_field_without_parent(self) -> None:
        event: AppSyncEvent = {"info": {"fieldName": "listBooks"}}
        assert get_field_name(event) == "listBooks"

    def test_missing_info(self) -> None:
        assert get_field_name({}) is None


class TestResolverEvent:
    """Tests against a complete direct Lambda resolver event."""

    def test_full_event(self) -> None:
        event: AppSyncEvent = {
            "identity": None,
            "arguments": {"book": {"id": "1", "title": "Dune"}},
            "source": None,
            "info": {
                "fieldName": "createBook",
                "parentTypeName": "Mutation",
                "variables": {},
                "selectionSetList": ["id", "title"],
            },
            "request": {"headers": {"x-correlation-id": "header-id"}},
            "requestContext": {"requestId": "request-id"},
            "prev": None,
        }

        assert get_field_name(event) == "Mutation.createBook"
        assert get_argument(event, "book") == {"id": "1", "title": "Dune"}
        assert get_correlation_id(event) == "request-id"
