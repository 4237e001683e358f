"""Unit tests for the Mutation.updateBook resolver."""

from decimal import Decimal
from typing import Any, Callable, Dict
from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError

from src.handlers import update_book as update_book_module
from src.handlers.update_book import build_patch, patch_book, update_book
from src.utils.config import BooksConfig
from src.utils.dynamodb import override_table
from src.utils.errors import Outcome


class TestUpdateBook:
    """Tests for update_book handler."""

    def test_updates_single_attribute_and_returns_full_item(
        self,
        sample_book: Dict[str, Any],
        books_table: Any,
        configured_handlers: BooksConfig,
        field_event: Callable[..., Dict[str, Any]],
        lambda_context: Any,
    ) -> None:
        event = field_event("Mutation", "updateBook", book={"id": "book-1", "rating": 5})

        result = update_book(event, lambda_context)

        assert result == {
            "id": "book-1",
            "title": "Dune",
            "completed": False,
            "rating": 5,
            "reviews": ["A classic"],
        }
        assert books_table.get_item(Key={"id": "book-1"})["Item"]["rating"] == Decimal("5")

    def test_updates_multiple_attributes(
        self,
        sample_book: Dict[str, Any],
        configured_handlers: BooksConfig,
        field_event: Callable[..., Dict[str, Any]],
        lambda_context: Any,
    ) -> None:
        book = {"id": "book-1", "title": "Dune (2nd ed.)", "completed": True, "rating": 4.5}

        result = update_book(field_event("Mutation", "updateBook", book=book), lambda_context)

        assert result is not None
        assert result["title"] == "Dune (2nd ed.)"
        assert result["completed"] is True
        assert result["rating"] == 4.5
        assert result["reviews"] == ["A classic"]

    def test_null_attributes_left_untouched(
        self,
        sample_book: Dict[str, Any],
        configured_handlers: BooksConfig,
        field_event: Callable[..., Dict[str, Any]],
        lambda_context: Any,
    ) -> None:
        book = {"id": "book-1", "title": None, "rating": 2}

        result = update_book(field_event("Mutation", "updateBook", book=book), lambda_context)

        assert result is not None
        assert result["title"] == "Dune"
        assert result["rating"] == 2

    def test_id_only_returns_current_item(
        self,
        sample_book: Dict[str, Any],
        configured_handlers: BooksConfig,
        field_event: Callable[..., Dict[str, Any]],
        lambda_context: Any,
    ) -> None:
        result = update_book(field_event("Mutation", "updateBook", book={"id": "book-1"}), lambda_context)

        assert result == {
            "id": "book-1",
            "title": "Dune",
            "completed": False,
            "reviews": ["A classic"],
        }

    def test_id_only_for_unknown_book_returns_none(
        self,
        books_table: Any,
        configured_handlers: BooksConfig,
        field_event: Callable[..., Dict[str, Any]],
        lambda_context: Any,
    ) -> None:
        result = update_book(field_event("Mutation", "updateBook", book={"id": "ghost"}), lambda_context)

        assert result is None
        assert "Item" not in books_table.get_item(Key={"id": "ghost"})

    def test_unknown_id_with_attributes_creates_partial_item(
        self,
        books_table: Any,
        configured_handlers: BooksConfig,
        field_event: Callable[..., Dict[str, Any]],
        lambda_context: Any,
    ) -> None:
        event = field_event("Mutation", "updateBook", book={"id": "new", "rating": 3})

        result = update_book(event, lambda_context)

        assert result == {"id": "new", "rating": 3}
        assert books_table.get_item(Key={"id": "new"})["Item"] == {"id": "new", "rating": Decimal("3")}

    def test_missing_table_returns_none_without_store_call(
        self,
        missing_table_config: BooksConfig,
        field_event: Callable[..., Dict[str, Any]],
        lambda_context: Any,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        table = MagicMock()
        override_table("books", table)
        monkeypatch.setattr(update_book_module, "config", missing_table_config)

        event = field_event("Mutation", "updateBook", book={"id": "book-1", "rating": 5})

        assert update_book(event, lambda_context) is None
        table.update_item.assert_not_called()
        table.get_item.assert_not_called()

    def test_store_failure_returns_none(
        self,
        configured_handlers: BooksConfig,
        field_event: Callable[..., Dict[str, Any]],
        lambda_context: Any,
    ) -> None:
        table = MagicMock()
        table.update_item.side_effect = ClientError(
            {"Error": {"Code": "InternalServerError", "Message": "Internal error"}},
            "UpdateItem",
        )
        override_table("books", table)

        event = field_event("Mutation", "updateBook", book={"id": "book-1", "rating": 5})

        assert update_book(event, lambda_context) is None


class TestPatchBook:
    """Tests for the patch_book operation."""

    def test_update_item_parameters(self, books_config: BooksConfig) -> None:
        table = MagicMock()
        table.update_item.return_value = {"Attributes": {"id": "1", "title": "Dune", "rating": Decimal("4.5")}}
        override_table("books", table)

        result = patch_book(books_config, {"id": "1", "title": "Dune", "rating": 4.5})

        assert result.outcome is Outcome.OK
        assert result.value == {"id": "1", "title": "Dune", "rating": 4.5}
        table.update_item.assert_called_once_with(
            Key={"id": "1"},
            ReturnValues="ALL_NEW",
            UpdateExpression="SET #title0 = :title0, #rating1 = :rating1",
            ExpressionAttributeNames={"#title0": "title", "#rating1": "rating"},
            ExpressionAttributeValues={":title0": "Dune", ":rating1": Decimal("4.5")},
        )

    def test_id_only_skips_update_item(self, books_config: BooksConfig) -> None:
        table = MagicMock()
        table.get_item.return_value = {"Item": {"id": "1", "title": "Dune"}}
        override_table("books", table)

        result = patch_book(books_config, {"id": "1"})

        assert result.outcome is Outcome.OK
        assert result.value == {"id": "1", "title": "Dune"}
        table.update_item.assert_not_called()
        table.get_item.assert_called_once_with(Key={"id": "1"})

    def test_id_only_read_failure_is_a_fault(self, books_config: BooksConfig) -> None:
        table = MagicMock()
        table.get_item.side_effect = RuntimeError("boom")
        override_table("books", table)

        result = patch_book(books_config, {"id": "1"})

        assert result.outcome is Outcome.FAULT

    def test_missing_id_is_invalid(self, books_config: BooksConfig) -> None:
        result = patch_book(books_config, {"rating": 5})

        assert result.outcome is Outcome.INVALID_INPUT


class TestBuildPatch:
    """Tests for build_patch."""

    def test_only_updatable_attributes_collected(self) -> None:
        patch = build_patch({"id": "1", "title": "Dune", "reviews": ["x"], "completed": False})

        assert patch.attribute_names == ["title", "completed"]

    def test_empty_when_only_id(self) -> None:
        assert not build_patch({"id": "1"})
