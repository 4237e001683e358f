"""
Test fixtures for Lambda function tests.

Provides common test data and mocked AWS resources.
"""

from typing import Any, Callable, Dict, Generator

import boto3
import pytest
from moto import mock_aws

from src.handlers import create_book, get_book_by_id, list_books, update_book
from src.utils.config import BooksConfig, reset_config
from src.utils.dynamodb import clear_all_overrides

BOOKS_TABLE_NAME = "bookstore-books-ue1-test"

HANDLER_MODULES = (list_books, get_book_by_id, create_book, update_book)


@pytest.fixture(autouse=True)
def reset_handler_state(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Drop cached configuration and tables so each test builds its own."""
    for module in HANDLER_MODULES:
        monkeypatch.setattr(module, "config", None)
    reset_config()
    clear_all_overrides()
    yield
    clear_all_overrides()
    reset_config()


@pytest.fixture
def aws_credentials(monkeypatch: pytest.MonkeyPatch) -> None:
    """Set fake AWS credentials for moto."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SECURITY_TOKEN", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", "us-east-1")
    monkeypatch.delenv("DYNAMODB_ENDPOINT", raising=False)


@pytest.fixture
def books_table(aws_credentials: None) -> Generator[Any, None, None]:
    """Create the mock books table (PK=id)."""
    with mock_aws():
        dynamodb = boto3.resource("dynamodb", region_name="us-east-1")
        table = dynamodb.create_table(
            TableName=BOOKS_TABLE_NAME,
            KeySchema=[
                {"AttributeName": "id", "KeyType": "HASH"},
            ],
            AttributeDefinitions=[
                {"AttributeName": "id", "AttributeType": "S"},
            ],
            BillingMode="PAY_PER_REQUEST",
        )
        yield table


@pytest.fixture
def books_config() -> BooksConfig:
    """Configuration pointing at the mock books table."""
    return BooksConfig(table_name=BOOKS_TABLE_NAME)


@pytest.fixture
def missing_table_config() -> BooksConfig:
    """Configuration as built when BOOKS_TABLE is not set."""
    return BooksConfig(table_name=None)


@pytest.fixture
def configured_handlers(monkeypatch: pytest.MonkeyPatch, books_config: BooksConfig) -> BooksConfig:
    """Point every handler module at the mock books table."""
    for module in HANDLER_MODULES:
        monkeypatch.setattr(module, "config", books_config)
    return books_config


@pytest.fixture
def sample_book(books_table: Any) -> Dict[str, Any]:
    """Create a sample book in DynamoDB."""
    book = {
        "id": "book-1",
        "title": "Dune",
        "completed": False,
        "reviews": ["A classic"],
    }
    books_table.put_item(Item=book)
    return book


@pytest.fixture
def lambda_context() -> Any:
    """Mock Lambda context."""

    class Context:
        function_name = "test-function"
        memory_limit_in_mb = 1024
        invoked_function_arn = "arn:aws:lambda:us-east-1:123456789012:function:test-function"
        aws_request_id = "test-request-id"

    return Context()


@pytest.fixture
def appsync_event() -> Dict[str, Any]:
    """Base AppSync event structure (API-key auth has no identity)."""
    return {
        "arguments": {},
        "identity": None,
        "source": None,
        "requestContext": {
            "requestId": "test-correlation-id",
        },
        "info": {
            "fieldName": "testField",
            "parentTypeName": "Query",
        },
    }


@pytest.fixture
def field_event(appsync_event: Dict[str, Any]) -> Callable[..., Dict[str, Any]]:
    """Factory for AppSync events targeting a specific field."""

    def _make(type_name: str, field_name: str, **arguments: Any) -> Dict[str, Any]:
        return {
            **appsync_event,
            "arguments": arguments,
            "info": {"fieldName": field_name, "parentTypeName": type_name},
        }

    return _make
