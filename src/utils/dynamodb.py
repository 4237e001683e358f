"""
Centralized DynamoDB table access utilities.

Provides a cached books table accessor with lazy initialization
and test monkeypatch support.
"""

import os
from typing import TYPE_CHECKING, Any, Optional

import boto3
from botocore.exceptions import ClientError

from .errors import AppError, ErrorCode

if TYPE_CHECKING:
    from mypy_boto3_dynamodb import DynamoDBServiceResource
    from mypy_boto3_dynamodb.service_resource import Table


# Module-level cache for test overrides
_table_overrides: dict[str, Optional["Table"]] = {}

# Warm-process cache: table name -> Table
_table_cache: dict[str, "Table"] = {}


def _get_dynamodb(endpoint_url: Optional[str] = None) -> "DynamoDBServiceResource":
    """Get DynamoDB resource with optional endpoint override for LocalStack."""
    return boto3.resource("dynamodb", endpoint_url=endpoint_url or os.getenv("DYNAMODB_ENDPOINT"))


def get_books_table(table_name: str, endpoint_url: Optional[str] = None) -> "Table":
    """Get the books table, reusing the instance across warm invocations.

    Args:
        table_name: DynamoDB table name from the handler configuration
        endpoint_url: Optional endpoint override

    Returns:
        boto3 Table resource (or a test override)
    """
    if override := _table_overrides.get("books"):
        return override
    table = _table_cache.get(table_name)
    if table is None:
        table = _get_dynamodb(endpoint_url).Table(table_name)
        _table_cache[table_name] = table
    return table


def store_error(operation: str, table_name: str, error: Exception) -> AppError:
    """Wrap a failed store call as a DATABASE_ERROR chained to the original exception."""
    details: dict[str, Any] = {"operation": operation, "table": table_name, "errorMessage": str(error)}
    if isinstance(error, ClientError):
        aws_error = error.response.get("Error", {})
        details["awsErrorCode"] = aws_error.get("Code")
        details["awsErrorMessage"] = aws_error.get("Message")
    else:
        details["errorType"] = type(error).__name__
    app_error = AppError(ErrorCode.DATABASE_ERROR, f"DynamoDB {operation} failed", details)
    app_error.__cause__ = error
    return app_error


# Test utilities
def override_table(table_key: str, table: Optional[Any]) -> None:
    """Override a table for testing. Set to None to clear override."""
    _table_overrides[table_key] = table


def clear_all_overrides() -> None:
    """Clear all table overrides and cached tables (call in test teardown)."""
    _table_overrides.clear()
    _table_cache.clear()
