"""Lambda function definitions for the bookstore stack.

This module creates one Lambda function per GraphQL field:
- listBooks and getBookById (read-only access to the books table)
- createBook and updateBook (read-write access to the books table)

All functions share one code asset (the src/ directory) and one set of
common properties; each receives the table name through BOOKS_TABLE.
"""

import os
from dataclasses import dataclass
from typing import Any

from aws_cdk import Duration
from aws_cdk import aws_dynamodb as dynamodb
from aws_cdk import aws_lambda as lambda_
from constructs import Construct

# Use only the src directory for Lambda code (not the entire repo)
LAMBDA_CODE_PATH = os.path.join(os.path.dirname(__file__), "..", "..", "src")


@dataclass(frozen=True)
class BookFunctionSpec:
    """How one resolver function is built and what it may do to the table."""

    key: str
    construct_id: str
    name: str
    handler: str
    read_only: bool


BOOK_FUNCTIONS: tuple[BookFunctionSpec, ...] = (
    BookFunctionSpec("list_books", "ListBooksFn", "bookstore-list-books", "handlers.list_books.list_books", True),
    BookFunctionSpec(
        "get_book_by_id", "GetBookByIdFn", "bookstore-get-book-by-id", "handlers.get_book_by_id.get_book_by_id", True
    ),
    BookFunctionSpec("create_book", "CreateBookFn", "bookstore-create-book", "handlers.create_book.create_book", False),
    BookFunctionSpec("update_book", "UpdateBookFn", "bookstore-update-book", "handlers.update_book.update_book", False),
)


def create_lambda_functions(
    scope: Construct,
    rn: Any,  # Resource naming function
    books_table: dynamodb.ITable,
    log_level: str = "INFO",
    get_book_delay_ms: int = 0,
) -> dict[str, lambda_.Function]:
    """Create the book resolver Lambda functions.

    Args:
        scope: CDK construct scope
        rn: Resource naming function (name -> formatted name)
        books_table: Books DynamoDB table
        log_level: LOG_LEVEL for the structured logger
        get_book_delay_ms: Artificial latency injected before getBookById lookups

    Returns:
        Dictionary of function key to Lambda function
    """
    # Common Lambda environment variables
    lambda_env = {
        "BOOKS_TABLE": books_table.table_name,
        "LOG_LEVEL": log_level,
    }

    lambda_code = lambda_.Code.from_asset(
        LAMBDA_CODE_PATH,
        exclude=[
            "__pycache__",
            "*.pyc",
            ".pytest_cache",
        ],
    )

    functions: dict[str, lambda_.Function] = {}
    for spec in BOOK_FUNCTIONS:
        environment = dict(lambda_env)
        if spec.key == "get_book_by_id" and get_book_delay_ms:
            environment["GET_BOOK_DELAY_MS"] = str(get_book_delay_ms)

        fn = lambda_.Function(
            scope,
            spec.construct_id,
            function_name=rn(spec.name),
            runtime=lambda_.Runtime.PYTHON_3_13,
            architecture=lambda_.Architecture.ARM_64,
            handler=spec.handler,
            code=lambda_code,
            timeout=Duration.seconds(10),
            memory_size=1024,
            environment=environment,
        )

        # Least privilege: queries only read, mutations read and write
        if spec.read_only:
            books_table.grant_read_data(fn)
        else:
            books_table.grant_read_write_data(fn)

        functions[spec.key] = fn

    return functions
