"""
Handler configuration read from the Lambda environment.

The configuration is built once per warm process and passed into every
book operation, so a missing table name is a value tests can construct
rather than an environment lookup buried in the handler.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .errors import AppError, ErrorCode

BOOKS_TABLE_ENV = "BOOKS_TABLE"
GET_BOOK_DELAY_ENV = "GET_BOOK_DELAY_MS"
DYNAMODB_ENDPOINT_ENV = "DYNAMODB_ENDPOINT"


@dataclass(frozen=True)
class BooksConfig:
    """Settings shared by the book resolvers."""

    table_name: Optional[str] = None
    get_delay_ms: int = 0
    endpoint_url: Optional[str] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "BooksConfig":
        """
        Build the configuration from environment variables.

        Args:
            environ: Mapping to read from (defaults to ``os.environ``)

        Returns:
            BooksConfig; ``table_name`` is None when BOOKS_TABLE is unset or blank
        """
        env = os.environ if environ is None else environ

        table_name = (env.get(BOOKS_TABLE_ENV) or "").strip() or None

        raw_delay = env.get(GET_BOOK_DELAY_ENV, "0") or "0"
        try:
            get_delay_ms = max(0, int(raw_delay))
        except ValueError:
            get_delay_ms = 0

        return cls(
            table_name=table_name,
            get_delay_ms=get_delay_ms,
            endpoint_url=env.get(DYNAMODB_ENDPOINT_ENV) or None,
        )

    @property
    def is_configured(self) -> bool:
        return self.table_name is not None

    def require_table_name(self) -> str:
        """
        Return the books table name.

        Raises:
            AppError: MISCONFIGURED if BOOKS_TABLE was not specified
        """
        if self.table_name is None:
            raise AppError(
                ErrorCode.MISCONFIGURED,
                f"{BOOKS_TABLE_ENV} was not specified",
                {"variable": BOOKS_TABLE_ENV},
            )
        return self.table_name


# Warm-process cache for get_config
_config: Optional[BooksConfig] = None


def get_config() -> BooksConfig:
    """Return the process-wide configuration, reading the environment once."""
    global _config
    if _config is None:
        _config = BooksConfig.from_env()
    return _config


def reset_config() -> None:
    """Forget the cached configuration (call in test teardown)."""
    global _config
    _config = None
