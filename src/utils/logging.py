"""
Logging utilities for Lambda functions.

Provides structured JSON logging with correlation IDs for tracing requests.
"""

import json
import logging
import os
import traceback
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, Mapping, Optional

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}


class StructuredLogger:
    """
    JSON logger for Lambda functions with correlation ID support.

    Accepts context either as keyword fields or through the stdlib-style
    ``extra`` mapping, so both call styles emit the same flat JSON record.

    Example:
        logger = StructuredLogger(__name__)
        logger.info("Fetching book", bookId="42")
        logger.error("Scan failed", extra={"table": "books"}, exc_info=True)
    """

    def __init__(self, name: str, correlation_id: Optional[str] = None) -> None:
        self.logger = logging.getLogger(name)
        self.logger.setLevel(os.getenv("LOG_LEVEL", "INFO"))
        self.correlation_id = correlation_id or str(uuid.uuid4())

    def bind(self, correlation_id: str) -> None:
        """Attach a new correlation ID (called once per invocation)."""
        self.correlation_id = correlation_id

    def _log(
        self,
        level: str,
        message: str,
        extra: Optional[Dict[str, Any]] = None,
        exc_info: bool = False,
        **kwargs: Any,
    ) -> None:
        """Internal method to emit structured JSON logs."""
        if not self.logger.isEnabledFor(_LEVELS[level]):
            return

        # Context fields never replace the record's own fields
        log_entry: Dict[str, Any] = {
            **(extra or {}),
            **kwargs,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": level,
            "logger": self.logger.name,
            "message": message,
            "correlationId": self.correlation_id,
        }
        if exc_info:
            log_entry["exception"] = traceback.format_exc()

        # Remove None values
        log_entry = {k: v for k, v in log_entry.items() if v is not None}

        print(json.dumps(log_entry, default=str))

    def info(self, message: str, **kwargs: Any) -> None:
        """Log info level message."""
        self._log("INFO", message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        """Log warning level message."""
        self._log("WARNING", message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        """Log error level message."""
        self._log("ERROR", message, **kwargs)

    def debug(self, message: str, **kwargs: Any) -> None:
        """Log debug level message."""
        self._log("DEBUG", message, **kwargs)


def get_logger(name: str) -> StructuredLogger:
    """Create a structured logger for a handler module."""
    return StructuredLogger(name)


def get_correlation_id(event: Mapping[str, Any]) -> str:
    """
    Extract or generate correlation ID from Lambda event.

    Checks for correlation ID in:
    1. event['requestContext']['requestId'] (AppSync)
    2. event['request']['headers']['x-correlation-id']
    3. Generates new UUID if not found
    """
    # Try AppSync request context
    if "requestContext" in event and "requestId" in (event.get("requestContext") or {}):
        return str(event["requestContext"]["requestId"])

    # Try custom header
    headers = (event.get("request") or {}).get("headers") or {}
    if "x-correlation-id" in headers:
        return str(headers["x-correlation-id"])

    # Generate new ID
    return str(uuid.uuid4())
