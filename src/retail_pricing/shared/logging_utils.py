"""Structured logging utilities for order pricing and validation."""
import json
import logging
import uuid
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import UTC, datetime
from typing import Any, Iterator, Optional


class StructuredLogger:
    """Structured logger that tags every entry with the current order correlation ID.

    The ID lives in a context variable, so threads and asyncio tasks sharing
    one logger each see only their own ID.
    """

    def __init__(self, logger_name: str):
        self.logger = logging.getLogger(logger_name)
        self._correlation: ContextVar[Optional[str]] = ContextVar(
            f"correlation_id:{logger_name}", default=None
        )

    @property
    def _correlation_id(self) -> Optional[str]:
        return self._correlation.get()

    def set_correlation_id(self, correlation_id: str):
        """Set correlation ID for current context."""
        self._correlation.set(correlation_id)

    def clear_correlation_id(self):
        """Clear correlation ID."""
        self._correlation.set(None)

    def generate_correlation_id(self) -> str:
        """Generate new correlation ID."""
        return f"ORD_{uuid.uuid4().hex[:12]}"

    @contextmanager
    def correlated(self, correlation_id: str | None = None) -> Iterator[str]:
        """Tag log entries inside the block with one correlation ID."""
        token = self._correlation.set(
            correlation_id or self.generate_correlation_id()
        )
        try:
            yield self._correlation.get()
        finally:
            self._correlation.reset(token)

    def _format_message(self, level: str, message: str, **kwargs: Any) -> dict:
        log_entry = {
            "timestamp": datetime.now(UTC).isoformat(),
            "level": level,
            "message": message,
            "correlation_id": self._correlation_id or "none",
        }

        if kwargs:
            log_entry["context"] = kwargs

        return log_entry

    def _emit(self, level: int, level_name: str, message: str, **kwargs: Any):
        if not self.logger.isEnabledFor(level):
            return
        entry = self._format_message(level_name, message, **kwargs)
        # Decimal amounts are written as their exact string form
        self.logger.log(level, json.dumps(entry, default=str))

    def info(self, message: str, **kwargs):
        """Log info with structured data."""
        self._emit(logging.INFO, "INFO", message, **kwargs)

    def warning(self, message: str, **kwargs):
        """Log warning with structured data."""
        self._emit(logging.WARNING, "WARNING", message, **kwargs)

    def error(self, message: str, **kwargs):
        """Log error with structured data."""
        self._emit(logging.ERROR, "ERROR", message, **kwargs)

    def debug(self, message: str, **kwargs):
        """Log debug with structured data."""
        self._emit(logging.DEBUG, "DEBUG", message, **kwargs)


def get_structured_logger(name: str) -> StructuredLogger:
    """Get or create structured logger."""
    return StructuredLogger(name)
