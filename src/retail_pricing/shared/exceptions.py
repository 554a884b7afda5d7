"""
Custom exceptions for the retail pricing engine.

This module contains specialized exception classes for handling
fail-fast order errors and rate table loading problems.
"""

from pathlib import Path

ORDER_INVALID = "ORDER_INVALID"


class RetailPricingException(Exception):
    """Base exception for all retail pricing errors."""

    pass


class OrderInvalidError(RetailPricingException):
    """Exception raised when an order cannot be priced at all.

    Carries the failure ``kind`` (always ``ORDER_INVALID``), the human-readable
    message and a short machine ``reason`` used for metrics labels.
    """

    kind = ORDER_INVALID

    def __init__(self, message: str, reason: str = "invalid"):
        self.message = message
        self.reason = reason
        super().__init__(f"{self.kind}: {message}")


class RateTableError(RetailPricingException):
    """Exception raised when a rate table file cannot be loaded."""

    def __init__(
        self,
        message: str,
        file_path: Path | None = None,
        original_error: Exception | None = None,
    ):
        self.file_path = file_path
        self.original_error = original_error

        if file_path:
            message = f"Error loading rate tables from '{file_path}': {message}"

        if original_error:
            message = f"{message} (Original error: {original_error})"

        super().__init__(message)
