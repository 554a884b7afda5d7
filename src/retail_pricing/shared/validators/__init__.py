"""
Validators for orders, users and payments.

Validation is independent of pricing: it never raises on malformed input
and reports every problem it finds.
"""

from .order import InventoryChecker, OrderValidator, validate_order

__all__ = [
    "InventoryChecker",
    "OrderValidator",
    "validate_order",
]
