"""Order pricing calculators and the pricing orchestrator."""

from .calculators import (
    calculate_discount,
    calculate_payment_fee,
    calculate_shipping,
    calculate_subtotal,
    calculate_tax,
    round_money,
)
from .processor import OrderProcessor, process_order

__all__ = [
    "OrderProcessor",
    "process_order",
    "calculate_subtotal",
    "calculate_discount",
    "calculate_shipping",
    "calculate_tax",
    "calculate_payment_fee",
    "round_money",
]
