"""
Order pricing orchestrator.

Composes the calculators into one ``PricedOrder``. Structural problems with
the order abort immediately with ``OrderInvalidError``; everything else
(unknown tiers, codes, states, methods) prices with a zero-effect rate.
"""

import time
from typing import Any

from ..config.models import RateTablesConfig
from ..shared import metrics
from ..shared.exceptions import OrderInvalidError
from ..shared.logging_utils import get_structured_logger
from ..shared.models import PricedOrder, ValidationReport, get_field, is_absent
from ..shared.validators.order import InventoryChecker, validate_order
from .calculators import (
    ZERO,
    calculate_discount,
    calculate_payment_fee,
    calculate_shipping,
    calculate_subtotal,
    calculate_tax,
    round_money,
)

logger = get_structured_logger(__name__)


def _check_order_shape(order: Any) -> None:
    if is_absent(order):
        raise OrderInvalidError("Pedido não informado.", reason="missing_order")

    items = get_field(order, "items")
    if items is None:
        raise OrderInvalidError(
            "Itens do pedido não informados.", reason="missing_items"
        )
    if len(items) == 0:
        raise OrderInvalidError("Pedido sem itens.", reason="empty_items")


def _price(
    order: Any,
    user: Any,
    payment: Any,
    shipping: Any,
    promo: Any,
    rates: RateTablesConfig | None,
) -> PricedOrder:
    _check_order_shape(order)

    subtotal = calculate_subtotal(order)
    if subtotal <= 0:
        raise OrderInvalidError(
            "Subtotal deve ser positivo.", reason="non_positive_subtotal"
        )

    discount = calculate_discount(subtotal, user, promo, rates)

    # Not clamped: a discount above the subtotal leaves a negative base
    base_amount = subtotal - discount

    tax = calculate_tax(base_amount, user, rates)
    payment_fee = calculate_payment_fee(base_amount, payment, rates)
    shipping_cost = calculate_shipping(shipping, promo, rates)

    final_total = base_amount + tax + shipping_cost + payment_fee
    if final_total < 0:
        final_total = ZERO

    return PricedOrder(
        subtotal=round_money(subtotal),
        discount=round_money(discount),
        tax=round_money(tax),
        shipping=round_money(shipping_cost),
        payment_fee=round_money(payment_fee),
        final_total=round_money(final_total),
    )


def process_order(
    order: Any,
    user: Any = None,
    payment: Any = None,
    shipping: Any = None,
    promo: Any = None,
    rates: RateTablesConfig | None = None,
) -> PricedOrder:
    """
    Price a complete order.

    Args:
        order: Order model or mapping with ``items``
        user: User model or mapping (tier and state)
        payment: Payment model or mapping (method)
        shipping: Shipping model or mapping (type)
        promo: Promo model or mapping (code)
        rates: Rate tables to use instead of the built-in defaults

    Returns:
        PricedOrder with every amount rounded to cents

    Raises:
        OrderInvalidError: If the order, its items, or its subtotal is unusable
    """
    started = time.perf_counter()
    with logger.correlated():
        try:
            priced = _price(order, user, payment, shipping, promo, rates)
        except OrderInvalidError as e:
            metrics.record_pricing_failure(e.reason)
            logger.warning("Order rejected", kind=e.kind, reason=e.reason)
            raise

        metrics.record_order_priced(time.perf_counter() - started)
        logger.info(
            "Order priced",
            subtotal=priced.subtotal,
            discount=priced.discount,
            final_total=priced.final_total,
        )
    return priced


class OrderProcessor:
    """Entry point bundling pricing and validation over one set of rate tables."""

    def __init__(self, rates: RateTablesConfig | None = None):
        self.rates = rates

    def process_order(
        self,
        order: Any,
        user: Any = None,
        payment: Any = None,
        shipping: Any = None,
        promo: Any = None,
    ) -> PricedOrder:
        """Price an order. See ``process_order``."""
        return process_order(order, user, payment, shipping, promo, rates=self.rates)

    def validate_and_process_order(
        self,
        order: Any,
        user: Any,
        payment: Any,
        shipping: Any,
        promo: Any = None,
        inventory: InventoryChecker | None = None,
    ) -> ValidationReport:
        """
        Validate an order and return the report.

        Kept for callers of the older combined entry point; the promo is
        accepted but plays no part in validation.
        """
        return validate_order(order, user, payment, shipping, inventory)
