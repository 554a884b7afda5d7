"""
Order pricing calculators.

Each calculator is a pure function over the order inputs and a set of rate
tables. They never raise on unknown tier, promo, shipping, state or payment
values; those price as a zero-effect rate so a priced result is always
produced for descriptive metadata the tables do not know about.

- Subtotal = sum of price * quantity over items with price > 0 and quantity > 0
- Discount = subtotal * tier rate + subtotal * promo rate (not clamped)
- Shipping = flat cost per type, zero with the free shipping promo
- Tax, payment fee = base amount * rate, where base = subtotal - discount
"""

from decimal import ROUND_HALF_UP, Context, Decimal
from typing import Any

from ..config.models import DEFAULT_RATES, RateTablesConfig
from ..shared.models import get_field, to_decimal

CENT = Decimal("0.01")
ZERO = Decimal("0")


def round_money(amount: Decimal) -> Decimal:
    """Round to cents, halves away from zero."""
    # Enough digits for the integer part plus the two cents places
    context = Context(prec=max(28, amount.adjusted() + 3))
    return amount.quantize(CENT, rounding=ROUND_HALF_UP, context=context)


def _tables(rates: RateTablesConfig | None) -> RateTablesConfig:
    return DEFAULT_RATES if rates is None else rates


def _amount(value: Any) -> Decimal:
    # Callers may hand in plain ints or floats
    amount = to_decimal(value)
    return ZERO if amount is None else amount


def calculate_subtotal(order: Any) -> Decimal:
    """
    Calculate the pre-tax subtotal of an order.

    Items with a missing, non-numeric or non-positive price or quantity are
    skipped here; reporting them is the validator's job.

    Args:
        order: Order model or mapping with an ``items`` sequence

    Returns:
        Unrounded subtotal, ``0`` for a missing or empty order
    """
    items = get_field(order, "items")
    if not items:
        return ZERO

    subtotal = ZERO
    for item in items:
        if not item:
            continue
        price = to_decimal(get_field(item, "price"))
        quantity = to_decimal(get_field(item, "quantity"))
        if price is None or quantity is None:
            continue
        if price > 0 and quantity > 0:
            subtotal += price * quantity
    return subtotal


def calculate_discount(
    subtotal: Decimal,
    user: Any,
    promo: Any,
    rates: RateTablesConfig | None = None,
) -> Decimal:
    """
    Calculate the total discount from the user's tier and the promo code.

    The tier and promo amounts are added together and may exceed the
    subtotal; clamping happens only on the final total.

    Args:
        subtotal: Order subtotal
        user: User model or mapping; ``type`` is the tier
        promo: Promo model or mapping; ``code`` is the promo code

    Returns:
        Unrounded discount amount
    """
    subtotal = _amount(subtotal)
    if subtotal <= 0:
        return ZERO
    tables = _tables(rates)

    discount = subtotal * tables.user_discount_rate(get_field(user, "type"))

    promo_rate = tables.promo_discount_rate(get_field(promo, "code"))
    # FREESHIP and unknown codes map to zero and add nothing
    if promo_rate > 0:
        discount += subtotal * promo_rate

    return discount


def calculate_shipping(
    shipping: Any, promo: Any, rates: RateTablesConfig | None = None
) -> Decimal:
    """Flat shipping cost for the shipping type; the free shipping promo wins."""
    tables = _tables(rates)

    if tables.is_free_shipping(get_field(promo, "code")):
        return ZERO

    return tables.shipping_cost(get_field(shipping, "type"))


def calculate_tax(
    base_amount: Decimal, user: Any, rates: RateTablesConfig | None = None
) -> Decimal:
    """
    Calculate sales tax on the post-discount base amount.

    No tax is computed for a non-positive base or when the user has no
    state. Known states use their own rate (FL is 0%); any other state pays
    the default rate.
    """
    base_amount = _amount(base_amount)
    if base_amount <= 0:
        return ZERO

    rate = _tables(rates).tax_rate(get_field(user, "state"))
    if rate is None:
        return ZERO

    return base_amount * rate


def calculate_payment_fee(
    base_amount: Decimal, payment: Any, rates: RateTablesConfig | None = None
) -> Decimal:
    """Processing fee on the post-discount base amount for the payment method."""
    base_amount = _amount(base_amount)
    if base_amount <= 0:
        return ZERO

    method = get_field(payment, "method")
    if not method:
        return ZERO

    return base_amount * _tables(rates).payment_fee_rate(method)
