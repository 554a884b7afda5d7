"""
Core data models for the retail pricing engine.

Input models (orders, users, payment, shipping and promo descriptors) are
deliberately permissive: every field is optional and line item numbers are
kept as given, so malformed orders reach the validator intact instead of
failing at construction. Every operation also accepts plain mappings with
the same field names; use ``get_field`` to read from either.

Output models (``PricedOrder`` and ``ValidationReport``) serialise with the
camelCase keys callers already consume (``paymentFee``, ``finalTotal``,
``isValid``) when dumped with ``by_alias=True``.
"""

from collections.abc import Mapping
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, computed_field

# ================================
# INPUT MODELS
# ================================


class LineItem(BaseModel):
    """A single order line."""

    model_config = ConfigDict(extra="allow")

    id: str | None = Field(None, description="Item identifier")
    price: Any = Field(None, description="Unit price; must be a positive number")
    quantity: Any = Field(None, description="Units ordered; must be a positive number")


class Order(BaseModel):
    """An order is an ordered sequence of line items."""

    model_config = ConfigDict(extra="allow")

    items: list[LineItem | None] | None = Field(
        None, description="Line items in the order they were added"
    )


class User(BaseModel):
    """The buyer. Tier and state drive discount and tax rates."""

    model_config = ConfigDict(extra="allow")

    id: str | None = None
    email: str | None = None
    address: str | None = None
    type: str | None = Field(None, description="Loyalty tier, e.g. VIP or GOLD")
    state: str | None = Field(None, description="Tax jurisdiction, e.g. CA")


class Payment(BaseModel):
    model_config = ConfigDict(extra="allow")

    method: str | None = Field(None, description="Payment method, e.g. CREDIT_CARD")
    amount: Any = Field(None, description="Amount authorised; must be > 0")


class Shipping(BaseModel):
    model_config = ConfigDict(extra="allow")

    type: str | None = Field(None, description="Shipping type, e.g. EXPRESS")


class Promo(BaseModel):
    model_config = ConfigDict(extra="allow")

    code: str | None = Field(None, description="Promo code, e.g. SAVE10 or FREESHIP")


# ================================
# RESULT MODELS
# ================================


class PricedOrder(BaseModel):
    """Priced breakdown of an order. Every amount is rounded to cents."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    subtotal: Decimal
    discount: Decimal
    tax: Decimal
    shipping: Decimal
    payment_fee: Decimal = Field(..., alias="paymentFee")
    final_total: Decimal = Field(..., ge=0, alias="finalTotal")


class ValidationReport(BaseModel):
    """Every problem found in an order, user and payment, in detection order."""

    model_config = ConfigDict(frozen=True)

    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)

    @computed_field(alias="isValid")
    @property
    def is_valid(self) -> bool:
        return not self.errors


# ================================
# FIELD ACCESS HELPERS
# ================================


def get_field(source: Any, name: str, default: Any = None) -> Any:
    """Read ``name`` from a model instance, a mapping, or any object."""
    if source is None:
        return default
    if isinstance(source, Mapping):
        return source.get(name, default)
    return getattr(source, name, default)


def is_absent(value: Any) -> bool:
    """True for None and other falsy scalars. An empty mapping is still present."""
    return not value and not isinstance(value, Mapping)


def is_number(value: Any) -> bool:
    """True for int, float and Decimal values. Booleans are not numbers here."""
    return isinstance(value, (int, float, Decimal)) and not isinstance(value, bool)


def to_decimal(value: Any) -> Decimal | None:
    """Convert a numeric value to Decimal, or None when it is not a finite number."""
    if not is_number(value):
        return None
    result = value if isinstance(value, Decimal) else Decimal(str(value))
    if not result.is_finite():
        return None
    return result
