"""
Default rate tables for order pricing.

Every table maps an uppercase category key to a Decimal rate (or flat cost
for shipping). Lookups uppercase the incoming key; unknown keys fall back to
a zero-effect rate, except tax where any other non-empty state pays
``DEFAULT_TAX_RATE``.
"""

from decimal import Decimal
from enum import Enum
from types import MappingProxyType


class UserTier(str, Enum):
    """Loyalty tiers with a discount rate."""

    VIP = "VIP"
    GOLD = "GOLD"
    SILVER = "SILVER"
    BRONZE = "BRONZE"
    REGULAR = "REGULAR"


class PromoCode(str, Enum):
    """Promo codes known to the default tables."""

    SAVE10 = "SAVE10"
    SAVE20 = "SAVE20"
    SAVE30 = "SAVE30"
    SAVE50 = "SAVE50"
    BOGO = "BOGO"
    FREESHIP = "FREESHIP"  # no discount, zeroes shipping


class ShippingType(str, Enum):
    EXPRESS = "EXPRESS"
    STANDARD = "STANDARD"
    ECONOMY = "ECONOMY"
    PICKUP = "PICKUP"


class PaymentMethod(str, Enum):
    CREDIT_CARD = "CREDIT_CARD"
    DEBIT_CARD = "DEBIT_CARD"
    PAYPAL = "PAYPAL"
    BANK_TRANSFER = "BANK_TRANSFER"
    CRYPTO = "CRYPTO"


USER_DISCOUNTS = MappingProxyType(
    {
        UserTier.VIP.value: Decimal("0.15"),
        UserTier.GOLD.value: Decimal("0.10"),
        UserTier.SILVER.value: Decimal("0.05"),
        UserTier.BRONZE.value: Decimal("0.02"),
        UserTier.REGULAR.value: Decimal("0"),
    }
)

PROMO_DISCOUNTS = MappingProxyType(
    {
        PromoCode.SAVE10.value: Decimal("0.10"),
        PromoCode.SAVE20.value: Decimal("0.20"),
        PromoCode.SAVE30.value: Decimal("0.30"),
        PromoCode.SAVE50.value: Decimal("0.50"),
        PromoCode.BOGO.value: Decimal("0.50"),
    }
)

SHIPPING_COSTS = MappingProxyType(
    {
        ShippingType.EXPRESS.value: Decimal("25"),
        ShippingType.STANDARD.value: Decimal("15"),
        ShippingType.ECONOMY.value: Decimal("8"),
        ShippingType.PICKUP.value: Decimal("0"),
    }
)

TAX_RATES = MappingProxyType(
    {
        "CA": Decimal("0.0875"),
        "NY": Decimal("0.08"),
        "TX": Decimal("0.0625"),
        "FL": Decimal("0"),  # no state sales tax
    }
)

DEFAULT_TAX_RATE = Decimal("0.05")

PAYMENT_FEES = MappingProxyType(
    {
        PaymentMethod.CREDIT_CARD.value: Decimal("0.029"),
        PaymentMethod.DEBIT_CARD.value: Decimal("0.015"),
        PaymentMethod.PAYPAL.value: Decimal("0.034"),
        PaymentMethod.BANK_TRANSFER.value: Decimal("0"),
        PaymentMethod.CRYPTO.value: Decimal("0.01"),
    }
)

FREE_SHIPPING_CODE = PromoCode.FREESHIP.value


def normalize_key(value) -> str:
    """Uppercase a lookup key the same way for every table."""
    return str(value).upper()
