"""
Retail Order Pricing

Prices retail orders and validates them:
- Subtotal, tier and promo discounts, shipping, sales tax and payment fees
- Fail-fast rejection of unusable orders (ORDER_INVALID)
- Accumulated validation reports for orders, users and payments
"""

from retail_pricing.pricing import OrderProcessor, process_order
from retail_pricing.shared.validators import OrderValidator, validate_order

__version__ = "1.0.0"
__author__ = "Retail Pricing"

__all__ = ["OrderProcessor", "OrderValidator", "process_order", "validate_order"]
