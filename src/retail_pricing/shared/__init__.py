"""Shared models, rate tables, validators, and utilities for the pricing engine."""

from retail_pricing.shared.exceptions import (
    OrderInvalidError,
    RateTableError,
    RetailPricingException,
)

__all__ = ["OrderInvalidError", "RateTableError", "RetailPricingException"]
