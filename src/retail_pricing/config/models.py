"""
Configuration models for the retail pricing engine.

These models define the structure and validation for the pricing.json file.
Every rate table defaults to the values in ``retail_pricing.shared.rate_tables``.
"""

import json
import logging
from collections.abc import Mapping
from decimal import Decimal
from pathlib import Path
from types import MappingProxyType
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from ..shared.exceptions import RateTableError
from ..shared.rate_tables import (
    DEFAULT_TAX_RATE,
    FREE_SHIPPING_CODE,
    PAYMENT_FEES,
    PROMO_DISCOUNTS,
    SHIPPING_COSTS,
    TAX_RATES,
    USER_DISCOUNTS,
    normalize_key,
)

Rate = Annotated[Decimal, Field(ge=0, le=1)]
Cost = Annotated[Decimal, Field(ge=0)]

_ZERO = Decimal("0")


class RateTablesConfig(BaseModel):
    """Lookup tables mapping category keys to rates or flat costs."""

    model_config = ConfigDict(frozen=True)

    user_discounts: dict[str, Rate] = Field(
        default_factory=lambda: USER_DISCOUNTS,
        description="Discount rate per user tier",
    )
    promo_discounts: dict[str, Rate] = Field(
        default_factory=lambda: PROMO_DISCOUNTS,
        description="Additive discount rate per promo code",
    )
    shipping_costs: dict[str, Cost] = Field(
        default_factory=lambda: SHIPPING_COSTS,
        description="Flat shipping cost per shipping type",
    )
    tax_rates: dict[str, Rate] = Field(
        default_factory=lambda: TAX_RATES,
        description="Sales tax rate per state",
    )
    default_tax_rate: Rate = Field(
        DEFAULT_TAX_RATE,
        description="Tax rate for any state missing from tax_rates",
    )
    payment_fees: dict[str, Rate] = Field(
        default_factory=lambda: PAYMENT_FEES,
        description="Processing fee rate per payment method",
    )
    free_shipping_code: str = Field(
        FREE_SHIPPING_CODE,
        min_length=1,
        description="Promo code that zeroes shipping",
    )

    @field_validator(
        "user_discounts",
        "promo_discounts",
        "shipping_costs",
        "tax_rates",
        "payment_fees",
    )
    @classmethod
    def uppercase_keys(cls, v: dict[str, Decimal]) -> Mapping[str, Decimal]:
        """Store every table read-only, keys uppercased for case-insensitive lookups."""
        return MappingProxyType({normalize_key(key): value for key, value in v.items()})

    @field_serializer(
        "user_discounts",
        "promo_discounts",
        "shipping_costs",
        "tax_rates",
        "payment_fees",
    )
    def serialize_table(self, v: Mapping[str, Decimal]) -> dict[str, Decimal]:
        return dict(v)

    @field_validator("free_shipping_code")
    @classmethod
    def uppercase_free_shipping_code(cls, v: str) -> str:
        return normalize_key(v)

    def user_discount_rate(self, tier) -> Decimal:
        if not tier:
            return _ZERO
        return self.user_discounts.get(normalize_key(tier), _ZERO)

    def promo_discount_rate(self, code) -> Decimal:
        if not code:
            return _ZERO
        return self.promo_discounts.get(normalize_key(code), _ZERO)

    def is_free_shipping(self, code) -> bool:
        return bool(code) and normalize_key(code) == self.free_shipping_code

    def shipping_cost(self, shipping_type) -> Decimal:
        if not shipping_type:
            return _ZERO
        return self.shipping_costs.get(normalize_key(shipping_type), _ZERO)

    def tax_rate(self, state) -> Decimal | None:
        """Rate for a state, ``None`` when no state is given (no tax at all)."""
        if not state:
            return None
        return self.tax_rates.get(normalize_key(state), self.default_tax_rate)

    def payment_fee_rate(self, method) -> Decimal:
        if not method:
            return _ZERO
        return self.payment_fees.get(normalize_key(method), _ZERO)


class PricingConfig(BaseModel):
    """Main configuration model for the pricing engine."""

    rates: RateTablesConfig = Field(
        default_factory=RateTablesConfig,
        description="Rate tables used by every calculator",
    )
    log_level: str = Field("INFO", description="Root logging level")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {v}")
        return level

    @classmethod
    def from_file(cls, file_path: str | Path) -> "PricingConfig":
        """
        Load configuration from a JSON file.

        Args:
            file_path: Path to the configuration JSON file

        Returns:
            PricingConfig instance

        Raises:
            FileNotFoundError: If the file doesn't exist
            RateTableError: If the file is not a valid JSON object
            ValidationError: If the data doesn't match the schema
        """
        path = Path(file_path)

        if not path.exists():
            raise FileNotFoundError(f"Configuration file not found: {file_path}")

        try:
            with path.open("r") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise RateTableError("Invalid JSON in configuration file", path, e)

        if not isinstance(data, dict):
            raise RateTableError(
                f"Configuration file must contain a JSON object, got {type(data).__name__}",
                path,
            )

        return cls(**data)

    def to_file(self, file_path: str | Path) -> None:
        """Save configuration to a JSON file."""
        path = Path(file_path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with path.open("w") as f:
            json.dump(self.model_dump(mode="json"), f, indent=2)


DEFAULT_RATES = RateTablesConfig()
