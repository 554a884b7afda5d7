"""Configuration models and loaders for the retail pricing engine."""

from .models import DEFAULT_RATES, PricingConfig, RateTablesConfig
from .settings import get_config_from_env, load_config, load_config_with_fallback

__all__ = [
    "DEFAULT_RATES",
    "PricingConfig",
    "RateTablesConfig",
    "get_config_from_env",
    "load_config",
    "load_config_with_fallback",
]
