"""
Configuration loading and management for the retail pricing engine.

This module provides utilities for loading, validating, and managing
the rate tables and logging settings.
"""

import logging
import os
from pathlib import Path

from .models import PricingConfig

logger = logging.getLogger(__name__)

CONFIG_FILE_ENV = "RETAIL_PRICING_CONFIG_FILE"
LOG_LEVEL_ENV = "RETAIL_PRICING_LOG_LEVEL"


def load_config(
    config_path: str | Path | None = None, config_name: str = "pricing.json"
) -> PricingConfig:
    """
    Load configuration from file with path resolution.

    Args:
        config_path: Explicit path to config file or directory containing config
        config_name: Name of config file (default: "pricing.json")

    Returns:
        PricingConfig: Loaded and validated configuration

    Raises:
        FileNotFoundError: If no configuration file is found
    """
    if config_path is None:
        search_paths = [
            Path.cwd() / config_name,
            Path.cwd() / "config" / config_name,
        ]

        for path in search_paths:
            if path.exists():
                config_path = path
                break
        else:
            raise FileNotFoundError(
                f"Configuration file '{config_name}' not found in any of: "
                f"{[str(p) for p in search_paths]}"
            )

    config_path = Path(config_path)

    if config_path.is_dir():
        config_path = config_path / config_name

    return PricingConfig.from_file(config_path)


def get_config_from_env() -> PricingConfig | None:
    """
    Try to load configuration from environment variables.

    Returns:
        PricingConfig if environment variables are set, None otherwise
    """
    config_file_env = os.getenv(CONFIG_FILE_ENV)
    log_level_env = os.getenv(LOG_LEVEL_ENV)

    if config_file_env:
        config = load_config(config_file_env)
        if log_level_env:
            config = config.model_copy(update={"log_level": log_level_env.upper()})
        return config

    if log_level_env:
        return PricingConfig(log_level=log_level_env)

    return None


def load_config_with_fallback(config_path: str | Path | None = None) -> PricingConfig:
    """
    Load configuration with fallback to environment variables and defaults.

    Priority order:
    1. Explicit config file path
    2. Environment variables (RETAIL_PRICING_CONFIG_FILE, RETAIL_PRICING_LOG_LEVEL)
    3. Default locations (pricing.json, config/pricing.json)
    4. Built-in rate tables
    """
    if config_path:
        try:
            return load_config(config_path)
        except FileNotFoundError:
            logger.warning(f"Configuration file not found: {config_path}")

    env_config = get_config_from_env()
    if env_config:
        return env_config

    try:
        return load_config()
    except FileNotFoundError:
        pass

    logger.info("No pricing configuration found, using built-in rate tables")
    return PricingConfig()
