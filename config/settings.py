"""
Centralized configuration for the basket sample.

This module uses Pydantic Settings to load and validate environment variables.
Every field has a default, so nothing needs to be set to import the package.

Usage:
    from config import settings
    print(settings.basket_surcharge)

    # Validated overrides (e.g. in tests or the demo)
    from config import create_settings
    custom = create_settings(basket_surcharge="3.50")

Environment Variables:
    BASKET_SURCHARGE: Fixed amount the manager adds to basket totals
    LOG_LEVEL: Logging level for the demo entry point
"""

import logging
from decimal import Decimal
from typing import Any

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # =========================================================================
    # Basket Manager
    # =========================================================================
    basket_surcharge: Decimal = Decimal("2.00")  # VAT-like, manager layer only

    # =========================================================================
    # Logging
    # =========================================================================
    log_level: str = "INFO"

    @field_validator("basket_surcharge")
    @classmethod
    def _check_surcharge(cls, value: Decimal) -> Decimal:
        if value < 0:
            raise ValueError("Minimum value is 0")
        return value

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        value = value.upper()
        if value not in LOG_LEVELS:
            raise ValueError(f"Must be one of: {', '.join(LOG_LEVELS)}")
        return value


class SettingValidator:
    """Validation table for settings that may be overridden at runtime."""

    SETTINGS_CONFIG = {
        'basket_surcharge': {
            'type': Decimal,
            'min': Decimal("0"),
        },
        'log_level': {
            'type': str,
            'choices': LOG_LEVELS,
        },
    }

    @classmethod
    def validate_setting(cls, key: str, value: Any) -> Any:
        """Validate and convert a setting value."""
        if key not in cls.SETTINGS_CONFIG:
            raise ValueError(f"Unknown setting: {key}")

        config = cls.SETTINGS_CONFIG[key]
        expected_type = config['type']

        # Type validation and conversion
        try:
            if expected_type == Decimal:
                value = Decimal(str(value))
            elif expected_type == str:
                value = str(value).upper() if key == 'log_level' else str(value)
        except (ArithmeticError, ValueError, TypeError):
            raise ValueError(f"Must be a {expected_type.__name__}")

        # Range validation
        if 'min' in config and value < config['min']:
            raise ValueError(f"Minimum value is {config['min']}")

        # Choices validation
        if 'choices' in config and value not in config['choices']:
            valid_choices = ', '.join(config['choices'])
            raise ValueError(f"Must be one of: {valid_choices}")

        return value


def create_settings(**overrides: Any) -> Settings:
    """Create a Settings instance with validated overrides applied.

    Args:
        **overrides: Setting values keyed by field name

    Returns:
        Settings instance built from the environment plus overrides

    Raises:
        ValueError: If an override is unknown or invalid
    """
    validated = {
        key: SettingValidator.validate_setting(key, value)
        for key, value in overrides.items()
    }
    for key, value in validated.items():
        logger.debug(f"Validated settings override: {key}={value}")

    return Settings(**validated)


# Singleton instance for global settings
settings = Settings()
