"""
Configuration package for the basket sample.

Modules:
    settings: Centralized configuration using Pydantic Settings
"""

from config.settings import settings, create_settings, SettingValidator

__all__ = ["settings", "create_settings", "SettingValidator"]
