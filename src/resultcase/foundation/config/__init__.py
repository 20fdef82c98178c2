"""Configuration management using pydantic-settings.

Global defaults from the environment plus the per-result ResultConfig.
"""

from .settings import (
    LoggingSettings,
    ResultcaseSettings,
    ResultConfig,
    clear_settings_cache,
    default_config,
    get_settings,
)

__all__ = [
    "LoggingSettings",
    "ResultConfig",
    "ResultcaseSettings",
    "clear_settings_cache",
    "default_config",
    "get_settings",
]
