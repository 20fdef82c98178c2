"""Foundation layer: configuration and error types."""

from .config import ResultConfig, ResultcaseSettings, clear_settings_cache, default_config, get_settings
from .errors import ContextualError, UncheckedAccessError

__all__ = [
    "ContextualError",
    "ResultConfig",
    "ResultcaseSettings",
    "UncheckedAccessError",
    "clear_settings_cache",
    "default_config",
    "get_settings",
]
