"""Environment-based configuration using pydantic-settings.

Global defaults come from ``RESULTCASE_*`` environment variables (or a
``.env`` file). Individual results carry a frozen ResultConfig that can
override those defaults at construction time.

Example:
    >>> from resultcase.foundation.config import get_settings
    >>> settings = get_settings()
    >>> settings.strict
    False
    >>> settings.logging.level
    'INFO'

    # Or with environment variables:
    # RESULTCASE_STRICT=true
    # RESULTCASE_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="RESULTCASE_LOG_",
        extra="ignore",
    )

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: Literal["console", "json", "none"] = "console"

    @field_validator("level", mode="before")
    @classmethod
    def _normalize_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v

    @field_validator("format", mode="before")
    @classmethod
    def _normalize_format(cls, v: str) -> str:
        return v.lower() if isinstance(v, str) else v


class ResultcaseSettings(BaseSettings):
    """Root settings for resultcase.

    Example environment variables:
        RESULTCASE_STRICT=true
        RESULTCASE_ISOLATE=false
        RESULTCASE_LOG_LEVEL=DEBUG
        RESULTCASE_LOG_FORMAT=json
    """

    model_config = SettingsConfigDict(
        env_prefix="RESULTCASE_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    strict: bool = Field(default=False, description="Default strict mode for new results")
    isolate: bool = Field(default=True, description="Deep-copy success payloads in and out")

    logging: LoggingSettings = Field(default_factory=LoggingSettings)


class ResultConfig(BaseModel):
    """Per-result options, fixed at construction.

    Attributes:
        strict: Reading the success value (``value``/``unwrap()``) before
            inspecting the discriminant raises UncheckedAccessError.
        isolate: The success payload is deep-copied on the way in and on
            every way out, so callers never alias internal state. On by
            default; turn off for payloads that cannot be deep-copied.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    strict: bool = False
    isolate: bool = True

    @classmethod
    def from_settings(cls, settings: ResultcaseSettings | None = None) -> ResultConfig:
        """Build a config from global settings (cached settings if none given)."""
        s = settings or get_settings()
        return cls(strict=s.strict, isolate=s.isolate)


@lru_cache(maxsize=1)
def get_settings() -> ResultcaseSettings:
    """Get the global settings instance (cached)."""
    return ResultcaseSettings()


@lru_cache(maxsize=1)
def default_config() -> ResultConfig:
    """Config applied to results constructed without an explicit one."""
    return ResultConfig.from_settings()


def clear_settings_cache() -> None:
    """Clear cached settings and the derived default config (useful for testing).

    After calling this, the next get_settings() call will
    reload configuration from environment.
    """
    get_settings.cache_clear()
    default_config.cache_clear()
