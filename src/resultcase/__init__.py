"""resultcase - an immutable success-or-failure container for Python.

A Result holds either a success value or a failure, never both. It gives a
function a single return object to propagate, transform and branch on.

Quick Start:
    >>> from resultcase import Success, Failure, new
    >>>
    >>> def parse_port(raw: str):
    ...     if not raw.isdigit():
    ...         return Failure(ValueError(f"not a port: {raw!r}"))
    ...     return Success(int(raw))
    >>>
    >>> parse_port("8080").map(lambda p: p + 1).unwrap_or(80)
    8081
    >>> parse_port("http").expect("reading PORT").match(
    ...     on_success=str,
    ...     on_failure=lambda e: f"error: {e}",
    ... )
    "error: reading PORT: not a port: 'http'"

Strict Mode:
    >>> r = new(1, None, config={"strict": True})
    >>> if r.is_success():
    ...     print(r.value)
    1

Configuration (environment):
    RESULTCASE_STRICT=true        # strict by default
    RESULTCASE_ISOLATE=false      # share payloads instead of deep-copying
    RESULTCASE_LOG_LEVEL=DEBUG
    RESULTCASE_LOG_FORMAT=json
"""

from __future__ import annotations

__version__ = "0.1.0"

# Core
from .monads import (
    Failure,
    Result,
    Success,
    Variant,
    attempt,
    collect_results,
    new,
    sequence,
    traverse,
)

# Errors
from .foundation.errors import ContextualError, UncheckedAccessError

# Settings
from .foundation.config import (
    ResultcaseSettings,
    ResultConfig,
    clear_settings_cache,
    get_settings,
)

# Logging
from .runtime.observability import configure_logging, get_logger, reset_logging

__all__ = [
    "__version__",
    # Core
    "Result",
    "Variant",
    "Success",
    "Failure",
    "new",
    # Collections
    "sequence",
    "traverse",
    "collect_results",
    "attempt",
    # Errors
    "ContextualError",
    "UncheckedAccessError",
    # Settings
    "ResultConfig",
    "ResultcaseSettings",
    "get_settings",
    "clear_settings_cache",
    # Logging
    "configure_logging",
    "get_logger",
    "reset_logging",
]
