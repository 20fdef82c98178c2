"""Structured logging for result operations.

Context-aware key=value logging:
- Immutable bound loggers (bind() returns a new logger)
- Human-readable console output for development, JSON lines for production
- Process-wide renderer/level configured once, or straight from settings

Quick Start:
    >>> from resultcase.runtime.observability import configure_logging, get_logger
    >>>
    >>> configure_logging(format="console", level="DEBUG")
    >>> log = get_logger("payments")
    >>> log.info("charge settled", amount=42)

    >>> # Bind result context
    >>> log = log.bind_result("failure", operation="expect")
    >>> log.debug("failure annotated", context="loading config")
"""

from __future__ import annotations

import logging
import sys
import time
from contextvars import ContextVar
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any, Protocol, TextIO, runtime_checkable

JsonValue = Any
JsonDict = dict[str, Any]


# ─────────────────────────────────────────────────────────────────────────────
# Core Logger
# ─────────────────────────────────────────────────────────────────────────────


@dataclass(slots=True, frozen=True)
class BoundLogger:
    """Structured logger with bound context. bind() returns a new logger with merged context.

    Loggers without an explicit level follow the global level at call time,
    so module-level loggers pick up configure_logging() made after import.

    Example:
        >>> log = BoundLogger(context={"service": "api"})
        >>> log.info("request received", path="/users")
        # => 10:30:45.120 [info] request received path=/users service=api
    """

    context: JsonDict = field(default_factory=dict)
    level: int | None = None

    def bind(self, **kw: JsonValue) -> BoundLogger:
        """Create new logger with additional bound context."""
        return BoundLogger(context={**self.context, **kw}, level=self.level)

    def bind_result(self, variant: str, **kw: JsonValue) -> BoundLogger:
        """Bind the variant of the result being operated on."""
        return self.bind(variant=str(variant), **kw)

    def unbind(self, *keys: str) -> BoundLogger:
        """Create new logger without specified keys."""
        return BoundLogger(context={k: v for k, v in self.context.items() if k not in keys}, level=self.level)

    def enabled_for(self, level: int) -> bool:
        return level >= (self.level if self.level is not None else _default_level.get())

    def _log(self, level: int, event: str, **kw: JsonValue) -> None:
        if not self.enabled_for(level):
            return
        _get_renderer().render(LogEntry(time.time(), _level_name(level), event, {**self.context, **kw}))

    def debug(self, event: str, **kw: JsonValue) -> None: self._log(logging.DEBUG, event, **kw)
    def info(self, event: str, **kw: JsonValue) -> None: self._log(logging.INFO, event, **kw)
    def warning(self, event: str, **kw: JsonValue) -> None: self._log(logging.WARNING, event, **kw)
    def error(self, event: str, **kw: JsonValue) -> None: self._log(logging.ERROR, event, **kw)

    def exception(self, event: str, **kw: JsonValue) -> None:
        """Log error with exception info."""
        import traceback
        self._log(logging.ERROR, event, exc_info=traceback.format_exc(), **kw)


@dataclass(slots=True)
class LogEntry:
    """Single log record with merged context."""

    timestamp: float
    level: str
    event: str
    context: JsonDict

    @property
    def ts_iso(self) -> str:
        """ISO formatted timestamp."""
        return datetime.fromtimestamp(self.timestamp, tz=UTC).isoformat()

    @property
    def ts_human(self) -> str:
        """Human-readable timestamp (HH:MM:SS.mmm)."""
        return datetime.fromtimestamp(self.timestamp, tz=UTC).strftime("%H:%M:%S.%f")[:-3]


# ─────────────────────────────────────────────────────────────────────────────
# Renderers
# ─────────────────────────────────────────────────────────────────────────────


@runtime_checkable
class LogRenderer(Protocol):
    """Protocol for log output renderers."""

    def render(self, entry: LogEntry) -> None: ...


_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
_RED, _RESET = "\033[31m", "\033[0m"


@dataclass(slots=True)
class ConsoleRenderer:
    """One line per entry: ``HH:MM:SS.mmm [level] event key=value ...``.

    With colors on, warning-and-above entries are printed in red.
    """

    output: TextIO = field(default_factory=lambda: sys.stderr)
    colors: bool | None = None  # None = auto-detect

    def __post_init__(self) -> None:
        if self.colors is None:
            self.colors = getattr(self.output, "isatty", lambda: False)()

    def render(self, entry: LogEntry) -> None:
        fields = " ".join(f"{k}={_format_value(v)}" for k, v in sorted(entry.context.items()) if k != "exc_info")
        line = f"{entry.ts_human} [{entry.level}] {entry.event} {fields}".rstrip()
        if self.colors and entry.level in ("warning", "error", "critical"):
            line = f"{_RED}{line}{_RESET}"
        print(line, file=self.output)
        if "exc_info" in entry.context:
            print(entry.context["exc_info"], file=self.output)


@dataclass(slots=True)
class JsonRenderer:
    """JSON Lines output for log aggregation."""

    output: TextIO = field(default_factory=lambda: sys.stdout)

    def render(self, entry: LogEntry) -> None:
        import orjson
        payload = {"timestamp": entry.ts_iso, "level": entry.level, "event": entry.event, **entry.context}
        print(orjson.dumps(payload, default=str, option=orjson.OPT_NON_STR_KEYS).decode(), file=self.output)


@dataclass(slots=True)
class NoOpRenderer:
    """Silent renderer for testing."""

    def render(self, entry: LogEntry) -> None:
        pass


def _format_value(v: JsonValue) -> str:
    if isinstance(v, str):
        return repr(v) if " " in v else v
    return repr(v)


def _level_name(level: int) -> str:
    return logging.getLevelName(level).lower()


# ─────────────────────────────────────────────────────────────────────────────
# Global Configuration
# ─────────────────────────────────────────────────────────────────────────────


_renderer: ContextVar[LogRenderer | None] = ContextVar("resultcase_log_renderer", default=None)
_default_level: ContextVar[int] = ContextVar("resultcase_log_level", default=logging.INFO)


def configure_logging(
    format: str | None = None,  # noqa: A002 - shadows builtin but matches stdlib
    level: str | None = None,
    *,
    output: TextIO | None = None,
    colors: bool | None = None,
) -> LogRenderer:
    """Configure global structured logging. Format: "console" (human), "json" (machine), "none".

    Omitted format/level fall back to LoggingSettings (RESULTCASE_LOG_FORMAT,
    RESULTCASE_LOG_LEVEL).
    """
    if format is None or level is None:
        from resultcase.foundation.config import get_settings
        settings = get_settings().logging
        format, level = format or settings.format, level or settings.level
    if level.upper() not in _LEVELS:
        raise ValueError(f"Unknown level: {level}. Use one of {', '.join(_LEVELS)}")
    match format:
        case "console": renderer: LogRenderer = ConsoleRenderer(output=output or sys.stderr, colors=colors)
        case "json": renderer = JsonRenderer(output=output or sys.stdout)
        case "none": renderer = NoOpRenderer()
        case _: raise ValueError(f"Unknown format: {format}. Use 'console', 'json', or 'none'")
    _default_level.set(getattr(logging, level.upper()))
    _renderer.set(renderer)
    return renderer


def reset_logging() -> None:
    """Restore default renderer and level."""
    _renderer.set(None)
    _default_level.set(logging.INFO)


def get_logger(name: str | None = None, **initial_context: JsonValue) -> BoundLogger:
    """Get a structured logger with optional initial context. Name is added to context as 'logger'."""
    return BoundLogger(context={**initial_context, **({"logger": name} if name else {})})


def _get_renderer() -> LogRenderer:
    """Get configured renderer or create default."""
    if (renderer := _renderer.get()) is None:
        _renderer.set(renderer := ConsoleRenderer())
    return renderer
