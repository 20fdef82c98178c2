"""Exceptions raised or produced by Result operations.

Two tiers:
- ContextualError: a *represented* failure payload built by Result.expect()
- UncheckedAccessError: a contract violation raised by strict-mode results
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator


class UncheckedAccessError(RuntimeError):
    """Strict Result read before its discriminant was inspected.

    Signals caller misuse, not an expected runtime failure. Never wrap this
    into a Failure; let it propagate.
    """

    def __init__(self, operation: str, variant: str) -> None:
        self.operation = operation
        self.variant = variant
        super().__init__(
            f"{operation} called on a strict {variant} result before inspecting it; "
            "check is_success()/is_failure() or use match() first"
        )


class ContextualError(Exception):
    """Failure annotated with call-site context.

    Renders as ``"<context>: <cause>"``. When the cause is an exception it is
    also set as ``__cause__`` so tracebacks show the original error.

    Example:
        >>> err = ContextualError("loading config", FileNotFoundError("app.toml"))
        >>> str(err)
        'loading config: app.toml'
    """

    def __init__(self, context: str | BaseException, cause: object) -> None:
        super().__init__(context, cause)
        self.context = context
        self.cause = cause
        if isinstance(cause, BaseException):
            self.__cause__ = cause

    def __str__(self) -> str:
        return f"{self.context}: {self.cause}"

    def __repr__(self) -> str:
        return f"ContextualError({self.context!r}, {self.cause!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ContextualError):
            return NotImplemented
        return self.context == other.context and self.cause == other.cause

    def __hash__(self) -> int:
        return hash((_hash_key(self.context), _hash_key(self.cause)))

    def chain(self) -> Iterator[object]:
        """Yield every wrapped link: self, then context and cause recursively."""
        return iter_chain(self)


def iter_chain(error: object) -> Iterator[object]:
    """Walk a failure payload and everything it wraps (depth-first, cycle-safe)."""
    seen: set[int] = set()
    stack: list[object] = [error]
    while stack:
        link = stack.pop()
        if link is None or id(link) in seen:
            continue
        seen.add(id(link))
        yield link
        if isinstance(link, ContextualError):
            stack.extend((link.cause, link.context))
        elif isinstance(link, BaseException):
            stack.append(link.__cause__)


def _hash_key(obj: object) -> object:
    try:
        hash(obj)
    except TypeError:
        return id(obj)
    return obj
