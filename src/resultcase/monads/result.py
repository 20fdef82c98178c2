"""Result monad: a value that is either a success or a failure, never both.

Implements a tagged union with an explicit discriminant plus a combinator
surface for railway-oriented composition:
- Construction: Success, Failure, new (dispatches on a value/error pair)
- Inspection: is_success, is_failure, *_and predicates, match
- Functor: map, map_failure
- Monad: and_then, with and_ / or_else for sequencing and recovery
- Defaults: unwrap_or, unwrap_or_else, map_or, map_or_else
- Annotation: expect wraps failures with call-site context

Strict results (``ResultConfig(strict=True)``) refuse to hand out the success
value until the caller has looked at the discriminant.
"""

from __future__ import annotations

from collections.abc import Mapping
from copy import deepcopy
from enum import StrEnum
from typing import TYPE_CHECKING, Any, Callable, Generic, TypeVar, cast

from resultcase.foundation.config import ResultConfig, default_config
from resultcase.foundation.errors import ContextualError, UncheckedAccessError, iter_chain
from resultcase.runtime.observability import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Failure type
U = TypeVar("U")  # Mapped success type
F = TypeVar("F")  # Mapped failure type

ConfigLike = ResultConfig | Mapping[str, bool] | None

_log = get_logger("resultcase.result")


class Variant(StrEnum):
    """Discriminant of a Result."""

    SUCCESS = "success"
    FAILURE = "failure"


def _coerce_config(config: ConfigLike) -> ResultConfig:
    if config is None:
        return default_config()
    if isinstance(config, ResultConfig):
        return config
    return ResultConfig.model_validate(dict(config))


class Result(Generic[T, E]):
    """Discriminated union representing success or failure.

    Holds one variant tag and one payload, so holding both sides (or
    neither) is structurally impossible. Instances are immutable: every
    combinator returns a new Result or a plain value.

    Examples:
        >>> Success(21).map(lambda x: x * 2).value
        42

        >>> r = new(1, "boom")
        >>> r.is_failure(), r.error, r.value
        (True, 'boom', None)

        Railway-oriented programming:
        >>> def positive(x: int) -> Result[int, str]:
        ...     return Success(x) if x > 0 else Failure("must be positive")
        >>> Success(5).and_then(positive).map(str).unwrap_or("n/a")
        '5'

    Notes:
        - The inactive side always reads as None
        - Under strict mode, ``value`` and ``unwrap()`` raise
          UncheckedAccessError until the discriminant has been inspected
    """

    __slots__ = ("_variant", "_payload", "_config", "_inspected")

    def __init__(self, variant: Variant | str, payload: T | E, config: ConfigLike = None) -> None:
        """Low-level constructor. Prefer Success(), Failure() or new()."""
        variant = Variant(variant)
        cfg = _coerce_config(config)
        if variant is Variant.SUCCESS and cfg.isolate:
            payload = deepcopy(payload)
        object.__setattr__(self, "_variant", variant)
        object.__setattr__(self, "_payload", payload)
        object.__setattr__(self, "_config", cfg)
        object.__setattr__(self, "_inspected", False)

    # ─────────────────────────────────────────────────────────────────
    # Internals
    # ─────────────────────────────────────────────────────────────────

    def _succeeded(self) -> bool:
        return self._variant is Variant.SUCCESS

    def _success_payload(self) -> T:
        payload = cast(T, self._payload)
        return deepcopy(payload) if self._config.isolate else payload

    def _touch(self) -> None:
        if not self._inspected:
            object.__setattr__(self, "_inspected", True)

    def _gate(self, operation: str) -> None:
        if self._config.strict and not self._inspected:
            _log.bind_result(self._variant).error("unchecked result access", operation=operation)
            raise UncheckedAccessError(operation, self._variant.value)

    def _derive(self, variant: Variant, payload: object) -> Result[Any, Any]:
        return Result(variant, payload, self._config)

    # ─────────────────────────────────────────────────────────────────
    # Discriminant Inspection
    # ─────────────────────────────────────────────────────────────────

    @property
    def variant(self) -> Variant:
        """The discriminant tag. Reading it counts as inspection."""
        self._touch()
        return self._variant

    @property
    def config(self) -> ResultConfig:
        return self._config

    def is_success(self) -> bool:
        """Check if Result is the success variant."""
        self._touch()
        return self._succeeded()

    def is_failure(self) -> bool:
        """Check if Result is the failure variant."""
        self._touch()
        return not self._succeeded()

    def is_success_and(self, predicate: Callable[[T], bool]) -> bool:
        """True if success and ``predicate(value)`` holds. Predicate not called on failure."""
        self._touch()
        return self._succeeded() and bool(predicate(self._success_payload()))

    def is_failure_and(self, predicate: Callable[[E], bool]) -> bool:
        """True if failure and ``predicate(error)`` holds. Predicate not called on success."""
        self._touch()
        return not self._succeeded() and bool(predicate(cast(E, self._payload)))

    def is_failure_of(self, target: object) -> bool:
        """True if failure and any link of the failure chain matches ``target``.

        The chain covers the payload, the context and cause of every
        ContextualError, and ``__cause__`` of plain exceptions. A link matches
        when it is ``target``, equals it, or is an instance of it (for
        exception classes).
        """
        self._touch()
        if self._succeeded():
            return False
        return any(_matches(link, target) for link in iter_chain(self._payload))

    def match(self, on_success: Callable[[T], U], on_failure: Callable[[E], U]) -> U:
        """Pattern match on Result variants.

        Invokes exactly one callback and returns its result.

        Example:
            >>> Success(42).match(
            ...     on_success=lambda x: f"success: {x}",
            ...     on_failure=lambda e: f"failed: {e}",
            ... )
            'success: 42'
        """
        self._touch()
        if self._succeeded():
            return on_success(self._success_payload())
        return on_failure(cast(E, self._payload))

    # ─────────────────────────────────────────────────────────────────
    # Value Extraction
    # ─────────────────────────────────────────────────────────────────

    @property
    def value(self) -> T | None:
        """Success payload, or None on failure.

        Raises:
            UncheckedAccessError: If strict and the discriminant was never inspected
        """
        self._gate("value")
        return self._success_payload() if self._succeeded() else None

    @property
    def error(self) -> E | None:
        """Failure payload, or None on success. Never gated; counts as inspection."""
        self._touch()
        return None if self._succeeded() else cast(E, self._payload)

    def unwrap(self) -> tuple[T | None, E | None]:
        """Destructure into a ``(value, error)`` pair.

        Prefer match() for consuming results.

        Raises:
            UncheckedAccessError: If strict and the discriminant was never inspected
        """
        self._gate("unwrap")
        if self._succeeded():
            return (self._success_payload(), None)
        return (None, cast(E, self._payload))

    def unwrap_or(self, default: T) -> T:
        """Extract success value or return default."""
        return self._success_payload() if self._succeeded() else default

    def unwrap_or_else(self, f: Callable[[E], T]) -> T:
        """Extract success value or compute one from the error."""
        return self._success_payload() if self._succeeded() else f(cast(E, self._payload))

    def map_or(self, default: U, f: Callable[[T], U]) -> U:
        """Apply f to the success value, or return default on failure."""
        return f(self._success_payload()) if self._succeeded() else default

    def map_or_else(self, on_failure: Callable[[E], U], on_success: Callable[[T], U]) -> U:
        """Apply on_success to the value or on_failure to the error."""
        if self._succeeded():
            return on_success(self._success_payload())
        return on_failure(cast(E, self._payload))

    # ─────────────────────────────────────────────────────────────────
    # Functor / Monad Operations
    # ─────────────────────────────────────────────────────────────────

    def map(self, f: Callable[[T], U]) -> Result[U, E]:
        """Map function over the success value; failures pass through untouched."""
        if self._succeeded():
            return self._derive(Variant.SUCCESS, f(self._success_payload()))
        return self._derive(Variant.FAILURE, self._payload)

    def map_failure(self, f: Callable[[E], F]) -> Result[T, F]:
        """Map function over the failure payload; successes pass through."""
        if self._succeeded():
            return self._derive(Variant.SUCCESS, self._payload)
        return self._derive(Variant.FAILURE, f(cast(E, self._payload)))

    def and_(self, other: Result[U, E]) -> Result[U, E]:
        """Short-circuit AND.

        The receiver's failure wins, then other's failure; otherwise a
        success carrying other's value.
        """
        if not self._succeeded():
            return self._derive(Variant.FAILURE, self._payload)
        if not other._succeeded():
            return self._derive(Variant.FAILURE, other._payload)
        return self._derive(Variant.SUCCESS, other._success_payload())

    def and_then(self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Monadic bind: chain an operation that can fail.

        f is called at most once, and never on a failure.

        Example:
            >>> def parse_int(s: str) -> Result[int, str]:
            ...     return Success(int(s)) if s.isdigit() else Failure(f"invalid int: {s}")
            >>> Success("42").and_then(parse_int).value
            42
        """
        if self._succeeded():
            return f(self._success_payload())
        return self._derive(Variant.FAILURE, self._payload)

    def or_else(self, f: Callable[[E], Result[T, F]]) -> Result[T, F]:
        """Recover from failure with f; successes are returned as-is."""
        if self._succeeded():
            return cast(Result[T, F], self)
        return f(cast(E, self._payload))

    def expect(self, context: str | BaseException) -> Result[T, ContextualError]:
        """Annotate a failure with call-site context.

        A failure becomes ``Failure(ContextualError(context, error))`` (renders
        as "context: error"). A success is returned unchanged.
        """
        if self._succeeded():
            return cast(Result[T, ContextualError], self)
        _log.bind_result(self._variant).debug("failure annotated", context=str(context))
        return self._derive(Variant.FAILURE, ContextualError(context, self._payload))

    def inspect(self, f: Callable[[T], object]) -> Result[T, E]:
        """Call f with the success value for side effects, return self."""
        if self._succeeded():
            f(self._success_payload())
        return self

    def inspect_failure(self, f: Callable[[E], object]) -> Result[T, E]:
        """Call f with the failure payload for side effects, return self."""
        if not self._succeeded():
            f(cast(E, self._payload))
        return self

    # ─────────────────────────────────────────────────────────────────
    # Dunder Methods
    # ─────────────────────────────────────────────────────────────────

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"Result is immutable; cannot set {name!r}")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"Result is immutable; cannot delete {name!r}")

    def __reduce__(self) -> tuple[type[Result[T, E]], tuple[Variant, object, ResultConfig]]:
        return (Result, (self._variant, self._payload, self._config))

    def __bool__(self) -> bool:
        """Truthiness checking (True if success). Counts as inspection."""
        self._touch()
        return self._succeeded()

    def __eq__(self, other: object) -> bool:
        """Structural equality on variant and payload."""
        if not isinstance(other, Result):
            return NotImplemented
        return self._variant is other._variant and self._payload == other._payload

    def __hash__(self) -> int:
        return hash((self._variant, self._payload))

    def __repr__(self) -> str:
        variant = "Success" if self._succeeded() else "Failure"
        return f"{variant}({self._payload!r})"

    __str__ = __repr__


def _matches(link: object, target: object) -> bool:
    if link is target:
        return True
    if isinstance(target, type) and issubclass(target, BaseException):
        return isinstance(link, target)
    return bool(link == target)


# ═════════════════════════════════════════════════════════════════════════════
# Constructor Functions
# ═════════════════════════════════════════════════════════════════════════════


def Success(value: T, config: ConfigLike = None) -> Result[T, Any]:  # noqa: N802
    """Construct the success variant."""
    return Result(Variant.SUCCESS, value, config)


def Failure(error: E, config: ConfigLike = None) -> Result[Any, E]:  # noqa: N802
    """Construct the failure variant."""
    return Result(Variant.FAILURE, error, config)


def new(value: T, error: E | None = None, config: ConfigLike = None) -> Result[T, E]:
    """Build a Result from a value/error pair.

    A non-None error wins and the value is discarded; otherwise the value is
    a success (including falsy values like 0 or "").

    Example:
        >>> new(0, None).value
        0
        >>> new(1, "boom").error
        'boom'
    """
    if error is not None:
        return Failure(error, config)
    return Success(value, config)


# ═════════════════════════════════════════════════════════════════════════════
# Collection Operations
# ═════════════════════════════════════════════════════════════════════════════


def sequence(results: Iterable[Result[T, E]]) -> Result[list[T], E]:
    """Convert Results into a Result of list. Fails fast on first failure.

    Example:
        >>> sequence([Success(1), Success(2)]).value
        [1, 2]
        >>> sequence([Success(1), Failure("fail"), Success(3)]).error
        'fail'
    """
    values: list[T] = []
    for result in results:
        if not result._succeeded():
            return Failure(result._payload, result._config)
        values.append(result._success_payload())
    return Success(values)


def traverse(items: Iterable[T], f: Callable[[T], Result[U, E]]) -> Result[list[U], E]:
    """Map a Result-returning function over items, stopping at the first failure.

    Example:
        >>> def parse_int(s: str) -> Result[int, str]:
        ...     return Success(int(s)) if s.isdigit() else Failure(f"invalid: {s}")
        >>> traverse(["1", "bad", "3"], parse_int).error
        'invalid: bad'
    """
    return sequence(f(item) for item in items)


def collect_results(results: Iterable[Result[T, E]]) -> Result[list[T], list[E]]:
    """Collect all Results, accumulating every failure instead of failing fast.

    Example:
        >>> collect_results([Success(1), Failure("e1"), Failure("e2")]).error
        ['e1', 'e2']
    """
    values: list[T] = []
    errors: list[E] = []
    for result in results:
        if result._succeeded():
            values.append(result._success_payload())
        else:
            errors.append(cast(E, result._payload))
    return Success(values) if not errors else Failure(errors)


def attempt(fn: Callable[..., T], /, *args: Any, **kwargs: Any) -> Result[T, Exception]:
    """Call fn, turning a raised exception into a Failure holding it.

    UncheckedAccessError is a contract violation and always propagates.

    Example:
        >>> attempt(int, "42").value
        42
        >>> attempt(int, "x").is_failure_of(ValueError)
        True
    """
    try:
        value = fn(*args, **kwargs)
    except UncheckedAccessError:
        raise
    except Exception as e:
        return Failure(e)
    return Success(value)
