"""Monadic error handling.

Example:
    >>> from resultcase.monads import Result, Success, Failure
    >>>
    >>> def divide(a: int, b: int) -> Result[float, str]:
    ...     if b == 0:
    ...         return Failure("division by zero")
    ...     return Success(a / b)
    >>>
    >>> result = (
    ...     divide(10, 2)
    ...     .map(lambda x: x * 2)
    ...     .and_then(lambda x: Success(x + 1))
    ... )
    >>> result.unwrap_or(0.0)
    11.0
"""

from .result import (
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

__all__ = [
    # Core types
    "Result",
    "Variant",
    # Constructors
    "Success",
    "Failure",
    "new",
    # Collection operations
    "sequence",
    "traverse",
    "collect_results",
    # Exception bridge
    "attempt",
]
