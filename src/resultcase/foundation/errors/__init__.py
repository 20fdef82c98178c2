"""Error types for resultcase.

- UncheckedAccessError: strict-mode contract violation (raised, never wrapped)
- ContextualError: composite failure payload produced by Result.expect()
"""

from .errors import ContextualError, UncheckedAccessError, iter_chain

__all__ = ["ContextualError", "UncheckedAccessError", "iter_chain"]
