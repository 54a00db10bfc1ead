"""
Flavor-polymorphic combinators.

Architecture:
- Generic combinators (*M functions) work with both suspending flavors via
  the wrap pattern; the context, when present, rides along as the leading
  positional argument
- Sugar for Arrow (no suffix)
- Sugar for Suspended (*_async suffix)
- Sugar for ScopedSuspended (*_scoped suffix)
"""

from .cases import cases, cases_async, cases_scoped, casesM
from .evaluate import (
    evaluate,
    evaluate_async,
    evaluate_scoped,
    identity,
    identity_async,
    identity_scoped,
    pipe,
    pipe_async,
    pipe_scoped,
)
from .fork import (
    fork,
    fork_async,
    fork_scoped,
    forkM,
    unfork,
    unfork_async,
    unfork_scoped,
    unforkM,
)
from .pairs import (
    swap,
    swap_async,
    swap_scoped,
    swapM,
    uncurry,
    uncurry_async,
    uncurry_scoped,
    uncurryM,
)

__all__ = (
    # Arrow
    "identity",
    "pipe",
    "evaluate",
    "fork",
    "unfork",
    "swap",
    "uncurry",
    "cases",
    # Suspended
    "identity_async",
    "pipe_async",
    "evaluate_async",
    "fork_async",
    "unfork_async",
    "swap_async",
    "uncurry_async",
    "cases_async",
    # ScopedSuspended
    "identity_scoped",
    "pipe_scoped",
    "evaluate_scoped",
    "fork_scoped",
    "unfork_scoped",
    "swap_scoped",
    "uncurry_scoped",
    "cases_scoped",
    # Generic
    "forkM",
    "unforkM",
    "swapM",
    "uncurryM",
    "casesM",
)
