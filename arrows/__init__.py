"""
Arrows library: one composition algebra for three kinds of functions.

Identity, composition, map, applicative apply, monadic bind and Kleisli
composition behave the same way for
- Arrow            - plain synchronous functions
- Suspended        - async functions
- ScopedSuspended  - async functions handed a context at every call

Architecture:
- Methods on the arrow classes for the algebra (then, map, bind, ...)
- Flavor modules (sync, suspended, scoped) for module-level forms
- Generic combinators (*M functions) with sugar per flavor
  (no suffix / *_async / *_scoped)
"""

import logging

# Core types
from ._types import Context, Fn, NoError, Pair, Predicate, ScopedFn, SuspendFn

# Pairing helpers
from ._helpers import diagonal, pair

# Arrows
from . import morphism
from .morphism import (
    Arrow,
    KlArrow,
    KlScopedSuspended,
    KlSuspended,
    ScopedSuspended,
    Suspended,
    scoped,
    suspended,
    sync,
)

# Combinators
from .combinators import (
    # Arrow
    cases,
    evaluate,
    fork,
    identity,
    pipe,
    swap,
    uncurry,
    unfork,
    # Suspended
    cases_async,
    evaluate_async,
    fork_async,
    identity_async,
    pipe_async,
    swap_async,
    uncurry_async,
    unfork_async,
    # ScopedSuspended
    cases_scoped,
    evaluate_scoped,
    fork_scoped,
    identity_scoped,
    pipe_scoped,
    swap_scoped,
    uncurry_scoped,
    unfork_scoped,
    # Generic
    casesM,
    forkM,
    swapM,
    uncurryM,
    unforkM,
)

# Lift helpers
from . import lift

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = (
    # Types
    "Context",
    "Fn",
    "NoError",
    "Pair",
    "Predicate",
    "ScopedFn",
    "SuspendFn",
    # Pairing
    "pair",
    "diagonal",
    # Arrows
    "morphism",
    "sync",
    "suspended",
    "scoped",
    "Arrow",
    "KlArrow",
    "Suspended",
    "KlSuspended",
    "ScopedSuspended",
    "KlScopedSuspended",
    # Combinators - Arrow
    "identity",
    "pipe",
    "evaluate",
    "fork",
    "unfork",
    "swap",
    "uncurry",
    "cases",
    # Combinators - Suspended
    "identity_async",
    "pipe_async",
    "evaluate_async",
    "fork_async",
    "unfork_async",
    "swap_async",
    "uncurry_async",
    "cases_async",
    # Combinators - ScopedSuspended
    "identity_scoped",
    "pipe_scoped",
    "evaluate_scoped",
    "fork_scoped",
    "unfork_scoped",
    "swap_scoped",
    "uncurry_scoped",
    "cases_scoped",
    # Combinators - Generic
    "forkM",
    "unforkM",
    "swapM",
    "uncurryM",
    "casesM",
    # Lift
    "lift",
)
