"""
Morphisms
=========

Три вида стрелок с одинаковой алгеброй:
- Arrow            - S -> T
- Suspended        - S -> Awaitable[T]
- ScopedSuspended  - (Context, S) -> Awaitable[T]

Each flavor module also carries module-level forms (compose, apply, bind,
kleisli_multiply, ...). Import the module as a namespace to use them:

    from arrows.morphism import scoped
    pipeline = scoped.compose(first, second)
"""

from . import scoped, suspended, sync
from .scoped import KlScopedSuspended, ScopedSuspended
from .suspended import KlSuspended, Suspended
from .sync import Arrow, KlArrow

__all__ = (
    # Namespaces
    "sync",
    "suspended",
    "scoped",
    # Arrows
    "Arrow",
    "KlArrow",
    "Suspended",
    "KlSuspended",
    "ScopedSuspended",
    "KlScopedSuspended",
)
