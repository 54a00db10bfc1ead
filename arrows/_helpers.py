"""Internal helpers for arrows.

Pairing functions shared by apply, fork and the pair combinators.
These are not part of the public API but can be used for custom combinators."""

from __future__ import annotations

from collections.abc import Callable

from ._types import Pair

# Identity function
def identity[T](x: T) -> T:
    """Identity function: returns its argument unchanged."""
    return x

# Pairing
def pair[A, B](first: A, second: B) -> Pair[A, B]:
    """Build a pair from two values."""
    return (first, second)

def diagonal[X](x: X) -> Pair[X, X]:
    """Duplicate a value: x -> (x, x)."""
    return (x, x)

def swapped[A, B](p: Pair[A, B]) -> Pair[B, A]:
    """Exchange the components of a pair."""
    first, second = p
    return (second, first)

def evaluate_pair[S, T](p: Pair[Callable[[S], T], S]) -> T:
    """
    Apply the first component to the second.
    
    Raw evaluation map used by the reader applicative:
        evaluate_pair((f, x)) == f(x)
    """
    f, x = p
    return f(x)

__all__ = (
    # Identity
    "identity",
    # Pairing
    "pair",
    "diagonal",
    "swapped",
    "evaluate_pair",
)
