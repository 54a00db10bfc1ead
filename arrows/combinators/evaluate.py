"""
Evaluation combinators
======================

identity, pipe and evaluate for every flavor.

    evaluate((f, x)) == pipe(f, x) == f(x)
"""

from __future__ import annotations

from .._helpers import evaluate_pair
from .._types import Context, Fn, Pair, ScopedFn, SuspendFn
from ..morphism import Arrow, ScopedSuspended, Suspended


# ============================================================================
# Sugar for Arrow
# ============================================================================


def identity[T]() -> Arrow[T, T]:
    """The arrow returning its input unchanged."""
    return Arrow.identity()


def pipe[S, T](f: Fn[S, T], value: S) -> T:
    """Invoke f on value."""
    return f(value)


def evaluate[S, T](p: Pair[Fn[S, T], S]) -> T:
    """Invoke a precomposed (f, value) pair."""
    return evaluate_pair(p)


# ============================================================================
# Sugar for Suspended
# ============================================================================


def identity_async[T]() -> Suspended[T, T]:
    return Suspended.identity()


async def pipe_async[S, T](f: SuspendFn[S, T], value: S) -> T:
    return await f(value)


async def evaluate_async[S, T](p: Pair[SuspendFn[S, T], S]) -> T:
    f, value = p
    return await f(value)


# ============================================================================
# Sugar for ScopedSuspended
# ============================================================================


def identity_scoped[T]() -> ScopedSuspended[T, T]:
    return ScopedSuspended.identity()


async def pipe_scoped[S, T](f: ScopedFn[S, T], context: Context, value: S) -> T:
    """Invoke f on value within the given context."""
    return await f(context, value)


async def evaluate_scoped[S, T](p: Pair[ScopedFn[S, T], S], context: Context) -> T:
    """Invoke a precomposed (f, value) pair within the given context."""
    f, value = p
    return await f(context, value)


__all__ = (
    "identity",
    "pipe",
    "evaluate",
    "identity_async",
    "pipe_async",
    "evaluate_async",
    "identity_scoped",
    "pipe_scoped",
    "evaluate_scoped",
)
