"""
Fork combinators
================

Комбинаторы для fork/unfork с wrap паттерном.

Generic forms take the context (if the flavor has one) as leading
positional arguments and pass it through untouched.
"""

from __future__ import annotations

import typing
from collections.abc import Awaitable, Callable, Coroutine

from .._helpers import pair
from .._types import Fn, Pair, ScopedFn, SuspendFn
from ..morphism import Arrow, ScopedSuspended, Suspended


# ============================================================================
# Generic combinators (wrap pattern)
# ============================================================================


def forkM[M, S, T](
    f: Callable[..., Awaitable[S]],
    g: Callable[..., Awaitable[T]],
    *,
    wrap: Callable[[Callable[..., Coroutine[typing.Any, typing.Any, Pair[S, T]]]], M],
) -> M:
    """
    Generic fork combinator.

    Run f, then g, on the same arguments and pair the results.
    g starts only after f has completed.
    """

    async def run(*args: typing.Any) -> Pair[S, T]:
        left = await f(*args)
        right = await g(*args)
        return pair(left, right)

    return wrap(run)


def unforkM[M, R, S, T](
    f: Callable[..., Awaitable[Pair[S, T]]],
    *,
    wrap: Callable[[Callable[..., Coroutine[typing.Any, typing.Any, Pair[S, T]]]], M],
) -> M:
    """
    Generic unfork combinator.

    (r1, r2) -> (f(r1)[0], f(r2)[1])

    NOTE: f is invoked twice and half of each result is dropped.
    """

    async def run(*args: typing.Any) -> Pair[S, T]:
        *context, (first, second) = args
        left = await f(*context, first)
        right = await f(*context, second)
        return pair(left[0], right[1])

    return wrap(run)


# ============================================================================
# Sugar for Arrow
# ============================================================================


def fork[R, S, T](f: Fn[R, S], g: Fn[R, T]) -> Arrow[R, Pair[S, T]]:
    """Run f, then g, on the same input and pair the results."""

    def run(r: R) -> Pair[S, T]:
        left = f(r)
        right = g(r)
        return pair(left, right)

    return Arrow(run)


def unfork[R, S, T](f: Fn[R, Pair[S, T]]) -> Arrow[Pair[R, R], Pair[S, T]]:
    """(r1, r2) -> (f(r1)[0], f(r2)[1])"""

    def run(p: Pair[R, R]) -> Pair[S, T]:
        first, second = p
        return pair(f(first)[0], f(second)[1])

    return Arrow(run)


# ============================================================================
# Sugar for Suspended
# ============================================================================


def fork_async[R, S, T](
    f: SuspendFn[R, S],
    g: SuspendFn[R, T],
) -> Suspended[R, Pair[S, T]]:
    """Await f, then g, on the same input and pair the results."""
    return forkM(f, g, wrap=Suspended)


def unfork_async[R, S, T](
    f: SuspendFn[R, Pair[S, T]],
) -> Suspended[Pair[R, R], Pair[S, T]]:
    """(r1, r2) -> (f(r1)[0], f(r2)[1]), awaited in that order."""
    return unforkM(f, wrap=Suspended)


# ============================================================================
# Sugar for ScopedSuspended
# ============================================================================


def fork_scoped[R, S, T](
    f: ScopedFn[R, S],
    g: ScopedFn[R, T],
) -> ScopedSuspended[R, Pair[S, T]]:
    """Await f, then g, on the same context and input."""
    return forkM(f, g, wrap=ScopedSuspended)


def unfork_scoped[R, S, T](
    f: ScopedFn[R, Pair[S, T]],
) -> ScopedSuspended[Pair[R, R], Pair[S, T]]:
    """Scoped unfork. Both invocations see the same context."""
    return unforkM(f, wrap=ScopedSuspended)


__all__ = (
    "fork",
    "unfork",
    "fork_async",
    "unfork_async",
    "fork_scoped",
    "unfork_scoped",
    "forkM",
    "unforkM",
)
