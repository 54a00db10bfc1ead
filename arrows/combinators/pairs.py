"""
Pair combinators
================

swap and uncurry for functions on pairs.
"""

from __future__ import annotations

import typing
from collections.abc import Awaitable, Callable, Coroutine

from .._helpers import swapped
from .._types import Context, Fn, Pair, ScopedFn, SuspendFn
from ..morphism import Arrow, ScopedSuspended, Suspended


# ============================================================================
# Generic combinators (wrap pattern)
# ============================================================================


def swapM[M, T](
    f: Callable[..., Awaitable[T]],
    *,
    wrap: Callable[[Callable[..., Coroutine[typing.Any, typing.Any, T]]], M],
) -> M:
    """
    Generic swap combinator.

    (s, r) -> f((r, s))
    """

    async def run(*args: typing.Any) -> T:
        *context, p = args
        return await f(*context, swapped(p))

    return wrap(run)


def uncurryM[M, T](
    f: Callable[..., Awaitable[Callable[..., Awaitable[T]]]],
    *,
    wrap: Callable[[Callable[..., Coroutine[typing.Any, typing.Any, T]]], M],
) -> M:
    """
    Generic uncurry combinator.

    (r, s) -> f(r)(s). The context, if any, is handed to both stages.
    """

    async def run(*args: typing.Any) -> T:
        *context, (r, s) = args
        curried = await f(*context, r)
        return await curried(*context, s)

    return wrap(run)


# ============================================================================
# Sugar for Arrow
# ============================================================================


def swap[R, S, T](f: Fn[Pair[R, S], T]) -> Arrow[Pair[S, R], T]:
    """(s, r) -> f((r, s)). swap(swap(f)) ≡ f"""

    def run(p: Pair[S, R]) -> T:
        return f(swapped(p))

    return Arrow(run)


def uncurry[R, S, T](f: Fn[R, Fn[S, T]]) -> Arrow[Pair[R, S], T]:
    """(r, s) -> f(r)(s)"""

    def run(p: Pair[R, S]) -> T:
        r, s = p
        return f(r)(s)

    return Arrow(run)


# ============================================================================
# Sugar for Suspended
# ============================================================================


def swap_async[R, S, T](f: SuspendFn[Pair[R, S], T]) -> Suspended[Pair[S, R], T]:
    return swapM(f, wrap=Suspended)


def uncurry_async[R, S, T](
    f: Callable[[R], Awaitable[SuspendFn[S, T]]],
) -> Suspended[Pair[R, S], T]:
    """(r, s) -> await (await f(r))(s)"""
    return uncurryM(f, wrap=Suspended)


# ============================================================================
# Sugar for ScopedSuspended
# ============================================================================


def swap_scoped[R, S, T](f: ScopedFn[Pair[R, S], T]) -> ScopedSuspended[Pair[S, R], T]:
    return swapM(f, wrap=ScopedSuspended)


def uncurry_scoped[R, S, T](
    f: Callable[[Context, R], Awaitable[ScopedFn[S, T]]],
) -> ScopedSuspended[Pair[R, S], T]:
    """(c, (r, s)) -> await (await f(c, r))(c, s)"""
    return uncurryM(f, wrap=ScopedSuspended)


__all__ = (
    "swap",
    "uncurry",
    "swap_async",
    "uncurry_async",
    "swap_scoped",
    "uncurry_scoped",
    "swapM",
    "uncurryM",
)
