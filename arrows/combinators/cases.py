"""
Cases combinators
=================

Комбинаторы для ветвления с wrap паттерном.

cases is the only branching primitive: the predicate is re-evaluated on
every call and nothing is remembered between calls.
"""

from __future__ import annotations

import logging
import typing
from collections.abc import Awaitable, Callable, Coroutine

from .._types import Fn, Predicate, ScopedFn, SuspendFn
from ..morphism import Arrow, ScopedSuspended, Suspended

logger = logging.getLogger(__name__)


# ============================================================================
# Generic combinators (wrap pattern)
# ============================================================================


def casesM[M, S, T](
    predicate: Predicate[S],
    then: Callable[..., Awaitable[T]],
    otherwise: Callable[..., Awaitable[T]],
    *,
    wrap: Callable[[Callable[..., Coroutine[typing.Any, typing.Any, T]]], M],
) -> M:
    """
    Generic cases combinator.

    Test the input (last positional argument) and dispatch to then or
    otherwise with the same arguments.
    """

    async def run(*args: typing.Any) -> T:
        branch = then if predicate(args[-1]) else otherwise
        logger.debug("cases selected %r", branch)
        return await branch(*args)

    return wrap(run)


# ============================================================================
# Sugar for Arrow
# ============================================================================


def cases[S, T](
    predicate: Predicate[S],
    then: Fn[S, T],
    otherwise: Fn[S, T],
) -> Arrow[S, T]:
    """Dispatch to then if predicate(s) holds, else to otherwise."""

    def run(s: S) -> T:
        branch = then if predicate(s) else otherwise
        logger.debug("cases selected %r", branch)
        return branch(s)

    return Arrow(run)


# ============================================================================
# Sugar for Suspended
# ============================================================================


def cases_async[S, T](
    predicate: Predicate[S],
    then: SuspendFn[S, T],
    otherwise: SuspendFn[S, T],
) -> Suspended[S, T]:
    return casesM(predicate, then, otherwise, wrap=Suspended)


# ============================================================================
# Sugar for ScopedSuspended
# ============================================================================


def cases_scoped[S, T](
    predicate: Predicate[S],
    then: ScopedFn[S, T],
    otherwise: ScopedFn[S, T],
) -> ScopedSuspended[S, T]:
    """Predicate sees only the input, never the context."""
    return casesM(predicate, then, otherwise, wrap=ScopedSuspended)


__all__ = ("cases", "cases_async", "cases_scoped", "casesM")
