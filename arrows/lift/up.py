"""
Подъем функций и стрелок в более богатый flavor.

Arrow -> Suspended -> ScopedSuspended, plus the bridge from kungfu lazy
results into Suspended arrows.
"""

from __future__ import annotations

from collections.abc import Callable

from kungfu import LazyCoroResult, Result

from .._types import Context, Fn, ScopedFn, SuspendFn
from ..morphism import Arrow, ScopedSuspended, Suspended


def suspend[S, T](f: Fn[S, T]) -> SuspendFn[S, T]:
    """
    Lift plain function into a suspending one.

    **When to use:** map/bind on Suspended take suspending functions; wrap
    your plain ones with this.

    Example:
        from arrows import Suspended, lift as L

        doubled = Suspended.identity().map(L.up.suspend(lambda x: x * 2))
        await doubled(4)  # 8
    """

    async def run(s: S) -> T:
        return f(s)

    return run


def suspend_on_scope[S, T](f: Fn[S, T]) -> ScopedFn[S, T]:
    """
    Lift plain function into a scoped one that ignores the context.

    **Grammar:** `L.up.suspend_on_scope(f)` reads as "lift up f, suspended on a scope"
    """

    async def run(context: Context, s: S) -> T:
        return f(s)

    return run


def ignore_scope[S, T](f: SuspendFn[S, T]) -> ScopedFn[S, T]:
    """Lift suspending function into a scoped one that ignores the context."""

    async def run(context: Context, s: S) -> T:
        return await f(s)

    return run


def to_suspended[S, T](arrow: Arrow[S, T]) -> Suspended[S, T]:
    """Arrow -> Suspended with the same results."""
    return Suspended(suspend(arrow.fn))


def to_scoped[S, T](arrow: Suspended[S, T]) -> ScopedSuspended[S, T]:
    """Suspended -> ScopedSuspended that accepts and ignores any context."""
    return ScopedSuspended(ignore_scope(arrow.fn))


def from_lazy[S, T, E](
    f: Callable[[S], LazyCoroResult[T, E]],
) -> Suspended[S, Result[T, E]]:
    """
    Turn a function producing kungfu LazyCoroResult into a Suspended arrow.

    **When to use:** When existing code returns LazyCoroResult and you want
    to compose it with arrows. The Result is passed through as the value,
    Error included.

    Example:
        from arrows import lift as L

        fetch = L.up.from_lazy(fetch_user)          # Suspended[int, Result[User, E]]
        names = fetch.map(L.up.suspend(lambda r: r.map(lambda u: u.name)))
    """

    async def run(s: S) -> Result[T, E]:
        return await f(s)

    return Suspended(run)


__all__ = (
    "suspend",
    "suspend_on_scope",
    "ignore_scope",
    "to_suspended",
    "to_scoped",
    "from_lazy",
)
