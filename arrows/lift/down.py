"""
Опускание стрелок.

Fix a context, or defer an application as a kungfu LazyCoroResult.
"""

from __future__ import annotations

from kungfu import LazyCoroResult, Ok, Result

from .._types import Context, NoError
from ..morphism import ScopedSuspended, Suspended


def on_scope[S, T](arrow: ScopedSuspended[S, T], context: Context) -> Suspended[S, T]:
    """
    Fix the context of a scoped arrow.

    **Grammar:** `L.down.on_scope(arrow, group)` reads as "bring arrow down onto group"
    """
    return arrow.on_scope(context)


def lazy[S, T](arrow: Suspended[S, T], value: S) -> LazyCoroResult[T, NoError]:
    """
    Defer arrow(value) as a LazyCoroResult.

    Nothing runs until the result is awaited.

    Example:
        from arrows import lift as L

        deferred = L.down.lazy(pipeline, 42)
        result = await deferred  # Ok(...)

    NOTE: Exceptions are NOT converted to Error. They propagate from the await.
    """

    async def run() -> Result[T, NoError]:
        return Ok(await arrow(value))

    return LazyCoroResult(run)


def lazy_scoped[S, T](
    arrow: ScopedSuspended[S, T],
    context: Context,
    value: S,
) -> LazyCoroResult[T, NoError]:
    """Defer arrow(context, value) as a LazyCoroResult."""
    return lazy(arrow.on_scope(context), value)


__all__ = (
    "on_scope",
    "lazy",
    "lazy_scoped",
)
