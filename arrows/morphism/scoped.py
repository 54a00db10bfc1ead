"""ScopedSuspended

Asynchronous arrow that receives a caller-supplied context at every call:
    value = await arrow(context, s)

The context (a TaskGroup, a session, any handle) is borrowed, never stored.
Composition threads the same context through every step; it changes only
when the caller fixes one explicitly with on_scope."""

from __future__ import annotations

import logging
import typing
from collections.abc import Awaitable, Callable

from .._types import Context, ScopedFn
from .suspended import KlSuspended, Suspended

logger = logging.getLogger(__name__)


class ScopedSuspended[S, T]:
    """Context-threaded suspending arrow S -> T.

    Laws hold pointwise for every context c:
    - Identity: ScopedSuspended.identity().then(f) ≡ f ≡ f.then(ScopedSuspended.identity())
    - Associativity: f.then(g).then(h) ≡ f.then(g.then(h))
    - Left unit: ScopedSuspended.pure(t).bind(f) ≡ await f(c, t)
    """

    __slots__ = ("_fn",)

    def __init__(self, fn: ScopedFn[S, T], /) -> None:
        """Create ScopedSuspended from a fn (context, s) -> awaitable."""
        self._fn = fn

    @property
    def fn(self) -> ScopedFn[S, T]:
        """The wrapped scoped function."""
        return self._fn

    @staticmethod
    def identity[V]() -> ScopedSuspended[V, V]:
        """Arrow returning its input unchanged."""
        return ScopedSuspended(identity_fn())

    @staticmethod
    def pure[V](value: V) -> ScopedSuspended[typing.Any, V]:
        """Constant arrow ignoring both context and input."""

        async def constant(context: Context, _: typing.Any) -> V:
            return value

        return ScopedSuspended(constant)

    # Composition

    def then[U](self, other: ScopedFn[T, U], /) -> ScopedSuspended[S, U]:
        """Run self, then other, both on the same context."""

        async def composed(context: Context, s: S) -> U:
            return await other(context, await self._fn(context, s))

        return ScopedSuspended(composed)

    def after[R](self, other: ScopedFn[R, S], /) -> ScopedSuspended[R, T]:
        """self ∘ other. f.after(g) ≡ g.then(f)"""
        return ScopedSuspended(other).then(self._fn)

    # Functor operations

    def map[U](self, f: ScopedFn[T, U], /) -> ScopedSuspended[S, U]:
        """Post-compose with scoped f."""
        return self.then(f)

    def co_map[R](self, f: ScopedFn[R, S], /) -> ScopedSuspended[R, T]:
        """Pre-compose with scoped f."""

        async def composed(context: Context, r: R) -> T:
            return await self._fn(context, await f(context, r))

        return ScopedSuspended(composed)

    # Applicative operations

    def apply[R, V, U](
        self: ScopedSuspended[R, ScopedFn[V, U]],
        other: ScopedSuspended[R, V],
        /,
    ) -> ScopedSuspended[R, U]:
        """
        Reader apply.

        Context and input are both duplicated across the operands.
        self runs first, other second.
        """

        async def applied(context: Context, r: R) -> U:
            f = await self._fn(context, r)
            v = await other(context, r)
            return await f(context, v)

        return ScopedSuspended(applied)

    # Monad operations

    def multiply[U](
        self: ScopedSuspended[S, ScopedSuspended[S, U]],
    ) -> ScopedSuspended[S, U]:
        """Diagonal flattening on the same context."""

        async def flattened(context: Context, s: S) -> U:
            inner = await self._fn(context, s)
            return await inner(context, s)

        return ScopedSuspended(flattened)

    def bind[U](
        self,
        f: Callable[[Context, T], Awaitable[ScopedSuspended[S, U]]],
        /,
    ) -> ScopedSuspended[S, U]:
        """Monadic bind. The arrow produced by f receives the original input."""
        return self.map(f).multiply()

    # Conversions

    def on_scope(self, context: Context, /) -> Suspended[S, T]:
        """Fix one context, yielding a Suspended arrow."""
        logger.debug("Binding %r to context %r", self, context)

        async def bound(s: S) -> T:
            return await self._fn(context, s)

        return Suspended(bound)

    to_async = on_scope

    def as_kleisli_over_context(self) -> KlSuspended[Context, S, T]:
        """
        Reinterpret as a Kleisli arrow whose base is the context.

        s -> Suspended(context -> self(context, s))
        """

        async def lifted(s: S) -> Suspended[Context, T]:
            async def on(context: Context) -> T:
                return await self._fn(context, s)

            return Suspended(on)

        return KlSuspended(lifted)

    # Protocol methods

    def __call__(self, context: Context, s: S, /) -> Awaitable[T]:
        """Invoke the wrapped function on the given context."""
        return self._fn(context, s)

    def __repr__(self) -> str:
        return f"ScopedSuspended({self._fn!r})"


class KlScopedSuspended[B, S, T](ScopedSuspended[S, ScopedSuspended[B, T]]):
    """Kleisli arrow S -> ScopedSuspended[B, T].

    The intermediate arrow is awaited on the same context as the outer call.
    """

    __slots__ = ()

    @staticmethod
    def pure[V](value: V) -> KlScopedSuspended[typing.Any, typing.Any, V]:
        """Kleisli return: k -> ScopedSuspended.pure(value)."""

        async def constant(context: Context, _: typing.Any) -> ScopedSuspended[typing.Any, V]:
            return ScopedSuspended.pure(value)

        return KlScopedSuspended(constant)

    @staticmethod
    def unit[V]() -> KlScopedSuspended[typing.Any, V, V]:
        """Identity of Kleisli composition: s -> ScopedSuspended.pure(s)."""

        async def returned(context: Context, v: V) -> ScopedSuspended[typing.Any, V]:
            return ScopedSuspended.pure(v)

        return KlScopedSuspended(returned)

    def times[U](
        self,
        other: KlScopedSuspended[B, T, U],
        /,
    ) -> KlScopedSuspended[B, S, U]:
        """Kleisli multiplication within one context."""

        async def composed(context: Context, r: S) -> ScopedSuspended[B, U]:
            intermediate = await self._fn(context, r)
            return intermediate.map(other.fn).multiply()

        return KlScopedSuspended(composed)

    def __mul__[U](
        self,
        other: KlScopedSuspended[B, T, U],
        /,
    ) -> KlScopedSuspended[B, S, U]:
        return self.times(other)

    def __repr__(self) -> str:
        return f"KlScopedSuspended({self._fn!r})"


# Module-level forms


def identity_fn[T]() -> ScopedFn[T, T]:
    """Raw scoped identity function."""

    async def same(context: Context, t: T) -> T:
        return t

    return same


def by[S, T](arrow: ScopedSuspended[S, T]) -> ScopedFn[S, T]:
    return arrow.fn


def o[R, S, T](f: ScopedFn[S, T], g: ScopedFn[R, S]) -> ScopedFn[R, T]:
    """Raw composition of scoped functions. Both receive the same context."""

    async def composed(context: Context, r: R) -> T:
        return await f(context, await g(context, r))

    return composed


def evolve[S](context: Context, data: S) -> tuple[Context, S]:
    """
    Pair data with the context it should evolve on.

    Use together with evolve_by:
        result = await evolve_by(evolve(group, 3), arrow)
    """
    return (context, data)


async def evolve_by[S, T](evolved: tuple[Context, S], arrow: ScopedSuspended[S, T]) -> T:
    """Run arrow on an explicit (context, data) pair."""
    context, data = evolved
    return await arrow(context, data)


def identity[T]() -> ScopedSuspended[T, T]:
    return ScopedSuspended.identity()


def compose[S, T, U](
    first: ScopedSuspended[S, T],
    second: ScopedSuspended[T, U],
) -> ScopedSuspended[S, U]:
    return first.then(second.fn)


def after[R, S, T](
    second: ScopedSuspended[S, T],
    first: ScopedSuspended[R, S],
) -> ScopedSuspended[R, T]:
    return second.after(first.fn)


def apply[R, S, T](
    fn_arrow: ScopedSuspended[R, ScopedFn[S, T]],
) -> Callable[[ScopedSuspended[R, S]], ScopedSuspended[R, T]]:
    """Curried apply."""

    def applied(other: ScopedSuspended[R, S]) -> ScopedSuspended[R, T]:
        return fn_arrow.apply(other)

    return applied


def return_value[T](value: T) -> ScopedSuspended[typing.Any, T]:
    return ScopedSuspended.pure(value)


def multiply[S, T](
    nested: ScopedSuspended[S, ScopedSuspended[S, T]],
) -> ScopedSuspended[S, T]:
    return nested.multiply()


def bind[S, T, U](
    arrow: ScopedSuspended[S, T],
    f: Callable[[Context, T], Awaitable[ScopedSuspended[S, U]]],
) -> ScopedSuspended[S, U]:
    return arrow.bind(f)


def on_scope[S, T](arrow: ScopedSuspended[S, T], context: Context) -> Suspended[S, T]:
    return arrow.on_scope(context)


def as_kleisli_over_context[S, T](
    arrow: ScopedSuspended[S, T],
) -> KlSuspended[Context, S, T]:
    return arrow.as_kleisli_over_context()


def kleisli_return[T](value: T) -> KlScopedSuspended[typing.Any, typing.Any, T]:
    return KlScopedSuspended.pure(value)


def kleisli_multiply[B, R, S, T](
    first: KlScopedSuspended[B, R, S],
    second: KlScopedSuspended[B, S, T],
) -> KlScopedSuspended[B, R, T]:
    return first.times(second)


__all__ = (
    "ScopedSuspended",
    "KlScopedSuspended",
    "identity_fn",
    "by",
    "o",
    "evolve",
    "evolve_by",
    "identity",
    "compose",
    "after",
    "apply",
    "return_value",
    "multiply",
    "bind",
    "on_scope",
    "as_kleisli_over_context",
    "kleisli_return",
    "kleisli_multiply",
)
