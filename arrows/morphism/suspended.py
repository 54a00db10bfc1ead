"""Suspended

Asynchronous arrow: a wrapped function S -> Awaitable[T].

Same algebra as Arrow. Every callable handed to an operation is itself
suspending, and operands always run one after another on the caller's
flow. The algebra never spawns tasks."""

from __future__ import annotations

import typing
from collections.abc import Awaitable, Callable

from .._types import SuspendFn


class Suspended[S, T]:
    """Suspending arrow S -> T.

    Invocation is a single logical suspension point:
        value = await arrow(s)

    Laws (compared on awaited results):
    - Identity: Suspended.identity().then(f) ≡ f ≡ f.then(Suspended.identity())
    - Associativity: f.then(g).then(h) ≡ f.then(g.then(h))
    - Left unit: Suspended.pure(t).bind(f) ≡ await f(t)
    - Right unit: m.bind(suspend(Suspended.pure)) ≡ m
    """

    __slots__ = ("_fn",)

    def __init__(self, fn: SuspendFn[S, T], /) -> None:
        """Create Suspended from a fn returning awaitable."""
        self._fn = fn

    @property
    def fn(self) -> SuspendFn[S, T]:
        """The wrapped suspending function."""
        return self._fn

    @staticmethod
    def identity[V]() -> Suspended[V, V]:
        """Arrow returning its input unchanged."""

        async def same(v: V) -> V:
            return v

        return Suspended(same)

    @staticmethod
    def pure[V](value: V) -> Suspended[typing.Any, V]:
        """Constant arrow ignoring its input."""

        async def constant(_: typing.Any) -> V:
            return value

        return Suspended(constant)

    # Composition

    def then[U](self, other: SuspendFn[T, U], /) -> Suspended[S, U]:
        """Run self, then feed the result to other."""

        async def composed(s: S) -> U:
            return await other(await self._fn(s))

        return Suspended(composed)

    def after[R](self, other: SuspendFn[R, S], /) -> Suspended[R, T]:
        """self ∘ other. f.after(g) ≡ g.then(f)"""
        return Suspended(other).then(self._fn)

    # Functor operations

    def map[U](self, f: SuspendFn[T, U], /) -> Suspended[S, U]:
        """Post-compose with suspending f."""
        return self.then(f)

    def co_map[R](self, f: SuspendFn[R, S], /) -> Suspended[R, T]:
        """Pre-compose with suspending f."""

        async def composed(r: R) -> T:
            return await self._fn(await f(r))

        return Suspended(composed)

    # Applicative operations

    def apply[R, V, U](
        self: Suspended[R, SuspendFn[V, U]],
        other: Suspended[R, V],
        /,
    ) -> Suspended[R, U]:
        """
        Reader apply.

        self is awaited first, other second, then the produced function
        is awaited on the produced value. No concurrency between operands.
        """

        async def applied(r: R) -> U:
            f = await self._fn(r)
            v = await other(r)
            return await f(v)

        return Suspended(applied)

    # Monad operations

    def multiply[U](self: Suspended[S, Suspended[S, U]]) -> Suspended[S, U]:
        """Diagonal flattening: s -> await (await self(s))(s)."""

        async def flattened(s: S) -> U:
            inner = await self._fn(s)
            return await inner(s)

        return Suspended(flattened)

    def bind[U](
        self,
        f: Callable[[T], Awaitable[Suspended[S, U]]],
        /,
    ) -> Suspended[S, U]:
        """Monadic bind. The arrow produced by f receives the original input."""
        return self.map(f).multiply()

    # Protocol methods

    def __call__(self, s: S, /) -> Awaitable[T]:
        """Invoke the wrapped function, returning awaitable."""
        return self._fn(s)

    def __repr__(self) -> str:
        return f"Suspended({self._fn!r})"


class KlSuspended[B, S, T](Suspended[S, Suspended[B, T]]):
    """Kleisli arrow S -> Suspended[B, T].

    times awaits the intermediate arrow on the shared input B before
    handing its value to the next Kleisli arrow.
    """

    __slots__ = ()

    @staticmethod
    def pure[V](value: V) -> KlSuspended[typing.Any, typing.Any, V]:
        """Kleisli return: k -> Suspended.pure(value)."""

        async def constant(_: typing.Any) -> Suspended[typing.Any, V]:
            return Suspended.pure(value)

        return KlSuspended(constant)

    @staticmethod
    def unit[V]() -> KlSuspended[typing.Any, V, V]:
        """Identity of Kleisli composition: s -> Suspended.pure(s)."""

        async def returned(v: V) -> Suspended[typing.Any, V]:
            return Suspended.pure(v)

        return KlSuspended(returned)

    def times[U](self, other: KlSuspended[B, T, U], /) -> KlSuspended[B, S, U]:
        """Kleisli multiplication: r -> (await self(r) map other).multiply()."""

        async def composed(r: S) -> Suspended[B, U]:
            intermediate = await self._fn(r)
            return intermediate.map(other.fn).multiply()

        return KlSuspended(composed)

    def __mul__[U](self, other: KlSuspended[B, T, U], /) -> KlSuspended[B, S, U]:
        return self.times(other)

    def __repr__(self) -> str:
        return f"KlSuspended({self._fn!r})"


# Module-level forms


def by[S, T](arrow: Suspended[S, T]) -> SuspendFn[S, T]:
    return arrow.fn


def o[R, S, T](f: SuspendFn[S, T], g: SuspendFn[R, S]) -> SuspendFn[R, T]:
    """Raw composition of suspending functions: r -> await f(await g(r))."""

    async def composed(r: R) -> T:
        return await f(await g(r))

    return composed


def identity[T]() -> Suspended[T, T]:
    return Suspended.identity()


def compose[S, T, U](first: Suspended[S, T], second: Suspended[T, U]) -> Suspended[S, U]:
    return first.then(second.fn)


def after[R, S, T](second: Suspended[S, T], first: Suspended[R, S]) -> Suspended[R, T]:
    return second.after(first.fn)


def apply[R, S, T](
    fn_arrow: Suspended[R, SuspendFn[S, T]],
) -> Callable[[Suspended[R, S]], Suspended[R, T]]:
    """Curried apply."""

    def applied(other: Suspended[R, S]) -> Suspended[R, T]:
        return fn_arrow.apply(other)

    return applied


def return_value[T](value: T) -> Suspended[typing.Any, T]:
    return Suspended.pure(value)


def multiply[S, T](nested: Suspended[S, Suspended[S, T]]) -> Suspended[S, T]:
    return nested.multiply()


def bind[S, T, U](
    arrow: Suspended[S, T],
    f: Callable[[T], Awaitable[Suspended[S, U]]],
) -> Suspended[S, U]:
    return arrow.bind(f)


def kleisli_return[T](value: T) -> KlSuspended[typing.Any, typing.Any, T]:
    return KlSuspended.pure(value)


def kleisli_multiply[B, R, S, T](
    first: KlSuspended[B, R, S],
    second: KlSuspended[B, S, T],
) -> KlSuspended[B, R, T]:
    return first.times(second)


__all__ = (
    "Suspended",
    "KlSuspended",
    "by",
    "o",
    "identity",
    "compose",
    "after",
    "apply",
    "return_value",
    "multiply",
    "bind",
    "kleisli_return",
    "kleisli_multiply",
)
