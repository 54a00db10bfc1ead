"""Arrow

Synchronous arrow: a wrapped total function S -> T.

Structure:
- Category (identity, then / after)
- Functor and contravariant functor (map / co_map)
- Reader applicative (apply) and reader monad (pure / multiply / bind)
- Kleisli arrows (KlArrow) composed by flattening"""

from __future__ import annotations

import typing
from collections.abc import Callable

from .._helpers import identity as _identity


class Arrow[S, T]:
    """Synchronous arrow S -> T.

    Holds exactly one callable and nothing else. Composition never mutates
    the operands, so arrows can be shared freely.

    Laws:
    - Identity: Arrow.identity().then(f) ≡ f ≡ f.then(Arrow.identity())
    - Associativity: f.then(g).then(h) ≡ f.then(g.then(h))
    - Left unit: Arrow.pure(t).bind(f) ≡ f(t)
    - Right unit: m.bind(Arrow.pure) ≡ m
    - Associativity: m.bind(f).bind(g) ≡ m.bind(lambda x: f(x).bind(g))
    """

    __slots__ = ("_fn",)

    def __init__(self, fn: Callable[[S], T], /) -> None:
        """Create Arrow from a plain function."""
        self._fn = fn

    @property
    def fn(self) -> Callable[[S], T]:
        """The wrapped function."""
        return self._fn

    @staticmethod
    def identity[V]() -> Arrow[V, V]:
        """Arrow returning its input unchanged."""
        return Arrow(_identity)

    @staticmethod
    def pure[V](value: V) -> Arrow[typing.Any, V]:
        """Return of the reader monad: constant arrow ignoring its input."""

        def constant(_: typing.Any) -> V:
            return value

        return Arrow(constant)

    # Composition

    def then[U](self, other: Callable[[T], U], /) -> Arrow[S, U]:
        """Left-to-right composition: run self, feed the result to other."""

        def composed(s: S) -> U:
            return other(self._fn(s))

        return Arrow(composed)

    def after[R](self, other: Callable[[R], S], /) -> Arrow[R, T]:
        """
        Mathematical composition self ∘ other ("self after other").

        f.after(g) ≡ g.then(f)
        """
        return Arrow(other).then(self._fn)

    # Functor operations

    def map[U](self, f: Callable[[T], U], /) -> Arrow[S, U]:
        """Post-compose with f. Same source, new target."""
        return self.then(f)

    def co_map[R](self, f: Callable[[R], S], /) -> Arrow[R, T]:
        """Pre-compose with f. New source, same target."""

        def composed(r: R) -> T:
            return self._fn(f(r))

        return Arrow(composed)

    # Applicative operations

    def apply[R, V, U](
        self: Arrow[R, Callable[[V], U]],
        other: Arrow[R, V],
        /,
    ) -> Arrow[R, U]:
        """
        Reader apply.

        Both arrows receive the same input. self runs first and produces
        a function, other runs second and produces its argument.
        """

        def apply_to(f: Callable[[V], U]) -> Arrow[R, U]:
            return other.map(f)

        return self.bind(apply_to)

    # Monad operations

    def multiply[U](self: Arrow[S, Arrow[S, U]]) -> Arrow[S, U]:
        """Diagonal flattening: s -> self(s)(s)."""

        def flattened(s: S) -> U:
            return self._fn(s)(s)

        return Arrow(flattened)

    def bind[U](self, f: Callable[[T], Arrow[S, U]], /) -> Arrow[S, U]:
        """
        Monadic bind (>>=) of the reader monad.

        The arrow produced by f receives the ORIGINAL input:
            s -> f(self(s))(s)
        """
        return self.map(f).multiply()

    # Protocol methods

    def __call__(self, s: S, /) -> T:
        """Invoke the wrapped function."""
        return self._fn(s)

    def __repr__(self) -> str:
        return f"Arrow({self._fn!r})"


class KlArrow[B, S, T](Arrow[S, Arrow[B, T]]):
    """Kleisli arrow S -> Arrow[B, T].

    Composed with times (*) instead of then: the intermediate arrow is
    invoked on the shared input B and the result is flattened.

    Laws:
    - Left unit: KlArrow.unit() * k ≡ k
    - Right unit: k * KlArrow.unit() ≡ k
    - Associativity: (k1 * k2) * k3 ≡ k1 * (k2 * k3)
    """

    __slots__ = ()

    @staticmethod
    def pure[V](value: V) -> KlArrow[typing.Any, typing.Any, V]:
        """Kleisli return: the constant Kleisli arrow k -> Arrow.pure(value)."""

        def constant(_: typing.Any) -> Arrow[typing.Any, V]:
            return Arrow.pure(value)

        return KlArrow(constant)

    @staticmethod
    def unit[V]() -> KlArrow[typing.Any, V, V]:
        """Identity of Kleisli composition: s -> Arrow.pure(s)."""
        return KlArrow(Arrow.pure)

    def times[U](self, other: KlArrow[B, T, U], /) -> KlArrow[B, S, U]:
        """Kleisli multiplication: r -> (self(r) map other).multiply()."""

        def composed(r: S) -> Arrow[B, U]:
            return self._fn(r).map(other.fn).multiply()

        return KlArrow(composed)

    def __mul__[U](self, other: KlArrow[B, T, U], /) -> KlArrow[B, S, U]:
        return self.times(other)

    def __repr__(self) -> str:
        return f"KlArrow({self._fn!r})"


# Module-level forms


def by[S, T](arrow: Arrow[S, T]) -> Callable[[S], T]:
    """Accessor for the wrapped function."""
    return arrow.fn


def o[R, S, T](f: Callable[[S], T], g: Callable[[R], S]) -> Callable[[R], T]:
    """Raw function composition f ∘ g: r -> f(g(r))."""

    def composed(r: R) -> T:
        return f(g(r))

    return composed


def identity[T]() -> Arrow[T, T]:
    return Arrow.identity()


def compose[S, T, U](first: Arrow[S, T], second: Arrow[T, U]) -> Arrow[S, U]:
    """first, then second."""
    return first.then(second.fn)


def after[R, S, T](second: Arrow[S, T], first: Arrow[R, S]) -> Arrow[R, T]:
    """second ∘ first. after(g, f) ≡ compose(f, g)."""
    return second.after(first.fn)


def apply[R, S, T](
    fn_arrow: Arrow[R, Callable[[S], T]],
) -> Callable[[Arrow[R, S]], Arrow[R, T]]:
    """Curried apply: returns the lifted function Arrow[R, S] -> Arrow[R, T]."""

    def applied(other: Arrow[R, S]) -> Arrow[R, T]:
        return fn_arrow.apply(other)

    return applied


def return_value[T](value: T) -> Arrow[typing.Any, T]:
    return Arrow.pure(value)


def multiply[S, T](nested: Arrow[S, Arrow[S, T]]) -> Arrow[S, T]:
    return nested.multiply()


def bind[S, T, U](arrow: Arrow[S, T], f: Callable[[T], Arrow[S, U]]) -> Arrow[S, U]:
    return arrow.bind(f)


def kleisli_return[T](value: T) -> KlArrow[typing.Any, typing.Any, T]:
    return KlArrow.pure(value)


def kleisli_multiply[B, R, S, T](
    first: KlArrow[B, R, S],
    second: KlArrow[B, S, T],
) -> KlArrow[B, R, T]:
    return first.times(second)


__all__ = (
    "Arrow",
    "KlArrow",
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
