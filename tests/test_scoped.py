from __future__ import annotations

import asyncio
from dataclasses import dataclass, field

import pytest

from arrows import Context, ScopedSuspended, Suspended, lift as L, scoped

SAMPLES = [-3, 0, 1, 7, 42]


@dataclass(slots=True)
class Scope:
    name: str
    seen: list[str] = field(default_factory=list)


async def inc(context: Context, x: int) -> int:
    context.seen.append("inc")
    return x + 1


async def double(context: Context, x: int) -> int:
    await asyncio.sleep(0)
    context.seen.append("double")
    return x * 2


async def tag(context: Context, x: int) -> str:
    return f"{context.name}:{x}"


class Boom(Exception):
    pass


async def explode(context: Context, x: int) -> int:
    raise Boom(context.name, x)


class TestContextThreading:
    @pytest.mark.asyncio
    async def test_same_context_reaches_every_step(self) -> None:
        scope = Scope("a")
        pipeline = ScopedSuspended(inc).then(double).map(tag)
        assert await pipeline(scope, 3) == "a:8"
        assert scope.seen == ["inc", "double"]

    @pytest.mark.asyncio
    async def test_context_is_not_retained_between_calls(self) -> None:
        pipeline = ScopedSuspended(inc).then(tag)
        assert await pipeline(Scope("first"), 1) == "first:2"
        assert await pipeline(Scope("second"), 1) == "second:2"

    @pytest.mark.asyncio
    async def test_concurrent_calls_with_different_contexts(self) -> None:
        pipeline = ScopedSuspended(double).then(tag)
        left, right = Scope("left"), Scope("right")
        results = await asyncio.gather(pipeline(left, 1), pipeline(right, 2))
        assert results == ["left:2", "right:4"]
        assert left.seen == ["double"]
        assert right.seen == ["double"]

    @pytest.mark.asyncio
    async def test_task_group_as_context(self) -> None:
        async def spawn(group: asyncio.TaskGroup, x: int) -> asyncio.Task[int]:
            return group.create_task(asyncio.sleep(0, result=x * 3))

        async def join(group: asyncio.TaskGroup, task: asyncio.Task[int]) -> int:
            return await task

        pipeline = ScopedSuspended(spawn).then(join)
        async with asyncio.TaskGroup() as group:
            assert await pipeline(group, 5) == 15

    @pytest.mark.asyncio
    async def test_evolve_by(self) -> None:
        scope = Scope("e")
        arrow = ScopedSuspended(tag)
        evolved = scoped.evolve(scope, 9)
        assert evolved == (scope, 9)
        assert await scoped.evolve_by(evolved, arrow) == "e:9"


class TestCategory:
    @pytest.mark.asyncio
    async def test_compose_and_after(self) -> None:
        f, g = ScopedSuspended(inc), ScopedSuspended(double)
        assert await scoped.compose(f, g)(Scope("c"), 3) == 8
        assert await g.after(f)(Scope("c"), 3) == 8
        assert await scoped.after(g, f)(Scope("c"), 3) == 8

    @pytest.mark.asyncio
    async def test_identity_laws(self) -> None:
        f = ScopedSuspended(double)
        for x in SAMPLES:
            expected = await f(Scope("i"), x)
            assert await scoped.identity().then(f)(Scope("i"), x) == expected
            assert await f.then(scoped.identity_fn())(Scope("i"), x) == expected

    @pytest.mark.asyncio
    async def test_associativity(self) -> None:
        f, g, h = ScopedSuspended(inc), ScopedSuspended(double), ScopedSuspended(tag)
        for x in SAMPLES:
            left = await f.then(g).then(h)(Scope("s"), x)
            right = await f.then(g.then(h))(Scope("s"), x)
            assert left == right

    @pytest.mark.asyncio
    async def test_co_map(self) -> None:
        arrow = ScopedSuspended(tag).co_map(double)
        assert await arrow(Scope("m"), 4) == "m:8"


class TestApplicative:
    @pytest.mark.asyncio
    async def test_apply_duplicates_context_and_input(self) -> None:
        async def make_fn(context: Context, r: int):
            context.seen.append("fn")

            async def add(inner: Context, s: int) -> str:
                assert inner is context
                return f"{inner.name}:{r + s}"

            return add

        async def make_value(context: Context, r: int) -> int:
            context.seen.append("value")
            return r * r

        scope = Scope("ap")
        fn_arrow = ScopedSuspended(make_fn)
        assert await fn_arrow.apply(ScopedSuspended(make_value))(scope, 3) == "ap:12"
        assert await scoped.apply(fn_arrow)(ScopedSuspended(make_value))(scope, 2) == "ap:6"
        assert scope.seen == ["fn", "value", "fn", "value"]

    @pytest.mark.asyncio
    async def test_consistent_with_map(self) -> None:
        v = ScopedSuspended(inc)
        for x in SAMPLES:
            left = await ScopedSuspended.pure(double).apply(v)(Scope("x"), x)
            right = await v.map(double)(Scope("x"), x)
            assert left == right


class TestMonad:
    @pytest.mark.asyncio
    async def test_bind_resupplies_input_and_context(self) -> None:
        async def f(context: Context, t: int) -> ScopedSuspended[int, tuple[str, int, int]]:
            async def pairing(inner: Context, s: int) -> tuple[str, int, int]:
                return (inner.name, t, s)

            return ScopedSuspended(pairing)

        assert await ScopedSuspended(double).bind(f)(Scope("b"), 5) == ("b", 10, 5)

    @pytest.mark.asyncio
    async def test_unit_laws(self) -> None:
        async def f(context: Context, t: int) -> ScopedSuspended[int, int]:
            return ScopedSuspended(L.up.suspend_on_scope(lambda s: s - t))

        async def returned(context: Context, t: int) -> ScopedSuspended[int, int]:
            return ScopedSuspended.pure(t)

        m = ScopedSuspended(double)
        for x in SAMPLES:
            scope = Scope("u")
            assert await scoped.bind(scoped.return_value(7), f)(scope, x) == await (await f(scope, 7))(scope, x)
            assert await m.bind(returned)(Scope("u"), x) == await m(Scope("u"), x)

    @pytest.mark.asyncio
    async def test_multiply(self) -> None:
        async def outer(context: Context, s: int) -> ScopedSuspended[int, str]:
            async def inner(c: Context, s2: int) -> str:
                return f"{c.name}:{s * 10 + s2}"

            return ScopedSuspended(inner)

        assert await scoped.multiply(ScopedSuspended(outer))(Scope("mu"), 3) == "mu:33"


class TestConversions:
    @pytest.mark.asyncio
    async def test_on_scope_fixes_context(self) -> None:
        scope = Scope("fixed")
        local = ScopedSuspended(inc).then(tag).on_scope(scope)
        assert isinstance(local, Suspended)
        assert await local(1) == "fixed:2"
        assert scope.seen == ["inc"]

    @pytest.mark.asyncio
    async def test_to_async_alias(self) -> None:
        scope = Scope("alias")
        assert await ScopedSuspended(tag).to_async(scope)(3) == "alias:3"
        assert await scoped.on_scope(ScopedSuspended(tag), scope)(4) == "alias:4"

    @pytest.mark.asyncio
    async def test_as_kleisli_over_context(self) -> None:
        kl = scoped.as_kleisli_over_context(ScopedSuspended(tag))
        on_input = await kl(5)
        assert await on_input(Scope("k1")) == "k1:5"
        assert await on_input(Scope("k2")) == "k2:5"


class TestFailTransparency:
    @pytest.mark.asyncio
    async def test_failure_propagates_unchanged(self) -> None:
        async def k(context: Context, t: int) -> ScopedSuspended[int, int]:
            return ScopedSuspended.pure(t)

        f = ScopedSuspended(explode)
        for pipeline in (scoped.compose(f, ScopedSuspended(inc)), f.map(double), f.bind(k)):
            with pytest.raises(Boom) as info:
                await pipeline(Scope("err"), 3)
            assert info.value.args == ("err", 3)


class TestFunctorLaws:
    @pytest.mark.asyncio
    async def test_map_identity(self) -> None:
        f = ScopedSuspended(double)
        for x in SAMPLES:
            assert await f.map(scoped.identity_fn())(Scope("f"), x) == await f(Scope("f"), x)

    @pytest.mark.asyncio
    async def test_map_composition(self) -> None:
        f = ScopedSuspended(inc)
        for x in SAMPLES:
            left = await f.map(double).map(tag)(Scope("f"), x)
            right = await f.map(ScopedSuspended(double).then(tag))(Scope("f"), x)
            assert left == right == f"f:{(x + 1) * 2}"


class TestApplicativeLaws:
    @staticmethod
    def curried(op):
        async def outer(context: Context, r: int):
            async def inner(c: Context, s: int) -> int:
                return op(r, s)

            return inner

        return ScopedSuspended(outer)

    @pytest.mark.asyncio
    async def test_identity_law(self) -> None:
        w = ScopedSuspended(inc)
        same = ScopedSuspended.pure(scoped.identity_fn())
        for x in SAMPLES:
            assert await same.apply(w)(Scope("a"), x) == await w(Scope("a"), x)

    @pytest.mark.asyncio
    async def test_interchange_law(self) -> None:
        u = self.curried(lambda r, s: r * s)

        async def at_three(context: Context, f):
            return await f(context, 3)

        for x in SAMPLES:
            left = await u.apply(ScopedSuspended.pure(3))(Scope("a"), x)
            right = await ScopedSuspended.pure(at_three).apply(u)(Scope("a"), x)
            assert left == right

    @pytest.mark.asyncio
    async def test_composition_law(self) -> None:
        u = self.curried(lambda r, s: r * s)
        v = self.curried(lambda r, s: s + r)
        w = ScopedSuspended(inc)

        async def compose(context: Context, f):
            async def with_g(c: Context, g):
                return scoped.o(f, g)

            return with_g

        for x in SAMPLES:
            left = await ScopedSuspended.pure(compose).apply(u).apply(v).apply(w)(Scope("a"), x)
            right = await u.apply(v.apply(w))(Scope("a"), x)
            assert left == right


class TestMonadLaws:
    @pytest.mark.asyncio
    async def test_associativity(self) -> None:
        async def f(context: Context, t: int) -> ScopedSuspended[int, int]:
            return ScopedSuspended(L.up.suspend_on_scope(lambda s: t * s))

        async def g(context: Context, t: int) -> ScopedSuspended[int, str]:
            async def labelled(c: Context, s: int) -> str:
                return f"{c.name}:{t - s}"

            return ScopedSuspended(labelled)

        async def f_then_g(context: Context, t: int) -> ScopedSuspended[int, str]:
            return (await f(context, t)).bind(g)

        m = ScopedSuspended(inc)
        for x in SAMPLES:
            left = await m.bind(f).bind(g)(Scope("m"), x)
            right = await m.bind(f_then_g)(Scope("m"), x)
            assert left == right


class TestRawComposition:
    @pytest.mark.asyncio
    async def test_o_threads_one_context(self) -> None:
        scope = Scope("o")
        assert await scoped.o(tag, double)(scope, 4) == "o:8"
        assert scope.seen == ["double"]
        for x in SAMPLES:
            left = await scoped.o(double, inc)(Scope("o"), x)
            assert left == await ScopedSuspended(inc).then(double)(Scope("o"), x)
