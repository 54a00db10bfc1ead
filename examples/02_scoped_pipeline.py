from __future__ import annotations

import asyncio

from _infra import Session, User, banner, run

from arrows import Context, ScopedSuspended, cases_scoped, fork_scoped, lift as L


async def fetch_user(session: Context, user_id: int) -> User:
    # Locality: plain async function, the session arrives as an argument.
    return await session.fetch_user(user_id)


async def greet(session: Context, user: User) -> str:
    return f"hello, {user.name} (via {session.name})"


async def reject(session: Context, user: User) -> str:
    return f"user {user.id} is inactive"


async def main() -> None:
    banner("02_scoped_pipeline: one pipeline, many sessions")

    pipeline = ScopedSuspended(fetch_user).then(
        cases_scoped(lambda user: user.is_active, greet, reject)
    )

    primary = Session(name="primary", delay_seconds=0.01)
    replica = Session(name="replica", users={7: User(id=7, name="ghost", is_active=False)})

    # Same arrow, different contexts, run concurrently by the caller.
    results = await asyncio.gather(pipeline(primary, 42), pipeline(replica, 7))
    for line in results:
        print(line)
    print(primary.queries, replica.queries)

    both = fork_scoped(fetch_user, L.up.suspend_on_scope(lambda user_id: user_id * 2))
    print(await both(primary, 1))

    # Fix a context and defer execution as a kungfu LazyCoroResult
    deferred = L.down.lazy_scoped(pipeline, primary, 3)
    print(await deferred)


if __name__ == "__main__":
    run(main)
