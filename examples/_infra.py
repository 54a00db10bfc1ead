from __future__ import annotations

import asyncio
import sys
from collections.abc import Callable, Coroutine
from dataclasses import dataclass, field
from pathlib import Path

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))


@dataclass(frozen=True, slots=True)
class User:
    id: int
    name: str
    is_active: bool = True


def _empty_users() -> dict[int, User]:
    return {}


@dataclass(slots=True)
class Session:
    """Per-request context handed to scoped arrows."""

    name: str
    users: dict[int, User] = field(default_factory=_empty_users)
    queries: list[str] = field(default_factory=list)
    delay_seconds: float = 0.0

    async def fetch_user(self, user_id: int) -> User:
        await asyncio.sleep(self.delay_seconds)
        self.queries.append(f"user:{user_id}")
        return self.users.get(user_id, User(id=user_id, name=f"user:{user_id}@{self.name}"))


def banner(title: str) -> None:  # pragma: no cover (examples only)
    print(f"\n== {title} ==")


def run(main: Callable[[], Coroutine[object, object, None]]) -> None:  # pragma: no cover (examples only)
    asyncio.run(main())
