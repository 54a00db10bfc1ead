"""
Lift helpers with semantic namespaces.

    from arrows import lift as L

Architecture:
- L.up.*    - подъем функций и стрелок (Arrow -> Suspended -> ScopedSuspended)
- L.down.*  - фиксация контекста и отложенный запуск (LazyCoroResult)

Examples:
    from arrows import lift as L

    step = L.up.suspend(lambda x: x + 1)
    local = L.down.on_scope(scoped_pipeline, group)
    result = await L.down.lazy(local, 41)  # Ok(...)
"""

from __future__ import annotations

from . import down, up
from .down import lazy, lazy_scoped, on_scope
from .up import (
    from_lazy,
    ignore_scope,
    suspend,
    suspend_on_scope,
    to_scoped,
    to_suspended,
)

__all__ = (
    # Namespaces
    "up",
    "down",
    # Up
    "suspend",
    "suspend_on_scope",
    "ignore_scope",
    "to_suspended",
    "to_scoped",
    "from_lazy",
    # Down
    "on_scope",
    "lazy",
    "lazy_scoped",
)
