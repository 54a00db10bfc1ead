"""
Core type definitions for arrows.

Типы и алиасы используемые по всей библиотеке.
"""

from __future__ import annotations

import typing
from collections.abc import Awaitable, Callable

# ============================================================================
# Callable shapes (one per flavor)
# ============================================================================

# Fn = plain synchronous function
type Fn[S, T] = Callable[[S], T]

# SuspendFn = function that may suspend before producing a result
type SuspendFn[S, T] = Callable[[S], Awaitable[T]]

# ScopedFn = suspending function that is handed a context at every call
type ScopedFn[S, T] = Callable[[Context, S], Awaitable[T]]

# ============================================================================
# Type aliases
# ============================================================================

# Context = opaque execution environment (TaskGroup, session, ...)
# NOTE: Arrows never store it. It is borrowed for the duration of one call.
type Context = typing.Any

# Predicate = function that tests a value
type Predicate[T] = Callable[[T], bool]

# Pair = product of two values
type Pair[A, B] = tuple[A, B]

# NoError = type representing "never fails" semantic
type NoError = typing.Never

__all__ = (
    # Callable shapes
    "Fn",
    "SuspendFn",
    "ScopedFn",
    # Type aliases
    "Context",
    "Predicate",
    "Pair",
    "NoError",
)
