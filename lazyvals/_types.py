"""
Core type definitions for lazyvals.

Типы и алиасы используемые по всей библиотеке.
"""

from __future__ import annotations

import typing
from collections.abc import Callable, Iterable

if typing.TYPE_CHECKING:
    from .value.core import Value

# ============================================================================
# Type aliases
# ============================================================================

# Thunk = zero-arg computation, evaluated at most once by a Value
type Thunk[T] = Callable[[], T]

# Check = plain function that tests an item
type Check[T] = Callable[[T], bool]

# Operation = left-fold step (accumulator, item) -> accumulator
type Operation[A, T] = Callable[[A, T], A]

# ============================================================================
# Value shortcuts
# ============================================================================

# MultiValue = Value carrying 0..n items
type MultiValue[T] = Value[Iterable[T]]

# Maybe = Value that may or may not carry an item
type Maybe[T] = Value[T | None]

# Predicate = boolean Value
type Predicate = Value[bool]

__all__ = (
    "Thunk",
    "Check",
    "Operation",
    "MultiValue",
    "Maybe",
    "Predicate",
)
