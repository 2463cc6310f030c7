"""
Single-value transformers
=========================

Trans plus the conditionals derived from it.

NOTE: If/Cond/IfIs не отдельные примитивы, а Trans над булевым значением.
"""

from __future__ import annotations

from collections.abc import Callable

from .._types import Check, Predicate, Thunk
from ..value import Delegated, Val, Value


class Trans[F, T](Val[T]):
    """Pure transform of one value: `lift` == transform(value.lift)."""

    __slots__ = ()

    def __init__(self, value: Value[F], transform: Callable[[F], T]) -> None:
        super().__init__(lambda: transform(value.lift))


class Cond[V](Delegated[bool]):
    """Boolean value: check applied to the lifted value."""

    __slots__ = ()

    def __init__(self, value: Value[V], check: Check[V]) -> None:
        super().__init__(Trans(value, check))


class If[V](Delegated[V]):
    """Run exactly one branch, picked by the predicate."""

    __slots__ = ()

    def __init__(self, predicate: Predicate, on_true: Thunk[V], on_false: Thunk[V]) -> None:
        def branch(flag: bool) -> V:
            return on_true() if flag else on_false()

        super().__init__(Trans(predicate, branch))


class IfIs[V](Delegated[V | None]):
    """The lifted value if it is an instance of `type_`, otherwise None."""

    __slots__ = ()

    def __init__(self, type_: type[V], value: Value[object]) -> None:
        def narrow(item: object) -> V | None:
            return item if isinstance(item, type_) else None

        super().__init__(Trans(value, narrow))


__all__ = ("Trans", "Cond", "If", "IfIs")
