"""Element-wise transformers over multi-values."""

from __future__ import annotations

import itertools
import typing
from collections.abc import Callable, Iterable

from ..value import Delegated, Val, Value


class IndexedValue[V](typing.NamedTuple):
    """Item paired with its zero-based position."""

    index: int
    value: V


class Map[F, T](Val[list[T]]):
    """Apply transform to every item. Order and cardinality are preserved."""

    __slots__ = ()

    def __init__(self, values: Value[Iterable[F]], transform: Callable[[F], T]) -> None:
        super().__init__(lambda: [transform(item) for item in values.lift])


# Alias kept for readability at call sites that shadow builtin names
Mapping = Map


class Indexed[V](Delegated[list[IndexedValue[V]]]):
    """
    Pair each item with its position.

    Each evaluation maps through a fresh counter, so a lift retried
    after an upstream failure still counts from zero.
    """

    __slots__ = ()

    def __init__(self, values: Value[Iterable[V]]) -> None:
        def run() -> list[IndexedValue[V]]:
            counter = itertools.count()

            def pair(item: V) -> IndexedValue[V]:
                return IndexedValue(next(counter), item)

            return Map(values, pair).lift

        super().__init__(Val(run))


__all__ = ("IndexedValue", "Map", "Mapping", "Indexed")
