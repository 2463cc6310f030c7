"""
Filter combinators
==================

Conjunction of predicates realised as sequential narrowing: predicate 1
narrows the items, predicate 2 narrows what is left, and so on.
"""

from __future__ import annotations

import typing
from collections.abc import Iterable

from .._types import Check
from ..collection.reduction import Reduction
from ..value import Delegated, Value, Vals
from .mapping import Map


def _narrow[V](items: Iterable[V], check: Check[V]) -> Iterable[V]:
    return [item for item in items if check(item)]


class Filter[V](Delegated[Iterable[V]]):
    """
    Keep items for which all checks hold.

    With no checks the upstream payload comes back unchanged.
    """

    __slots__ = ()

    def __init__(self, values: Value[Iterable[V]], *checks: Check[V]) -> None:
        super().__init__(Reduction(values, Vals(*checks), _narrow))


class FilterIs[V](Delegated[list[V]]):
    """Keep items of runtime type `type_`, recast to it. Misses are dropped."""

    __slots__ = ()

    def __init__(self, type_: type[V], values: Value[Iterable[object]]) -> None:
        def cast(item: object) -> V:
            return typing.cast(V, item)

        super().__init__(Map(Filter(values, lambda item: isinstance(item, type_)), cast))


__all__ = ("Filter", "FilterIs")
