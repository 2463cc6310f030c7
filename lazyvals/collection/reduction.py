"""
Reduction
=========

Left fold of a multi-value into a single value. The only way a
multi-value collapses into one item (sums, maxima, factorials...).
"""

from __future__ import annotations

from collections.abc import Iterable

from .._types import Operation
from ..value import Val, Value


class Reduction[A, T](Val[A]):
    """
    Fold `values` starting from `neutral.lift`, in iteration order.

    Empty input gives the neutral element unchanged.

    Example:
        total = Reduction(Val(lambda: 0), Vals(1, 2, 3), operator.add)
        total.lift  # 6
    """

    __slots__ = ()

    def __init__(
        self,
        neutral: Value[A],
        values: Value[Iterable[T]],
        operation: Operation[A, T],
    ) -> None:
        def run() -> A:
            acc = neutral.lift
            for item in values.lift:
                acc = operation(acc, item)
            return acc

        super().__init__(run)


__all__ = ("Reduction",)
