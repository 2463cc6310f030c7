"""
Fluent builder for combinator trees.

Every step only builds a node; nothing is evaluated until `lift` is read
on the lowered value.

Example:
    total = (
        flow(Vals(1, 2, 3, 4))
        .filter(lambda x: x % 2 == 0)
        .map(lambda x: x * 10)
        .reduce(EagerVal(0), operator.add)
        .lower()
    )
    total.lift  # 60
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass

from ._types import Check, Operation
from .collection import Reduction
from .result import Try
from .transform import Filter, FilterIs, Indexed, IndexedValue, Map, Trans
from .value import Eager, Value


@dataclass(frozen=True, slots=True)
class Flow[V]:
    """Chain of combinators over one value."""

    value: Value[V]

    def trans[T](self, transform: Callable[[V], T]) -> Flow[T]:
        return Flow(Trans(self.value, transform))

    def map[F, T](self: Flow[Iterable[F]], transform: Callable[[F], T]) -> Flow[list[T]]:
        return Flow(Map(self.value, transform))

    def filter[F](self: Flow[Iterable[F]], *checks: Check[F]) -> Flow[Iterable[F]]:
        return Flow(Filter(self.value, *checks))

    def filter_is[T](self: Flow[Iterable[object]], type_: type[T]) -> Flow[list[T]]:
        return Flow(FilterIs(type_, self.value))

    def indexed[F](self: Flow[Iterable[F]]) -> Flow[list[IndexedValue[F]]]:
        return Flow(Indexed(self.value))

    def reduce[F, A](self: Flow[Iterable[F]], neutral: Value[A], operation: Operation[A, F]) -> Flow[A]:
        return Flow(Reduction(neutral, self.value, operation))

    def eager(self) -> Flow[V]:
        """Evaluate the chain built so far, right now."""
        return Flow(Eager(self.value))

    def attempt(self) -> Try[V]:
        """Close the chain behind the error-to-value boundary."""
        value = self.value
        return Try(lambda: value.lift)

    def lower(self) -> Value[V]:
        return self.value


def flow[V](value: Value[V]) -> Flow[V]:
    """Start a Flow from any value."""
    return Flow(value)


__all__ = ("Flow", "flow")
