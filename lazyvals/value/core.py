"""
Value core
==========

Value[V] - отложенное вычисление, которое выдаёт ровно одно значение.

- Construction never runs the computation
- First `lift` runs it, every later `lift` returns the cached result
- A failed computation is not cached: the cell stays Pending and the
  error propagates to whoever called `lift`

Caching itself is kungfu's `Lazy(...).cache()`. The cell adds a lock so
concurrent first access still runs the computation once, and a re-entry
check: lifting a value from inside its own computation raises
CyclicEvaluationError.
"""

from __future__ import annotations

import threading

from kungfu import Lazy

from .._errors import CyclicEvaluationError
from .._types import Thunk


class Memo[T]:
    """
    Memoization cell over kungfu's cached Lazy. Pending -> Evaluated, one-way.
    """

    __slots__ = ("_cached", "_lock", "_evaluating", "_evaluated")

    def __init__(self, thunk: Thunk[T], /) -> None:
        self._cached = Lazy(thunk).cache()
        self._lock = threading.RLock()
        self._evaluating = False
        self._evaluated = False

    @property
    def evaluated(self) -> bool:
        return self._evaluated

    def get(self) -> T:
        if self._evaluated:
            return self._cached()

        with self._lock:
            if not self._evaluated:
                # RLock lets the owning thread in, so re-entry lands here
                if self._evaluating:
                    raise CyclicEvaluationError()
                self._evaluating = True
                try:
                    value = self._cached()
                finally:
                    self._evaluating = False
                self._evaluated = True
                return value
            return self._cached()


class Value[V]:
    """
    Container for a value.

    `lift` gives access to the value and is usually computed lazily.
    Calling the value is shorthand for reading `lift`.
    """

    __slots__ = ()

    @property
    def lift(self) -> V:
        raise NotImplementedError

    def __call__(self) -> V:
        return self.lift


class Val[V](Value[V]):
    """Lazy, memoized value built from a zero-arg computation."""

    __slots__ = ("_cell",)

    def __init__(self, thunk: Thunk[V], /) -> None:
        self._cell = Memo(thunk)

    @property
    def lift(self) -> V:
        return self._cell.get()

    @property
    def evaluated(self) -> bool:
        return self._cell.evaluated

    def __repr__(self) -> str:
        if self._cell.evaluated:
            return f"{type(self).__name__}({self._cell.get()!r})"
        return f"{type(self).__name__}(<pending>)"


class EagerVal[V](Value[V]):
    """Value holding an already-known literal."""

    __slots__ = ("_value",)

    def __init__(self, value: V, /) -> None:
        self._value = value

    @property
    def lift(self) -> V:
        return self._value

    def __repr__(self) -> str:
        return f"EagerVal({self._value!r})"


class Eager[V](Value[V]):
    """
    Force an existing value right now, keep the Value contract.

    NOTE: Ошибки вычисления всплывают прямо из конструктора.
    """

    __slots__ = ("_value",)

    def __init__(self, value: Value[V], /) -> None:
        self._value = value.lift

    @property
    def lift(self) -> V:
        return self._value

    def __repr__(self) -> str:
        return f"Eager({self._value!r})"


class Delegated[V](Value[V]):
    """
    Value defined by composing other combinators.

    Holds the composed node and forwards `lift` to it, so the composed
    node's memoization is the only one in play.
    """

    __slots__ = ("_delegate",)

    def __init__(self, delegate: Value[V], /) -> None:
        self._delegate = delegate

    @property
    def lift(self) -> V:
        return self._delegate.lift


__all__ = (
    "Memo",
    "Value",
    "Val",
    "EagerVal",
    "Eager",
    "Delegated",
)
