"""
Error-as-value layer
====================

Result is kungfu's Result[T, E]: Ok (success) | Error (failure).

Try is the universal error-to-value boundary: whatever the captured
computation raises comes back as Error(exc), never as a raised exception.
"""

from __future__ import annotations

from typing import assert_never

from kungfu import Error, Ok, Result

from ._types import Thunk
from .value import Val, Value


def capture[T](thunk: Thunk[T]) -> Result[T, Exception]:
    """
    Run thunk once, reify the outcome as a Result.

    NOTE: Catches all Exception subclasses. KeyboardInterrupt/SystemExit
          are not runtime errors and still propagate.
    """
    try:
        return Ok(thunk())
    except Exception as exc:
        return Error(exc)


def payload[T, E](result: Result[T, E]) -> T | None:
    """Success payload or None."""
    match result:
        case Ok(value):
            return value
        case Error(_):
            return None
        case _ as unreachable:
            assert_never(unreachable)


def failure[T, E](result: Result[T, E]) -> E | None:
    """Failure payload or None."""
    match result:
        case Ok(_):
            return None
        case Error(error):
            return error
        case _ as unreachable:
            assert_never(unreachable)


class Try[V](Value[V | None]):
    """
    Capturing computation.

    `result`, `lift` and `error` are views of one memoized evaluation.

    Example:
        nan = Try(lambda: 1 / 0)
        nan.lift    # None
        nan.result  # Error(ZeroDivisionError(...))
    """

    __slots__ = ("_result",)

    def __init__(self, action: Thunk[V], /) -> None:
        self._result: Val[Result[V, Exception]] = Val(lambda: capture(action))

    @property
    def result(self) -> Result[V, Exception]:
        return self._result.lift

    @property
    def lift(self) -> V | None:
        return payload(self.result)

    @property
    def error(self) -> Exception | None:
        return failure(self.result)

    def __repr__(self) -> str:
        if self._result.evaluated:
            return f"Try({self.result!r})"
        return "Try(<pending>)"


class FromResult[V, E](Value[V | None]):
    """
    Maybe view over an already-computed Result.

    NOTE: Not lazy - result is already there. For lazy capture use Try.
    """

    __slots__ = ("_result",)

    def __init__(self, result: Result[V, E], /) -> None:
        self._result = result

    @property
    def result(self) -> Result[V, E]:
        return self._result

    @property
    def lift(self) -> V | None:
        return payload(self._result)

    @property
    def error(self) -> E | None:
        return failure(self._result)

    def __repr__(self) -> str:
        return f"FromResult({self._result!r})"


__all__ = (
    "Result",
    "Ok",
    "Error",
    "capture",
    "payload",
    "failure",
    "Try",
    "FromResult",
)
