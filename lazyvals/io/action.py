"""
I/O boundary
============

IO is not a Value: every `run()` performs the action again and hands
back a fresh Result. Pure values go in through `lift`, side effects
happen here and only here.
"""

from __future__ import annotations

import logging
import sys
import typing
from typing import assert_never

from kungfu import Error, Ok, Result

from ..result import Try
from ..value import Value

log = logging.getLogger(__name__)

type IOResult[V] = Result[V, Exception]


class IO[V]:
    """
    Side-effecting action.

    Subclasses implement `action()`; callers use `run()`.
    """

    def action(self) -> V:
        raise NotImplementedError

    def run(self) -> IOResult[V]:
        # fresh Try per call: no memoization across runs
        log.debug("Running %s", self)
        result = Try(self.action).result
        match result:
            case Ok(_):
                log.debug("%s succeeded", self)
            case Error(exc):
                log.debug("%s failed: %r", self, exc)
            case _ as unreachable:
                assert_never(unreachable)
        return result


class Print[V](IO[V]):
    """Write `str(value.lift)` to a text stream, yield the lifted value."""

    def __init__(self, value: Value[V], *, file: typing.TextIO | None = None) -> None:
        self._value = value
        self._file = file

    def action(self) -> V:
        item = self._value.lift
        # resolve stdout late so redirected/captured streams are honoured
        print(item, end="", file=self._file if self._file is not None else sys.stdout)
        return item

    def __repr__(self) -> str:
        return f"Print({self._value!r})"


__all__ = ("IO", "IOResult", "Print")
