"""Text helpers built on Trans."""

from __future__ import annotations

import re

from ..transform import Trans
from ..value import Delegated, Val, Value

# Only CRLF, CR and LF break lines; form feeds and unicode separators do not
_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def split_lines(text: str) -> list[str]:
    """
    Split on line breaks, keep a trailing empty line.

    Example:
        split_lines("a\\nb\\n")  # ["a", "b", ""]
    """
    return _LINE_BREAK.split(text)


class Text(Delegated[str]):
    """`str` of the lifted value."""

    __slots__ = ()

    def __init__(self, value: Value[object]) -> None:
        super().__init__(Trans(value, str))


class Join(Val[str]):
    """Lift every value, join their `str` forms with separator."""

    __slots__ = ()

    def __init__(self, separator: str, *values: Value[object]) -> None:
        super().__init__(lambda: separator.join(str(value.lift) for value in values))


class Lines(Delegated[list[str]]):
    """
    Lifted text split into lines.

    NOTE: Splits on "\\r\\n", "\\r" and "\\n" only. A trailing break yields
          a trailing empty line, and empty text yields [""].
    """

    __slots__ = ()

    def __init__(self, value: Value[str]) -> None:
        super().__init__(Trans(value, split_lines))


class Line(Delegated[str]):
    """
    `str` of the lifted value with a newline appended.

    Example:
        Print(Line(Val(lambda: "done"))).run()  # prints "done\\n"
    """

    __slots__ = ()

    def __init__(self, value: Value[object]) -> None:
        super().__init__(Trans(value, lambda item: f"{item}\n"))


__all__ = ("Text", "Join", "Lines", "Line", "split_lines")
