"""
Multi-value core
================

Values whose payload is an ordered sequence of items.
"""

from __future__ import annotations

import typing

from .core import Val, Value


class _EmptyValue(Value[tuple[()]]):
    """Zero items. Fits any item type."""

    __slots__ = ()

    _instance: typing.ClassVar[_EmptyValue | None] = None

    def __new__(cls) -> _EmptyValue:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @property
    def lift(self) -> tuple[()]:
        return ()

    def __repr__(self) -> str:
        return "Empty"


# Process-wide singleton
Empty: typing.Final = _EmptyValue()


class Vals[T](Value[tuple[T, ...]]):
    """
    Multi-value over an explicit list of items.

    The captured tuple is exposed as-is, no extra memoization layer.
    """

    __slots__ = ("_items",)

    def __init__(self, *items: T) -> None:
        self._items = items

    @property
    def lift(self) -> tuple[T, ...]:
        return self._items

    def __repr__(self) -> str:
        return f"Vals{self._items!r}"


class MultiVal[T](Val[list[T]]):
    """Multi-value over a list of values, each lifted in order."""

    __slots__ = ()

    def __init__(self, *values: Value[T]) -> None:
        super().__init__(lambda: [value.lift for value in values])


__all__ = ("Empty", "Vals", "MultiVal")
