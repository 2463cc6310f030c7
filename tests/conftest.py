"""Pytest configuration and fixtures.

Provides call-counting doubles used to observe how often a captured
computation actually runs.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
import typing

import pytest


@dataclass
class CallLog:
    """Records every call made through `wrap`."""

    calls: list[str] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.calls)

    def wrap[T](self, thunk: Callable[[], T], *, name: str = "call") -> Callable[[], T]:
        def recorded() -> T:
            self.calls.append(name)
            return thunk()

        return recorded

    def check[T](self, check: Callable[[T], bool], *, name: str) -> Callable[[T], bool]:
        def recorded(item: T) -> bool:
            self.calls.append(f"{name}({item!r})")
            return check(item)

        return recorded


@pytest.fixture
def call_log() -> CallLog:
    return CallLog()


@pytest.fixture
def boom() -> Callable[[], typing.Any]:
    def raise_error() -> typing.Any:
        raise ValueError("boom")

    return raise_error
