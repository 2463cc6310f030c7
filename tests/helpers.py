"""Assertion helpers built from the library itself."""

from __future__ import annotations

from kungfu import Error

from lazyvals import FilterIs, Indexed, Map, Try, Value, Vals
from lazyvals.result import failure


def assert_values_equal(*pairs: tuple[Value[object], Value[object]]) -> None:
    """
    Lift every pair and compare. All mismatches are reported together.
    """

    def compare(indexed: tuple[int, tuple[Value[object], Value[object]]]) -> object:
        index, (left, right) = indexed

        def check() -> None:
            actual, expected = left.lift, right.lift
            assert actual == expected, f"pair [{index}]: {actual!r} != {expected!r}"

        return Try(check).result

    results = Map(Indexed(Vals(*pairs)), compare)
    failures = Map(FilterIs(Error, results), lambda item: str(failure(item)))

    if failures.lift:
        raise AssertionError("\n".join(failures.lift))
