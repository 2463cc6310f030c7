from __future__ import annotations

import threading
import time

import pytest

from lazyvals import Map, Val, Vals

pytestmark = pytest.mark.unit


def test_concurrent_first_access_runs_once() -> None:
    runs: list[int] = []
    start = threading.Barrier(8)

    def slow() -> object:
        runs.append(1)
        time.sleep(0.05)
        return object()

    value = Val(slow)
    seen: list[object] = []

    def reader() -> None:
        start.wait()
        seen.append(value.lift)

    threads = [threading.Thread(target=reader) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(runs) == 1
    assert len(seen) == 8
    assert all(item is seen[0] for item in seen)


def test_concurrent_map_sees_one_result() -> None:
    mapped = Map(Vals(*range(100)), lambda x: x * 2)
    seen: list[list[int]] = []

    threads = [threading.Thread(target=lambda: seen.append(mapped.lift)) for _ in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert all(item is seen[0] for item in seen)
