from __future__ import annotations

import sys
from pathlib import Path

from _infra import banner, run

from lazyvals import Trans, Try, Val
from lazyvals.io import BytesFile, Print
from lazyvals.text import Join, Line
from kungfu import Error, Ok


def main() -> None:
    banner("02_try_and_io: errors as values, effects at the edge")

    nan = Try(lambda: 1 / 0)
    match nan.result:
        case Ok(value):
            Print(Line(Val(lambda: f"got {value}"))).run()
        case Error(exc):
            Print(Line(Val(lambda: f"dividing by zero gives {exc!r}"))).run()

    target = Path(sys.argv[1]) if len(sys.argv) > 1 else Path(__file__)
    match BytesFile(target).run():
        case Ok(contents):
            length = Trans(Val(lambda: contents), len)
        case Error(_):
            length = Val(lambda: -1)

    Print(Line(Join(" ", Val(lambda: f"{target.name} has length"), length, Val(lambda: "bytes")))).run()


if __name__ == "__main__":
    run(main)
