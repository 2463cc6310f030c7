from __future__ import annotations

import operator

from _infra import banner, run

from lazyvals import EagerVal, Val, flow


def main() -> None:
    banner("03_flow: fluent chaining")

    squares_of_evens = (
        flow(Val(lambda: range(1, 11)))
        .filter(lambda x: x % 2 == 0)
        .map(lambda x: x * x)
        .indexed()
        .lower()
    )
    print(squares_of_evens.lift)

    checked = (
        flow(Val(lambda: [4, 2, 0]))
        .map(lambda x: 8 // x)
        .reduce(EagerVal(0), operator.add)
        .attempt()
    )
    print(f"value={checked.lift!r} error={checked.error!r}")


if __name__ == "__main__":
    run(main)
