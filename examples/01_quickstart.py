from __future__ import annotations

import operator

from _infra import Person, banner, run

from lazyvals import Filter, Map, Reduction, Trans, Val, Vals


def main() -> None:
    banner("01_quickstart: build a tree, lift once")

    people = Vals(Person("John", 25), Person("Ann", 31), Person("Bob", 17))

    # Nothing runs yet: these are just nodes.
    adults = Filter(people, lambda p: p.age >= 18)
    names = Map(adults, lambda p: p.name)
    total_age = Reduction(Val(lambda: 0), Map(adults, lambda p: p.age), operator.add)
    summary = Trans(total_age, lambda years: f"{years} years between them")

    print(names.lift)
    print(summary.lift)


if __name__ == "__main__":
    run(main)
