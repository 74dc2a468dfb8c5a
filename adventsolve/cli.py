"""Command line entry point that solves one day's puzzle from an input file."""

import argparse
import sys
from pathlib import Path

from adventsolve import (
    day01,
    day02,
    day03,
    day04,
    day05,
    day06,
    day07,
    day08,
    day09,
    day10,
    day11,
    day12,
    day13,
    day14,
    day15,
    day16,
    day17,
    day18,
    day19,
    day20,
)

_SOLVERS = {
    1: (day01.part1, day01.part2),
    2: (day02.part1, day02.part2),
    3: (day03.part1, day03.part2),
    4: (day04.part1, day04.part2),
    5: (day05.part1, day05.part2),
    6: (day06.part1, day06.part2),
    7: (day07.part1, day07.part2),
    8: (day08.part1, day08.part2),
    9: (day09.part1, day09.part2),
    10: (day10.part1, day10.part2),
    11: (day11.part1, day11.part2),
    12: (day12.part1, day12.part2),
    13: (day13.part1, day13.part2),
    14: (day14.part1, day14.part2),
    15: (day15.part1, day15.part2),
    16: (day16.part1, day16.part2),
    17: (day17.part1,),
    18: (day18.part1, day18.part2),
    19: (day19.part1, day19.part2),
    20: (day20.part1, day20.part2),
}
_PICTURES = {(14, 2)}


def _show(value):
    if isinstance(value, tuple):
        return ",".join(str(item) for item in value)
    return str(value)


def main(argv=None):
    """Solve the chosen day and print each part's answer."""
    parser = argparse.ArgumentParser(
        prog="adventsolve", description="Solve one day's puzzle from an input file."
    )
    parser.add_argument("day", type=int, choices=sorted(_SOLVERS), help="puzzle day")
    parser.add_argument(
        "input", nargs="?", default="input.txt", type=Path, help="puzzle input file"
    )
    args = parser.parse_args(argv)

    try:
        text = args.input.read_text()
    except OSError as error:
        print(f"adventsolve: cannot read {args.input}: {error}", file=sys.stderr)
        return 1

    try:
        for number, solve in enumerate(_SOLVERS[args.day], start=1):
            result = solve(text)
            if (args.day, number) in _PICTURES:
                print(result)
            else:
                print(f"Part {number}: {_show(result)}")
    except ValueError as error:
        print(f"adventsolve: invalid input: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())