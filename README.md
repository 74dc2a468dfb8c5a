# adventsolve

Solvers for twenty daily programming puzzles. Each day lives in its own
module, `adventsolve.day01` through `adventsolve.day20`, and reads the
puzzle input as plain text.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Command line

The package installs an `adventsolve` command. It takes the day number
(1 to 20) and, optionally, the path of the puzzle input, which defaults
to `input.txt` in the current directory:

```
adventsolve 1
adventsolve 16 path/to/input.txt
adventsolve --help
```

It prints one line per part, such as `Part 1: 1765812`. For day 14,
part 2 is a picture: the floor is drawn with `#` where a robot stands
and `.` elsewhere. For day 18, part 2 is printed as `x,y`. If the input
file cannot be read or does not fit the puzzle, a message goes to
standard error and the command exits with status 1.

## Library use

Every day module offers `part1(text)`, and all but day 17 also offer
`part2(text)`; both take the whole puzzle input as a string and return
the answer.

```python
from pathlib import Path

from adventsolve import day01, day11

text = Path("input.txt").read_text()
print(day01.part1(text))
print(day01.part2(text))

print(day11.part1("125 17"))
```

Malformed input raises `ValueError`.

The building blocks are public too, for instance:

- `day02.is_safe(report)` checks one report of levels, and
  `day02.dampened_variants(report)` lists the report with each level
  removed in turn.
- `day04.LetterGrid(text)` counts `XMAS` words (`xmas_count()`) and
  crossed `MAS` pairs (`crossmas_count()`).
- `day05.parse_manual(text)` returns a `Manual` with `is_ordered`,
  `fix_order`, `ordered_score` and `reordered_score`.
- `day06.Lab(text)` walks the guard (`walk()`) and tests extra
  obstacles (`loops_with(position)`).
- `day07.is_solvable(target, numbers, operations)` tries operator
  combinations, with `day07.concat` as the digit-joining operator.
- `day09.compact` and `day09.compact_blocks` compact a disk map, and
  `checksum_disk` / `checksum_blocks` compute its checksum.
- `day11.blink(stones, times)` returns stone counts after blinking.
- `day12.Garden(text).regions()` finds the plant regions, and
  `day12.sides(points)` counts the sides of one.
- `day13.extract_numbers(line)` pulls the two numbers out of a claw
  machine line, and `ClawMachine.solve()` finds the button presses or
  returns `None`.
- `day14.simulate(robot, seconds)` moves a robot on the wrapping floor,
  and `day14.render(positions)` draws the floor.
- `day15.Warehouse` and `day15.WideWarehouse` carry out robot moves and
  report the boxes' GPS sum.
- `day16.lowest_score(grid)` and `day16.best_path_tiles(grid)` search
  the reindeer maze.
- `day17.run(registers, program)` executes a program for the three-bit
  computer and returns its comma-separated output together with the
  final registers.
- `day18.shortest_path(blocked)` finds the fewest steps across the
  71 by 71 memory grid, and `day18.first_blocking(coordinates)` finds
  the byte that cuts the exit off.
- `day19.count_arrangements(design, patterns)` counts the ways a towel
  design can be made.
- `day20.count_cheats(path, max_distance, min_saving)` counts shortcuts
  along a race path found by `day20.race_path(grid, start)`.

## Limits

- Day 17 has only part 1: the package runs a program, but does not
  search for register values that make a program output itself.
- Day 14's part 2 does not search for the picture; it draws the robots
  at a fixed second, 7051.
- Days 14 and 18 use fixed grid sizes (101 by 103 and 71 by 71).

## Requirements

Python 3.10 or later. No third-party packages are needed at run time.