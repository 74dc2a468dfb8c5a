"""Escaping a memory grid while bytes fall into it."""

from bisect import bisect_left
from collections import deque

GRID_SIZE = 71
FIRST_CHECKED = 1024
_START = (0, 0)
_GOAL = (GRID_SIZE - 1, GRID_SIZE - 1)
_DIRECTIONS = ((0, -1), (1, 0), (0, 1), (-1, 0))


def parse_coordinates(text):
    """Every 'x,y' line as an (x, y) tuple."""
    coordinates = []
    for line in text.splitlines():
        parts = line.split(",")
        if len(parts) < 2:
            raise ValueError(f"expected 'x,y' in line {line!r}")
        coordinates.append((int(parts[0]), int(parts[1])))
    return coordinates


def _in_bounds(position):
    x, y = position
    return 0 <= x < GRID_SIZE and 0 <= y < GRID_SIZE


def shortest_path(blocked):
    """Fewest steps from the top-left to the bottom-right corner, or None."""
    blocked = set(blocked)
    seen = {_START}
    queue = deque([(_START, 0)])
    while queue:
        position, steps = queue.popleft()
        if position == _GOAL:
            return steps
        x, y = position
        for dx, dy in _DIRECTIONS:
            step = (x + dx, y + dy)
            if _in_bounds(step) and step not in blocked and step not in seen:
                seen.add(step)
                queue.append((step, steps + 1))
    return None


def first_blocking(coordinates):
    """The first byte, from index 1024 on, after which no path remains, or None."""
    coordinates = list(coordinates)
    candidates = range(FIRST_CHECKED, len(coordinates))
    index = bisect_left(
        candidates,
        True,
        key=lambda i: shortest_path(coordinates[: i + 1]) is None,
    )
    if index == len(candidates):
        return None
    return coordinates[candidates[index]]


def part1(text):
    coordinates = parse_coordinates(text)
    if len(coordinates) <= FIRST_CHECKED:
        raise ValueError(f"need more than {FIRST_CHECKED} coordinates")
    steps = shortest_path(coordinates[: FIRST_CHECKED + 1])
    if steps is None:
        raise ValueError("the exit cannot be reached")
    return steps


def part2(text):
    return first_blocking(parse_coordinates(text))