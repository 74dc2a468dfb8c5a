"""Antinodes produced by pairs of same-frequency antennas."""

from collections import defaultdict
from itertools import combinations

_EMPTY = "."


class AntennaMap:
    """Antenna positions grouped by frequency on a bounded map."""

    def __init__(self, text):
        lines = text.splitlines()
        self._rows = len(lines)
        self._cols = len(lines[0]) if lines else 0
        self._frequencies = defaultdict(list)
        for row, line in enumerate(lines):
            for col, char in enumerate(line[: self._cols]):
                if char != _EMPTY:
                    self._frequencies[char].append((row, col))

    def _in_bounds(self, point):
        row, col = point
        return 0 <= row < self._rows and 0 <= col < self._cols

    def _pairs(self):
        for positions in self._frequencies.values():
            yield from combinations(positions, 2)

    def _ray(self, origin, target):
        dr, dc = target[0] - origin[0], target[1] - origin[1]
        point = target
        while self._in_bounds(point):
            yield point
            point = (point[0] + dr, point[1] + dc)

    def antinodes(self):
        """Distinct in-bounds points twice as far from one antenna as its pair."""
        found = set()
        for a, b in self._pairs():
            candidates = (
                (2 * b[0] - a[0], 2 * b[1] - a[1]),
                (2 * a[0] - b[0], 2 * a[1] - b[1]),
            )
            found.update(point for point in candidates if self._in_bounds(point))
        return len(found)

    def resonant_antinodes(self):
        """Distinct in-bounds points on the lines through antenna pairs."""
        found = set()
        for a, b in self._pairs():
            found.update(self._ray(a, b))
            found.update(self._ray(b, a))
        return len(found)


def part1(text):
    return AntennaMap(text).antinodes()


def part2(text):
    return AntennaMap(text).resonant_antinodes()