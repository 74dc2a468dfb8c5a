"""Hiking trails climbing from height 0 to height 9 on a topographic map."""

_DIGITS = frozenset("0123456789")
_PEAK = 9
_STEPS = ((1, 0), (-1, 0), (0, -1), (0, 1))


class TopoMap:
    """A grid of heights with its trailheads (cells of height 0)."""

    def __init__(self, text):
        self._heights = []
        for line in text.splitlines():
            if any(char not in _DIGITS for char in line):
                raise ValueError(f"map rows may only hold digits: {line!r}")
            self._heights.append([int(char) for char in line])
        self._trailheads = [
            (row, col)
            for row, line in enumerate(self._heights)
            for col, height in enumerate(line)
            if height == 0
        ]

    def _height(self, position):
        row, col = position
        if 0 <= row < len(self._heights) and 0 <= col < len(self._heights[row]):
            return self._heights[row][col]
        return None

    def _uphill(self, position):
        height = self._height(position)
        if height is None:
            return
        row, col = position
        for dr, dc in _STEPS:
            neighbour = (row + dr, col + dc)
            if self._height(neighbour) == height + 1:
                yield neighbour

    def trailhead_score(self, start):
        """Number of distinct positions reached in nine uphill steps from start."""
        start = tuple(start)
        if self._height(start) is None:
            raise ValueError(f"start outside the map: {start}")
        frontier = {start}
        for _ in range(_PEAK):
            frontier = {n for position in frontier for n in self._uphill(position)}
        return len(frontier)

    def trailhead_rating(self, start):
        """Number of distinct uphill trails from start to any height-9 cell."""
        memo = {}

        def rating(position):
            if position not in memo:
                if self._height(position) == _PEAK:
                    memo[position] = 1
                else:
                    memo[position] = sum(rating(n) for n in self._uphill(position))
            return memo[position]

        return rating(tuple(start))

    def total_score(self):
        return sum(self.trailhead_score(head) for head in self._trailheads)

    def total_rating(self):
        return sum(self.trailhead_rating(head) for head in self._trailheads)


def part1(text):
    return TopoMap(text).total_score()


def part2(text):
    return TopoMap(text).total_rating()