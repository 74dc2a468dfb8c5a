"""Garden regions and the price of fencing them."""

from dataclasses import dataclass

_STEPS = ((1, 0), (-1, 0), (0, 1), (0, -1))


@dataclass(frozen=True)
class Region:
    """A connected area of one plant type."""

    plant: str
    points: frozenset
    perimeter: int


class Garden:
    """A rectangular map of garden plots."""

    def __init__(self, text):
        self._plots = text.splitlines()
        self._rows = len(self._plots)
        self._cols = len(self._plots[0]) if self._plots else 0
        if any(len(line) < self._cols for line in self._plots):
            raise ValueError("every garden row must be as long as the first")

    def _plant(self, position):
        row, col = position
        return self._plots[row][col]

    def _in_bounds(self, position):
        row, col = position
        return 0 <= row < self._rows and 0 <= col < self._cols

    def _neighbours(self, position):
        plant = self._plant(position)
        row, col = position
        candidates = ((row + dr, col + dc) for dr, dc in _STEPS)
        return [
            p for p in candidates if self._in_bounds(p) and self._plant(p) == plant
        ]

    def _region(self, start):
        visited = set()
        stack = [start]
        perimeter = 0
        while stack:
            position = stack.pop()
            if position in visited:
                continue
            visited.add(position)
            neighbours = self._neighbours(position)
            perimeter += 4 - len(neighbours)
            stack.extend(neighbours)
        return Region(self._plant(start), frozenset(visited), perimeter)

    def regions(self):
        """All regions, in the row-major order of their first plot."""
        seen = set()
        found = []
        for row in range(self._rows):
            for col in range(self._cols):
                if (row, col) in seen:
                    continue
                region = self._region((row, col))
                seen.update(region.points)
                found.append(region)
        return found


def _corner_sides(point, present):
    row, col = point
    up = (row - 1, col) in present
    down = (row + 1, col) in present
    left = (row, col - 1) in present
    right = (row, col + 1) in present

    count = up + down + left + right
    if count == 0:
        return 4
    if count == 1:
        return 2

    gap_down_left = int((row + 1, col - 1) not in present)
    gap_down_right = int((row + 1, col + 1) not in present)
    gap_up_left = int((row - 1, col - 1) not in present)
    gap_up_right = int((row - 1, col + 1) not in present)

    total = 0
    if down and left and right:
        total += gap_down_left + gap_down_right
    elif down and left:
        total += (0 if up else 1) + gap_down_left
    elif down and right:
        total += (0 if up else 1) + gap_down_right

    if up and left and right:
        total += gap_up_right + gap_up_left
    elif up and left:
        total += (0 if down else 1) + gap_up_left
    elif up and right:
        total += (0 if down else 1) + gap_up_right
    return total


def sides(points):
    """Number of straight fence sides around a set of (row, col) points."""
    points = list(points)
    present = set(points)
    return sum(_corner_sides(point, present) for point in points)


def fence_price(regions):
    """Sum of area times perimeter over all regions."""
    return sum(len(region.points) * region.perimeter for region in regions)


def bulk_price(regions):
    """Sum of area times number of sides over all regions."""
    return sum(len(region.points) * sides(region.points) for region in regions)


def part1(text):
    return fence_price(Garden(text).regions())


def part2(text):
    return bulk_price(Garden(text).regions())