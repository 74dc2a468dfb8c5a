"""A patrolling guard's route and the obstructions that trap it in a loop."""

from enum import Enum


class Direction(Enum):
    """Heading of the guard as a (row, column) step."""

    UP = (-1, 0)
    RIGHT = (0, 1)
    DOWN = (1, 0)
    LEFT = (0, -1)


_TURN_RIGHT = {
    Direction.UP: Direction.RIGHT,
    Direction.RIGHT: Direction.DOWN,
    Direction.DOWN: Direction.LEFT,
    Direction.LEFT: Direction.UP,
}
_GUARD = "^"
_BLOCKED = ("#", "O")


def _advance(position, direction):
    dr, dc = direction.value
    return position[0] + dr, position[1] + dc


class Lab:
    """The lab map with the guard's starting position."""

    def __init__(self, text):
        self._grid = text.splitlines()
        self._start = next(
            (
                (row, col)
                for row, line in enumerate(self._grid)
                for col, char in enumerate(line)
                if char == _GUARD
            ),
            None,
        )
        if self._start is None:
            raise ValueError("no guard found")

    def _cell(self, position):
        row, col = position
        if 0 <= row < len(self._grid) and 0 <= col < len(self._grid[row]):
            return self._grid[row][col]
        return None

    def walk(self):
        """Positions the guard visits before leaving the map."""
        position, direction = self._start, Direction.UP
        visited = set()
        while True:
            visited.add(position)
            ahead = _advance(position, direction)
            cell = self._cell(ahead)
            if cell is None:
                return visited
            if cell == "#":
                direction = _TURN_RIGHT[direction]
            else:
                position = ahead

    def loops_with(self, obstacle):
        """True if an extra obstacle at the given position traps the guard."""
        obstacle = tuple(obstacle)
        if self._cell(obstacle) is None:
            raise ValueError(f"obstacle outside the map: {obstacle}")
        position, direction = self._start, Direction.UP
        seen = set()
        while (position, direction) not in seen:
            seen.add((position, direction))
            ahead = _advance(position, direction)
            cell = self._cell(ahead)
            if cell is None:
                return False
            if cell in _BLOCKED or ahead == obstacle:
                direction = _TURN_RIGHT[direction]
            else:
                position = ahead
        return True


def part1(text):
    return len(Lab(text).walk())


def part2(text):
    lab = Lab(text)
    return sum(1 for position in lab.walk() if lab.loops_with(position))