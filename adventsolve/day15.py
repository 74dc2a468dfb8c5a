"""A robot pushing boxes around a warehouse."""

from enum import Enum


class Direction(Enum):
    """A move of the robot, named by its arrow character."""

    UP = "^"
    DOWN = "v"
    LEFT = "<"
    RIGHT = ">"

    def advance(self, position):
        """The (x, y) position one step from the given one."""
        dx, dy = _STEPS[self]
        return position[0] + dx, position[1] + dy


_STEPS = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}
_WIDE = {"#": "##", "O": "[]", ".": "..", "@": "@."}


def parse_moves(text):
    """Read the arrow characters of a move list, ignoring line breaks."""
    return [Direction(char) for line in text.splitlines() for char in line.rstrip()]


class _Floor:
    def __init__(self, rows):
        self._grid = [list(row) for row in rows]
        self._robot = next(
            (
                (x, y)
                for y, row in enumerate(self._grid)
                for x, char in enumerate(row)
                if char == "@"
            ),
            None,
        )
        if self._robot is None:
            raise ValueError("no robot in the warehouse")

    def _get(self, position):
        x, y = position
        if 0 <= y < len(self._grid) and 0 <= x < len(self._grid[y]):
            return self._grid[y][x]
        return None

    def _set(self, position, char):
        if self._get(position) is None:
            raise ValueError(f"position outside the warehouse: {position}")
        x, y = position
        self._grid[y][x] = char

    def _step_robot(self, target):
        self._set(self._robot, ".")
        self._set(target, "@")
        self._robot = target

    def _gps(self, box):
        return sum(
            100 * y + x
            for y, row in enumerate(self._grid)
            for x, char in enumerate(row)
            if char == box
        )

    def __str__(self):
        return "\n".join("".join(row) for row in self._grid)


class Warehouse(_Floor):
    """A warehouse with single-cell boxes."""

    def __init__(self, text):
        super().__init__(text.splitlines())

    def move_robot(self, moves):
        """Carry out the moves, pushing rows of boxes where they can go."""
        for move in moves:
            ahead = move.advance(self._robot)
            cell = self._get(ahead)
            if cell == "O":
                end = ahead
                while self._get(end) == "O":
                    end = move.advance(end)
                if self._get(end) != ".":
                    continue
                self._set(end, "O")
            elif cell != ".":
                continue
            self._step_robot(ahead)

    def gps(self):
        """Sum of 100 * row + column over every box."""
        return self._gps("O")


class WideWarehouse(_Floor):
    """The same warehouse with everything but the robot twice as wide."""

    def __init__(self, text):
        rows = ["".join(_WIDE.get(char, "") for char in line) for line in text.splitlines()]
        super().__init__(rows)

    def _pushed_cells(self, move):
        stack = [self._robot]
        captured = set()
        while stack:
            ahead = move.advance(stack.pop())
            if ahead in captured:
                continue
            cell = self._get(ahead)
            if cell == "#":
                return None
            if cell == "[":
                partner = (ahead[0] + 1, ahead[1])
            elif cell == "]":
                partner = (ahead[0] - 1, ahead[1])
            else:
                continue
            for part in (ahead, partner):
                if part not in captured:
                    captured.add(part)
                    stack.append(part)
        return captured

    def move_robot(self, moves):
        """Carry out the moves, pushing every box that a move touches."""
        for move in moves:
            pushed = self._pushed_cells(move)
            if pushed is None:
                continue
            before = {cell: self._get(cell) for cell in pushed}
            for cell in pushed:
                self._set(cell, ".")
            for cell, char in before.items():
                self._set(move.advance(cell), char)
            self._step_robot(move.advance(self._robot))

    def gps(self):
        """Sum of 100 * row + column over the left edge of every box."""
        return self._gps("[")


def _sections(text):
    sections = text.split("\n\n")
    if len(sections) < 2:
        raise ValueError("expected a map and moves separated by a blank line")
    return sections[0], parse_moves(sections[1])


def part1(text):
    layout, moves = _sections(text)
    warehouse = Warehouse(layout)
    warehouse.move_robot(moves)
    return warehouse.gps()


def part2(text):
    layout, moves = _sections(text)
    warehouse = WideWarehouse(layout)
    warehouse.move_robot(moves)
    return warehouse.gps()