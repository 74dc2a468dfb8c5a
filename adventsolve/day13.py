"""Claw machines solved as two linear equations."""

import re
from dataclasses import dataclass

PRIZE_OFFSET = 10_000_000_000_000
_NUMBER = re.compile(r"\b\d+\b")
_A_COST = 3
_B_COST = 1


def extract_numbers(line):
    """The first two standalone numbers in a line."""
    numbers = [int(match) for match in _NUMBER.findall(line)]
    if len(numbers) < 2:
        raise ValueError(f"expected two numbers in line {line!r}")
    return numbers[0], numbers[1]


@dataclass(frozen=True)
class ClawMachine:
    """Button A and B moves and the prize location, each as (x, y)."""

    a: tuple
    b: tuple
    prize: tuple

    def solve(self):
        """Presses of A and B reaching the prize exactly, or None."""
        ax, ay = self.a
        bx, by = self.b
        px, py = self.prize
        det = ax * by - ay * bx
        if det == 0:
            return None
        da = px * by - py * bx
        db = ax * py - ay * px
        if da % det or db % det:
            return None
        return da // det, db // det

    def shifted(self, offset):
        """A copy with the prize moved by offset on both axes."""
        px, py = self.prize
        return ClawMachine(self.a, self.b, (px + offset, py + offset))

    def tokens(self):
        solution = self.solve()
        if solution is None:
            return 0
        presses_a, presses_b = solution
        return presses_a * _A_COST + presses_b * _B_COST


def parse_machine(block):
    """Parse a three-line machine description."""
    lines = block.splitlines()
    if len(lines) != 3:
        raise ValueError(f"a machine needs exactly three lines, got {len(lines)}")
    a, b, prize = (extract_numbers(line) for line in lines)
    return ClawMachine(a, b, prize)


def parse_machines(text):
    return [parse_machine(block) for block in text.split("\n\n")]


def part1(text):
    return sum(machine.tokens() for machine in parse_machines(text))


def part2(text):
    return sum(
        machine.shifted(PRIZE_OFFSET).tokens() for machine in parse_machines(text)
    )