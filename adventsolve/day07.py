"""Calibration equations solved with left-to-right operators."""

import operator


def _unsigned(token):
    value = int(token)
    if value < 0:
        raise ValueError(f"value must not be negative: {token!r}")
    return value


def parse_equations(text):
    """Return (target, numbers) for every 'target: n1 n2 ...' line."""
    equations = []
    for line in text.splitlines():
        parts = line.split(":")
        if len(parts) < 2:
            raise ValueError(f"missing ':' in line {line!r}")
        target = _unsigned(parts[0])
        numbers = [_unsigned(token) for token in parts[1].split()]
        equations.append((target, numbers))
    return equations


def concat(a, b):
    """Join the decimal digits of two numbers."""
    return int(f"{a}{b}")


def is_solvable(target, numbers, operations):
    """True if operators applied left to right, starting from 0, reach target."""
    reachable = {0}
    for number in numbers:
        reachable = {
            result
            for value in reachable
            for operation in operations
            if (result := operation(value, number)) <= target
        }
        if not reachable:
            return False
    return target in reachable


def _calibration(text, operations):
    return sum(
        target
        for target, numbers in parse_equations(text)
        if is_solvable(target, numbers, operations)
    )


def part1(text):
    return _calibration(text, (operator.add, operator.mul))


def part2(text):
    return _calibration(text, (operator.add, operator.mul, concat))