import math
import operator

import pytest

from adventsolve.day07 import concat, is_solvable, parse_equations, part1, part2

EXAMPLE = """190: 10 19
3267: 81 40 27
83: 17 5
156: 15 6
7290: 6 8 6 15
161011: 16 10 13
192: 17 8 14
21037: 9 7 18 13
292: 11 6 16 20
"""

BASIC = (operator.add, operator.mul)
EXTENDED = (operator.add, operator.mul, concat)


def test_part1_example():
    assert part1(EXAMPLE) == 3749


def test_part2_example():
    assert part2(EXAMPLE) == 11387


def test_concat():
    assert concat(15, 6) == 156


def test_parse_equations():
    assert parse_equations("190: 10 19\n83: 17 5") == [(190, [10, 19]), (83, [17, 5])]


def test_basic_operators():
    assert is_solvable(190, [10, 19], BASIC)
    assert not is_solvable(83, [17, 5], BASIC)


def test_concat_operator_needed():
    assert not is_solvable(156, [15, 6], BASIC)
    assert is_solvable(156, [15, 6], EXTENDED)


def test_empty_numbers_reach_only_zero():
    assert is_solvable(0, [], BASIC)
    assert not is_solvable(1, [], BASIC)


def test_part2_never_below_part1():
    assert part2(EXAMPLE) >= part1(EXAMPLE)


@pytest.mark.parametrize("text", ["12 3 4", "x: 1", "5: 1 y"])
def test_invalid_lines_raise(text):
    with pytest.raises(ValueError):
        parse_equations(text)