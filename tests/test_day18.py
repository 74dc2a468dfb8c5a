import pytest

from adventsolve.day18 import (
    GRID_SIZE,
    first_blocking,
    parse_coordinates,
    part1,
    part2,
    shortest_path,
)

HARMLESS = [(50, 10)] * 1024
WALL = [(x, 1) for x in range(GRID_SIZE)]


def _text(coordinates):
    return "\n".join(f"{x},{y}" for x, y in coordinates) + "\n"


def test_parse_coordinates():
    assert parse_coordinates("5,4\n4,2\n") == [(5, 4), (4, 2)]


def test_parse_coordinates_rejects_bad_line():
    with pytest.raises(ValueError):
        parse_coordinates("5\n")


def test_open_grid_takes_manhattan_distance():
    assert shortest_path(set()) == 140


def test_harmless_bytes_do_not_lengthen_path():
    assert shortest_path(HARMLESS) == shortest_path(set())


def test_full_wall_blocks_path():
    assert shortest_path(set(WALL)) is None


def test_blocked_goal_is_unreachable():
    assert shortest_path({(GRID_SIZE - 1, GRID_SIZE - 1)}) is None


def test_first_blocking_finds_last_wall_byte():
    assert first_blocking(HARMLESS + WALL) == (70, 1)


def test_first_blocking_without_block_is_none():
    assert first_blocking(HARMLESS + WALL[:-1]) is None


def test_first_blocking_with_few_coordinates_is_none():
    assert first_blocking(WALL) is None


def test_part1_matches_open_grid():
    assert part1(_text(HARMLESS + [(50, 10)])) == shortest_path(set())


def test_part1_needs_enough_coordinates():
    with pytest.raises(ValueError):
        part1(_text(HARMLESS))


def test_part1_raises_when_exit_unreachable():
    with pytest.raises(ValueError):
        part1(_text(WALL + [(50, 10)] * 954))


def test_part2():
    assert part2(_text(HARMLESS + WALL)) == (70, 1)