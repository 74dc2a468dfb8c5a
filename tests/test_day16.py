import pytest

from adventsolve.day16 import (
    best_path_tiles,
    find_start,
    lowest_score,
    parse_maze,
    part1,
    part2,
)

EAST_CORRIDOR = "#####\n#S.E#\n#####"
WEST_CORRIDOR = "#####\n#E.S#\n#####"
LOOP = "#####\n#...#\n#S#E#\n#...#\n#####"
BLOCKED = "#####\n#S#E#\n#####"


def _open_cells(text):
    return sum(1 for char in text if char not in "#\n")


def test_parse_maze_keeps_rows():
    assert parse_maze(EAST_CORRIDOR) == ["#####", "#S.E#", "#####"]


def test_find_start():
    assert find_start(parse_maze(LOOP)) == (1, 2)


def test_find_start_without_start():
    with pytest.raises(ValueError):
        find_start(parse_maze("###\n#E#\n###"))


def test_straight_corridor_costs_one_per_step():
    assert part1(EAST_CORRIDOR) == 2


def test_turning_costs_a_thousand():
    east = lowest_score(parse_maze(EAST_CORRIDOR))
    west = lowest_score(parse_maze(WEST_CORRIDOR))
    assert west - east == 1000


def test_loop_score():
    assert lowest_score(parse_maze(LOOP)) == 3004


def test_no_path_raises():
    with pytest.raises(ValueError):
        lowest_score(parse_maze(BLOCKED))


def test_no_path_has_no_tiles():
    assert best_path_tiles(parse_maze(BLOCKED)) == 0


@pytest.mark.parametrize("maze", [EAST_CORRIDOR, WEST_CORRIDOR])
def test_corridor_tiles_are_all_open_cells(maze):
    assert part2(maze) == _open_cells(maze)


def test_both_equal_routes_count():
    assert best_path_tiles(parse_maze(LOOP)) == _open_cells(LOOP)


def test_tiles_never_exceed_open_cells():
    maze = "#######\n#.....#\n#.#.#.#\n#S...E#\n#######"
    tiles = part2(maze)
    assert 0 < tiles <= _open_cells(maze)