import pytest

from adventsolve.day10 import TopoMap, part1, part2

EXAMPLE = (
    "89010123\n"
    "78121874\n"
    "87430965\n"
    "96549874\n"
    "45678903\n"
    "32019012\n"
    "01329801\n"
    "10456732\n"
)


def _heads(text):
    return [
        (row, col)
        for row, line in enumerate(text.splitlines())
        for col, char in enumerate(line)
        if char == "0"
    ]


def test_part1_example():
    assert part1(EXAMPLE) == 36


def test_part2_example():
    assert part2(EXAMPLE) == 81


def test_single_straight_trail():
    text = "0123456789"
    assert part1(text) == 1
    assert part2(text) == part1(text)


def test_total_score_is_sum_over_trailheads():
    topo = TopoMap(EXAMPLE)
    assert topo.total_score() == sum(topo.trailhead_score(h) for h in _heads(EXAMPLE))


def test_total_rating_is_sum_over_trailheads():
    topo = TopoMap(EXAMPLE)
    assert topo.total_rating() == sum(topo.trailhead_rating(h) for h in _heads(EXAMPLE))


def test_rating_never_below_score():
    topo = TopoMap(EXAMPLE)
    for head in _heads(EXAMPLE):
        assert topo.trailhead_rating(head) >= topo.trailhead_score(head)


def test_peak_has_a_single_trail():
    topo = TopoMap(EXAMPLE)
    assert topo.trailhead_rating([0, 1]) == 1


def test_start_not_at_height_zero_scores_nothing():
    topo = TopoMap(EXAMPLE)
    assert topo.trailhead_score((0, 0)) == 0


def test_rating_outside_map_is_zero():
    assert TopoMap(EXAMPLE).trailhead_rating((-1, 0)) == 0


def test_score_outside_map_is_rejected():
    with pytest.raises(ValueError):
        TopoMap(EXAMPLE).trailhead_score((-1, 0))


def test_non_digit_is_rejected():
    with pytest.raises(ValueError):
        TopoMap("01a")