from adventsolve.day08 import AntennaMap, part1, part2

EXAMPLE = """............
........0...
.....0......
.......0....
....0.......
......A.....
............
............
........A...
.........A..
............
............
"""


def _mirror(text):
    return "\n".join(line[::-1] for line in text.splitlines())


def _flip(text):
    return "\n".join(reversed(text.splitlines()))


def test_part1_example():
    assert part1(EXAMPLE) == 14


def test_part2_example():
    assert part2(EXAMPLE) == 34


def test_single_antenna_has_no_antinodes():
    antenna_map = AntennaMap("....\n.a..\n....")
    assert antenna_map.antinodes() == 0
    assert antenna_map.resonant_antinodes() == antenna_map.antinodes()


def test_class_matches_part_functions():
    antenna_map = AntennaMap(EXAMPLE)
    assert antenna_map.antinodes() == part1(EXAMPLE)
    assert antenna_map.resonant_antinodes() == part2(EXAMPLE)


def test_resonant_antinodes_include_plain_ones():
    assert part2(EXAMPLE) >= part1(EXAMPLE)


def test_counts_invariant_under_reflection():
    assert part1(_mirror(EXAMPLE)) == part1(EXAMPLE)
    assert part1(_flip(EXAMPLE)) == part1(EXAMPLE)
    assert part2(_mirror(EXAMPLE)) == part2(EXAMPLE)
    assert part2(_flip(EXAMPLE)) == part2(EXAMPLE)


def test_different_frequencies_do_not_interact():
    assert part1("a...b\n.....") == part1("")
    assert part2("a...b\n.....") == part2("")


def test_resonance_includes_antennas_themselves():
    antenna_map = AntennaMap("a.a")
    assert antenna_map.resonant_antinodes() > antenna_map.antinodes()


def test_any_non_dot_character_is_an_antenna():
    assert part1("#..#......") == part1("a..a......")
    assert part2("#..#......") == part2("a..a......")