"""Arranging striped towels into requested designs."""


def parse_towels(text):
    """Return the available patterns and the list of designs."""
    sections = text.split("\n\n")
    if len(sections) < 2:
        raise ValueError("expected patterns and designs separated by a blank line")
    patterns = frozenset(pattern for pattern in sections[0].split(", ") if pattern)
    return patterns, sections[1].splitlines()


def count_arrangements(design, patterns):
    """Number of ways to build the design from the patterns."""
    usable = [pattern for pattern in set(patterns) if pattern]
    ways = [0] * len(design) + [1]
    for offset in reversed(range(len(design))):
        ways[offset] = sum(
            ways[offset + len(pattern)]
            for pattern in usable
            if design.startswith(pattern, offset)
        )
    return ways[0]


def is_possible(design, patterns):
    """True if the design can be built from the patterns."""
    return count_arrangements(design, patterns) > 0


def part1(text):
    patterns, designs = parse_towels(text)
    return sum(1 for design in designs if is_possible(design, patterns))


def part2(text):
    patterns, designs = parse_towels(text)
    return sum(count_arrangements(design, patterns) for design in designs)