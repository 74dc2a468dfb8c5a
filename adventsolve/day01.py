"""Distances and similarity scores between two columns of location ids."""

from collections import Counter


def _unsigned(token):
    value = int(token)
    if value < 0:
        raise ValueError(f"location id must not be negative: {token!r}")
    return value


def parse_pairs(text):
    """Return the (left, right) location ids of every line."""
    pairs = []
    for line in text.splitlines():
        numbers = [_unsigned(token) for token in line.split()]
        if len(numbers) < 2:
            raise ValueError(f"expected two location ids in line {line!r}")
        pairs.append((numbers[0], numbers[1]))
    return pairs


def _columns(text):
    pairs = parse_pairs(text)
    return [left for left, _ in pairs], [right for _, right in pairs]


def part1(text):
    """Sum of distances between the sorted left and right columns."""
    left, right = _columns(text)
    return sum(abs(a - b) for a, b in zip(sorted(left), sorted(right)))


def part2(text):
    """Similarity score: each left id times its count in the right column."""
    left, right = _columns(text)
    counts = Counter(right)
    return sum(value * counts[value] for value in left)