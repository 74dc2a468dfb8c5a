"""Counting stones that change every time you blink."""

from collections import Counter


def _unsigned(token):
    value = int(token)
    if value < 0:
        raise ValueError(f"stone must not be negative: {token!r}")
    return value


def parse_stones(text):
    """Map each distinct stone number in the text to a count of one."""
    return {_unsigned(token): 1 for token in text.split()}


def has_even_digits(n):
    return len(str(n)) % 2 == 0


def split_stone(n):
    """Split the decimal digits of a stone into a left and right half."""
    digits = str(n)
    middle = len(digits) // 2
    return [int(digits[:middle]), int(digits[middle:])]


def transform_stone(n):
    """The stones that replace stone n after one blink."""
    if n == 0:
        return [1]
    if has_even_digits(n):
        return split_stone(n)
    return [n * 2024]


def blink(stones, times):
    """Return the stone counts after blinking the given number of times."""
    current = Counter(stones)
    for _ in range(times):
        following = Counter()
        for stone, count in current.items():
            for new_stone in transform_stone(stone):
                following[new_stone] += count
        current = following
    return dict(current)


def part1(text):
    return sum(blink(parse_stones(text), 25).values())


def part2(text):
    return sum(blink(parse_stones(text), 75).values())