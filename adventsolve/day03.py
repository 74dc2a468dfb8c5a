"""Summing multiplications hidden in corrupted memory."""

import re

_MUL = re.compile(r"mul\(([0-9]*,[0-9]*)\)")
_INSTRUCTION = re.compile(r"mul\((\d+,\d+\))|do\(\)|don't\(\)")


def part1(text):
    """Sum of the products of every mul(a,b) instruction."""
    total = 0
    for match in _MUL.finditer(text):
        left, right = match.group(1).split(",")
        total += int(left) * int(right)
    return total


def part2(text):
    """Like part1, but don't() disables and do() re-enables instructions."""
    enabled = True
    kept = []
    for match in _INSTRUCTION.finditer(text):
        token = match.group(0)
        if token == "do()":
            enabled = True
        elif token == "don't()":
            enabled = False
        elif enabled:
            kept.append(token)
    return part1("".join(kept))