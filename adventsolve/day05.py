"""Page ordering rules and safety manual updates."""

import re
from dataclasses import dataclass
from functools import cached_property, cmp_to_key

_U32 = re.compile(r"\+?[0-9]+")
_U32_LIMIT = 2**32


def _numbers(line, separator):
    values = []
    for token in line.split(separator):
        if _U32.fullmatch(token) and int(token) < _U32_LIMIT:
            values.append(int(token))
    return values


@dataclass
class Manual:
    """Ordering rules (before, after) and the updates to print."""

    rules: list
    updates: list

    @cached_property
    def _rule_set(self):
        return set(self.rules)

    def _compare(self, a, b):
        if (a, b) in self._rule_set:
            return -1
        if (b, a) in self._rule_set:
            return 1
        return 0

    def is_ordered(self, update):
        """True if every rule with both pages present is respected."""
        positions = {}
        for index, page in enumerate(update):
            positions.setdefault(page, index)
        return all(
            positions[a] < positions[b]
            for a, b in self.rules
            if a in positions and b in positions
        )

    def fix_order(self, update):
        """Return the update sorted according to the rules."""
        return sorted(update, key=cmp_to_key(self._compare))

    def ordered_score(self):
        """Sum of middle pages of correctly ordered updates."""
        return sum(u[len(u) // 2] for u in self.updates if self.is_ordered(u))

    def reordered_score(self):
        """Sum of middle pages of incorrectly ordered updates once fixed."""
        fixed = (self.fix_order(u) for u in self.updates if not self.is_ordered(u))
        return sum(u[len(u) // 2] for u in fixed)


def parse_manual(text):
    """Parse rules and updates separated by a blank line."""
    sections = text.split("\n\n")
    if len(sections) < 2:
        raise ValueError("manual needs rules and updates separated by a blank line")
    rules = []
    for line in sections[0].splitlines():
        numbers = _numbers(line, "|")
        if len(numbers) < 2:
            raise ValueError(f"invalid rule: {line!r}")
        rules.append((numbers[0], numbers[1]))
    updates = [_numbers(line, ",") for line in sections[1].splitlines()]
    return Manual(rules, updates)


def part1(text):
    return parse_manual(text).ordered_score()


def part2(text):
    return parse_manual(text).reordered_score()