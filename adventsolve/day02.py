"""Safety checks for reactor level reports."""

_MAX_LEVEL = 2**32


def _level(token):
    value = int(token)
    if not 0 <= value < _MAX_LEVEL:
        raise ValueError(f"level out of range: {token!r}")
    return value


def parse_reports(text):
    """Return every line as a list of levels."""
    return [[_level(token) for token in line.split()] for line in text.splitlines()]


def is_safe(report):
    """A report is safe when monotonic with steps between one and three."""
    if not report:
        raise ValueError("a report needs at least one level")
    pairs = list(zip(report, report[1:]))
    monotonic = all(a <= b for a, b in pairs) or all(a >= b for a, b in pairs)
    return monotonic and all(1 <= abs(a - b) <= 3 for a, b in pairs)


def dampened_variants(report):
    """The report itself followed by every copy with one level removed."""
    report = list(report)
    return [report] + [report[:i] + report[i + 1:] for i in range(len(report))]


def part1(text):
    return sum(1 for report in parse_reports(text) if is_safe(report))


def part2(text):
    return sum(
        1
        for report in parse_reports(text)
        if any(is_safe(variant) for variant in dampened_variants(report))
    )