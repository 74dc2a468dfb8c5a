"""Cheating through walls on a single-track race course."""

_DIRECTIONS = ((1, 0), (-1, 0), (0, 1), (0, -1))
_TRACK = (".", "E")
_MIN_SAVING = 100


def parse_grid(text):
    """The race course as a list of rows."""
    return text.splitlines()


def find_start(grid):
    """The (x, y) position of the 'S' tile."""
    for y, row in enumerate(grid):
        x = row.find("S")
        if x >= 0:
            return x, y
    raise ValueError("the course has no start tile")


def _cell(grid, position):
    x, y = position
    if 0 <= y < len(grid) and 0 <= x < len(grid[y]):
        return grid[y][x]
    return None


def race_path(grid, start):
    """The tiles visited, in order, from start until the 'E' tile is reached."""
    stack = [tuple(start)]
    visited = set()
    path = []
    while stack:
        current = stack.pop()
        if current in visited:
            continue
        visited.add(current)
        path.append(current)
        if _cell(grid, current) == "E":
            return path
        x, y = current
        for dx, dy in _DIRECTIONS:
            step = (x + dx, y + dy)
            if _cell(grid, step) in _TRACK:
                stack.append(step)
    raise ValueError("the course has no path to the end")


def _count(path, min_distance, max_distance, min_saving):
    index = {position: i for i, position in enumerate(path)}
    offsets = [
        (dx, dy, distance)
        for dx in range(-max_distance, max_distance + 1)
        for dy in range(-(max_distance - abs(dx)), max_distance - abs(dx) + 1)
        if (distance := abs(dx) + abs(dy)) >= min_distance
    ]
    total = 0
    for (x, y), i in index.items():
        for dx, dy, distance in offsets:
            j = index.get((x + dx, y + dy))
            if j is not None and j > i and j - i - distance >= min_saving:
                total += 1
    return total


def count_cheats(path, max_distance, min_saving):
    """Cheats of at most max_distance steps that save at least min_saving."""
    return _count(path, 1, max_distance, min_saving)


def _path(text):
    grid = parse_grid(text)
    return race_path(grid, find_start(grid))


def part1(text):
    return _count(_path(text), 2, 2, _MIN_SAVING)


def part2(text):
    return count_cheats(_path(text), 20, _MIN_SAVING)