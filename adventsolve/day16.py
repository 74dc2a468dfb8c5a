"""Cheapest routes for a reindeer through a maze."""

import heapq
import math
from collections import defaultdict
from itertools import count

_DIRECTIONS = ((0, -1), (1, 0), (0, 1), (-1, 0))
_EAST = (1, 0)
_TURN_COST = 1000
_WALL = "#"


def parse_maze(text):
    """The maze as a list of rows."""
    return text.splitlines()


def find_start(grid):
    """The (x, y) position of the 'S' tile."""
    for y, row in enumerate(grid):
        x = row.find("S")
        if x >= 0:
            return x, y
    raise ValueError("the maze has no start tile")


def _cell(grid, position):
    x, y = position
    if 0 <= y < len(grid) and 0 <= x < len(grid[y]):
        return grid[y][x]
    return _WALL


def _moves(position, heading, cost):
    x, y = position
    for direction in _DIRECTIONS:
        turn = 0 if direction == heading else _TURN_COST
        yield (x + direction[0], y + direction[1]), direction, cost + 1 + turn


def lowest_score(grid):
    """Cheapest cost from the start, facing east, to the 'E' tile."""
    start = find_start(grid)
    order = count()
    queue = [(0, next(order), start, _EAST)]
    seen = set()
    while queue:
        cost, _, position, heading = heapq.heappop(queue)
        if (position, heading) in seen:
            continue
        seen.add((position, heading))
        if _cell(grid, position) == "E":
            return cost
        for step, direction, step_cost in _moves(position, heading, cost):
            if _cell(grid, step) != _WALL:
                heapq.heappush(queue, (step_cost, next(order), step, direction))
    raise ValueError("the maze has no path to the end")


def best_path_tiles(grid):
    """Number of tiles that lie on at least one cheapest path to the end."""
    start = find_start(grid)
    order = count()
    queue = [(0, next(order), start, _EAST)]
    distances = {(start, _EAST): 0}
    backtrack = defaultdict(set)
    min_cost = math.inf
    ends = set()

    while queue:
        cost, _, position, heading = heapq.heappop(queue)
        key = (position, heading)
        if key in distances and cost > distances[key]:
            continue
        if _cell(grid, position) == "E":
            if cost > min_cost:
                break
            min_cost = cost
            ends.add(key)
        for step, direction, step_cost in _moves(position, heading, cost):
            if _cell(grid, step) not in (".", "E"):
                continue
            step_key = (step, direction)
            known = distances.get(step_key)
            if known is not None and cost >= known:
                continue
            distances[step_key] = step_cost
            backtrack[step_key].add(key)
            heapq.heappush(queue, (step_cost, next(order), step, direction))

    tiles = set()
    visited = set()
    stack = list(ends)
    while stack:
        key = stack.pop()
        if key in visited:
            continue
        visited.add(key)
        tiles.add(key[0])
        for previous in backtrack.get(key, ()):
            tiles.add(previous[0])
            stack.append(previous)
    return len(tiles)


def part1(text):
    return lowest_score(parse_maze(text))


def part2(text):
    return best_path_tiles(parse_maze(text))