"""Robots patrolling a wrapping bathroom floor."""

import re
from dataclasses import dataclass
from math import prod

WIDTH = 101
HEIGHT = 103
TREE_SECONDS = 7051
_NUMBER = re.compile(r"-?\d+")


@dataclass(frozen=True)
class Robot:
    """Starting position and velocity of a robot, each as (x, y)."""

    pos: tuple
    vel: tuple


def parse_robot(line):
    """Parse a 'p=x,y v=dx,dy' line."""
    numbers = [int(token) for token in _NUMBER.findall(line)]
    if len(numbers) < 4:
        raise ValueError(f"expected position and velocity in line {line!r}")
    return Robot((numbers[0], numbers[1]), (numbers[2], numbers[3]))


def parse_robots(text):
    return [parse_robot(line) for line in text.splitlines()]


def simulate(robot, seconds):
    """Position of the robot after the given number of seconds."""
    x, y = robot.pos
    dx, dy = robot.vel
    return (x + dx * seconds) % WIDTH, (y + dy * seconds) % HEIGHT


def safety_factor(positions):
    """Product of robot counts in the four quadrants; the middle lines count for none."""
    middle_x = (WIDTH - 1) // 2
    middle_y = (HEIGHT - 1) // 2
    quadrants = [0, 0, 0, 0]
    for x, y in positions:
        if x == middle_x or y == middle_y:
            continue
        index = (x > middle_x) + 2 * (y > middle_y)
        quadrants[index] += 1
    return prod(quadrants)


def render(positions):
    """Draw the floor with '#' where a robot stands and '.' elsewhere."""
    occupied = set(positions)
    return "\n".join(
        "".join("#" if (x, y) in occupied else "." for x in range(WIDTH))
        for y in range(HEIGHT)
    )


def part1(text):
    return safety_factor(simulate(robot, 100) for robot in parse_robots(text))


def part2(text):
    """The picture the robots form at the moment they draw the tree."""
    return render(simulate(robot, TREE_SECONDS) for robot in parse_robots(text))