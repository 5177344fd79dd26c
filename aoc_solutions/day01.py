"""Day 1: a combination dial turned left and right."""

from __future__ import annotations

import argparse
import time
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum

from aoc_solutions.utils import parse_number, read_input


class Direction(Enum):
    LEFT = "L"
    RIGHT = "R"


@dataclass(frozen=True)
class Command:
    direction: Direction
    distance: int

    @classmethod
    def parse(cls, line: bytes) -> Command:
        """Parse a line such as ``b"L68"``; raise ValueError if malformed."""
        if line.endswith(b"\r"):
            line = line[:-1]
        if len(line) < 2:
            raise ValueError(f"command too short: {line!r}")
        try:
            direction = Direction(chr(line[0]))
        except ValueError:
            raise ValueError(f"unknown direction in {line!r}") from None
        return cls(direction, parse_number(line[1:]))


class Dial:
    """A dial with 100 positions, starting at 50."""

    CLICKS = 100

    def __init__(self, count_roll: bool) -> None:
        self.position = 50
        self.count_roll = count_roll

    def go_left(self, step: int) -> int | None:
        return self.rotate(step, True)

    def go_right(self, step: int) -> int | None:
        return self.rotate(step, False)

    def rotate(self, step: int, left: bool) -> int | None:
        """Turn the dial and report how often zero was passed.

        Without roll counting, the full-turn count is returned only when
        the dial lands on zero, and None otherwise.
        """
        rolls, step = divmod(step, self.CLICKS)
        old = self.position
        if left:
            self.position = (old + self.CLICKS - step) % self.CLICKS
        else:
            self.position = (old + step) % self.CLICKS

        crossed_zero = (
            (left and old < self.position and old != 0)
            or (not left and old > self.position and old != 0)
            or self.position == 0
        )

        if self.count_roll:
            return rolls + 1 if crossed_zero else rolls
        return rolls if self.position == 0 else None


def parse_commands(data: bytes) -> Iterator[Command]:
    """Yield every well-formed command in ``data``, skipping the rest."""
    for line in data.split(b"\n"):
        try:
            yield Command.parse(line)
        except ValueError:
            continue


def _turns(dial: Dial, commands: Iterable[Command]) -> Iterator[int]:
    for command in commands:
        if command.direction is Direction.LEFT:
            result = dial.go_left(command.distance)
        else:
            result = dial.go_right(command.distance)
        if result is not None:
            yield result


def solve_part1(data: bytes) -> int:
    """Count the turns that leave the dial on zero."""
    return sum(1 for _ in _turns(Dial(count_roll=False), parse_commands(data)))


def solve_part2(data: bytes) -> int:
    """Count every time the dial points at zero, including mid-turn."""
    return sum(_turns(Dial(count_roll=True), parse_commands(data)))


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Solve day 1.")
    parser.add_argument("path", nargs="?", default="inputs/day01.txt")
    args = parser.parse_args(argv)
    data = read_input(args.path)

    for part, solve in ((1, solve_part1), (2, solve_part2)):
        start = time.perf_counter()
        answer = solve(data)
        print(f"took: {(time.perf_counter() - start) * 1e6:.1f}µs")
        print(f"Part {part}: {answer}")


if __name__ == "__main__":
    main()