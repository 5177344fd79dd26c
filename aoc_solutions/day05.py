"""Day 5: fresh ingredient id ranges."""

from __future__ import annotations

import argparse
import time
from collections.abc import Iterable

from aoc_solutions.utils import parse_number, read_input


def parse(data: bytes) -> tuple[list[range], list[int]]:
    """Split input into inclusive id ranges and the ids listed after them."""
    ranges: list[range] = []
    numbers: list[int] = []
    lines = iter(data.split(b"\n"))

    for line in lines:
        if not line or line == b"\r":
            break
        start, sep, end = line.partition(b"-")
        if sep:
            ranges.append(range(parse_number(start), parse_number(end) + 1))

    for line in lines:
        if line and line != b"\r":
            numbers.append(parse_number(line))

    return ranges, numbers


def solve_part1(ranges: Iterable[range], numbers: Iterable[int]) -> int:
    """Count the ids that fall inside at least one range."""
    ranges = list(ranges)
    return sum(1 for number in numbers if any(number in r for r in ranges))


def solve_part2(ranges: Iterable[range]) -> int:
    """Count the distinct ids covered by the ranges together."""
    total = 0
    current: tuple[int, int] | None = None
    for r in sorted(ranges, key=lambda r: r.start):
        start, end = r.start, r.stop - 1
        if current is None:
            current = (start, end)
        elif start <= current[1] + 1:
            if end > current[1]:
                current = (current[0], end)
        else:
            total += current[1] - current[0] + 1
            current = (start, end)
    if current is not None:
        total += current[1] - current[0] + 1
    return total


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Solve day 5.")
    parser.add_argument("path", nargs="?", default="inputs/day05.txt")
    args = parser.parse_args(argv)
    data = read_input(args.path).replace(b"\r\n", b"\n")
    ranges, numbers = parse(data)

    start = time.perf_counter()
    answer = solve_part1(ranges, numbers)
    print(f"elapsed: {(time.perf_counter() - start) * 1e6:.1f}µs")
    print(f"Part 1: {answer}")

    start = time.perf_counter()
    answer = solve_part2(ranges)
    print(f"took: {(time.perf_counter() - start) * 1e6:.1f}µs")
    print(f"Part 2: {answer}")


if __name__ == "__main__":
    main()