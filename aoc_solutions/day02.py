"""Day 2: find invalid product ids made of repeated digit groups."""

from __future__ import annotations

import argparse
import time
from collections.abc import Iterable

from aoc_solutions.utils import read_input


def _parse_int(text: str) -> int:
    if not text or not (text.isascii() and text.isdigit()):
        raise ValueError(f"not a number: {text!r}")
    return int(text)


def parse_ranges(text: str) -> list[range]:
    """Parse ``"a-b,c-d"`` into inclusive ranges; pieces without '-' are skipped."""
    ranges = []
    for piece in text.split(","):
        low, sep, high = piece.partition("-")
        if sep:
            ranges.append(range(_parse_int(low), _parse_int(high) + 1))
    return ranges


def is_doubled(number: int) -> bool:
    """True if the decimal digits are one group written twice."""
    digits = str(number)
    if len(digits) % 2:
        return False
    mid = len(digits) // 2
    return digits[:mid] == digits[mid:]


def is_repeated(number: int) -> bool:
    """True if the decimal digits are one group written at least twice."""
    digits = str(number)
    for size in range(len(digits) // 2, 0, -1):
        count = digits.count(digits[:size])
        if count > 1 and size * count == len(digits):
            return True
    return False


def solve_part1(ranges: Iterable[range]) -> int:
    return sum(n for r in ranges for n in r if is_doubled(n))


def solve_part2(ranges: Iterable[range]) -> int:
    return sum(n for r in ranges for n in r if is_repeated(n))


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Solve day 2.")
    parser.add_argument("path", nargs="?", default="inputs/day02.txt")
    args = parser.parse_args(argv)
    ranges = parse_ranges(read_input(args.path).decode("utf-8").strip())

    for part, solve in ((1, solve_part1), (2, solve_part2)):
        start = time.perf_counter()
        answer = solve(ranges)
        print(f"took: {(time.perf_counter() - start) * 1e6:.1f}µs")
        print(f"Part {part}: {answer}")


if __name__ == "__main__":
    main()