"""Day 3: pick the largest joltage from each bank of batteries."""

from __future__ import annotations

import argparse
import time

from aoc_solutions.utils import read_input


def biggest_battery(data: bytes, count: int) -> int:
    """Sum, over all lines, the largest ``count``-digit number keeping digit order."""
    total = 0
    for line in data.split(b"\n"):
        if not line:
            continue
        start = 0
        for remaining in range(count - 1, -1, -1):
            window = line[start : len(line) - remaining]
            if not window:
                raise ValueError(f"line too short for {count} digits: {line!r}")
            best = max(window)
            if not 0x30 <= best <= 0x39:
                raise ValueError(f"not a decimal digit: {bytes([best])!r}")
            start += window.index(best) + 1
            total += 10**remaining * (best - 0x30)
    return total


def solve_part1(data: bytes) -> int:
    return biggest_battery(data, 2)


def solve_part2(data: bytes) -> int:
    return biggest_battery(data, 12)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Solve day 3.")
    parser.add_argument("path", nargs="?", default="inputs/day03.txt")
    args = parser.parse_args(argv)
    data = read_input(args.path).replace(b"\r\n", b"\n")

    for part, solve in ((1, solve_part1), (2, solve_part2)):
        start = time.perf_counter()
        answer = solve(data)
        print(f"took: {(time.perf_counter() - start) * 1e6:.1f}µs")
        print(f"Part {part}: {answer}")


if __name__ == "__main__":
    main()