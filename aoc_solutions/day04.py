"""Day 4: paper rolls that a forklift can reach."""

from __future__ import annotations

import argparse
import time
from collections.abc import Iterable, Iterator

from aoc_solutions.utils import iter_lines, read_input

_OFFSETS = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

_ROLL = ord("@")
_FLOOR = ord(".")


class Grid:
    """A grid of paper rolls.

    Each cell holds the number of neighbouring rolls counted so far, or
    None where there is no roll.
    """

    def __init__(self, data: bytes) -> None:
        lines = [line for line in iter_lines(data) if line]
        self.cols = len(lines[0]) if lines else 0
        self.rows = len(lines)
        self.cells: list[int | None] = []
        for byte in data:
            if byte == _FLOOR:
                self.cells.append(None)
            elif byte == _ROLL:
                self.cells.append(0)
        if len(self.cells) < self.rows * self.cols:
            raise ValueError("grid rows are not all the same width")

    def _neighbors(self, row: int, col: int) -> Iterator[int]:
        for d_row, d_col in _OFFSETS:
            n_row = row + d_row
            n_col = col + d_col
            if 0 <= n_row < self.rows and 0 <= n_col < self.cols:
                yield n_row * self.cols + n_col

    def _bump_neighbors(self, row: int, col: int) -> None:
        for idx in self._neighbors(row, col):
            count = self.cells[idx]
            if count is not None:
                self.cells[idx] = count + 1

    def refresh_neighbors(self) -> None:
        """Add every roll to the neighbour count of the rolls around it."""
        for row in range(self.rows):
            for col in range(self.cols):
                if self.cells[row * self.cols + col] is not None:
                    self._bump_neighbors(row, col)

    def refresh_active(self, active: Iterable[int]) -> None:
        """Add the rolls at the given cell indices to their neighbours' counts."""
        for idx in active:
            row, col = divmod(idx, self.cols)
            self._bump_neighbors(row, col)

    def count_accessible(self) -> int:
        """Count rolls with fewer than four neighbouring rolls."""
        return sum(1 for count in self.cells if count is not None and count < 4)


def solve_part1(data: bytes) -> int:
    """Count the rolls that can be reached right away."""
    grid = Grid(data)
    grid.refresh_neighbors()
    return grid.count_accessible()


def solve_part2(data: bytes) -> int:
    """Count the rolls removed by repeatedly taking every reachable one."""
    grid = Grid(data)
    active = [idx for idx, count in enumerate(grid.cells) if count is not None]
    removed = 0
    while True:
        grid.refresh_active(active)
        kept = []
        for idx in active:
            count = grid.cells[idx]
            if count is not None and count < 4:
                removed += 1
                grid.cells[idx] = None
            else:
                grid.cells[idx] = 0
                kept.append(idx)
        if len(kept) == len(active):
            break
        active = kept
    return removed


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Solve day 4.")
    parser.add_argument("path", nargs="?", default="inputs/day04.txt")
    args = parser.parse_args(argv)
    data = read_input(args.path)

    for part, solve in ((1, solve_part1), (2, solve_part2)):
        start = time.perf_counter()
        answer = solve(data)
        print(f"took: {(time.perf_counter() - start) * 1e6:.1f}µs")
        print(f"Part {part}: {answer}")


if __name__ == "__main__":
    main()