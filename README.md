# aoc_solutions

Solutions to five daily programming puzzles. Each day has a module
(`aoc_solutions.day01` to `aoc_solutions.day05`) with a `solve_part1` and a
`solve_part2` function, and a command that runs both parts on a puzzle input.

| Day | Puzzle |
| --- | ------ |
| 1 | A dial with 100 positions, starting at 50, turned by lines such as `L68` or `R14`. Part 1 counts the turns that leave the dial on zero; part 2 counts every time the dial points at zero, including during a turn. |
| 2 | Comma-separated ranges of product IDs such as `11-22`. Part 1 sums the IDs whose digits are one block written twice; part 2 sums the IDs whose digits are one block written two or more times. |
| 3 | Lines of battery digits. For each line it takes the largest 2-digit (part 1) or 12-digit (part 2) number that keeps the digits in order, and sums them. |
| 4 | A grid of paper rolls (`@`) and floor (`.`). Part 1 counts the rolls with fewer than four neighbouring rolls; part 2 keeps removing every such roll until none is left to remove, and counts the rolls removed. |
| 5 | Inclusive ID ranges, a blank line, then a list of IDs. Part 1 counts the listed IDs that fall in some range; part 2 counts how many IDs the ranges cover together. |

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Command line

Each day has a command:

```
aoc-day01
aoc-day02
aoc-day03
aoc-day04
aoc-day05
```

By default a command reads `inputs/dayNN.txt` under the current directory
(for example `inputs/day03.txt` for `aoc-day03`). Pass a path to read another
file:

```
aoc-day03 my-input.txt
```

Each command prints the answers to part 1 and part 2, each preceded by the time
the part took to solve.

## Library use

```python
from aoc_solutions import day02

ranges = day02.parse_ranges("11-22,95-115")
day02.solve_part1(ranges)   # 132: 11 + 22 + 99
```

The solvers take the input as it is read from the file: `bytes` for days 1, 3,
4 and 5 (day 5 first goes through `day05.parse`), and a list of ranges from
`day02.parse_ranges` for day 2. Some building blocks are public too:

- `day01.Command.parse`, `day01.Dial` and `day01.parse_commands`
- `day02.is_doubled` and `day02.is_repeated`
- `day03.biggest_battery(data, count)`
- `day04.Grid`, with `refresh_neighbors`, `refresh_active` and `count_accessible`

The helpers in `aoc_solutions.utils` are shared between the days:

- `iter_lines` splits input into lines and accepts both `\n` and `\r\n` line endings.
- `parse_number` reads a run of decimal digits and raises `ValueError` on anything else.
- `read_input` loads a puzzle input file as bytes.

Malformed input raises `ValueError`, except on day 1, where lines that are not
commands are skipped.

## What it does not do

The package does not fetch puzzle inputs; each input has to be saved to a file
first.