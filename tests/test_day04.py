import pytest

from aoc_solutions.day04 import Grid, main, solve_part1, solve_part2

DATA = (
    b"..@@.@@@@.\n@@@.@.@.@@\n@@@@@.@.@@\n@.@@@@..@.\n@@.@@@@.@@\n"
    b".@@@@@@@.@\n.@.@.@.@@@\n@.@@@.@@@@\n.@@@@@@@@.\n@.@.@@@.@.\n"
)


def test_part1():
    assert solve_part1(DATA) == 13


def test_part2():
    assert solve_part2(DATA) == 43


def test_windows_line_endings():
    data = DATA.replace(b"\n", b"\r\n")
    assert solve_part1(data) == 13
    assert solve_part2(data) == 43


def test_grid_dimensions():
    grid = Grid(DATA)
    assert (grid.rows, grid.cols) == (10, 10)
    assert len(grid.cells) == 100


def test_grid_cells_start_empty_or_zero():
    grid = Grid(b".@\n@.\n")
    assert grid.cells == [None, 0, 0, None]


def test_refresh_neighbors_counts():
    grid = Grid(b"@@\n@@\n")
    grid.refresh_neighbors()
    assert grid.cells == [3, 3, 3, 3]
    assert grid.count_accessible() == 4


def test_refresh_active_only_given_cells():
    grid = Grid(b"@@@\n")
    grid.refresh_active([0])
    assert grid.cells == [0, 1, 0]


def test_count_accessible_ignores_crowded_rolls():
    grid = Grid(b"@@@\n@@@\n@@@\n")
    grid.refresh_neighbors()
    assert grid.cells[4] == 8
    assert grid.count_accessible() == 4


def test_full_block_is_cleared_eventually():
    assert solve_part2(b"@@@\n@@@\n@@@\n") == 9


def test_empty_input():
    assert solve_part1(b"") == 0
    assert solve_part2(b"") == 0


def test_ragged_grid_rejected():
    with pytest.raises(ValueError):
        Grid(b"@@@\n@\n")


def test_main_prints_answers(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_bytes(DATA)
    main([str(path)])
    out = capsys.readouterr().out
    assert "Part 1: 13" in out
    assert "Part 2: 43" in out