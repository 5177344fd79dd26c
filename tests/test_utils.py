import pytest

from aoc_solutions.utils import iter_lines, parse_number, read_input

RESULT = [
    b"987654321111111",
    b"811111111111119",
    b"234234234234278",
    b"818181911112111",
]


def test_unix():
    data = b"987654321111111\n811111111111119\n234234234234278\n818181911112111"
    assert list(iter_lines(data)) == RESULT


def test_windows():
    data = b"987654321111111\r\n811111111111119\r\n234234234234278\r\n818181911112111"
    assert list(iter_lines(data)) == RESULT


def test_trailing_newline_gives_no_empty_line():
    assert list(iter_lines(b"a\nb\n")) == [b"a", b"b"]


def test_empty_lines_kept_in_middle():
    assert list(iter_lines(b"a\n\nb")) == [b"a", b"", b"b"]


def test_empty_input():
    assert list(iter_lines(b"")) == []


def test_last_line_keeps_carriage_return():
    assert list(iter_lines(b"a\r\nb\r")) == [b"a", b"b\r"]


@pytest.mark.parametrize(
    "digits, expected",
    [(b"0", 0), (b"7", 7), (b"1234", 1234), (b"", 0), (b"18446744073709551615", 18446744073709551615)],
)
def test_parse_number(digits, expected):
    assert parse_number(digits) == expected


def test_parse_number_rejects_non_digit():
    with pytest.raises(ValueError):
        parse_number(b"12a")


def test_read_input(tmp_path):
    path = tmp_path / "input.txt"
    path.write_bytes(b"L5\nR7\n")
    assert read_input(path) == b"L5\nR7\n"