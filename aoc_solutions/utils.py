"""Shared helpers for reading and parsing puzzle input."""

from __future__ import annotations

from collections.abc import Iterator
from os import PathLike
from pathlib import Path


def iter_lines(data: bytes) -> Iterator[bytes]:
    """Yield the lines of ``data``.

    A trailing newline does not produce an empty final line. A carriage
    return is stripped only from lines that end in a newline.
    """
    pos = 0
    length = len(data)
    while pos < length:
        end = data.find(b"\n", pos)
        if end == -1:
            yield data[pos:]
            return
        line = data[pos:end]
        if line.endswith(b"\r"):
            line = line[:-1]
        yield line
        pos = end + 1


def parse_number(digits: bytes) -> int:
    """Parse a run of ASCII decimal digits; an empty run is zero."""
    value = 0
    for byte in digits:
        if not 0x30 <= byte <= 0x39:
            raise ValueError(f"not a decimal digit: {bytes([byte])!r}")
        value = value * 10 + (byte - 0x30)
    return value


def read_input(path: str | PathLike[str]) -> bytes:
    """Return the whole content of the file at ``path``."""
    return Path(path).read_bytes()