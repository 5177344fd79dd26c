"""Solutions to five daily programming puzzles, one module per day, with shared input helpers."""

__version__ = "0.1.0"
__all__ = ["utils", "day01", "day02", "day03", "day04", "day05"]