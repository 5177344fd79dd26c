[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aoc_solutions"
version = "0.1.0"
description = "Solutions to five daily programming puzzles, each runnable from the command line"
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzles", "advent", "solutions", "algorithms"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
aoc-day01 = "aoc_solutions.day01:main"
aoc-day02 = "aoc_solutions.day02:main"
aoc-day03 = "aoc_solutions.day03:main"
aoc-day04 = "aoc_solutions.day04:main"
aoc-day05 = "aoc_solutions.day05:main"

[tool.hatch.build.targets.wheel]
packages = ["aoc_solutions"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
