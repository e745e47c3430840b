[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "festive_solvers"
version = "0.1.0"
description = "Solvers for a series of daily holiday-season programming puzzles"
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzles", "advent", "solvers", "algorithms"]
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
festive-day01 = "festive_solvers.day01:main"
festive-day02 = "festive_solvers.day02:main"
festive-day03 = "festive_solvers.day03:main"
festive-day04 = "festive_solvers.day04:main"
festive-day05 = "festive_solvers.day05:main"
festive-day06 = "festive_solvers.day06:main"
festive-day07 = "festive_solvers.day07:main"
festive-day08 = "festive_solvers.day08:main"
festive-day09 = "festive_solvers.day09:main"

[tool.hatch.build.targets.wheel]
packages = ["festive_solvers"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
