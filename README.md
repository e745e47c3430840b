# festive_solvers

This package has solvers for nine daily programming puzzles. Each day is a
module, from `festive_solvers.day01` to `festive_solvers.day09`. Each module
has two entry points:

- `solve(text)` takes the whole puzzle input as a string and returns the answer
  as an integer.
- `main(argv=None)` is the command-line entry point.

## Installation

```
pip install .
```

## Command line

Each day has its own command. The command takes the path of the puzzle input
file as an optional argument:

```
festive-day01 D1.txt
festive-day02 D2.txt
festive-day03 D3.txt
festive-day04 D4.txt
festive-day05 D5.txt
festive-day06 D6.txt
festive-day07 D7.txt
festive-day08 D8.txt
festive-day09 D9.txt
```

If you leave out the path, the command reads the file with the name shown
above (`D1.txt` to `D9.txt`) from the current directory. The command prints
the answer to standard output. `festive-day03` first prints the joltage of
each bank, one per line, and then prints their total. If the file cannot be
read, the command stops with a usage error.

## Library use

```python
from pathlib import Path

from festive_solvers import day05

print(day05.solve(Path("D5.txt").read_text()))
```

The table lists each day and the public helpers it exposes:

| Module | What it computes | Helpers |
|--------|------------------|---------|
| day01 | How often a 100-position dial, starting at 50, passes or stops on zero | `parse_instructions`, `count_zero_clicks` |
| day02 | Sum of the IDs in the ranges on the first line that are one digit block repeated two or more times | `is_repeated_pattern`, `parse_ranges`, `sum_invalid_ids` |
| day03 | Total of the largest joltage that can be picked from each bank, using up to 12 non-zero batteries kept in order | `max_joltage` |
| day04 | Number of paper rolls removed by repeatedly taking away rolls with fewer than four occupied neighbours | `accessible_rolls`, `count_removed` |
| day05 | Number of distinct IDs covered by the fresh ranges listed before the first blank line | `parse_ranges`, `merge_ranges`, `count_fresh` |
| day06 | Grand total of a worksheet that is read column by column, where `+` adds and any other operator multiplies | `evaluate_columns` |
| day07 | Number of timelines that leave a manifold of beam splitters | `count_timelines` |
| day08 | Product of the X coordinates of the closest-first link that joins all junction boxes into one circuit | `parse_points`, `distance`, `last_connection` |
| day09 | Largest rectangle with red-tile corners that lies inside the tiles' outline | `parse_tiles`, `rectangle_area`, `largest_enclosed_rectangle` |

Input that is malformed raises `ValueError`. Examples are an unknown dial
direction, a bank with too few batteries, or a splitter that would send a beam
off the edge of the manifold.

## Running the tests

```
pip install .[test]
pytest
```