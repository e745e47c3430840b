"""Count the timelines a beam splits into on its way through a manifold."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from festive_solvers.day01 import _read_puzzle

DEFAULT_INPUT = "D7.txt"
SOURCE = "S"
SPLITTER = "^"


def count_timelines(lines: Iterable[str]) -> int:
    """Return how many timelines leave the bottom of the manifold.

    A beam starts at ``S`` in the first row and travels down; a splitter
    sends every timeline reaching it both left and right.
    """
    rows = list(lines)
    if not rows:
        raise ValueError("manifold is empty")
    width = len(rows[0])
    start = rows[0].find(SOURCE)
    if start == -1:
        raise ValueError("no beam source in the first row")
    beams = [0] * width
    beams[start] = 1
    for row in rows:
        for col, cell in enumerate(row[:width]):
            if cell != SPLITTER or beams[col] == 0:
                continue
            if col == 0 or col == width - 1:
                raise ValueError(f"splitter at column {col} sends a beam off the edge")
            beams[col - 1] += beams[col]
            beams[col + 1] += beams[col]
            beams[col] = 0
    return sum(beams)


def solve(text: str) -> int:
    """Solve a whole puzzle input given as text."""
    return count_timelines(text.splitlines())


def main(argv: Sequence[str] | None = None) -> int:
    """Read the puzzle input and print the number of timelines."""
    print(solve(_read_puzzle(__doc__, DEFAULT_INPUT, argv)))
    return 0