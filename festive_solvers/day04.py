"""Find and repeatedly remove paper rolls that a forklift can reach."""

from __future__ import annotations

from collections.abc import Sequence

from festive_solvers.day01 import _read_puzzle

DEFAULT_INPUT = "D4.txt"
ROLL = "@"
EMPTY = "."
_CROWDED = 4


def _occupied(grid: Sequence[Sequence[str]], row: int, col: int) -> bool:
    return 0 <= row < len(grid) and 0 <= col < len(grid[row]) and grid[row][col] != EMPTY


def _neighbours(grid: Sequence[Sequence[str]], row: int, col: int) -> int:
    return sum(
        _occupied(grid, row + dr, col + dc)
        for dr in (-1, 0, 1)
        for dc in (-1, 0, 1)
        if (dr, dc) != (0, 0)
    )


def accessible_rolls(grid: Sequence[Sequence[str]]) -> list[tuple[int, int]]:
    """Return the positions of rolls with fewer than four occupied neighbours."""
    if not grid:
        raise ValueError("grid is empty")
    return [
        (r, c)
        for r, row in enumerate(grid)
        for c, cell in enumerate(row)
        if cell == ROLL and _neighbours(grid, r, c) < _CROWDED
    ]


def count_removed(grid: Sequence[Sequence[str]]) -> int:
    """Remove reachable rolls round by round and return how many went."""
    cells = [list(row) for row in grid]
    removed = 0
    while reachable := accessible_rolls(cells):
        for r, c in reachable:
            cells[r][c] = EMPTY
        removed += len(reachable)
    return removed


def solve(text: str) -> int:
    """Solve a whole puzzle input given as text."""
    return count_removed(text.splitlines())


def main(argv: Sequence[str] | None = None) -> int:
    """Read the puzzle input and print how many rolls can be removed."""
    print(solve(_read_puzzle(__doc__, DEFAULT_INPUT, argv)))
    return 0