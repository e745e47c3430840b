"""Count the ingredient IDs covered by a list of fresh ranges."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from festive_solvers.day01 import _read_puzzle

DEFAULT_INPUT = "D5.txt"


def parse_ranges(lines: Iterable[str]) -> list[tuple[int, int]]:
    """Read ``low-high`` lines up to the first blank line."""
    ranges: list[tuple[int, int]] = []
    for raw in lines:
        line = raw.strip()
        if not line:
            break
        low, sep, high = line.partition("-")
        if sep:
            ranges.append((int(low), int(high)))
    return ranges


def merge_ranges(ranges: Iterable[tuple[int, int]]) -> list[tuple[int, int]]:
    """Sort inclusive ranges and join the ones that overlap."""
    merged: list[tuple[int, int]] = []
    for low, high in sorted(ranges):
        if merged and merged[-1][1] >= low:
            first, last = merged[-1]
            merged[-1] = (first, max(last, high))
        else:
            merged.append((low, high))
    return merged


def count_fresh(ranges: Iterable[tuple[int, int]]) -> int:
    """Count the distinct IDs covered by the ranges."""
    return sum(high - low + 1 for low, high in merge_ranges(ranges))


def solve(text: str) -> int:
    """Solve a whole puzzle input given as text."""
    return count_fresh(parse_ranges(text.splitlines()))


def main(argv: Sequence[str] | None = None) -> int:
    """Read the puzzle input and print the number of fresh IDs."""
    print(solve(_read_puzzle(__doc__, DEFAULT_INPUT, argv)))
    return 0