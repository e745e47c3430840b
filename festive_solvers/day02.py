"""Sum the product IDs that consist of one digit block repeated."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence

from festive_solvers.day01 import _read_puzzle

DEFAULT_INPUT = "D2.txt"


def is_repeated_pattern(digits: str) -> bool:
    """Return True if ``digits`` is some shorter block repeated twice or more."""
    length = len(digits)
    return any(
        length % size == 0 and digits == digits[:size] * (length // size)
        for size in range(1, length)
    )


def parse_ranges(text: str) -> list[tuple[int, int]]:
    """Parse the first line, ``a-b,c-d,...``, into inclusive ranges."""
    first_line = next(iter(text.splitlines()), "").strip()
    bounds = [int(field) for field in re.split(r"[,-]", first_line)]
    if len(bounds) % 2:
        raise ValueError("range list has an unpaired bound")
    return list(zip(bounds[::2], bounds[1::2]))


def sum_invalid_ids(ranges: Iterable[tuple[int, int]]) -> int:
    """Sum every ID inside the ranges that is a repeated digit block."""
    return sum(
        number
        for low, high in ranges
        for number in range(low, high + 1)
        if is_repeated_pattern(str(number))
    )


def solve(text: str) -> int:
    """Solve a whole puzzle input given as text."""
    return sum_invalid_ids(parse_ranges(text))


def main(argv: Sequence[str] | None = None) -> int:
    """Read the puzzle input and print the sum of invalid IDs."""
    print(solve(_read_puzzle(__doc__, DEFAULT_INPUT, argv)))
    return 0