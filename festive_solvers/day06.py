"""Evaluate column-written arithmetic worksheets."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

from festive_solvers.day01 import _read_puzzle

DEFAULT_INPUT = "D6.txt"
ADD = "+"


def _apply(operator: str, numbers: list[int]) -> int:
    return sum(numbers) if operator == ADD else math.prod(numbers)


def evaluate_columns(lines: Iterable[str]) -> list[int]:
    """Return the result of every problem on the worksheet, left to right.

    Each non-blank character column, read top to bottom, is one number.
    A fully blank column separates problems. The last line holds one
    operator per problem: ``+`` adds, anything else multiplies.
    """
    rows = list(lines)
    if len(rows) < 2:
        raise ValueError("worksheet needs number rows and an operator row")
    *number_rows, operator_row = rows
    operators = iter(ch for ch in operator_row if not ch.isspace())
    width = len(number_rows[0])
    padded = [row.ljust(width)[:width] for row in number_rows]

    results: list[int] = []
    numbers: list[int] = []

    def close_problem() -> None:
        operator = next(operators, None)
        if operator is None:
            raise ValueError("more problems than operators")
        results.append(_apply(operator, numbers))
        numbers.clear()

    for column in zip(*padded):
        digits = "".join(ch for ch in column if ch != " ")
        if digits:
            numbers.append(int(digits))
        else:
            close_problem()
    close_problem()
    return results


def solve(text: str) -> int:
    """Solve a whole puzzle input given as text."""
    return sum(evaluate_columns(text.splitlines()))


def main(argv: Sequence[str] | None = None) -> int:
    """Read the puzzle input and print the worksheet's grand total."""
    print(solve(_read_puzzle(__doc__, DEFAULT_INPUT, argv)))
    return 0