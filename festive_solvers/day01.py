"""Count how often a 100-position dial points at zero while it is turned."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence
from pathlib import Path

DIAL_SIZE = 100
START = 50
DEFAULT_INPUT = "D1.txt"
_DIRECTIONS = {"L": -1, "R": 1}


def _read_puzzle(description: str | None, default: str, argv: Sequence[str] | None) -> str:
    """Parse the command line and return the text of the chosen input file."""
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument("input", nargs="?", default=default)
    args = parser.parse_args(argv)
    try:
        return Path(args.input).read_text(encoding="utf-8")
    except OSError as exc:
        parser.error(f"cannot read {args.input}: {exc}")


def parse_instructions(lines: Iterable[str]) -> list[int]:
    """Turn lines such as ``L68`` or ``R48`` into signed rotation amounts.

    Left turns become negative numbers, right turns positive ones.
    Blank lines are skipped; anything else that is malformed raises
    :class:`ValueError`.
    """
    rotations: list[int] = []
    for raw in lines:
        line = raw.strip()
        if not line:
            continue
        sign = _DIRECTIONS.get(line[0])
        if sign is None:
            raise ValueError(f"unknown direction in {line!r}")
        rotations.append(sign * int(line[1:]))
    return rotations


def count_zero_clicks(instructions: Iterable[int], start: int = START) -> int:
    """Count every time the dial passes or stops on zero."""
    dial = start
    clicks = 0
    for rotation in instructions:
        dial += rotation
        while dial < 0:
            # Leaving zero to the left is not a pass over zero.
            if dial != rotation:
                clicks += 1
            dial += DIAL_SIZE
        while dial >= DIAL_SIZE:
            # Landing exactly on zero is counted below, not here.
            if dial != DIAL_SIZE:
                clicks += 1
            dial -= DIAL_SIZE
        if dial == 0:
            clicks += 1
    return clicks


def solve(text: str) -> int:
    """Solve a whole puzzle input given as text."""
    return count_zero_clicks(parse_instructions(text.splitlines()))


def main(argv: Sequence[str] | None = None) -> int:
    """Read the puzzle input and print the number of zero clicks."""
    print(solve(_read_puzzle(__doc__, DEFAULT_INPUT, argv)))
    return 0