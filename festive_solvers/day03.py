"""Pick the largest joltage a battery bank can produce."""

from __future__ import annotations

from collections.abc import Sequence

from festive_solvers.day01 import _read_puzzle

DEFAULT_INPUT = "D3.txt"
BATTERIES = 12
_CANDIDATES = "987654321"


def max_joltage(bank: str, digits: int = BATTERIES) -> int:
    """Return the largest number formed by ``digits`` batteries kept in order.

    Zero-rated batteries are never chosen.
    """
    bank = bank.strip()
    if len(bank) < digits:
        raise ValueError(f"bank {bank!r} has fewer than {digits} batteries")
    chosen: list[str] = []
    start = 0
    for remaining in range(digits - 1, -1, -1):
        window = bank[start : len(bank) - remaining]
        for candidate in _CANDIDATES:
            found = window.find(candidate)
            if found != -1:
                chosen.append(candidate)
                start += found + 1
                break
    if not chosen:
        raise ValueError(f"bank {bank!r} has no usable batteries")
    return int("".join(chosen))


def solve(text: str) -> int:
    """Solve a whole puzzle input given as text."""
    return sum(max_joltage(bank) for bank in text.splitlines())


def main(argv: Sequence[str] | None = None) -> int:
    """Print the joltage of every bank, then their total."""
    text = _read_puzzle(__doc__, DEFAULT_INPUT, argv)
    joltages = [max_joltage(bank) for bank in text.splitlines()]
    for joltage in joltages:
        print(joltage)
    print(sum(joltages))
    return 0