"""Connect junction boxes closest-first until they form one circuit."""

from __future__ import annotations

import argparse
import math
from collections.abc import Iterable, Sequence
from itertools import combinations
from pathlib import Path

DEFAULT_INPUT = "D8.txt"

Point = tuple[int, int, int]


def parse_points(lines: Iterable[str]) -> list[Point]:
    """Read ``x,y,z`` lines into integer points, skipping blank lines."""
    points: list[Point] = []
    for raw in lines:
        line = raw.strip()
        if not line:
            continue
        fields = line.split(",")
        if len(fields) != 3:
            raise ValueError(f"expected three coordinates in {line!r}")
        try:
            x, y, z = (int(field) for field in fields)
        except ValueError as exc:
            raise ValueError(f"bad coordinate in {line!r}") from exc
        points.append((x, y, z))
    return points


def distance(a: Point, b: Point) -> float:
    """Return the straight-line distance between two points."""
    return math.dist(a, b)


def _squared(a: Point, b: Point) -> int:
    return sum((p - q) ** 2 for p, q in zip(a, b))


def last_connection(points: Sequence[Point]) -> tuple[Point, Point]:
    """Return the pair whose link joins every box into a single circuit.

    Pairs are linked in order of increasing distance, ties broken by
    their position in the input.
    """
    points = list(points)
    if len(points) < 2:
        raise ValueError("need at least two junction boxes")
    parent = list(range(len(points)))

    def find(node: int) -> int:
        while parent[node] != node:
            parent[node] = parent[parent[node]]
            node = parent[node]
        return node

    circuits = len(points)
    pairs = sorted(
        combinations(range(len(points)), 2),
        key=lambda pair: _squared(points[pair[0]], points[pair[1]]),
    )
    for first, second in pairs:
        root_a, root_b = find(first), find(second)
        if root_a == root_b:
            continue
        parent[root_b] = root_a
        circuits -= 1
        if circuits == 1:
            return points[first], points[second]
    raise ValueError("boxes never formed a single circuit")


def solve(text: str) -> int:
    """Multiply the X coordinates of the final pair to be connected."""
    a, b = last_connection(parse_points(text.splitlines()))
    return a[0] * b[0]


def main(argv: Sequence[str] | None = None) -> int:
    """Read the puzzle input and print the product of the last X coordinates."""
    parser = argparse.ArgumentParser(description="Join junction boxes.")
    parser.add_argument("input", nargs="?", default=DEFAULT_INPUT)
    args = parser.parse_args(argv)
    try:
        text = Path(args.input).read_text(encoding="utf-8")
    except OSError as exc:
        parser.error(f"cannot read {args.input}: {exc}")
    print(solve(text))
    return 0