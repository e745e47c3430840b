"""Find the largest rectangle between red tiles that stays inside the loop."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence
from itertools import combinations
from pathlib import Path

DEFAULT_INPUT = "D9.txt"
EMPTY = "."
OUTLINE = "O"
OUTSIDE = "X"

Tile = tuple[int, int]


def parse_tiles(lines: Iterable[str]) -> list[Tile]:
    """Read ``x,y`` lines into tile coordinates, skipping blank lines."""
    tiles: list[Tile] = []
    for raw in lines:
        line = raw.strip()
        if not line:
            continue
        x, sep, y = line.partition(",")
        if not sep:
            raise ValueError(f"expected 'x,y' in {line!r}")
        try:
            tiles.append((int(x), int(y)))
        except ValueError as exc:
            raise ValueError(f"bad coordinate in {line!r}") from exc
    return tiles


def rectangle_area(a: Tile, b: Tile) -> int:
    """Count the tiles in the rectangle with opposite corners ``a`` and ``b``."""
    return (abs(a[0] - b[0]) + 1) * (abs(a[1] - b[1]) + 1)


def _cells(a: Tile, b: Tile) -> Iterable[Tile]:
    x1, x2 = sorted((a[0], b[0]))
    y1, y2 = sorted((a[1], b[1]))
    return ((x, y) for y in range(y1, y2 + 1) for x in range(x1, x2 + 1))


def _mark_outside(grid: list[list[str]]) -> None:
    """Mark cells seen from any edge before the outline is hit."""
    height, width = len(grid), len(grid[0])
    scans: list[list[Tile]] = []
    for y in range(height):
        row = [(x, y) for x in range(width)]
        scans += [row, row[::-1]]
    for x in range(width):
        column = [(x, y) for y in range(height)]
        scans += [column, column[::-1]]
    for scan in scans:
        for x, y in scan:
            if grid[y][x] == OUTLINE:
                break
            grid[y][x] = OUTSIDE


def largest_enclosed_rectangle(tiles: Sequence[Tile]) -> int:
    """Return the largest rectangle with red corners lying inside the loop."""
    tiles = list(tiles)
    if not tiles:
        raise ValueError("no tiles given")
    xs = {x: i for i, x in enumerate(sorted({x for x, _ in tiles}))}
    ys = {y: i for i, y in enumerate(sorted({y for _, y in tiles}))}
    compressed = [(xs[x], ys[y]) for x, y in tiles]

    grid = [[EMPTY] * len(xs) for _ in ys]
    for a, b in zip(compressed, compressed[1:] + compressed[:1]):
        for x, y in _cells(a, b):
            grid[y][x] = OUTLINE
    _mark_outside(grid)

    best = 0
    for (tile_a, cell_a), (tile_b, cell_b) in combinations(zip(tiles, compressed), 2):
        area = rectangle_area(tile_a, tile_b)
        if area > best and all(grid[y][x] != OUTSIDE for x, y in _cells(cell_a, cell_b)):
            best = area
    return best


def solve(text: str) -> int:
    """Solve a whole puzzle input given as text."""
    return largest_enclosed_rectangle(parse_tiles(text.splitlines()))


def main(argv: Sequence[str] | None = None) -> int:
    """Read the puzzle input and print the largest enclosed rectangle."""
    parser = argparse.ArgumentParser(description="Find the largest tiled rectangle.")
    parser.add_argument("input", nargs="?", default=DEFAULT_INPUT)
    args = parser.parse_args(argv)
    try:
        text = Path(args.input).read_text(encoding="utf-8")
    except OSError as exc:
        parser.error(f"cannot read {args.input}: {exc}")
    print(solve(text))
    return 0