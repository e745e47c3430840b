import pytest

from festive_solvers.day04 import accessible_rolls, count_removed, main, solve

EXAMPLE = """\
..@@.@@@@.
@@@.@.@.@@
@@@@@.@.@@
@.@@@@..@.
@@.@@@@.@@
.@@@@@@@.@
.@.@.@.@@@
@.@@@.@@@@
.@@@@@@@@.
@.@.@@@.@.
"""

SQUARE = ["@@@", "@@@", "@@@"]


def test_example_first_round():
    assert len(accessible_rolls(EXAMPLE.splitlines())) == 13


def test_example_total_removed():
    assert solve(EXAMPLE) == 43


@pytest.mark.parametrize(
    ("grid", "expected"),
    [
        (["@"], [(0, 0)]),
        (SQUARE, [(0, 0), (0, 2), (2, 0), (2, 2)]),
        (["...", "..."], []),
    ],
)
def test_accessible_rolls(grid, expected):
    assert accessible_rolls(grid) == expected


@pytest.mark.parametrize(("grid", "expected"), [(SQUARE, 9), (["...", "..."], 0)])
def test_count_removed_small_grids(grid, expected):
    assert count_removed(grid) == expected


def test_count_removed_does_not_change_input():
    grid = [list(row) for row in EXAMPLE.splitlines()]
    snapshot = [row[:] for row in grid]
    count_removed(grid)
    assert grid == snapshot


def test_removed_never_exceeds_rolls():
    assert solve(EXAMPLE) <= EXAMPLE.count("@")


def test_empty_grid():
    with pytest.raises(ValueError):
        accessible_rolls([])


def test_main_prints_total(tmp_path, capsys):
    grid_file = tmp_path / "grid.txt"
    grid_file.write_text(EXAMPLE)
    main([str(grid_file)])
    assert capsys.readouterr().out == "43\n"