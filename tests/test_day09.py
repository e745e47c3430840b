import pytest

from festive_solvers.day09 import (
    largest_enclosed_rectangle,
    main,
    parse_tiles,
    rectangle_area,
    solve,
)

EXAMPLE = "7,1\n11,1\n11,7\n9,7\n9,5\n2,5\n2,3\n7,3\n"


def test_example():
    assert solve(EXAMPLE) == 24


def test_example_area_of_widest_pair():
    assert rectangle_area((2, 5), (11, 1)) == 50


def test_area_symmetric():
    assert rectangle_area((3, 9), (12, -4)) == rectangle_area((12, -4), (3, 9))


def test_concave_loop_smaller_than_bounding_box():
    tiles = parse_tiles(EXAMPLE.splitlines())
    assert largest_enclosed_rectangle(tiles) < rectangle_area((2, 1), (11, 7))


@pytest.mark.parametrize(
    ("tiles", "expected"),
    [([(0, 0), (5, 0), (5, 5), (0, 5)], 36), ([(4, 4)], 0)],
)
def test_simple_loops(tiles, expected):
    assert largest_enclosed_rectangle(tiles) == expected


def test_result_independent_of_starting_tile():
    tiles = parse_tiles(EXAMPLE.splitlines())
    rotated = tiles[3:] + tiles[:3]
    assert largest_enclosed_rectangle(rotated) == largest_enclosed_rectangle(tiles)


def test_parse_tiles_skips_blank_lines():
    assert parse_tiles(["1,2", "", "3,4"]) == [(1, 2), (3, 4)]


@pytest.mark.parametrize("line", ["12", "1,y"])
def test_parse_tiles_rejects_malformed(line):
    with pytest.raises(ValueError):
        parse_tiles([line])


def test_no_tiles():
    with pytest.raises(ValueError):
        largest_enclosed_rectangle([])


def test_main_uses_default_file(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "D9.txt").write_text(EXAMPLE)
    main([])
    assert capsys.readouterr().out == "24\n"