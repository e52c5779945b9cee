import pytest

from fdfkit.heightmap import HeightMap, Point, load_map, parse_map


def test_parse_simple_grid():
    hmap = parse_map(["0 1 2\n", "3 4 5\n"])
    assert hmap.width == 3
    assert hmap.height == 2
    assert [p.z for p in hmap] == [0, 1, 2, 3, 4, 5]


def test_point_coordinates_follow_grid():
    hmap = parse_map(["7 8\n", "9 10\n", "11 12\n"])
    for y, row in enumerate(hmap.points):
        for x, point in enumerate(row):
            assert (point.x, point.y) == (x, y)
    assert hmap.points[2][1] == Point(1, 2, 12)


def test_negative_and_padded_values():
    hmap = parse_map(["  -3   +4 10\n"])
    assert [p.z for p in hmap] == [-3, 4, 10]


def test_trailing_space_counts_newline_as_value():
    hmap = parse_map(["1 2 \n", "3 4 \n"])
    assert hmap.width == 3
    assert [p.z for p in hmap.points[0]] == [1, 2, 0]


def test_extra_values_are_ignored():
    hmap = parse_map(["1 2\n", "3 4 5 6\n"])
    assert [p.z for p in hmap.points[1]] == [3, 4]


def test_short_row_is_rejected():
    with pytest.raises(ValueError):
        parse_map(["1 2 3\n", "4 5\n"])


def test_empty_input():
    hmap = parse_map([])
    assert hmap == HeightMap(width=0, height=0, points=[])


def test_load_map_from_file(tmp_path):
    path = tmp_path / "grid.fdf"
    path.write_text("0 0 0\n0 5 0\n0 0 0\n", encoding="utf-8")
    hmap = load_map(path)
    assert (hmap.width, hmap.height) == (3, 3)
    assert hmap.points[1][1].z == 5
    assert sum(p.z for p in hmap) == 5


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_map(tmp_path / "absent.fdf")