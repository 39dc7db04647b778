import io

import pytest

from cubscape.checks import CubError
from cubscape.mapfile import (
    CubMap,
    enclosed,
    find_start,
    load,
    parse_lines,
    read_lines,
)

CLOSED = ["1111", "1N01", "1111"]


@pytest.fixture
def header(tmp_path):
    lines = []
    for key in ("NO", "SO", "WE", "EA"):
        texture = tmp_path / f"{key.lower()}.xpm"
        texture.write_bytes(b"")
        lines.append(f"{key} {texture}\n")
    lines.append("F 220,100,0\n")
    lines.append("C 225,30,0\n")
    return lines


def _rows(grid):
    return [row + "\n" for row in grid]


def test_read_lines_keeps_newlines():
    stream = io.StringIO("a\nb\n\nc")
    assert list(read_lines(stream)) == ["a\n", "b\n", "\n", "c"]


def test_read_lines_long_line_round_trip():
    text = "x" * 450 + "\n" + "y" * 230 + "\n"
    lines = list(read_lines(io.StringIO(text)))
    assert len(lines) == 2
    assert "".join(lines) == text


def test_read_lines_empty_stream():
    assert list(read_lines(io.StringIO(""))) == []


def test_find_start_locates_symbol():
    assert find_start(CLOSED, "N") == (1, 1)


def test_find_start_missing():
    assert find_start(CLOSED, "S") is None


def test_enclosed_closed_room():
    assert enclosed(CLOSED, 1, 1, "N") is True


def test_enclosed_open_edge():
    grid = ["111", "10N", "111"]
    assert enclosed(grid, 2, 1, "N") is False


def test_enclosed_space_leak():
    grid = ["11111", "1N0 1", "11111"]
    assert enclosed(grid, 1, 1, "N") is False


def test_enclosed_does_not_modify_grid():
    grid = list(CLOSED)
    enclosed(grid, 1, 1, "N")
    assert grid == CLOSED


def test_parse_lines_valid(header):
    scene = parse_lines(header + ["\n"] + _rows(CLOSED))
    assert isinstance(scene, CubMap)
    assert scene.grid == CLOSED
    assert scene.start == "N"
    assert scene.player_cell() == (1, 1)
    assert scene.height == len(CLOSED)
    assert scene.width == len(CLOSED[0])
    assert scene.features.floor == "F 220,100,0\n"


def test_parse_lines_trailing_blank_lines_allowed(header):
    scene = parse_lines(header + _rows(CLOSED) + ["\n", "   \n"])
    assert scene.grid == CLOSED


def test_parse_lines_map_before_features(header):
    with pytest.raises(CubError, match="False map"):
        parse_lines(_rows(CLOSED) + header)


def test_parse_lines_unknown_character(header):
    with pytest.raises(CubError, match="False map"):
        parse_lines(header + _rows(["1111", "1NX1", "1111"]))


def test_parse_lines_two_players(header):
    with pytest.raises(CubError, match="False map"):
        parse_lines(header + _rows(["11111", "1N0S1", "11111"]))


def test_parse_lines_missing_feature(header):
    with pytest.raises(CubError, match="You need some feature"):
        parse_lines(header[:-1])


def test_parse_lines_missing_player(header):
    with pytest.raises(CubError, match="There isn't Player"):
        parse_lines(header + _rows(["111", "101", "111"]))


def test_parse_lines_gap_in_map(header):
    lines = header + _rows(["1111", "1N01"]) + ["\n"] + _rows(["1111"])
    with pytest.raises(CubError, match="There is empty line in map"):
        parse_lines(lines)


def test_parse_lines_open_map(header):
    with pytest.raises(CubError, match="Invalid map"):
        parse_lines(header + _rows(["1111", "1N0", "1111"]))


def test_parse_lines_missing_texture(header, tmp_path):
    lines = list(header)
    lines[0] = f"NO {tmp_path / 'absent.xpm'}\n"
    with pytest.raises(CubError, match="Can't exe"):
        parse_lines(lines + _rows(CLOSED))


def test_load_rejects_extension(tmp_path):
    with pytest.raises(CubError, match="Invalid map name"):
        load(tmp_path / "scene.txt")


def test_load_missing_file(tmp_path):
    with pytest.raises(CubError, match="Could not open map file"):
        load(tmp_path / "absent.cub")


def test_load_valid_file(header, tmp_path):
    path = tmp_path / "scene.cub"
    path.write_text("".join(header + ["\n"] + _rows(CLOSED)), encoding="utf-8")
    scene = load(path)
    assert scene.grid == CLOSED
    assert scene.player_cell() == (1, 1)