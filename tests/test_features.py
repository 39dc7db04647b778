import pytest

from cubscape.checks import CubError
from cubscape.features import Features


@pytest.fixture
def textures(tmp_path):
    paths = {}
    for name in ("north", "south", "west", "east"):
        path = tmp_path / f"{name}.xpm"
        path.write_text("data")
        paths[name] = path
    return paths


def _fill(features, textures, floor="F 220,100,0\n", ceiling="C 225,30,0\n"):
    lines = [
        f"NO {textures['north']}\n",
        f"SO {textures['south']}\n",
        f"WE {textures['west']}\n",
        f"EA {textures['east']}\n",
        floor,
        ceiling,
    ]
    return [features.accept(line) for line in lines]


def test_accept_strips_leading_blanks():
    features = Features()
    assert features.accept("   NO ./n.xpm\n") is True
    assert features.north == "NO ./n.xpm\n"


def test_duplicate_entry_rejected():
    features = Features()
    assert features.accept("SO ./a.xpm\n") is True
    assert features.accept("SO ./b.xpm\n") is False
    assert features.south == "SO ./a.xpm\n"


@pytest.mark.parametrize("line", ["NOx ./a.xpm", "NO", "111111\n", "X 1,2,3", "F"])
def test_non_entries_rejected(line):
    features = Features()
    assert features.accept(line) is False
    assert features == Features()


def test_colors_accepted():
    features = Features()
    assert features.accept("F 1,2,3\n") is True
    assert features.accept("C\t4,5,6\n") is True
    assert features.floor == "F 1,2,3\n"
    assert features.ceiling == "C\t4,5,6\n"


def test_is_complete(textures):
    features = Features()
    assert features.is_complete() is False
    assert all(_fill(features, textures))
    assert features.is_complete() is True


def test_validate_passes(textures):
    features = Features()
    _fill(features, textures)
    features.validate()
    assert features.is_complete()


def test_validate_incomplete_raises():
    features = Features()
    features.accept("NO ./a.xpm\n")
    with pytest.raises(CubError, match="You need some feature"):
        features.validate()


def test_validate_bad_color_raises(textures):
    features = Features()
    _fill(features, textures, floor="F 300,0,0\n")
    with pytest.raises(CubError, match="Can't exe"):
        features.validate()


def test_validate_missing_texture_raises(textures):
    textures["east"].unlink()
    features = Features()
    _fill(features, textures)
    with pytest.raises(CubError, match="Can't exe"):
        features.validate()