"""Collection and validation of the texture and colour entries of a scene file."""

from __future__ import annotations

from dataclasses import dataclass, fields

from cubscape.checks import CubError, is_loadable_texture, is_valid_color

_BLANKS = " \t\n\v\f\r"

_TEXTURE_KEYS = {"NO": "north", "SO": "south", "WE": "west", "EA": "east"}
_COLOR_KEYS = {"F": "floor", "C": "ceiling"}


@dataclass
class Features:
    """The six entries a scene needs, each kept as its line without leading blanks."""

    north: str | None = None
    south: str | None = None
    west: str | None = None
    east: str | None = None
    floor: str | None = None
    ceiling: str | None = None

    def accept(self, line: str) -> bool:
        """Store ``line`` if it is an entry not yet seen; return whether it was taken."""
        rest = line.lstrip(_BLANKS)
        for key, name in (*_TEXTURE_KEYS.items(), *_COLOR_KEYS.items()):
            size = len(key)
            if (
                rest.startswith(key)
                and len(rest) > size
                and rest[size] in _BLANKS
                and getattr(self, name) is None
            ):
                setattr(self, name, rest)
                return True
        return False

    def is_complete(self) -> bool:
        """True once every entry has been given."""
        return all(getattr(self, f.name) is not None for f in fields(self))

    def validate(self) -> None:
        """Raise CubError unless all entries are present and usable."""
        if not self.is_complete():
            raise CubError("You need some feature")
        for texture in (self.south, self.north, self.west, self.east):
            if not is_loadable_texture(texture):
                raise CubError("Can't exe")
        for color in (self.floor, self.ceiling):
            if not is_valid_color(color):
                raise CubError("Can't exe")