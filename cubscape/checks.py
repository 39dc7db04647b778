"""Validation of map file names, texture entries and colour entries."""

from __future__ import annotations

from cubscape.text import split, trim

_BLANKS = " \t\n\v\f\r"


class CubError(Exception):
    """Raised when a scene description is invalid."""


def _is_blank(ch: str) -> bool:
    return ch in _BLANKS


def has_cub_extension(name: str) -> bool:
    """True when ``name`` is longer than four characters and ends in ``.cub``."""
    return len(name) > 4 and name.endswith(".cub")


def texture_path(entry: str | None) -> str | None:
    """Trim blanks from a texture path and return it if it names an ``.xpm`` file."""
    if entry is None:
        return None
    path = trim(entry, " \n\t")
    if len(path) > 4 and path.endswith(".xpm"):
        return path
    return None


def is_loadable_texture(entry: str) -> bool:
    """True when a texture line names an existing, readable ``.xpm`` file.

    Words after the path must consist of blanks only.
    """
    words = split(entry, " ")
    if any(not _is_blank(ch) for word in words[2:] for ch in word):
        return False
    if len(words) < 2:
        return False
    path = texture_path(words[1])
    if path is None:
        return False
    try:
        with open(path, "rb"):
            return True
    except OSError:
        return False


def _rgb_value(text: str) -> int:
    digits = text.strip(_BLANKS)
    if digits and all("0" <= ch <= "9" for ch in digits):
        return int(digits)
    return -1


def is_valid_color(line: str | None) -> bool:
    """True when a floor or ceiling line holds three components in 0..255."""
    if line is None:
        return False
    rest = line.lstrip(_BLANKS)
    if rest[:1] in ("F", "C"):
        rest = rest[1:]
    rest = rest.lstrip(_BLANKS)
    parts = split(rest, ",")
    if len(parts) != 3:
        return False
    return all(0 <= _rgb_value(part) <= 255 for part in parts)