"""Reading and validating a scene file: header entries, map grid and wall closure."""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import TextIO

from cubscape.checks import CubError, has_cub_extension
from cubscape.features import Features

_BLANKS = " \t\n\v\f\r"
_READ_SIZE = 100
_FLOOR = "10"
_STARTS = "NSEW"


@dataclass
class CubMap:
    """A validated scene: its header entries, the map rows and the start symbol."""

    features: Features
    grid: list[str] = field(default_factory=list)
    start: str = ""

    @property
    def height(self) -> int:
        """Number of map rows."""
        return len(self.grid)

    @property
    def width(self) -> int:
        """Length of the longest map row."""
        return max((len(row) for row in self.grid), default=0)

    def player_cell(self) -> tuple[int, int]:
        """Column and row of the start symbol."""
        cell = find_start(self.grid, self.start)
        if cell is None:
            raise CubError("There isn't Player")
        return cell


def read_lines(stream: TextIO) -> Iterator[str]:
    """Yield the lines of ``stream``, split on newlines only, each keeping its newline."""
    pending = ""
    while True:
        chunk = stream.read(_READ_SIZE)
        if not chunk:
            break
        pending += chunk
        *complete, pending = pending.split("\n")
        for line in complete:
            yield line + "\n"
    if pending:
        yield pending


def _is_empty(line: str) -> bool:
    return all(ch in _BLANKS for ch in line)


def _scan_map_line(line: str, start: str | None) -> str | None:
    """Check one map row and return the start symbol known after it."""
    for ch in line:
        if ch in _FLOOR or ch in _BLANKS:
            continue
        if ch in _STARTS and start is None:
            start = ch
            continue
        raise CubError("False map")
    return start


def parse_lines(lines: Iterable[str]) -> CubMap:
    """Build a CubMap from the lines of a scene file, raising CubError when invalid."""
    features = Features()
    start: str | None = None
    rows: list[tuple[int, str]] = []
    for number, line in enumerate(lines):
        if features.accept(line) or _is_empty(line):
            continue
        if not features.is_complete():
            raise CubError("False map")
        start = _scan_map_line(line, start)
        rows.append((number, line))

    if not features.is_complete():
        raise CubError("You need some feature")
    if start is None:
        raise CubError("There isn't Player")
    features.validate()

    for (previous, _), (current, _) in zip(rows, rows[1:]):
        if current != previous + 1:
            raise CubError("There is empty line in map")

    grid = [line.removesuffix("\n") for _, line in rows]
    cell = find_start(grid, start)
    if cell is None:
        raise CubError("There isn't Player")
    if not enclosed(grid, cell[0], cell[1], start):
        raise CubError("Invalid map")
    return CubMap(features=features, grid=grid, start=start)


def load(path: str | os.PathLike[str]) -> CubMap:
    """Read and validate the scene file at ``path``."""
    name = os.fspath(path)
    if not has_cub_extension(name):
        raise CubError("Invalid map name")
    try:
        with open(name, encoding="utf-8", newline="") as stream:
            return parse_lines(read_lines(stream))
    except OSError as exc:
        raise CubError("Could not open map file") from exc


def find_start(grid: Iterable[str], symbol: str) -> tuple[int, int] | None:
    """Column and row of the first occurrence of ``symbol``, scanning row by row."""
    for y, row in enumerate(grid):
        x = row.find(symbol)
        if x != -1:
            return x, y
    return None


def enclosed(grid: list[str], x: int, y: int, start: str) -> bool:
    """True when the open area reachable from column ``x``, row ``y`` is walled in."""
    seen: set[tuple[int, int]] = set()
    stack = [(x, y)]
    while stack:
        cx, cy = stack.pop()
        if cx < 0 or cy < 0 or cy >= len(grid) or cx >= len(grid[cy]):
            return False
        if (cx, cy) in seen:
            continue
        cell = grid[cy][cx]
        if cell == "1":
            continue
        if cell != "0" and cell != start:
            return False
        seen.add((cx, cy))
        stack.extend(((cx, cy - 1), (cx, cy + 1), (cx - 1, cy), (cx + 1, cy)))
    return True