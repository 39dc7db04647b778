"""Player orientation, grid ray casting and texture coordinate calculation."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

SCREEN_WIDTH = 1920
SCREEN_HEIGHT = 1080
FOV_DEGREES = 66.0
MOVE_SPEED = 0.10
ROT_SPEED = 0.06

_DIRECTIONS = {
    "N": (0.0, -1.0),
    "S": (0.0, 1.0),
    "E": (1.0, 0.0),
    "W": (-1.0, 0.0),
}


def facing(start: str) -> tuple[float, float, float, float]:
    """Direction and camera plane ``(dir_x, dir_y, plane_x, plane_y)`` for a start symbol."""
    try:
        dir_x, dir_y = _DIRECTIONS[start]
    except KeyError:
        raise ValueError(f"unknown start symbol {start!r}") from None
    half = math.tan(math.radians(FOV_DEGREES) / 2)
    return dir_x, dir_y, -dir_y * half, dir_x * half


@dataclass
class Player:
    """Position, view direction and camera plane of the player."""

    pos_x: float
    pos_y: float
    dir_x: float
    dir_y: float
    plane_x: float
    plane_y: float
    start: str
    move_speed: float = MOVE_SPEED
    rot_speed: float = ROT_SPEED

    @classmethod
    def from_start(cls, x: int, y: int, start: str) -> "Player":
        """Place the player at the centre of cell ``(x, y)`` facing ``start``."""
        dir_x, dir_y, plane_x, plane_y = facing(start)
        return cls(x + 0.5, y + 0.5, dir_x, dir_y, plane_x, plane_y, start)


@dataclass(frozen=True)
class RayHit:
    """Where a ray stopped: the cell, the side crossed (0 for x, 1 for y) and distance."""

    map_x: int
    map_y: int
    side: int
    distance: float
    dir_x: float
    dir_y: float


def _axis_setup(pos: float, cell: int, direction: float) -> tuple[float, int, float]:
    """Delta distance, step and initial side distance along one axis."""
    if direction == 0:
        return math.inf, 1, math.inf
    delta = abs(1.0 / direction)
    if direction < 0:
        return delta, -1, (pos - cell) * delta
    return delta, 1, (cell + 1.0 - pos) * delta


def cast_ray(
    grid: Sequence[str], pos_x: float, pos_y: float, dir_x: float, dir_y: float
) -> RayHit:
    """Step through the grid from ``(pos_x, pos_y)`` until a wall or the edge is met."""
    if dir_x == 0 and dir_y == 0:
        raise ValueError("ray direction must not be zero")
    height = len(grid)
    width = max((len(row) for row in grid), default=0)
    map_x, map_y = int(pos_x), int(pos_y)
    delta_x, step_x, side_x = _axis_setup(pos_x, map_x, dir_x)
    delta_y, step_y, side_y = _axis_setup(pos_y, map_y, dir_y)
    while True:
        if side_x < side_y:
            side_x += delta_x
            map_x += step_x
            side = 0
        else:
            side_y += delta_y
            map_y += step_y
            side = 1
        if not (0 <= map_y < height and 0 <= map_x < width):
            break
        row = grid[map_y]
        if map_x < len(row) and row[map_x] == "1":
            break
    if side == 0:
        distance = (map_x - pos_x + (1 - step_x) / 2.0) / dir_x
    else:
        distance = (map_y - pos_y + (1 - step_y) / 2.0) / dir_y
    return RayHit(map_x, map_y, side, distance, dir_x, dir_y)


def texture_x(hit: RayHit, pos_x: float, pos_y: float, width: int) -> int:
    """Texture column for the point where ``hit`` met the wall."""
    if hit.side == 0:
        wall_x = pos_y + hit.distance * hit.dir_y
    else:
        wall_x = pos_x + hit.distance * hit.dir_x
    wall_x -= math.floor(wall_x)
    column = int(wall_x * width)
    if (hit.side == 0 and hit.dir_x > 0) or (hit.side == 1 and hit.dir_y < 0):
        column = width - column - 1
    return column


def texture_sampling(
    distance: float, draw_start: int, height: int, screen_height: int = SCREEN_HEIGHT
) -> tuple[float, float]:
    """Texture step per screen row and starting texture row for a wall slice."""
    if distance <= 0:
        raise ValueError("distance must be positive")
    line_height = int(screen_height / distance)
    if line_height <= 0:
        raise ValueError("wall is too far away to be drawn")
    step = 1.0 * height / line_height
    tex_pos = (draw_start - screen_height // 2 + line_height // 2) * step
    return step, tex_pos