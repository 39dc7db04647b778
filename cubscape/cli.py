"""Command line entry point: validate a scene file and place the player."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from cubscape.checks import CubError
from cubscape.mapfile import load
from cubscape.raycast import Player


def main(argv: Sequence[str] | None = None) -> int:
    """Load the scene named on the command line and report where the player starts."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print("Error\nNumber of wrong arguments")
        return 0
    try:
        scene = load(args[0])
        x, y = scene.player_cell()
    except CubError as exc:
        print(f"Error\n{exc}")
        return 0
    player = Player.from_start(x, y, scene.start)
    print(
        f"{scene.width}x{scene.height} map, start {player.start} "
        f"at ({player.pos_x}, {player.pos_y})"
    )
    return 0