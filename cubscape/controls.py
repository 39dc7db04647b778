"""Key codes and the held-key state that drives player movement."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class Key(IntEnum):
    """X11 key symbols the game reacts to."""

    W = 119
    S = 115
    A = 97
    D = 100
    LEFT = 65361
    RIGHT = 65363
    ESC = 65307


_FLAGS = {
    Key.W: "move_forward",
    Key.S: "move_backward",
    Key.A: "move_left",
    Key.D: "move_right",
    Key.LEFT: "turn_left",
    Key.RIGHT: "turn_right",
}


@dataclass
class InputState:
    """Which movement keys are held, and whether quitting was asked for."""

    move_forward: bool = False
    move_backward: bool = False
    move_left: bool = False
    move_right: bool = False
    turn_left: bool = False
    turn_right: bool = False
    quit_requested: bool = False

    def press(self, keycode: int) -> None:
        """Record a key press; Escape requests quitting, unknown keys are ignored."""
        if keycode == Key.ESC:
            self.quit_requested = True
            return
        name = _FLAGS.get(keycode)
        if name is not None:
            setattr(self, name, True)

    def release(self, keycode: int) -> None:
        """Record a key release; unknown keys are ignored."""
        name = _FLAGS.get(keycode)
        if name is not None:
            setattr(self, name, False)