"""Keyboard and mouse handling that drives the camera and console toggles."""

from __future__ import annotations

import enum
from collections.abc import Iterable

from .camera import CameraMovement
from .state import EngineState


class Key(enum.Enum):
    """Keys the engine reacts to."""

    ESCAPE = enum.auto()
    W = enum.auto()
    S = enum.auto()
    A = enum.auto()
    D = enum.auto()
    ONE = enum.auto()


class KeyAction(enum.IntEnum):
    """What happened to a key."""

    RELEASE = 0
    PRESS = 1
    REPEAT = 2


_MOVEMENT_KEYS = (
    (Key.W, CameraMovement.FORWARD),
    (Key.S, CameraMovement.BACKWARD),
    (Key.A, CameraMovement.LEFT),
    (Key.D, CameraMovement.RIGHT),
)


def lerp(a: float, b: float, t: float) -> float:
    """Linear interpolation from ``a`` to ``b`` with ``t`` clamped to [0, 1]."""
    t = min(max(t, 0.0), 1.0)
    return a + t * (b - a)


class Input:
    """Turns raw input events into camera motion and editor toggles."""

    def __init__(self, state: EngineState) -> None:
        self.state = state
        self.first_mouse = True
        self.last_x = 0.0
        self.last_y = 0.0
        self.previous_key_state: dict[Key, KeyAction] = {key: KeyAction.RELEASE for key in Key}
        self.key_q_pressed = False

    @property
    def camera(self):
        return self.state.camera

    def mouse_moved(self, xpos: float, ypos: float, right_button_down: bool = False) -> bool:
        """Handle a cursor move; return True when the camera was turned.

        In game mode the camera always follows the mouse. In editor mode it
        turns only while the right button is held inside the viewport.
        """
        if self.first_mouse:
            self.last_x = xpos
            self.last_y = ypos
            self.first_mouse = False

        xoffset = xpos - self.last_x
        yoffset = self.last_y - ypos
        self.last_x = xpos
        self.last_y = ypos

        if self.state.editor_mode and not (
            right_button_down and self.state.viewport.contains(xpos, ypos)
        ):
            return False
        self.camera.process_mouse_movement(xoffset, yoffset)
        return True

    def process_input(self, pressed_keys: Iterable[Key], delta_time: float) -> bool:
        """Move the camera for held keys; return True when the window should close."""
        pressed = set(pressed_keys)
        for key, movement in _MOVEMENT_KEYS:
            if key in pressed:
                self.camera.process_keyboard(movement, delta_time)
        return Key.ESCAPE in pressed

    def process_single_key_press(self, key: Key, action: KeyAction) -> None:
        """Record a key event; each press of ``1`` toggles the game console."""
        if key is Key.ONE and action == KeyAction.PRESS:
            self.key_q_pressed = not self.key_q_pressed
            self.state.game_console = not self.key_q_pressed
        self.previous_key_state[key] = action