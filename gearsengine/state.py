"""Shared engine state: camera, log, editor flags and the render viewport."""

from __future__ import annotations

from dataclasses import dataclass, field

from .camera import Camera
from .logger import Logger


@dataclass
class Viewport:
    """The rectangle of the window where the scene is rendered in the editor."""

    x_offset: int = 0
    y_offset: int = 150
    width: int = 1580
    height: int = 1090

    def contains(self, x: float, y: float) -> bool:
        """True when the point lies inside the rectangle, edges included."""
        return (
            self.x_offset <= x <= self.x_offset + self.width
            and self.y_offset <= y <= self.y_offset + self.height
        )


@dataclass
class EngineState:
    """Process-wide objects and flags shared by the engine and editor."""

    camera: Camera = field(default_factory=Camera)
    logger: Logger = field(default_factory=Logger)
    editor_mode: bool = True
    game_console: bool = True
    viewport: Viewport = field(default_factory=Viewport)
    drag_step: float = 0.03
    dir_light_properties: bool = False