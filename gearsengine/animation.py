"""Keyframe animation containers and a simple time-based player."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class AnimationFrame:
    """A single pose of the skeleton."""


@dataclass
class Animation:
    """A sequence of frames spanning ``start_time`` to ``end_time``."""

    frames: list[AnimationFrame] = field(default_factory=list)
    start_time: float = 0.0
    end_time: float = 0.0


class AnimationPlayer:
    """Advances the current animation and drops it once it runs past its end."""

    def __init__(self) -> None:
        self.current_animation: Animation | None = None
        self.current_time = 0.0

    def play(self, animation: Animation) -> None:
        self.current_animation = animation
        self.current_time = animation.start_time

    def update(self, delta_time: float) -> None:
        if self.current_animation is None:
            return
        self.current_time += delta_time
        if self.current_time > self.current_animation.end_time:
            self.current_animation = None

    def stop(self) -> None:
        self.current_animation = None

    def is_playing(self) -> bool:
        return self.current_animation is not None