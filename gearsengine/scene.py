"""Placed model instances, the scene holding them, and the editor's model list."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

import numpy as np

from .logger import LogEntry, Logger, LogLevel
from .model import Model
from .transforms import rotate, scale, translate

_AXES = (
    np.array([1.0, 0.0, 0.0]),
    np.array([0.0, 1.0, 0.0]),
    np.array([0.0, 0.0, 1.0]),
)


def _fmt(vector) -> str:
    return ", ".join(f"{float(v):.6f}" for v in vector)


@dataclass(eq=False)
class SceneObject:
    """A model placed in the world; rotation is in degrees about x, y then z."""

    model: Model = field(default_factory=Model)
    position: np.ndarray = field(default_factory=lambda: np.zeros(3))
    rotation: np.ndarray = field(default_factory=lambda: np.zeros(3))
    scale: np.ndarray = field(default_factory=lambda: np.ones(3))
    base_color: np.ndarray = field(default_factory=lambda: np.array([0.0, 0.0, 1.0]))
    highlight_color: np.ndarray = field(default_factory=lambda: np.ones(4))
    object_name: str = ""

    def has_meshes(self) -> bool:
        return bool(self.model.meshes)

    def transform(self) -> np.ndarray:
        """Model matrix: translate, rotate about x, y, z, then scale."""
        matrix = translate(np.identity(4), self.position)
        for angle, axis in zip(self.rotation, _AXES):
            matrix = rotate(matrix, math.radians(float(angle)), axis)
        return scale(matrix, self.scale)

    def object_info(self) -> str:
        """Human-readable summary of name, position, rotation and scale."""
        return (
            f"Object: {self.object_name}\n"
            f"Position: ({_fmt(self.position)})\n"
            f"Rotation: ({_fmt(self.rotation)})\n"
            f"Scale: ({_fmt(self.scale)})"
        )


class Scene:
    """The objects currently placed in the level."""

    def __init__(self) -> None:
        self.objects: list[SceneObject] = []

    def add_object(self, obj: SceneObject) -> None:
        self.objects.append(obj)

    def log_objects_info(self, logger: Logger) -> list[LogEntry]:
        """Log each object's summary at INFO level; return the entries written."""
        return [logger.log(LogLevel.INFO, obj.object_info(), 0) for obj in self.objects]


class ObjectList:
    """Models loaded in the editor and which one is selected."""

    def __init__(self) -> None:
        self.model_index = -1
        self.loaded_models: list[Model] = []
        self.selected_model_indices: list[int] = []
        self.displayed_models: list[Model] = []
        self.save_directory = ""

    def set_model_index(self, index: int) -> None:
        """Select a loaded model; indices outside the list are ignored."""
        if 0 <= index < len(self.loaded_models):
            self.model_index = index