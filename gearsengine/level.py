"""Content browser: finds cached models on disk and places them in the scene."""

from __future__ import annotations

import sys
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from pathlib import Path

import numpy as np

from .logger import Logger, LogLevel
from .model import Model
from .scene import ObjectList, Scene, SceneObject

ROOT_PATH = "../Gears/"
MODEL_EXTENSION = "modelbin"
PARTICLE_EXTENSION = "part"
DEFAULT_TEXTURE_PATH = "../Resources/Textures/Props"
DEFAULT_MODELS_FOLDER = "../Resources/Models"
LEVEL_MODEL_NAMES = ("terrain.modelbin",)


def convert_to_relative_path(full_path: str) -> str:
    """Strip everything up to the engine root and use forward slashes."""
    pos = full_path.find(ROOT_PATH)
    relative = full_path[pos + len(ROOT_PATH):] if pos != -1 else full_path
    return relative.replace("\\", "/")


def _extension(path: str) -> str:
    return path.rsplit(".", 1)[-1]


def _is_listed_file(name: str) -> bool:
    return len(name) >= 8 and (
        name.endswith(MODEL_EXTENSION) or name.endswith(PARTICLE_EXTENSION)
    )


@dataclass
class ObjectInfo:
    """Snapshot of a scene object's placement for the editor panels."""

    index: int
    position: np.ndarray = field(default_factory=lambda: np.zeros(3))
    scale: np.ndarray = field(default_factory=lambda: np.ones(3))
    rotation: np.ndarray = field(default_factory=lambda: np.zeros(3))
    object_name: str = ""


class ContentBrowser:
    """Loads cached models into a scene and keeps the editor's view of it."""

    def __init__(
        self,
        scene: Scene | None = None,
        object_list: ObjectList | None = None,
        logger: Logger | None = None,
        texture_path: str = DEFAULT_TEXTURE_PATH,
        model_factory: Callable[[], Model] = Model,
    ) -> None:
        self.scene = scene if scene is not None else Scene()
        self.object_list = object_list if object_list is not None else ObjectList()
        self.logger = logger
        self.texture_path = texture_path
        self.model_factory = model_factory
        self.selected_object_index = -1
        self.object_data: list[ObjectInfo] = []

    def _load_model(self, relative_path: str) -> Model | None:
        model = self.model_factory()
        try:
            model.deserialize(relative_path, self.texture_path)
        except OSError:
            # An unreadable file leaves the model empty but still placeable.
            pass
        except ValueError as exc:
            print(f"ErrorLoadModel: {exc}", file=sys.stderr)
            return None
        return model

    def _place(self, file_path, position=None, scale=None, rotation=None) -> SceneObject | None:
        relative = convert_to_relative_path(str(file_path))
        if _extension(relative) != MODEL_EXTENSION:
            return None
        model = self._load_model(relative)
        if model is None:
            return None
        obj = SceneObject(model=model, object_name=Path(str(file_path)).stem)
        if position is not None:
            obj.position = np.array(position, dtype=float)
        if scale is not None:
            obj.scale = np.array(scale, dtype=float)
        if rotation is not None:
            obj.rotation = np.array(rotation, dtype=float)
        self.object_list.loaded_models.append(model)
        self.scene.add_object(obj)
        return obj

    def load_on_scene(
        self,
        file_paths: Sequence,
        positions: Sequence,
        scales: Sequence,
        rotations: Sequence,
    ) -> list[SceneObject]:
        """Place each model file with its transform; return the objects added.

        Raises ValueError when the four sequences differ in length.
        """
        count = len(file_paths)
        if not (len(positions) == len(scales) == len(rotations) == count):
            raise ValueError("file paths, positions, scales and rotations must match in length")
        added = []
        for path, position, scale, rotation in zip(file_paths, positions, scales, rotations):
            obj = self._place(path, position, scale, rotation)
            if obj is not None:
                added.append(obj)
        return added

    def selected_file(self, file_path) -> SceneObject | None:
        """Place the chosen model file at the origin; None if it is not a model."""
        return self._place(file_path)

    def folder_entries(self, directory) -> list[tuple[str, Path, bool]]:
        """Entries shown in the folder tree: (label, path, is_directory), sorted.

        Directories are listed by name; model and particle files by name
        without their extension. A missing directory yields nothing.
        """
        root = Path(directory)
        if not root.is_dir():
            return []
        entries = []
        for entry in sorted(root.iterdir()):
            if entry.is_dir():
                entries.append((entry.name, entry, True))
            elif entry.is_file() and _is_listed_file(entry.name):
                name = entry.name
                label = name[: name.rfind(".")] if "." in name else name
                entries.append((label, entry, False))
        return entries

    def update_object_data(self) -> list[ObjectInfo]:
        """Rebuild the placement snapshot of every scene object."""
        index = self.object_list.model_index
        self.object_data = [
            ObjectInfo(
                index=index,
                position=np.array(obj.position, dtype=float),
                scale=np.array(obj.scale, dtype=float),
                rotation=np.array(obj.rotation, dtype=float),
            )
            for obj in self.scene.objects
        ]
        return self.object_data


def load_level(browser: ContentBrowser, models_folder: str = DEFAULT_MODELS_FOLDER) -> list[SceneObject]:
    """Place the level's models at the origin with unit scale."""
    if browser.logger is not None:
        browser.logger.log(LogLevel.INFO, "Load", 0)
    paths = [f"{models_folder}/{name}" for name in LEVEL_MODEL_NAMES]
    count = len(paths)
    return browser.load_on_scene(
        paths,
        [(0.0, 0.0, 0.0)] * count,
        [(1.0, 1.0, 1.0)] * count,
        [(0.0, 0.0, 0.0)] * count,
    )