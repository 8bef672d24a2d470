"""The editor toolbar: tab selection, save targets and the level object file format."""

from __future__ import annotations

import enum
import struct
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

import numpy as np

from .scene import SceneObject

_COUNT = struct.Struct("<i")
_VEC3 = struct.Struct("<3f")
_NAME_ENCODING = "utf-8"


class SelectedTab(enum.Enum):
    """The editor page shown below the toolbar."""

    NONE = enum.auto()
    LEVEL = enum.auto()
    MATERIAL = enum.auto()
    PARTICLE = enum.auto()
    ANIMATION = enum.auto()


class FileType(enum.Enum):
    """The kind of file the save dialog produces."""

    FILE_PART = enum.auto()
    FILE_LVL = enum.auto()
    FILE_MAT = enum.auto()


_SAVE_EXTENSIONS = {
    SelectedTab.PARTICLE: ".part",
    SelectedTab.LEVEL: ".lvl",
}


def save_objects(objects: Iterable[SceneObject], filename: str | Path) -> None:
    """Write each object's name, position, rotation and scale to ``filename``.

    Layout: a 32-bit object count, then per object a NUL-terminated name
    followed by three 3-float vectors (position, rotation, scale).
    """
    objects = list(objects)
    out = bytearray(_COUNT.pack(len(objects)))
    for obj in objects:
        out += obj.object_name.encode(_NAME_ENCODING) + b"\0"
        for vector in (obj.position, obj.rotation, obj.scale):
            out += _VEC3.pack(*(float(v) for v in vector))
    Path(filename).write_bytes(bytes(out))


def load_objects(filename: str | Path) -> list[SceneObject]:
    """Read objects written by :func:`save_objects`.

    A missing file yields an empty list; a truncated one raises ValueError.
    """
    path = Path(filename)
    if not path.is_file():
        return []
    data = path.read_bytes()
    if len(data) < _COUNT.size:
        raise ValueError("object file is truncated")
    (count,) = _COUNT.unpack_from(data, 0)
    pos = _COUNT.size
    objects = []
    for _ in range(count):
        end = data.find(b"\0", pos)
        if end == -1:
            raise ValueError("object file is truncated")
        name = data[pos:end].decode(_NAME_ENCODING)
        pos = end + 1
        vectors = []
        for _ in range(3):
            if pos + _VEC3.size > len(data):
                raise ValueError("object file is truncated")
            vectors.append(np.array(_VEC3.unpack_from(data, pos), dtype=float))
            pos += _VEC3.size
        position, rotation, scale = vectors
        objects.append(
            SceneObject(position=position, rotation=rotation, scale=scale, object_name=name)
        )
    return objects


@dataclass
class HeaderPanel:
    """Toolbar state: which tab is open and what kind of file a save creates."""

    current_tab: SelectedTab = SelectedTab.LEVEL
    current_file_type: FileType = FileType.FILE_PART

    def save_extension(self) -> str | None:
        """Extension offered by the save dialog for the current tab, if any."""
        return _SAVE_EXTENSIONS.get(self.current_tab)

    def create_save_file(self, file_path: str | Path) -> bool:
        """Create the empty file chosen in the save dialog; True when one was written.

        Only particle files are created, and only when the path names a ``.part`` file.
        """
        if self.current_file_type is not FileType.FILE_PART:
            return False
        if ".part" not in str(file_path):
            return False
        try:
            Path(file_path).write_bytes(b"")
        except OSError:
            return False
        return True