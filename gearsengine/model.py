"""Meshes, their textures, and models with a compact binary cache format."""

from __future__ import annotations

import itertools
import struct
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from pathlib import Path

Vec2 = tuple[float, float]
Vec3 = tuple[float, float, float]
TextureLoader = Callable[[str, str, bool], int]

_SIZE = struct.Struct("<Q")
_VERTEX = struct.Struct("<14f")
_INDEX = struct.Struct("<I")
_PATH_ENCODING = "utf-8"

_NUMBERED_TYPES = ("texture_diffuse", "texture_specular", "texture_normal", "texture_height")

_texture_ids = itertools.count(1)


def _load_texture(path: str, directory: str, gamma: bool = False) -> int:
    """Resolve a texture file and hand out a handle for it, or 0 when it is missing."""
    filename = Path(f"{directory}/{path}")
    if not filename.is_file():
        print(f"Texture failed to load at path: {path}")
        return 0
    return next(_texture_ids)


@dataclass
class Vertex:
    """One mesh vertex with its tangent frame."""

    position: Vec3 = (0.0, 0.0, 0.0)
    normal: Vec3 = (0.0, 0.0, 0.0)
    tex_coords: Vec2 = (0.0, 0.0)
    tangent: Vec3 = (0.0, 0.0, 0.0)
    bitangent: Vec3 = (0.0, 0.0, 0.0)


def _pack_vertex(vertex: Vertex) -> bytes:
    return _VERTEX.pack(
        *vertex.position, *vertex.normal, *vertex.tex_coords, *vertex.tangent, *vertex.bitangent
    )


def _unpack_vertex(values: tuple[float, ...]) -> Vertex:
    return Vertex(
        position=tuple(values[0:3]),
        normal=tuple(values[3:6]),
        tex_coords=tuple(values[6:8]),
        tangent=tuple(values[8:11]),
        bitangent=tuple(values[11:14]),
    )


@dataclass
class Texture:
    """A loaded texture: its handle, its shader role and its file path."""

    id: int = 0
    type: str = ""
    path: str = ""
    data: bytes = b""


@dataclass
class Mesh:
    """Indexed triangle geometry with the textures it is drawn with."""

    vertices: list[Vertex] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)
    textures: list[Texture] = field(default_factory=list)

    def texture_bindings(self) -> list[tuple[str, int, int]]:
        """Sampler uniform name, texture unit and texture id for each texture.

        Known texture roles are numbered per role from 1 (``texture_diffuse1``,
        ``texture_diffuse2``...); any other role is used as the name unchanged.
        """
        counters = dict.fromkeys(_NUMBERED_TYPES, 1)
        bindings = []
        for unit, texture in enumerate(self.textures):
            number = ""
            if texture.type in counters:
                number = str(counters[texture.type])
                counters[texture.type] += 1
            bindings.append((texture.type + number, unit, texture.id))
        return bindings


class _Reader:
    def __init__(self, data: bytes) -> None:
        self._data = memoryview(data)
        self._pos = 0

    def take(self, length: int) -> memoryview:
        end = self._pos + length
        if end > len(self._data):
            raise ValueError("model file is truncated")
        chunk = self._data[self._pos:end]
        self._pos = end
        return chunk

    def size(self) -> int:
        return _SIZE.unpack(self.take(_SIZE.size))[0]


class Model:
    """A set of meshes plus the textures shared between them."""

    def __init__(
        self,
        directory: str = "",
        gamma_correction: bool = False,
        texture_loader: TextureLoader = _load_texture,
    ) -> None:
        self.textures_loaded: list[Texture] = []
        self.meshes: list[Mesh] = []
        self.directory = directory
        self.gamma_correction = gamma_correction
        self.texture_loader = texture_loader

    def material_textures(self, paths: Iterable[str], type_name: str) -> list[Texture]:
        """Textures for ``paths``, reusing any already loaded from the same path."""
        textures = []
        for path in paths:
            loaded = next((t for t in self.textures_loaded if t.path == path), None)
            if loaded is None:
                loaded = Texture(
                    id=self.texture_loader(path, self.directory, False),
                    type=type_name,
                    path=path,
                )
                self.textures_loaded.append(loaded)
            textures.append(loaded)
        return textures

    def serialize(self, filename: str | Path) -> None:
        """Write all meshes (vertices, indices, texture paths) to ``filename``."""
        out = bytearray(_SIZE.pack(len(self.meshes)))
        for mesh in self.meshes:
            out += _SIZE.pack(len(mesh.vertices))
            for vertex in mesh.vertices:
                out += _pack_vertex(vertex)
            out += _SIZE.pack(len(mesh.indices))
            for index in mesh.indices:
                out += _INDEX.pack(index)
            out += _SIZE.pack(len(mesh.textures))
            for texture in mesh.textures:
                encoded = texture.path.encode(_PATH_ENCODING, "surrogateescape")
                out += _SIZE.pack(len(encoded))
                out += encoded
        Path(filename).write_bytes(bytes(out))

    def deserialize(self, filename: str | Path, directory: str) -> None:
        """Replace the meshes with those stored in ``filename``.

        Textures are reloaded from ``directory``. Raises ValueError on a truncated file.
        """
        reader = _Reader(Path(filename).read_bytes())
        meshes = []
        for _ in range(reader.size()):
            vertex_count = reader.size()
            raw = reader.take(vertex_count * _VERTEX.size)
            vertices = [_unpack_vertex(values) for values in _VERTEX.iter_unpack(raw)]

            index_count = reader.size()
            raw = reader.take(index_count * _INDEX.size)
            indices = [value for (value,) in _INDEX.iter_unpack(raw)]

            textures = []
            for _ in range(reader.size()):
                length = reader.size()
                path = bytes(reader.take(length)).decode(_PATH_ENCODING, "surrogateescape")
                textures.append(
                    Texture(
                        id=self.texture_loader(path, directory, self.gamma_correction),
                        path=path,
                    )
                )
            meshes.append(Mesh(vertices, indices, textures))
        self.meshes = meshes