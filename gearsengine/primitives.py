"""Vertex data for the built-in cube, screen quad and UV sphere."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

# position (3), normal (3), texture coordinate (2)
_CUBE = (
    # back face
    (-1.0, -1.0, -1.0, 0.0, 0.0, -1.0, 0.0, 0.0),
    (1.0, 1.0, -1.0, 0.0, 0.0, -1.0, 1.0, 1.0),
    (1.0, -1.0, -1.0, 0.0, 0.0, -1.0, 1.0, 0.0),
    (1.0, 1.0, -1.0, 0.0, 0.0, -1.0, 1.0, 1.0),
    (-1.0, -1.0, -1.0, 0.0, 0.0, -1.0, 0.0, 0.0),
    (-1.0, 1.0, -1.0, 0.0, 0.0, -1.0, 0.0, 1.0),
    # front face
    (-1.0, -1.0, 1.0, 0.0, 0.0, 1.0, 0.0, 0.0),
    (1.0, -1.0, 1.0, 0.0, 0.0, 1.0, 1.0, 0.0),
    (1.0, 1.0, 1.0, 0.0, 0.0, 1.0, 1.0, 1.0),
    (1.0, 1.0, 1.0, 0.0, 0.0, 1.0, 1.0, 1.0),
    (-1.0, 1.0, 1.0, 0.0, 0.0, 1.0, 0.0, 1.0),
    (-1.0, -1.0, 1.0, 0.0, 0.0, 1.0, 0.0, 0.0),
    # left face
    (-1.0, 1.0, 1.0, -1.0, 0.0, 0.0, 1.0, 0.0),
    (-1.0, 1.0, -1.0, -1.0, 0.0, 0.0, 1.0, 1.0),
    (-1.0, -1.0, -1.0, -1.0, 0.0, 0.0, 0.0, 1.0),
    (-1.0, -1.0, -1.0, -1.0, 0.0, 0.0, 0.0, 1.0),
    (-1.0, -1.0, 1.0, -1.0, 0.0, 0.0, 0.0, 0.0),
    (-1.0, 1.0, 1.0, -1.0, 0.0, 0.0, 1.0, 0.0),
    # right face
    (1.0, 1.0, 1.0, 1.0, 0.0, 0.0, 1.0, 0.0),
    (1.0, -1.0, -1.0, 1.0, 0.0, 0.0, 0.0, 1.0),
    (1.0, 1.0, -1.0, 1.0, 0.0, 0.0, 1.0, 1.0),
    (1.0, -1.0, -1.0, 1.0, 0.0, 0.0, 0.0, 1.0),
    (1.0, 1.0, 1.0, 1.0, 0.0, 0.0, 1.0, 0.0),
    (1.0, -1.0, 1.0, 1.0, 0.0, 0.0, 0.0, 0.0),
    # bottom face
    (-1.0, -1.0, -1.0, 0.0, -1.0, 0.0, 0.0, 1.0),
    (1.0, -1.0, -1.0, 0.0, -1.0, 0.0, 1.0, 1.0),
    (1.0, -1.0, 1.0, 0.0, -1.0, 0.0, 1.0, 0.0),
    (1.0, -1.0, 1.0, 0.0, -1.0, 0.0, 1.0, 0.0),
    (-1.0, -1.0, 1.0, 0.0, -1.0, 0.0, 0.0, 0.0),
    (-1.0, -1.0, -1.0, 0.0, -1.0, 0.0, 0.0, 1.0),
    # top face
    (-1.0, 1.0, -1.0, 0.0, 1.0, 0.0, 0.0, 1.0),
    (1.0, 1.0, 1.0, 0.0, 1.0, 0.0, 1.0, 0.0),
    (1.0, 1.0, -1.0, 0.0, 1.0, 0.0, 1.0, 1.0),
    (1.0, 1.0, 1.0, 0.0, 1.0, 0.0, 1.0, 0.0),
    (-1.0, 1.0, -1.0, 0.0, 1.0, 0.0, 0.0, 1.0),
    (-1.0, 1.0, 1.0, 0.0, 1.0, 0.0, 0.0, 0.0),
)

# position (3), texture coordinate (2); drawn as a triangle strip
_QUAD = (
    (-1.0, 1.0, 0.0, 0.0, 1.0),
    (-1.0, -1.0, 0.0, 0.0, 0.0),
    (1.0, 1.0, 0.0, 1.0, 1.0),
    (1.0, -1.0, 0.0, 1.0, 0.0),
)

SPHERE_SEGMENTS = 64


def cube_vertices() -> np.ndarray:
    """36 triangle vertices of a 2x2x2 cube, each row position, normal, uv."""
    return np.array(_CUBE, dtype=np.float32)


def quad_vertices() -> np.ndarray:
    """Four strip vertices of a full-screen quad, each row position, uv."""
    return np.array(_QUAD, dtype=np.float32)


@dataclass(frozen=True)
class SphereMesh:
    """A unit UV sphere laid out for drawing as one triangle strip."""

    positions: np.ndarray
    uvs: np.ndarray
    normals: np.ndarray
    indices: np.ndarray

    @property
    def index_count(self) -> int:
        return len(self.indices)

    @property
    def data(self) -> np.ndarray:
        """Interleaved rows of position, uv, normal as float32."""
        return np.hstack((self.positions, self.uvs, self.normals)).astype(np.float32)


def sphere_mesh(
    x_segments: int = SPHERE_SEGMENTS, y_segments: int = SPHERE_SEGMENTS
) -> SphereMesh:
    """Build a unit sphere with ``x_segments`` around and ``y_segments`` top to bottom."""
    if x_segments < 1 or y_segments < 1:
        raise ValueError("sphere needs at least one segment in each direction")

    positions: list[tuple[float, float, float]] = []
    uvs: list[tuple[float, float]] = []
    for y in range(y_segments + 1):
        v = y / y_segments
        for x in range(x_segments + 1):
            u = x / x_segments
            px = math.cos(u * 2.0 * math.pi) * math.sin(v * math.pi)
            py = math.cos(v * math.pi)
            pz = math.sin(u * 2.0 * math.pi) * math.sin(v * math.pi)
            positions.append((px, py, pz))
            uvs.append((u, v))

    row = x_segments + 1
    indices: list[int] = []
    for y in range(y_segments):
        columns = range(row) if y % 2 == 0 else range(x_segments, -1, -1)
        for x in columns:
            top, bottom = y * row + x, (y + 1) * row + x
            indices.extend((top, bottom) if y % 2 == 0 else (bottom, top))

    pos = np.array(positions, dtype=float)
    return SphereMesh(
        positions=pos,
        uvs=np.array(uvs, dtype=float),
        normals=pos.copy(),
        indices=np.array(indices, dtype=np.uint32),
    )