"""4x4 transform helpers using column-vector convention (``matrix @ point``)."""

from __future__ import annotations

import math

import numpy as np


def _vec(value) -> np.ndarray:
    return np.asarray(value, dtype=float)


def _mat(value) -> np.ndarray:
    matrix = np.asarray(value, dtype=float)
    if matrix.shape != (4, 4):
        raise ValueError(f"expected a 4x4 matrix, got shape {matrix.shape}")
    return matrix


def normalize(vector) -> np.ndarray:
    """Unit vector in the direction of ``vector`` (NaN for a zero vector)."""
    v = _vec(vector)
    with np.errstate(invalid="ignore", divide="ignore"):
        return v / np.linalg.norm(v)


def look_at(eye, center, up) -> np.ndarray:
    """Right-handed view matrix looking from ``eye`` towards ``center``."""
    eye, center, up = _vec(eye), _vec(center), _vec(up)
    f = normalize(center - eye)
    s = normalize(np.cross(f, up))
    u = np.cross(s, f)
    result = np.identity(4)
    result[0, :3] = s
    result[1, :3] = u
    result[2, :3] = -f
    result[0, 3] = -np.dot(s, eye)
    result[1, 3] = -np.dot(u, eye)
    result[2, 3] = np.dot(f, eye)
    return result


def translate(matrix, offset) -> np.ndarray:
    """``matrix`` followed by a translation by ``offset``."""
    t = np.identity(4)
    t[:3, 3] = _vec(offset)
    return _mat(matrix) @ t


def rotate(matrix, angle: float, axis) -> np.ndarray:
    """``matrix`` followed by a rotation of ``angle`` radians about ``axis``."""
    x, y, z = normalize(axis)
    c, s = math.cos(angle), math.sin(angle)
    k = 1.0 - c
    r = np.identity(4)
    r[:3, :3] = [
        [c + x * x * k, x * y * k - z * s, x * z * k + y * s],
        [y * x * k + z * s, c + y * y * k, y * z * k - x * s],
        [z * x * k - y * s, z * y * k + x * s, c + z * z * k],
    ]
    return _mat(matrix) @ r


def scale(matrix, factors) -> np.ndarray:
    """``matrix`` followed by a per-axis scale."""
    return _mat(matrix) @ np.diag([*_vec(factors), 1.0])


def perspective(fovy: float, aspect: float, near: float, far: float) -> np.ndarray:
    """OpenGL-style perspective projection; ``fovy`` in radians."""
    if aspect == 0:
        raise ValueError("aspect ratio must be non-zero")
    if near == far:
        raise ValueError("near and far planes must differ")
    f = 1.0 / math.tan(fovy / 2.0)
    result = np.zeros((4, 4))
    result[0, 0] = f / aspect
    result[1, 1] = f
    result[2, 2] = -(far + near) / (far - near)
    result[2, 3] = -(2.0 * far * near) / (far - near)
    result[3, 2] = -1.0
    return result