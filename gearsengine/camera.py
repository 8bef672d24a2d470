"""Free-flying first-person camera driven by keyboard and mouse."""

from __future__ import annotations

import enum
import math

import numpy as np

from .transforms import look_at, normalize, rotate

YAW = -90.0
PITCH = 0.0
SENSITIVITY = 0.2
ZOOM = 60.0
ROLL = 0.0
SPEED = 10.0
PITCH_LIMIT = 89.0
ZOOM_MIN = 1.0
ZOOM_MAX = 45.0


class CameraMovement(enum.Enum):
    FORWARD = enum.auto()
    BACKWARD = enum.auto()
    LEFT = enum.auto()
    RIGHT = enum.auto()


def _flatten(vector: np.ndarray) -> np.ndarray:
    flat = vector.copy()
    flat[1] = 0.0
    return normalize(flat)


class Camera:
    """Euler-angle camera; angles are in degrees."""

    def __init__(
        self,
        position=(1.0, 5.0, 5.0),
        up=(0.0, 1.0, 0.0),
        yaw: float = YAW,
        pitch: float = PITCH,
        roll: float = ROLL,
    ) -> None:
        self.camera_mode = False
        self.speed = SPEED
        self.position = np.array(position, dtype=float)
        self.world_up = np.array(up, dtype=float)
        self.front = np.array([0.0, 0.0, -1.0])
        self.up = self.world_up.copy()
        self.right = np.array([1.0, 0.0, 0.0])
        self.yaw = float(yaw)
        self.pitch = float(pitch)
        self.roll = float(roll)
        self.movement_speed = SPEED
        self.mouse_sensitivity = SENSITIVITY
        self.zoom = ZOOM
        self.projection = np.identity(4)
        self.update_camera_vectors()

    def view_matrix(self) -> np.ndarray:
        return look_at(self.position, self.position + self.front, self.up)

    def process_keyboard(self, direction: CameraMovement, delta_time: float) -> None:
        """Move the camera; in camera mode forward/backward stay in the ground plane."""
        velocity = self.movement_speed * delta_time
        if direction is CameraMovement.FORWARD:
            step = _flatten(self.front) if self.camera_mode else self.front
            self.position = self.position + step * velocity
        elif direction is CameraMovement.BACKWARD:
            step = _flatten(-self.front) if self.camera_mode else -self.front
            self.position = self.position + step * velocity
        elif direction is CameraMovement.LEFT:
            self.position = self.position - self.right * velocity
        elif direction is CameraMovement.RIGHT:
            self.position = self.position + self.right * velocity

    def process_mouse_movement(
        self, xoffset: float, yoffset: float, constrain_pitch: bool = True
    ) -> None:
        self.yaw += xoffset * self.mouse_sensitivity
        self.pitch += yoffset * self.mouse_sensitivity
        if constrain_pitch:
            self.pitch = min(max(self.pitch, -PITCH_LIMIT), PITCH_LIMIT)
        self.update_camera_vectors()

    def process_mouse_scroll(self, yoffset: float) -> None:
        if ZOOM_MIN <= self.zoom <= ZOOM_MAX:
            self.zoom -= yoffset
        if self.zoom <= ZOOM_MIN:
            self.zoom = ZOOM_MIN
        if self.zoom >= ZOOM_MAX:
            self.zoom = ZOOM_MAX

    def set_position(self, position) -> None:
        self.position = np.array(position, dtype=float)
        self.update_camera_vectors()

    def update_camera_vectors(self) -> None:
        """Recompute the front/right/up basis from yaw, pitch and roll."""
        yaw = math.radians(self.yaw)
        pitch = math.radians(self.pitch)
        front = np.array(
            [
                math.cos(yaw) * math.cos(pitch),
                math.sin(pitch),
                math.sin(yaw) * math.cos(pitch),
            ]
        )
        self.front = normalize(front)
        self.right = normalize(np.cross(self.front, self.world_up))
        self.up = normalize(np.cross(self.right, self.front))

        roll = rotate(np.identity(4), math.radians(self.roll), self.front)[:3, :3]
        self.right = roll @ self.right
        self.up = roll @ self.up