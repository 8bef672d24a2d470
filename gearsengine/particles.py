"""Point-sprite particles and an emitter that moves them over time."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

DEFAULT_PARTICLE_LIFETIME = 5.0
DEFAULT_PARTICLE_AGE = 3.0
DEFAULT_PARTICLE_VELOCITY = (0.1, 0.1, 0.1)


def _v(values) -> np.ndarray:
    return np.array(values, dtype=float)


@dataclass
class Particle:
    """A single point with colour, velocity and a remaining lifetime."""

    position: np.ndarray = field(default_factory=lambda: np.zeros(3))
    color: np.ndarray = field(default_factory=lambda: np.ones(4))
    velocity: np.ndarray = field(default_factory=lambda: np.zeros(3))
    lifetime: float = 0.0
    age: float = 0.0


class ParticleEmitter:
    """Owns a fixed set of particles and advances them under direction, gravity and wind."""

    def __init__(self, num_particles: int = 0) -> None:
        if num_particles < 0:
            raise ValueError(f"particle count must not be negative, got {num_particles}")
        self.particles: list[Particle] = [
            Particle(
                position=np.zeros(3),
                color=np.ones(4),
                velocity=_v(DEFAULT_PARTICLE_VELOCITY),
                lifetime=DEFAULT_PARTICLE_LIFETIME,
                age=DEFAULT_PARTICLE_AGE,
            )
            for _ in range(num_particles)
        ]
        self._color = np.ones(4)
        self.lifetime = 1.0
        self.point_size = 0.0
        self.spawn_position = np.zeros(3)
        self.direction = np.zeros(3)
        self.gravity = np.zeros(3)
        self.wind = np.zeros(3)
        self.age = 0.0
        self.delay = 0.0
        self.max_age = 0.0

    @property
    def color(self) -> np.ndarray:
        return self._color.copy()

    @color.setter
    def color(self, value) -> None:
        """Set the emitter colour and repaint every particle with it."""
        color = _v(value)
        if color.shape != (4,):
            raise ValueError(f"expected an RGBA colour, got shape {color.shape}")
        self._color = color
        for particle in self.particles:
            particle.color = color.copy()

    def update(self, delta_time: float) -> None:
        """Advance every particle by ``delta_time`` seconds."""
        direction = _v(self.direction)
        gravity = _v(self.gravity)
        wind = _v(self.wind)
        for p in self.particles:
            p.age += delta_time

            if p.age < self.delay:
                p.position = p.position + direction * delta_time
            else:
                p.position = p.position + gravity * delta_time

            if p.age >= self.lifetime:
                p.position = direction.copy()
                p.age = 0.0

            p.position = p.position + p.velocity * delta_time
            p.age += self.age * delta_time
            p.position = (
                p.position
                + direction * delta_time
                + gravity * delta_time
                + wind * delta_time
            )
            p.lifetime -= delta_time

            if p.lifetime <= 0.0:
                p.position = np.zeros(3)
                p.lifetime = self.lifetime

    def vertex_data(self) -> np.ndarray:
        """Per-particle position and colour as a float32 array of shape (n, 7)."""
        if not self.particles:
            return np.zeros((0, 7), dtype=np.float32)
        return np.array(
            [np.concatenate((p.position, p.color)) for p in self.particles],
            dtype=np.float32,
        )