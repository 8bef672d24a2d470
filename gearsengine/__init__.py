"""Core of a small 3D game engine and level editor: camera, lighting, particles, models, scenes and level files."""

__version__ = "0.1.0"

__all__ = [
    "animation",
    "camera",
    "console",
    "header",
    "input",
    "level",
    "lighting",
    "logger",
    "memory",
    "model",
    "particles",
    "primitives",
    "scene",
    "state",
    "timer",
    "transforms",
]