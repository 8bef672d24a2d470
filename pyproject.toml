[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gearsengine"
version = "0.1.0"
description = "Core of a small 3D game engine and level editor: camera, lighting, particles, models, scenes and level files."
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "game-engine",
    "3d",
    "camera",
    "particles",
    "scene",
    "level-editor",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["gearsengine"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
