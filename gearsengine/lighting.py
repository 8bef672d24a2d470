"""Directional, point and spot light parameters plus material, fed to a shader."""

from __future__ import annotations

from typing import Protocol, Union

import numpy as np

UniformValue = Union[float, np.ndarray]


class UniformSink(Protocol):
    def set_float(self, name: str, value: float) -> None: ...

    def set_vec3(self, name: str, value: np.ndarray) -> None: ...


def _v3(value) -> np.ndarray:
    arr = np.asarray(value, dtype=float)
    if arr.ndim == 0:
        return np.full(3, float(arr))
    if arr.shape != (3,):
        raise ValueError(f"expected a 3-component vector, got shape {arr.shape}")
    return arr.copy()


def _zero() -> np.ndarray:
    return np.zeros(3)


class Lighting:
    """Scene light state; vectors accept three components or a single scalar."""

    def __init__(self) -> None:
        self.directional_light_direction = _v3((0.0, 5.0, 0.0))
        self.directional_light_color = _v3((1.0, 2.0, 1.0))
        self.directional_light_ambient = _v3(0.2)
        self.directional_light_diffuse = _v3(1.0)
        self.directional_light_specular = _v3(0.5)
        self.strength = 0.0
        self.attenuation = 0.0

        self.point_light_position = _zero()
        self.point_light_ambient = _zero()
        self.point_light_diffuse = _zero()
        self.point_light_specular = _zero()
        self.point_light_constant = 0.0
        self.point_light_linear = 0.0
        self.point_light_quadratic = 0.0

        self.spot_light_position = _zero()
        self.spot_light_direction = _zero()
        self.spot_light_ambient = _zero()
        self.spot_light_diffuse = _zero()
        self.spot_light_specular = _zero()
        self.spot_light_constant = 0.0
        self.spot_light_linear = 0.0
        self.spot_light_quadratic = 0.0
        self.spot_light_cut_off = 0.0
        self.spot_light_outer_cut_off = 0.0

        self.material_ambient = _zero()
        self.material_diffuse = _zero()
        self.material_specular = _zero()
        self.material_shininess = 0.0

    def initialize(self) -> None:
        """Set the start-up white directional light."""
        self.set_directional_light((1.0, 1.0, 1.0), (5.0, 5.0, 5.0), 0.2, 1.0, 0.5)

    def set_directional_light(self, color, direction, ambient, diffuse, specular) -> None:
        self.directional_light_color = _v3(color)
        self.directional_light_direction = _v3(direction)
        self.directional_light_ambient = _v3(ambient)
        self.directional_light_diffuse = _v3(diffuse)
        self.directional_light_specular = _v3(specular)

    def set_point_light(
        self, position, ambient, diffuse, specular, constant, linear, quadratic
    ) -> None:
        self.point_light_position = _v3(position)
        self.point_light_ambient = _v3(ambient)
        self.point_light_diffuse = _v3(diffuse)
        self.point_light_specular = _v3(specular)
        self.point_light_constant = float(constant)
        self.point_light_linear = float(linear)
        self.point_light_quadratic = float(quadratic)

    def set_spot_light(
        self,
        position,
        direction,
        ambient,
        diffuse,
        specular,
        constant,
        linear,
        quadratic,
        cut_off,
        outer_cut_off,
    ) -> None:
        self.spot_light_position = _v3(position)
        self.spot_light_direction = _v3(direction)
        self.spot_light_ambient = _v3(ambient)
        self.spot_light_diffuse = _v3(diffuse)
        self.spot_light_specular = _v3(specular)
        self.spot_light_constant = float(constant)
        self.spot_light_linear = float(linear)
        self.spot_light_quadratic = float(quadratic)
        self.spot_light_cut_off = float(cut_off)
        self.spot_light_outer_cut_off = float(outer_cut_off)

    def set_material(self, ambient, diffuse, specular, shininess) -> None:
        self.material_ambient = _v3(ambient)
        self.material_diffuse = _v3(diffuse)
        self.material_specular = _v3(specular)
        self.material_shininess = float(shininess)

    def uniforms(self) -> dict[str, UniformValue]:
        """Shader uniform names mapped to values, in upload order."""
        color = self.directional_light_color
        return {
            "lightStrength": self.strength,
            "attenuation": self.attenuation,
            "dirLightDirection": self.directional_light_direction.copy(),
            "dirLightAmbient": color * self.directional_light_ambient,
            "dirLightDiffuse": color * self.directional_light_diffuse,
            "dirLightspecular": color * self.directional_light_specular,
            "pointLight.position": self.point_light_position.copy(),
            "pointLight.ambient": self.point_light_ambient.copy(),
            "pointLight.diffuse": self.point_light_diffuse.copy(),
            "pointLight.specular": self.point_light_specular.copy(),
            "pointLight.constant": self.point_light_constant,
            "pointLight.linear": self.point_light_linear,
            "pointLight.quadratic": self.point_light_quadratic,
            "spotLight.position": self.spot_light_position.copy(),
            "spotLight.direction": self.spot_light_direction.copy(),
            "spotLight.ambient": self.spot_light_ambient.copy(),
            "spotLight.diffuse": self.spot_light_diffuse.copy(),
            "spotLight.specular": self.spot_light_specular.copy(),
            "spotLight.constant": self.spot_light_constant,
            "spotLight.linear": self.spot_light_linear,
            "spotLight.quadratic": self.spot_light_quadratic,
            "spotLight.cutOff": self.spot_light_cut_off,
            "spotLight.outerCutOff": self.spot_light_outer_cut_off,
            "material.ambient": self.material_ambient.copy(),
            "material.diffuse": self.material_diffuse.copy(),
            "material.specular": self.material_specular.copy(),
            "material.shininess": self.material_shininess,
        }

    def apply_lighting(self, shader: UniformSink) -> None:
        """Upload every uniform to ``shader``."""
        for name, value in self.uniforms().items():
            if isinstance(value, np.ndarray):
                shader.set_vec3(name, value)
            else:
                shader.set_float(name, value)