"""Light component holding colour, power, range and cone settings."""

from __future__ import annotations

from enum import IntEnum
from typing import Iterable

from .node import Component

__all__ = ["LightType", "LightComponent"]

Vec3 = tuple[float, float, float]


class LightType(IntEnum):
    """Kinds of light."""

    UNDEFINED = 0
    SUN = 1
    POINT = 2
    SPOT = 3
    HEMI = 4
    AREA = 5
    STANDARD = 6


def _vec3(values: Iterable[float]) -> Vec3:
    items = tuple(float(v) for v in values)
    if len(items) != 3:
        raise ValueError(f"expected 3 components, got {len(items)}")
    return items  # type: ignore[return-value]


class LightComponent(Component):
    """Light parameters attached to a scene node.

    Setting the diffuse (light) colour scales it by the current power.
    """

    def __init__(self, light_type: LightType = LightType.SUN) -> None:
        self.light_type = LightType(light_type)
        self._object_color: Vec3 = (1.0, 1.0, 1.0)
        self._diffuse: Vec3 = (1.0, 1.0, 1.0)
        self._ambient: Vec3 = (0.0, 0.0, 0.0)
        self._specular: Vec3 = (1.0, 1.0, 1.0)
        self._power = 1.0
        self._range = 10.0
        self.constant = 1.0
        self.linear = 0.45
        self.quadratic = 0.75
        self.inner_cone = 15.0
        self.outer_cone = 30.0

    @property
    def object_color(self) -> Vec3:
        return self._object_color

    @object_color.setter
    def object_color(self, color: Iterable[float]) -> None:
        self._object_color = _vec3(color)

    @property
    def ambient(self) -> Vec3:
        return self._ambient

    @ambient.setter
    def ambient(self, color: Iterable[float]) -> None:
        self._ambient = _vec3(color)

    @property
    def specular(self) -> Vec3:
        return self._specular

    @specular.setter
    def specular(self, color: Iterable[float]) -> None:
        self._specular = _vec3(color)

    def set_light_color(self, color: Iterable[float]) -> None:
        """Set the diffuse colour, scaled by the current power."""
        self._diffuse = tuple(c * self._power for c in _vec3(color))  # type: ignore[assignment]

    @property
    def diffuse(self) -> Vec3:
        return self._diffuse

    @diffuse.setter
    def diffuse(self, color: Iterable[float]) -> None:
        self.set_light_color(color)

    @property
    def light_color(self) -> Vec3:
        return self._diffuse

    @light_color.setter
    def light_color(self, color: Iterable[float]) -> None:
        self.set_light_color(color)

    def set_power(self, power: float) -> None:
        """Set the power and rescale the stored diffuse colour by it."""
        self._power = float(power)
        self.set_light_color(self._diffuse)

    @property
    def power(self) -> float:
        return self._power

    @power.setter
    def power(self, power: float) -> None:
        self.set_power(power)

    def set_range(self, value: float) -> None:
        """Set the range and derive the attenuation terms from it."""
        self._range = float(value)
        self.linear = 4.5 / self._range
        self.quadratic = 75.0 / (self._range * self._range)
        self.constant = 1.0

    @property
    def range(self) -> float:
        return self._range

    @range.setter
    def range(self, value: float) -> None:
        self.set_range(value)

    def type_code(self) -> int:
        """Return the light type as an integer."""
        return int(self.light_type)