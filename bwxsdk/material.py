"""Surface material: colours, scalar properties and texture paths."""

from __future__ import annotations

import itertools
from enum import Enum
from typing import Any, Iterable, Protocol

__all__ = ["TextureType", "Material"]

Vec4 = tuple[float, float, float, float]

_material_ids = itertools.count(1)


class TextureType(Enum):
    """Roles a texture can play in a material."""

    DIFFUSE = "diffuse"
    SPECULAR = "specular"
    AMBIENT = "ambient"
    EMISSIVE = "emissive"
    HEIGHT = "height"
    NORMALS = "normals"
    SHININESS = "shininess"
    OPACITY = "opacity"
    DISPLACEMENT = "displacement"
    LIGHTMAP = "lightmap"
    REFLECTION = "reflection"


class UniformTarget(Protocol):
    """Anything that accepts named uniform values."""

    def set_uniform(self, name: str, value: Any) -> None: ...


def _vec4(values: Iterable[float]) -> Vec4:
    items = tuple(float(v) for v in values)
    if len(items) != 4:
        raise ValueError(f"expected 4 components, got {len(items)}")
    return items  # type: ignore[return-value]


class _Vec4Field:
    """Attribute that stores a 4-component colour as a tuple of floats."""

    def __set_name__(self, owner: type, name: str) -> None:
        self._attr = "_" + name

    def __get__(self, obj: Any, objtype: type | None = None) -> Any:
        if obj is None:
            return self
        return getattr(obj, self._attr)

    def __set__(self, obj: Any, value: Iterable[float]) -> None:
        setattr(obj, self._attr, _vec4(value))


class Material:
    """A named material with a unique numeric id."""

    ambient = _Vec4Field()
    diffuse = _Vec4Field()
    specular = _Vec4Field()
    emissive = _Vec4Field()
    transparent = _Vec4Field()
    reflectivity = _Vec4Field()

    def __init__(self, name: str = "") -> None:
        self.name = name
        self.id = next(_material_ids)
        self.reflectivity = (0.0, 0.0, 0.0, 0.0)
        self.reflection = 0.0
        self.opacity = 1.0
        self._textures: dict[TextureType, str] = {}
        self.clean()

    def clean(self) -> None:
        """Reset colours, shininess, refraction and flags, and drop all textures."""
        self.is_emissive = False
        self.is_transparent = False
        self.ambient = (1.0, 1.0, 1.0, 1.0)
        self.diffuse = (0.8, 0.8, 0.8, 1.0)
        self.specular = (0.5, 0.5, 0.5, 1.0)
        self.emissive = (0.0, 0.0, 0.0, 0.0)
        self.transparent = (0.0, 0.0, 0.0, 0.0)
        self.shininess = 0.5 * 128
        self.refraction = 0.0
        self._textures.clear()

    @property
    def textures(self) -> dict[TextureType, str]:
        """The texture paths by role; the mapping is live."""
        return self._textures

    def add_texture(self, texture_type: TextureType, path: str) -> None:
        """Set the texture for ``texture_type``, replacing any earlier one."""
        self._textures[TextureType(texture_type)] = path

    def has_texture(self, texture_type: TextureType) -> bool:
        return texture_type in self._textures

    def texture_path(self, texture_type: TextureType) -> str:
        """Path of the texture for ``texture_type``, or an empty string."""
        return self._textures.get(texture_type, "")

    def apply_to_shader(self, shader: UniformTarget) -> None:
        """Send every material property to ``shader`` as ``material.*`` uniforms."""
        for name, value in (
            ("ambient", self.ambient),
            ("diffuse", self.diffuse),
            ("specular", self.specular),
            ("emissive", self.emissive),
            ("transparent", self.transparent),
            ("reflectivity", self.reflectivity),
            ("shininess", self.shininess),
            ("reflection", self.reflection),
            ("refraction", self.refraction),
            ("opacity", self.opacity),
        ):
            shader.set_uniform(f"material.{name}", value)