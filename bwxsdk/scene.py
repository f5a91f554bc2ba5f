"""Scene holding models and meshes, and models grouping meshes."""

from __future__ import annotations

from typing import TypeVar

from .mesh import Mesh
from .node import Node

__all__ = ["Model", "Scene"]

T = TypeVar("T")


def _item(items: list[T], index: int) -> T | None:
    if 0 <= index < len(items):
        return items[index]
    return None


class Model:
    """A group of meshes."""

    def __init__(self) -> None:
        self.meshes: list[Mesh] = []

    def add_mesh(self, mesh: Mesh) -> None:
        self.meshes.append(mesh)

    def clean(self) -> None:
        """Remove every mesh."""
        self.meshes.clear()


class Scene:
    """Meshes and models in insertion order, with an optional root node."""

    def __init__(self) -> None:
        self._meshes: list[Mesh] = []
        self._models: list[Model] = []
        self.active_camera_index = 0
        self.root: Node | None = None

    def set_active_camera(self, index: int) -> None:
        """Remember which camera is active."""
        self.active_camera_index = int(index)

    def add_mesh(self, mesh: Mesh) -> None:
        self._meshes.append(mesh)

    def get_mesh(self, index: int) -> Mesh | None:
        """Mesh at ``index``, or ``None`` when the index is out of range."""
        return _item(self._meshes, index)

    @property
    def meshes(self) -> list[Mesh]:
        return list(self._meshes)

    def add_model(self, model: Model) -> None:
        self._models.append(model)

    def get_model(self, index: int) -> Model | None:
        """Model at ``index``, or ``None`` when the index is out of range."""
        return _item(self._models, index)

    @property
    def models(self) -> list[Model]:
        return list(self._models)