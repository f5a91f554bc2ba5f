"""Scene nodes holding components, and the transform component."""

from __future__ import annotations

import weakref
from typing import Any, Iterable, TypeVar

import numpy as np

from .vecmath import quat_from_euler, quat_to_euler

__all__ = ["Component", "Node", "TransformComponent"]

T = TypeVar("T")


class Component:
    """Base for node components; the owning node is held weakly."""

    _node_ref: weakref.ReferenceType | None = None

    @property
    def node(self) -> Node | None:
        """The node this component belongs to, or ``None``."""
        return None if self._node_ref is None else self._node_ref()

    @node.setter
    def node(self, node: Node | None) -> None:
        self._node_ref = None if node is None else weakref.ref(node)

    def update(self, delta_time: float) -> None:
        """Advance the component by ``delta_time``; the base does nothing."""


class Node:
    """A named scene node with at most one component of each type."""

    def __init__(self, name: str = "") -> None:
        self.name = name
        self._components: dict[type, Any] = {}

    @property
    def components(self) -> list[Any]:
        return list(self._components.values())

    def add_component(self, component: T) -> T:
        """Attach ``component``, replacing any of the same type, and return it."""
        self._components[type(component)] = component
        component.node = self  # type: ignore[attr-defined]
        return component

    def get_component(self, component_type: type[T]) -> T | None:
        """Return the component of ``component_type`` (or a subclass), if any."""
        found = self._components.get(component_type)
        if found is not None:
            return found
        for component in self._components.values():
            if isinstance(component, component_type):
                return component
        return None

    def has_component(self, component_type: type) -> bool:
        return self.get_component(component_type) is not None

    def remove_component(self, component_type: type[T]) -> T | None:
        """Detach and return the component of ``component_type``, if any."""
        component = self.get_component(component_type)
        if component is None:
            return None
        del self._components[type(component)]
        component.node = None  # type: ignore[attr-defined]
        return component

    def update(self, delta_time: float) -> None:
        """Update every component."""
        for component in list(self._components.values()):
            component.update(delta_time)


def _array(values: Iterable[float], size: int) -> np.ndarray:
    arr = np.asarray(values, dtype=float).reshape(-1)
    if arr.shape != (size,):
        raise ValueError(f"expected {size} components, got {arr.size}")
    return arr.copy()


class TransformComponent(Component):
    """Position, rotation (quaternion ``w, x, y, z``) and scale of a node."""

    def __init__(self) -> None:
        self._position = np.zeros(3)
        self._rotation = np.array([1.0, 0.0, 0.0, 0.0])
        self._scale = np.ones(3)

    @property
    def position(self) -> np.ndarray:
        return self._position.copy()

    @position.setter
    def position(self, value: Iterable[float]) -> None:
        self._position = _array(value, 3)

    @property
    def scale(self) -> np.ndarray:
        return self._scale.copy()

    @scale.setter
    def scale(self, value: Iterable[float]) -> None:
        self._scale = _array(value, 3)

    @property
    def rotation(self) -> np.ndarray:
        return self._rotation.copy()

    @rotation.setter
    def rotation(self, value: Iterable[float]) -> None:
        self.set_rotation(value)

    def set_rotation(self, rotation: Iterable[float]) -> None:
        """Set the rotation from a quaternion (4 values) or Euler angles in radians (3)."""
        values = np.asarray(rotation, dtype=float).reshape(-1)
        if values.size == 4:
            self._rotation = values.copy()
        elif values.size == 3:
            self._rotation = quat_from_euler(values)
        else:
            raise ValueError("rotation must be a quaternion or three Euler angles")

    @property
    def euler_angles(self) -> np.ndarray:
        """The rotation as (pitch, yaw, roll) in radians."""
        return quat_to_euler(self._rotation)