"""Movement component that moves, rotates and scales a node's transform."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from enum import Enum
from typing import Callable, Iterable

import numpy as np

from .node import Component, Node, TransformComponent
from .vecmath import angle_axis, look_at, normalize, quat_from_matrix, quat_multiply

__all__ = ["MovementMode", "MovementType", "MovementStrategy", "MovementComponent"]

MovementCallback = Callable[[Node, float], None]


class MovementMode(Enum):
    """Whether movement is free or locked."""

    FREE = 0
    LOCKED = 1


class MovementType(Enum):
    """Kinds of movement request."""

    FORWARD = 0
    BACKWARD = 1
    LEFT = 2
    RIGHT = 3
    UP = 4
    DOWN = 5
    ROTATE_LEFT = 6
    ROTATE_RIGHT = 7
    ZOOM_IN = 8
    ZOOM_OUT = 9
    JUMP = 10


class MovementStrategy(ABC):
    """Custom handling of every movement request for a node."""

    @abstractmethod
    def process_movement(self, node: Node, movement_type: MovementType, delta: float) -> None:
        """Apply ``movement_type`` scaled by ``delta`` to ``node``."""


_TRANSLATIONS: dict[MovementType, tuple[float, float, float]] = {
    MovementType.FORWARD: (0.0, 0.0, -1.0),
    MovementType.BACKWARD: (0.0, 0.0, 1.0),
    MovementType.LEFT: (-1.0, 0.0, 0.0),
    MovementType.RIGHT: (1.0, 0.0, 0.0),
    MovementType.UP: (0.0, 1.0, 0.0),
    MovementType.DOWN: (0.0, -1.0, 0.0),
    MovementType.JUMP: (0.0, 5.0, 0.0),
}


class MovementComponent(Component):
    """Moves the owning node's transform.

    A movement request goes to the strategy if one is set, otherwise to a
    callback registered for its type, otherwise to the built-in handling.
    Euler angles are in radians.
    """

    def __init__(self) -> None:
        self._velocity = np.zeros(3)
        self.rotation_speed = 1.0
        self.movement_strategy: MovementStrategy | None = None
        self._callbacks: dict[MovementType, MovementCallback] = {}

    @property
    def velocity(self) -> np.ndarray:
        return self._velocity.copy()

    @velocity.setter
    def velocity(self, value: Iterable[float]) -> None:
        arr = np.asarray(value, dtype=float).reshape(-1)
        if arr.shape != (3,):
            raise ValueError("velocity must have 3 components")
        self._velocity = arr.copy()

    def _transform(self) -> TransformComponent | None:
        node = self.node
        if node is None:
            return None
        return node.get_component(TransformComponent)

    def translate(self, offset: Iterable[float]) -> None:
        transform = self._transform()
        if transform is not None:
            transform.position = transform.position + np.asarray(offset, dtype=float)

    def rotate_euler(self, euler_offset: Iterable[float]) -> None:
        transform = self._transform()
        if transform is not None:
            transform.set_rotation(transform.euler_angles + np.asarray(euler_offset, dtype=float))

    def rotate_around_axis(self, axis: Iterable[float], angle_degrees: float) -> None:
        transform = self._transform()
        if transform is not None:
            q = angle_axis(math.radians(angle_degrees), normalize(axis))
            transform.set_rotation(quat_multiply(q, transform.rotation))

    def rotate_quaternion(self, rotation: Iterable[float]) -> None:
        transform = self._transform()
        if transform is not None:
            transform.set_rotation(quat_multiply(rotation, transform.rotation))

    def look_at(self, target: Iterable[float]) -> None:
        """Turn the node to face ``target``; a target at the node's position raises ``ValueError``."""
        transform = self._transform()
        if transform is not None:
            view = look_at(transform.position, target, (0.0, 1.0, 0.0))
            transform.set_rotation(quat_from_matrix(np.linalg.inv(view)))

    def zoom(self, factor: float) -> None:
        transform = self._transform()
        if transform is not None:
            transform.scale = transform.scale * factor

    def set_movement_callback(self, movement_type: MovementType, callback: MovementCallback) -> None:
        self._callbacks[movement_type] = callback

    def has_movement_strategy(self) -> bool:
        return self.movement_strategy is not None

    def process_movement(self, movement_type: MovementType, delta: float) -> None:
        node = self.node
        if node is None:
            return
        if self.movement_strategy is not None:
            self.movement_strategy.process_movement(node, movement_type, delta)
            return
        callback = self._callbacks.get(movement_type)
        if callback is not None:
            callback(node, delta)
            return
        if node.get_component(TransformComponent) is None:
            return

        direction = _TRANSLATIONS.get(movement_type)
        if direction is not None:
            self.translate(np.asarray(direction) * delta)
        elif movement_type is MovementType.ROTATE_LEFT:
            self.rotate_euler((0.0, -delta * self.rotation_speed, 0.0))
        elif movement_type is MovementType.ROTATE_RIGHT:
            self.rotate_euler((0.0, delta * self.rotation_speed, 0.0))
        elif movement_type is MovementType.ZOOM_IN:
            self.zoom(1.0 + delta)
        elif movement_type is MovementType.ZOOM_OUT:
            self.zoom(1.0 / (1.0 + delta))

    def update(self, delta_time: float) -> None:
        if np.linalg.norm(self._velocity) > 0.0:
            self.translate(self._velocity * delta_time)