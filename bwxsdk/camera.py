"""Camera component producing view and projection matrices."""

from __future__ import annotations

import math
from enum import Enum

import numpy as np

from .node import Component, TransformComponent
from .vecmath import look_at, ortho, perspective, quat_rotate

__all__ = ["CameraType", "LensType", "CameraComponent"]


class CameraType(Enum):
    """Camera behaviours."""

    FPP = 0
    SPECTATOR = 1
    ORBIT = 2
    FLIGHT = 3
    TPP = 4
    TPP_STRINGS = 5


class LensType(Enum):
    """Projection kinds."""

    ORTHO = 0
    PERSP = 1
    UNKNOWN = 2


class CameraComponent(Component):
    """Camera attached to a node; its view follows the node's transform.

    The field of view is given in degrees.
    """

    def __init__(self, camera_type: CameraType) -> None:
        self.camera_type = CameraType(camera_type)
        self.projection_type = LensType.UNKNOWN
        self.fov = 45.0
        self.aspect_ratio = 1.0
        self.near_plane = 0.1
        self.far_plane = 100.0
        self.sensitivity = 0.1
        self.mouse_control_enabled = False
        self.collision_detection_enabled = False
        self._view = np.identity(4)
        self._projection = np.identity(4)

    @property
    def view_matrix(self) -> np.ndarray:
        return self._view.copy()

    @property
    def projection_matrix(self) -> np.ndarray:
        return self._projection.copy()

    def set_projection_perspective(
        self, fov: float, aspect_ratio: float, near_plane: float, far_plane: float
    ) -> None:
        """Switch to a perspective lens with ``fov`` in degrees."""
        self.projection_type = LensType.PERSP
        self.fov = float(fov)
        self.aspect_ratio = float(aspect_ratio)
        self.near_plane = float(near_plane)
        self.far_plane = float(far_plane)
        self._recalculate_projection()

    def set_projection_orthographic(
        self,
        left: float,
        right: float,
        bottom: float,
        top: float,
        near_plane: float,
        far_plane: float,
    ) -> None:
        """Switch to an orthographic lens over the given box."""
        self.projection_type = LensType.ORTHO
        self._projection = ortho(left, right, bottom, top, near_plane, far_plane)

    def set_focal_length(self, focal_length: float) -> None:
        """Set the field of view (degrees) and refresh a perspective projection."""
        self.fov = float(focal_length)
        self._recalculate_projection()

    def update(self, delta_time: float) -> None:
        """Refresh the view matrix from the node's transform."""
        self._recalculate_view()

    def _recalculate_view(self) -> None:
        node = self.node
        if node is None:
            return
        transform = node.get_component(TransformComponent)
        if transform is None:
            return
        position = transform.position
        rotation = transform.rotation
        forward = quat_rotate(rotation, (0.0, 0.0, -1.0))
        up = quat_rotate(rotation, (0.0, 1.0, 0.0))
        self._view = look_at(position, position + forward, up)

    def _recalculate_projection(self) -> None:
        if self.projection_type is LensType.PERSP:
            self._projection = perspective(
                math.radians(self.fov), self.aspect_ratio, self.near_plane, self.far_plane
            )