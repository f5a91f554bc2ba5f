"""Vector, matrix and quaternion helpers for right-handed OpenGL conventions.

Matrices are 4x4 numpy arrays indexed ``[row, column]`` and applied to
column vectors (``matrix @ vector``). Quaternions are numpy arrays in
``(w, x, y, z)`` order. Angles are in radians.
"""

from __future__ import annotations

import math
from collections.abc import Iterable

import numpy as np

__all__ = [
    "normalize",
    "perspective",
    "ortho",
    "look_at",
    "angle_axis",
    "quat_multiply",
    "quat_rotate",
    "quat_from_euler",
    "quat_to_euler",
    "quat_from_matrix",
]

_EPSILON = 1e-12


def _vec(values: Iterable[float], size: int) -> np.ndarray:
    arr = np.asarray(values, dtype=float).reshape(-1)
    if arr.shape != (size,):
        raise ValueError(f"expected {size} components, got {arr.size}")
    return arr


def normalize(vector: Iterable[float]) -> np.ndarray:
    """Return ``vector`` scaled to unit length; a zero vector raises ``ValueError``."""
    v = np.asarray(vector, dtype=float).reshape(-1)
    length = float(np.linalg.norm(v))
    if length == 0.0:
        raise ValueError("cannot normalize a zero-length vector")
    return v / length


def perspective(fov_y: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Build a perspective projection mapping depth to the [-1, 1] range."""
    if aspect == 0:
        raise ValueError("aspect ratio must not be zero")
    if near == far:
        raise ValueError("near and far planes must differ")
    tan_half = math.tan(fov_y / 2.0)
    if tan_half == 0:
        raise ValueError("field of view must not be zero")
    m = np.zeros((4, 4))
    m[0, 0] = 1.0 / (aspect * tan_half)
    m[1, 1] = 1.0 / tan_half
    m[2, 2] = -(far + near) / (far - near)
    m[3, 2] = -1.0
    m[2, 3] = -(2.0 * far * near) / (far - near)
    return m


def ortho(
    left: float, right: float, bottom: float, top: float, near: float, far: float
) -> np.ndarray:
    """Build an orthographic projection mapping the box to the [-1, 1] cube."""
    if left == right or bottom == top or near == far:
        raise ValueError("orthographic box must have non-zero extent")
    m = np.identity(4)
    m[0, 0] = 2.0 / (right - left)
    m[1, 1] = 2.0 / (top - bottom)
    m[2, 2] = -2.0 / (far - near)
    m[0, 3] = -(right + left) / (right - left)
    m[1, 3] = -(top + bottom) / (top - bottom)
    m[2, 3] = -(far + near) / (far - near)
    return m


def look_at(
    eye: Iterable[float], center: Iterable[float], up: Iterable[float]
) -> np.ndarray:
    """Build a view matrix looking from ``eye`` towards ``center``."""
    eye_v = _vec(eye, 3)
    f = normalize(_vec(center, 3) - eye_v)
    s = normalize(np.cross(f, _vec(up, 3)))
    u = np.cross(s, f)
    m = np.identity(4)
    m[0, :3] = s
    m[1, :3] = u
    m[2, :3] = -f
    m[0, 3] = -float(np.dot(s, eye_v))
    m[1, 3] = -float(np.dot(u, eye_v))
    m[2, 3] = float(np.dot(f, eye_v))
    return m


def angle_axis(angle: float, axis: Iterable[float]) -> np.ndarray:
    """Quaternion rotating by ``angle`` about ``axis`` (the axis is used as given)."""
    a = _vec(axis, 3)
    half = angle * 0.5
    return np.concatenate(([math.cos(half)], a * math.sin(half)))


def quat_multiply(a: Iterable[float], b: Iterable[float]) -> np.ndarray:
    """Hamilton product ``a * b``: rotating by ``b`` first, then ``a``."""
    w1, x1, y1, z1 = _vec(a, 4)
    w2, x2, y2, z2 = _vec(b, 4)
    return np.array(
        [
            w1 * w2 - x1 * x2 - y1 * y2 - z1 * z2,
            w1 * x2 + x1 * w2 + y1 * z2 - z1 * y2,
            w1 * y2 + y1 * w2 + z1 * x2 - x1 * z2,
            w1 * z2 + z1 * w2 + x1 * y2 - y1 * x2,
        ]
    )


def quat_rotate(quat: Iterable[float], vector: Iterable[float]) -> np.ndarray:
    """Rotate a 3-vector by a unit quaternion."""
    q = _vec(quat, 4)
    v = _vec(vector, 3)
    w, u = q[0], q[1:]
    uv = np.cross(u, v)
    uuv = np.cross(u, uv)
    return v + 2.0 * (w * uv + uuv)


def quat_from_euler(angles: Iterable[float]) -> np.ndarray:
    """Quaternion from (pitch, yaw, roll) angles about x, y and z."""
    half = _vec(angles, 3) * 0.5
    cx, cy, cz = np.cos(half)
    sx, sy, sz = np.sin(half)
    return np.array(
        [
            cx * cy * cz + sx * sy * sz,
            sx * cy * cz - cx * sy * sz,
            cx * sy * cz + sx * cy * sz,
            cx * cy * sz - sx * sy * cz,
        ]
    )


def quat_to_euler(quat: Iterable[float]) -> np.ndarray:
    """Return (pitch, yaw, roll) angles of a unit quaternion."""
    w, x, y, z = _vec(quat, 4)

    py = 2.0 * (y * z + w * x)
    px = w * w - x * x - y * y + z * z
    if abs(py) < _EPSILON and abs(px) < _EPSILON:
        pitch = 2.0 * math.atan2(x, w)
    else:
        pitch = math.atan2(py, px)

    yaw = math.asin(max(-1.0, min(1.0, -2.0 * (x * z - w * y))))

    ry = 2.0 * (x * y + w * z)
    rx = w * w + x * x - y * y - z * z
    if abs(ry) < _EPSILON and abs(rx) < _EPSILON:
        roll = 0.0
    else:
        roll = math.atan2(ry, rx)

    return np.array([pitch, yaw, roll])


def quat_from_matrix(matrix: Iterable[Iterable[float]]) -> np.ndarray:
    """Quaternion of the rotation held in a 3x3 or 4x4 matrix."""
    m = np.asarray(matrix, dtype=float)
    if m.shape not in ((3, 3), (4, 4)):
        raise ValueError("expected a 3x3 or 4x4 matrix")
    m = m[:3, :3]
    four_w = m[0, 0] + m[1, 1] + m[2, 2]
    four_x = m[0, 0] - m[1, 1] - m[2, 2]
    four_y = m[1, 1] - m[0, 0] - m[2, 2]
    four_z = m[2, 2] - m[0, 0] - m[1, 1]
    candidates = [four_w, four_x, four_y, four_z]
    biggest_index = max(range(4), key=candidates.__getitem__)
    biggest = math.sqrt(candidates[biggest_index] + 1.0) * 0.5
    mult = 0.25 / biggest

    zy = m[2, 1] - m[1, 2]
    xz = m[0, 2] - m[2, 0]
    yx = m[1, 0] - m[0, 1]
    if biggest_index == 0:
        return np.array([biggest, zy * mult, xz * mult, yx * mult])
    if biggest_index == 1:
        return np.array(
            [zy * mult, biggest, (m[1, 0] + m[0, 1]) * mult, (m[0, 2] + m[2, 0]) * mult]
        )
    if biggest_index == 2:
        return np.array(
            [xz * mult, (m[1, 0] + m[0, 1]) * mult, biggest, (m[2, 1] + m[1, 2]) * mult]
        )
    return np.array(
        [yx * mult, (m[0, 2] + m[2, 0]) * mult, (m[2, 1] + m[1, 2]) * mult, biggest]
    )