"""Mesh vertex data: parsing flat tables and building interleaved buffers."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntFlag
from typing import Iterable, Sequence

import numpy as np

__all__ = ["MeshFormat", "Vertex", "Mesh"]

Vec2 = tuple[float, float]
Vec3 = tuple[float, float, float]


class MeshFormat(IntFlag):
    """Which per-vertex attributes a mesh carries."""

    NONE = 0
    NORMAL = 1 << 0
    TEX_COORD = 1 << 1
    TANGENT = 1 << 2
    BITANGENT = 1 << 3
    COLOR = 1 << 4
    UV = 1 << 5
    INDICES = 1 << 6


_ZERO3: Vec3 = (0.0, 0.0, 0.0)
_ZERO2: Vec2 = (0.0, 0.0)


@dataclass
class Vertex:
    """One vertex with all attributes; absent ones are zero."""

    position: Vec3 = _ZERO3
    normal: Vec3 = _ZERO3
    tex_coord: Vec2 = _ZERO2
    tangent: Vec3 = _ZERO3
    bitangent: Vec3 = _ZERO3
    color: Vec3 = _ZERO3
    uv: Vec3 = _ZERO3


# Attributes in the order they appear in a flat table: (flag, field, size, shader location).
_TABLE_LAYOUT: tuple[tuple[MeshFormat, str, int, int | None], ...] = (
    (MeshFormat.NORMAL, "normal", 3, 1),
    (MeshFormat.TEX_COORD, "tex_coord", 2, 2),
    (MeshFormat.TANGENT, "tangent", 3, 3),
    (MeshFormat.BITANGENT, "bitangent", 3, 4),
    (MeshFormat.COLOR, "color", 3, 5),
    (MeshFormat.UV, "uv", 3, None),
)


@dataclass
class Mesh:
    """Vertices and indices described by a :class:`MeshFormat` style."""

    style: MeshFormat = MeshFormat.NONE
    vertices: list[Vertex] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.style = MeshFormat(self.style)

    def _table_size(self) -> int:
        return 3 + sum(size for flag, _, size, _ in _TABLE_LAYOUT if self.style & flag)

    def vertices_from_table(self, values: Sequence[float]) -> None:
        """Replace the vertices with those read from a flat table.

        Each vertex takes a position and then, in order, every attribute the
        style enables (normal, tex coord, tangent, bitangent, colour, uv).
        """
        per_vertex = self._table_size()
        flat = [float(v) for v in values]
        if len(flat) % per_vertex:
            raise ValueError(
                f"table of {len(flat)} values is not a multiple of {per_vertex} per vertex"
            )
        self.vertices = [self._read_vertex(flat[start:start + per_vertex])
                         for start in range(0, len(flat), per_vertex)]

    def _read_vertex(self, chunk: list[float]) -> Vertex:
        vertex = Vertex(position=tuple(chunk[:3]))  # type: ignore[arg-type]
        offset = 3
        for flag, name, size, _ in _TABLE_LAYOUT:
            if self.style & flag:
                setattr(vertex, name, tuple(chunk[offset:offset + size]))
                offset += size
        return vertex

    def indices_from_table(self, values: Iterable[float]) -> None:
        """Replace the indices with ``values`` converted to integers."""
        self.indices = [int(v) for v in values]

    def _buffer_attributes(self) -> list[tuple[str, int, int]]:
        return [(name, size, location) for flag, name, size, location in _TABLE_LAYOUT
                if location is not None and self.style & flag]

    def stride(self) -> int:
        """Number of floats per vertex in :meth:`interleaved_data`."""
        return 3 + sum(size for _, size, _ in self._buffer_attributes())

    def attribute_layout(self) -> list[tuple[int, int, int]]:
        """``(location, component count, float offset)`` for each buffer attribute."""
        layout = [(0, 3, 0)]
        offset = 3
        for _, size, location in self._buffer_attributes():
            layout.append((location, size, offset))
            offset += size
        return layout

    def interleaved_data(self) -> np.ndarray:
        """Vertex data as one float32 array, laid out per :meth:`attribute_layout`."""
        attributes = self._buffer_attributes()
        rows = [
            [*v.position, *(c for name, _, _ in attributes for c in getattr(v, name))]
            for v in self.vertices
        ]
        return np.asarray(rows, dtype=np.float32).reshape(-1)

    @property
    def element_count(self) -> int:
        """Elements drawn: indices for an indexed mesh, vertices otherwise."""
        return len(self.indices) if self.style & MeshFormat.INDICES else len(self.vertices)

    def clear(self) -> None:
        self.vertices.clear()
        self.indices.clear()