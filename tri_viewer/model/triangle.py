"""Triangle entity with cached device-space projections."""
from __future__ import annotations

import logging
from typing import Optional

import numpy as np
from PyQt5 import QtGui

from tri_viewer.geometry import barycentric
from tri_viewer.geometry.mapping import CoordinateMapper
from tri_viewer.geometry.primitives import CartesianPoint, DevicePoint
from tri_viewer.rendering.triangle_painter import (
    DEFAULT_GRID_COLOR,
    DEFAULT_GRID_SPACING,
    TriangleStyle,
    draw_segments,
    draw_triangle,
)

logger = logging.getLogger(__name__)

VERTEX_NAMES = ("A", "B", "C")


class Triangle:
    """Three Cartesian vertices drawn through a shared ``CoordinateMapper``.

    ``device_vertices`` always equals ``mapper.to_device`` of the current
    vertices; every setter refreshes the projections before returning.
    """

    def __init__(
        self,
        a: tuple[float, float],
        b: tuple[float, float],
        c: tuple[float, float],
        mapper: CoordinateMapper,
    ) -> None:
        self._mapper = mapper
        self._vertices: tuple[CartesianPoint, CartesianPoint, CartesianPoint] = (
            CartesianPoint(*a),
            CartesianPoint(*b),
            CartesianPoint(*c),
        )
        self._device: tuple[DevicePoint, DevicePoint, DevicePoint] = self._project()

    def __repr__(self) -> str:
        a, b, c = self._vertices
        return f"Triangle(A={tuple(a)}, B={tuple(b)}, C={tuple(c)})"

    @property
    def mapper(self) -> CoordinateMapper:
        return self._mapper

    @property
    def a(self) -> CartesianPoint:
        return self._vertices[0]

    @property
    def b(self) -> CartesianPoint:
        return self._vertices[1]

    @property
    def c(self) -> CartesianPoint:
        return self._vertices[2]

    @property
    def vertices(self) -> tuple[CartesianPoint, CartesianPoint, CartesianPoint]:
        return self._vertices

    @property
    def device_vertices(self) -> tuple[DevicePoint, DevicePoint, DevicePoint]:
        return self._device

    def _project(self) -> tuple[DevicePoint, DevicePoint, DevicePoint]:
        to_device = self._mapper.to_device
        a, b, c = self._vertices
        return (to_device(a), to_device(b), to_device(c))

    def set_vertex(self, index: int, point: tuple[float, float]) -> None:
        if index not in (0, 1, 2):
            raise IndexError(f"Triangle vertex index must be 0, 1 or 2, got {index!r}.")
        vertices = list(self._vertices)
        vertices[index] = CartesianPoint(*point)
        self._vertices = (vertices[0], vertices[1], vertices[2])
        self._device = self._project()

    def set_vertices(
        self,
        a: tuple[float, float],
        b: tuple[float, float],
        c: tuple[float, float],
    ) -> None:
        self._vertices = (CartesianPoint(*a), CartesianPoint(*b), CartesianPoint(*c))
        self._device = self._project()

    def to_device(self, p: tuple[float, float]) -> DevicePoint:
        return self._mapper.to_device(p)

    def from_device(self, p: tuple[float, float]) -> CartesianPoint:
        return self._mapper.from_device(p)

    def signed_area(self) -> float:
        return barycentric.signed_area(self._vertices)

    def to_barycentric(self, p: tuple[float, float]) -> tuple[float, float]:
        return barycentric.to_barycentric(self._vertices, p)

    def to_cartesian(self, i: float, j: float) -> CartesianPoint:
        return barycentric.to_cartesian(self._vertices, i, j)

    def grid_device_segments(self, spacing: float = DEFAULT_GRID_SPACING) -> np.ndarray:
        """Subdivision mesh segments in device space, shape ``(n, 2, 2)``."""

        weights = barycentric.subdivision_segments(spacing)
        cartesian = barycentric.to_cartesian_array(self._vertices, weights)
        return self._mapper.to_device_array(cartesian)

    def render(self, painter: QtGui.QPainter, style: Optional[TriangleStyle] = None) -> None:
        draw_triangle(painter, self._device, style or TriangleStyle())

    def render_grid(
        self,
        painter: QtGui.QPainter,
        spacing: float = DEFAULT_GRID_SPACING,
        color: str = DEFAULT_GRID_COLOR,
    ) -> None:
        segments = self.grid_device_segments(spacing)
        logger.debug("Drawing %d grid segments for %r (spacing=%s)", len(segments), self, spacing)
        draw_segments(painter, segments, color)
