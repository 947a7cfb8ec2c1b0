"""QPainter helpers for triangles, subdivision grids and standalone points."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

import numpy as np
from PyQt5 import QtCore, QtGui

from tri_viewer.geometry.barycentric import validate_spacing
from tri_viewer.rendering.colors import parse_color

MARKER_RADIUS = 5.0
DEFAULT_GRID_SPACING = 0.1
DEFAULT_GRID_COLOR = "rgba(200,200,200,0.5)"


@dataclass(frozen=True)
class TriangleStyle:
    """Colours for a triangle; ``None`` or ``"none"`` skips that element."""

    fill: str | None = None
    stroke: str | None = "black"
    vertex_color: str | None = None

    def __post_init__(self) -> None:
        for value in (self.fill, self.stroke, self.vertex_color):
            parse_color(value)


@dataclass(frozen=True)
class GridStyle:
    spacing: float = DEFAULT_GRID_SPACING
    color: str = DEFAULT_GRID_COLOR

    def __post_init__(self) -> None:
        object.__setattr__(self, "spacing", validate_spacing(self.spacing))
        parse_color(self.color)


def to_qpoint(p: tuple[float, float]) -> QtCore.QPointF:
    return QtCore.QPointF(float(p[0]), float(p[1]))


def triangle_path(device_points: Sequence[tuple[float, float]]) -> QtGui.QPainterPath:
    """Closed path A -> B -> C -> A in device space."""

    a, b, c = device_points
    path = QtGui.QPainterPath(to_qpoint(a))
    path.lineTo(to_qpoint(b))
    path.lineTo(to_qpoint(c))
    path.closeSubpath()
    return path


def draw_point(
    painter: QtGui.QPainter,
    device_point: tuple[float, float],
    color: str | QtGui.QColor | None = "black",
    radius: float = MARKER_RADIUS,
) -> None:
    """Draw a filled circle centred on ``device_point``."""

    qcolor = parse_color(color)
    if qcolor is None:
        return
    painter.save()
    painter.setRenderHint(QtGui.QPainter.Antialiasing, True)
    painter.setPen(QtCore.Qt.NoPen)
    painter.setBrush(QtGui.QBrush(qcolor))
    painter.drawEllipse(to_qpoint(device_point), radius, radius)
    painter.restore()


def draw_triangle(
    painter: QtGui.QPainter,
    device_points: Sequence[tuple[float, float]],
    style: TriangleStyle,
) -> None:
    fill = parse_color(style.fill)
    stroke = parse_color(style.stroke)
    path = triangle_path(device_points)

    painter.save()
    painter.setRenderHint(QtGui.QPainter.Antialiasing, True)
    if fill is not None:
        painter.fillPath(path, QtGui.QBrush(fill))
    if stroke is not None:
        pen = QtGui.QPen(stroke)
        pen.setWidthF(1.0)
        painter.strokePath(path, pen)
    painter.restore()

    if style.vertex_color is not None:
        for point in device_points:
            draw_point(painter, point, style.vertex_color)


def draw_segments(
    painter: QtGui.QPainter,
    segments: np.ndarray | Iterable[Sequence[tuple[float, float]]],
    color: str | QtGui.QColor | None,
) -> None:
    """Draw device-space ``(start, end)`` segments with a thin pen."""

    qcolor = parse_color(color)
    if qcolor is None:
        return
    lines = [
        QtCore.QLineF(to_qpoint(start), to_qpoint(end)) for start, end in segments
    ]
    if not lines:
        return
    painter.save()
    painter.setRenderHint(QtGui.QPainter.Antialiasing, True)
    pen = QtGui.QPen(qcolor)
    pen.setWidthF(1.0)
    painter.setPen(pen)
    for line in lines:
        painter.drawLine(line)
    painter.restore()
