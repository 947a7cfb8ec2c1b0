from __future__ import annotations

import logging
from typing import Optional

from PyQt5 import QtCore, QtGui, QtWidgets

from tri_viewer.geometry.mapping import CoordinateMapper
from tri_viewer.geometry.picking import DEFAULT_PICK_RADIUS
from tri_viewer.geometry.primitives import CartesianPoint, DevicePoint
from tri_viewer.model.shape_manager import ShapeManager
from tri_viewer.model.shapes import DraggableTriangle, StaticTriangle
from tri_viewer.model.triangle import Triangle
from tri_viewer.rendering.colors import parse_color
from tri_viewer.rendering.triangle_painter import GridStyle, TriangleStyle, draw_point

logger = logging.getLogger(__name__)


class TriangleCanvas(QtWidgets.QWidget):
    """Fixed-size drawing surface hosting a ``ShapeManager``.

    Mouse events are forwarded in device coordinates; painting delegates to
    the shapes in insertion order followed by standalone points.
    """

    cursorMoved = QtCore.pyqtSignal(object)
    shapesChanged = QtCore.pyqtSignal()

    def __init__(
        self,
        width: int,
        height: int,
        scale: float = 200.0,
        offset: tuple[float, float] = (50.0, 250.0),
        *,
        background: str = "white",
        parent: QtWidgets.QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._mapper = CoordinateMapper(scale, DevicePoint(*offset))
        self._manager = ShapeManager()
        self._points: list[tuple[CartesianPoint, str]] = []
        self._background = parse_color(background)
        self.setFixedSize(int(width), int(height))
        self.setMouseTracking(True)

    @property
    def mapper(self) -> CoordinateMapper:
        return self._mapper

    @property
    def manager(self) -> ShapeManager:
        return self._manager

    @property
    def points(self) -> tuple[tuple[CartesianPoint, str], ...]:
        return tuple(self._points)

    def to_device(self, p: tuple[float, float]) -> DevicePoint:
        return self._mapper.to_device(p)

    def from_device(self, p: tuple[float, float]) -> CartesianPoint:
        return self._mapper.from_device(p)

    def new_triangle(
        self,
        a: tuple[float, float],
        b: tuple[float, float],
        c: tuple[float, float],
        draggable: bool = False,
        *,
        style: Optional[TriangleStyle] = None,
        grid: Optional[GridStyle] = None,
        pick_radius: float = DEFAULT_PICK_RADIUS,
    ) -> StaticTriangle | DraggableTriangle:
        """Create a shape bound to this surface's mapper (not yet added)."""

        triangle = Triangle(a, b, c, self._mapper)
        if draggable:
            return DraggableTriangle(triangle, style, grid, pick_radius=pick_radius)
        return StaticTriangle(triangle, style, grid)

    def add_shape(self, shape) -> None:
        self._manager.add(shape)
        self.shapesChanged.emit()
        self.update()

    def remove_shape(self, shape) -> None:
        self._manager.remove(shape)
        self.shapesChanged.emit()
        self.update()

    def add_point(self, p: tuple[float, float], color: str = "black") -> None:
        """Add a standalone marker at Cartesian ``p``."""

        self._points.append((CartesianPoint(*p), color))
        self.update()

    def clear_points(self) -> None:
        self._points.clear()
        self.update()

    def paint(self, painter: QtGui.QPainter) -> None:
        if self._background is not None:
            painter.fillRect(self.rect(), self._background)
        self._manager.render_all(painter)
        for point, color in self._points:
            draw_point(painter, self._mapper.to_device(point), color)

    def paintEvent(self, event: QtGui.QPaintEvent) -> None:  # noqa: D401
        _ = event
        painter = QtGui.QPainter(self)
        try:
            self.paint(painter)
        finally:
            painter.end()

    @staticmethod
    def _event_point(event: QtGui.QMouseEvent) -> DevicePoint:
        pos = event.localPos()
        return DevicePoint(pos.x(), pos.y())

    def mousePressEvent(self, event: QtGui.QMouseEvent) -> None:  # noqa: D401
        if event.button() != QtCore.Qt.LeftButton:
            super().mousePressEvent(event)
            return
        if self._manager.on_pointer_down(self._event_point(event)):
            self.update()

    def mouseMoveEvent(self, event: QtGui.QMouseEvent) -> None:  # noqa: D401
        pos = self._event_point(event)
        self._manager.on_pointer_move(pos)
        if event.buttons() & QtCore.Qt.LeftButton:
            self.update()
        self.cursorMoved.emit(self._mapper.from_device(pos))

    def mouseReleaseEvent(self, event: QtGui.QMouseEvent) -> None:  # noqa: D401
        if event.button() != QtCore.Qt.LeftButton:
            super().mouseReleaseEvent(event)
            return
        self._manager.on_pointer_up()
        self.update()

    def leaveEvent(self, event: QtCore.QEvent) -> None:  # noqa: D401
        self.cursorMoved.emit(None)
        super().leaveEvent(event)
