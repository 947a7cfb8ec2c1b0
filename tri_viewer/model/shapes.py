"""Drawable shapes and their drag capability."""
from __future__ import annotations

import logging
from typing import Optional, Protocol, runtime_checkable

from PyQt5 import QtGui

from tri_viewer.geometry.picking import DEFAULT_PICK_RADIUS, pick_vertex, validate_radius
from tri_viewer.model.triangle import VERTEX_NAMES, Triangle
from tri_viewer.rendering.triangle_painter import GridStyle, TriangleStyle

logger = logging.getLogger(__name__)


@runtime_checkable
class DraggableShape(Protocol):
    """Capability set consumed by ``ShapeManager``."""

    def render(self, painter: QtGui.QPainter) -> None: ...

    def start_drag(self, pos: tuple[float, float]) -> bool: ...

    def drag_to(self, pos: tuple[float, float]) -> None: ...

    def end_drag(self) -> None: ...


def _render_triangle_shape(
    painter: QtGui.QPainter,
    triangle: Triangle,
    style: TriangleStyle,
    grid: Optional[GridStyle],
) -> None:
    if grid is not None:
        triangle.render_grid(painter, grid.spacing, grid.color)
    triangle.render(painter, style)


class StaticTriangle:
    """A triangle that renders but never takes part in dragging."""

    def __init__(
        self,
        triangle: Triangle,
        style: Optional[TriangleStyle] = None,
        grid: Optional[GridStyle] = None,
    ) -> None:
        self.triangle = triangle
        self.style = style or TriangleStyle()
        self.grid = grid

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.triangle!r})"

    def render(self, painter: QtGui.QPainter) -> None:
        _render_triangle_shape(painter, self.triangle, self.style, self.grid)

    def start_drag(self, pos: tuple[float, float]) -> bool:
        return False

    def drag_to(self, pos: tuple[float, float]) -> None:
        return None

    def end_drag(self) -> None:
        return None


class DraggableTriangle:
    """Triangle whose vertices can be picked and dragged one at a time.

    State is either idle (``dragging_index is None``) or dragging a single
    vertex index ``0``, ``1`` or ``2``. Hit testing runs in device space
    against the cached projections.
    """

    def __init__(
        self,
        triangle: Triangle,
        style: Optional[TriangleStyle] = None,
        grid: Optional[GridStyle] = None,
        *,
        pick_radius: float = DEFAULT_PICK_RADIUS,
        nearest_hit: bool = False,
    ) -> None:
        self.triangle = triangle
        self.style = style or TriangleStyle()
        self.grid = grid
        self.pick_radius = validate_radius(pick_radius)
        self.nearest_hit = nearest_hit
        self._dragging_index: int | None = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.triangle!r})"

    def render(self, painter: QtGui.QPainter) -> None:
        _render_triangle_shape(painter, self.triangle, self.style, self.grid)

    @property
    def dragging_index(self) -> int | None:
        return self._dragging_index

    @property
    def is_dragging(self) -> bool:
        return self._dragging_index is not None

    def hit_test(
        self, pos: tuple[float, float], radius: float | None = None
    ) -> int | None:
        return pick_vertex(
            pos,
            self.triangle.device_vertices,
            self.pick_radius if radius is None else radius,
            nearest=self.nearest_hit,
        )

    def start_drag(self, pos: tuple[float, float]) -> bool:
        self._dragging_index = self.hit_test(pos)
        if self._dragging_index is None:
            return False
        logger.debug(
            "Start drag of vertex %s on %r at %s",
            VERTEX_NAMES[self._dragging_index],
            self.triangle,
            tuple(pos),
        )
        return True

    def drag_to(self, pos: tuple[float, float]) -> None:
        index = self._dragging_index
        if index is None:
            return
        self.triangle.set_vertex(index, self.triangle.from_device(pos))

    def end_drag(self) -> None:
        if self._dragging_index is not None:
            logger.debug(
                "End drag of vertex %s on %r",
                VERTEX_NAMES[self._dragging_index],
                self.triangle,
            )
        self._dragging_index = None
