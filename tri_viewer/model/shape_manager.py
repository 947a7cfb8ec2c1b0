from __future__ import annotations

import logging
from typing import Iterator

from PyQt5 import QtGui

from tri_viewer.model.shapes import DraggableShape

logger = logging.getLogger(__name__)


class ShapeManager:
    """Ordered collection of shapes that fans out pointer and paint events.

    Insertion order is both draw order (later shapes on top) and dispatch
    order. The manager only holds references; removing a shape does not
    reset its state.
    """

    def __init__(self) -> None:
        self._shapes: list[DraggableShape] = []

    def __len__(self) -> int:
        return len(self._shapes)

    def __iter__(self) -> Iterator[DraggableShape]:
        return iter(list(self._shapes))

    @property
    def shapes(self) -> tuple[DraggableShape, ...]:
        return tuple(self._shapes)

    def add(self, shape: DraggableShape) -> None:
        self._shapes.append(shape)

    def remove(self, shape: DraggableShape) -> None:
        """Detach the first occurrence of ``shape`` by identity."""

        for index, existing in enumerate(self._shapes):
            if existing is shape:
                del self._shapes[index]
                return

    def clear(self) -> None:
        self._shapes.clear()

    def render_all(self, painter: QtGui.QPainter) -> None:
        for shape in list(self._shapes):
            shape.render(painter)

    def on_pointer_down(self, pos: tuple[float, float]) -> bool:
        """Offer the press to every shape; return ``True`` if any grabbed it."""

        grabbed = False
        for shape in list(self._shapes):
            if shape.start_drag(pos):
                grabbed = True
        if grabbed:
            logger.debug("Pointer down at %s started a drag", tuple(pos))
        return grabbed

    def on_pointer_move(self, pos: tuple[float, float]) -> None:
        for shape in list(self._shapes):
            shape.drag_to(pos)

    def on_pointer_up(self) -> None:
        for shape in list(self._shapes):
            shape.end_drag()
