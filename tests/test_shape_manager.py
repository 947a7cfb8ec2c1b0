from __future__ import annotations

import pytest

pytest.importorskip("PyQt5")

from tri_viewer.geometry.mapping import CoordinateMapper
from tri_viewer.model.shape_manager import ShapeManager
from tri_viewer.model.shapes import DraggableTriangle
from tri_viewer.model.triangle import Triangle


class _RecordingShape:
    def __init__(self, name: str, log: list, hit: bool = False) -> None:
        self.name = name
        self.log = log
        self.hit = hit

    def render(self, painter) -> None:
        self.log.append((self.name, "render"))

    def start_drag(self, pos) -> bool:
        self.log.append((self.name, "start_drag", tuple(pos)))
        return self.hit

    def drag_to(self, pos) -> None:
        self.log.append((self.name, "drag_to", tuple(pos)))

    def end_drag(self) -> None:
        self.log.append((self.name, "end_drag"))


def test_render_all_in_insertion_order():
    log: list = []
    manager = ShapeManager()
    manager.add(_RecordingShape("first", log))
    manager.add(_RecordingShape("second", log))

    manager.render_all(painter=None)

    assert log == [("first", "render"), ("second", "render")]


def test_pointer_events_reach_every_shape():
    log: list = []
    manager = ShapeManager()
    manager.add(_RecordingShape("first", log, hit=True))
    manager.add(_RecordingShape("second", log, hit=True))

    assert manager.on_pointer_down((1.0, 2.0)) is True
    manager.on_pointer_move((3.0, 4.0))
    manager.on_pointer_up()

    assert log == [
        ("first", "start_drag", (1.0, 2.0)),
        ("second", "start_drag", (1.0, 2.0)),
        ("first", "drag_to", (3.0, 4.0)),
        ("second", "drag_to", (3.0, 4.0)),
        ("first", "end_drag"),
        ("second", "end_drag"),
    ]


def test_pointer_down_reports_miss():
    manager = ShapeManager()
    manager.add(_RecordingShape("only", []))

    assert manager.on_pointer_down((0.0, 0.0)) is False


def test_duplicates_allowed_and_remove_first_occurrence_only():
    log: list = []
    a = _RecordingShape("a", log)
    b = _RecordingShape("b", log)
    manager = ShapeManager()
    manager.add(a)
    manager.add(b)
    manager.add(a)

    manager.remove(a)

    assert manager.shapes == (b, a)
    assert len(manager) == 2


def test_remove_absent_shape_is_noop():
    manager = ShapeManager()
    manager.add(_RecordingShape("a", []))

    manager.remove(_RecordingShape("a", []))

    assert len(manager) == 1


def test_remove_uses_identity_not_equality():
    class _EqualShape(_RecordingShape):
        def __eq__(self, other) -> bool:  # pragma: no cover - must not be used
            return True

        __hash__ = object.__hash__

    first = _EqualShape("first", [])
    second = _EqualShape("second", [])
    manager = ShapeManager()
    manager.add(first)
    manager.add(second)

    manager.remove(second)

    assert manager.shapes == (first,)


def test_overlapping_triangles_both_start_dragging():
    mapper = CoordinateMapper(200, (50, 250))
    left = DraggableTriangle(Triangle((0.0, 0.0), (1.0, 0.0), (0.0, 1.0), mapper))
    right = DraggableTriangle(Triangle((0.0, 0.0), (-1.0, 0.0), (0.0, -1.0), mapper))
    manager = ShapeManager()
    manager.add(left)
    manager.add(right)

    manager.on_pointer_down((50.0, 250.0))
    manager.on_pointer_move((150.0, 150.0))
    manager.on_pointer_up()

    assert left.triangle.a == (0.5, 0.5)
    assert right.triangle.a == (0.5, 0.5)
    assert left.dragging_index is None
    assert right.dragging_index is None


def test_removed_shape_keeps_its_state():
    mapper = CoordinateMapper(200, (50, 250))
    shape = DraggableTriangle(Triangle((0.0, 0.0), (1.0, 0.0), (0.0, 1.0), mapper))
    manager = ShapeManager()
    manager.add(shape)
    manager.on_pointer_down((250.0, 250.0))

    manager.remove(shape)
    manager.on_pointer_up()

    assert shape.dragging_index == 1
