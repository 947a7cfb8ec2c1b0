"""Rendering helpers for the triangle canvas."""
from __future__ import annotations

from tri_viewer.rendering.colors import parse_color
from tri_viewer.rendering.triangle_painter import (
    DEFAULT_GRID_COLOR,
    DEFAULT_GRID_SPACING,
    MARKER_RADIUS,
    GridStyle,
    TriangleStyle,
    draw_point,
    draw_segments,
    draw_triangle,
    to_qpoint,
    triangle_path,
)

__all__ = [
    "DEFAULT_GRID_COLOR",
    "DEFAULT_GRID_SPACING",
    "MARKER_RADIUS",
    "GridStyle",
    "TriangleStyle",
    "draw_point",
    "draw_segments",
    "draw_triangle",
    "parse_color",
    "to_qpoint",
    "triangle_path",
]
