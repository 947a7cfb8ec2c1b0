from __future__ import annotations

import math
from typing import NamedTuple


class CartesianPoint(NamedTuple):
    """Logical coordinates, y axis pointing up."""

    x: float
    y: float


class DevicePoint(NamedTuple):
    """Pixel coordinates on a drawing surface, y axis pointing down."""

    x: float
    y: float


def dist2(a: tuple[float, float], b: tuple[float, float]) -> float:
    dx = a[0] - b[0]
    dy = a[1] - b[1]
    return dx * dx + dy * dy


def is_finite_point(p: tuple[float, float]) -> bool:
    return math.isfinite(p[0]) and math.isfinite(p[1])
