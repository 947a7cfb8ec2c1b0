"""Mapping between device pixels and Cartesian coordinates."""
from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from tri_viewer.errors import InvalidConfigurationError
from tri_viewer.geometry.primitives import CartesianPoint, DevicePoint, is_finite_point

DEFAULT_SCALE = 200.0
DEFAULT_OFFSET = DevicePoint(50.0, 250.0)


@dataclass(frozen=True)
class CoordinateMapper:
    """Uniform scale plus offset between Cartesian and device space.

    ``offset`` is the device-space position of the Cartesian origin. The
    y axis flips because device space grows downward.
    """

    scale: float = DEFAULT_SCALE
    offset: DevicePoint = DEFAULT_OFFSET

    def __post_init__(self) -> None:
        scale = float(self.scale)
        if not math.isfinite(scale) or scale <= 0:
            raise InvalidConfigurationError(
                f"Mapper scale must be a positive finite number, got {self.scale!r}."
            )
        if not is_finite_point(self.offset):
            raise InvalidConfigurationError(
                f"Mapper offset must be finite, got {self.offset!r}."
            )
        object.__setattr__(self, "scale", scale)
        ox, oy = self.offset
        object.__setattr__(self, "offset", DevicePoint(float(ox), float(oy)))

    def to_device(self, p: tuple[float, float]) -> DevicePoint:
        x, y = p
        return DevicePoint(self.offset.x + x * self.scale, self.offset.y - y * self.scale)

    def from_device(self, p: tuple[float, float]) -> CartesianPoint:
        x, y = p
        return CartesianPoint(
            (x - self.offset.x) / self.scale, (self.offset.y - y) / self.scale
        )

    def to_device_array(self, points: np.ndarray) -> np.ndarray:
        """Vectorised ``to_device`` for an array whose last axis holds ``(x, y)``."""

        pts = np.asarray(points, dtype=float)
        out = np.empty_like(pts)
        out[..., 0] = self.offset.x + pts[..., 0] * self.scale
        out[..., 1] = self.offset.y - pts[..., 1] * self.scale
        return out
