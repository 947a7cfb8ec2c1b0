"""Device-space hit testing for triangle vertices."""
from __future__ import annotations

import math
from typing import Iterable, Optional

from tri_viewer.errors import InvalidConfigurationError
from tri_viewer.geometry.primitives import dist2

DEFAULT_PICK_RADIUS = 10.0


def validate_radius(radius: float) -> float:
    value = float(radius)
    if not math.isfinite(value) or value <= 0.0:
        raise InvalidConfigurationError(
            f"Pick radius must be a positive finite number, got {radius!r}."
        )
    return value


def pick_vertex(
    pos: tuple[float, float],
    device_points: Iterable[tuple[float, float]],
    radius: float = DEFAULT_PICK_RADIUS,
    *,
    nearest: bool = False,
) -> Optional[int]:
    """Return the index of the vertex hit by ``pos`` or ``None``.

    ``pos`` and ``device_points`` are both in device space. A vertex is hit
    when its distance is strictly less than ``radius``. By default the first
    hit in iteration order wins even if a later vertex is closer; pass
    ``nearest=True`` to pick the closest hit instead.
    """

    r2 = validate_radius(radius) ** 2
    best: Optional[int] = None
    best_d2 = r2
    for index, point in enumerate(device_points):
        d2 = dist2(pos, point)
        if d2 >= r2:
            continue
        if not nearest:
            return index
        if d2 < best_d2:
            best = index
            best_d2 = d2
    return best
