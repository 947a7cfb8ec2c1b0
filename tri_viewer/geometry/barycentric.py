"""Barycentric coordinates relative to a triangle's three vertices."""
from __future__ import annotations

import logging
import math
from typing import Sequence

import numpy as np

from tri_viewer.errors import DegenerateTriangleError, InvalidConfigurationError
from tri_viewer.geometry.primitives import CartesianPoint

logger = logging.getLogger(__name__)

Vertices = Sequence[tuple[float, float]]

# Gram determinant below this fraction of |AB|^2 * |AC|^2 counts as zero area.
_DEGENERATE_REL_TOL = 1e-12
_FORWARD_NEIGHBOURS = ((1, 0), (0, 1), (1, -1))


def signed_area(vertices: Vertices) -> float:
    """Return the signed area, positive for counter-clockwise A, B, C."""

    (ax, ay), (bx, by), (cx, cy) = vertices
    return 0.5 * ((bx - ax) * (cy - ay) - (by - ay) * (cx - ax))


def to_barycentric(vertices: Vertices, p: tuple[float, float]) -> tuple[float, float]:
    """Return the ``(i, j)`` weights of ``p`` for vertices ``A`` and ``B``.

    The weight of ``C`` is ``1 - i - j``. Raises ``DegenerateTriangleError``
    when the vertices are collinear or coincident.
    """

    (ax, ay), (bx, by), (cx, cy) = vertices
    v0 = (bx - ax, by - ay)
    v1 = (cx - ax, cy - ay)
    v2 = (p[0] - ax, p[1] - ay)
    d00 = v0[0] * v0[0] + v0[1] * v0[1]
    d01 = v0[0] * v1[0] + v0[1] * v1[1]
    d11 = v1[0] * v1[0] + v1[1] * v1[1]
    d20 = v2[0] * v0[0] + v2[1] * v0[1]
    d21 = v2[0] * v1[0] + v2[1] * v1[1]
    denom = d00 * d11 - d01 * d01
    scale = d00 * d11
    if not math.isfinite(denom) or scale == 0.0 or denom <= _DEGENERATE_REL_TOL * scale:
        logger.debug("Degenerate triangle in barycentric solve: %s", tuple(vertices))
        raise DegenerateTriangleError(
            f"Triangle {tuple(vertices)!r} has zero area; barycentric coordinates are undefined."
        )
    j = (d11 * d20 - d01 * d21) / denom
    k = (d00 * d21 - d01 * d20) / denom
    i = 1.0 - j - k
    return i, j


def barycentric_weights(vertices: Vertices, p: tuple[float, float]) -> tuple[float, float, float]:
    i, j = to_barycentric(vertices, p)
    return i, j, 1.0 - i - j


def to_cartesian(vertices: Vertices, i: float, j: float) -> CartesianPoint:
    """Affine combination ``i*A + j*B + k*C`` with ``k = 1 - i - j``.

    No range check is applied, so weights outside ``[0, 1]`` extrapolate.
    """

    (ax, ay), (bx, by), (cx, cy) = vertices
    k = 1.0 - i - j
    return CartesianPoint(i * ax + j * bx + k * cx, i * ay + j * by + k * cy)


def to_cartesian_array(vertices: Vertices, weights: np.ndarray) -> np.ndarray:
    """Vectorised ``to_cartesian`` for an array whose last axis holds ``(i, j)``."""

    corners = np.asarray(vertices, dtype=float)
    weights = np.asarray(weights, dtype=float)
    i = weights[..., 0:1]
    j = weights[..., 1:2]
    k = 1.0 - i - j
    return i * corners[0] + j * corners[1] + k * corners[2]


def validate_spacing(spacing: float) -> float:
    value = float(spacing)
    if not math.isfinite(value) or value <= 0.0 or value > 1.0:
        raise InvalidConfigurationError(
            f"Grid spacing must be in (0, 1], got {spacing!r}."
        )
    return value


def grid_steps(spacing: float) -> int:
    """Number of whole grid steps that fit along one simplex edge."""

    # Absorb representation error so that e.g. 1/0.1 still yields 10 steps.
    return int(math.floor(1.0 / validate_spacing(spacing) + 1e-9))


def subdivision_segments(spacing: float) -> np.ndarray:
    """Return barycentric grid segments as an ``(n, 2, 2)`` array.

    Each sample ``(i, j)`` on the ``spacing`` lattice inside the unit simplex
    is joined to its forward neighbours ``(i+s, j)``, ``(i, j+s)`` and
    ``(i+s, j-s)`` when the neighbour is also inside the simplex. Lattice
    positions are enumerated with integer step counts.
    """

    step = validate_spacing(spacing)
    steps = grid_steps(step)
    a, b = np.meshgrid(np.arange(steps + 1), np.arange(steps + 1), indexing="ij")
    inside = a + b <= steps
    a = a[inside]
    b = b[inside]

    starts = []
    ends = []
    for da, db in _FORWARD_NEIGHBOURS:
        na = a + da
        nb = b + db
        valid = (na >= 0) & (nb >= 0) & (na + nb <= steps)
        starts.append(np.stack([a[valid], b[valid]], axis=-1))
        ends.append(np.stack([na[valid], nb[valid]], axis=-1))

    segments = np.stack([np.concatenate(starts), np.concatenate(ends)], axis=1)
    return segments.astype(float) * step
