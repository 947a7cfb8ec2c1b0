from .barycentric import (
    barycentric_weights,
    signed_area,
    subdivision_segments,
    to_barycentric,
    to_cartesian,
    to_cartesian_array,
)
from .mapping import CoordinateMapper
from .picking import DEFAULT_PICK_RADIUS, pick_vertex
from .primitives import CartesianPoint, DevicePoint

__all__ = [
    "CartesianPoint",
    "DevicePoint",
    "CoordinateMapper",
    "DEFAULT_PICK_RADIUS",
    "pick_vertex",
    "signed_area",
    "to_barycentric",
    "to_cartesian",
    "to_cartesian_array",
    "barycentric_weights",
    "subdivision_segments",
]
