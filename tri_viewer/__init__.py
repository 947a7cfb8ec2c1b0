"""Interactive triangle viewer with barycentric coordinate helpers."""

__version__ = "0.1.0"
