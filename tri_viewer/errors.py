"""Exceptions raised by the triangle viewer core."""

from __future__ import annotations


class DegenerateTriangleError(ValueError):
    """Raised when a triangle has (numerically) zero area."""


class InvalidConfigurationError(ValueError):
    """Raised when a mapper, grid or viewer setting is out of range."""
