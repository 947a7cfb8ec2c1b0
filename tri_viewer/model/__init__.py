from .shape_manager import ShapeManager
from .shapes import DraggableShape, DraggableTriangle, StaticTriangle
from .triangle import Triangle

__all__ = [
    "DraggableShape",
    "DraggableTriangle",
    "ShapeManager",
    "StaticTriangle",
    "Triangle",
]
