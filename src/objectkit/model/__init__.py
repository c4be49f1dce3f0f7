"""objectkit model layer -- public type re-exports."""

from objectkit.model.shapes import Circle, Rectangle

__all__ = [
    "Rectangle",
    "Circle",
]
