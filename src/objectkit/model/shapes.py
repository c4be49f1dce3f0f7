"""Shape models: plain data holders with a computed area."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass
class Rectangle:
    """An axis-aligned rectangle.

    Example:
        >>> Rectangle(10, 20).area()
        200
    """

    width: float
    height: float

    def area(self) -> float:
        return self.width * self.height


@dataclass
class Circle:
    """A circle described by its radius."""

    radius: float

    def area(self) -> float:
        return math.pi * self.radius**2
