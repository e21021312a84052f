"""Small two-dimensional vector and rectangle types."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Vec2:
    """An immutable two-dimensional vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Vec2:
        return Vec2(self.x * factor, self.y * factor)

    def length_sqr(self) -> float:
        """Squared length of the vector."""
        return self.x * self.x + self.y * self.y

    def normalized(self) -> Vec2:
        """Unit vector in the same direction; the zero vector stays zero."""
        length = math.sqrt(self.length_sqr())
        if length > 0:
            return Vec2(self.x / length, self.y / length)
        return Vec2(self.x, self.y)

    def distance_sqr(self, other: Vec2) -> float:
        """Squared distance to another point."""
        return (self - other).length_sqr()


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its top-left corner and size."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    def collides(self, other: Rect) -> bool:
        """True if the two rectangles overlap; touching edges do not count."""
        return (
            self.x < other.x + other.width
            and self.x + self.width > other.x
            and self.y < other.y + other.height
            and self.y + self.height > other.y
        )


def clamp(value, low, high):
    """Limit value to [low, high]; when the bounds cross, high wins."""
    result = low if value < low else value
    return high if result > high else result