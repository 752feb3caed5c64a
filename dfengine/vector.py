"""Two-dimensional (x, y) vectors."""

from __future__ import annotations

import math
from dataclasses import dataclass

_NORMALIZE_EPSILON = 0.0001


@dataclass(frozen=True)
class Vector:
    """An immutable 2-d vector; the default is (0, 0)."""

    x: float = 0.0
    y: float = 0.0

    def magnitude(self) -> float:
        """Return the length of the vector."""
        return math.hypot(self.x, self.y)

    def normalized(self) -> Vector:
        """Return a unit vector with the same direction.

        Vectors too short to normalize safely are returned unchanged.
        """
        mag = self.magnitude()
        if mag > _NORMALIZE_EPSILON:
            return Vector(self.x / mag, self.y / mag)
        return self

    def scale(self, s: float) -> Vector:
        """Return the vector multiplied by the factor ``s``."""
        return Vector(self.x * s, self.y * s)

    def __add__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x - other.x, self.y - other.y)