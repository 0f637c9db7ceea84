"""Point: a location in the plane."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..scalar import lerp
from .base import CoordinatePair

if TYPE_CHECKING:
    from .vector import Vector


class Point(CoordinatePair):
    """2D location. Rotation is about the origin; to pivot elsewhere,
    subtract the pivot, rotate, add it back."""

    @classmethod
    def midpoint(cls, p1: CoordinatePair, p2: CoordinatePair) -> Point:
        return cls((p1.x + p2.x) / 2.0, (p1.y + p2.y) / 2.0)

    @classmethod
    def lerp(cls, p1: CoordinatePair, p2: CoordinatePair, t: float) -> Point:
        return cls(lerp(p1.x, p2.x, t), lerp(p1.y, p2.y, t))

    def to_vector(self) -> Vector:
        from .vector import Vector

        return Vector(self.x, self.y)
