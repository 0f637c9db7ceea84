"""Vector: displacement with dot/cross/angle algebra."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from .base import CoordinatePair

if TYPE_CHECKING:
    from .point import Point


class Vector(CoordinatePair):
    @classmethod
    def one(cls) -> Vector:
        return cls(1.0, 1.0)

    @classmethod
    def from_angle(cls, angle: float, magnitude: float = 1.0) -> Vector:
        return cls(math.cos(angle) * magnitude, math.sin(angle) * magnitude)

    @classmethod
    def between(cls, start: CoordinatePair, end: CoordinatePair) -> Vector:
        """Vector pointing from start to end."""
        return cls(end.x - start.x, end.y - start.y)

    def dot(self, other: Vector) -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: Vector) -> float:
        """z of the 3D cross product; > 0 when other is a CCW turn from self."""
        return self.x * other.y - self.y * other.x

    def angle(self) -> float:
        """Angle from the positive x-axis, in (-pi, pi]."""
        return math.atan2(self.y, self.x)

    def angle_to(self, other: Vector) -> float:
        """Signed angle from self to other, in (-pi, pi]."""
        return math.atan2(self.cross(other), self.dot(other))

    @staticmethod
    def angle_between(v1: Vector, v2: Vector) -> float:
        return v1.angle_to(v2)

    def perpendicular(self) -> Vector:
        """New vector rotated 90 degrees counter-clockwise."""
        return Vector(-self.y, self.x)

    def project(self, onto: Vector) -> Vector:
        """Projection of self onto `onto`; zero vector if `onto` has no length."""
        length_sq = onto.length_squared()
        if length_sq == 0:
            return Vector(0.0, 0.0)
        return Vector(onto.x, onto.y).multiply(self.dot(onto) / length_sq)

    def reflect(self, normal: Vector) -> Vector:
        # normal must be unit length
        d = self.dot(normal)
        self.x -= 2 * d * normal.x
        self.y -= 2 * d * normal.y
        return self

    def reflected(self, normal: Vector) -> Vector:
        return self.clone().reflect(normal)

    def to_point(self) -> Point:
        from .point import Point

        return Point(self.x, self.y)
