"""Circle given by center and radius."""

from __future__ import annotations

import math
from typing import Optional, Union

from ..scalar import DEFAULT_TOLERANCE, clamp
from .base import CoordinatePair, PairLike
from .point import Point
from .rectangle import Rectangle

# |D| below this means the three points are collinear
COLLINEAR_EPSILON = 1e-10


class Circle:
    """Center plus radius.

    The center is copied on the way in and on the way out, so a caller
    never holds a reference into the circle. The radius is expected to
    be non-negative but is not checked.
    """

    def __init__(self, center: Optional[PairLike] = None, radius: float = 0.0):
        self._center = Point.of(center) if center is not None else Point.zero()
        self.radius = radius

    @property
    def center(self) -> Point:
        return self._center.clone()

    @center.setter
    def center(self, value: CoordinatePair) -> None:
        self._center = Point.of(value)

    @classmethod
    def from_three_points(cls, p1: PairLike, p2: PairLike, p3: PairLike) -> Optional[Circle]:
        """Circumcircle of a triangle, or None when the points are collinear."""
        p1, p2, p3 = Point.of(p1), Point.of(p2), Point.of(p3)
        d = 2 * (p1.x * (p2.y - p3.y) + p2.x * (p3.y - p1.y) + p3.x * (p1.y - p2.y))
        if abs(d) < COLLINEAR_EPSILON:
            return None

        s1 = p1.x * p1.x + p1.y * p1.y
        s2 = p2.x * p2.x + p2.y * p2.y
        s3 = p3.x * p3.x + p3.y * p3.y

        cx = (s1 * (p2.y - p3.y) + s2 * (p3.y - p1.y) + s3 * (p1.y - p2.y)) / d
        cy = (s1 * (p3.x - p2.x) + s2 * (p1.x - p3.x) + s3 * (p2.x - p1.x)) / d
        center = Point(cx, cy)
        return cls(center, center.distance_to(p1))

    @classmethod
    def from_diameter(cls, p1: PairLike, p2: PairLike) -> Circle:
        p1, p2 = Point.of(p1), Point.of(p2)
        return cls(Point.midpoint(p1, p2), Point.distance(p1, p2) / 2.0)

    def translate(self, dx: float, dy: float) -> Circle:
        self._center.add(Point(dx, dy))
        return self

    def scale(self, factor: float) -> Circle:
        """Scale the radius; the center stays put."""
        self.radius *= factor
        return self

    def expand(self, amount: float) -> Circle:
        self.radius += amount
        return self

    def translated(self, dx: float, dy: float) -> Circle:
        return self.clone().translate(dx, dy)

    def scaled(self, factor: float) -> Circle:
        return self.clone().scale(factor)

    def expanded(self, amount: float) -> Circle:
        return self.clone().expand(amount)

    def area(self) -> float:
        return math.pi * self.radius * self.radius

    def circumference(self) -> float:
        return 2 * math.pi * self.radius

    def contains(self, point: CoordinatePair) -> bool:
        return self._center.distance_to(point) <= self.radius

    def intersects(self, other: Union[Circle, Rectangle]) -> bool:
        if isinstance(other, Circle):
            return self._center.distance_to(other._center) <= self.radius + other.radius
        if isinstance(other, Rectangle):
            # closest point of the (normalized) rectangle to the center
            closest = Point(
                clamp(self._center.x, other.x, other.right),
                clamp(self._center.y, other.y, other.bottom),
            )
            return self._center.distance_to(closest) <= self.radius
        raise TypeError(f"cannot intersect Circle with {type(other).__name__}")

    def bounding_box(self) -> Rectangle:
        return Rectangle(
            self._center.x - self.radius,
            self._center.y - self.radius,
            self.radius * 2,
            self.radius * 2,
        )

    def point_at(self, angle: float) -> Point:
        """Boundary point; angle 0 is the positive x-axis, growing counter-clockwise."""
        return Point(
            self._center.x + math.cos(angle) * self.radius,
            self._center.y + math.sin(angle) * self.radius,
        )

    def clone(self) -> Circle:
        return Circle(self._center, self.radius)

    def equals(self, other: Circle, tolerance: float = DEFAULT_TOLERANCE) -> bool:
        return self._center.equals(other._center, tolerance) and abs(self.radius - other.radius) < tolerance

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Circle):
            return NotImplemented
        return self.equals(other)

    def __repr__(self) -> str:
        return f"Circle(center={self._center!r}, radius={self.radius!r})"

    def __str__(self) -> str:
        return f"Circle({self._center}, {self.radius})"
