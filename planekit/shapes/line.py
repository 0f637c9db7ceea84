"""Line segment between two points.

Zero-length segments are allowed: distance falls back to point distance
and intersection finds nothing (the system is singular).
"""

from __future__ import annotations

from typing import Optional

from ..scalar import DEFAULT_TOLERANCE, clamp
from .base import CoordinatePair, PairLike
from .point import Point
from .rectangle import Rectangle
from .vector import Vector

# |determinant| below this is treated as parallel
PARALLEL_EPSILON = 1e-10


class Line:
    """Segment from `start` to `end`. Endpoints are copied in and out."""

    def __init__(self, start: Optional[PairLike] = None, end: Optional[PairLike] = None):
        self._start = Point.of(start) if start is not None else Point.zero()
        self._end = Point.of(end) if end is not None else Point.zero()

    @property
    def start(self) -> Point:
        return self._start.clone()

    @start.setter
    def start(self, value: CoordinatePair) -> None:
        self._start = Point.of(value)

    @property
    def end(self) -> Point:
        return self._end.clone()

    @end.setter
    def end(self, value: CoordinatePair) -> None:
        self._end = Point.of(value)

    @classmethod
    def from_point_and_direction(cls, point: PairLike, direction: Vector, length: float) -> Line:
        """Segment of `length` along `direction` (normalized first)."""
        step = direction.normalized().multiply(length)
        return cls(point, Point.of(point).add(step))

    @classmethod
    def from_angle(cls, start: PairLike, angle: float, length: float) -> Line:
        return cls(start, Point.of(start).add(Vector.from_angle(angle, length)))

    # In-place

    def translate(self, dx: float, dy: float) -> Line:
        offset = Point(dx, dy)
        self._start.add(offset)
        self._end.add(offset)
        return self

    def scale(self, factor: float, origin: Optional[CoordinatePair] = None) -> Line:
        origin = origin if origin is not None else Point.zero()
        self._start.subtract(origin).multiply(factor).add(origin)
        self._end.subtract(origin).multiply(factor).add(origin)
        return self

    def rotate(self, angle: float, origin: Optional[CoordinatePair] = None) -> Line:
        origin = origin if origin is not None else Point.zero()
        self._start.subtract(origin).rotate(angle).add(origin)
        self._end.subtract(origin).rotate(angle).add(origin)
        return self

    # Pure

    def translated(self, dx: float, dy: float) -> Line:
        return self.clone().translate(dx, dy)

    def scaled(self, factor: float, origin: Optional[CoordinatePair] = None) -> Line:
        return self.clone().scale(factor, origin)

    def rotated(self, angle: float, origin: Optional[CoordinatePair] = None) -> Line:
        return self.clone().rotate(angle, origin)

    # Queries

    def length(self) -> float:
        return self._start.distance_to(self._end)

    def direction(self) -> Vector:
        return Vector.between(self._start, self._end)

    def normal(self) -> Vector:
        """Unit normal, 90 degrees CCW from the direction. Zero for a degenerate segment."""
        return self.direction().perpendicular().normalize()

    def midpoint(self) -> Point:
        return Point.midpoint(self._start, self._end)

    def point_at(self, t: float) -> Point:
        """t=0 is start, t=1 is end; other values extrapolate."""
        return Point.lerp(self._start, self._end, t)

    def distance_to_point(self, point: CoordinatePair) -> float:
        l2 = self.direction().length_squared()
        if l2 == 0:
            return self._start.distance_to(point)
        t = (
            (point.x - self._start.x) * (self._end.x - self._start.x)
            + (point.y - self._start.y) * (self._end.y - self._start.y)
        ) / l2
        return self.point_at(clamp(t, 0.0, 1.0)).distance_to(point)

    def contains_point(self, point: CoordinatePair, tolerance: float = DEFAULT_TOLERANCE) -> bool:
        return self.distance_to_point(point) <= tolerance

    def intersects(self, other: Line) -> Optional[Point]:
        """Crossing point of the two segments, or None.

        Parallel segments return None, including collinear ones that
        overlap. Endpoints count (parameters in [0, 1] inclusive).
        """
        p0, p2 = self._start, other._start
        s1x = self._end.x - p0.x
        s1y = self._end.y - p0.y
        s2x = other._end.x - p2.x
        s2y = other._end.y - p2.y

        denom = -s2x * s1y + s1x * s2y
        if abs(denom) < PARALLEL_EPSILON:
            return None

        s = (-s1y * (p0.x - p2.x) + s1x * (p0.y - p2.y)) / denom
        t = (s2x * (p0.y - p2.y) - s2y * (p0.x - p2.x)) / denom
        if 0 <= s <= 1 and 0 <= t <= 1:
            return Point(p0.x + t * s1x, p0.y + t * s1y)
        return None

    def bounding_box(self) -> Rectangle:
        return Rectangle.from_points(self._start, self._end)

    def clone(self) -> Line:
        return Line(self._start, self._end)

    def equals(self, other: Line, tolerance: float = DEFAULT_TOLERANCE) -> bool:
        """Direction matters: Line(a, b) does not equal Line(b, a)."""
        return self._start.equals(other._start, tolerance) and self._end.equals(other._end, tolerance)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Line):
            return NotImplemented
        return self.equals(other)

    def __repr__(self) -> str:
        return f"Line(start={self._start!r}, end={self._end!r})"

    def __str__(self) -> str:
        return f"Line({self._start}, {self._end})"
