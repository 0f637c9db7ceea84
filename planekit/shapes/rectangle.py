"""Axis-aligned rectangle.

Width and height may be negative until `normalize()` is called. Every
derived accessor and predicate below assumes a normalized rectangle;
they do not normalize on their own.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from ..scalar import DEFAULT_TOLERANCE
from .base import CoordinatePair, PairLike
from .point import Point


@dataclass(eq=False)
class Rectangle:
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @classmethod
    def from_points(cls, p1: PairLike, p2: PairLike) -> Rectangle:
        """Box spanned by two opposite corners, already normalized."""
        (x1, y1), (x2, y2) = Point.of(p1), Point.of(p2)
        return cls(min(x1, x2), min(y1, y2), abs(x2 - x1), abs(y2 - y1))

    @classmethod
    def from_center(cls, center: PairLike, width: float, height: float) -> Rectangle:
        cx, cy = Point.of(center)
        return cls(cx - width / 2.0, cy - height / 2.0, width, height)

    @classmethod
    def union_of(cls, a: Rectangle, b: Rectangle) -> Rectangle:
        return a.clone().union(b)

    @classmethod
    def intersection_of(cls, a: Rectangle, b: Rectangle) -> Optional[Rectangle]:
        return a.intersection(b)

    # In-place

    def translate(self, dx: float, dy: float) -> Rectangle:
        self.x += dx
        self.y += dy
        return self

    def scale(self, scale_x: float, scale_y: Optional[float] = None) -> Rectangle:
        """Scale the size about the top-left corner."""
        if scale_y is None:
            scale_y = scale_x
        self.width *= scale_x
        self.height *= scale_y
        return self

    def expand(self, amount: float) -> Rectangle:
        """Grow by amount on every side (negative shrinks)."""
        self.x -= amount
        self.y -= amount
        self.width += amount * 2
        self.height += amount * 2
        return self

    def normalize(self) -> Rectangle:
        if self.width < 0:
            self.x += self.width
            self.width = -self.width
        if self.height < 0:
            self.y += self.height
            self.height = -self.height
        return self

    def union(self, other: Rectangle) -> Rectangle:
        """Become the smallest box enclosing self and other."""
        x = min(self.x, other.x)
        y = min(self.y, other.y)
        right = max(self.right, other.right)
        bottom = max(self.bottom, other.bottom)
        self.x, self.y = x, y
        self.width = right - x
        self.height = bottom - y
        return self

    # Pure

    def translated(self, dx: float, dy: float) -> Rectangle:
        return self.clone().translate(dx, dy)

    def scaled(self, scale_x: float, scale_y: Optional[float] = None) -> Rectangle:
        return self.clone().scale(scale_x, scale_y)

    def expanded(self, amount: float) -> Rectangle:
        return self.clone().expand(amount)

    def normalized(self) -> Rectangle:
        return self.clone().normalize()

    # Accessors

    @property
    def left(self) -> float:
        return self.x

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def top(self) -> float:
        return self.y

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def center_x(self) -> float:
        return self.x + self.width / 2.0

    @property
    def center_y(self) -> float:
        return self.y + self.height / 2.0

    def center(self) -> Point:
        return Point(self.center_x, self.center_y)

    def top_left(self) -> Point:
        return Point(self.x, self.y)

    def top_right(self) -> Point:
        return Point(self.right, self.y)

    def bottom_left(self) -> Point:
        return Point(self.x, self.bottom)

    def bottom_right(self) -> Point:
        return Point(self.right, self.bottom)

    def area(self) -> float:
        return self.width * self.height

    def perimeter(self) -> float:
        return 2 * (self.width + self.height)

    # Predicates

    def contains(self, item: Union[CoordinatePair, Rectangle]) -> bool:
        """Inclusive of the boundary."""
        if isinstance(item, Rectangle):
            return (
                item.x >= self.x
                and item.right <= self.right
                and item.y >= self.y
                and item.bottom <= self.bottom
            )
        return self.x <= item.x <= self.right and self.y <= item.y <= self.bottom

    def intersects(self, other: Rectangle) -> bool:
        """Touching edges count as intersecting."""
        return not (
            other.x > self.right
            or other.right < self.x
            or other.y > self.bottom
            or other.bottom < self.y
        )

    def intersection(self, other: Rectangle) -> Optional[Rectangle]:
        if not self.intersects(other):
            return None
        x = max(self.x, other.x)
        y = max(self.y, other.y)
        right = min(self.right, other.right)
        bottom = min(self.bottom, other.bottom)
        return Rectangle(x, y, right - x, bottom - y)

    def clone(self) -> Rectangle:
        return Rectangle(self.x, self.y, self.width, self.height)

    def equals(self, other: Rectangle, tolerance: float = DEFAULT_TOLERANCE) -> bool:
        return (
            abs(self.x - other.x) < tolerance
            and abs(self.y - other.y) < tolerance
            and abs(self.width - other.width) < tolerance
            and abs(self.height - other.height) < tolerance
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Rectangle):
            return NotImplemented
        return self.equals(other)

    def __str__(self) -> str:
        return f"Rectangle({self.x}, {self.y}, {self.width}, {self.height})"
