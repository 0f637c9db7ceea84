"""Coordinate-pair capability shared by Point and Vector.

Point and Vector are siblings: both inherit the arithmetic below and
neither is a subtype of the other. Mutators work in place and return
self. The past-tense variants (added, rotated, ...) clone first and
leave the receiver untouched, as do the arithmetic operators.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Iterator, Sequence, Tuple, Type, TypeVar, Union

from ..errors import DivisionByZeroError
from ..scalar import DEFAULT_TOLERANCE

T = TypeVar("T", bound="CoordinatePair")
PairLike = Union["CoordinatePair", Sequence[float]]


@dataclass(eq=False)
class CoordinatePair:
    x: float = 0.0
    y: float = 0.0

    @classmethod
    def zero(cls: Type[T]) -> T:
        return cls(0.0, 0.0)

    @classmethod
    def of(cls: Type[T], value: PairLike) -> T:
        """Fresh instance from another pair or any (x, y) sequence."""
        if isinstance(value, CoordinatePair):
            return cls(value.x, value.y)
        x, y = value
        return cls(float(x), float(y))

    @staticmethod
    def distance(p1: CoordinatePair, p2: CoordinatePair) -> float:
        return math.hypot(p2.x - p1.x, p2.y - p1.y)

    # In-place

    def add(self: T, other: CoordinatePair) -> T:
        self.x += other.x
        self.y += other.y
        return self

    def subtract(self: T, other: CoordinatePair) -> T:
        self.x -= other.x
        self.y -= other.y
        return self

    def multiply(self: T, scalar: float) -> T:
        self.x *= scalar
        self.y *= scalar
        return self

    def divide(self: T, scalar: float) -> T:
        if scalar == 0:
            raise DivisionByZeroError("Division by zero")
        self.x /= scalar
        self.y /= scalar
        return self

    def normalize(self: T) -> T:
        """Scale to unit length. A zero-length pair is left as is."""
        length = self.length()
        if length == 0:
            return self
        return self.divide(length)

    def rotate(self: T, angle: float) -> T:
        """Rotate about the origin by angle radians, counter-clockwise."""
        c = math.cos(angle)
        s = math.sin(angle)
        self.x, self.y = self.x * c - self.y * s, self.x * s + self.y * c
        return self

    # Pure

    def added(self: T, other: CoordinatePair) -> T:
        return self.clone().add(other)

    def subtracted(self: T, other: CoordinatePair) -> T:
        return self.clone().subtract(other)

    def multiplied(self: T, scalar: float) -> T:
        return self.clone().multiply(scalar)

    def divided(self: T, scalar: float) -> T:
        return self.clone().divide(scalar)

    def normalized(self: T) -> T:
        return self.clone().normalize()

    def rotated(self: T, angle: float) -> T:
        return self.clone().rotate(angle)

    def __add__(self: T, other: object) -> T:
        if not isinstance(other, CoordinatePair):
            return NotImplemented
        return self.added(other)

    def __sub__(self: T, other: object) -> T:
        if not isinstance(other, CoordinatePair):
            return NotImplemented
        return self.subtracted(other)

    def __mul__(self: T, scalar: object) -> T:
        if not isinstance(scalar, Real):
            return NotImplemented
        return self.multiplied(scalar)

    __rmul__ = __mul__

    def __truediv__(self: T, scalar: object) -> T:
        if not isinstance(scalar, Real):
            return NotImplemented
        return self.divided(scalar)

    def __neg__(self: T) -> T:
        return self.multiplied(-1.0)

    # Metrics

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y

    def distance_to(self, other: CoordinatePair) -> float:
        return CoordinatePair.distance(self, other)

    def clone(self: T) -> T:
        return type(self)(self.x, self.y)

    def equals(self, other: CoordinatePair, tolerance: float = DEFAULT_TOLERANCE) -> bool:
        """Per-axis comparison, not Euclidean distance."""
        return abs(self.x - other.x) < tolerance and abs(self.y - other.y) < tolerance

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.equals(other)

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __str__(self) -> str:
        return f"{type(self).__name__}({self.x}, {self.y})"
