"""Polygon as an ordered vertex list.

A polygon is "closed" when it has more than two vertices and the last
one repeats the first. Open polygons are fine; area, centroid and
containment wrap from the last vertex back to the first either way.

The polygon owns its vertices: every point handed in is copied and
every point handed out is a copy.
"""

from __future__ import annotations

import math
from typing import Iterable, List, Optional

from ..errors import InvalidConstructionError
from ..scalar import DEFAULT_TOLERANCE
from .base import CoordinatePair, PairLike
from .circle import Circle
from .line import Line
from .point import Point
from .rectangle import Rectangle

# turns with |cross| at or below this are treated as collinear
TURN_EPSILON = 1e-10
# |signed area| below this falls back to the vertex mean
AREA_EPSILON = 1e-10


def _cross(o: Point, a: Point, b: Point) -> float:
    """Orientation of o->a->b: > 0 left turn, < 0 right turn."""
    return (a.x - o.x) * (b.y - o.y) - (a.y - o.y) * (b.x - o.x)


class Polygon:
    def __init__(self, vertices: Iterable[PairLike] = ()):
        self._vertices: List[Point] = [Point.of(v) for v in vertices]

    # Factories

    @classmethod
    def regular(cls, center: PairLike, radius: float, sides: int) -> Polygon:
        """Closed regular polygon with its first vertex at angle 0."""
        if sides < 3:
            raise InvalidConstructionError(f"Polygon must have at least 3 sides, got {sides}")
        cx, cy = Point.of(center)
        step = 2 * math.pi / sides
        poly = cls(
            Point(cx + radius * math.cos(i * step), cy + radius * math.sin(i * step))
            for i in range(sides)
        )
        return poly.close()

    @classmethod
    def rectangle(cls, x: float, y: float, width: float, height: float) -> Polygon:
        poly = cls([
            Point(x, y),
            Point(x + width, y),
            Point(x + width, y + height),
            Point(x, y + height),
        ])
        return poly.close()

    @classmethod
    def from_rectangle(cls, rect: Rectangle) -> Polygon:
        return cls.rectangle(rect.x, rect.y, rect.width, rect.height)

    @classmethod
    def triangle(cls, p1: PairLike, p2: PairLike, p3: PairLike) -> Polygon:
        return cls([p1, p2, p3]).close()

    @classmethod
    def from_circle(cls, circle: Circle, segments: int = 32) -> Polygon:
        if segments < 3:
            raise InvalidConstructionError(
                f"Circle approximation must have at least 3 segments, got {segments}"
            )
        step = 2 * math.pi / segments
        return cls(circle.point_at(i * step) for i in range(segments)).close()

    @classmethod
    def convex_hull(cls, points: Iterable[PairLike]) -> Polygon:
        """Andrew's monotone chain. Result is counter-clockwise and open.

        Fewer than three points come back unchanged. Collinear points on
        the hull boundary are dropped.
        """
        pts = [Point.of(p) for p in points]
        if len(pts) < 3:
            return cls(pts)

        pts.sort(key=lambda p: (p.x, p.y))

        lower: List[Point] = []
        for p in pts:
            while len(lower) >= 2 and _cross(lower[-2], lower[-1], p) <= 0:
                lower.pop()
            lower.append(p)

        upper: List[Point] = []
        for p in reversed(pts):
            while len(upper) >= 2 and _cross(upper[-2], upper[-1], p) <= 0:
                upper.pop()
            upper.append(p)

        # each chain ends where the other starts
        return cls(lower[:-1] + upper[:-1])

    # Vertex access

    @property
    def vertices(self) -> List[Point]:
        return [v.clone() for v in self._vertices]

    @property
    def vertex_count(self) -> int:
        return len(self._vertices)

    def __len__(self) -> int:
        return len(self._vertices)

    def get_vertex(self, index: int) -> Optional[Point]:
        if 0 <= index < len(self._vertices):
            return self._vertices[index].clone()
        return None

    def set_vertex(self, index: int, point: PairLike) -> Polygon:
        if 0 <= index < len(self._vertices):
            self._vertices[index] = Point.of(point)
        return self

    def add_vertex(self, point: PairLike) -> Polygon:
        self._vertices.append(Point.of(point))
        return self

    def insert_vertex(self, index: int, point: PairLike) -> Polygon:
        self._vertices.insert(index, Point.of(point))
        return self

    def remove_vertex(self, index: int) -> Polygon:
        if 0 <= index < len(self._vertices):
            del self._vertices[index]
        return self

    # Transforms

    def _origin_or_centroid(self, origin: Optional[CoordinatePair]) -> Point:
        if origin is not None:
            return Point.of(origin)
        return self.centroid() if self._vertices else Point.zero()

    def translate(self, dx: float, dy: float) -> Polygon:
        offset = Point(dx, dy)
        for v in self._vertices:
            v.add(offset)
        return self

    def scale(self, factor: float, origin: Optional[CoordinatePair] = None) -> Polygon:
        """Scale about origin, the centroid by default."""
        pivot = self._origin_or_centroid(origin)
        for v in self._vertices:
            v.subtract(pivot).multiply(factor).add(pivot)
        return self

    def rotate(self, angle: float, origin: Optional[CoordinatePair] = None) -> Polygon:
        """Rotate about origin, the centroid by default."""
        pivot = self._origin_or_centroid(origin)
        for v in self._vertices:
            v.subtract(pivot).rotate(angle).add(pivot)
        return self

    def reverse(self) -> Polygon:
        self._vertices.reverse()
        return self

    def close(self) -> Polygon:
        """Repeat the first vertex at the end, if there are >2 vertices and it is not there yet."""
        if len(self._vertices) > 2 and not self.is_closed():
            self._vertices.append(self._vertices[0].clone())
        return self

    def translated(self, dx: float, dy: float) -> Polygon:
        return self.clone().translate(dx, dy)

    def scaled(self, factor: float, origin: Optional[CoordinatePair] = None) -> Polygon:
        return self.clone().scale(factor, origin)

    def rotated(self, angle: float, origin: Optional[CoordinatePair] = None) -> Polygon:
        return self.clone().rotate(angle, origin)

    def reversed(self) -> Polygon:
        return self.clone().reverse()

    def closed(self) -> Polygon:
        return self.clone().close()

    # Measurements

    def is_closed(self, tolerance: float = DEFAULT_TOLERANCE) -> bool:
        return len(self._vertices) > 2 and self._vertices[0].equals(self._vertices[-1], tolerance)

    def _ring(self) -> List[Point]:
        """Vertices without the closing duplicate."""
        return self._vertices[:-1] if self.is_closed() else self._vertices

    def is_convex(self) -> bool:
        """All non-collinear turns share one sign. Fewer than 3 vertices is not convex."""
        ring = self._ring()
        n = len(ring)
        if n < 3:
            return False

        sign = 0
        for i in range(n):
            turn = _cross(ring[i], ring[(i + 1) % n], ring[(i + 2) % n])
            if abs(turn) <= TURN_EPSILON:
                continue
            current = 1 if turn > 0 else -1
            if sign == 0:
                sign = current
            elif sign != current:
                return False
        return True

    def signed_area(self) -> float:
        """Shoelace sum / 2; positive for counter-clockwise order (y up)."""
        n = len(self._vertices)
        if n < 3:
            return 0.0
        total = 0.0
        for i in range(n):
            a = self._vertices[i]
            b = self._vertices[(i + 1) % n]
            total += a.x * b.y - b.x * a.y
        return total / 2.0

    def area(self) -> float:
        return abs(self.signed_area())

    def perimeter(self) -> float:
        return sum(edge.length() for edge in self.edges())

    def centroid(self) -> Point:
        """Area centroid; vertex mean for < 3 vertices or a zero-area outline."""
        n = len(self._vertices)
        if n == 0:
            return Point.zero()
        if n >= 3:
            cx = cy = doubled_area = 0.0
            for i in range(n):
                a = self._vertices[i]
                b = self._vertices[(i + 1) % n]
                term = a.x * b.y - b.x * a.y
                doubled_area += term
                cx += (a.x + b.x) * term
                cy += (a.y + b.y) * term
            if abs(doubled_area) >= AREA_EPSILON:
                # 6 * area == 3 * doubled_area
                return Point(cx / (3 * doubled_area), cy / (3 * doubled_area))
        return Point(
            sum(v.x for v in self._vertices) / n,
            sum(v.y for v in self._vertices) / n,
        )

    def bounding_box(self) -> Rectangle:
        if not self._vertices:
            return Rectangle()
        xs = [v.x for v in self._vertices]
        ys = [v.y for v in self._vertices]
        return Rectangle(min(xs), min(ys), max(xs) - min(xs), max(ys) - min(ys))

    # Containment / intersection

    def contains(self, point: CoordinatePair) -> bool:
        """Even-odd ray cast. Points on the boundary may go either way;
        use `contains_on_edge` for those."""
        verts = self._vertices
        n = len(verts)
        if n < 3:
            return False
        inside = False
        j = n - 1
        for i in range(n):
            vi, vj = verts[i], verts[j]
            if (vi.y > point.y) != (vj.y > point.y) and point.x < (
                (vj.x - vi.x) * (point.y - vi.y) / (vj.y - vi.y) + vi.x
            ):
                inside = not inside
            j = i
        return inside

    def contains_on_edge(self, point: CoordinatePair, tolerance: float = DEFAULT_TOLERANCE) -> bool:
        return any(edge.contains_point(point, tolerance) for edge in self.edges())

    def edges(self) -> List[Line]:
        """Consecutive edges, wrapping to the first vertex; the closing edge appears once."""
        n = len(self._vertices)
        if n < 2:
            return []
        limit = n - 1 if self.is_closed() else n
        return [Line(self._vertices[i], self._vertices[(i + 1) % n]) for i in range(limit)]

    def intersects(self, other: Polygon) -> bool:
        """Any pair of edges crossing, or the first vertex of one inside the other.

        This is a heuristic, not a separating-axis test: collinear
        overlapping edges are never reported as crossing, and only the
        first vertex of each polygon is probed for containment.
        """
        if not self._vertices or not other._vertices:
            return False
        theirs = other.edges()
        for edge in self.edges():
            for candidate in theirs:
                if edge.intersects(candidate) is not None:
                    return True
        return other.contains(self._vertices[0]) or self.contains(other._vertices[0])

    # Simplification

    def simplify(self, tolerance: float = DEFAULT_TOLERANCE) -> Polygon:
        """Drop vertices that lie within tolerance of their neighbours' chord.

        Single forward pass: vertex i survives when its distance to the
        segment (last kept vertex, vertex i+1) exceeds tolerance. Unlike
        recursive Douglas-Peucker, dropped spans are never revisited. The
        first and last distinct vertices always survive; a closed polygon
        stays closed.
        """
        if len(self._vertices) <= 2:
            return self

        was_closed = self.is_closed()
        work = self._vertices[:-1] if was_closed else self._vertices

        kept = [work[0].clone()]
        for i in range(1, len(work) - 1):
            chord = Line(kept[-1], work[i + 1])
            if chord.distance_to_point(work[i]) > tolerance:
                kept.append(work[i].clone())
        if len(work) > 1:
            kept.append(work[-1].clone())

        if was_closed and len(kept) > 1 and not kept[0].equals(kept[-1]):
            kept.append(kept[0].clone())

        self._vertices = kept
        return self

    def simplified(self, tolerance: float = DEFAULT_TOLERANCE) -> Polygon:
        return self.clone().simplify(tolerance)

    # Identity

    def clone(self) -> Polygon:
        return Polygon(self._vertices)

    def equals(self, other: Polygon, tolerance: float = DEFAULT_TOLERANCE) -> bool:
        """Same vertex count and pairwise equal vertices, in order."""
        if len(self._vertices) != len(other._vertices):
            return False
        return all(a.equals(b, tolerance) for a, b in zip(self._vertices, other._vertices))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polygon):
            return NotImplemented
        return self.equals(other)

    def __repr__(self) -> str:
        return f"Polygon({self._vertices!r})"

    def __str__(self) -> str:
        body = ", ".join(f"({v.x}, {v.y})" for v in self._vertices)
        return f"Polygon([{body}])"
