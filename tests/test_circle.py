"""
Unit tests for Circle.
"""

import math

import pytest

from planekit.shapes.circle import Circle
from planekit.shapes.point import Point
from planekit.shapes.rectangle import Rectangle


class TestCircleConstruction:
    """Constructors and the circumcircle solver."""

    def test_defaults(self):
        c = Circle()
        assert c.center == Point(0, 0)
        assert c.radius == 0

    def test_from_three_points(self):
        c = Circle.from_three_points((0, 0), (4, 0), (0, 4))
        assert c is not None
        assert c.center == Point(2, 2)
        assert c.radius == pytest.approx(2.828427, abs=1e-6)

    def test_from_three_points_passes_through_inputs(self):
        pts = [Point(1, 7), Point(-3, 2), Point(5, -1)]
        c = Circle.from_three_points(*pts)
        for p in pts:
            assert c.center.distance_to(p) == pytest.approx(c.radius)

    def test_collinear_points_give_none(self):
        assert Circle.from_three_points((0, 0), (1, 0), (2, 0)) is None
        assert Circle.from_three_points(Point(1, 1), Point(1, 1), Point(3, 3)) is None

    def test_from_diameter(self):
        c = Circle.from_diameter(Point(0, 0), Point(4, 0))
        assert c.center == Point(2, 0)
        assert c.radius == 2


class TestCircleOwnership:
    """The center is copied in and out."""

    def test_constructor_copies_center(self):
        p = Point(1, 1)
        c = Circle(p, 2)
        p.x = 100
        assert c.center == Point(1, 1)

    def test_reading_center_returns_copy(self):
        c = Circle(Point(1, 1), 2)
        c.center.x = 50
        assert c.center == Point(1, 1)

    def test_center_setter(self):
        c = Circle(Point(0, 0), 1)
        p = Point(3, 3)
        c.center = p
        p.y = 0
        assert c.center == Point(3, 3)


class TestCircleQueries:
    """Measurements, containment and intersection."""

    def test_area_and_circumference(self):
        c = Circle(Point(0, 0), 2)
        assert c.area() == pytest.approx(4 * math.pi)
        assert c.circumference() == pytest.approx(4 * math.pi)

    def test_contains_boundary_inclusive(self):
        c = Circle(Point(0, 0), 1)
        assert c.contains(Point(1, 0))
        assert c.contains(Point(0.5, 0.5))
        assert not c.contains(Point(1, 1))

    def test_intersects_circle(self):
        c = Circle(Point(0, 0), 1)
        assert c.intersects(Circle(Point(2, 0), 1))  # tangent
        assert c.intersects(Circle(Point(0.1, 0), 0.2))  # nested
        assert not c.intersects(Circle(Point(3, 0), 1))

    @pytest.mark.parametrize("rect,hit", [
        (Rectangle(0.5, 0.5, 2, 2), True),
        (Rectangle(1, 1, 2, 2), False),
        (Rectangle(-5, -5, 10, 10), True),
        (Rectangle(1, -1, 2, 2), True),
        (Rectangle(1.01, -1, 2, 2), False),
    ])
    def test_intersects_rectangle(self, rect, hit):
        assert Circle(Point(0, 0), 1).intersects(rect) is hit

    def test_intersects_rejects_other_types(self):
        with pytest.raises(TypeError):
            Circle(Point(0, 0), 1).intersects(Point(0, 0))

    def test_bounding_box(self):
        assert Circle(Point(2, 3), 1.5).bounding_box() == Rectangle(0.5, 1.5, 3, 3)

    def test_point_at(self):
        c = Circle(Point(1, 1), 2)
        assert c.point_at(0) == Point(3, 1)
        assert c.point_at(math.pi / 2) == Point(1, 3)
        assert c.point_at(math.pi).equals(Point(-1, 1), 1e-12)


class TestCircleTransforms:
    """Mutating and pure transforms."""

    def test_translate(self):
        c = Circle(Point(0, 0), 1)
        assert c.translate(2, 3) is c
        assert c.center == Point(2, 3)

    def test_scale_and_expand(self):
        c = Circle(Point(1, 1), 2)
        c.scale(3)
        assert c.radius == 6
        assert c.center == Point(1, 1)
        c.expand(-1)
        assert c.radius == 5

    def test_pure_variants(self):
        c = Circle(Point(0, 0), 1)
        assert c.translated(1, 1) == Circle(Point(1, 1), 1)
        assert c.scaled(2).radius == 2
        assert c.expanded(0.5).radius == 1.5
        assert c == Circle(Point(0, 0), 1)

    def test_clone_equals(self):
        c = Circle(Point(1.5, -2), 3)
        d = c.clone()
        assert d is not c
        assert d.equals(c)
        d.translate(1, 0)
        assert not d.equals(c)
