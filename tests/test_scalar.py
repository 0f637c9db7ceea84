"""
Unit tests for scalar helpers.
"""

import math

import pytest

from planekit.scalar import (
    DEFAULT_TOLERANCE, FUZZY_EPSILON, clamp, deg_to_rad, fuzzy_equals, lerp,
    map_range, rad_to_deg, round_to_precision, sign,
)


class TestScalar:
    """Tests for the scalar utilities."""

    def test_tolerance_defaults(self):
        assert DEFAULT_TOLERANCE == 1e-10
        assert FUZZY_EPSILON == 1e-6

    @pytest.mark.parametrize("value,expected", [(-5, 0), (5, 5), (15, 10), (0, 0), (10, 10)])
    def test_clamp(self, value, expected):
        assert clamp(value, 0, 10) == expected

    def test_lerp(self):
        assert lerp(0, 10, 0.25) == 2.5
        assert lerp(0, 10, 1.5) == 15  # extrapolates

    def test_angle_conversion(self):
        assert deg_to_rad(180) == pytest.approx(math.pi)
        assert rad_to_deg(math.pi / 2) == pytest.approx(90)
        assert rad_to_deg(deg_to_rad(37.5)) == pytest.approx(37.5)

    def test_map_range(self):
        assert map_range(5, 0, 10, 0, 100) == pytest.approx(50)
        assert map_range(0, -1, 1, 10, 20) == pytest.approx(15)

    def test_map_range_empty_input_range(self):
        with pytest.raises(ZeroDivisionError):
            map_range(1, 2, 2, 0, 1)

    def test_fuzzy_equals(self):
        assert fuzzy_equals(1.0, 1.0 + 1e-7)
        assert not fuzzy_equals(1.0, 1.0 + 1e-5)
        assert fuzzy_equals(1.0, 1.05, epsilon=0.1)

    def test_round_to_precision(self):
        assert round_to_precision(3.14159, 2) == pytest.approx(3.14)
        assert round_to_precision(1.25, 1) == pytest.approx(1.3)
        assert round_to_precision(-2.5, 0) == -2

    @pytest.mark.parametrize("value,expected", [(-3.2, -1), (0, 0), (0.0001, 1)])
    def test_sign(self, value, expected):
        assert sign(value) == expected
