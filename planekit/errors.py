"""Typed errors for the geometry kernel.

Degenerate inputs (collinear circumcircle points, parallel segments,
disjoint rectangles) are not errors; those return None or False.
"""

from __future__ import annotations


class GeometryError(Exception):
    """Base error of the package."""


class DivisionByZeroError(GeometryError, ZeroDivisionError):
    """Coordinate pair divided by exactly zero."""


class InvalidConstructionError(GeometryError, ValueError):
    """Shape factory asked for fewer than three sides/segments."""


class SceneError(GeometryError, ValueError):
    """Malformed scene mapping passed to the builder."""
