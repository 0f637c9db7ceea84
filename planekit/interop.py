"""Conversions to and from numpy arrays and shapely geometries.

Arrays are (N, 2) float64, one row per vertex. Shapely is only used at
this boundary; the shape classes never depend on it.
"""

from __future__ import annotations

from typing import Any, Dict, List, Sequence, Union

import numpy as np
from shapely.geometry import LineString, box, mapping
from shapely.geometry import Point as ShapelyPoint
from shapely.geometry import Polygon as ShapelyPolygon
from shapely.geometry.base import BaseGeometry

from .shapes.base import CoordinatePair
from .shapes.circle import Circle
from .shapes.line import Line
from .shapes.point import Point
from .shapes.polygon import Polygon
from .shapes.rectangle import Rectangle

Shape = Union[CoordinatePair, Rectangle, Circle, Line, Polygon]


def points_to_array(points: Sequence[CoordinatePair]) -> np.ndarray:
    if not points:
        return np.zeros((0, 2), dtype=float)
    return np.array([[p.x, p.y] for p in points], dtype=float)


def points_from_array(arr: Any) -> List[Point]:
    arr = np.asarray(arr, dtype=float)
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError(f"expected an Nx2 array, got shape {arr.shape}")
    return [Point(float(x), float(y)) for x, y in arr]


def polygon_to_array(polygon: Polygon) -> np.ndarray:
    return points_to_array(polygon.vertices)


def polygon_from_array(arr: Any) -> Polygon:
    return Polygon(points_from_array(arr))


def to_shapely(shape: Shape, circle_segments: int = 32) -> BaseGeometry:
    """Shapely geometry for a shape. Circles become their polygon approximation."""
    if isinstance(shape, CoordinatePair):
        return ShapelyPoint(shape.x, shape.y)
    if isinstance(shape, Line):
        return LineString([shape.start.as_tuple(), shape.end.as_tuple()])
    if isinstance(shape, Rectangle):
        r = shape.normalized()
        return box(r.left, r.top, r.right, r.bottom)
    if isinstance(shape, Circle):
        return to_shapely(Polygon.from_circle(shape, circle_segments))
    if isinstance(shape, Polygon):
        coords = [v.as_tuple() for v in shape.vertices]
        if shape.is_closed():
            coords = coords[:-1]
        if len(coords) >= 3:
            return ShapelyPolygon(coords)
        if len(coords) == 2:
            return LineString(coords)
        if len(coords) == 1:
            return ShapelyPoint(coords[0])
        return ShapelyPolygon()
    raise TypeError(f"unsupported shape: {type(shape).__name__}")


def from_shapely(geom: BaseGeometry) -> Union[Point, Line, Polygon]:
    if geom.geom_type == "Point":
        return Point(float(geom.x), float(geom.y))
    if geom.geom_type == "LineString":
        coords = list(geom.coords)
        if len(coords) == 2:
            return Line(coords[0][:2], coords[1][:2])
        return Polygon(c[:2] for c in coords)
    if geom.geom_type == "Polygon":
        # exterior ring repeats its first coordinate, so the result is closed
        return Polygon(c[:2] for c in geom.exterior.coords)
    raise TypeError(f"unsupported geometry type: {geom.geom_type}")


def to_geojson(shape: Shape, circle_segments: int = 32) -> Dict[str, Any]:
    return dict(mapping(to_shapely(shape, circle_segments)))
