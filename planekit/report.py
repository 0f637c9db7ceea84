"""Scene measurement report.

Every value in the returned dict is JSON-serializable so the CLI can
dump it as is.
"""

from __future__ import annotations

from itertools import combinations
from typing import Any, Dict, List, Tuple

from .scalar import DEFAULT_TOLERANCE
from .shapes.base import CoordinatePair
from .shapes.circle import Circle
from .shapes.line import Line
from .shapes.point import Point
from .shapes.polygon import Polygon
from .shapes.rectangle import Rectangle


def _xy(p: CoordinatePair) -> List[float]:
    return [float(p.x), float(p.y)]


def _bbox(r: Rectangle) -> List[float]:
    return [float(r.x), float(r.y), float(r.width), float(r.height)]


def as_polygon(shape: Any, circle_segments: int = 32) -> Polygon:
    """Polygon stand-in used for pairwise checks."""
    if isinstance(shape, Polygon):
        return shape.clone()
    if isinstance(shape, Rectangle):
        return Polygon.from_rectangle(shape)
    if isinstance(shape, Circle):
        return Polygon.from_circle(shape, circle_segments)
    if isinstance(shape, Line):
        return Polygon([shape.start, shape.end])
    if isinstance(shape, CoordinatePair):
        return Polygon([shape])
    raise TypeError(f"unsupported shape: {type(shape).__name__}")


def describe_shape(shape: Any, simplify_tolerance: float = DEFAULT_TOLERANCE) -> Dict[str, Any]:
    if isinstance(shape, Polygon):
        return {
            "type": "polygon",
            "bbox": _bbox(shape.bounding_box()),
            "area": shape.area(),
            "perimeter": shape.perimeter(),
            "centroid": _xy(shape.centroid()),
            "closed": shape.is_closed(),
            "convex": shape.is_convex(),
            "vertex_count": shape.vertex_count,
            "simplified_vertex_count": shape.simplified(simplify_tolerance).vertex_count,
        }
    if isinstance(shape, Rectangle):
        return {
            "type": "rectangle",
            "bbox": _bbox(shape),
            "area": shape.area(),
            "perimeter": shape.perimeter(),
            "centroid": _xy(shape.center()),
        }
    if isinstance(shape, Circle):
        return {
            "type": "circle",
            "bbox": _bbox(shape.bounding_box()),
            "area": shape.area(),
            "perimeter": shape.circumference(),
            "centroid": _xy(shape.center),
        }
    if isinstance(shape, Line):
        return {
            "type": "line",
            "bbox": _bbox(shape.bounding_box()),
            "area": 0.0,
            "perimeter": shape.length(),
            "centroid": _xy(shape.midpoint()),
        }
    if isinstance(shape, CoordinatePair):
        return {
            "type": "point",
            "bbox": [float(shape.x), float(shape.y), 0.0, 0.0],
            "area": 0.0,
            "perimeter": 0.0,
            "centroid": _xy(shape),
        }
    raise TypeError(f"unsupported shape: {type(shape).__name__}")


def shape_contains(shape: Any, point: CoordinatePair, tolerance: float = DEFAULT_TOLERANCE) -> bool:
    """Boundary-inclusive containment for any shape type."""
    if isinstance(shape, Polygon):
        return shape.contains(point) or shape.contains_on_edge(point, tolerance)
    if isinstance(shape, (Rectangle, Circle)):
        return shape.contains(point)
    if isinstance(shape, Line):
        return shape.contains_point(point, tolerance)
    if isinstance(shape, CoordinatePair):
        return shape.equals(point, tolerance)
    raise TypeError(f"unsupported shape: {type(shape).__name__}")


def scene_vertices(shapes: Dict[str, Any]) -> List[Point]:
    """Every explicit vertex in the scene; circles are left out."""
    out: List[Point] = []
    for shape in shapes.values():
        if isinstance(shape, Circle):
            continue
        if isinstance(shape, Rectangle):
            out.extend([shape.top_left(), shape.top_right(), shape.bottom_right(), shape.bottom_left()])
        else:
            out.extend(as_polygon(shape).vertices)
    return out


def build_report(shapes: Dict[str, Any], probes: List[Tuple[str, Point]], cfg: Dict[str, Any]) -> Dict[str, Any]:
    segments = int(cfg.get("circle_segments", 32))
    simplify_tol = float(cfg.get("simplify_tolerance", DEFAULT_TOLERANCE))
    edge_tol = float(cfg.get("edge_tolerance", DEFAULT_TOLERANCE))

    report: Dict[str, Any] = {
        "shapes": {sid: describe_shape(s, simplify_tol) for sid, s in shapes.items()},
    }

    if bool(cfg.get("pairwise", True)):
        polys = {sid: as_polygon(s, segments) for sid, s in shapes.items()}
        report["intersections"] = [
            [a, b] for a, b in combinations(polys, 2) if polys[a].intersects(polys[b])
        ]

    if bool(cfg.get("hull", True)):
        hull = Polygon.convex_hull(scene_vertices(shapes))
        report["hull"] = [_xy(v) for v in hull.vertices]

    report["probes"] = {
        pid: [sid for sid, s in shapes.items() if shape_contains(s, p, edge_tol)]
        for pid, p in probes
    }
    return report
