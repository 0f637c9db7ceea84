"""Build named shapes from a YAML scene mapping.

Scene layout:

    shapes:
      - {id: lot, type: rectangle, x: 0, y: 0, width: 40, height: 20}
      - {id: pond, type: circle, center: [10, 5], radius: 3}
    probes:
      - {id: gate, at: [20, 0]}

See configs/demo_scene.yaml for every supported type.
"""

from __future__ import annotations

import math
from typing import Any, Callable, Dict, List, Tuple

from .errors import SceneError
from .shapes.circle import Circle
from .shapes.line import Line
from .shapes.point import Point
from .shapes.polygon import Polygon
from .shapes.rectangle import Rectangle


def _pt(entry: Dict[str, Any], key: str) -> Point:
    if key not in entry:
        raise SceneError(f"shape {entry.get('id')!r}: missing '{key}'")
    return _coerce(entry, key, entry[key])


def _coerce(entry: Dict[str, Any], key: str, value: Any) -> Point:
    try:
        return Point.of(value)
    except (TypeError, ValueError) as e:
        raise SceneError(f"shape {entry.get('id')!r}: '{key}' is not an [x, y] pair: {value!r}") from e


def _pts(entry: Dict[str, Any], key: str, count: int = 0) -> List[Point]:
    raw = entry.get(key)
    if not isinstance(raw, (list, tuple)):
        raise SceneError(f"shape {entry.get('id')!r}: '{key}' must be a list of [x, y] pairs")
    if count and len(raw) != count:
        raise SceneError(f"shape {entry.get('id')!r}: '{key}' needs exactly {count} points, got {len(raw)}")
    return [_coerce(entry, key, p) for p in raw]


def _num(entry: Dict[str, Any], key: str) -> float:
    if key not in entry:
        raise SceneError(f"shape {entry.get('id')!r}: missing '{key}'")
    try:
        return float(entry[key])
    except (TypeError, ValueError) as e:
        raise SceneError(f"shape {entry.get('id')!r}: '{key}' is not a number: {entry[key]!r}") from e


def _build_point(entry: Dict[str, Any]) -> Point:
    return _pt(entry, "at")


def _build_rectangle(entry: Dict[str, Any]) -> Rectangle:
    if "corners" in entry:
        a, b = _pts(entry, "corners", 2)
        return Rectangle.from_points(a, b)
    rect = Rectangle(_num(entry, "x"), _num(entry, "y"), _num(entry, "width"), _num(entry, "height"))
    return rect.normalize()


def _build_circle(entry: Dict[str, Any]) -> Circle:
    if "through" in entry:
        circle = Circle.from_three_points(*_pts(entry, "through", 3))
        if circle is None:
            raise SceneError(f"shape {entry.get('id')!r}: 'through' points are collinear")
        return circle
    if "diameter" in entry:
        return Circle.from_diameter(*_pts(entry, "diameter", 2))
    return Circle(_pt(entry, "center"), _num(entry, "radius"))


def _build_line(entry: Dict[str, Any]) -> Line:
    if "angle_deg" in entry:
        return Line.from_angle(_pt(entry, "start"), math.radians(_num(entry, "angle_deg")), _num(entry, "length"))
    return Line(_pt(entry, "start"), _pt(entry, "end"))


def _build_polygon(entry: Dict[str, Any]) -> Polygon:
    poly = Polygon(_pts(entry, "points"))
    if bool(entry.get("closed", False)):
        poly.close()
    return poly


def _build_regular(entry: Dict[str, Any]) -> Polygon:
    return Polygon.regular(_pt(entry, "center"), _num(entry, "radius"), int(_num(entry, "sides")))


def _build_hull(entry: Dict[str, Any]) -> Polygon:
    return Polygon.convex_hull(_pts(entry, "points"))


BUILDERS: Dict[str, Callable[[Dict[str, Any]], Any]] = {
    "point": _build_point,
    "rectangle": _build_rectangle,
    "circle": _build_circle,
    "line": _build_line,
    "polygon": _build_polygon,
    "regular": _build_regular,
    "hull": _build_hull,
}


def build_scene(scene: Dict[str, Any]) -> Dict[str, Any]:
    """Return {id: shape} in file order."""
    shapes: Dict[str, Any] = {}
    for entry in scene.get("shapes", []) or []:
        if not isinstance(entry, dict):
            raise SceneError(f"shape entry must be a mapping, got {entry!r}")
        sid = entry.get("id")
        if sid is None:
            raise SceneError(f"shape entry without 'id': {entry!r}")
        sid = str(sid)
        if sid in shapes:
            raise SceneError(f"duplicate shape id {sid!r}")
        kind = str(entry.get("type", ""))
        builder = BUILDERS.get(kind)
        if builder is None:
            raise SceneError(f"shape {sid!r}: unknown type {kind!r} (expected one of {sorted(BUILDERS)})")
        shapes[sid] = builder(entry)
    return shapes


def build_probes(scene: Dict[str, Any]) -> List[Tuple[str, Point]]:
    probes = []
    for entry in scene.get("probes", []) or []:
        if not isinstance(entry, dict) or "id" not in entry:
            raise SceneError(f"probe entry must be a mapping with an 'id': {entry!r}")
        probes.append((str(entry["id"]), _pt(entry, "at")))
    return probes
