"""
Tests for the scene report and the run_report CLI.
"""

import json
import math
import sys

import pytest
import yaml

import run_report
from planekit.report import as_polygon, build_report, describe_shape, scene_vertices, shape_contains
from planekit.shapes.circle import Circle
from planekit.shapes.line import Line
from planekit.shapes.point import Point
from planekit.shapes.polygon import Polygon
from planekit.shapes.rectangle import Rectangle


@pytest.fixture
def small_scene():
    shapes = {
        "a": Rectangle(0, 0, 4, 4),
        "b": Rectangle(2, 2, 4, 4),
        "c": Circle(Point(10, 10), 1),
        "d": Line(Point(-1, 1), Point(5, 1)),
    }
    probes = [("mid", Point(3, 3)), ("edge", Point(0, 1)), ("far", Point(50, 50))]
    return shapes, probes


class TestBuildReport:
    """Pairwise intersections, hull and probes."""

    def test_intersections(self, small_scene):
        report = build_report(*small_scene, {"edge_tolerance": 1e-9})
        assert report["intersections"] == [["a", "b"], ["a", "d"]]

    def test_probes(self, small_scene):
        report = build_report(*small_scene, {"edge_tolerance": 1e-9})
        assert report["probes"] == {"mid": ["a", "b"], "edge": ["a", "d"], "far": []}

    def test_hull(self, small_scene):
        report = build_report(*small_scene, {})
        assert report["hull"] == [
            [-1.0, 1.0], [0.0, 0.0], [4.0, 0.0], [6.0, 2.0],
            [6.0, 6.0], [2.0, 6.0], [0.0, 4.0],
        ]

    def test_sections_can_be_disabled(self, small_scene):
        report = build_report(*small_scene, {"pairwise": False, "hull": False})
        assert "intersections" not in report
        assert "hull" not in report
        assert set(report) == {"shapes", "probes"}

    def test_json_serializable(self, small_scene):
        report = build_report(*small_scene, {})
        assert json.loads(json.dumps(report))["shapes"]["c"]["type"] == "circle"


class TestDescribeShape:
    """Per-shape measurements."""

    def test_rectangle(self):
        desc = describe_shape(Rectangle(0, 0, 4, 2))
        assert desc == {
            "type": "rectangle",
            "bbox": [0.0, 0.0, 4.0, 2.0],
            "area": 8,
            "perimeter": 12,
            "centroid": [2.0, 1.0],
        }

    def test_circle(self):
        desc = describe_shape(Circle(Point(10, 10), 1))
        assert desc["bbox"] == [9.0, 9.0, 2.0, 2.0]
        assert desc["area"] == pytest.approx(math.pi)
        assert desc["perimeter"] == pytest.approx(2 * math.pi)

    def test_line(self):
        desc = describe_shape(Line(Point(-1, 1), Point(5, 1)))
        assert desc["perimeter"] == pytest.approx(6)
        assert desc["centroid"] == [2.0, 1.0]
        assert desc["area"] == 0.0

    def test_point(self):
        assert describe_shape(Point(3, 4))["bbox"] == [3.0, 4.0, 0.0, 0.0]

    def test_polygon(self, square):
        desc = describe_shape(square)
        assert desc["closed"] is True
        assert desc["convex"] is True
        assert desc["vertex_count"] == 5
        assert desc["area"] == pytest.approx(4)
        assert desc["centroid"] == [1.0, 1.0]

    def test_simplified_count(self):
        poly = Polygon([(0, 0), (1, 0), (2, 0), (2, 1)])
        assert describe_shape(poly, 0.01)["simplified_vertex_count"] == 3

    def test_unsupported(self):
        with pytest.raises(TypeError):
            describe_shape(42)


class TestHelpers:
    """Polygon stand-ins and containment dispatch."""

    def test_as_polygon(self):
        assert as_polygon(Line(Point(0, 0), Point(1, 1))).vertex_count == 2
        assert as_polygon(Point(1, 1)).vertex_count == 1
        assert as_polygon(Circle(Point(0, 0), 1), 12).vertex_count == 13
        assert as_polygon(Rectangle(0, 0, 1, 1)).is_closed()

    def test_as_polygon_copies(self, square):
        as_polygon(square).translate(5, 5)
        assert square.get_vertex(0) == Point(0, 0)

    def test_shape_contains_boundary(self, square):
        assert shape_contains(square, Point(2, 1), 1e-9)
        assert shape_contains(Point(1, 1), Point(1, 1))
        assert not shape_contains(Line(Point(0, 0), Point(2, 0)), Point(1, 1))

    def test_scene_vertices_skip_circles(self, small_scene):
        shapes, _ = small_scene
        assert len(scene_vertices(shapes)) == 10


class TestCli:
    """run_report end to end."""

    def test_demo_scene(self, tmp_path, monkeypatch, capsys, demo_scene):
        monkeypatch.setattr(sys, "argv", ["run_report.py", "--out", str(tmp_path)])
        assert run_report.main() == 0

        report = json.loads((tmp_path / "report.json").read_text(encoding="utf-8"))
        assert list(report["shapes"]) == [entry["id"] for entry in demo_scene["shapes"]]
        assert report["probes"]["doorstep"] == ["lot", "house"]
        assert report["probes"]["pond_center"] == ["lot", "pond"]
        assert report["probes"]["outside"] == []
        assert "[report] Loaded 11 shapes, 3 probes" in capsys.readouterr().out

    def test_custom_files(self, tmp_path, monkeypatch):
        scene = tmp_path / "scene.yaml"
        scene.write_text(yaml.safe_dump({"shapes": [{"id": "p", "type": "point", "at": [1, 2]}]}))
        config = tmp_path / "config.yaml"
        config.write_text(yaml.safe_dump({"report": {"pairwise": False}}))
        out = tmp_path / "out"
        monkeypatch.setattr(sys, "argv", [
            "run_report.py", "--scene", str(scene), "--config", str(config), "--out", str(out),
        ])
        assert run_report.main() == 0

        report = json.loads((out / "report.json").read_text(encoding="utf-8"))
        assert "intersections" not in report
        assert report["hull"] == [[1.0, 2.0]]
        assert report["probes"] == {}
