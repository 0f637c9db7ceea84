"""
Pytest configuration and shared fixtures for planekit tests.
"""

import sys
from pathlib import Path

import pytest
import yaml

# Repository root on the path so `planekit` and `run_report` import without install
ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(ROOT))

from planekit.shapes.point import Point
from planekit.shapes.polygon import Polygon


# ============== Shape Fixtures ==============

@pytest.fixture
def unit_square_points():
    """Corners of the unit square, counter-clockwise."""
    return [Point(0, 0), Point(1, 0), Point(1, 1), Point(0, 1)]


@pytest.fixture
def square() -> Polygon:
    """Closed 2x2 square with its lower-left corner at the origin."""
    return Polygon.rectangle(0, 0, 2, 2)


@pytest.fixture
def concave_polygon() -> Polygon:
    """Open 'arrowhead' with a reflex vertex at (2, 1)."""
    return Polygon([(0, 0), (4, 0), (4, 4), (2, 1), (0, 4)])


@pytest.fixture
def l_shape() -> Polygon:
    """Open L-shaped hexagon, area 3."""
    return Polygon([(0, 0), (2, 0), (2, 1), (1, 1), (1, 2), (0, 2)])


# ============== Config Fixtures ==============

@pytest.fixture
def demo_scene() -> dict:
    with open(ROOT / "configs" / "demo_scene.yaml", "r", encoding="utf-8") as f:
        return yaml.safe_load(f)


@pytest.fixture
def report_config() -> dict:
    with open(ROOT / "configs" / "report_config.yaml", "r", encoding="utf-8") as f:
        return yaml.safe_load(f)
