"""
Shared fixtures for the planar renderer tests.

Provides a recording draw surface, a complete style mapping and a few
ready-made objects.
"""
import sys
import os
import pytest

# Ensure the package is importable without installation
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from planar_cli_renderer.math_utils import Matrix
from planar_cli_renderer.planar_object import PlanarObject


class RecordingSurface:
    """Draw surface that remembers every call as a tuple."""

    def __init__(self, width=200, height=100):
        self.width = width
        self.height = height
        self.calls = []

    def kinds(self):
        return [c[0] for c in self.calls]

    def of_kind(self, kind):
        return [c for c in self.calls if c[0] == kind]

    def clear(self, width, height):
        self.calls.append(("clear", width, height))

    def begin_path(self):
        self.calls.append(("begin_path",))

    def move_to(self, x, y):
        self.calls.append(("move_to", x, y))

    def line_to(self, x, y):
        self.calls.append(("line_to", x, y))

    def stroke(self, color, width):
        self.calls.append(("stroke", color, width))

    def fill_circle(self, x, y, radius, color):
        self.calls.append(("fill_circle", x, y, radius, color))

    def fill_text(self, text, x, y, font, color, baseline="top"):
        self.calls.append(("fill_text", text, x, y, font, color, baseline))


def transform_point(transform, x, y):
    """Apply a Transform to a single point, normalised."""
    row = (Matrix([[x, y, 1]]) @ transform.matrix).normalize().row(0)
    return row[0], row[1]


@pytest.fixture
def surface():
    return RecordingSurface()


@pytest.fixture
def style_settings():
    return {
        "segments": {"width": 2, "color": "#00FF00"},
        "points": {"width": 4, "color": "red"},
        "captions": {"font": "10px serif", "color": "white", "texts": ["A", "B"]},
    }


@pytest.fixture
def triangle(style_settings):
    vertices = [[0, 0, 1], [4, 0, 1], [0, 3, 1]]
    edges = [[0, 1], [1, 2], [2, 0]]
    return PlanarObject(vertices, edges, style_settings)


@pytest.fixture
def segment_object(style_settings):
    return PlanarObject([[1, 1, 1], [2, 2, 1]], [[0, 1]], style_settings)
