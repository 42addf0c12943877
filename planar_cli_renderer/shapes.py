#
# PROJECT: planar-cli-renderer
# MODULE: planar_cli_renderer/shapes.py
# STATUS: Level 2 - Implementation
# TRUTH_LINK: DESIGN.md Shapes
# LOG_REF: 2026-10-18
#

import logging
import math

from .errors import InvalidEdgeShape
from .math_utils import Vec2
from .planar_object import PlanarObject
from .style import DEFAULT_STYLE
from .transform import coerce_point

logger = logging.getLogger(__name__)


def _loop_edges(n):
    return [[i, (i + 1) % n] for i in range(n)] if n > 1 else []


def polygon(points, style=DEFAULT_STYLE, closed=True) -> PlanarObject:
    """Object through the given (x, y) points, joined in order."""
    pts = [coerce_point(p) for p in points]
    vertices = [[p.x, p.y, 1.0] for p in pts]
    n = len(vertices)
    edges = _loop_edges(n) if closed else [[i, i + 1] for i in range(n - 1)]
    return PlanarObject(vertices, edges, style)


def regular_polygon(sides, radius=1.0, center=(0.0, 0.0), style=DEFAULT_STYLE,
                    start_angle=90.0) -> PlanarObject:
    """Regular polygon with its first vertex at ``start_angle`` degrees."""
    if sides < 3:
        raise ValueError(f"A polygon needs at least 3 sides, got {sides}")
    c = coerce_point(center)
    pts = []
    for i in range(sides):
        a = math.radians(start_angle + 360.0 * i / sides)
        pts.append((c.x + radius * math.cos(a), c.y + radius * math.sin(a)))
    return polygon(pts, style)


def unit_square(style=DEFAULT_STYLE) -> PlanarObject:
    return polygon([(0, 0), (1, 0), (1, 1), (0, 1)], style)


def axes(length=1.0, style=DEFAULT_STYLE) -> PlanarObject:
    """Origin plus the two unit axes, as vertices 0 (origin), 1 (x) and 2 (y)."""
    vertices = [[0.0, 0.0, 1.0], [length, 0.0, 1.0], [0.0, length, 1.0]]
    return PlanarObject(vertices, [[0, 1], [0, 2]], style)


def centroid(obj: PlanarObject) -> Vec2:
    """Mean of the object's current vertex positions."""
    rows = obj.elements()
    if not rows:
        return Vec2(0.0, 0.0)
    n = len(rows)
    return Vec2(sum(r[0] for r in rows) / n, sum(r[1] for r in rows) / n)


def _parse_obj(filename):
    vertices, edges, seen = [], [], set()

    def resolve(token):
        idx = int(token.split('/')[0])
        return idx - 1 if idx > 0 else len(vertices) + idx

    def add_edge(a, b):
        key = (min(a, b), max(a, b))
        if a != b and key not in seen:
            seen.add(key)
            edges.append([a, b])

    with open(filename, 'r') as f:
        for line in f:
            parts = line.split()
            if not parts:
                continue
            if parts[0] == 'v':
                x, y = float(parts[1]), float(parts[2])
                vertices.append([x, y, 1.0])
            elif parts[0] == 'l':
                idx = [resolve(t) for t in parts[1:]]
                for a, b in zip(idx, idx[1:]):
                    add_edge(a, b)
            elif parts[0] == 'f':
                idx = [resolve(t) for t in parts[1:]]
                for a, b in zip(idx, idx[1:] + idx[:1]):
                    add_edge(a, b)
    return vertices, edges


def from_obj(filename, style=DEFAULT_STYLE) -> PlanarObject:
    """
    Load a planar object from a Wavefront OBJ file.

    Reads ``v`` records (x and y; z is dropped), ``l`` polylines and ``f``
    faces (as closed outlines, shared edges kept once). A file that cannot
    be read or holds no vertices falls back to the unit square.
    """
    try:
        vertices, edges = _parse_obj(filename)
        if vertices:
            return PlanarObject(vertices, edges, style)
        logger.warning("No vertices in '%s', using the unit square", filename)
    except (OSError, ValueError, IndexError, InvalidEdgeShape) as e:
        logger.warning("Could not load '%s': %s", filename, e)
    return unit_square(style)
