#
# PROJECT: planar-cli-renderer
# MODULE: planar_cli_renderer/planar_object.py
# STATUS: Level 2 - Implementation
# TRUTH_LINK: DESIGN.md PlanarObject
# LOG_REF: 2026-10-18
#

from dataclasses import dataclass
from typing import Iterator, List, Tuple

from .errors import (InvalidVertexShape, InvalidEdgeShape, InvalidEdgeIndex,
                     InvalidTransformArgument)
from .math_utils import Matrix, Vec2
from .style import Style
from .transform import Transform


@dataclass(frozen=True)
class Segment:
    p1: Vec2
    p2: Vec2


@dataclass(frozen=True)
class SegmentSet:
    coords: List[Segment]
    width: float
    color: str


@dataclass(frozen=True)
class PointSet:
    coords: List[Vec2]
    width: float
    color: str


@dataclass(frozen=True)
class CaptionSet:
    coords: List[Vec2]
    texts: Tuple[str, ...]
    font: str
    color: str

    def labels(self) -> Iterator[Tuple[Vec2, str]]:
        """(point, text) pairs; stops at whichever list is shorter."""
        return zip(self.coords, self.texts)


def _edge_index(value, vertex_count: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        if isinstance(value, float) and value.is_integer():
            value = int(value)
        else:
            raise InvalidEdgeIndex(f"Edge index {value!r} is not an integer")
    if not 0 <= value < vertex_count:
        raise InvalidEdgeIndex(
            f"Edge index {value} is outside the {vertex_count} vertices")
    return value


class PlanarObject:
    """
    A 2D object: homogeneous vertex matrix (rows of x, y, 1), edges as
    pairs of row indices, and a Style.

    Edges and style never change after construction. The vertex matrix is
    replaced, never mutated, by ``apply_transformation``; callers that must
    keep the original transform a ``get_copy()`` instead.
    """
    __slots__ = ('_vertices', '_edges', '_style')

    def __init__(self, vertices, edges, style):
        try:
            mat = Matrix(vertices)
        except (TypeError, ValueError) as exc:
            raise InvalidVertexShape(f"Vertex matrix is not a numeric matrix: {exc}") from exc
        if mat.cols != 3:
            raise InvalidVertexShape(
                "Matrix of the two-dimensional object should have three columns")

        pairs = []
        for edge in (edges or ()):
            try:
                a, b = edge
            except (TypeError, ValueError) as exc:
                raise InvalidEdgeShape("Matrix of edges should have two columns") from exc
            pairs.append((_edge_index(a, mat.rows), _edge_index(b, mat.rows)))

        self._vertices = mat
        self._edges = tuple(pairs)
        self._style = Style.from_mapping(style)

    @property
    def edges(self) -> Tuple[Tuple[int, int], ...]:
        return self._edges

    @property
    def style(self) -> Style:
        return self._style

    @property
    def vertex_count(self) -> int:
        return self._vertices.rows

    def __repr__(self):
        return (f"PlanarObject(vertices={self._vertices.rows}, "
                f"edges={len(self._edges)})")

    def get_copy(self) -> 'PlanarObject':
        """Same edges and style (shared), current vertex values (copied)."""
        obj = PlanarObject.__new__(PlanarObject)
        obj._vertices = self._vertices.copy()
        obj._edges = self._edges
        obj._style = self._style
        return obj

    def elements(self) -> list:
        return self._vertices.elements()

    def apply_transformation(self, transform: Transform):
        if not isinstance(transform, Transform):
            raise InvalidTransformArgument(
                f"Expected a Transform, got {type(transform).__name__}")
        self._vertices = (self._vertices @ transform.matrix).normalize()

    def trace(self, stream=None):
        self._vertices.trace(stream)

    # ── Drawable primitives ─────────────────────────────────────────────
    def _point(self, index: int) -> Vec2:
        x, y, _w = self._vertices.m[index]
        return Vec2(x, y)

    def get_segments(self) -> SegmentSet:
        seg = self._style.segments
        coords = [Segment(self._point(i), self._point(j)) for i, j in self._edges]
        return SegmentSet(coords, seg.width, seg.color)

    def get_points(self) -> PointSet:
        pts = self._style.points
        coords = [self._point(i) for i in range(self._vertices.rows)]
        return PointSet(coords, pts.width, pts.color)

    def get_captions(self) -> CaptionSet:
        cap = self._style.captions
        return CaptionSet(self.get_points().coords, cap.texts, cap.font, cap.color)
