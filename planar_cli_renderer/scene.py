#
# PROJECT: planar-cli-renderer
# MODULE: planar_cli_renderer/scene.py
# STATUS: Level 2 - Implementation
# TRUTH_LINK: DESIGN.md Scene
# LOG_REF: 2026-10-18
#

import logging
import re

from .errors import InvalidDrawSurface
from .math_utils import to_number
from .planar_object import PlanarObject, SegmentSet, PointSet, CaptionSet
from .surface import DrawSurface
from .transform import Transform, coerce_point

logger = logging.getLogger(__name__)

# Captions sit just below and right of their vertex
CAPTION_OFFSET = (2, 2)

_LEADING_INT = re.compile(r'\s*([+-]?\d+)')


def _parse_index(idx):
    """parseInt-style: 2, "2", 2.7, "2.7" and "2px" all give 2; otherwise None."""
    if idx is None or isinstance(idx, bool):
        return None
    if isinstance(idx, int):
        return idx
    if isinstance(idx, str):
        m = _LEADING_INT.match(idx)
        if m:
            return int(m.group(1))
    v = to_number(idx)
    if v is None or v in (float('inf'), float('-inf')):
        return None
    return int(v)


class Scene:
    """
    Ordered collection of planar objects drawn onto one draw surface.

    World coordinates are y-up; the surface is y-down. The view transform
    that maps one to the other is built once at construction from
    ``center`` (surface pixel where the world origin lands) and ``scale``
    (pixels per world unit), and never changes afterwards.

    ``draw`` never mutates the stored objects: each pass transforms a
    fresh copy, so repeated draws render identically.
    """

    def __init__(self, surface, center=None, scale=1.0):
        if surface is None or not isinstance(surface, DrawSurface):
            raise InvalidDrawSurface("Problem with the draw surface")
        s = to_number(scale)
        if s is None or s == 0:
            raise ValueError(f"Scene scale must be a non-zero number, got {scale!r}")

        self._surface = surface
        self._center = coerce_point(center)
        self._scale = s
        self._objects = []
        self._view = self._build_view_transform()

    def _build_view_transform(self) -> Transform:
        # w = 1/scale, so after normalisation x' = x*scale + center.x
        return (Transform()
                .scale("y", -1)
                .scale("s", 1 / self._scale)
                .move("x", self._center.x)
                .move("y", self._center.y))

    @property
    def surface(self):
        return self._surface

    @property
    def center(self):
        return self._center

    @property
    def scale(self) -> float:
        return self._scale

    @property
    def view_transform(self) -> Transform:
        return self._view.copy()

    @property
    def objects(self) -> tuple:
        return tuple(self._objects)

    def __len__(self):
        return len(self._objects)

    def add_object(self, obj: PlanarObject):
        if not isinstance(obj, PlanarObject):
            raise TypeError(f"Scene objects must be PlanarObject, got {type(obj).__name__}")
        self._objects.append(obj)

    def clear_objects(self, idx=None):
        """Remove the object at idx, or every object when idx is not a number."""
        i = _parse_index(idx)
        if i is None:
            self._objects.clear()
            return
        if -len(self._objects) <= i < len(self._objects):
            del self._objects[i]
        else:
            logger.debug("clear_objects(%r): index out of range, nothing removed", idx)

    def draw(self):
        surface = self._surface
        surface.clear(surface.width, surface.height)
        for original in self._objects:
            obj = original.get_copy()
            obj.apply_transformation(self._view)

            self._draw_segments(obj.get_segments())
            self._draw_points(obj.get_points())
            self._draw_captions(obj.get_captions())
        logger.debug("Drew %d objects", len(self._objects))

    # ── Emission ────────────────────────────────────────────────────────
    def _draw_segments(self, segments: SegmentSet):
        surface = self._surface
        surface.begin_path()
        for seg in segments.coords:
            surface.move_to(seg.p1.x, seg.p1.y)
            surface.line_to(seg.p2.x, seg.p2.y)
        surface.stroke(segments.color, segments.width)

    def _draw_points(self, points: PointSet):
        radius = points.width / 2
        for p in points.coords:
            self._surface.fill_circle(p.x, p.y, radius, points.color)

    def _draw_captions(self, captions: CaptionSet):
        dx, dy = CAPTION_OFFSET
        for p, text in captions.labels():
            self._surface.fill_text(text, p.x + dx, p.y + dy,
                                    captions.font, captions.color, baseline="top")
