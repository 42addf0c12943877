#
# PROJECT: planar-cli-renderer
# MODULE: planar_cli_renderer/transform.py
# STATUS: Level 2 - Implementation
# TRUTH_LINK: DESIGN.md Transform
# LOG_REF: 2026-10-18
#

import logging
from collections.abc import Mapping

from .math_utils import Matrix, Vec2, to_number, degree_to_radian

logger = logging.getLogger(__name__)


def coerce_point(point) -> Vec2:
    """
    Read an (x, y) pair from a Vec2, a 2-sequence, a mapping with x/y keys
    or an object with x/y attributes. Missing or non-numeric coordinates
    become 0.
    """
    if point is None:
        return Vec2(0.0, 0.0)
    if isinstance(point, Vec2):
        return point
    if isinstance(point, Mapping):
        x, y = point.get('x'), point.get('y')
    elif hasattr(point, 'x') or hasattr(point, 'y'):
        x, y = getattr(point, 'x', None), getattr(point, 'y', None)
    elif isinstance(point, (list, tuple)) and len(point) >= 2:
        x, y = point[0], point[1]
    else:
        x = y = None
    return Vec2(to_number(x) or 0.0, to_number(y) or 0.0)


class Transform:
    """
    Accumulated 2D affine transformation.

    Holds one 3x3 homogeneous matrix, identity by default. Every
    composition call right-multiplies it by an elementary matrix, so the
    steps apply to points in the order they were called:

        t = Transform().move("x", 5).scale("x", 2)   # (1, 0) -> (12, 0)

    A step with an unknown axis or a non-numeric value contributes the
    identity matrix instead of failing, so one bad step never breaks a
    chain. A Transform is owned by whoever builds it; ``then`` and
    ``copy`` produce independent values.
    """
    __slots__ = ('_matrix',)

    def __init__(self, elements=None):
        mat = Matrix(elements) if elements is not None else Matrix.identity()
        if mat.rows != 3 or mat.cols != 3:
            raise ValueError("Transform matrix must be 3x3")
        self._matrix = mat

    @property
    def matrix(self) -> Matrix:
        return self._matrix.copy()

    def elements(self) -> list:
        return self._matrix.elements()

    def copy(self) -> 'Transform':
        return Transform(self._matrix)

    def then(self, other: 'Transform') -> 'Transform':
        """New transform applying self first, then other."""
        if not isinstance(other, Transform):
            raise TypeError("Transform.then expects a Transform")
        res = self.copy()
        res._compose(other._matrix)
        return res

    def __repr__(self):
        return f"Transform({self._matrix.m!r})"

    def trace(self, stream=None):
        self._matrix.trace(stream)

    def _compose(self, elementary: Matrix):
        self._matrix = self._matrix @ elementary

    @staticmethod
    def _step_args(op, axis, value, axes):
        v = to_number(value)
        name = axis.lower() if isinstance(axis, str) else None
        if v is None or name not in axes:
            logger.debug("%s(%r, %r) contributes identity", op, axis, value)
            return None, None
        return name, v

    # ── Composition ─────────────────────────────────────────────────────
    def shear(self, axis, v) -> 'Transform':
        name, v = self._step_args("shear", axis, v, ('x', 'y'))
        if name == 'x':
            self._compose(Matrix.shearing(v, 0.0))
        elif name == 'y':
            self._compose(Matrix.shearing(0.0, v))
        else:
            self._compose(Matrix.identity())
        return self

    def move(self, axis, v) -> 'Transform':
        name, v = self._step_args("move", axis, v, ('x', 'y'))
        if name == 'x':
            self._compose(Matrix.translation(v, 0.0))
        elif name == 'y':
            self._compose(Matrix.translation(0.0, v))
        else:
            self._compose(Matrix.identity())
        return self

    def scale(self, axis, v) -> 'Transform':
        """Scale along x, y, or "s" for the homogeneous (global) component."""
        name, v = self._step_args("scale", axis, v, ('x', 'y', 's'))
        if name == 'x':
            self._compose(Matrix.scaling(v, 1.0))
        elif name == 'y':
            self._compose(Matrix.scaling(1.0, v))
        elif name == 's':
            self._compose(Matrix.scaling(1.0, 1.0, v))
        else:
            self._compose(Matrix.identity())
        return self

    def rotate(self, angle) -> 'Transform':
        """Rotate about the origin by angle degrees (counter-clockwise for y-up)."""
        a = to_number(angle)
        if a is None:
            logger.debug("rotate(%r) contributes identity", angle)
            self._compose(Matrix.identity())
        else:
            self._compose(Matrix.rotation(degree_to_radian(a)))
        return self

    def rotate_free(self, point, angle) -> 'Transform':
        """
        Rotate about an arbitrary point: move the point to the origin,
        rotate, move it back. Unless both coordinates are non-zero numbers
        the rotation is about the origin. A non-numeric angle rotates by
        0 degrees.
        """
        p = coerce_point(point)
        if not (p.x and p.y):
            p = Vec2(0.0, 0.0)
        a = to_number(angle)
        if a is None:
            a = 0.0

        self.move("x", -p.x)
        self.move("y", -p.y)
        self.rotate(a)
        self.move("x", p.x)
        self.move("y", p.y)
        return self
