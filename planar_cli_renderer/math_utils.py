#
# PROJECT: planar-cli-renderer
# MODULE: planar_cli_renderer/math_utils.py
# STATUS: Level 2 - Implementation
# TRUTH_LINK: DESIGN.md Matrix primitive
# LOG_REF: 2026-10-18
#

import math
import sys


def to_number(value):
    """
    Lenient numeric conversion.
    Accepts ints, floats and numeric strings. Returns None for anything
    else, for booleans and for NaN.
    """
    if value is None or isinstance(value, bool):
        return None
    try:
        v = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(v):
        return None
    return v


def degree_to_radian(angle: float) -> float:
    return angle * math.pi / 180.0


class Vec2:
    """Immutable 2-component vector."""
    __slots__ = ('x', 'y')

    def __init__(self, x: float, y: float):
        object.__setattr__(self, 'x', float(x))
        object.__setattr__(self, 'y', float(y))

    def __setattr__(self, name, value):
        raise AttributeError("Vec2 is immutable")

    def __repr__(self):
        return f"Vec2({self.x:.2f}, {self.y:.2f})"

    def __iter__(self):
        yield self.x
        yield self.y

    def __len__(self):
        return 2

    def __getitem__(self, index):
        if index == 0: return self.x
        if index == 1: return self.y
        raise IndexError("Vec2 index out of range")

    def __eq__(self, other):
        if isinstance(other, Vec2):
            return self.x == other.x and self.y == other.y
        return NotImplemented

    def __hash__(self):
        return hash((self.x, self.y))

    def __add__(self, other):
        if isinstance(other, Vec2):
            return Vec2(self.x + other.x, self.y + other.y)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Vec2):
            return Vec2(self.x - other.x, self.y - other.y)
        return NotImplemented

    def __mul__(self, scalar):
        return Vec2(self.x * scalar, self.y * scalar)

    def __truediv__(self, scalar):
        return Vec2(self.x / scalar, self.y / scalar)


class Matrix:
    """
    Dense row-major matrix of floats.

    Used for both the N x 3 homogeneous vertex matrices and the 3 x 3
    transformation matrices. Points are row vectors, so a point is
    transformed as ``p' = p @ M`` and translations live in the last row.
    """
    __slots__ = ('m',)

    def __init__(self, data=None):
        if isinstance(data, Matrix):
            data = data.m
        rows = [[float(v) for v in row] for row in (data or [])]
        if rows and any(len(r) != len(rows[0]) for r in rows):
            raise ValueError("Matrix rows must all have the same length")
        self.m = rows

    @property
    def rows(self) -> int:
        return len(self.m)

    @property
    def cols(self) -> int:
        return len(self.m[0]) if self.m else 0

    def row(self, index: int) -> tuple:
        return tuple(self.m[index])

    def elements(self) -> list:
        return [list(r) for r in self.m]

    def copy(self) -> 'Matrix':
        return Matrix(self.m)

    def __repr__(self):
        return f"Matrix({self.m!r})"

    def __eq__(self, other):
        if isinstance(other, Matrix):
            return self.m == other.m
        return NotImplemented

    # ── Elementary 3x3 builders ─────────────────────────────────────────
    @classmethod
    def identity(cls, n: int = 3) -> 'Matrix':
        return cls([[1.0 if r == c else 0.0 for c in range(n)] for r in range(n)])

    @classmethod
    def translation(cls, dx: float, dy: float) -> 'Matrix':
        mat = cls.identity()
        mat.m[2][0] = dx
        mat.m[2][1] = dy
        return mat

    @classmethod
    def scaling(cls, sx: float, sy: float, sw: float = 1.0) -> 'Matrix':
        mat = cls.identity()
        mat.m[0][0] = sx
        mat.m[1][1] = sy
        mat.m[2][2] = sw
        return mat

    @classmethod
    def shearing(cls, shx: float, shy: float) -> 'Matrix':
        # shx feeds y into x' (row 1), shy feeds x into y' (row 0)
        mat = cls.identity()
        mat.m[1][0] = shx
        mat.m[0][1] = shy
        return mat

    @classmethod
    def rotation(cls, rad: float) -> 'Matrix':
        mat = cls.identity()
        c = math.cos(rad)
        s = math.sin(rad)
        mat.m[0][0] = c
        mat.m[0][1] = s
        mat.m[1][0] = -s
        mat.m[1][1] = c
        return mat

    # ── Arithmetic ──────────────────────────────────────────────────────
    def multiply(self, other: 'Matrix') -> 'Matrix':
        if self.cols != other.rows:
            raise ValueError(
                f"Cannot multiply {self.rows}x{self.cols} by {other.rows}x{other.cols}")
        res = Matrix()
        inner = range(self.cols)
        res.m = [[sum(a[k] * other.m[k][c] for k in inner) for c in range(other.cols)]
                 for a in self.m]
        return res

    def __matmul__(self, other):
        if isinstance(other, Matrix):
            return self.multiply(other)
        return NotImplemented

    def normalize(self) -> 'Matrix':
        """Divide each row by its last element unless that element is 1 or 0."""
        res = Matrix()
        for r in self.m:
            w = r[-1] if r else 1.0
            if w != 1.0 and w != 0.0:
                res.m.append([v / w for v in r])
            else:
                res.m.append(list(r))
        return res

    # ── Diagnostics ─────────────────────────────────────────────────────
    def format(self, precision: int = 3) -> str:
        """Elements laid out in right-aligned columns."""
        cells = [[f"{v:.{precision}f}" for v in r] for r in self.m]
        if not cells:
            return "[]"
        widths = [max(len(row[c]) for row in cells) for c in range(self.cols)]
        return "\n".join(
            "[ " + "  ".join(v.rjust(widths[c]) for c, v in enumerate(row)) + " ]"
            for row in cells)

    def trace(self, stream=None):
        print(self.format(), file=stream or sys.stdout)
