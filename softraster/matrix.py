"""Row-major 4x4 transformation matrices."""

from __future__ import annotations

import math
from itertools import product
from typing import Iterable

from softraster.vec4 import Vec4

_IDENTITY = tuple(1.0 if r == c else 0.0 for r, c in product(range(4), repeat=2))


class Matrix:
    """A 4x4 matrix, identity by default, indexed as ``m[row, col]``."""

    __slots__ = ("_a",)

    def __init__(self, values: Iterable[float] | None = None) -> None:
        if values is None:
            self._a = list(_IDENTITY)
            return
        a = [float(v) for v in values]
        if len(a) != 16:
            raise ValueError(f"a matrix needs 16 values, got {len(a)}")
        self._a = a

    @staticmethod
    def _offset(key: tuple[int, int]) -> int:
        row, col = key
        if not (0 <= row < 4 and 0 <= col < 4):
            raise IndexError(f"matrix index out of range: {key!r}")
        return row * 4 + col

    def __getitem__(self, key: tuple[int, int]) -> float:
        return self._a[self._offset(key)]

    def __setitem__(self, key: tuple[int, int], value: float) -> None:
        self._a[self._offset(key)] = float(value)

    def _rows(self) -> list[list[float]]:
        return [self._a[r * 4:(r + 1) * 4] for r in range(4)]

    def __mul__(self, other: Matrix | Vec4) -> Matrix | Vec4:
        if isinstance(other, Matrix):
            cols = [other._a[c::4] for c in range(4)]
            return Matrix(
                sum(x * y for x, y in zip(row, col))
                for row in self._rows()
                for col in cols
            )
        if isinstance(other, Vec4):
            return Vec4(*(sum(x * y for x, y in zip(row, other)) for row in self._rows()))
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._a == other._a

    def __repr__(self) -> str:
        return f"Matrix({self._a!r})"

    def __str__(self) -> str:
        return "\n".join(
            "".join(f"{v:g}\t" for v in row) for row in self._rows()
        )

    @classmethod
    def identity(cls) -> Matrix:
        return cls()

    @classmethod
    def perspective(cls, fov: float, aspect: float, near: float, far: float) -> Matrix:
        """Perspective projection; ``fov`` is the vertical field of view in radians."""
        m = cls([0.0] * 16)
        tan_half = math.tan(fov / 2.0)
        m[0, 0] = 1.0 / (aspect * tan_half)
        m[1, 1] = 1.0 / tan_half
        m[2, 2] = -far / (far - near)
        m[2, 3] = -(far * near) / (far - near)
        m[3, 2] = -1.0
        return m

    @classmethod
    def translation(cls, tx: float, ty: float, tz: float) -> Matrix:
        m = cls()
        m[0, 3] = tx
        m[1, 3] = ty
        m[2, 3] = tz
        return m

    @classmethod
    def rotate_x(cls, angle: float) -> Matrix:
        m = cls()
        c, s = math.cos(angle), math.sin(angle)
        m[1, 1], m[1, 2] = c, -s
        m[2, 1], m[2, 2] = s, c
        return m

    @classmethod
    def rotate_y(cls, angle: float) -> Matrix:
        m = cls()
        c, s = math.cos(angle), math.sin(angle)
        m[0, 0], m[0, 2] = c, s
        m[2, 0], m[2, 2] = -s, c
        return m

    @classmethod
    def rotate_z(cls, angle: float) -> Matrix:
        m = cls()
        c, s = math.cos(angle), math.sin(angle)
        m[0, 0], m[0, 1] = c, -s
        m[1, 0], m[1, 1] = s, c
        return m

    @classmethod
    def rotate_xyz(cls, x: float, y: float, z: float) -> Matrix:
        """Rotation X(x) * Y(y) * Z(z)."""
        return cls.rotate_x(x) * cls.rotate_y(y) * cls.rotate_z(z)

    @classmethod
    def scale(cls, s: float) -> Matrix:
        """Uniform scale; factors below 0.01 are raised to 0.01."""
        s = max(s, 0.01)
        m = cls()
        m[0, 0] = m[1, 1] = m[2, 2] = s
        return m