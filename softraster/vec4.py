"""Four-component vectors for homogeneous coordinates and normals."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar, Iterator


@dataclass
class Vec4:
    """A mutable 4D vector; ``w`` defaults to 1 so a bare vector is a point."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    _NAMES: ClassVar[tuple[str, str, str, str]] = ("x", "y", "z", "w")

    def _name(self, index: int) -> str:
        if not isinstance(index, int) or not 0 <= index < 4:
            raise IndexError(f"Vec4 index out of range: {index!r}")
        return self._NAMES[index]

    def __getitem__(self, index: int) -> float:
        return getattr(self, self._name(index))

    def __setitem__(self, index: int, value: float) -> None:
        setattr(self, self._name(index), float(value))

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    def __mul__(self, scalar: float) -> Vec4:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vec4(self.x * scalar, self.y * scalar, self.z * scalar, self.w * scalar)

    __rmul__ = __mul__

    def __add__(self, other: Vec4) -> Vec4:
        if not isinstance(other, Vec4):
            return NotImplemented
        return Vec4(self.x + other.x, self.y + other.y, self.z + other.z, 0.0)

    def __sub__(self, other: Vec4) -> Vec4:
        if not isinstance(other, Vec4):
            return NotImplemented
        return Vec4(self.x - other.x, self.y - other.y, self.z - other.z, 0.0)

    def __str__(self) -> str:
        return "\t".join(format(v, "g") for v in self)

    def divide_w(self) -> None:
        """Perspective divide: scale x, y, z by 1/w and set w to 1."""
        self.x /= self.w
        self.y /= self.w
        self.z /= self.w
        self.w = 1.0

    def normalise(self) -> None:
        """Scale x, y, z to unit length, leaving w untouched.

        Raises ZeroDivisionError for a zero-length vector.
        """
        length = math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)
        self.x /= length
        self.y /= length
        self.z /= length

    @staticmethod
    def cross(v1: Vec4, v2: Vec4) -> Vec4:
        """Cross product of the xyz parts, with w set to 0."""
        return Vec4(
            v1.y * v2.z - v1.z * v2.y,
            v1.z * v2.x - v1.x * v2.z,
            v1.x * v2.y - v1.y * v2.x,
            0.0,
        )

    @staticmethod
    def dot(v1: Vec4, v2: Vec4) -> float:
        """Dot product of the xyz parts."""
        return v1.x * v2.x + v1.y * v2.y + v1.z * v2.z