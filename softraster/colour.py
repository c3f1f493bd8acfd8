"""Floating-point RGB colours."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum


class Channel(IntEnum):
    """Index of a colour component."""

    RED = 0
    GREEN = 1
    BLUE = 2


_NAMES = ("r", "g", "b")


@dataclass
class Colour:
    """An RGB colour with float components, black by default."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0

    @staticmethod
    def _name(channel: int) -> str:
        try:
            return _NAMES[Channel(channel)]
        except ValueError:
            raise IndexError(f"no colour channel {channel!r}") from None

    def __getitem__(self, channel: int) -> float:
        return getattr(self, self._name(channel))

    def __setitem__(self, channel: int, value: float) -> None:
        setattr(self, self._name(channel), float(value))

    def __mul__(self, other: Colour | float) -> Colour:
        if isinstance(other, Colour):
            return Colour(self.r * other.r, self.g * other.g, self.b * other.b)
        if isinstance(other, (int, float)):
            return Colour(self.r * other, self.g * other, self.b * other)
        return NotImplemented

    def __rmul__(self, other: float) -> Colour:
        if isinstance(other, (int, float)):
            return self * other
        return NotImplemented

    def __add__(self, other: Colour) -> Colour:
        if not isinstance(other, Colour):
            return NotImplemented
        return Colour(self.r + other.r, self.g + other.g, self.b + other.b)

    def clamp(self) -> None:
        """Cap each component at 1 in place."""
        self.r = min(self.r, 1.0)
        self.g = min(self.g, 1.0)
        self.b = min(self.b, 1.0)

    def to_rgb(self) -> tuple[int, int, int]:
        """Convert to 8-bit components: floor(c * 255), kept to one byte."""
        return tuple(int(math.floor(c * 255)) & 0xFF for c in (self.r, self.g, self.b))