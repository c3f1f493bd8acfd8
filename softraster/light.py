"""Directional light description."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from softraster.colour import Colour
from softraster.vec4 import Vec4


@dataclass
class Light:
    """A directional light: direction, diffuse colour and ambient colour."""

    direction: Vec4 = field(default_factory=Vec4)
    colour: Colour = field(default_factory=Colour)
    ambient: Colour = field(default_factory=Colour)

    def copy(self) -> Light:
        """Return an independent copy whose parts can be changed freely."""
        return Light(replace(self.direction), replace(self.colour), replace(self.ambient))