"""Render target: canvas, depth buffer and projection."""

from __future__ import annotations

import math

from softraster.canvas import Canvas
from softraster.matrix import Matrix
from softraster.zbuffer import ZBuffer


class Renderer:
    """Holds the canvas, z-buffer and perspective matrix for a scene."""

    def __init__(
        self,
        width: int = 1024,
        height: int = 768,
        title: str = "Raster",
        *,
        fov: float = math.radians(90.0),
        aspect: float = 4.0 / 3.0,
        near: float = 0.1,
        far: float = 100.0,
    ) -> None:
        self.fov = fov
        self.aspect = aspect
        self.near = near
        self.far = far
        self.canvas = Canvas(width, height, title)
        self.zbuffer = ZBuffer(width, height)
        self.perspective = Matrix.perspective(fov, aspect, near, far)

    def clear(self) -> None:
        """Blacken the canvas and reset every depth to the far plane."""
        self.canvas.clear()
        self.zbuffer.clear()