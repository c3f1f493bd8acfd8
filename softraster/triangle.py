"""Screen-space triangles: barycentric coverage, depth test and shading."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, TypeVar

from softraster.canvas import Canvas
from softraster.colour import Colour
from softraster.light import Light
from softraster.vec4 import Vec4

if TYPE_CHECKING:
    from softraster.renderer import Renderer

T = TypeVar("T")

Point2 = tuple[float, float]

MIN_AREA = 1.0
NEAR_DEPTH = 0.001
BOUNDS_COLOUR = (255, 0, 0)


@dataclass
class Vertex:
    """A vertex: position, normal and colour."""

    p: Vec4 = field(default_factory=Vec4)
    normal: Vec4 = field(default_factory=Vec4)
    rgb: Colour = field(default_factory=Colour)


def _edge(a: Point2, b: Point2, px: float, py: float) -> float:
    """Signed edge function of point p against the directed edge a -> b."""
    ex, ey = b[0] - a[0], b[1] - a[1]
    qx, qy = px - a[0], py - a[1]
    return qy * ex - qx * ey


class Triangle:
    """A triangle whose vertex positions are already in screen space."""

    def __init__(self, v1: Vertex, v2: Vertex, v3: Vertex) -> None:
        self.vertices = (v1, v2, v3)
        self._points: tuple[Point2, Point2, Point2] = tuple(
            (v.p.x, v.p.y) for v in self.vertices
        )
        (x0, y0), (x1, y1), (x2, y2) = self._points
        e1x, e1y = x1 - x0, y1 - y0
        e2x, e2y = x2 - x0, y2 - y0
        self.area = abs(e1x * e2y - e1y * e2x)

    def coordinates(self, px: float, py: float) -> tuple[float, float, float] | None:
        """Barycentric (alpha, beta, gamma) of point p, or None if p lies outside.

        ``alpha`` weights the third vertex, ``beta`` the first and ``gamma``
        the second. A degenerate triangle contains no points.
        """
        if self.area == 0:
            return None
        p0, p1, p2 = self._points
        alpha = _edge(p0, p1, px, py) / self.area
        beta = _edge(p1, p2, px, py) / self.area
        gamma = _edge(p2, p0, px, py) / self.area
        if alpha < 0.0 or beta < 0.0 or gamma < 0.0:
            return None
        return alpha, beta, gamma

    @staticmethod
    def interpolate(alpha: float, beta: float, gamma: float, a1: T, a2: T, a3: T) -> T:
        """Weighted sum ``a1 * alpha + a2 * beta + a3 * gamma``."""
        return (a1 * alpha) + (a2 * beta) + (a3 * gamma)

    def bounds(self) -> tuple[Point2, Point2]:
        """Return ((min_x, min_y), (max_x, max_y)) of the vertex positions."""
        xs = [x for x, _ in self._points]
        ys = [y for _, y in self._points]
        return (min(xs), min(ys)), (max(xs), max(ys))

    def bounds_window(self, canvas: Canvas) -> tuple[Point2, Point2]:
        """Bounds clipped to the canvas rectangle [0, width] x [0, height]."""
        (min_x, min_y), (max_x, max_y) = self.bounds()
        return (
            (max(min_x, 0.0), max(min_y, 0.0)),
            (min(max_x, float(canvas.width)), min(max_y, float(canvas.height))),
        )

    def draw(
        self,
        renderer: Renderer,
        light: Light,
        ka: float,
        kd: float,
        y_min: int | None = None,
        y_max: int | None = None,
    ) -> None:
        """Rasterise into the renderer with depth testing and diffuse shading.

        Only rows in [y_min, y_max) are touched when those limits are given.
        The light's direction is normalised in place. Triangles whose area is
        below one pixel, and back-facing ones, draw nothing.
        """
        canvas = renderer.canvas
        zbuffer = renderer.zbuffer
        (min_x, min_y), (max_x, max_y) = self.bounds_window(canvas)

        if self.area < MIN_AREA:
            return

        y_start, y_end = int(min_y), math.ceil(max_y)
        x_start, x_end = int(min_x), math.ceil(max_x)
        if y_min is not None:
            y_start = max(y_start, y_min)
        if y_max is not None:
            y_end = min(y_end, y_max)

        light.direction.normalise()

        v0, v1, v2 = self.vertices
        p0, p1, p2 = self._points
        inv_area = 1.0 / self.area

        for y in range(y_start, y_end):
            fy = float(y)
            for x in range(x_start, x_end):
                fx = float(x)
                e01 = _edge(p0, p1, fx, fy)
                e12 = _edge(p1, p2, fx, fy)
                e20 = _edge(p2, p0, fx, fy)
                if e01 < 0.0 or e12 < 0.0 or e20 < 0.0:
                    continue

                alpha = e01 * inv_area
                beta = e12 * inv_area
                gamma = e20 * inv_area

                depth = self.interpolate(beta, gamma, alpha, v0.p.z, v1.p.z, v2.p.z)
                if not (zbuffer[x, y] > depth and depth > NEAR_DEPTH):
                    continue

                normal = self.interpolate(beta, gamma, alpha, v0.normal, v1.normal, v2.normal)
                normal.normalise()

                colour = self.interpolate(beta, gamma, alpha, v0.rgb, v1.rgb, v2.rgb)
                colour.clamp()

                diffuse = max(Vec4.dot(light.direction, normal), 0.0)
                shaded = (colour * kd) * (light.colour * diffuse) + (light.ambient * ka)

                canvas.draw(x, y, *shaded.to_rgb())
                zbuffer[x, y] = depth

    def draw_bounds(self, canvas: Canvas) -> None:
        """Fill the bounding box in red, limited to the canvas."""
        (min_x, min_y), (max_x, max_y) = self.bounds()
        y_start, y_end = max(int(min_y), 0), min(int(max_y), canvas.height)
        x_start, x_end = max(int(min_x), 0), min(int(max_x), canvas.width)
        for y in range(y_start, y_end):
            for x in range(x_start, x_end):
                canvas.draw(x, y, *BOUNDS_COLOUR)

    def __str__(self) -> str:
        return "\n".join(str(v.p) for v in self.vertices) + "\n"