"""Mesh transformation and (optionally multi-threaded) scene rendering."""

from __future__ import annotations

import math
import re
import sys
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field, replace
from typing import Iterable, Iterator, Optional, TextIO

from softraster.light import Light
from softraster.matrix import Matrix
from softraster.renderer import Renderer
from softraster.rng import RandomNumberGenerator
from softraster.triangle import Triangle, Vertex
from softraster.vec4 import Vec4

MIN_THREADS = 1
MAX_THREADS = 11
DEFAULT_THREADS = 4

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


@dataclass
class Mesh:
    """Vertices, index triples into them, material coefficients and a world transform."""

    vertices: list[Vertex]
    triangles: list[tuple[int, int, int]]
    ka: float
    kd: float
    world: Matrix = field(default_factory=Matrix.identity)


def project_triangles(renderer: Renderer, mesh: Mesh, camera: Matrix) -> Iterator[Triangle]:
    """Yield the mesh's triangles in screen space.

    Positions go through perspective * camera * world, the perspective divide
    and the viewport mapping (y pointing down); normals go to world space.
    Triangles with any vertex depth outside [-1, 1] are dropped.
    """
    transform = renderer.perspective * camera * mesh.world
    width = float(renderer.canvas.width)
    height = float(renderer.canvas.height)

    for indices in mesh.triangles:
        projected = []
        for index in indices:
            source = mesh.vertices[index]
            p = transform * source.p
            p.divide_w()
            normal = mesh.world * source.normal
            normal.normalise()
            p.x = (p.x + 1.0) * 0.5 * width
            p.y = height - (p.y + 1.0) * 0.5 * height
            projected.append(Vertex(p, normal, replace(source.rgb)))

        if any(abs(v.p.z) > 1.0 for v in projected):
            continue
        yield Triangle(*projected)


def render(renderer: Renderer, mesh: Mesh, camera: Matrix, light: Light) -> None:
    """Draw a mesh on the calling thread; the light's direction is normalised in place."""
    for tri in project_triangles(renderer, mesh, camera):
        tri.draw(renderer, light, mesh.ka, mesh.kd)


def clamp_threads(num_threads: int) -> int:
    """Limit a thread count to the supported range 1..11."""
    return max(MIN_THREADS, min(MAX_THREADS, num_threads))


def _row_slices(height: int, num_threads: int) -> Iterator[tuple[int, int]]:
    work = height // num_threads
    for i in range(num_threads):
        y0 = i * work
        y1 = height if i == num_threads - 1 else (i + 1) * work
        yield y0, y1


def _draw_slice(
    renderer: Renderer,
    meshes: list[Mesh],
    camera: Matrix,
    light: Light,
    y_min: int,
    y_max: int,
) -> None:
    local_light = light.copy()
    for mesh in meshes:
        for tri in project_triangles(renderer, mesh, camera):
            tri.draw(renderer, local_light, mesh.ka, mesh.kd, y_min, y_max)


def _render_rows_in_parallel(
    renderer: Renderer,
    meshes: list[Mesh],
    camera: Matrix,
    light: Light,
    num_threads: int,
) -> None:
    height = renderer.canvas.height
    with ThreadPoolExecutor(max_workers=num_threads) as pool:
        futures = [
            pool.submit(_draw_slice, renderer, meshes, camera, light, y0, y1)
            for y0, y1 in _row_slices(height, num_threads)
        ]
        for future in futures:
            future.result()


def render_mt(
    renderer: Renderer, mesh: Mesh, camera: Matrix, light: Light, num_threads: int
) -> None:
    """Draw a mesh with the screen split into horizontal bands, one per thread.

    With a single thread (or an empty canvas) this is :func:`render`; otherwise
    each thread works on its own copy of the light.
    """
    num_threads = clamp_threads(num_threads)
    if renderer.canvas.height <= 0 or num_threads == 1:
        render(renderer, mesh, camera, light)
        return
    _render_rows_in_parallel(renderer, [mesh], camera, light, num_threads)


def render_scene_mt(
    renderer: Renderer,
    scene: Iterable[Optional[Mesh]],
    camera: Matrix,
    light: Light,
    num_threads: int,
) -> None:
    """Draw every mesh of a scene, starting one set of band threads for the whole scene.

    ``None`` entries in the scene are skipped.
    """
    meshes = [mesh for mesh in scene if mesh is not None]
    num_threads = clamp_threads(num_threads)
    if renderer.canvas.height <= 0 or num_threads == 1:
        for mesh in meshes:
            render(renderer, mesh, camera, light)
        return
    _render_rows_in_parallel(renderer, meshes, camera, light, num_threads)


def read_thread_count(
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    default: int = DEFAULT_THREADS,
) -> int:
    """Prompt for a thread count and read it.

    Input that does not start with an integer gives ``default``; integers are
    clamped to 1..11.
    """
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout

    stdout.write("\n====================================\n")
    stdout.write(f"Please input thread count ({MIN_THREADS} ~ {MAX_THREADS}):\n")
    stdout.write("====================================\n> ")
    stdout.flush()

    line = ""
    for candidate in stdin:
        if candidate.strip():
            line = candidate
            break

    match = _LEADING_INT.match(line)
    if match is None:
        stdout.write(f"[Warn] Invalid input. Use default {default} threads.\n\n")
        return default

    count = clamp_threads(int(match.group(1)))
    stdout.write(f"[Info] Using {count} threads.\n\n")
    return count


def make_random_rotation(rng: RandomNumberGenerator | None = None) -> Matrix:
    """A rotation about a random axis (X, Y or Z) by a random angle, or the identity."""
    rng = RandomNumberGenerator.instance() if rng is None else rng
    choice = rng.random_int(0, 3)
    if choice == 0:
        return Matrix.rotate_x(rng.random_float(0.0, 2.0 * math.pi))
    if choice == 1:
        return Matrix.rotate_y(rng.random_float(0.0, 2.0 * math.pi))
    if choice == 2:
        return Matrix.rotate_z(rng.random_float(0.0, 2.0 * math.pi))
    return Matrix.identity()