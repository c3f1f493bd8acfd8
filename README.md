# softraster

A small software rasterizer in plain Python. It draws lit, depth-tested
triangle meshes into an in-memory RGB canvas, which you can then save as an
image file using Pillow.

## Installation

```
pip install .
pip install ".[test]"   # adds pytest for running the tests
```

## Modules

- `softraster.vec4.Vec4` is a mutable 4D vector. `w` defaults to 1. It supports
  indexing, scaling with `*`, and `+` / `-`, which set `w` to 0. It also has
  `divide_w`, `normalise`, and the static `dot` and `cross`, which use only the
  xyz parts.
- `softraster.colour.Colour` and `Channel` are float RGB colours. They support
  scaling by a number, per-channel `*` with another colour, `+`, and indexing
  by `Channel`. `clamp` caps each component at 1. `to_rgb` returns
  `floor(c * 255)` for each component, kept to one byte.
- `softraster.matrix.Matrix` is a row-major 4x4 matrix, indexed as
  `m[row, col]`. It is the identity by default. The constructors are
  `identity`, `translation`, `rotate_x`, `rotate_y`, `rotate_z`, `rotate_xyz`
  (X·Y·Z), `scale` (factors below 0.01 become 0.01) and `perspective`. `*`
  multiplies a matrix by a matrix or by a `Vec4`.
- `softraster.zbuffer.ZBuffer` is a depth grid indexed as `zb[x, y]`. `create`
  reallocates it at a new size, and `clear` resets every depth to 1.0.
- `softraster.rng.RandomNumberGenerator` is a Mersenne Twister generator. It
  can be seeded, and `instance()` returns a shared generator. `random_int`
  draws from the closed range [low, high] and `random_float` from the
  half-open range [low, high).
- `softraster.light.Light` holds a direction, a diffuse colour and an ambient
  colour. `copy` returns an independent copy.
- `softraster.canvas.Canvas` is an RGB back buffer. It has:
  - `draw`, `draw_index`, `pixel`, `clear`, `back_buffer` and `save`, which
    writes an image file whose format follows the file suffix;
  - key state through `press_key`, `release_key` and `key_pressed`, which take
    key codes or single characters;
  - mouse state through `buttons`, `mouse_button_pressed`, `mouse_x`,
    `mouse_y` and `mouse_wheel`, using the `MouseButton` and
    `MouseButtonState` enums.
- `softraster.media` provides two classes:
  - `Timer`: `dt` returns the seconds since the last reset and then resets
    the timer.
  - `Image`: `load` reads RGB or RGBA files and raises `ValueError` for any
    other pixel format. `at`, `channel_at` and `alpha_at` clamp their
    coordinates to the image. `alpha_at` returns 255 when the image has no
    alpha channel.
- `softraster.renderer.Renderer` bundles a canvas, a matching z-buffer and a
  perspective matrix. By default these are 1024x768, a 90° field of view,
  aspect 4/3, near 0.1 and far 100. `clear` resets the canvas and the z-buffer.
- `softraster.triangle` provides `Vertex` (position, normal, colour) and
  `Triangle`, a screen-space triangle. `Triangle` has:
  - `coordinates`, which returns barycentric weights or `None` when the point
    is outside;
  - `interpolate`, `bounds`, `bounds_window` and `draw_bounds`;
  - `draw`, which rasterises the triangle. It accepts optional
    `y_min` / `y_max` row limits.
- `softraster.pipeline` provides:
  - `Mesh`: vertices, index triples, `ka`, `kd` and a `world` matrix.
  - `project_triangles`: yields the screen-space triangles of a mesh.
  - `render`: draws a mesh on one thread.
  - `render_mt` and `render_scene_mt`: split the screen into horizontal
    bands, one thread per band.
  - `clamp_threads`: limits a thread count to 1–11.
  - `read_thread_count`: prompts on a stream for a thread count. Input that
    does not start with an integer gives the default, which is 4.
  - `make_random_rotation`: returns a rotation about X, Y or Z by a random
    angle, or the identity.

## Example

```python
from softraster.colour import Colour
from softraster.light import Light
from softraster.matrix import Matrix
from softraster.pipeline import Mesh, render_scene_mt
from softraster.renderer import Renderer
from softraster.triangle import Vertex
from softraster.vec4 import Vec4

facing = Vec4(0.0, 0.0, 1.0, 0.0)
red = Colour(1.0, 0.0, 0.0)
mesh = Mesh(
    vertices=[
        Vertex(Vec4(-1.0, 1.0, -3.0), facing, red),
        Vertex(Vec4(1.0, 1.0, -3.0), facing, red),
        Vertex(Vec4(-1.0, -1.0, -3.0), facing, red),
    ],
    triangles=[(0, 1, 2)],
    ka=0.75,
    kd=0.75,
)

renderer = Renderer()
light = Light(Vec4(0.0, 1.0, 1.0, 0.0), Colour(1.0, 1.0, 1.0), Colour(0.2, 0.2, 0.2))

renderer.clear()
render_scene_mt(renderer, [mesh], Matrix.identity(), light, 4)
renderer.canvas.save("frame.png")
```

`render_scene_mt` starts one set of band threads for the whole scene, and
each thread draws every mesh within its own rows. Every thread shades with
its own copy of the light. Because the bands do not overlap, no two threads
write the same canvas or z-buffer cell. `None` entries in the scene are
skipped. With one thread, or with a canvas of zero height, the scene is
drawn on the calling thread with `render`.

## Depth and shading rules

- Positions are transformed by `perspective * camera * world`, divided by
  `w`, and then mapped to the screen with y pointing down. Normals are
  transformed by `world` and normalised.
- A triangle is dropped if any of its vertices has a projected depth outside
  [-1, 1].
- Triangles with a screen-space area below one pixel draw nothing. Neither do
  triangles wound so that their edge functions are negative.
- A pixel is written only when its interpolated depth is greater than 0.001
  and smaller than the value already in the z-buffer.
- Interpolated colours are clamped to 1.0. The shaded colour is
  `colour * kd * light_colour * max(n·l, 0) + ambient * ka`.
- `Triangle.draw` and `render` normalise the light's direction in place.

## What it does not do

- It opens no window and presents nothing on screen. Frames stay in the
  canvas until you call `Canvas.save` or read `back_buffer`.
- Key and mouse state changes only through the calls listed above; nothing
  reads a real keyboard or mouse.
- There are no built-in mesh shapes such as cubes or spheres, and no mesh
  file loader. Meshes are built by hand from `Vertex` lists and index
  triples.
- There is no command-line program and no bundled demo scenes.