# roninvox

The geometry and frame logic of a small voxel sandbox. It needs no window and
no GPU. It builds a hollow sphere of voxels and turns it into interleaved
vertex data and quad indices. It also drives a fly-through camera from
keyboard, mouse, scroll and resize input.

## Modules

### `roninvox.voxel`

This module provides `Voxel` and the `Side` bit flags. A voxel is a unit cube.
Its `origin` is the back-bottom-left corner. Its `sides` mask is one byte and
chooses which faces `Voxel.vertex_data()` emits, in this order:

| bit | value | face   |
|-----|-------|--------|
| 0   | 1     | back   |
| 1   | 2     | left   |
| 2   | 4     | bottom |
| 3   | 8     | right  |
| 4   | 16    | top    |
| 5   | 32    | front  |

`Side.ALL` (63) shows all six faces. Each face gives four vertices of ten
`float32` values each:

- position (3)
- RGBA colour (4)
- normal (3)

An inactive voxel (`active = False`) gives an empty array.

`quad_count` is a running tally. Every call to `vertex_data()` adds the quads
it emitted, and the tally wraps at 256. `str(voxel)` shows the origin, the
colour and that tally.

Bad input raises `ValueError`. This happens when an origin does not have 3
components, when a colour does not have 4, or when the mask does not fit in a
byte.

### `roninvox.chunk`

`Chunk(side_count=10, rng=None)` covers a cube of `side_count` voxels per side,
with coordinates from `-side_count // 2` up to but not including
`side_count // 2`.

`generate()` keeps only the voxels whose distance from the centre lies between
`side_count // 2 - 1` and `side_count // 2`, which leaves a spherical shell.
Each kept voxel gets a random colour drawn from `rng`.

`vertex_data()` joins the vertex data of every voxel.

`describe(show_each_voxel=False)` reports the voxel, quad and triangle counts.
With `True`, it also lists every voxel. `str(chunk)` gives the short summary.

The counts accumulate: `voxel_count` grows with each `generate()`, and
`quad_count` and `triangle_count` grow with each `vertex_data()`.

A negative `side_count` raises `ValueError`.

### `roninvox.camera`

`Camera(position, up, yaw, pitch)` is a yaw/pitch fly camera. Its defaults are:

| setting | default       |
|---------|---------------|
| `yaw`   | -90°          |
| `pitch` | 1°            |
| speed   | 2.5           |
| mouse sensitivity | 0.1 |
| `zoom`  | 40°           |

The camera is driven by these methods:

- `process_keyboard(direction, delta_time)` moves the camera along a
  `CameraMovement`: `FORWARD`, `BACKWARD`, `LEFT` or `RIGHT`.
- `process_mouse_movement(xoffset, yoffset, constrain_pitch=True)` turns it.
  When `constrain_pitch` is true, pitch is clamped to ±89°.
- `process_mouse_scroll(yoffset)` changes `zoom`, the field of view in
  degrees, kept within 1–100.
- `view_matrix()` returns the 4×4 view matrix.

The module also has the right-handed matrix helpers `look_at`,
`perspective(fovy, aspect, near, far)` (with `fovy` in radians) and `ortho`.
They return row-major numpy arrays that are applied as `M @ v`. Degenerate
arguments raise `ValueError`.

### `roninvox.renderer`

`quad_indices(float_count)` builds the index list `0 1 3 2 1 3` for each quad,
offset by 4 from one quad to the next. The number of groups comes from the
vertex count held in `float_count` floats, and includes one group more than
the whole quads present.

`vertex_attributes()` returns `VertexAttribute` records that describe the
interleaved layout: location, components, stride and byte offset.

`Mesh(vertices)` holds the vertices, indices and attributes together. It
provides the `vertex_count` property and the `triangle_count()` method.

### `roninvox.timestep`

`Timestep(seconds)` is the time between two frames. `float(timestep)` gives the
seconds, and the `milliseconds` property gives the same time in milliseconds.

### `roninvox.layer`

`Layer(name="Layer")` is the base class whose hooks a frame loop calls:
`on_attach`, `on_detach`, `on_update(timestep)` and `on_event(timestep)`.

### `roninvox.sandbox`

`SandBox(width, height, side_count, rng)` is the layer that owns the chunk, the
mesh and the camera. Its shared settings are kept in a `SandBoxState`:
viewport size, camera, menu flag, first-mouse flag, light colour and last
cursor position.

- `on_attach()` generates a chunk and builds a `Mesh` from it. It also sets up
  the projection.
- `on_update(timestep)` follows these steps:
  - It recomputes the projection, using a perspective with near plane 0.1 and
    far plane 100.
  - It applies the keys in `pressed_keys`.
  - It stores the frame's `projection`, `view`, `model`, `cameraPos` and
    `lightColor` in `uniforms`.

  Calling it before `on_attach()` raises `RuntimeError`.
- `handle_keys(pressed, timestep)` reacts to the `Key` values held:
  - `W`, `A`, `S` and `D` move the camera at ten times the timestep.
  - `O` sets `line_mode`.
  - `P` toggles the menu, which releases or captures mouse input.
  - `ESCAPE` sets `should_close`.
- `handle_cursor`, `handle_scroll` and `handle_resize` feed cursor, scroll and
  framebuffer-size events. Cursor and scroll events are ignored while the menu
  is open.
- `projection_matrix()` returns the current projection.

## Example

```python
import random

from roninvox.camera import Camera, CameraMovement
from roninvox.chunk import Chunk
from roninvox.renderer import Mesh

chunk = Chunk(25, random.Random(0))
chunk.generate()
mesh = Mesh(chunk.vertex_data())
print(chunk.describe(False))
print(mesh.triangle_count(), "triangles")

camera = Camera((0.0, 0.0, 60.0))
camera.process_keyboard(CameraMovement.FORWARD, 0.016)
camera.process_mouse_movement(12.0, -4.0, True)
camera.process_mouse_scroll(2.0)
view = camera.view_matrix()
```

Pass a seeded `random.Random` to get the same colours on every run.

## What it does not do

The package does not include:

- a window
- GPU drawing
- shader loading
- an on-screen menu
- a command to start it

`SandBox` only records the state a frame would be drawn with. Examples of this
state are the mesh, the uniforms, the line-mode flag, the viewport, and
whether the cursor is captured. Your own frame loop must feed it input and do
the drawing.

## Running the tests

Install the `test` extra, then run `pytest` from the project root.