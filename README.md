# fishgl

A small software rasteriser in plain Python, the vector, matrix and
bounding-volume helpers it is built on, ANSI escape sequences, and a
single-client telnet console. It has no dependencies outside the standard
library.

## Modules

- `fishgl.util`: scalar helpers (`sign`, `signf`, `rad`, `deg`, `pow2`,
  `minf`, `maxf`, `clamp`, `clamp_zo`, `lerp`, `eq`, `percent`, `percentc`)
  and the tuple type aliases used throughout.
- `fishgl.vec3`: three-component vectors as float tuples: `dot`, `cross`,
  `norm`, `normalize`, `scale_as`, `rotate`, `rotate_m4`, `rotate_m3`,
  `proj`, `center`, `distance`, `minv`, `maxv`, `clamp`, `lerp` and more.
- `fishgl.mat4`: 4×4 column-major matrices (`m[column][row]`): `identity`,
  `zero`, `mul`, `mul_n`, `mulv`, `mulv3`, `transpose`, `scale`, `det`,
  `inv`, `quat`, `pick3`, `pick3t`, `ins3`, `swap_col`, `swap_row`.
  `inv` raises `ValueError` for a singular matrix; `mul_n` needs at least
  two matrices.
- `fishgl.affine`: `mul`, `mul_rot` and `inv_tr` specialised for affine and
  rigid-body transforms.
- `fishgl.box`: axis-aligned boxes as `(min, max)`: `transform`, `merge`,
  `crop`, `crop_until`, `frustum`, `invalidate`, `is_valid`, `size`,
  `radius`, `center`, `intersects_aabb`, `intersects_sphere`,
  `contains_point`, `contains`.
- `fishgl.sphere`: spheres as `(x, y, z, radius)`: `radii`, `transform`,
  `merge`, `intersects`, `contains_point`.
- `fishgl.frustum`: `corners` from an inverse view-projection matrix (in
  `Corner` order), `center`, `box` and `corners_at`.
- `fishgl.fglmath`: the rasteriser's value types `Vec2`, `Vec2i`, `Vec3`,
  `BBox` and `Color`, plus `vary`, `bounding_rect`, `bounding_rect_int` and
  `mat3_mul_vec3`.
- `fishgl.renderer`: `Buffer`, `DepthBuffer`, `RenderState`, `Renderer`,
  `barycentric` and the enums `PixelOrder`, `ShaderType`, `TextureWrap`,
  `BlendMode`.
- `fishgl.shader`: `sample_texture` and `sample_texture_uv` for use inside
  fragment shaders.
- `fishgl.escape_codes`: ANSI escape sequences.
- `fishgl.telnet`: `TelnetBase`, `Telnet` and `TelnetStream`.

## Installing

```
pip install .
```

## Drawing a triangle

```python
from fishgl.fglmath import Color, Vec2, Vec3
from fishgl.renderer import Buffer, Renderer, ShaderType

renderer = Renderer(64, 64)
frame = Buffer(64, 64)
frame.clear(Color.from_rgb(0, 0, 0))

def vertex(state, v):
    return v                      # return None to drop the triangle

def fragment(state, uv):
    return Color.from_rgb(255, 255, 255)   # return None to skip the pixel

renderer.bind_shader(vertex, ShaderType.VERTEX)
renderer.bind_shader(fragment, ShaderType.FRAGMENT)

renderer.begin_frame()
bounds = renderer.render_triangles(
    frame,
    [Vec3(4, 4, 0), Vec3(60, 4, 0), Vec3(4, 60, 0)],
    [Vec2(0, 0), Vec2(1, 0), Vec2(0, 1)],
)
frame_ms = renderer.end_frame()
```

`render_triangles` takes vertices in groups of three (a `ValueError` is
raised otherwise) and one texture coordinate per vertex. It returns the
screen rectangle touched; when no `bbox` is passed, the renderer's own
`state.render_bounds` is grown and stored, and `end_frame` copies it to
`state.last_render_bounds`. Nothing is drawn until both a vertex and a
fragment shader are bound.

Backface culling is switched on with `renderer.state.enable_backface_culling
= True`. For depth testing, bind a `DepthBuffer` with `bind_depth_buffer`;
depth values are one byte per pixel, a pixel is written when its depth is
not smaller than the stored one, and `clear_depth_buffer` resets them to
zero.

### Textures

```python
from fishgl.shader import sample_texture_uv

texture = Buffer(2, 2)
renderer.bind_texture(texture, 0)        # slots 0..3, IndexError otherwise

def textured(state, uv):
    return sample_texture_uv(state, state.textures[0], uv)
```

Out-of-range texels follow `state.texture_wrap`: `BORDER_COLOR` returns
`state.border_color` (white by default), `CLAMP` clamps to the edge, and
any other mode returns red.

### Buffers and colours

`Color` holds a byte-swapped RGB565 value; `Color.from_rgb(r, g, b)` packs
8-bit channels and `to_rgb()` unpacks them with the dropped low bits as
zero. `Buffer` offers `clear`, `clear_rect` (which clears the whole
buffer), `blit`, `draw_line` (Bresenham, clipped to the buffer), indexing
with `buffer[x, y]`, and `to_bytes()` (two little-endian bytes per pixel).

## Terminal escape codes

```python
from fishgl import escape_codes as esc

print(esc.cls() + esc.home() + esc.bold("hello") + esc.set_fg(2) + "green" + esc.reset())
```

## Telnet console

```python
from fishgl.telnet import Telnet

console = Telnet()
console.on_input_received(lambda line: console.printf("you said %s\n", line))
console.begin(2323, "127.0.0.1")
while True:
    console.loop()
```

One client is served at a time. A second connection from the same address
replaces the first and fires `on_reconnect`; one from another address is
closed and reported to `on_connection_attempt` (its address is kept in
`last_attempt_ip`). `on_connect` and `on_disconnect` report the client's
address. `Telnet` delivers whole printable lines, or single characters when
`line_mode` is false. `TelnetStream` instead exposes the client as a byte
stream through `available`, `read`, `peek`, `flush` and `write`. Both can be
used as context managers, which disconnect the client and stop the server
on exit. `loop()` raises `RuntimeError` before `begin()`.

## What it does not do

- There is no display output: `Renderer.display` only copies a buffer's
  bytes into the in-memory `renderer.video_memory`, and only when the
  renderer was set up with 32 bits per pixel, no stride and
  `PixelOrder.RGBA`; for any other layout it does nothing.
- Images cannot be loaded from files; textures are `Buffer`s filled by the
  caller.
- `BlendMode` is recorded in the state but blending is not applied; pixels
  are always overwritten.
- There are no command-line tools.

## Running the tests

```
pip install .[test]
pytest
```