"""Software triangle rasteriser drawing into 16-bit colour buffers."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional, Sequence, Tuple

from fishgl import mat4
from fishgl.fglmath import (
    BBox,
    Color,
    Vec2,
    Vec2i,
    Vec3,
    bounding_rect_int,
    mat3_mul_vec3,
    vary,
)
from fishgl.util import Mat4

logger = logging.getLogger(__name__)

MAX_TEXTURES = 4


class PixelOrder(Enum):
    RGBA = "rgba"
    BGRA = "bgra"


class ShaderType(Enum):
    VERTEX = "vertex"
    FRAGMENT = "fragment"


class TextureWrap(Enum):
    BORDER_COLOR = "border_color"
    CLAMP = "clamp"
    REPEAT = "repeat"


class BlendMode(Enum):
    NONE = "none"
    ALPHA = "alpha"


@dataclass
class Buffer:
    """A width x height grid of colours, stored row by row."""

    width: int
    height: int
    pixels: List[Color] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("buffer dimensions must not be negative")
        count = self.width * self.height
        if not self.pixels:
            self.pixels = [Color()] * count
        elif len(self.pixels) != count:
            raise ValueError(f"expected {count} pixels, got {len(self.pixels)}")

    @property
    def pixel_count(self) -> int:
        return self.width * self.height

    def __getitem__(self, xy: Tuple[int, int]) -> Color:
        x, y = xy
        return self.pixels[y * self.width + x]

    def __setitem__(self, xy: Tuple[int, int], color: Color) -> None:
        x, y = xy
        self.pixels[y * self.width + x] = color

    def to_bytes(self) -> bytes:
        """Raw pixel memory, two little-endian bytes per pixel."""
        return b"".join(p.value.to_bytes(2, "little") for p in self.pixels)

    def clear(self, color: Color) -> None:
        """Fill every pixel with color."""
        self.pixels = [color] * self.pixel_count

    def clear_rect(self, color: Color, rect: BBox) -> None:
        """Fill with color; the whole buffer is cleared whatever rect is."""
        self.clear(color)

    def blit(self, texture: Buffer, src: BBox, dst: Vec2i) -> None:
        """Copy the src rectangle of texture to position dst."""
        width = src.max.x - src.min.x
        height = src.max.y - src.min.y
        for y in range(height):
            for x in range(width):
                idx = (dst.y + y) * self.width + dst.x + x
                if not 0 <= idx < self.pixel_count:
                    continue
                bidx = (src.min.y + y) * texture.width + src.min.x + x
                self.pixels[idx] = texture.pixels[bidx]

    def draw_line(self, color: Color, x0: int, y0: int, x1: int, y1: int) -> None:
        """Draw a line with Bresenham's algorithm, skipping pixels off the buffer."""
        steep = abs(x0 - x1) < abs(y0 - y1)
        if steep:
            x0, y0 = y0, x0
            x1, y1 = y1, x1
        if x0 > x1:
            x0, x1 = x1, x0
            y0, y1 = y1, y0

        dx = x1 - x0
        derror2 = abs(y1 - y0) * 2
        error2 = 0
        y = y0
        step = 1 if y1 > y0 else -1
        for x in range(x0, x1 + 1):
            px, py = (y, x) if steep else (x, y)
            if 0 <= px < self.width and 0 <= py < self.height:
                self.pixels[py * self.width + px] = color
            error2 += derror2
            if error2 > dx:
                y += step
                error2 -= dx * 2


@dataclass
class DepthBuffer:
    """One byte of depth per pixel; larger values are nearer."""

    width: int
    height: int
    values: bytearray = field(default_factory=bytearray)

    def __post_init__(self) -> None:
        count = self.width * self.height
        if not self.values:
            self.values = bytearray(count)
        elif len(self.values) != count:
            raise ValueError(f"expected {count} depth values, got {len(self.values)}")

    def clear(self) -> None:
        """Reset every depth value to zero."""
        self.values[:] = bytes(len(self.values))


VertexShader = Callable[["RenderState", Vec3], Optional[Vec3]]
FragmentShader = Callable[["RenderState", Vec2], Optional[Color]]


@dataclass
class RenderState:
    """Everything shaders and the rasteriser read while drawing."""

    width: int
    height: int
    bpp: int
    stride: int
    order: PixelOrder
    vertex_shader: Optional[VertexShader] = None
    fragment_shader: Optional[FragmentShader] = None
    border_color: Color = field(default_factory=lambda: Color.from_rgb(255, 255, 255))
    texture_wrap: TextureWrap = TextureWrap.BORDER_COLOR
    blend_mode: BlendMode = BlendMode.NONE
    enable_backface_culling: bool = False
    depth_buffer: Optional[DepthBuffer] = None
    textures: List[Optional[Buffer]] = field(default_factory=lambda: [None] * MAX_TEXTURES)
    mat_model: Mat4 = field(default_factory=mat4.identity)
    mat_view: Mat4 = field(default_factory=mat4.identity)
    mat_proj: Mat4 = field(default_factory=mat4.identity)
    render_bounds: BBox = field(default_factory=lambda: BBox(Vec2i(), Vec2i()))
    last_render_bounds: BBox = field(default_factory=lambda: BBox(Vec2i(), Vec2i()))
    frame_time: int = 0
    cur_shader: Optional[ShaderType] = None
    vert_num: int = 0


def barycentric(a: Vec3, b: Vec3, c: Vec3, x: float, y: float) -> Optional[Vec3]:
    """Barycentric weights of (x, y) in triangle abc, or None when outside or degenerate."""
    u = Vec3(c.x - a.x, b.x - a.x, a.x - x).cross(Vec3(c.y - a.y, b.y - a.y, a.y - y))
    if abs(u.z) < 1:
        return None
    weights = Vec3(1.0 - (u.x + u.y) / u.z, u.y / u.z, u.x / u.z)
    if weights.x < 0 or weights.y < 0 or weights.z < 0:
        return None
    return weights


class Renderer:
    """Owns the render state and the target video memory."""

    def __init__(
        self,
        width: int,
        height: int,
        bpp: int = 32,
        stride: int = 0,
        order: PixelOrder = PixelOrder.RGBA,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("width and height must be positive")
        self.state = RenderState(width=width, height=height, bpp=bpp, stride=stride, order=order)
        self.video_memory = bytearray(width * height * bpp // 8)
        self._frame_start = time.monotonic()
        self._frame_counter = 0

    def begin_frame(self) -> None:
        """Reset the render bounds so the frame's drawing can grow them."""
        st = self.state
        st.render_bounds = BBox(Vec2i(st.width, st.height), Vec2i(0, 0))
        self._frame_start = time.monotonic()

    def end_frame(self) -> int:
        """Keep the frame's bounds and return its duration in milliseconds."""
        st = self.state
        st.last_render_bounds = st.render_bounds
        now = time.monotonic()
        frame_ms = int((now - self._frame_start) * 1000)
        self._frame_start = now
        st.frame_time = frame_ms
        if self._frame_counter % 10 == 0:
            fps = 1000.0 / frame_ms if frame_ms else float("inf")
            logger.debug("Frame time: %d ms - %.2f FPS", frame_ms, fps)
        self._frame_counter += 1
        return frame_ms

    def bind_shader(self, shader, shader_type: ShaderType) -> None:
        """Install a vertex or fragment shader."""
        if shader_type is ShaderType.FRAGMENT:
            self.state.fragment_shader = shader
        elif shader_type is ShaderType.VERTEX:
            self.state.vertex_shader = shader

    def bind_texture(self, texture: Buffer, slot: int) -> None:
        """Attach a texture to one of the texture slots."""
        if not 0 <= slot < MAX_TEXTURES:
            raise IndexError(f"texture slot {slot} out of range 0..{MAX_TEXTURES - 1}")
        self.state.textures[slot] = texture

    def bind_depth_buffer(self, buffer: Optional[DepthBuffer]) -> None:
        self.state.depth_buffer = buffer

    def clear_depth_buffer(self) -> None:
        if self.state.depth_buffer is not None:
            self.state.depth_buffer.clear()

    def display(self, buffer: Buffer) -> None:
        """Copy the buffer into video memory when the layout matches directly."""
        st = self.state
        if st.bpp == 32 and st.stride == 0 and st.order is PixelOrder.RGBA:
            data = buffer.to_bytes()
            self.video_memory[: len(data)] = data

    def render_triangles(
        self,
        buffer: Buffer,
        vertices: Sequence[Vec3],
        uvs: Sequence[Vec2],
        bbox: Optional[BBox] = None,
    ) -> BBox:
        """Rasterise consecutive vertex triples; return the grown bounds.

        Without bbox the renderer's own frame bounds are grown and stored.
        """
        if len(vertices) % 3:
            raise ValueError("vertex count must be a multiple of three")
        if len(uvs) < len(vertices):
            raise ValueError("every vertex needs a texture coordinate")
        bounds = self.state.render_bounds if bbox is None else bbox
        verts, coords = iter(vertices), iter(uvs)
        for a, b, c in zip(verts, verts, verts):
            uva, uvb, uvc = next(coords), next(coords), next(coords)
            bounds = self._render_triangle(buffer, a, b, c, uva, uvb, uvc, bounds)
        if bbox is None:
            self.state.render_bounds = bounds
        return bounds

    def _render_triangle(
        self,
        buffer: Buffer,
        a: Vec3,
        b: Vec3,
        c: Vec3,
        uva: Vec2,
        uvb: Vec2,
        uvc: Vec2,
        bounds: BBox,
    ) -> BBox:
        st = self.state
        vertex_shader, fragment_shader = st.vertex_shader, st.fragment_shader
        if vertex_shader is None or fragment_shader is None:
            return bounds

        varying = (
            Vec3(uva.x, uvb.x, uvc.x),
            Vec3(uva.y, uvb.y, uvc.y),
            Vec3(0.0, 0.0, 0.0),
        )

        st.cur_shader = ShaderType.VERTEX
        shaded = []
        for num, vertex in enumerate((a, b, c)):
            st.vert_num = num
            out = vertex_shader(st, vertex)
            if out is None:
                return bounds
            shaded.append(out)
        a, b, c = shaded

        if st.enable_backface_culling and (c - a).cross(b - a).z > 0:
            return bounds

        depth = st.depth_buffer.values if st.depth_buffer is not None else None

        low, high = bounding_rect_int(a, b, c)
        low = low.max(Vec2i(0, 0))
        high = high.min(Vec2i(buffer.width, buffer.height))
        bounds = BBox(bounds.min.min(low), bounds.max.max(high))

        st.cur_shader = ShaderType.FRAGMENT
        for y in range(low.y, high.y):
            for x in range(low.x, high.x):
                weights = barycentric(a, b, c, x, y)
                if weights is None:
                    continue
                uv = mat3_mul_vec3(varying, weights)
                index = y * buffer.width + x
                z = int(vary(a.z, b.z, c.z, weights) * 255) & 0xFF
                if depth is not None and depth[index] > z:
                    continue
                color = fragment_shader(st, Vec2(uv.x, uv.y))
                if color is None:
                    continue
                buffer.pixels[index] = color
                if depth is not None:
                    depth[index] = z
        return bounds