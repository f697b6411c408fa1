import pytest

from fishgl.fglmath import BBox, Color, Vec2, Vec2i, Vec3
from fishgl.renderer import (
    Buffer,
    DepthBuffer,
    PixelOrder,
    Renderer,
    ShaderType,
    barycentric,
)

RED = Color.from_rgb(255, 0, 0)
GREEN = Color.from_rgb(0, 255, 0)
BLUE = Color.from_rgb(0, 0, 255)

TRI = [Vec3(0, 0, 0), Vec3(8, 0, 0), Vec3(0, 8, 0)]
UVS = [Vec2(0, 0), Vec2(1, 0), Vec2(0, 1)]


def _renderer(color=RED):
    r = Renderer(10, 10, 32, 0, PixelOrder.RGBA)
    r.bind_shader(lambda state, v: v, ShaderType.VERTEX)
    r.bind_shader(lambda state, uv: color, ShaderType.FRAGMENT)
    r.begin_frame()
    return r


def test_barycentric_at_vertex():
    w = barycentric(TRI[0], TRI[1], TRI[2], 0, 0)
    assert w == Vec3(1.0, 0.0, 0.0)


def test_barycentric_weights_sum_to_one():
    w = barycentric(TRI[0], TRI[1], TRI[2], 2, 3)
    assert w is not None
    assert w.x + w.y + w.z == pytest.approx(1.0)


def test_barycentric_outside_and_degenerate():
    assert barycentric(TRI[0], TRI[1], TRI[2], 7, 7) is None
    line = [Vec3(0, 0, 0), Vec3(5, 5, 0), Vec3(9, 9, 0)]
    assert barycentric(*line, 1, 1) is None


def test_buffer_clear():
    buf = Buffer(3, 2)
    buf.clear(RED)
    assert all(p == RED for p in buf.pixels)


def test_buffer_clear_rect_fills_whole_buffer():
    buf = Buffer(3, 2)
    buf.clear_rect(GREEN, BBox(Vec2i(0, 0), Vec2i(1, 1)))
    assert all(p == GREEN for p in buf.pixels)


def test_buffer_pixel_count_mismatch():
    with pytest.raises(ValueError):
        Buffer(2, 2, [RED])


def test_draw_horizontal_line():
    buf = Buffer(8, 8)
    buf.draw_line(RED, 2, 3, 5, 3)
    for x in range(2, 6):
        assert buf[x, 3] == RED
    assert buf[6, 3] == Color()
    assert buf[1, 3] == Color()


def test_draw_steep_line_endpoints():
    buf = Buffer(8, 8)
    buf.draw_line(BLUE, 1, 0, 2, 7)
    assert buf[1, 0] == BLUE
    assert buf[2, 7] == BLUE


def test_draw_line_outside_draws_nothing():
    buf = Buffer(4, 4)
    buf.draw_line(RED, 10, 10, 20, 12)
    assert all(p == Color() for p in buf.pixels)


def test_blit_copies_rectangle():
    tex = Buffer(2, 2, [RED, GREEN, BLUE, RED])
    buf = Buffer(4, 4)
    buf.blit(tex, BBox(Vec2i(0, 0), Vec2i(2, 2)), Vec2i(1, 1))
    assert buf[1, 1] == tex[0, 0]
    assert buf[2, 1] == tex[1, 0]
    assert buf[1, 2] == tex[0, 1]
    assert buf[0, 0] == Color()


def test_depth_buffer_clear():
    depth = DepthBuffer(2, 2, bytearray(b"\x05\x06\x07\x08"))
    depth.clear()
    assert bytes(depth.values) == bytes(4)


def test_render_without_shaders_draws_nothing():
    r = Renderer(10, 10, 32, 0, PixelOrder.RGBA)
    r.begin_frame()
    start = r.state.render_bounds
    buf = Buffer(10, 10)
    bounds = r.render_triangles(buf, TRI, UVS)
    assert bounds == start
    assert all(p == Color() for p in buf.pixels)


def test_render_triangle_fills_inside_only():
    r = _renderer()
    buf = Buffer(10, 10)
    bounds = r.render_triangles(buf, TRI, UVS)
    assert buf[1, 1] == RED
    assert buf[7, 7] == Color()
    assert buf[9, 9] == Color()
    assert bounds == BBox(Vec2i(0, 0), Vec2i(8, 8))
    assert r.state.render_bounds == bounds


def test_render_uvs_interpolated_within_range():
    seen = []
    r = _renderer()
    r.bind_shader(lambda state, uv: seen.append(uv) or GREEN, ShaderType.FRAGMENT)
    r.render_triangles(Buffer(10, 10), TRI, UVS)
    assert seen
    assert all(0.0 <= uv.x <= 1.0 and 0.0 <= uv.y <= 1.0 for uv in seen)


def test_vertex_discard_skips_triangle():
    r = _renderer()
    r.bind_shader(lambda state, v: None if state.vert_num == 2 else v, ShaderType.VERTEX)
    buf = Buffer(10, 10)
    r.render_triangles(buf, TRI, UVS)
    assert all(p == Color() for p in buf.pixels)


def test_fragment_discard_leaves_pixels():
    r = _renderer()
    r.bind_shader(lambda state, uv: None, ShaderType.FRAGMENT)
    buf = Buffer(10, 10)
    r.render_triangles(buf, TRI, UVS)
    assert all(p == Color() for p in buf.pixels)


def test_backface_culling():
    reversed_tri = [TRI[0], TRI[2], TRI[1]]
    r = _renderer()
    buf = Buffer(10, 10)
    r.render_triangles(buf, reversed_tri, UVS)
    assert buf[1, 1] == RED

    r.state.enable_backface_culling = True
    culled = Buffer(10, 10)
    r.render_triangles(culled, reversed_tri, UVS)
    assert culled[1, 1] == Color()

    front = Buffer(10, 10)
    r.render_triangles(front, TRI, UVS)
    assert front[1, 1] == RED


def test_depth_test():
    def tri(z):
        return [Vec3(v.x, v.y, z) for v in TRI]

    r = _renderer(RED)
    depth = DepthBuffer(10, 10)
    r.bind_depth_buffer(depth)
    buf = Buffer(10, 10)
    r.render_triangles(buf, tri(0.5), UVS)
    assert depth.values[1 * 10 + 1] > 0

    r.bind_shader(lambda state, uv: GREEN, ShaderType.FRAGMENT)
    r.render_triangles(buf, tri(0.1), UVS)
    assert buf[1, 1] == RED

    r.bind_shader(lambda state, uv: BLUE, ShaderType.FRAGMENT)
    r.render_triangles(buf, tri(0.9), UVS)
    assert buf[1, 1] == BLUE

    r.clear_depth_buffer()
    assert bytes(depth.values) == bytes(100)


def test_vertex_count_must_be_multiple_of_three():
    r = _renderer()
    with pytest.raises(ValueError):
        r.render_triangles(Buffer(10, 10), TRI[:2], UVS[:2])


def test_bind_texture_slot_range():
    r = _renderer()
    tex = Buffer(1, 1)
    r.bind_texture(tex, 3)
    assert r.state.textures[3] is tex
    with pytest.raises(IndexError):
        r.bind_texture(tex, 4)


def test_display_copies_buffer_bytes():
    r = Renderer(2, 2, 32, 0, PixelOrder.RGBA)
    buf = Buffer(2, 2)
    buf.clear(RED)
    r.display(buf)
    data = buf.to_bytes()
    assert bytes(r.video_memory[: len(data)]) == data


def test_display_other_layout_is_noop():
    r = Renderer(2, 2, 16, 0, PixelOrder.RGBA)
    buf = Buffer(2, 2)
    buf.clear(RED)
    r.display(buf)
    assert bytes(r.video_memory) == bytes(len(r.video_memory))


def test_frame_bounds():
    r = Renderer(6, 4, 32, 0, PixelOrder.RGBA)
    r.begin_frame()
    assert r.state.render_bounds == BBox(Vec2i(6, 4), Vec2i(0, 0))
    elapsed = r.end_frame()
    assert elapsed >= 0
    assert r.state.last_render_bounds == r.state.render_bounds
    assert r.state.frame_time == elapsed