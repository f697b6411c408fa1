from fishgl.fglmath import Color, Vec2
from fishgl.renderer import Buffer, PixelOrder, Renderer, TextureWrap
from fishgl.shader import sample_texture, sample_texture_uv

RED = Color.from_rgb(255, 0, 0)
GREEN = Color.from_rgb(0, 255, 0)
BLUE = Color.from_rgb(0, 0, 255)
GREY = Color.from_rgb(128, 128, 128)


def _setup():
    state = Renderer(4, 4, 32, 0, PixelOrder.RGBA).state
    tex = Buffer(2, 2, [RED, GREEN, BLUE, GREY])
    return state, tex


def test_in_bounds():
    state, tex = _setup()
    assert sample_texture(state, tex, 1, 0) == GREEN
    assert sample_texture(state, tex, 0, 1) == BLUE


def test_border_color_default():
    state, tex = _setup()
    assert sample_texture(state, tex, -1, 0) == state.border_color
    assert state.border_color == Color.from_rgb(255, 255, 255)


def test_border_color_custom():
    state, tex = _setup()
    state.border_color = GREY
    assert sample_texture(state, tex, 5, 5) == GREY


def test_clamp():
    state, tex = _setup()
    state.texture_wrap = TextureWrap.CLAMP
    assert sample_texture(state, tex, -3, -3) == RED
    assert sample_texture(state, tex, 9, 0) == GREEN
    assert sample_texture(state, tex, 9, 9) == GREY


def test_unsupported_wrap_returns_red():
    state, tex = _setup()
    state.texture_wrap = TextureWrap.REPEAT
    assert sample_texture(state, tex, 2, 0) == Color.from_rgb(255, 0, 0)
    assert sample_texture(state, tex, 1, 1) == GREY


def test_uv_sampling():
    state, tex = _setup()
    assert sample_texture_uv(state, tex, Vec2(0.0, 0.0)) == RED
    assert sample_texture_uv(state, tex, Vec2(0.99, 0.99)) == GREY
    assert sample_texture_uv(state, tex, Vec2(0.6, 0.2)) == GREEN


def test_uv_outside_uses_border():
    state, tex = _setup()
    assert sample_texture_uv(state, tex, Vec2(1.0, 0.0)) == state.border_color