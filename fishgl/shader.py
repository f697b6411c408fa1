"""Texture sampling helpers for fragment shaders."""

from __future__ import annotations

from fishgl.fglmath import Color, Vec2
from fishgl.renderer import Buffer, RenderState, TextureWrap


def sample_texture(state: RenderState, texture: Buffer, x: int, y: int) -> Color:
    """Texel at (x, y), with out-of-range coordinates resolved by the wrap mode."""
    if not (0 <= x < texture.width and 0 <= y < texture.height):
        if state.texture_wrap is TextureWrap.BORDER_COLOR:
            return state.border_color
        if state.texture_wrap is not TextureWrap.CLAMP:
            return Color.from_rgb(255, 0, 0)
        x = min(max(x, 0), texture.width - 1)
        y = min(max(y, 0), texture.height - 1)
    return texture.pixels[y * texture.width + x]


def sample_texture_uv(state: RenderState, texture: Buffer, uv: Vec2) -> Color:
    """Texel at normalised coordinates uv; coordinates truncate toward zero."""
    return sample_texture(state, texture, int(uv.x * texture.width), int(uv.y * texture.height))