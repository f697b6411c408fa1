"""Three-component vector operations on float tuples."""

from __future__ import annotations

import math
from typing import Sequence

from fishgl.util import Vec3, clamp_zo, maxf, minf, pow2
from fishgl.util import clamp as _clamp_scalar

XUP: Vec3 = (1.0, 0.0, 0.0)
YUP: Vec3 = (0.0, 1.0, 0.0)
ZUP: Vec3 = (0.0, 0.0, 1.0)


def from_vec4(v4: Sequence[float]) -> Vec3:
    """First three components of a 4-vector."""
    return (v4[0], v4[1], v4[2])


def zero() -> Vec3:
    """The zero vector."""
    return (0.0, 0.0, 0.0)


def one() -> Vec3:
    """The vector of ones."""
    return (1.0, 1.0, 1.0)


def dot(a: Sequence[float], b: Sequence[float]) -> float:
    """Dot product."""
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def cross(a: Sequence[float], b: Sequence[float]) -> Vec3:
    """Cross product."""
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def norm2(v: Sequence[float]) -> float:
    """Squared length."""
    return dot(v, v)


def norm(v: Sequence[float]) -> float:
    """Length."""
    return math.sqrt(norm2(v))


def add(a: Sequence[float], b: Sequence[float]) -> Vec3:
    return (a[0] + b[0], a[1] + b[1], a[2] + b[2])


def adds(v: Sequence[float], s: float) -> Vec3:
    return (v[0] + s, v[1] + s, v[2] + s)


def sub(a: Sequence[float], b: Sequence[float]) -> Vec3:
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2])


def subs(v: Sequence[float], s: float) -> Vec3:
    return (v[0] - s, v[1] - s, v[2] - s)


def mul(a: Sequence[float], b: Sequence[float]) -> Vec3:
    """Component-wise product."""
    return (a[0] * b[0], a[1] * b[1], a[2] * b[2])


def scale(v: Sequence[float], s: float) -> Vec3:
    return (v[0] * s, v[1] * s, v[2] * s)


def scale_as(v: Sequence[float], s: float) -> Vec3:
    """Unit vector of v scaled to length s; zero for a zero vector."""
    n = norm(v)
    if n == 0.0:
        return zero()
    return scale(v, s / n)


def div(a: Sequence[float], b: Sequence[float]) -> Vec3:
    """Component-wise quotient."""
    return (a[0] / b[0], a[1] / b[1], a[2] / b[2])


def divs(v: Sequence[float], s: float) -> Vec3:
    return (v[0] / s, v[1] / s, v[2] / s)


def addadd(a: Sequence[float], b: Sequence[float], dest: Sequence[float]) -> Vec3:
    """dest + (a + b)."""
    return tuple(d + x + y for d, x, y in zip(dest[:3], a, b))  # type: ignore[return-value]


def subadd(a: Sequence[float], b: Sequence[float], dest: Sequence[float]) -> Vec3:
    """dest + (a - b)."""
    return tuple(d + (x - y) for d, x, y in zip(dest[:3], a, b))  # type: ignore[return-value]


def muladd(a: Sequence[float], b: Sequence[float], dest: Sequence[float]) -> Vec3:
    """dest + a * b (component-wise)."""
    return tuple(d + x * y for d, x, y in zip(dest[:3], a, b))  # type: ignore[return-value]


def muladds(a: Sequence[float], s: float, dest: Sequence[float]) -> Vec3:
    """dest + a * s."""
    return tuple(d + x * s for d, x in zip(dest[:3], a))  # type: ignore[return-value]


def flipsign(v: Sequence[float]) -> Vec3:
    return (-v[0], -v[1], -v[2])


def normalize(v: Sequence[float]) -> Vec3:
    """Unit vector in the direction of v; zero for a zero vector."""
    n = norm(v)
    if n == 0.0:
        return zero()
    return scale(v, 1.0 / n)


def angle(v1: Sequence[float], v2: Sequence[float]) -> float:
    """Angle between two vectors in radians."""
    inv = 1.0 / (norm(v1) * norm(v2))
    return math.acos(max(-1.0, min(1.0, dot(v1, v2) * inv)))


def rotate(v: Sequence[float], angle: float, axis: Sequence[float]) -> Vec3:
    """Rotate v around axis by angle (Rodrigues' formula, right hand)."""
    c = math.cos(angle)
    s = math.sin(angle)
    k = normalize(axis)
    v1 = add(scale(v, c), scale(cross(k, v), s))
    return add(v1, scale(k, dot(k, v) * (1.0 - c)))


def _normalize4(v: Sequence[float]) -> tuple:
    n = math.sqrt(sum(x * x for x in v))
    if n == 0.0:
        return (0.0, 0.0, 0.0, 0.0)
    return tuple(x / n for x in v)


def _apply_axes(axes: Sequence[Sequence[float]], v: Sequence[float]) -> Vec3:
    x, y, z = axes
    return (
        x[0] * v[0] + y[0] * v[1] + z[0] * v[2],
        x[1] * v[0] + y[1] * v[1] + z[1] * v[2],
        x[2] * v[0] + y[2] * v[1] + z[2] * v[2],
    )


def rotate_m4(m: Sequence[Sequence[float]], v: Sequence[float]) -> Vec3:
    """Apply the rotation part of a column-major 4x4 matrix to v."""
    axes = [_normalize4(m[i]) for i in range(3)]
    return _apply_axes(axes, v)


def rotate_m3(m: Sequence[Sequence[float]], v: Sequence[float]) -> Vec3:
    """Apply a column-major 3x3 rotation matrix to v."""
    axes = [_normalize4((*m[i][:3], 0.0)) for i in range(3)]
    return _apply_axes(axes, v)


def proj(a: Sequence[float], b: Sequence[float]) -> Vec3:
    """Projection of a onto b."""
    return scale(b, dot(a, b) / norm2(b))


def center(v1: Sequence[float], v2: Sequence[float]) -> Vec3:
    """Midpoint of two points."""
    return scale(add(v1, v2), 0.5)


def distance2(v1: Sequence[float], v2: Sequence[float]) -> float:
    """Squared distance between two points."""
    return pow2(v2[0] - v1[0]) + pow2(v2[1] - v1[1]) + pow2(v2[2] - v1[2])


def distance(v1: Sequence[float], v2: Sequence[float]) -> float:
    return math.sqrt(distance2(v1, v2))


def maxv(v1: Sequence[float], v2: Sequence[float]) -> Vec3:
    return (maxf(v1[0], v2[0]), maxf(v1[1], v2[1]), maxf(v1[2], v2[2]))


def minv(v1: Sequence[float], v2: Sequence[float]) -> Vec3:
    return (minf(v1[0], v2[0]), minf(v1[1], v2[1]), minf(v1[2], v2[2]))


def ortho(v: Sequence[float]) -> Vec3:
    """A vector perpendicular to v."""
    return (v[1] - v[2], v[2] - v[0], v[0] - v[1])


def clamp(v: Sequence[float], min_val: float, max_val: float) -> Vec3:
    """Clamp each component into [min_val, max_val]."""
    return (
        _clamp_scalar(v[0], min_val, max_val),
        _clamp_scalar(v[1], min_val, max_val),
        _clamp_scalar(v[2], min_val, max_val),
    )


def lerp(from_: Sequence[float], to: Sequence[float], t: float) -> Vec3:
    """Linear interpolation between two vectors with t clamped to [0, 1]."""
    s = clamp_zo(t)
    return add(from_, scale(sub(to, from_), s))