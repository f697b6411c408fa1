"""Scalar helpers and shared vector/matrix type aliases."""

from __future__ import annotations

import math
from typing import Sequence, Tuple

Vec2 = Tuple[float, float]
Vec3 = Tuple[float, float, float]
Vec4 = Tuple[float, float, float, float]
IVec3 = Tuple[int, int, int]
Mat3 = Tuple[Vec3, Vec3, Vec3]
Mat4 = Tuple[Vec4, Vec4, Vec4, Vec4]
Versor = Vec4

VecLike = Sequence[float]

PI = math.pi
PI_2 = math.pi / 2
PI_4 = math.pi / 4

FLT_EPSILON = 1.1920928955078125e-07
FLT_MAX = 3.4028234663852886e38


def sign(val: int) -> int:
    """Sign of an integer as +1, -1 or 0."""
    return (val > 0) - (val < 0)


def signf(val: float) -> float:
    """Sign of a float as +1.0, -1.0 or 0.0 (0.0 for zero and NaN)."""
    return float((val > 0.0) - (val < 0.0))


def rad(deg: float) -> float:
    """Convert degrees to radians."""
    return deg * PI / 180.0


def deg(rad: float) -> float:
    """Convert radians to degrees."""
    return rad * 180.0 / PI


def pow2(x: float) -> float:
    """Return x squared."""
    return x * x


def minf(a: float, b: float) -> float:
    """Smaller of two values; returns b when they do not compare less."""
    return a if a < b else b


def maxf(a: float, b: float) -> float:
    """Larger of two values; returns b when they do not compare greater."""
    return a if a > b else b


def clamp(val: float, min_val: float, max_val: float) -> float:
    """Clamp val into [min_val, max_val]."""
    return minf(maxf(val, min_val), max_val)


def clamp_zo(val: float) -> float:
    """Clamp val into [0, 1]."""
    return clamp(val, 0.0, 1.0)


def lerp(from_: float, to: float, t: float) -> float:
    """Linear interpolation with t clamped to [0, 1]."""
    return from_ + clamp_zo(t) * (to - from_)


def eq(a: float, b: float) -> bool:
    """Whether two floats are equal within single-precision epsilon."""
    return abs(a - b) <= FLT_EPSILON


def percent(from_: float, to: float, current: float) -> float:
    """Fraction of current between from_ and to; 1.0 when the range is empty."""
    t = to - from_
    if t == 0.0:
        return 1.0
    return (current - from_) / t


def percentc(from_: float, to: float, current: float) -> float:
    """Fraction of current between from_ and to, clamped to [0, 1]."""
    return clamp(percent(from_, to, current), 0.0, 1.0)