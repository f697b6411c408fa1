"""View frustum corners, center and bounds from clip-space coordinates."""

from __future__ import annotations

import math
from enum import IntEnum
from typing import Sequence, Tuple

from fishgl import mat4, vec3
from fishgl.util import FLT_MAX, Vec3, Vec4, maxf, minf

MatLike = Sequence[Sequence[float]]


class Corner(IntEnum):
    """Index of a frustum corner; a far corner is its near corner plus 4."""

    LBN = 0
    LTN = 1
    RTN = 2
    RBN = 3
    LBF = 4
    LTF = 5
    RTF = 6
    RBF = 7


_CLIP_SPACE_CORNERS: Tuple[Vec4, ...] = (
    (-1.0, -1.0, -1.0, 1.0),
    (-1.0, 1.0, -1.0, 1.0),
    (1.0, 1.0, -1.0, 1.0),
    (1.0, -1.0, -1.0, 1.0),
    (-1.0, -1.0, 1.0, 1.0),
    (-1.0, 1.0, 1.0, 1.0),
    (1.0, 1.0, 1.0, 1.0),
    (1.0, -1.0, 1.0, 1.0),
)


def corners(inv_mat: MatLike) -> Tuple[Vec4, ...]:
    """The eight frustum corners, in Corner order, for an inverse view-projection."""
    result = []
    for cs in _CLIP_SPACE_CORNERS:
        c = mat4.mulv(inv_mat, cs)
        w = 1.0 / c[3]
        result.append(tuple(x * w for x in c))
    return tuple(result)  # type: ignore[return-value]


def center(corners: Sequence[Sequence[float]]) -> Vec4:
    """Average of the eight corners."""
    total = [0.0, 0.0, 0.0, 0.0]
    for c in corners[:8]:
        for i in range(4):
            total[i] += c[i]
    return tuple(x * 0.125 for x in total)  # type: ignore[return-value]


def box(corners: Sequence[Sequence[float]], m: MatLike) -> Tuple[Vec3, Vec3]:
    """Bounding box of the corners after transforming them by m."""
    low = [FLT_MAX] * 3
    high = [-FLT_MAX] * 3
    for corner in corners[:8]:
        v = mat4.mulv(m, corner)
        for i in range(3):
            low[i] = minf(low[i], v[i])
            high[i] = maxf(high[i], v[i])
    return (tuple(low), tuple(high))  # type: ignore[return-value]


def _scale_as4(v: Sequence[float], s: float) -> Vec4:
    n = math.sqrt(sum(x * x for x in v))
    if n == 0.0:
        return (0.0, 0.0, 0.0, 0.0)
    f = s / n
    return tuple(x * f for x in v)  # type: ignore[return-value]


def corners_at(
    corners: Sequence[Sequence[float]], split_dist: float, far_dist: float
) -> Tuple[Vec4, Vec4, Vec4, Vec4]:
    """Corners (LB, LT, RT, RB) of the plane at split_dist between near and far."""
    dist = vec3.distance(corners[Corner.RTF], corners[Corner.RTN])
    sc = dist * (split_dist / far_dist)
    result = []
    for near, far in (
        (Corner.LBN, Corner.LBF),
        (Corner.LTN, Corner.LTF),
        (Corner.RTN, Corner.RTF),
        (Corner.RBN, Corner.RBF),
    ):
        direction = tuple(f - n for f, n in zip(corners[far][:4], corners[near][:4]))
        step = _scale_as4(direction, sc)
        result.append(tuple(n + d for n, d in zip(corners[near][:4], step)))
    return tuple(result)  # type: ignore[return-value]