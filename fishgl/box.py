"""Axis-aligned bounding boxes stored as (min corner, max corner)."""

from __future__ import annotations

from typing import Sequence, Tuple

from fishgl import vec3
from fishgl.util import FLT_MAX, Vec3, maxf, minf, pow2

Box = Tuple[Vec3, Vec3]
BoxLike = Sequence[Sequence[float]]
MatLike = Sequence[Sequence[float]]


def transform(box: BoxLike, m: MatLike) -> Box:
    """Bounding box of box after applying the affine transform m."""
    xa = vec3.scale(m[0], box[0][0])
    xb = vec3.scale(m[0], box[1][0])
    ya = vec3.scale(m[1], box[0][1])
    yb = vec3.scale(m[1], box[1][1])
    za = vec3.scale(m[2], box[0][2])
    zb = vec3.scale(m[2], box[1][2])
    translation = vec3.from_vec4(m[3])

    low = vec3.add(vec3.minv(xa, xb), vec3.minv(ya, yb))
    low = vec3.add(vec3.add(low, vec3.minv(za, zb)), translation)

    high = vec3.add(vec3.maxv(xa, xb), vec3.maxv(ya, yb))
    high = vec3.add(vec3.add(high, vec3.maxv(za, zb)), translation)
    return (low, high)


def merge(box1: BoxLike, box2: BoxLike) -> Box:
    """Smallest box containing both boxes (both in the same space)."""
    return (vec3.minv(box1[0], box2[0]), vec3.maxv(box1[1], box2[1]))


def crop(box: BoxLike, crop_box: BoxLike) -> Box:
    """Part of box that lies inside crop_box."""
    return (vec3.maxv(box[0], crop_box[0]), vec3.minv(box[1], crop_box[1]))


def crop_until(box: BoxLike, crop_box: BoxLike, clamp_box: BoxLike) -> Box:
    """Crop box with crop_box, then grow the result to contain clamp_box."""
    return merge(clamp_box, crop(box, crop_box))


def frustum(box: BoxLike, planes: Sequence[Sequence[float]]) -> bool:
    """Whether the box intersects the volume bounded by the six frustum planes."""
    for p in planes[:6]:
        dp = (
            p[0] * box[1 if p[0] > 0.0 else 0][0]
            + p[1] * box[1 if p[1] > 0.0 else 0][1]
            + p[2] * box[1 if p[2] > 0.0 else 0][2]
        )
        if dp < -p[3]:
            return False
    return True


def invalidate() -> Box:
    """A box that contains nothing and grows to anything merged into it."""
    return ((FLT_MAX, FLT_MAX, FLT_MAX), (-FLT_MAX, -FLT_MAX, -FLT_MAX))


def is_valid(box: BoxLike) -> bool:
    """Whether the box has been given real bounds."""
    return max(box[0][:3]) != FLT_MAX and min(box[1][:3]) != -FLT_MAX


def size(box: BoxLike) -> float:
    """Distance between the min and max corners."""
    return vec3.distance(box[0], box[1])


def radius(box: BoxLike) -> float:
    """Radius of the sphere that surrounds the box."""
    return size(box) * 0.5


def center(box: BoxLike) -> Vec3:
    """Center point of the box."""
    return vec3.center(box[0], box[1])


def intersects_aabb(box: BoxLike, other: BoxLike) -> bool:
    """Whether two boxes intersect."""
    return all(
        box[0][i] <= other[1][i] and box[1][i] >= other[0][i] for i in range(3)
    )


def intersects_sphere(box: BoxLike, s: Sequence[float]) -> bool:
    """Solid box against solid sphere (center x, y, z, radius) test."""
    a = 1 if s[0] >= box[0][0] else 0
    b = 1 if s[1] >= box[0][1] else 0
    c = 1 if s[2] >= box[0][2] else 0
    dmin = pow2(s[0] - box[a][0]) + pow2(s[1] - box[b][1]) + pow2(s[2] - box[c][2])
    return dmin <= pow2(s[3])


def contains_point(box: BoxLike, point: Sequence[float]) -> bool:
    """Whether the point lies inside or on the box."""
    return all(box[0][i] <= point[i] <= box[1][i] for i in range(3))


def contains(box: BoxLike, other: BoxLike) -> bool:
    """Whether box fully contains other."""
    return all(
        box[0][i] <= other[0][i] and box[1][i] >= other[1][i] for i in range(3)
    )


__all__ = [
    "Box",
    "transform",
    "merge",
    "crop",
    "crop_until",
    "frustum",
    "invalidate",
    "is_valid",
    "size",
    "radius",
    "center",
    "intersects_aabb",
    "intersects_sphere",
    "contains_point",
    "contains",
    "minf",
    "maxf",
]