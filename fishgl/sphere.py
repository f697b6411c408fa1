"""Bounding spheres stored as (center x, center y, center z, radius)."""

from __future__ import annotations

from typing import Sequence

from fishgl import mat4, vec3
from fishgl.util import Vec4, maxf, pow2


def radii(s: Sequence[float]) -> float:
    """Radius of a sphere."""
    return s[3]


def transform(s: Sequence[float], m: Sequence[Sequence[float]]) -> Vec4:
    """Sphere with its center transformed by m; the radius is kept."""
    c = mat4.mulv3(m, s, 1.0)
    return (c[0], c[1], c[2], s[3])


def merge(s1: Sequence[float], s2: Sequence[float]) -> Vec4:
    """A sphere enclosing both spheres (both in the same space)."""
    r = vec3.distance(s1, s2) + s1[3] + s2[3]
    r = maxf(r, s1[3])
    r = maxf(r, s2[3])
    c = vec3.center(s1, s2)
    return (c[0], c[1], c[2], r)


def intersects(s1: Sequence[float], s2: Sequence[float]) -> bool:
    """Whether two spheres intersect."""
    return vec3.distance2(s1, s2) <= pow2(s1[3] + s2[3])


def contains_point(s: Sequence[float], point: Sequence[float]) -> bool:
    """Whether the point lies inside or on the sphere."""
    return vec3.distance2(point, s) <= s[3] * s[3]