"""Products and inverses specialised for affine 4x4 matrices (column-major)."""

from __future__ import annotations

from typing import Sequence

from fishgl.mat4 import pick3t
from fishgl.util import Mat4

MatLike = Sequence[Sequence[float]]


def _column(m1: MatLike, m2: MatLike, c: int, terms: int) -> tuple:
    return tuple(
        float(sum(m1[k][r] * m2[c][k] for k in range(terms))) for r in range(4)
    )


def mul(m1: MatLike, m2: MatLike) -> Mat4:
    """Product m1 * m2 where both are affine (last row 0, 0, 0, w)."""
    return (
        _column(m1, m2, 0, 3),
        _column(m1, m2, 1, 3),
        _column(m1, m2, 2, 3),
        _column(m1, m2, 3, 4),
    )


def mul_rot(m1: MatLike, m2: MatLike) -> Mat4:
    """Product m1 * m2 where m2 holds only a rotation (no translation)."""
    return (
        _column(m1, m2, 0, 3),
        _column(m1, m2, 1, 3),
        _column(m1, m2, 2, 3),
        tuple(float(x) for x in m1[3][:4]),
    )


def inv_tr(m: MatLike) -> Mat4:
    """Inverse of an orthonormal rotation plus translation (rigid-body) matrix."""
    r = pick3t(m)
    pos = m[3]
    t = tuple(
        -(r[0][i] * pos[0] + r[1][i] * pos[1] + r[2][i] * pos[2]) for i in range(3)
    )
    return (
        (float(r[0][0]), float(r[0][1]), float(r[0][2]), float(m[0][3])),
        (float(r[1][0]), float(r[1][1]), float(r[1][2]), float(m[1][3])),
        (float(r[2][0]), float(r[2][1]), float(r[2][2]), float(m[2][3])),
        (float(t[0]), float(t[1]), float(t[2]), float(m[3][3])),
    )