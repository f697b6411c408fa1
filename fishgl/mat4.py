"""4x4 matrix operations on column-major float tuples (``m[column][row]``)."""

from __future__ import annotations

import math
from typing import Iterable, Sequence

from fishgl.util import Mat3, Mat4, Vec3, Vec4, Versor

MatLike = Sequence[Sequence[float]]


def _freeze(cols: Iterable[Iterable[float]]) -> Mat4:
    return tuple(tuple(float(x) for x in col) for col in cols)  # type: ignore[return-value]


def identity() -> Mat4:
    """The 4x4 identity matrix."""
    return _freeze((1.0 if r == c else 0.0 for r in range(4)) for c in range(4))


def zero() -> Mat4:
    """The 4x4 zero matrix."""
    return _freeze((0.0,) * 4 for _ in range(4))


def pick3(m: MatLike) -> Mat3:
    """Upper-left 3x3 part of a 4x4 matrix."""
    return tuple(tuple(m[c][r] for r in range(3)) for c in range(3))  # type: ignore[return-value]


def pick3t(m: MatLike) -> Mat3:
    """Upper-left 3x3 part of a 4x4 matrix, transposed."""
    return tuple(tuple(m[r][c] for r in range(3)) for c in range(3))  # type: ignore[return-value]


def ins3(m3: MatLike, dest: MatLike) -> Mat4:
    """Copy of dest with its upper-left 3x3 part replaced by m3."""
    return _freeze(
        (m3[c][r] if c < 3 and r < 3 else dest[c][r] for r in range(4))
        for c in range(4)
    )


def mul(m1: MatLike, m2: MatLike) -> Mat4:
    """Matrix product m1 * m2."""
    return _freeze(
        (sum(m1[k][r] * m2[c][k] for k in range(4)) for r in range(4))
        for c in range(4)
    )


def mul_n(matrices: Sequence[MatLike]) -> Mat4:
    """Product of two or more matrices, left to right."""
    if len(matrices) < 2:
        raise ValueError("at least two matrices are required")
    result = mul(matrices[0], matrices[1])
    for m in matrices[2:]:
        result = mul(result, m)
    return result


def mulv(m: MatLike, v: Sequence[float]) -> Vec4:
    """Matrix times column vector."""
    return tuple(  # type: ignore[return-value]
        m[0][r] * v[0] + m[1][r] * v[1] + m[2][r] * v[2] + m[3][r] * v[3]
        for r in range(4)
    )


def mulv3(m: MatLike, v: Sequence[float], last: float) -> Vec3:
    """Multiply (v, last) by m and keep the first three components."""
    res = mulv(m, (v[0], v[1], v[2], last))
    return (res[0], res[1], res[2])


def quat(m: MatLike) -> Versor:
    """Rotation part of an affine matrix as a quaternion (x, y, z, w)."""
    trace = m[0][0] + m[1][1] + m[2][2]
    if trace >= 0.0:
        r = math.sqrt(1.0 + trace)
        rinv = 0.5 / r
        return (
            rinv * (m[1][2] - m[2][1]),
            rinv * (m[2][0] - m[0][2]),
            rinv * (m[0][1] - m[1][0]),
            r * 0.5,
        )
    if m[0][0] >= m[1][1] and m[0][0] >= m[2][2]:
        r = math.sqrt(1.0 - m[1][1] - m[2][2] + m[0][0])
        rinv = 0.5 / r
        return (
            r * 0.5,
            rinv * (m[0][1] + m[1][0]),
            rinv * (m[0][2] + m[2][0]),
            rinv * (m[1][2] - m[2][1]),
        )
    if m[1][1] >= m[2][2]:
        r = math.sqrt(1.0 - m[0][0] - m[2][2] + m[1][1])
        rinv = 0.5 / r
        return (
            rinv * (m[0][1] + m[1][0]),
            r * 0.5,
            rinv * (m[1][2] + m[2][1]),
            rinv * (m[2][0] - m[0][2]),
        )
    r = math.sqrt(1.0 - m[0][0] - m[1][1] + m[2][2])
    rinv = 0.5 / r
    return (
        rinv * (m[0][2] + m[2][0]),
        rinv * (m[1][2] + m[2][1]),
        r * 0.5,
        rinv * (m[0][1] - m[1][0]),
    )


def transpose(m: MatLike) -> Mat4:
    """Transposed matrix."""
    return _freeze((m[r][c] for r in range(4)) for c in range(4))


def scale(m: MatLike, s: float) -> Mat4:
    """Every element multiplied by s."""
    return _freeze((x * s for x in col[:4]) for col in m[:4])


def det(m: MatLike) -> float:
    """Determinant."""
    (a, b, c, d), (e, f, g, h), (i, j, k, l), (mm, n, o, p) = (
        tuple(col[:4]) for col in m[:4]
    )
    t0 = k * p - o * l
    t1 = j * p - n * l
    t2 = j * o - n * k
    t3 = i * p - mm * l
    t4 = i * o - mm * k
    t5 = i * n - mm * j
    return (
        a * (f * t0 - g * t1 + h * t2)
        - b * (e * t0 - g * t3 + h * t4)
        + c * (e * t1 - f * t3 + h * t5)
        - d * (e * t2 - f * t4 + g * t5)
    )


def inv(m: MatLike) -> Mat4:
    """Inverse matrix; raises ValueError for a singular matrix."""
    (a, b, c, d), (e, f, g, h), (i, j, k, l), (mm, n, o, p) = (
        tuple(col[:4]) for col in m[:4]
    )
    dest = [[0.0] * 4 for _ in range(4)]

    t0 = k * p - o * l
    t1 = j * p - n * l
    t2 = j * o - n * k
    t3 = i * p - mm * l
    t4 = i * o - mm * k
    t5 = i * n - mm * j

    dest[0][0] = f * t0 - g * t1 + h * t2
    dest[1][0] = -(e * t0 - g * t3 + h * t4)
    dest[2][0] = e * t1 - f * t3 + h * t5
    dest[3][0] = -(e * t2 - f * t4 + g * t5)

    dest[0][1] = -(b * t0 - c * t1 + d * t2)
    dest[1][1] = a * t0 - c * t3 + d * t4
    dest[2][1] = -(a * t1 - b * t3 + d * t5)
    dest[3][1] = a * t2 - b * t4 + c * t5

    t0 = g * p - o * h
    t1 = f * p - n * h
    t2 = f * o - n * g
    t3 = e * p - mm * h
    t4 = e * o - mm * g
    t5 = e * n - mm * f

    dest[0][2] = b * t0 - c * t1 + d * t2
    dest[1][2] = -(a * t0 - c * t3 + d * t4)
    dest[2][2] = a * t1 - b * t3 + d * t5
    dest[3][2] = -(a * t2 - b * t4 + c * t5)

    t0 = g * l - k * h
    t1 = f * l - j * h
    t2 = f * k - j * g
    t3 = e * l - i * h
    t4 = e * k - i * g
    t5 = e * j - i * f

    dest[0][3] = -(b * t0 - c * t1 + d * t2)
    dest[1][3] = a * t0 - c * t3 + d * t4
    dest[2][3] = -(a * t1 - b * t3 + d * t5)
    dest[3][3] = a * t2 - b * t4 + c * t5

    determinant = a * dest[0][0] + b * dest[1][0] + c * dest[2][0] + d * dest[3][0]
    if determinant == 0.0:
        raise ValueError("matrix is singular")
    return scale(dest, 1.0 / determinant)


def swap_col(m: MatLike, col1: int, col2: int) -> Mat4:
    """Copy of m with two columns exchanged."""
    cols = [tuple(col[:4]) for col in m[:4]]
    cols[col1], cols[col2] = cols[col2], cols[col1]
    return _freeze(cols)


def swap_row(m: MatLike, row1: int, row2: int) -> Mat4:
    """Copy of m with two rows exchanged."""
    cols = [list(col[:4]) for col in m[:4]]
    for col in cols:
        col[row1], col[row2] = col[row2], col[row1]
    return _freeze(cols)