import math

import pytest

from fishgl import affine, mat4


def _flat(m):
    return [x for col in m for x in col]


def _rigid(angle, tx, ty, tz):
    c, s = math.cos(angle), math.sin(angle)
    return (
        (c, s, 0.0, 0.0),
        (-s, c, 0.0, 0.0),
        (0.0, 0.0, 1.0, 0.0),
        (tx, ty, tz, 1.0),
    )


def _scaled(sx, sy, sz, tx, ty, tz):
    return (
        (sx, 0.0, 0.0, 0.0),
        (0.0, sy, 0.0, 0.0),
        (0.0, 0.0, sz, 0.0),
        (tx, ty, tz, 1.0),
    )


def test_mul_matches_general_product_for_affine():
    a = _rigid(0.7, 1.0, 2.0, 3.0)
    b = _scaled(2.0, 3.0, 4.0, -1.0, 5.0, 0.5)
    result = affine.mul(a, b)
    assert _flat(result) == pytest.approx(_flat(mat4.mul(a, b)), abs=1e-9)


def test_mul_identity_is_neutral():
    a = _rigid(1.1, 4.0, -2.0, 7.0)
    right = affine.mul(a, mat4.identity())
    left = affine.mul(mat4.identity(), a)
    assert _flat(right) == pytest.approx(_flat(a), abs=1e-9)
    assert _flat(left) == pytest.approx(_flat(a), abs=1e-9)


def test_mul_rot_matches_general_product_for_rotation():
    a = _scaled(2.0, 3.0, 4.0, -1.0, 5.0, 0.5)
    rot = _rigid(0.3, 0.0, 0.0, 0.0)
    result = affine.mul_rot(a, rot)
    assert _flat(result) == pytest.approx(_flat(mat4.mul(a, rot)), abs=1e-9)


def test_mul_rot_keeps_translation_column_of_first():
    a = _rigid(0.4, 9.0, 8.0, 7.0)
    rot = _rigid(1.2, 0.0, 0.0, 0.0)
    assert affine.mul_rot(a, rot)[3] == a[3]


def test_inv_tr_is_inverse_of_rigid_transform():
    m = _rigid(0.9, 3.0, -4.0, 2.0)
    inverse = affine.inv_tr(m)
    product = mat4.mul(m, inverse)
    assert _flat(product) == pytest.approx(_flat(mat4.identity()), abs=1e-9)
    assert _flat(inverse) == pytest.approx(_flat(mat4.inv(m)), abs=1e-9)


def test_inv_tr_of_pure_translation_negates_it():
    m = _rigid(0.0, 1.5, -2.5, 3.0)
    inverse = affine.inv_tr(m)
    assert inverse[3] == pytest.approx((-1.5, 2.5, -3.0, 1.0))


def test_inv_tr_twice_round_trips():
    m = _rigid(2.3, -7.0, 0.25, 11.0)
    twice = affine.inv_tr(affine.inv_tr(m))
    assert _flat(twice) == pytest.approx(_flat(m), abs=1e-9)