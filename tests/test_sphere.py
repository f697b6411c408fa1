import pytest

from fishgl import mat4, sphere, vec3

S1 = (0.0, 0.0, 0.0, 1.0)
S2 = (3.0, 4.0, 0.0, 2.0)


def test_radii_returns_fourth_component():
    assert sphere.radii(S2) == S2[3]


def test_transform_by_identity_keeps_sphere():
    assert sphere.transform(S2, mat4.identity()) == pytest.approx(S2)


def test_transform_translates_center_and_keeps_radius():
    t = (1.0, -2.0, 3.0)
    m = mat4.identity()[:3] + ((*t, 1.0),)
    moved = sphere.transform(S2, m)
    assert moved[:3] == pytest.approx(vec3.add(S2[:3], t))
    assert moved[3] == S2[3]


def test_merge_center_and_radius():
    merged = sphere.merge(S1, S2)
    assert merged[:3] == pytest.approx(vec3.center(S1, S2))
    assert merged[3] == pytest.approx(vec3.distance(S1, S2) + S1[3] + S2[3])


def test_merge_encloses_both_centers():
    merged = sphere.merge(S1, S2)
    assert sphere.contains_point(merged, S1[:3])
    assert sphere.contains_point(merged, S2[:3])


def test_merge_is_symmetric():
    assert sphere.merge(S1, S2) == pytest.approx(sphere.merge(S2, S1))


def test_intersects():
    assert sphere.intersects(S1, S2) is False
    touching = (3.0, 0.0, 0.0, 2.0)
    assert sphere.intersects(S1, touching) is True
    assert sphere.intersects(S2, S2) is True


def test_contains_point():
    assert sphere.contains_point(S1, (0.0, 0.0, 0.0)) is True
    assert sphere.contains_point(S1, (1.0, 0.0, 0.0)) is True
    assert sphere.contains_point(S1, (1.0, 1.0, 0.0)) is False