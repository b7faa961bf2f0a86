import pytest

from mmobattle.vec3 import (
    Vec3,
    distance_between_points,
    distance_between_vecs,
    make_hud_string,
)


def test_default_vec_is_zero():
    assert Vec3() == Vec3(0, 0, 0)


def test_points_distance_pinned():
    assert distance_between_points((1, 5), (4, 2)) == (3, 3)


@pytest.mark.parametrize(
    "a, b", [((0, 0), (7, -3)), ((-4, 9), (2, 2)), ((5, 5), (5, 5))]
)
def test_points_distance_is_symmetric_and_non_negative(a, b):
    d = distance_between_points(a, b)
    assert d == distance_between_points(b, a)
    assert all(part >= 0 for part in d)


def test_points_distance_to_self_is_zero():
    assert distance_between_points((3, -8), (3, -8)) == (0, 0)


def test_vec_distance_is_signed_difference():
    a = Vec3(3, -2, 10)
    b = Vec3(1, 4, 10)
    d = distance_between_vecs(a, b)
    assert d + b == a
    assert distance_between_vecs(b, a) == -d


def test_vec_distance_to_self_is_zero():
    v = Vec3(9, 8, 7)
    assert distance_between_vecs(v, v) == Vec3()


def test_hud_string_label_and_value():
    assert make_hud_string("HP", "100") == "HP: 100"


@pytest.mark.parametrize(
    "label, value, expected",
    [("HP", "", "HP"), ("", "42", "42"), ("", "", "")],
)
def test_hud_string_missing_parts(label, value, expected):
    assert make_hud_string(label, value) == expected