import math

import pytest

from scenekit.vector3f import Vector3f


def test_immutable_operators_chain():
    result = (
        Vector3f(1.0, 2.0, 3.0)
        + Vector3f(1.0, 2.0, 3.0)
        - Vector3f(1.0, 2.0, 3.0) * Vector3f(1.0, 2.0, 3.0) * 1.0
    )
    assert result == Vector3f(2.0, 4.0, 6.0)


def test_immutable_methods_chain():
    result = (
        Vector3f(1.0, 2.0, 3.0)
        .add(Vector3f(1.0, 2.0, 3.0))
        .subtract(Vector3f(1.0, 2.0, 3.0))
        .cross(Vector3f(1.0, 2.0, 3.0))
        .scale(1.0)
        .normalize()
    )
    assert result == Vector3f(0.0, 0.0, 0.0)


def test_immutable_methods_leave_operands_unchanged():
    a = Vector3f(1.0, 2.0, 3.0)
    b = Vector3f(4.0, 5.0, 6.0)
    a.add(b)
    a.cross(b)
    a.scale(3.0)
    assert a == Vector3f(1.0, 2.0, 3.0)
    assert b == Vector3f(4.0, 5.0, 6.0)


def test_in_place_operators():
    vector = Vector3f(1.0, 2.0, 3.0)
    original = vector

    vector += Vector3f(1.0, 2.0, 3.0)
    assert vector == Vector3f(2.0, 4.0, 6.0)
    vector -= Vector3f(1.0, 2.0, 3.0)
    assert vector == Vector3f(1.0, 2.0, 3.0)
    vector *= Vector3f(1.0, 2.0, 3.0)
    assert vector == Vector3f(0.0, 0.0, 0.0)
    vector *= 1.0
    assert vector == Vector3f(0.0, 0.0, 0.0)
    assert vector is original


def test_converts_from_a_tuple():
    vector = Vector3f.from_tuple((1.0, 2.0, 3.0))
    assert (vector.x, vector.y, vector.z) == (1.0, 2.0, 3.0)


def test_from_tuple_rejects_wrong_length():
    with pytest.raises(ValueError):
        Vector3f.from_tuple((1.0, 2.0))


def test_assigns_values_from_a_tuple():
    vector = Vector3f(1.0, 2.0, 3.0)
    vector.assign_tuple((4.0, 5.0, 6.0))
    assert (vector.x, vector.y, vector.z) == (4.0, 5.0, 6.0)


def test_iterates_over_components():
    assert list(Vector3f(7.0, 8.0, 9.0)) == [7.0, 8.0, 9.0]


def test_default_is_zero():
    assert Vector3f() == Vector3f(0.0, 0.0, 0.0)


def test_adds_components():
    actual = Vector3f(1.0, 2.0, 3.0) + Vector3f(4.0, 5.0, 6.0)
    assert list(actual) == pytest.approx([5.0, 7.0, 9.0])


def test_subtracts_components():
    actual = Vector3f(1.0, 2.0, 3.0) - Vector3f(6.0, 5.0, 4.0)
    assert list(actual) == pytest.approx([-5.0, -3.0, -1.0])


def test_scales_components():
    actual = Vector3f(1.0, 2.0, 3.0) * 5.0
    assert list(actual) == pytest.approx([5.0, 10.0, 15.0])


def test_scales_by_integer():
    assert Vector3f(1.0, 2.0, 3.0) * 2 == Vector3f(2.0, 4.0, 6.0)


def test_calculates_the_cross_product():
    actual = Vector3f(1.0, 2.0, 3.0) * Vector3f(3.0, 0.0, 1.0)
    assert list(actual) == pytest.approx([2.0, 8.0, -6.0])


def test_cross_product_is_perpendicular():
    a = Vector3f(1.0, 2.0, 3.0)
    b = Vector3f(-4.0, 0.5, 2.0)
    c = a.cross(b)
    assert c.dot(a) == pytest.approx(0.0)
    assert c.dot(b) == pytest.approx(0.0)


def test_dot_product():
    assert Vector3f(1.0, 2.0, 3.0).dot(Vector3f(4.0, 5.0, 6.0)) == 32.0


def test_length():
    vector = Vector3f(2.0, 3.0, 6.0)
    assert vector.length_squared() == 49.0
    assert vector.length() == 7.0


def test_normalize_divides_by_length():
    normalized = Vector3f(2.0, 3.0, 6.0).normalize()
    assert list(normalized) == pytest.approx([2.0 / 7.0, 3.0 / 7.0, 6.0 / 7.0])


def test_normalize_tiny_vector_gives_zero():
    assert Vector3f(0.000001, 0.0, 0.0).normalize() == Vector3f(0.0, 0.0, 0.0)


def test_angle_matches_known_solution():
    u = Vector3f(3.0, 4.0, 0.0)
    v = Vector3f(5.0, -12.0, 0.0)
    assert u.angle(v) == pytest.approx(math.acos(-33.0 / 65.0))


def test_multiplying_by_unsupported_type_raises():
    with pytest.raises(TypeError):
        Vector3f(1.0, 2.0, 3.0) * "x"


def test_adding_unsupported_type_raises():
    with pytest.raises(TypeError):
        Vector3f(1.0, 2.0, 3.0) + 1.0