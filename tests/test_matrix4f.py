import math

import pytest

from scenekit.matrix4f import Matrix4f
from scenekit.vector3f import Vector3f

PI = math.pi
IDENTITY = Matrix4f.identity()


def approx(values):
    return pytest.approx(list(values), abs=1e-6)


def test_immutable_functions_chain():
    forward = (
        Matrix4f.identity()
        .x_rotate(PI / 2.0)
        .translate(1.0, 2.0, 3.0)
        .y_rotate(-PI / 2.0)
        .scale(4.0, 5.0, 6.0)
        .z_rotate(PI)
    )
    result = forward.inverse().multiply(IDENTITY) * IDENTITY
    assert list(forward * result) == approx(IDENTITY)


@pytest.mark.parametrize("factor, expected", [
    (IDENTITY, IDENTITY),
    (Matrix4f.translation(1.0, 2.0, 3.0), Matrix4f.translation(1.0, 2.0, 3.0)),
])
def test_in_place_multiplication_keeps_the_same_object(factor, expected):
    matrix = Matrix4f.identity()
    original = matrix
    matrix *= factor
    assert matrix is original
    assert matrix == expected


def test_it_multiplies_the_matrices():
    matrix = Matrix4f.identity()
    scaling = Matrix4f.scaling(1.0, 2.0, 3.0)
    for _ in range(3):
        matrix *= scaling
    assert list(matrix) == approx(Matrix4f.scaling(1.0, 8.0, 27.0))


def test_inverse_reverses_the_transforms():
    matrix = Matrix4f.identity().translate(1.0, 2.0, 3.0).x_rotate(PI / 3.0).scale(2.0, -5.0, 10.0)
    expected = Matrix4f.identity().scale(0.5, -0.2, 0.1).x_rotate(-PI / 3.0).translate(-1.0, -2.0, -3.0)
    assert list(matrix.inverse()) == approx(expected)


def test_inverse_of_singular_matrix_raises():
    with pytest.raises(ValueError):
        Matrix4f.scaling(0.0, 1.0, 1.0).inverse()


def test_position_returns_the_translation():
    assert Matrix4f.translation(1.0, 2.0, 3.0).position() == Vector3f(1.0, 2.0, 3.0)


def test_translations_compose_by_adding():
    combined = Matrix4f.translation(1.0, 2.0, 3.0) * Matrix4f.translation(4.0, 5.0, 6.0)
    assert combined == Matrix4f.translation(5.0, 7.0, 9.0)


def test_translate_matches_multiplying_by_translation():
    base = Matrix4f.scaling(2.0, 3.0, 4.0)
    assert base.translate(1.0, 1.0, 1.0) == base * Matrix4f.translation(1.0, 1.0, 1.0)


@pytest.mark.parametrize("rotation", [Matrix4f.x_rotation, Matrix4f.y_rotation, Matrix4f.z_rotation])
def test_opposite_rotations_cancel(rotation):
    assert list(rotation(0.7) * rotation(-0.7)) == approx(IDENTITY)


def test_z_rotation_quarter_turn_values():
    assert list(Matrix4f.z_rotation(PI / 2.0)) == approx([
        0.0, -1.0, 0.0, 0.0,
        1.0, 0.0, 0.0, 0.0,
        0.0, 0.0, 1.0, 0.0,
        0.0, 0.0, 0.0, 1.0,
    ])


def test_look_at_down_negative_z_from_origin_is_identity():
    matrix = Matrix4f.look_at(Vector3f(0.0, 0.0, 0.0), Vector3f(0.0, 0.0, -1.0), Vector3f(0.0, 1.0, 0.0))
    assert list(matrix) == approx(IDENTITY)


def test_look_at_keeps_camera_position():
    camera = Vector3f(3.0, 4.0, 5.0)
    matrix = Matrix4f.look_at(camera, Vector3f(0.0, 0.0, 0.0), Vector3f(0.0, 1.0, 0.0))
    assert matrix.position() == camera


def test_perspective_has_a_projective_last_row():
    matrix = Matrix4f.perspective(PI / 2.0, 16.0 / 9.0, 0.1, 100.0)
    assert list(matrix)[12:] == approx([0.0, 0.0, -1.0, 0.0])
    assert (matrix[0], matrix[5]) == pytest.approx((9.0 / 16.0, 1.0))


def test_orthographic_unit_cube():
    matrix = Matrix4f.orthographic(-1.0, 1.0, -1.0, 1.0, -1.0, 1.0)
    assert list(matrix) == approx(Matrix4f.scaling(1.0, 1.0, -1.0))


def test_assign_tuple_overwrites_values():
    matrix = Matrix4f.identity()
    matrix.assign_tuple(range(16))
    assert list(matrix) == [float(v) for v in range(16)]
    assert (matrix[15], len(matrix)) == (15.0, 16)


@pytest.mark.parametrize("build", [
    lambda: Matrix4f([1.0, 2.0, 3.0]),
    lambda: Matrix4f.identity().assign_tuple([1.0] * 15),
])
def test_wrong_number_of_values_is_rejected(build):
    with pytest.raises(ValueError):
        build()