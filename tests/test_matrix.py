import math
from itertools import product

import pytest

from softraster.matrix import Matrix
from softraster.vec4 import Vec4

_CELLS = list(product(range(4), repeat=2))
_IDENTITY_VALUES = [1.0 if r == c else 0.0 for r, c in _CELLS]


def _values(m):
    return [m[r, c] for r, c in _CELLS]


def _close(a, b, tol=1e-9):
    return all(math.isclose(a[r, c], b[r, c], abs_tol=tol) for r, c in _CELLS)


def test_default_and_identity_agree():
    assert Matrix() == Matrix.identity()
    assert Matrix()[2, 2] == 1.0
    assert Matrix()[0, 3] == 0.0


def test_element_round_trip():
    m = Matrix()
    m[1, 2] = 7.5
    assert m[1, 2] == 7.5


def test_bad_index_and_size():
    with pytest.raises(IndexError):
        Matrix()[4, 0]
    with pytest.raises(ValueError):
        Matrix([1.0, 2.0])


def test_identity_leaves_vector_and_matrix():
    v = Vec4(1.5, -2.0, 3.0, 1.0)
    assert Matrix.identity() * v == v
    m = Matrix.rotate_xyz(0.3, 0.2, 0.1)
    assert Matrix.identity() * m == m
    assert m * Matrix.identity() == m


def test_translation_moves_points_not_directions():
    t = Matrix.translation(1.0, 2.0, 3.0)
    assert t * Vec4(0, 0, 0, 1) == Vec4(1.0, 2.0, 3.0, 1.0)
    assert t * Vec4(4, 5, 6, 0) == Vec4(4, 5, 6, 0)


def test_translation_inverse():
    assert Matrix.translation(1, 2, 3) * Matrix.translation(-1, -2, -3) == Matrix.identity()


@pytest.mark.parametrize("make", [Matrix.rotate_x, Matrix.rotate_y, Matrix.rotate_z])
def test_rotation_inverse_and_length(make):
    assert _close(make(0.7) * make(-0.7), Matrix.identity())
    v = Vec4(1.0, -2.0, 3.0, 0.0)
    r = make(1.1) * v
    assert math.isclose(Vec4.dot(r, r), Vec4.dot(v, v))


@pytest.mark.parametrize("make", [Matrix.rotate_x, Matrix.rotate_y, Matrix.rotate_z])
def test_full_turn_is_identity(make):
    result = make(2 * math.pi)
    assert _values(result) == pytest.approx(_IDENTITY_VALUES, abs=1e-9)


def test_rotate_xyz_is_composition():
    expected = Matrix.rotate_x(0.1) * Matrix.rotate_y(0.2) * Matrix.rotate_z(0.3)
    assert Matrix.rotate_xyz(0.1, 0.2, 0.3) == expected


def test_multiplication_is_associative():
    a = Matrix.rotate_x(0.4)
    b = Matrix.translation(1, -1, 2)
    c = Matrix.rotate_z(-0.9)
    left = _values((a * b) * c)
    right = _values(a * (b * c))
    assert left == pytest.approx(right, abs=1e-9)
    assert left[3] == pytest.approx(1.0)


def test_scale_minimum():
    assert Matrix.scale(0.0)[0, 0] == 0.01
    m = Matrix.scale(2.0)
    assert (m[0, 0], m[1, 1], m[2, 2], m[3, 3]) == (2.0, 2.0, 2.0, 1.0)


def test_perspective_depth_range():
    near, far = 0.1, 100.0
    p = Matrix.perspective(math.pi / 2, 4.0 / 3.0, near, far)
    assert p[3, 2] == -1.0
    assert math.isclose(p[0, 0] * 4.0 / 3.0, p[1, 1])
    at_near = p * Vec4(0, 0, -near, 1)
    at_near.divide_w()
    at_far = p * Vec4(0, 0, -far, 1)
    at_far.divide_w()
    assert math.isclose(at_near.z, 0.0, abs_tol=1e-9)
    assert math.isclose(at_far.z, 1.0)


def test_str_has_four_tabbed_rows():
    lines = str(Matrix()).split("\n")
    assert len(lines) == 4
    assert all(line.count("\t") == 4 for line in lines)