import math

import pytest

from softraster.vec4 import Vec4


def test_default_is_origin_point():
    assert Vec4() == Vec4(0.0, 0.0, 0.0, 1.0)


def test_index_round_trip():
    v = Vec4()
    for i, value in enumerate((1.5, -2.0, 3.25, 0.5)):
        v[i] = value
    assert [v[i] for i in range(4)] == [1.5, -2.0, 3.25, 0.5]
    assert list(v) == [1.5, -2.0, 3.25, 0.5]


@pytest.mark.parametrize("index", [4, -1, 10])
def test_index_out_of_range(index):
    with pytest.raises(IndexError):
        Vec4()[index]


def test_scalar_multiplication_scales_all_components():
    assert Vec4(1, 2, 3, 4) * 2 == Vec4(2, 4, 6, 8)
    assert 2 * Vec4(1, 2, 3, 4) == Vec4(1, 2, 3, 4) * 2


def test_add_and_sub_zero_w():
    a = Vec4(1, 2, 3, 1)
    b = Vec4(4, 5, 6, 1)
    assert (a + b).w == 0.0
    assert (a - b).w == 0.0
    back = (a + b) - b
    assert (back.x, back.y, back.z) == (a.x, a.y, a.z)


def test_cross_of_axes():
    assert Vec4.cross(Vec4(1, 0, 0, 0), Vec4(0, 1, 0, 0)) == Vec4(0, 0, 1, 0)


def test_cross_is_orthogonal_and_anticommutative():
    a = Vec4(1.5, -2.0, 0.5, 0)
    b = Vec4(0.25, 3.0, -1.0, 0)
    c = Vec4.cross(a, b)
    assert math.isclose(Vec4.dot(c, a), 0.0, abs_tol=1e-12)
    assert math.isclose(Vec4.dot(c, b), 0.0, abs_tol=1e-12)
    d = Vec4.cross(b, a)
    assert (c.x, c.y, c.z) == (-d.x, -d.y, -d.z)


def test_dot_ignores_w_and_is_symmetric():
    a = Vec4(1, 2, 3, 100)
    b = Vec4(4, 5, 6, -7)
    assert Vec4.dot(a, b) == Vec4.dot(b, a)
    assert Vec4.dot(a, b) == Vec4.dot(Vec4(1, 2, 3, 0), Vec4(4, 5, 6, 0))


def test_normalise_gives_unit_length_and_keeps_w():
    v = Vec4(3.0, -4.0, 12.0, 0.75)
    v.normalise()
    assert math.isclose(Vec4.dot(v, v), 1.0)
    assert v.w == 0.75


def test_normalise_zero_vector_raises():
    with pytest.raises(ZeroDivisionError):
        Vec4(0, 0, 0, 1).normalise()


def test_divide_w_undoes_homogeneous_scaling():
    v = Vec4(1.0, 2.0, 3.0, 1.0) * 2.5
    v.divide_w()
    assert v == Vec4(1.0, 2.0, 3.0, 1.0)


def test_str_is_tab_separated():
    assert str(Vec4(1, 2.5, -3, 1)) == "1\t2.5\t-3\t1"