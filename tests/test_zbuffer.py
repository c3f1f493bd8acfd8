import pytest

from softraster.zbuffer import ZBuffer


def test_set_get_round_trip_and_independence():
    zb = ZBuffer(4, 3)
    zb[2, 1] = 0.25
    assert zb[2, 1] == 0.25
    assert zb[1, 2] != 0.25
    assert zb[3, 2] == zb[0, 0]


def test_clear_resets_to_far_depth():
    zb = ZBuffer(3, 2)
    zb[0, 0] = 0.5
    zb[2, 1] = 0.125
    zb.clear()
    assert all(zb[x, y] == 1.0 for x in range(3) for y in range(2))


@pytest.mark.parametrize("key", [(4, 0), (0, 3), (-1, 0), (0, -1)])
def test_out_of_bounds(key):
    zb = ZBuffer(4, 3)
    zb.clear()
    with pytest.raises(IndexError):
        zb[key]
    with pytest.raises(IndexError):
        zb[key] = 0.0
    assert all(zb[x, y] == 1.0 for x in range(4) for y in range(3))


def test_create_resizes():
    zb = ZBuffer(2, 2)
    zb.create(5, 7)
    assert (zb.width, zb.height) == (5, 7)
    zb[4, 6] = 0.75
    assert zb[4, 6] == 0.75


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        ZBuffer(-1, 4)


def test_empty_buffer_has_no_cells():
    zb = ZBuffer()
    assert (zb.width, zb.height) == (0, 0)
    with pytest.raises(IndexError):
        zb[0, 0]