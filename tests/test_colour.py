import pytest

from softraster.colour import Channel, Colour


def test_default_is_black():
    assert Colour() == Colour(0.0, 0.0, 0.0)


def test_channel_access_round_trip():
    c = Colour()
    c[Channel.RED] = 0.25
    c[Channel.GREEN] = 0.5
    c[Channel.BLUE] = 0.75
    assert (c.r, c.g, c.b) == (0.25, 0.5, 0.75)
    assert [c[ch] for ch in Channel] == [0.25, 0.5, 0.75]


def test_invalid_channel_raises():
    with pytest.raises(IndexError):
        Colour()[3]


def test_multiply_by_white_is_identity():
    c = Colour(0.25, 0.5, 0.75)
    assert c * Colour(1.0, 1.0, 1.0) == c


def test_multiply_by_scalar():
    c = Colour(0.25, 0.5, 0.125)
    assert c * 2 == Colour(0.5, 1.0, 0.25)
    assert 2 * c == c * 2
    assert c * 0 == Colour()


def test_multiply_is_componentwise_commutative():
    a = Colour(0.25, 0.5, 0.75)
    b = Colour(0.5, 0.125, 1.0)
    assert a * b == b * a


def test_multiply_unsupported_type():
    with pytest.raises(TypeError):
        Colour() * "red"


def test_add_black_is_identity_and_commutative():
    a = Colour(0.25, 0.5, 0.75)
    b = Colour(0.5, 0.125, 1.0)
    assert a + Colour() == a
    assert a + b == b + a


def test_clamp_caps_only_above_one():
    c = Colour(2.0, 0.5, -1.0)
    c.clamp()
    assert c == Colour(1.0, 0.5, -1.0)


def test_to_rgb_extremes():
    assert Colour(1.0, 1.0, 1.0).to_rgb() == (255, 255, 255)
    assert Colour().to_rgb() == (0, 0, 0)


def test_to_rgb_floors():
    assert Colour(0.5, 0.5, 0.5).to_rgb() == (127, 127, 127)