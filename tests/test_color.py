"""
Unit tests for Color
"""

import pytest

from autotween.models.color import Color


def test_color_from_rgb():
    """0-255 channels are normalized"""
    c = Color.from_rgb(255, 0, 51)

    assert c.r == 1.0
    assert c.g == 0.0
    assert c.b == pytest.approx(0.2)
    assert c.a == 1.0
    assert c.to_rgb() == (255, 0, 51)


def test_color_dict_roundtrip():
    c = Color(0.25, 0.5, 0.75, 0.5)
    assert Color.from_dict(c.to_dict()) == c


def test_color_from_dict_default_alpha():
    assert Color.from_dict({"r": 1.0, "g": 0.0, "b": 0.0}).a == 1.0


def test_color_to_tuple():
    assert Color.clear().to_tuple() == (0.0, 0.0, 0.0, 0.0)


def test_color_with_alpha():
    c = Color.white().with_alpha(0.0)
    assert c == Color(1.0, 1.0, 1.0, 0.0)
    assert Color.white().a == 1.0


def test_color_is_immutable():
    c = Color.black()
    with pytest.raises(AttributeError):
        c.r = 1.0


def test_color_lerp_ends_exact():
    a = Color.from_rgb(10, 20, 30)
    b = Color.from_rgb(200, 100, 0, 128)

    assert Color.lerp(a, b, 0.0) == a
    assert Color.lerp(a, b, 1.0) == b


def test_color_lerp_alpha():
    mid = Color.lerp(Color.clear(), Color.white(), 0.5)
    assert mid.a == pytest.approx(0.5)
    assert mid.r == pytest.approx(0.5)


def test_color_str():
    assert str(Color.white()) == "Color(r=1.000, g=1.000, b=1.000, a=1.000)"
