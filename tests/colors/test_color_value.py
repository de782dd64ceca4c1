import numpy as np
import pytest

from chromapix.colors import Color
from chromapix.types import ColorModel
from chromapix.whitepoint import D50, D65


def test_defaults():
    c = Color("rgb", (0.2, 0.4, 0.6))
    assert c.model == ColorModel.RGB
    assert c.values == (0.2, 0.4, 0.6)
    assert c.alpha == 1.0
    assert c.white == D65


def test_immutable():
    c = Color("rgb", (0.2, 0.4, 0.6))
    with pytest.raises(AttributeError):
        c._values = (0.0, 0.0, 0.0)
    with pytest.raises(AttributeError):
        c.alpha = 0.5


def test_equality_and_hash():
    a = Color("hsv", (120.0, 0.5, 0.5))
    b = Color(ColorModel.HSV, [120.0, 0.5, 0.5])
    assert a == b
    assert len({a, b}) == 1
    assert a != a.with_alpha(0.5)
    assert a != Color("hsv", (120.0, 0.5, 0.5), white=D50)


def test_hue_is_wrapped():
    assert Color("hsl", (400.0, 0.5, 0.5))["hue"] == pytest.approx(40.0)
    assert Color("lch", (50.0, 20.0, -30.0))["hue"] == pytest.approx(330.0)


@pytest.mark.parametrize("model", ["hsv", "hsl", "hsi", "hwb"])
def test_tiny_negative_hue_stays_below_360(model):
    hue = Color(model, (-1e-17, 1.0, 1.0))["hue"]
    assert 0.0 <= hue < 360.0
    assert hue == 0.0


def test_tiny_negative_lch_hue_stays_below_360():
    hue = Color("lch", (50.0, 20.0, -1e-17))["hue"]
    assert 0.0 <= hue < 360.0


def test_alpha_is_clamped():
    assert Color("rgb", (0, 0, 0), alpha=1.5).alpha == 1.0
    assert Color("rgb", (0, 0, 0), alpha=-0.5).alpha == 0.0


def test_invalid_input():
    with pytest.raises(ValueError):
        Color("rgb", (0.1, 0.2))
    with pytest.raises(ValueError):
        Color("rgb", (0.1, float("nan"), 0.2))
    with pytest.raises(ValueError, match="Unknown color model"):
        Color("rgba", (0.1, 0.2, 0.3))


def test_convert_keeps_alpha():
    red = Color("rgb", (1.0, 0.0, 0.0), alpha=0.25)
    hsv = red.convert("hsv")
    assert hsv.model == ColorModel.HSV
    np.testing.assert_allclose(hsv.values, (0.0, 1.0, 1.0))
    assert hsv.alpha == 0.25
    assert red.convert("rgb") is red


def test_convert_with_white_point():
    white = Color("rgb", (1.0, 1.0, 1.0))
    xyz = white.convert("xyz", white=D50)
    assert xyz.white == D50
    np.testing.assert_allclose(xyz.values, D50.xyz, atol=1e-9)


def test_construct_from_another_color():
    red = Color("rgb", (1.0, 0.0, 0.0), alpha=0.5)
    hsl = Color("hsl", red)
    np.testing.assert_allclose(hsl.values, (0.0, 1.0, 0.5))
    assert hsl.alpha == 0.5


def test_channel_access():
    c = Color("cmyk", (0.1, 0.2, 0.3, 0.4))
    assert len(c) == 4
    assert list(c) == [0.1, 0.2, 0.3, 0.4]
    assert c[3] == 0.4
    assert c["magenta"] == 0.2
    assert c.channels == {"cyan": 0.1, "magenta": 0.2, "yellow": 0.3, "key": 0.4}
    with pytest.raises(KeyError):
        c["hue"]


def test_has_hue():
    assert Color("hwb", (10, 0.1, 0.1)).has_hue
    assert Color("lch", (50, 10, 10)).has_hue
    assert not Color("lab", (50, 10, 10)).has_hue


def test_hex_round_trip():
    c = Color.from_hex("#ff8000")
    assert c.to_hex() == "#ff8000"
    assert Color.from_hex("f80").to_hex() == "#ff8800"
    semi = Color.from_hex("#00ff0080")
    assert semi.alpha == pytest.approx(128 / 255)
    assert semi.to_hex(include_alpha=True) == "#00ff0080"


def test_from_hex_decodes_gamma():
    mid = Color.from_hex("#808080")
    np.testing.assert_allclose(mid.values, (0.215861,) * 3, atol=1e-6)


@pytest.mark.parametrize("text", ["#12", "#1234567", "#gggggg", ""])
def test_from_hex_invalid(text):
    with pytest.raises(ValueError):
        Color.from_hex(text)


def test_isclose_across_models():
    red = Color("rgb", (1.0, 0.0, 0.0))
    assert red.isclose(Color("hsv", (0.0, 1.0, 1.0)))
    assert red.isclose(Color("hsv", (359.9999999, 1.0, 1.0)), atol=1e-6)
    assert not red.isclose(Color("rgb", (0.9, 0.0, 0.0)))


def test_repr():
    assert repr(Color("gray", (0.5,))) == "Color('gray', (0.5,), alpha=1.0, white='D65')"
