import numpy as np
import pytest

from chromapix.conversions import convert, from_xyz, np_convert, to_xyz
from chromapix.types import ColorModel, MODEL_SPECS
from chromapix.whitepoint import D50, D65, AdaptationMethod

RGB_FAMILY = ["rgb", "cmyk", "hsv", "hsl", "hsi", "hwb"]


def sample_rgb(n=300, seed=4):
    rng = np.random.default_rng(seed)
    return rng.random((n, 3))


def test_scalar_convert_returns_tuple():
    assert convert((1.0, 0.0, 0.0), "rgb", "hsv") == pytest.approx((0.0, 1.0, 1.0))
    result = convert((1.0, 0.0, 0.0), ColorModel.RGB, ColorModel.CMYK)
    assert isinstance(result, tuple)
    assert result == pytest.approx((0.0, 1.0, 1.0, 0.0))


@pytest.mark.parametrize("target", list(ColorModel))
def test_every_model_round_trips_through_rgb(target):
    rgb = sample_rgb()
    converted = np_convert(rgb, "rgb", target)
    assert converted.shape == (len(rgb), MODEL_SPECS[target].num_channels)
    back = np_convert(converted, target, "rgb")
    if target == ColorModel.GRAY:
        # gray keeps only luminance
        np.testing.assert_allclose(back[:, 0], back[:, 2])
    else:
        np.testing.assert_allclose(back, rgb, atol=1e-6)


@pytest.mark.parametrize("source", RGB_FAMILY)
@pytest.mark.parametrize("target", RGB_FAMILY + ["gray"])
def test_rgb_family_shortcut_matches_xyz_route(source, target):
    values = np_convert(sample_rgb(), "rgb", source)
    direct = np_convert(values, source, target)
    via_xyz = from_xyz(to_xyz(values, source, D65), target, D65)
    if target in ("hsv", "hsl", "hsi", "hwb"):
        # hue is undefined for grays and wraps at 360
        diff = np.abs(direct - via_xyz)
        diff[:, 0] = np.minimum(diff[:, 0], 360.0 - diff[:, 0])
        chroma = np.ptp(np_convert(values, source, "rgb"), axis=1)
        diff[chroma < 1e-6, 0] = 0.0
        assert np.max(diff) < 1e-5
    else:
        np.testing.assert_allclose(direct, via_xyz, atol=1e-6)


def test_gray_is_relative_luminance():
    np.testing.assert_allclose(np_convert(np.array([1.0, 1.0, 1.0]), "rgb", "gray"), [1.0], atol=1e-12)
    np.testing.assert_allclose(
        np_convert(np.array([1.0, 0.0, 0.0]), "rgb", "gray"), [0.2126], atol=2e-4
    )
    np.testing.assert_allclose(np_convert(np.array([0.4]), "gray", "rgb"), [0.4, 0.4, 0.4])


def test_same_model_same_white_is_a_copy():
    values = np.array([[0.1, 0.2, 0.3]])
    out = np_convert(values, "rgb", "rgb")
    np.testing.assert_array_equal(out, values)
    assert out is not values


def test_white_adaptation_maps_white_to_white():
    xyz = np_convert(np.array([1.0, 1.0, 1.0]), "rgb", "xyz", src_white=D65, dst_white=D50)
    np.testing.assert_allclose(xyz, D50.xyz, atol=1e-9)
    lab = np_convert(np.array([1.0, 1.0, 1.0]), "rgb", "lab", src_white=D65, dst_white=D50)
    np.testing.assert_allclose(lab, [100.0, 0.0, 0.0], atol=1e-6)


def test_rgb_to_rgb_across_whites_preserves_neutrals():
    gray = np.array([0.5, 0.5, 0.5])
    out = np_convert(gray, "rgb", "rgb", src_white=D65, dst_white=D50, method=AdaptationMethod.VON_KRIES)
    np.testing.assert_allclose(out, gray, atol=1e-9)


def test_red_in_lch():
    lch = convert((1.0, 0.0, 0.0), "rgb", "lch")
    assert lch[0] == pytest.approx(53.24, abs=0.05)
    assert lch[1] == pytest.approx(104.55, abs=0.1)
    assert lch[2] == pytest.approx(40.0, abs=0.1)


def test_model_names_are_case_insensitive():
    assert convert((0.0, 1.0, 0.0), "RGB", "Hsv") == pytest.approx((120.0, 1.0, 1.0))


def test_unknown_model_raises():
    with pytest.raises(ValueError, match="Unknown color model"):
        convert((1.0, 0.0, 0.0), "rgb", "ycbcr")


def test_wrong_channel_count_raises():
    with pytest.raises(ValueError):
        np_convert(np.zeros((4, 2)), "rgb", "hsv")
