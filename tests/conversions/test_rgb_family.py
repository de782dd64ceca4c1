import numpy as np
import pytest

from chromapix.conversions import (
    cmyk_to_unit_rgb,
    hsi_to_unit_rgb,
    hsl_to_unit_rgb,
    hsv_to_unit_rgb,
    hwb_to_unit_rgb,
    np_cmyk_to_unit_rgb,
    np_hsi_to_unit_rgb,
    np_hsl_to_hsv,
    np_hsl_to_unit_rgb,
    np_hsv_to_hsl,
    np_hsv_to_unit_rgb,
    np_hwb_to_unit_rgb,
    np_unit_rgb_to_cmyk,
    np_unit_rgb_to_hsi,
    np_unit_rgb_to_hsl,
    np_unit_rgb_to_hsv,
    np_unit_rgb_to_hwb,
    unit_rgb_to_cmyk,
    unit_rgb_to_hsi,
    unit_rgb_to_hsl,
    unit_rgb_to_hsv,
    unit_rgb_to_hwb,
)
from chromapix.samples import (
    samples_rgb_cmyk,
    samples_rgb_hsi,
    samples_rgb_hsl,
    samples_rgb_hsv,
    samples_rgb_hwb,
)

tolerance = 1e-9

forward_cases = [
    (unit_rgb_to_hsv, samples_rgb_hsv),
    (unit_rgb_to_hsl, samples_rgb_hsl),
    (unit_rgb_to_hsi, samples_rgb_hsi),
    (unit_rgb_to_hwb, samples_rgb_hwb),
    (unit_rgb_to_cmyk, samples_rgb_cmyk),
]

backward_cases = [
    (hsv_to_unit_rgb, samples_rgb_hsv),
    (hsl_to_unit_rgb, samples_rgb_hsl),
    (hsi_to_unit_rgb, samples_rgb_hsi),
    (hwb_to_unit_rgb, samples_rgb_hwb),
    (cmyk_to_unit_rgb, samples_rgb_cmyk),
]


@pytest.mark.parametrize("func, samples", forward_cases)
def test_reference_colors_from_rgb(func, samples):
    for rgb, expected in samples.items():
        np.testing.assert_allclose(func(*rgb), expected, atol=tolerance, err_msg=f"{func.__name__}{rgb}")


@pytest.mark.parametrize("func, samples", backward_cases)
def test_reference_colors_to_rgb(func, samples):
    for rgb, value in samples.items():
        np.testing.assert_allclose(func(*value), rgb, atol=tolerance, err_msg=f"{func.__name__}{value}")


def random_rgb(n=2000, seed=0):
    rng = np.random.default_rng(seed)
    rgb = rng.random((n, 3))
    # include exact ties and grays, where the hue branches switch
    rgb[:10] = [[0.5, 0.5, 0.2], [0.3, 0.7, 0.7], [0.9, 0.1, 0.9], [0.4, 0.4, 0.4],
                [1.0, 1.0, 1.0], [0.0, 0.0, 0.0], [1.0, 0.0, 0.0], [0.0, 1.0, 1.0],
                [0.25, 0.5, 0.75], [0.75, 0.5, 0.25]]
    return rgb


@pytest.mark.parametrize("forward, backward, atol", [
    (np_unit_rgb_to_hsv, np_hsv_to_unit_rgb, 1e-12),
    (np_unit_rgb_to_hsl, np_hsl_to_unit_rgb, 1e-12),
    (np_unit_rgb_to_hsi, np_hsi_to_unit_rgb, 1e-6),
    (np_unit_rgb_to_hwb, np_hwb_to_unit_rgb, 1e-12),
])
def test_hue_models_round_trip(forward, backward, atol):
    rgb = random_rgb()
    converted = forward(rgb[:, 0], rgb[:, 1], rgb[:, 2])
    assert converted.shape == rgb.shape
    assert np.all((converted[:, 0] >= 0.0) & (converted[:, 0] < 360.0))
    back = backward(converted[:, 0], converted[:, 1], converted[:, 2])
    np.testing.assert_allclose(back, rgb, atol=atol)


def test_cmyk_round_trip():
    rgb = random_rgb()
    cmyk = np_unit_rgb_to_cmyk(rgb[:, 0], rgb[:, 1], rgb[:, 2])
    assert cmyk.shape == (len(rgb), 4)
    back = np_cmyk_to_unit_rgb(cmyk[:, 0], cmyk[:, 1], cmyk[:, 2], cmyk[:, 3])
    np.testing.assert_allclose(back, rgb, atol=1e-12)


def test_cmyk_full_key_has_no_ink():
    assert unit_rgb_to_cmyk(0.0, 0.0, 0.0) == (0.0, 0.0, 0.0, 1.0)
    assert cmyk_to_unit_rgb(0.3, 0.5, 0.2, 1.0) == (0.0, 0.0, 0.0)


def test_achromatic_hue_is_zero():
    for value in (0.0, 0.3, 1.0):
        assert unit_rgb_to_hsv(value, value, value)[0] == 0.0
        assert unit_rgb_to_hsl(value, value, value)[0] == 0.0
        assert unit_rgb_to_hsi(value, value, value)[0] == 0.0


def test_max_channel_ties_prefer_red_then_green():
    # yellow: red and green tie for the maximum
    assert unit_rgb_to_hsv(1.0, 1.0, 0.0)[0] == pytest.approx(60.0)
    # cyan: green and blue tie
    assert unit_rgb_to_hsv(0.0, 1.0, 1.0)[0] == pytest.approx(180.0)


def test_hue_continuous_across_zero():
    below = np.array(hsv_to_unit_rgb(359.9, 1.0, 1.0))
    above = np.array(hsv_to_unit_rgb(0.0, 1.0, 1.0))
    wrapped = np.array(hsv_to_unit_rgb(360.0, 1.0, 1.0))
    assert np.max(np.abs(below - above)) < 0.01
    np.testing.assert_allclose(wrapped, above)


def test_hsv_hsl_direct_round_trip():
    hsv = np_unit_rgb_to_hsv(*random_rgb().T)
    hsl = np_hsv_to_hsl(hsv[:, 0], hsv[:, 1], hsv[:, 2])
    np.testing.assert_allclose(hsl, np_unit_rgb_to_hsl(*random_rgb().T), atol=1e-12)
    back = np_hsl_to_hsv(hsl[:, 0], hsl[:, 1], hsl[:, 2])
    np.testing.assert_allclose(back[:, 1:], hsv[:, 1:], atol=1e-12)


def test_hwb_gray_when_whiteness_and_blackness_exceed_one():
    np.testing.assert_allclose(hwb_to_unit_rgb(200.0, 0.6, 0.6), (0.5, 0.5, 0.5))
    np.testing.assert_allclose(hwb_to_unit_rgb(10.0, 0.2, 0.8), (0.2, 0.2, 0.2))


def test_multidimensional_inputs_keep_shape():
    rgb = random_rgb(24).reshape(2, 3, 4, 3)
    hsv = np_unit_rgb_to_hsv(rgb[..., 0], rgb[..., 1], rgb[..., 2])
    assert hsv.shape == (2, 3, 4, 3)
