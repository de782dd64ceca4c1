import numpy as np
import pytest

from chromapix.pixel import CMYK8, GRAY8, HSV32F, LAB32F, RGB8, RGB16, RGBA8, RGBA8P, RGBA16, SRGB8, PixelFormat, convert_pixels
from chromapix.types import ChannelType, ColorModel
from chromapix.whitepoint import D50


def test_same_format_is_a_copy():
    raw = np.array([[1, 2, 3]], dtype=np.uint8)
    out = convert_pixels(raw, RGB8, RGB8)
    np.testing.assert_array_equal(out, raw)
    out[0, 0] = 9
    assert raw[0, 0] == 1


def test_rgb8_red_to_hsv32f():
    out = convert_pixels(np.array([255, 0, 0], dtype=np.uint8), RGB8, HSV32F)
    assert out.dtype == np.dtype("<f4")
    np.testing.assert_allclose(out, [0.0, 1.0, 1.0], atol=1e-6)


def test_rgb8_to_rgb16_scales_codes():
    raw = np.array([[0, 1, 255]], dtype=np.uint8)
    out = convert_pixels(raw, RGB8, RGB16)
    np.testing.assert_array_equal(out, [[0, 257, 65535]])
    np.testing.assert_array_equal(convert_pixels(out, RGB16, RGB8), raw)


def test_adding_alpha_makes_pixels_opaque():
    out = convert_pixels(np.array([[10, 20, 30]], dtype=np.uint8), RGB8, RGBA8)
    np.testing.assert_array_equal(out, [[10, 20, 30, 255]])


def test_straight_to_premultiplied():
    out = convert_pixels(np.array([200, 100, 50, 128], dtype=np.uint8), RGBA8, RGBA8P)
    np.testing.assert_array_equal(out, [100, 50, 25, 128])


def test_premultiplied_round_trip_within_quantization():
    rgba16p = PixelFormat("rgb", "uint16", "premultiplied")
    rng = np.random.default_rng(7)
    raw = rng.integers(0, 65536, size=(64, 4)).astype(np.uint16)
    raw[:, 3] = np.maximum(raw[:, 3], 50000)
    again = convert_pixels(convert_pixels(raw, RGBA16, rgba16p), rgba16p, RGBA16)
    assert np.max(np.abs(again.astype(int) - raw.astype(int))) <= 2


def test_linear_to_srgb_codes():
    out = convert_pixels(np.array([[0, 55, 255]], dtype=np.uint8), RGB8, SRGB8)
    assert out[0, 0] == 0
    assert out[0, 2] == 255
    assert out[0, 1] > 55


def test_rgb_to_gray_and_cmyk():
    white = np.array([255, 255, 255], dtype=np.uint8)
    np.testing.assert_array_equal(convert_pixels(white, RGB8, GRAY8), [255])
    np.testing.assert_array_equal(convert_pixels(np.array([0, 255, 255], dtype=np.uint8), RGB8, CMYK8), [255, 0, 0, 0])
    np.testing.assert_array_equal(convert_pixels(np.array([0, 0, 0], dtype=np.uint8), RGB8, CMYK8), [0, 0, 0, 255])


def test_white_adaptation_between_formats():
    src = PixelFormat(ColorModel.RGB, ChannelType.FLOAT32)
    dst = PixelFormat(ColorModel.LAB, ChannelType.FLOAT32, white=D50)
    out = convert_pixels(np.array([1.0, 1.0, 1.0], dtype="<f4"), src, dst)
    np.testing.assert_allclose(out, [1.0, 0.5, 0.5], atol=1e-5)


def test_out_of_gamut_results_are_clamped():
    lab = LAB32F.encode(np.array([50.0, 127.0, -127.0]))
    out = convert_pixels(lab, LAB32F, RGB8)
    assert out.dtype == np.uint8
    assert out.shape == (3,)
