from __future__ import annotations
from typing import Callable, Dict, Optional, Tuple

import numpy as np

from ..types.color_types import (
    ColorElement,
    ColorModel,
    ModelName,
    RGB_FAMILY,
    MODEL_SPECS,
    as_model,
    element_to_array,
)
from ..whitepoint import AdaptationMethod, WhitePoint, adapt, D65
from .cmyk import np_cmyk_to_unit_rgb, np_unit_rgb_to_cmyk
from .hue import (
    np_hsi_to_unit_rgb,
    np_hsl_to_hsv,
    np_hsl_to_unit_rgb,
    np_hsv_to_hsl,
    np_hsv_to_unit_rgb,
    np_hwb_to_unit_rgb,
    np_unit_rgb_to_hsi,
    np_unit_rgb_to_hsl,
    np_unit_rgb_to_hsv,
    np_unit_rgb_to_hwb,
)
from .lab import np_lab_to_lch, np_lab_to_xyz, np_lch_to_lab, np_xyz_to_lab
from .xyz import (
    SRGB,
    RgbSpace,
    np_gray_to_rgb,
    np_gray_to_xyz,
    np_rgb_to_gray,
    np_rgb_to_xyz,
    np_xyz_to_gray,
    np_xyz_to_rgb,
)

Array = np.ndarray


def _channels(values: Array) -> Tuple[Array, ...]:
    return tuple(values[..., i] for i in range(values.shape[-1]))


# RGB family: every member converts to and from linear unit RGB directly
TO_RGB: Dict[ColorModel, Callable[[Array], Array]] = {
    ColorModel.RGB: lambda v: v.copy(),
    ColorModel.CMYK: lambda v: np_cmyk_to_unit_rgb(*_channels(v)),
    ColorModel.HSV: lambda v: np_hsv_to_unit_rgb(*_channels(v)),
    ColorModel.HSL: lambda v: np_hsl_to_unit_rgb(*_channels(v)),
    ColorModel.HSI: lambda v: np_hsi_to_unit_rgb(*_channels(v)),
    ColorModel.HWB: lambda v: np_hwb_to_unit_rgb(*_channels(v)),
    ColorModel.GRAY: np_gray_to_rgb,
}

FROM_RGB: Dict[ColorModel, Callable[[Array, WhitePoint, RgbSpace], Array]] = {
    ColorModel.RGB: lambda v, w, s: v.copy(),
    ColorModel.CMYK: lambda v, w, s: np_unit_rgb_to_cmyk(*_channels(v)),
    ColorModel.HSV: lambda v, w, s: np_unit_rgb_to_hsv(*_channels(v)),
    ColorModel.HSL: lambda v, w, s: np_unit_rgb_to_hsl(*_channels(v)),
    ColorModel.HSI: lambda v, w, s: np_unit_rgb_to_hsi(*_channels(v)),
    ColorModel.HWB: lambda v, w, s: np_unit_rgb_to_hwb(*_channels(v)),
    ColorModel.GRAY: np_rgb_to_gray,
}

# Shortcuts that skip the hub entirely (same white point only)
CONVERT_DIRECT: Dict[Tuple[ColorModel, ColorModel], Callable[[Array], Array]] = {
    (ColorModel.HSV, ColorModel.HSL): lambda v: np_hsv_to_hsl(*_channels(v)),
    (ColorModel.HSL, ColorModel.HSV): lambda v: np_hsl_to_hsv(*_channels(v)),
    (ColorModel.LAB, ColorModel.LCH): np_lab_to_lch,
    (ColorModel.LCH, ColorModel.LAB): np_lch_to_lab,
}


def to_xyz(
    values: Array,
    model: ModelName,
    white: WhitePoint = D65,
    rgb_space: RgbSpace = SRGB,
) -> Array:
    """
    Convert model values of shape (..., n) to XYZ relative to ``white``.
    """
    model = as_model(model)
    values = np.asarray(values, dtype=np.float64)
    if model == ColorModel.XYZ:
        return values.copy()
    if model == ColorModel.LAB:
        return np_lab_to_xyz(values, white)
    if model == ColorModel.LCH:
        return np_lab_to_xyz(np_lch_to_lab(values), white)
    if model == ColorModel.GRAY:
        return np_gray_to_xyz(values, white)
    return np_rgb_to_xyz(TO_RGB[model](values), white, rgb_space)


def from_xyz(
    xyz: Array,
    model: ModelName,
    white: WhitePoint = D65,
    rgb_space: RgbSpace = SRGB,
) -> Array:
    """
    Convert XYZ of shape (..., 3) relative to ``white`` into ``model`` values.
    """
    model = as_model(model)
    xyz = np.asarray(xyz, dtype=np.float64)
    if model == ColorModel.XYZ:
        return xyz.copy()
    if model == ColorModel.LAB:
        return np_xyz_to_lab(xyz, white)
    if model == ColorModel.LCH:
        return np_lab_to_lch(np_xyz_to_lab(xyz, white))
    if model == ColorModel.GRAY:
        return np_xyz_to_gray(xyz, white)
    return FROM_RGB[model](np_xyz_to_rgb(xyz, white, rgb_space), white, rgb_space)


def _convert_core(
    values: Array,
    from_model: ColorModel,
    to_model: ColorModel,
    src_white: WhitePoint,
    dst_white: WhitePoint,
    rgb_space: RgbSpace,
    method: AdaptationMethod,
) -> Array:
    expected = MODEL_SPECS[from_model].num_channels
    if values.shape[-1] != expected:
        raise ValueError(
            f"{from_model.value} expects last dimension to be {expected}, got shape {values.shape}"
        )

    same_white = src_white.same_as(dst_white)
    if same_white:
        if from_model == to_model:
            return values.copy()
        key = (from_model, to_model)
        if key in CONVERT_DIRECT:
            return CONVERT_DIRECT[key](values)
        if from_model in RGB_FAMILY and to_model in RGB_FAMILY:
            rgb = TO_RGB[from_model](values)
            return FROM_RGB[to_model](rgb, src_white, rgb_space)

    xyz = to_xyz(values, from_model, src_white, rgb_space)
    xyz = adapt(xyz, src_white, dst_white, method)
    return from_xyz(xyz, to_model, dst_white, rgb_space)


def np_convert(
    values: Array,
    from_model: ModelName,
    to_model: ModelName,
    src_white: Optional[WhitePoint] = None,
    dst_white: Optional[WhitePoint] = None,
    rgb_space: RgbSpace = SRGB,
    method: AdaptationMethod = AdaptationMethod.BRADFORD,
) -> Array:
    """
    Convert an array of colors of shape (..., n) between any two models.

    Routes through XYZ, applying chromatic adaptation when ``src_white`` and
    ``dst_white`` differ. ``dst_white`` defaults to ``src_white``, which
    defaults to D65.
    """
    src_white = src_white if src_white is not None else D65
    dst_white = dst_white if dst_white is not None else src_white
    return _convert_core(
        np.asarray(values, dtype=np.float64),
        as_model(from_model),
        as_model(to_model),
        src_white,
        dst_white,
        rgb_space,
        AdaptationMethod(method),
    )


def convert(
    color: ColorElement,
    from_model: ModelName,
    to_model: ModelName,
    src_white: Optional[WhitePoint] = None,
    dst_white: Optional[WhitePoint] = None,
    rgb_space: RgbSpace = SRGB,
    method: AdaptationMethod = AdaptationMethod.BRADFORD,
) -> Tuple[float, ...]:
    """Scalar form of :func:`np_convert`; returns a tuple of floats."""
    result = np_convert(element_to_array(color), from_model, to_model, src_white, dst_white, rgb_space, method)
    return tuple(float(v) for v in result.flat)
