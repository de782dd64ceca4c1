"""Chromapix: color models, pixel formats, rasters and gradients."""

import logging

from .types import AlphaMode, ChannelType, ColorModel, ExtensionMode, GammaMode
from .errors import ChromapixError, InvalidChannelValue, InvalidStops, OutOfBounds
from .whitepoint import (
    A,
    C,
    D50,
    D55,
    D65,
    D75,
    E,
    F2,
    F7,
    F11,
    STANDARD_ILLUMINANTS,
    AdaptationMethod,
    WhitePoint,
    adapt,
    adaptation_matrix,
    get_white_point,
)
from .channel import (
    clamp_unit,
    decode_gamma,
    divide,
    encode_gamma,
    from_normalized,
    lerp_alpha,
    multiply,
    quantum,
    to_normalized,
)
from .conversions import convert, np_convert, to_xyz, from_xyz
from .colors import Color
from .pixel import (
    CMYK8,
    GRAY8,
    HSV32F,
    LAB32F,
    RGB8,
    RGB16,
    RGB32F,
    RGBA8,
    RGBA8P,
    RGBA16,
    RGBA32F,
    SGRAY8,
    SRGB8,
    SRGBA8,
    PixelFormat,
    convert_pixels,
)
from .raster import Raster, Region
from .gradients import Gradient, GradientStop, linear_positions, radial_positions

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # enums
    "AlphaMode",
    "ChannelType",
    "ColorModel",
    "ExtensionMode",
    "GammaMode",

    # errors
    "ChromapixError",
    "InvalidChannelValue",
    "InvalidStops",
    "OutOfBounds",

    # white points
    "WhitePoint",
    "AdaptationMethod",
    "STANDARD_ILLUMINANTS",
    "A",
    "C",
    "D50",
    "D55",
    "D65",
    "D75",
    "E",
    "F2",
    "F7",
    "F11",
    "adapt",
    "adaptation_matrix",
    "get_white_point",

    # channels
    "clamp_unit",
    "to_normalized",
    "from_normalized",
    "decode_gamma",
    "encode_gamma",
    "quantum",
    "multiply",
    "divide",
    "lerp_alpha",

    # colors and conversions
    "Color",
    "convert",
    "np_convert",
    "to_xyz",
    "from_xyz",

    # pixel formats
    "PixelFormat",
    "convert_pixels",
    "RGB8",
    "RGBA8",
    "RGBA8P",
    "SRGB8",
    "SRGBA8",
    "RGB16",
    "RGBA16",
    "RGB32F",
    "RGBA32F",
    "GRAY8",
    "SGRAY8",
    "HSV32F",
    "LAB32F",
    "CMYK8",

    # rasters
    "Raster",
    "Region",

    # gradients
    "Gradient",
    "GradientStop",
    "linear_positions",
    "radial_positions",
]
