"""
Chromapix Color Model Conversions
=================================

Conversion mathematics for every supported color model, with numpy
(vectorised) implementations and small scalar wrappers.

Features
--------
- Hub-and-spoke conversion through CIE XYZ between any two models
- Chromatic adaptation when source and destination white points differ
- Direct RGB-family shortcuts (RGB, CMYK, HSV, HSL, HSI, HWB, Gray) that
  agree with the XYZ route within floating-point tolerance
- RGB primaries for sRGB, Adobe RGB (1998) and Display P3

Conversion Functions
--------------------

RGB ↔ hue models:
    np_unit_rgb_to_hsv / np_hsv_to_unit_rgb
    np_unit_rgb_to_hsl / np_hsl_to_unit_rgb
    np_unit_rgb_to_hsi / np_hsi_to_unit_rgb
    np_unit_rgb_to_hwb / np_hwb_to_unit_rgb
    np_hsv_to_hsl / np_hsl_to_hsv

RGB ↔ CMYK:
    np_unit_rgb_to_cmyk / np_cmyk_to_unit_rgb

Device independent:
    np_rgb_to_xyz / np_xyz_to_rgb
    np_xyz_to_lab / np_lab_to_xyz
    np_lab_to_lch / np_lch_to_lab

High-Level API
--------------
    convert(color, from_model, to_model, src_white=None, dst_white=None)
        Scalar converter, returns a tuple
    np_convert(values, from_model, to_model, src_white=None, dst_white=None)
        Vectorised converter over arrays of shape (..., n)
    to_xyz(values, model, white) / from_xyz(xyz, model, white)

Examples
--------
>>> from chromapix.conversions import convert
>>> convert((1.0, 0.0, 0.0), "rgb", "hsv")
(0.0, 1.0, 1.0)
>>> lab = convert((1.0, 1.0, 1.0), "rgb", "lab")
"""

from .hue import (
    hsi_to_unit_rgb,
    hsl_to_unit_rgb,
    hsv_to_unit_rgb,
    hwb_to_unit_rgb,
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
    unit_rgb_to_hsi,
    unit_rgb_to_hsl,
    unit_rgb_to_hsv,
    unit_rgb_to_hwb,
)
from .cmyk import cmyk_to_unit_rgb, np_cmyk_to_unit_rgb, np_unit_rgb_to_cmyk, unit_rgb_to_cmyk
from .xyz import ADOBE_RGB, DISPLAY_P3, SRGB, RgbSpace, np_rgb_to_xyz, np_xyz_to_rgb, rgb_to_xyz_matrix
from .lab import np_lab_to_lch, np_lab_to_xyz, np_lch_to_lab, np_xyz_to_lab

# High-level API
from .wrapper import convert, np_convert, to_xyz, from_xyz

__all__ = [
    # RGB ↔ hue models
    'unit_rgb_to_hsv',
    'hsv_to_unit_rgb',
    'unit_rgb_to_hsl',
    'hsl_to_unit_rgb',
    'unit_rgb_to_hsi',
    'hsi_to_unit_rgb',
    'unit_rgb_to_hwb',
    'hwb_to_unit_rgb',
    'np_unit_rgb_to_hsv',
    'np_hsv_to_unit_rgb',
    'np_unit_rgb_to_hsl',
    'np_hsl_to_unit_rgb',
    'np_unit_rgb_to_hsi',
    'np_hsi_to_unit_rgb',
    'np_unit_rgb_to_hwb',
    'np_hwb_to_unit_rgb',
    'np_hsv_to_hsl',
    'np_hsl_to_hsv',

    # RGB ↔ CMYK
    'unit_rgb_to_cmyk',
    'cmyk_to_unit_rgb',
    'np_unit_rgb_to_cmyk',
    'np_cmyk_to_unit_rgb',

    # Device independent
    'RgbSpace',
    'SRGB',
    'ADOBE_RGB',
    'DISPLAY_P3',
    'rgb_to_xyz_matrix',
    'np_rgb_to_xyz',
    'np_xyz_to_rgb',
    'np_xyz_to_lab',
    'np_lab_to_xyz',
    'np_lab_to_lch',
    'np_lch_to_lab',

    # High-level API
    'convert',
    'np_convert',
    'to_xyz',
    'from_xyz',
]
