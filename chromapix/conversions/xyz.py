"""
Linear RGB and Gray to and from CIE XYZ.

The RGB to XYZ matrix is derived from the RGB space's primaries and the
reference white: the primaries' XYZ columns are scaled so that RGB
``(1, 1, 1)`` lands exactly on the white. Gray is the relative luminance of
linear RGB, so ``GRAY g`` and ``RGB (g, g, g)`` share the same XYZ.
"""

from __future__ import annotations
from dataclasses import dataclass
from functools import lru_cache
from typing import Tuple

import numpy as np
from numpy.typing import NDArray

from ..whitepoint import WhitePoint

Chromaticity = Tuple[float, float]


@dataclass(frozen=True)
class RgbSpace:
    """RGB primaries as CIE 1931 xy chromaticities."""

    name: str
    red: Chromaticity
    green: Chromaticity
    blue: Chromaticity


SRGB = RgbSpace("sRGB", (0.64, 0.33), (0.30, 0.60), (0.15, 0.06))
ADOBE_RGB = RgbSpace("Adobe RGB (1998)", (0.64, 0.33), (0.21, 0.71), (0.15, 0.06))
DISPLAY_P3 = RgbSpace("Display P3", (0.680, 0.320), (0.265, 0.690), (0.150, 0.060))


@lru_cache(maxsize=32)
def rgb_to_xyz_matrix(space: RgbSpace, white: WhitePoint) -> NDArray[np.float64]:
    """3x3 matrix taking linear RGB of ``space`` to XYZ relative to ``white``."""
    primaries = np.array(
        [[x / y, 1.0, (1.0 - x - y) / y] for x, y in (space.red, space.green, space.blue)],
        dtype=np.float64,
    ).T
    scale = np.linalg.solve(primaries, white.xyz)
    matrix = primaries * scale
    matrix.setflags(write=False)
    return matrix


@lru_cache(maxsize=32)
def xyz_to_rgb_matrix(space: RgbSpace, white: WhitePoint) -> NDArray[np.float64]:
    matrix = np.linalg.inv(rgb_to_xyz_matrix(space, white))
    matrix.setflags(write=False)
    return matrix


def np_rgb_to_xyz(rgb: NDArray[np.float64], white: WhitePoint, space: RgbSpace = SRGB) -> NDArray[np.float64]:
    """
    Convert linear RGB to XYZ.

    Args:
        rgb: Array of shape (..., 3) with linear RGB values
        white: Reference white of the RGB space
        space: RGB primaries

    Returns:
        Array of shape (..., 3) with XYZ values
    """
    rgb = np.asarray(rgb, dtype=np.float64)
    return np.einsum('...j,ij->...i', rgb, rgb_to_xyz_matrix(space, white))


def np_xyz_to_rgb(xyz: NDArray[np.float64], white: WhitePoint, space: RgbSpace = SRGB) -> NDArray[np.float64]:
    """Convert XYZ to linear RGB; inverse of :func:`np_rgb_to_xyz`."""
    xyz = np.asarray(xyz, dtype=np.float64)
    return np.einsum('...j,ij->...i', xyz, xyz_to_rgb_matrix(space, white))


def np_rgb_to_gray(rgb: NDArray[np.float64], white: WhitePoint, space: RgbSpace = SRGB) -> NDArray[np.float64]:
    """Relative luminance of linear RGB, shape (..., 1)."""
    rgb = np.asarray(rgb, dtype=np.float64)
    y_row = rgb_to_xyz_matrix(space, white)[1] / white.Y
    return (rgb @ y_row)[..., None]


def np_gray_to_rgb(gray: NDArray[np.float64]) -> NDArray[np.float64]:
    gray = np.asarray(gray, dtype=np.float64)
    return np.repeat(gray[..., :1], 3, axis=-1)


def np_gray_to_xyz(gray: NDArray[np.float64], white: WhitePoint) -> NDArray[np.float64]:
    gray = np.asarray(gray, dtype=np.float64)
    return gray[..., :1] * (white.xyz / white.Y)


def np_xyz_to_gray(xyz: NDArray[np.float64], white: WhitePoint) -> NDArray[np.float64]:
    xyz = np.asarray(xyz, dtype=np.float64)
    return xyz[..., 1:2] / white.Y
