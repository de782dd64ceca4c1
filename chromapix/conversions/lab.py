"""
CIE 1976 L*a*b* and its cylindrical form LCh.

Conversion chain: XYZ → LAB → LCH

Constants follow the CIE recommendation with exact rationals:

- ``epsilon = 216 / 24389`` (the cube-root / linear threshold, (6/29)^3)
- ``kappa = 24389 / 27``
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from ..whitepoint import WhitePoint
from .hue import wrap_hue

CIE_EPSILON = 216.0 / 24389.0
CIE_KAPPA = 24389.0 / 27.0


# =============================================================================
# XYZ ↔ LAB
# =============================================================================


def _f(t: NDArray[np.float64]) -> NDArray[np.float64]:
    return np.where(t > CIE_EPSILON, np.cbrt(t), (CIE_KAPPA * t + 16.0) / 116.0)


def np_xyz_to_lab(xyz: NDArray[np.float64], white: WhitePoint) -> NDArray[np.float64]:
    """
    Convert XYZ to CIE LAB relative to ``white``.

    Args:
        xyz: Array of shape (..., 3)
        white: Reference white

    Returns:
        Array of shape (..., 3) with L in [0, 100] and unbounded a, b
    """
    xyz = np.asarray(xyz, dtype=np.float64)
    ratios = xyz / white.xyz
    fx = _f(ratios[..., 0])
    fy = _f(ratios[..., 1])
    fz = _f(ratios[..., 2])
    L = 116.0 * fy - 16.0
    a = 500.0 * (fx - fy)
    b = 200.0 * (fy - fz)
    return np.stack([L, a, b], axis=-1)


def np_lab_to_xyz(lab: NDArray[np.float64], white: WhitePoint) -> NDArray[np.float64]:
    """Convert CIE LAB to XYZ; inverse of :func:`np_xyz_to_lab`."""
    lab = np.asarray(lab, dtype=np.float64)
    L = lab[..., 0]
    fy = (L + 16.0) / 116.0
    fx = fy + lab[..., 1] / 500.0
    fz = fy - lab[..., 2] / 200.0

    def finv(f: NDArray[np.float64]) -> NDArray[np.float64]:
        cube = f ** 3
        return np.where(cube > CIE_EPSILON, cube, (116.0 * f - 16.0) / CIE_KAPPA)

    xr = finv(fx)
    yr = np.where(L > CIE_KAPPA * CIE_EPSILON, fy ** 3, L / CIE_KAPPA)
    zr = finv(fz)
    return np.stack([xr, yr, zr], axis=-1) * white.xyz


# =============================================================================
# LAB ↔ LCH
# =============================================================================


def np_lab_to_lch(lab: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert LAB to LCH (cylindrical coordinates).

    Returns:
        Array of shape (..., 3) with (L, C, H), H in degrees [0, 360)
    """
    lab = np.asarray(lab, dtype=np.float64)
    L = lab[..., 0]
    a = lab[..., 1]
    b = lab[..., 2]
    C = np.hypot(a, b)
    H = wrap_hue(np.degrees(np.arctan2(b, a)))
    return np.stack([L, C, H], axis=-1)


def np_lch_to_lab(lch: NDArray[np.float64]) -> NDArray[np.float64]:
    lch = np.asarray(lch, dtype=np.float64)
    L = lch[..., 0]
    C = lch[..., 1]
    H_rad = np.radians(lch[..., 2])
    return np.stack([L, C * np.cos(H_rad), C * np.sin(H_rad)], axis=-1)
