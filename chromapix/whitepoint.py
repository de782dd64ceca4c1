"""
White Points and Chromatic Adaptation
=====================================

Reference whites are stored as XYZ tristimulus values normalized to ``Y = 1``.
Standard illuminants are built from their CIE 1931 2° chromaticities.

Adaptation between two whites uses a von Kries style transform in a cone
response space::

    M_adapt = M^-1 @ diag(rho_dst / rho_src) @ M

where ``M`` is the Bradford matrix by default. Matrices are cached per pair
of white points.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import Tuple

import numpy as np
from numpy import ndarray


class AdaptationMethod(str, Enum):
    BRADFORD = "bradford"
    VON_KRIES = "von_kries"
    XYZ_SCALING = "xyz_scaling"


_CONE_MATRICES = {
    AdaptationMethod.BRADFORD: np.array([
        [0.8951, 0.2664, -0.1614],
        [-0.7502, 1.7135, 0.0367],
        [0.0389, -0.0685, 1.0296],
    ], dtype=np.float64),
    AdaptationMethod.VON_KRIES: np.array([
        [0.40024, 0.70760, -0.08081],
        [-0.22630, 1.16532, 0.04570],
        [0.00000, 0.00000, 0.91822],
    ], dtype=np.float64),
    AdaptationMethod.XYZ_SCALING: np.eye(3, dtype=np.float64),
}


@dataclass(frozen=True)
class WhitePoint:
    """An immutable reference white, ``(X, Y, Z)`` with ``Y`` normally 1."""

    name: str
    X: float
    Y: float
    Z: float

    @classmethod
    def from_xy(cls, x: float, y: float, name: str = "custom") -> "WhitePoint":
        """Build a white point from chromaticity coordinates."""
        if y <= 0.0:
            raise ValueError(f"Chromaticity y must be positive, got {y}")
        return cls(name, x / y, 1.0, (1.0 - x - y) / y)

    @property
    def xyz(self) -> ndarray:
        return np.array([self.X, self.Y, self.Z], dtype=np.float64)

    @property
    def xy(self) -> Tuple[float, float]:
        total = self.X + self.Y + self.Z
        return (self.X / total, self.Y / total)

    def cone_response(self, method: AdaptationMethod = AdaptationMethod.BRADFORD) -> ndarray:
        """Cone-space response of this white under ``method``."""
        return _CONE_MATRICES[AdaptationMethod(method)] @ self.xyz

    def same_as(self, other: "WhitePoint", atol: float = 1e-9) -> bool:
        """Compare tristimulus values, ignoring the name."""
        return bool(np.allclose(self.xyz, other.xyz, rtol=0.0, atol=atol))


A = WhitePoint.from_xy(0.44757, 0.40745, "A")
C = WhitePoint.from_xy(0.31006, 0.31616, "C")
D50 = WhitePoint.from_xy(0.3457, 0.3585, "D50")
D55 = WhitePoint.from_xy(0.33242, 0.34743, "D55")
D65 = WhitePoint.from_xy(0.3127, 0.3290, "D65")
D75 = WhitePoint.from_xy(0.29902, 0.31485, "D75")
E = WhitePoint("E", 1.0, 1.0, 1.0)
F2 = WhitePoint.from_xy(0.37208, 0.37529, "F2")
F7 = WhitePoint.from_xy(0.31292, 0.32933, "F7")
F11 = WhitePoint.from_xy(0.38052, 0.37713, "F11")

STANDARD_ILLUMINANTS = {wp.name: wp for wp in (A, C, D50, D55, D65, D75, E, F2, F7, F11)}


def get_white_point(name: str) -> WhitePoint:
    """Look up a standard illuminant by name (case-insensitive)."""
    try:
        return STANDARD_ILLUMINANTS[name.upper()]
    except KeyError:
        raise ValueError(
            f"Unknown white point {name!r}; expected one of {sorted(STANDARD_ILLUMINANTS)}"
        ) from None


@lru_cache(maxsize=64)
def adaptation_matrix(
    src: WhitePoint,
    dst: WhitePoint,
    method: AdaptationMethod = AdaptationMethod.BRADFORD,
) -> ndarray:
    """
    3x3 matrix mapping XYZ under ``src`` to XYZ under ``dst``.

    Returns the identity when both whites have the same tristimulus values.
    The returned array is read-only since it is shared through the cache.
    """
    if src.same_as(dst):
        matrix = np.eye(3, dtype=np.float64)
    else:
        cone = _CONE_MATRICES[AdaptationMethod(method)]
        scale = np.diag(dst.cone_response(method) / src.cone_response(method))
        matrix = np.linalg.inv(cone) @ scale @ cone
    matrix.setflags(write=False)
    return matrix


def adapt(
    xyz: ndarray,
    src: WhitePoint,
    dst: WhitePoint,
    method: AdaptationMethod = AdaptationMethod.BRADFORD,
) -> ndarray:
    """
    Chromatically adapt XYZ values of shape ``(..., 3)`` from ``src`` to ``dst``.
    """
    xyz = np.asarray(xyz, dtype=np.float64)
    if src.same_as(dst):
        return xyz.copy()
    matrix = adaptation_matrix(src, dst, AdaptationMethod(method))
    return np.einsum('...j,ij->...i', xyz, matrix)
