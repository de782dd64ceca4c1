"""CMYK to and from unit RGB."""

from __future__ import annotations
from typing import Tuple

import numpy as np
from numpy import ndarray as NDArray


def np_unit_rgb_to_cmyk(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    ``K = min(1-R, 1-G, 1-B)``, ``C = (1-R-K) / (1-K)`` and so on.

    Pure black has no defined ink mix; it maps to ``C = M = Y = 0, K = 1``.
    """
    r = np.asarray(r, dtype=np.float64)
    g = np.asarray(g, dtype=np.float64)
    b = np.asarray(b, dtype=np.float64)
    k = np.minimum(np.minimum(1.0 - r, 1.0 - g), 1.0 - b)
    ink = 1.0 - k
    safe = np.where(ink > 0.0, ink, 1.0)

    def channel(x: NDArray) -> NDArray:
        return np.where(ink > 0.0, (1.0 - x - k) / safe, 0.0)

    return np.stack([channel(r), channel(g), channel(b), k], axis=-1)


def np_cmyk_to_unit_rgb(c: NDArray, m: NDArray, y: NDArray, k: NDArray) -> NDArray:
    c = np.asarray(c, dtype=np.float64)
    m = np.asarray(m, dtype=np.float64)
    y = np.asarray(y, dtype=np.float64)
    k = np.asarray(k, dtype=np.float64)
    ink = 1.0 - k
    return np.stack([(1.0 - c) * ink, (1.0 - m) * ink, (1.0 - y) * ink], axis=-1)


def unit_rgb_to_cmyk(r: float, g: float, b: float) -> Tuple[float, float, float, float]:
    return tuple(float(v) for v in np_unit_rgb_to_cmyk(r, g, b))  # type: ignore[return-value]


def cmyk_to_unit_rgb(c: float, m: float, y: float, k: float) -> Tuple[float, float, float]:
    return tuple(float(v) for v in np_cmyk_to_unit_rgb(c, m, y, k))  # type: ignore[return-value]
