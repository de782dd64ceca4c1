"""
Hue-based models (HSV, HSL, HSI, HWB) to and from unit RGB.

Hue is in degrees ``[0, 360)``; every other channel is in ``[0, 1]``.
Achromatic colors get hue 0. When two channels tie for the maximum the
hexcone hue prefers red, then green, then blue.

The ``np_`` functions take one array per channel and return the channels
stacked on the last axis. The scalar functions return plain tuples.
"""

from __future__ import annotations
from typing import Tuple

import numpy as np
from numpy import ndarray as NDArray

from ..types.format_type import HUE_360


def _as_float(*channels) -> Tuple[NDArray, ...]:
    return tuple(np.asarray(c, dtype=np.float64) for c in channels)


def wrap_hue(h: NDArray) -> NDArray:
    """Wrap degrees into ``[0, 360)``."""
    h = np.mod(h, HUE_360)
    # fmod of a tiny negative lands on 360.0
    return np.where(h >= HUE_360, 0.0, h)


def hexcone_hue(r: NDArray, g: NDArray, b: NDArray, mx: NDArray, chroma: NDArray) -> NDArray:
    """Hexcone hue in degrees shared by HSV, HSL and HWB."""
    safe = np.where(chroma > 0.0, chroma, 1.0)
    h = np.select(
        [chroma <= 0.0, mx == r, mx == g],
        [0.0, np.mod((g - b) / safe, 6.0), (b - r) / safe + 2.0],
        default=(r - g) / safe + 4.0,
    )
    return wrap_hue(h * 60.0)


def _to_tuple(stacked: NDArray) -> Tuple[float, ...]:
    return tuple(float(v) for v in stacked)


# =============================================================================
# HSV
# =============================================================================


def np_unit_rgb_to_hsv(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    r, g, b = _as_float(r, g, b)
    mx = np.maximum(np.maximum(r, g), b)
    mn = np.minimum(np.minimum(r, g), b)
    chroma = mx - mn
    h = hexcone_hue(r, g, b, mx, chroma)
    s = np.where(mx > 0.0, chroma / np.where(mx > 0.0, mx, 1.0), 0.0)
    return np.stack([h, s, mx], axis=-1)


def np_hsv_to_unit_rgb(h: NDArray, s: NDArray, v: NDArray) -> NDArray:
    h, s, v = _as_float(h, s, v)
    hp = wrap_hue(h) / 60.0

    def f(n: float) -> NDArray:
        k = np.mod(n + hp, 6.0)
        return v - v * s * np.clip(np.minimum(k, 4.0 - k), 0.0, 1.0)

    return np.stack([f(5.0), f(3.0), f(1.0)], axis=-1)


def unit_rgb_to_hsv(r: float, g: float, b: float) -> Tuple[float, float, float]:
    return _to_tuple(np_unit_rgb_to_hsv(r, g, b))  # type: ignore[return-value]


def hsv_to_unit_rgb(h: float, s: float, v: float) -> Tuple[float, float, float]:
    return _to_tuple(np_hsv_to_unit_rgb(h, s, v))  # type: ignore[return-value]


# =============================================================================
# HSL
# =============================================================================


def np_unit_rgb_to_hsl(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    r, g, b = _as_float(r, g, b)
    mx = np.maximum(np.maximum(r, g), b)
    mn = np.minimum(np.minimum(r, g), b)
    chroma = mx - mn
    h = hexcone_hue(r, g, b, mx, chroma)
    l = (mx + mn) / 2.0
    d = 1.0 - np.abs(2.0 * l - 1.0)
    s = np.where(d > 0.0, chroma / np.where(d > 0.0, d, 1.0), 0.0)
    return np.stack([h, np.clip(s, 0.0, 1.0), l], axis=-1)


def np_hsl_to_unit_rgb(h: NDArray, s: NDArray, l: NDArray) -> NDArray:
    h, s, l = _as_float(h, s, l)
    a = s * np.minimum(l, 1.0 - l)
    hp = wrap_hue(h) / 30.0

    def f(n: float) -> NDArray:
        k = np.mod(n + hp, 12.0)
        return l - a * np.clip(np.minimum(k - 3.0, 9.0 - k), -1.0, 1.0)

    return np.stack([f(0.0), f(8.0), f(4.0)], axis=-1)


def unit_rgb_to_hsl(r: float, g: float, b: float) -> Tuple[float, float, float]:
    return _to_tuple(np_unit_rgb_to_hsl(r, g, b))  # type: ignore[return-value]


def hsl_to_unit_rgb(h: float, s: float, l: float) -> Tuple[float, float, float]:
    return _to_tuple(np_hsl_to_unit_rgb(h, s, l))  # type: ignore[return-value]


# =============================================================================
# HSV <-> HSL
# =============================================================================


def np_hsv_to_hsl(h: NDArray, s: NDArray, v: NDArray) -> NDArray:
    h, s, v = _as_float(h, s, v)
    l = v * (1.0 - s / 2.0)
    m = np.minimum(l, 1.0 - l)
    sl = np.where(m > 0.0, (v - l) / np.where(m > 0.0, m, 1.0), 0.0)
    return np.stack([wrap_hue(h), np.clip(sl, 0.0, 1.0), l], axis=-1)


def np_hsl_to_hsv(h: NDArray, s: NDArray, l: NDArray) -> NDArray:
    h, s, l = _as_float(h, s, l)
    v = l + s * np.minimum(l, 1.0 - l)
    sv = np.where(v > 0.0, 2.0 * (1.0 - l / np.where(v > 0.0, v, 1.0)), 0.0)
    return np.stack([wrap_hue(h), np.clip(sv, 0.0, 1.0), v], axis=-1)


# =============================================================================
# HSI (Gonzalez & Woods geometric hue)
# =============================================================================


def np_unit_rgb_to_hsi(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    r, g, b = _as_float(r, g, b)
    i = (r + g + b) / 3.0
    mn = np.minimum(np.minimum(r, g), b)
    s = np.where(i > 0.0, 1.0 - mn / np.where(i > 0.0, i, 1.0), 0.0)

    num = 0.5 * ((r - g) + (r - b))
    den = np.sqrt(np.maximum((r - g) ** 2 + (r - b) * (g - b), 0.0))
    ratio = np.clip(num / np.where(den > 0.0, den, 1.0), -1.0, 1.0)
    theta = np.degrees(np.arccos(ratio))
    h = np.where(den > 0.0, np.where(b <= g, theta, HUE_360 - theta), 0.0)
    return np.stack([wrap_hue(h), np.clip(s, 0.0, 1.0), i], axis=-1)


def np_hsi_to_unit_rgb(h: NDArray, s: NDArray, i: NDArray) -> NDArray:
    h, s, i = _as_float(h, s, i)
    h = wrap_hue(h)
    sector = np.minimum(np.floor(h / 120.0), 2.0)
    local = np.radians(h - 120.0 * sector)

    low = i * (1.0 - s)
    high = i * (1.0 + s * np.cos(local) / np.cos(np.radians(60.0) - local))
    rest = 3.0 * i - (low + high)

    r = np.select([sector == 0, sector == 1], [high, low], default=rest)
    g = np.select([sector == 0, sector == 1], [rest, high], default=low)
    b = np.select([sector == 0, sector == 1], [low, rest], default=high)
    return np.stack([r, g, b], axis=-1)


def unit_rgb_to_hsi(r: float, g: float, b: float) -> Tuple[float, float, float]:
    return _to_tuple(np_unit_rgb_to_hsi(r, g, b))  # type: ignore[return-value]


def hsi_to_unit_rgb(h: float, s: float, i: float) -> Tuple[float, float, float]:
    return _to_tuple(np_hsi_to_unit_rgb(h, s, i))  # type: ignore[return-value]


# =============================================================================
# HWB
# =============================================================================


def np_unit_rgb_to_hwb(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    r, g, b = _as_float(r, g, b)
    mx = np.maximum(np.maximum(r, g), b)
    mn = np.minimum(np.minimum(r, g), b)
    h = hexcone_hue(r, g, b, mx, mx - mn)
    return np.stack([h, mn, 1.0 - mx], axis=-1)


def np_hwb_to_unit_rgb(h: NDArray, w: NDArray, bk: NDArray) -> NDArray:
    h, w, bk = _as_float(h, w, bk)
    total = w + bk
    gray = np.where(total > 0.0, w / np.where(total > 0.0, total, 1.0), 0.0)
    v = 1.0 - bk
    s = np.where(v > 0.0, 1.0 - w / np.where(v > 0.0, v, 1.0), 0.0)
    rgb = np_hsv_to_unit_rgb(h, np.clip(s, 0.0, 1.0), v)
    return np.where((total >= 1.0)[..., None], gray[..., None], rgb)


def unit_rgb_to_hwb(r: float, g: float, b: float) -> Tuple[float, float, float]:
    return _to_tuple(np_unit_rgb_to_hwb(r, g, b))  # type: ignore[return-value]


def hwb_to_unit_rgb(h: float, w: float, b: float) -> Tuple[float, float, float]:
    return _to_tuple(np_hwb_to_unit_rgb(h, w, b))  # type: ignore[return-value]
