"""
Interpolation utilities for gradient segments.
"""

from typing import Optional
import numpy as np
from boundednumbers import bound_type_to_np_function

from ..conversions.hue import wrap_hue
from ..types.format_type import ExtensionMode, extension_bound_types

HUE_DIRECTIONS = ('cw', 'ccw', 'shortest', 'longest')


def extend_positions(t: np.ndarray, mode: ExtensionMode) -> np.ndarray:
    """
    Fold sample positions into ``[0, 1]``.

    Args:
        t: Positions, any finite real values
        mode: CLAMP clips, REPEAT wraps with period 1, MIRROR folds with period 2

    Returns:
        Positions in ``[0, 1]``

    Raises:
        ValueError: if any position is NaN or infinite
    """
    t = np.asarray(t, dtype=np.float64)
    if not np.all(np.isfinite(t)):
        raise ValueError("Gradient positions must be finite")
    bound = bound_type_to_np_function[extension_bound_types[ExtensionMode(mode)]]
    folded = np.asarray(bound(t, 0.0, 1.0), dtype=np.float64)
    if mode == ExtensionMode.REPEAT:
        # 1, 2, 3... land on the end of the cycle, not its start
        folded = np.where((t > 0.0) & (t == np.floor(t)), 1.0, folded)
    return folded


def interpolate_hue(
    h0: np.ndarray,
    h1: np.ndarray,
    u: np.ndarray,
    direction: Optional[str] = None,
) -> np.ndarray:
    """
    Interpolate hue values with wrapping support.

    Args:
        h0: Start hue(s) in degrees
        h1: End hue(s) in degrees
        u: Interpolation coefficients
        direction: 'cw' (increasing hue), 'ccw' (decreasing hue), 'longest',
                   or None / 'shortest' for the shortest arc

    Returns:
        Interpolated hue values in [0, 360)
    """
    h0 = np.mod(h0, 360.0)
    h1 = np.mod(h1, 360.0)
    delta = h1 - h0

    if direction == 'cw':
        h1 = np.where(h1 < h0, h1 + 360.0, h1)
    elif direction == 'ccw':
        h1 = np.where(h1 > h0, h1 - 360.0, h1)
    elif direction == 'longest':
        h1 = np.where((delta > 0.0) & (delta < 180.0), h1 - 360.0, h1)
        h1 = np.where((delta < 0.0) & (delta > -180.0), h1 + 360.0, h1)
    elif direction in (None, 'shortest'):
        h1 = np.where(delta > 180.0, h1 - 360.0, h1)
        h1 = np.where(delta < -180.0, h1 + 360.0, h1)
    else:
        raise ValueError(f"Invalid hue direction: {direction}")

    return wrap_hue(h0 + u * (h1 - h0))


def lerp_channels(
    starts: np.ndarray,
    ends: np.ndarray,
    u: np.ndarray,
    hue_index: Optional[int] = None,
    hue_direction: Optional[str] = None,
) -> np.ndarray:
    """
    Per-channel linear interpolation of (N, C) start/end rows by (N,) ``u``.

    When ``hue_direction`` is set, channel ``hue_index`` goes around the hue
    circle instead of along a straight line.
    """
    out = starts + u[:, None] * (ends - starts)
    if hue_index is not None and hue_direction is not None:
        out[:, hue_index] = interpolate_hue(starts[:, hue_index], ends[:, hue_index], u, hue_direction)
    return out


__all__ = [
    'HUE_DIRECTIONS',
    'extend_positions',
    'interpolate_hue',
    'lerp_channels',
]
