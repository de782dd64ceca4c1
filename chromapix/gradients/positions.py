"""
Position grids for painting gradients into rasters.

Each helper returns a float array of shape ``(height, width)`` holding the
gradient position of every pixel, measured at integer pixel coordinates.
Values may fall outside ``[0, 1]``; the gradient's extension mode decides what
happens there.
"""

from __future__ import annotations
from typing import Optional, Tuple

import numpy as np
from numpy.typing import NDArray

Point = Tuple[float, float]


def pixel_grid(width: int, height: int) -> Tuple[NDArray, NDArray]:
    """``(xs, ys)`` coordinate arrays of shape (height, width)."""
    indices = np.indices((height, width), dtype=np.float64)
    return indices[1], indices[0]


def compute_center(
    width: int,
    height: int,
    center: Optional[Point] = None,
    relative_center: Optional[Point] = None,
) -> Point:
    """Resolve the center from absolute or relative inputs, default the middle."""
    if center is not None:
        return float(center[0]), float(center[1])
    if relative_center is not None:
        return relative_center[0] * width, relative_center[1] * height
    return float(width // 2), float(height // 2)


def linear_positions(width: int, height: int, start: Point, end: Point) -> NDArray:
    """
    Project every pixel onto the line from ``start`` (t = 0) to ``end`` (t = 1).
    """
    dx = end[0] - start[0]
    dy = end[1] - start[1]
    length_sq = dx * dx + dy * dy
    if length_sq == 0.0:
        raise ValueError("start and end must be different points")
    xs, ys = pixel_grid(width, height)
    return ((xs - start[0]) * dx + (ys - start[1]) * dy) / length_sq


def radial_positions(
    width: int,
    height: int,
    center: Optional[Point] = None,
    radius: Optional[float] = None,
    relative_center: Optional[Point] = None,
) -> NDArray:
    """
    Distance of every pixel from ``center`` divided by ``radius``.

    ``radius`` defaults to half the smaller raster dimension.
    """
    cx, cy = compute_center(width, height, center, relative_center)
    if radius is None:
        radius = min(width, height) / 2.0
    if radius <= 0:
        raise ValueError(f"radius must be positive, got {radius}")
    xs, ys = pixel_grid(width, height)
    return np.hypot(xs - cx, ys - cy) / radius


__all__ = [
    'compute_center',
    'linear_positions',
    'pixel_grid',
    'radial_positions',
]
