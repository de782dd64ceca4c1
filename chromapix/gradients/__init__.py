"""
Chromapix Gradients
===================

Multi-stop color gradients with per-channel interpolation in any color model.

Features
--------
- Two or more stops, equal positions allowed for hard edges
- Extension modes: CLAMP, REPEAT (period 1) and MIRROR (period 2)
- Hue arcs for hue models: cw, ccw, shortest, longest
- Vectorised sampling, encoding into a PixelFormat and painting into a Raster

Examples
--------
>>> from chromapix import Color, Gradient, Raster, RGBA8
>>> from chromapix.gradients import linear_positions
>>> g = Gradient.evenly([Color("rgb", (1, 0, 0)), Color("rgb", (0, 0, 1))])
>>> r = Raster.create(64, 8, RGBA8)
>>> g.paint(r, linear_positions(64, 8, (0, 0), (63, 0)))
"""

from .gradient import Gradient, GradientStop
from .interpolation import extend_positions, interpolate_hue
from .positions import compute_center, linear_positions, pixel_grid, radial_positions

__all__ = [
    'Gradient',
    'GradientStop',
    'extend_positions',
    'interpolate_hue',
    'compute_center',
    'linear_positions',
    'pixel_grid',
    'radial_positions',
]
