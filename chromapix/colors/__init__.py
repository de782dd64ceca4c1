"""
Chromapix Color Values
======================

:class:`Color` is an immutable value object: a color model, the channel
values in that model's natural units, a straight alpha and the reference
white point.

Usage
-----
>>> from chromapix.colors import Color
>>> red = Color("rgb", (1.0, 0.0, 0.0))
>>> red.convert("hsv").values
(0.0, 1.0, 1.0)
>>> red.with_alpha(0.5).alpha
0.5
>>> Color.from_hex("#ff0000") == red
True

Notes
-----
- Instances are frozen after ``__init__``; every operation returns a new one
- Equality is exact over (model, values, alpha, white); use ``isclose`` for
  tolerance-based comparison across models
- ``Color(model, other_color)`` converts ``other_color`` into ``model``
"""

from .color import Color

__all__ = ['Color']
