from __future__ import annotations
from typing import NamedTuple, Tuple, Union


class Region(NamedTuple):
    """
    A rectangle in raster coordinates.

    ``x`` and ``y`` may be negative; ``width`` and ``height`` are never
    negative. Empty regions (zero width or height) are valid.
    """

    x: int
    y: int
    width: int
    height: int

    @classmethod
    def of(cls, region: "RegionLike") -> "Region":
        """Coerce a ``Region`` or an ``(x, y, width, height)`` tuple."""
        x, y, width, height = (int(v) for v in region)
        if width < 0 or height < 0:
            raise ValueError(f"Region size must not be negative, got {width}x{height}")
        return cls(x, y, width, height)

    @property
    def right(self) -> int:
        """One past the last column."""
        return self.x + self.width

    @property
    def bottom(self) -> int:
        """One past the last row."""
        return self.y + self.height

    @property
    def is_empty(self) -> bool:
        return self.width == 0 or self.height == 0

    def intersection(self, other: "RegionLike") -> "Region":
        """Overlap of two regions; empty (zero size) when they do not meet."""
        other = Region.of(other)
        x0 = max(self.x, other.x)
        y0 = max(self.y, other.y)
        x1 = min(self.right, other.right)
        y1 = min(self.bottom, other.bottom)
        return Region(x0, y0, max(x1 - x0, 0), max(y1 - y0, 0))

    def contains(self, x: int, y: int) -> bool:
        return self.x <= x < self.right and self.y <= y < self.bottom

    def slices(self) -> Tuple[slice, slice]:
        """Row and column slices selecting this region of an (h, w, c) array."""
        return slice(self.y, self.bottom), slice(self.x, self.right)


RegionLike = Union[Region, Tuple[int, int, int, int]]
