"""Exception hierarchy for chromapix."""


class ChromapixError(Exception):
    """Base exception for all chromapix errors."""


class OutOfBounds(ChromapixError, IndexError):
    """A raster coordinate falls outside the raster's dimensions."""

    def __init__(self, x: int, y: int, width: int, height: int) -> None:
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        super().__init__(f"Pixel ({x}, {y}) is outside a {width}x{height} raster")


class InvalidChannelValue(ChromapixError, ValueError):
    """A channel value outside [0, 1] was given in strict mode."""

    def __init__(self, value) -> None:
        self.value = value
        super().__init__(f"Channel value {value!r} is outside the normalized range [0, 1]")


class InvalidStops(ChromapixError, ValueError):
    """Gradient stops are missing, out of range or unsorted."""
