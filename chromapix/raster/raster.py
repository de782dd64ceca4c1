"""
Raster Buffers
==============

A :class:`Raster` is a rectangular block of pixels sharing one
:class:`~chromapix.pixel.PixelFormat`, stored as a C-contiguous numpy array of
shape ``(height, width, channel_count)`` with the format's dtype. Its byte
length is always ``width * height * fmt.byte_size``.

Rows are exposed as writable views (:meth:`Raster.row`) or raw byte views
(:meth:`Raster.row_bytes`); single pixels go through :meth:`Raster.get_pixel`
and :meth:`Raster.set_pixel`, which decode and encode
:class:`~chromapix.colors.Color` values.

Examples
--------
>>> from chromapix.pixel import RGB8, HSV32F
>>> r = Raster.create(2, 2, RGB8)
>>> r.set_pixel(0, 0, (1.0, 0.0, 0.0))
>>> r.convert_to(HSV32F).get_pixel(0, 0).values
(0.0, 1.0, 1.0)
"""

from __future__ import annotations
from concurrent.futures import ThreadPoolExecutor
from typing import Iterator, Optional, Tuple, Union
import logging

import numpy as np
from numpy import ndarray

from ..channel import lerp_alpha
from ..colors.color import Color
from ..errors import OutOfBounds
from ..pixel.format import PixelFormat, PixelValue, convert_pixels
from .region import Region, RegionLike

logger = logging.getLogger(__name__)

Buffer = Union[bytes, bytearray, memoryview]


class RasterPixels:
    """
    Lazy, restartable view of a raster's pixels as ``(x, y, Color)``.

    Iterates in row-major order, decoding one row at a time. Each call to
    ``iter()`` starts again from ``(0, 0)`` and reflects the raster's
    current contents.
    """

    def __init__(self, raster: "Raster") -> None:
        self._raster = raster

    def __iter__(self) -> Iterator[Tuple[int, int, Color]]:
        fmt = self._raster.format
        for y, row in enumerate(self._raster.rows()):
            values, alpha = fmt.decode(row)
            for x in range(row.shape[0]):
                yield x, y, Color(fmt.model, values[x], float(alpha[x]), fmt.white)

    def __len__(self) -> int:
        return self._raster.width * self._raster.height


class Raster:
    """
    Mutable 2D pixel buffer in a single pixel format.

    Prefer the ``create``, ``from_buffer`` and ``from_array`` factories; the
    constructor adopts an existing array without copying.
    """

    def __init__(self, data: ndarray, fmt: PixelFormat) -> None:
        if not isinstance(fmt, PixelFormat):
            raise TypeError(f"Expected a PixelFormat, got {type(fmt).__name__}")
        if data.ndim != 3 or data.shape[2] != fmt.channel_count:
            raise ValueError(
                f"{fmt} raster data must have shape (height, width, {fmt.channel_count}), got {data.shape}"
            )
        if data.dtype != fmt.dtype:
            raise ValueError(f"{fmt} raster data must have dtype {fmt.dtype}, got {data.dtype}")
        self._data = np.ascontiguousarray(data)
        self._format = fmt

    # ------------------ FACTORIES ------------------
    @classmethod
    def create(
        cls,
        width: int,
        height: int,
        fmt: PixelFormat,
        fill: Optional[PixelValue] = None,
    ) -> "Raster":
        """
        Allocate a raster.

        Args:
            width: Columns, at least 0
            height: Rows, at least 0
            fmt: Pixel format of every pixel
            fill: Initial color (a Color or model values); all channels are
                  zero when omitted

        Returns:
            New Raster instance
        """
        width, height = _check_size(width, height)
        raster = cls(np.zeros((height, width, fmt.channel_count), dtype=fmt.dtype), fmt)
        if fill is not None:
            raster.fill(fill)
        return raster

    @classmethod
    def from_buffer(cls, width: int, height: int, fmt: PixelFormat, buffer: Buffer) -> "Raster":
        """Copy raw little-endian pixel bytes of exactly ``width * height * fmt.byte_size``."""
        width, height = _check_size(width, height)
        expected = width * height * fmt.byte_size
        actual = memoryview(buffer).nbytes
        if actual != expected:
            raise ValueError(f"{width}x{height} {fmt} raster needs {expected} bytes, got {actual}")
        data = np.frombuffer(buffer, dtype=fmt.dtype).reshape(height, width, fmt.channel_count)
        return cls(data.copy(), fmt)

    @classmethod
    def from_array(cls, array: ndarray, fmt: PixelFormat) -> "Raster":
        """Copy a ``(height, width, channel_count)`` array of the format's dtype."""
        array = np.asarray(array)
        if array.dtype != fmt.dtype:
            raise ValueError(f"{fmt} raster data must have dtype {fmt.dtype}, got {array.dtype}")
        return cls(np.array(array, copy=True, order='C'), fmt)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def width(self) -> int:
        return self._data.shape[1]

    @property
    def height(self) -> int:
        return self._data.shape[0]

    @property
    def format(self) -> PixelFormat:
        return self._format

    @property
    def data(self) -> ndarray:
        """The backing array, shape (height, width, channel_count)."""
        return self._data

    @property
    def nbytes(self) -> int:
        return self._data.nbytes

    def to_bytes(self) -> bytes:
        return self._data.tobytes()

    def copy(self) -> "Raster":
        return Raster(self._data.copy(), self._format)

    def clear(self) -> None:
        """Set every channel of every pixel to zero."""
        self._data.fill(0)

    # ------------------ PIXEL ACCESS ------------------
    def _check(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise OutOfBounds(x, y, self.width, self.height)

    def get_pixel(self, x: int, y: int) -> Color:
        """
        Decode the pixel at column ``x``, row ``y``.

        Raises:
            OutOfBounds: if the coordinate is outside the raster
        """
        self._check(x, y)
        values, alpha = self._format.decode(self._data[y, x])
        return Color(self._format.model, values, float(alpha), self._format.white)

    def set_pixel(self, x: int, y: int, color: PixelValue) -> None:
        """
        Encode ``color`` into the pixel at column ``x``, row ``y``.

        A Color in another model or white point is converted first; a plain
        sequence is taken as this format's model values (plus optional alpha).

        Raises:
            OutOfBounds: if the coordinate is outside the raster
        """
        self._check(x, y)
        self._data[y, x] = self._format.encode(*self._format.color_values(color))

    def row(self, y: int) -> ndarray:
        """Writable view of row ``y``, shape (width, channel_count)."""
        if not 0 <= y < self.height:
            raise OutOfBounds(0, y, self.width, self.height)
        return self._data[y]

    def row_bytes(self, y: int) -> memoryview:
        """Writable byte view of row ``y`` (``width * byte_size`` bytes)."""
        return memoryview(self.row(y)).cast('B')

    def rows(self) -> Iterator[ndarray]:
        """Iterate writable row views from top to bottom."""
        for y in range(self.height):
            yield self._data[y]

    def pixels(self) -> RasterPixels:
        """Lazy, restartable iterable of ``(x, y, Color)`` in row-major order."""
        return RasterPixels(self)

    # ------------------ REGIONS ------------------
    def region(self, region: Optional[RegionLike] = None) -> Region:
        """Clip ``region`` to the raster; the whole raster when omitted."""
        full = Region(0, 0, self.width, self.height)
        if region is None:
            return full
        return full.intersection(region)

    def fill(self, color: PixelValue, region: Optional[RegionLike] = None) -> None:
        """Set every pixel of ``region`` (clipped to the raster) to ``color``."""
        reg = self.region(region)
        if reg.is_empty:
            return
        rows, cols = reg.slices()
        self._data[rows, cols] = self._format.encode(*self._format.color_values(color))

    def compose_color(self, color: PixelValue, region: Optional[RegionLike] = None) -> None:
        """
        Composite ``color`` over ``region`` with the source-over operator.

        Blending happens on straight-alpha model values::

            a_out = a_src + a_dst * (1 - a_src)
            c_out = (c_src * a_src + c_dst * a_dst * (1 - a_src)) / a_out

        Formats without alpha behave as opaque destinations.
        """
        reg = self.region(region)
        if reg.is_empty:
            return
        src_values, src_alpha = self._format.color_values(color)
        self._source_over(reg, src_values, src_alpha)

    def compose_raster(
        self,
        src: "Raster",
        region: Optional[RegionLike] = None,
        src_region: Optional[RegionLike] = None,
    ) -> None:
        """
        Composite pixels of ``src`` over this raster with the source-over operator.

        Pixel ``(region.x + i, region.y + j)`` receives source pixel
        ``(src_region.x + i, src_region.y + j)`` for offsets inside both
        regions; the overlap is clipped to both rasters, so negative origins
        skip the pixels that fall outside. Source pixels are converted into
        this raster's format first.

        Args:
            src: Source raster, any pixel format
            region: Destination rectangle; the whole raster when omitted
            src_region: Source rectangle; the whole source when omitted
        """
        if not isinstance(src, Raster):
            raise TypeError(f"Expected a Raster, got {type(src).__name__}")
        dst_reg = Region.of(region) if region is not None else self.region()
        src_reg = Region.of(src_region) if src_region is not None else src.region()
        dx = src_reg.x - dst_reg.x
        dy = src_reg.y - dst_reg.y

        span = Region(
            dst_reg.x,
            dst_reg.y,
            min(dst_reg.width, src_reg.width),
            min(dst_reg.height, src_reg.height),
        )
        # source bounds in destination coordinates
        target = self.region(span).intersection((-dx, -dy, src.width, src.height))
        if target.is_empty:
            return

        rows, cols = Region(target.x + dx, target.y + dy, target.width, target.height).slices()
        converted = convert_pixels(src.data[rows, cols], src.format, self._format)
        src_values, src_alpha = self._format.decode(converted)
        self._source_over(target, src_values, src_alpha)

    def _source_over(self, reg: Region, src_values: ndarray, src_alpha) -> None:
        rows, cols = reg.slices()
        fmt = self._format
        dst_values, dst_alpha = fmt.decode(self._data[rows, cols])

        out_alpha = src_alpha + dst_alpha * (1.0 - src_alpha)
        safe = np.where(out_alpha > 0.0, out_alpha, 1.0)
        weight = np.where(out_alpha > 0.0, src_alpha / safe, 0.0)
        blended = lerp_alpha(src_values, dst_values, np.asarray(weight)[..., None])
        self._data[rows, cols] = fmt.encode(blended, out_alpha)

    # ------------------ CONVERSION ------------------
    def convert_to(self, fmt: PixelFormat, workers: Optional[int] = None) -> "Raster":
        """
        Convert every pixel into a new raster of format ``fmt``.

        Args:
            fmt: Destination pixel format
            workers: When greater than 1, convert disjoint row bands on a
                     thread pool of that size

        Returns:
            New Raster with the same dimensions
        """
        if workers is not None and workers < 1:
            raise ValueError(f"workers must be at least 1, got {workers}")
        if not workers or workers == 1 or self.height < 2:
            return Raster(convert_pixels(self._data, self._format, fmt), fmt)

        out = np.empty((self.height, self.width, fmt.channel_count), dtype=fmt.dtype)
        bounds = np.linspace(0, self.height, min(workers, self.height) + 1).astype(int)
        bands = [slice(lo, hi) for lo, hi in zip(bounds[:-1], bounds[1:])]
        logger.debug(
            "Converting %dx%d raster from %s to %s in %d bands",
            self.width, self.height, self._format, fmt, len(bands),
        )

        def convert_band(band: slice) -> None:
            out[band] = convert_pixels(self._data[band], self._format, fmt)

        with ThreadPoolExecutor(max_workers=workers) as pool:
            # list() re-raises the first worker exception
            list(pool.map(convert_band, bands))
        return Raster(out, fmt)

    # ------------------ PROTOCOLS ------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Raster):
            return NotImplemented
        return self._format == other._format and np.array_equal(self._data, other._data)

    __hash__ = None

    def __repr__(self) -> str:
        return f"Raster({self.width}x{self.height}, {self._format})"


def _check_size(width: int, height: int) -> Tuple[int, int]:
    width, height = int(width), int(height)
    if width < 0 or height < 0:
        raise ValueError(f"Raster size must not be negative, got {width}x{height}")
    return width, height
