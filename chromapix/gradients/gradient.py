from __future__ import annotations
from typing import Iterable, NamedTuple, Optional, Sequence, Tuple, Union
import warnings

import numpy as np
from numpy import ndarray

from ..colors.color import Color
from ..conversions import np_convert
from ..defaults import DEFAULT_EXTENSION, DEFAULT_MODEL, value_or_default
from ..errors import InvalidStops
from ..pixel.format import PixelFormat
from ..types.color_types import ColorModel, HueDirection, ModelName, MODEL_SPECS, as_model, is_hue_space
from ..types.format_type import ExtensionMode
from ..whitepoint import WhitePoint
from .interpolation import HUE_DIRECTIONS, extend_positions, lerp_channels


class GradientStop(NamedTuple):
    position: float
    color: Color


StopLike = Union[GradientStop, Tuple[float, Color]]


class Gradient:
    """
    A color gradient: two or more stops sampled over ``[0, 1]``.

    Stops are kept in ascending position order; equal positions make a hard
    edge where the later stop wins. Colors are interpolated per channel (alpha
    included) in ``model`` and relative to the first stop's white point.

    Args:
        stops: ``GradientStop`` or ``(position, Color)`` pairs
        model: Interpolation color model
        extension: How positions outside ``[0, 1]`` are folded back in
        hue_direction: Arc for the hue channel of hue models ('cw', 'ccw',
                       'shortest', 'longest'); None lerps hue like any channel

    Raises:
        InvalidStops: fewer than two stops, a position outside ``[0, 1]`` or
                      positions out of order

    >>> red = Color("rgb", (1.0, 0.0, 0.0))
    >>> blue = Color("rgb", (0.0, 0.0, 1.0))
    >>> Gradient([(0.0, red), (1.0, blue)]).sample(0.5).values
    (0.5, 0.0, 0.5)
    """

    __slots__ = (
        '_stops',
        '_model',
        '_extension',
        '_hue_direction',
        '_white',
        '_positions',
        '_values',
        '_alphas',
    )

    def __init__(
        self,
        stops: Iterable[StopLike],
        model: Optional[ModelName] = None,
        extension: Optional[ExtensionMode] = None,
        hue_direction: Optional[HueDirection] = None,
    ) -> None:
        self._stops = _validate_stops(stops)
        self._model = as_model(value_or_default(model, DEFAULT_MODEL))
        self._extension = ExtensionMode(value_or_default(extension, DEFAULT_EXTENSION))

        if hue_direction is not None:
            if hue_direction not in HUE_DIRECTIONS:
                raise ValueError(f"Invalid hue direction: {hue_direction}")
            if not is_hue_space(self._model):
                warnings.warn(
                    f"hue_direction={hue_direction!r} is ignored for {self._model.value}, which has no hue channel",
                    UserWarning,
                    stacklevel=2,
                )
                hue_direction = None
        self._hue_direction = hue_direction

        self._white = self._stops[0].color.white
        self._positions = np.array([s.position for s in self._stops], dtype=np.float64)
        self._values = np.array(
            [s.color.convert(self._model, self._white).values for s in self._stops],
            dtype=np.float64,
        )
        self._alphas = np.array([s.color.alpha for s in self._stops], dtype=np.float64)

    @classmethod
    def evenly(
        cls,
        colors: Sequence[Color],
        model: Optional[ModelName] = None,
        extension: Optional[ExtensionMode] = None,
        hue_direction: Optional[HueDirection] = None,
    ) -> "Gradient":
        """Build a gradient with ``colors`` spread evenly over ``[0, 1]``."""
        colors = list(colors)
        if len(colors) < 2:
            raise InvalidStops(f"A gradient needs at least two stops, got {len(colors)}")
        positions = np.linspace(0.0, 1.0, len(colors))
        return cls(zip(positions.tolist(), colors), model, extension, hue_direction)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def stops(self) -> Tuple[GradientStop, ...]:
        return self._stops

    @property
    def model(self) -> ColorModel:
        return self._model

    @property
    def extension(self) -> ExtensionMode:
        return self._extension

    @property
    def hue_direction(self) -> Optional[HueDirection]:
        return self._hue_direction

    @property
    def white(self) -> WhitePoint:
        return self._white

    @property
    def output_model(self) -> ColorModel:
        """Model of sampled colors when none is requested: the first stop's."""
        return self._stops[0].color.model

    # ------------------ SAMPLING ------------------
    def sample_many(
        self,
        ts: Union[float, Sequence[float], ndarray],
        model: Optional[ModelName] = None,
        white: Optional[WhitePoint] = None,
    ) -> Tuple[ndarray, ndarray]:
        """
        Sample the gradient at many positions at once.

        Args:
            ts: Positions of any shape
            model: Output model, default the first stop's model
            white: Output white point, default the first stop's white

        Returns:
            ``(values, alpha)`` with shapes ``ts.shape + (n,)`` and ``ts.shape``

        Raises:
            ValueError: if any position is NaN or infinite
        """
        out_model = as_model(value_or_default(model, self.output_model))
        out_white = value_or_default(white, self._white)
        t = extend_positions(ts, self._extension)
        shape = t.shape
        flat = t.ravel()

        n = len(self._positions)
        right = np.searchsorted(self._positions, flat, side='right') - 1
        idx = np.clip(right, 0, n - 2)
        p0 = self._positions[idx]
        p1 = self._positions[idx + 1]
        span = p1 - p0
        safe = np.where(span > 0.0, span, 1.0)
        u = np.clip(np.where(span > 0.0, (flat - p0) / safe, 1.0), 0.0, 1.0)

        values = lerp_channels(
            self._values[idx],
            self._values[idx + 1],
            u,
            MODEL_SPECS[self._model].hue_index,
            self._hue_direction,
        )
        alpha = self._alphas[idx] + u * (self._alphas[idx + 1] - self._alphas[idx])
        values = np_convert(values, self._model, out_model, src_white=self._white, dst_white=out_white)

        # positions sitting exactly on a stop reproduce that stop
        hit = (right >= 0) & (self._positions[np.clip(right, 0, n - 1)] == flat)
        if np.any(hit):
            stop_idx = right[hit]
            direct = np.array(
                [s.color.convert(out_model, out_white).values for s in self._stops],
                dtype=np.float64,
            )
            values[hit] = direct[stop_idx]
            alpha[hit] = self._alphas[stop_idx]

        return values.reshape(shape + (values.shape[-1],)), alpha.reshape(shape)

    def sample(self, t: float, model: Optional[ModelName] = None) -> Color:
        """
        Sample one color at position ``t``.

        ``t`` is first folded by the extension mode; ``sample(0)`` and
        ``sample(1)`` reproduce the end stops for stops at 0 and 1. A NaN or
        infinite ``t`` raises ValueError, as in :meth:`sample_many`.
        """
        out_model = as_model(value_or_default(model, self.output_model))
        values, alpha = self.sample_many(np.array([t], dtype=np.float64), out_model)
        return Color(out_model, values[0], float(alpha[0]), self._white)

    def render(self, ts: Union[Sequence[float], ndarray], fmt: PixelFormat) -> ndarray:
        """Sample at ``ts`` and encode into ``fmt``; shape ``ts.shape + (channel_count,)``."""
        values, alpha = self.sample_many(ts, fmt.model, fmt.white)
        return fmt.encode(values, alpha)

    def paint(self, raster, positions: ndarray) -> None:
        """
        Fill ``raster`` with this gradient.

        Args:
            raster: Destination Raster
            positions: Gradient position per pixel, shape (height, width)
        """
        positions = np.asarray(positions, dtype=np.float64)
        if positions.shape != (raster.height, raster.width):
            raise ValueError(
                f"positions must have shape ({raster.height}, {raster.width}), got {positions.shape}"
            )
        raster.data[...] = self.render(positions, raster.format)

    # ------------------ PROTOCOLS ------------------
    def __len__(self) -> int:
        return len(self._stops)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Gradient):
            return NotImplemented
        return (
            self._stops == other._stops
            and self._model == other._model
            and self._extension == other._extension
            and self._hue_direction == other._hue_direction
        )

    def __hash__(self) -> int:
        return hash((self._stops, self._model, self._extension, self._hue_direction))

    def __repr__(self) -> str:
        return (
            f"Gradient({len(self._stops)} stops, model={self._model.value!r}, "
            f"extension={self._extension.value!r}, hue_direction={self._hue_direction!r})"
        )


def _validate_stops(stops: Iterable[StopLike]) -> Tuple[GradientStop, ...]:
    result = []
    for stop in stops:
        try:
            position, color = stop
        except (TypeError, ValueError):
            raise InvalidStops(f"Expected a (position, color) pair, got {stop!r}") from None
        if not isinstance(color, Color):
            raise TypeError(f"Gradient stop colors must be Color instances, got {type(color).__name__}")
        position = float(position)
        if not (0.0 <= position <= 1.0):
            raise InvalidStops(f"Stop position {position} is outside [0, 1]")
        result.append(GradientStop(position, color))

    if len(result) < 2:
        raise InvalidStops(f"A gradient needs at least two stops, got {len(result)}")
    for prev, cur in zip(result, result[1:]):
        if cur.position < prev.position:
            raise InvalidStops(
                f"Stop positions must be ascending, got {cur.position} after {prev.position}"
            )
    return tuple(result)
