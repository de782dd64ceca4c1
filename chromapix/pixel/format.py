"""
Pixel Formats
=============

A :class:`PixelFormat` is an immutable descriptor of one pixel's memory
layout: color model x channel type x alpha mode x gamma mode, plus the white
point the model values are relative to. It fully determines channel count and
byte size (model channels, plus one trailing alpha channel when present).

Encoding pipeline (model values → stored channels)::

    normalize by model range → clamp → premultiply → gamma encode → quantize

Decoding runs the same steps backwards. Premultiplication happens in linear
light and scales every normalized color channel by alpha; unpremultiplying a
pixel with alpha 0 yields 0 for every channel.

>>> fmt = PixelFormat(ColorModel.RGB, ChannelType.UINT8)
>>> fmt.byte_size
3
>>> fmt.with_alpha(AlphaMode.STRAIGHT).byte_size
4
"""

from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Optional, Tuple, Union

import numpy as np
from numpy import ndarray

from ..channel import clamp_unit, decode_gamma, encode_gamma, from_normalized, to_normalized
from ..colors.color import Color
from ..conversions import np_convert
from ..defaults import DEFAULT_ALPHA, DEFAULT_ALPHA_MODE, DEFAULT_CHANNEL, DEFAULT_GAMMA, DEFAULT_WHITE
from ..types.color_types import ColorModel, ModelName, ModelSpec, MODEL_SPECS, as_model
from ..types.format_type import (
    HUE_360,
    AlphaMode,
    ChannelType,
    GammaMode,
    channel_dtypes,
    channel_widths,
)
from ..whitepoint import WhitePoint

GAMMA_MODELS = {ColorModel.RGB, ColorModel.GRAY}

PixelValue = Union[Color, Tuple[float, ...], list]


def premultiply(norm: ndarray, alpha: ndarray) -> ndarray:
    """Scale normalized color channels (..., n) by alpha (...)."""
    return np.asarray(norm, dtype=np.float64) * np.asarray(alpha, dtype=np.float64)[..., None]


def unpremultiply(norm: ndarray, alpha: ndarray) -> ndarray:
    """Divide normalized color channels by alpha; alpha 0 gives 0."""
    norm = np.asarray(norm, dtype=np.float64)
    a = np.asarray(alpha, dtype=np.float64)[..., None]
    safe = np.where(a > 0.0, a, 1.0)
    return np.where(a > 0.0, np.minimum(norm / safe, 1.0), 0.0)


@dataclass(frozen=True)
class PixelFormat:
    model: ColorModel = ColorModel.RGB
    channel: ChannelType = DEFAULT_CHANNEL
    alpha: AlphaMode = DEFAULT_ALPHA_MODE
    gamma: GammaMode = DEFAULT_GAMMA
    white: WhitePoint = DEFAULT_WHITE

    def __post_init__(self) -> None:
        object.__setattr__(self, 'model', as_model(self.model))
        object.__setattr__(self, 'channel', ChannelType(self.channel))
        object.__setattr__(self, 'alpha', AlphaMode(self.alpha))
        object.__setattr__(self, 'gamma', GammaMode(self.gamma))
        if self.gamma != GammaMode.LINEAR and self.model not in GAMMA_MODELS:
            raise ValueError(f"{self.gamma.value} gamma is only defined for rgb and gray, not {self.model.value}")

    # ------------------ LAYOUT ------------------
    @property
    def spec(self) -> ModelSpec:
        return MODEL_SPECS[self.model]

    @property
    def has_alpha(self) -> bool:
        return self.alpha != AlphaMode.NONE

    @property
    def premultiplied(self) -> bool:
        return self.alpha == AlphaMode.PREMULTIPLIED

    @property
    def color_channels(self) -> int:
        return self.spec.num_channels

    @property
    def channel_count(self) -> int:
        return self.spec.num_channels + (1 if self.has_alpha else 0)

    @property
    def byte_size(self) -> int:
        return self.channel_count * channel_widths[self.channel]

    @property
    def dtype(self) -> np.dtype:
        return channel_dtypes[self.channel]

    def with_alpha(self, alpha: AlphaMode) -> "PixelFormat":
        return replace(self, alpha=AlphaMode(alpha))

    def with_channel(self, channel: ChannelType) -> "PixelFormat":
        return replace(self, channel=ChannelType(channel))

    def with_model(self, model: ModelName, gamma: Optional[GammaMode] = None) -> "PixelFormat":
        return replace(self, model=as_model(model), gamma=GammaMode(gamma or GammaMode.LINEAR))

    # ------------------ NORMALIZATION ------------------
    def _bounds(self) -> Tuple[ndarray, ndarray]:
        ranges = np.array(self.spec.ranges, dtype=np.float64)
        return ranges[:, 0], ranges[:, 1] - ranges[:, 0]

    def normalize(self, values: ndarray) -> ndarray:
        """Map model values (..., n) onto ``[0, 1]`` per channel, unclamped."""
        values = np.array(values, dtype=np.float64)
        hue = self.spec.hue_index
        if hue is not None:
            values[..., hue] = np.mod(values[..., hue], HUE_360)
        low, span = self._bounds()
        return (values - low) / span

    def denormalize(self, norm: ndarray) -> ndarray:
        low, span = self._bounds()
        return low + np.asarray(norm, dtype=np.float64) * span

    # ------------------ VECTORISED ENCODE / DECODE ------------------
    def encode(self, values: ndarray, alpha: Optional[Union[float, ndarray]] = None, strict: bool = False) -> ndarray:
        """
        Encode model values of shape (..., n) into stored channels.

        Args:
            values: Model-unit values
            alpha: Straight alpha, scalar or shaped like ``values[..., 0]``;
                   defaults to opaque. Ignored by formats without alpha.
            strict: Raise InvalidChannelValue instead of clamping

        Returns:
            Array of shape (..., channel_count) with this format's dtype
        """
        values = np.asarray(values, dtype=np.float64)
        if values.shape[-1] != self.color_channels:
            raise ValueError(
                f"{self.model.value} expects last dimension to be {self.color_channels}, got shape {values.shape}"
            )
        norm = clamp_unit(self.normalize(values), strict)

        if self.has_alpha:
            a = np.broadcast_to(
                clamp_unit(DEFAULT_ALPHA if alpha is None else alpha, strict),
                values.shape[:-1],
            )
            if self.premultiplied:
                norm = premultiply(norm, a)
        if self.gamma == GammaMode.SRGB:
            norm = encode_gamma(norm)
        if self.has_alpha:
            norm = np.concatenate([norm, a[..., None]], axis=-1)
        return from_normalized(norm, self.channel)

    def decode(self, raw: ndarray) -> Tuple[ndarray, ndarray]:
        """
        Decode stored channels of shape (..., channel_count).

        Returns:
            ``(values, alpha)``: model-unit values (..., n) and straight
            alpha (...), opaque when the format has no alpha
        """
        raw = np.asarray(raw)
        if raw.shape[-1] != self.channel_count:
            raise ValueError(
                f"{self} expects last dimension to be {self.channel_count}, got shape {raw.shape}"
            )
        norm = to_normalized(raw, self.channel)
        color = norm[..., :self.color_channels]
        if self.has_alpha:
            a = norm[..., self.color_channels]
        else:
            a = np.full(norm.shape[:-1], DEFAULT_ALPHA)
        if self.gamma == GammaMode.SRGB:
            color = decode_gamma(color)
        if self.premultiplied:
            color = unpremultiply(color, a)
        return self.denormalize(color), a

    # ------------------ SINGLE PIXEL ------------------
    def color_values(self, color: PixelValue) -> Tuple[ndarray, float]:
        """Model values and alpha of ``color`` in this format's model."""
        if isinstance(color, Color):
            converted = color.convert(self.model, self.white)
            return np.array(converted.values), converted.alpha
        values = np.asarray(color, dtype=np.float64)
        if values.shape == (self.channel_count,) and self.has_alpha:
            return values[:-1], float(values[-1])
        return values, DEFAULT_ALPHA

    def pack(self, color: PixelValue, strict: bool = False) -> bytes:
        """
        Pack one pixel into bytes.

        ``color`` is a :class:`Color` (converted into this format's model if
        needed) or a sequence of model values, optionally followed by alpha.
        """
        values, alpha = self.color_values(color)
        return self.encode(values, alpha, strict).tobytes()

    def unpack(self, data: Union[bytes, bytearray, memoryview]) -> Color:
        """Unpack exactly ``byte_size`` bytes into a :class:`Color`."""
        if len(data) != self.byte_size:
            raise ValueError(f"{self} expects {self.byte_size} bytes, got {len(data)}")
        raw = np.frombuffer(data, dtype=self.dtype)
        values, alpha = self.decode(raw)
        return Color(self.model, values, float(alpha), self.white)

    def __str__(self) -> str:
        parts = [self.model.value, self.channel.value]
        if self.has_alpha:
            parts.append(self.alpha.value)
        if self.gamma != GammaMode.LINEAR:
            parts.append(self.gamma.value)
        return f"PixelFormat({'/'.join(parts)})"


def convert_pixels(raw: ndarray, src: PixelFormat, dst: PixelFormat) -> ndarray:
    """
    Convert stored pixels (..., src.channel_count) from ``src`` to ``dst``.

    Decodes the source channels, converts the color model (adapting between
    white points when they differ) and re-encodes into ``dst``.
    """
    raw = np.asarray(raw)
    if src == dst:
        return raw.copy()
    values, alpha = src.decode(raw)
    if src.model != dst.model or not src.white.same_as(dst.white):
        values = np_convert(values, src.model, dst.model, src_white=src.white, dst_white=dst.white)
    return dst.encode(values, alpha)


RGB8 = PixelFormat(ColorModel.RGB, ChannelType.UINT8)
RGBA8 = PixelFormat(ColorModel.RGB, ChannelType.UINT8, AlphaMode.STRAIGHT)
RGBA8P = PixelFormat(ColorModel.RGB, ChannelType.UINT8, AlphaMode.PREMULTIPLIED)
SRGB8 = PixelFormat(ColorModel.RGB, ChannelType.UINT8, gamma=GammaMode.SRGB)
SRGBA8 = PixelFormat(ColorModel.RGB, ChannelType.UINT8, AlphaMode.STRAIGHT, GammaMode.SRGB)
RGB16 = PixelFormat(ColorModel.RGB, ChannelType.UINT16)
RGBA16 = PixelFormat(ColorModel.RGB, ChannelType.UINT16, AlphaMode.STRAIGHT)
RGB32F = PixelFormat(ColorModel.RGB, ChannelType.FLOAT32)
RGBA32F = PixelFormat(ColorModel.RGB, ChannelType.FLOAT32, AlphaMode.STRAIGHT)
GRAY8 = PixelFormat(ColorModel.GRAY, ChannelType.UINT8)
SGRAY8 = PixelFormat(ColorModel.GRAY, ChannelType.UINT8, gamma=GammaMode.SRGB)
HSV32F = PixelFormat(ColorModel.HSV, ChannelType.FLOAT32)
LAB32F = PixelFormat(ColorModel.LAB, ChannelType.FLOAT32)
CMYK8 = PixelFormat(ColorModel.CMYK, ChannelType.UINT8)
