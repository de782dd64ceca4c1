"""
Channel Encoding
================

One *component* of a pixel: a scalar in the normalized domain ``[0, 1]``,
stored either as an unsigned integer (``UINT8``, ``UINT16``) scaled by the
channel maximum, or as a ``FLOAT32`` holding the normalized value directly.

Every function accepts a Python scalar or a numpy array. Scalars come back
as Python numbers, arrays as arrays.

Gamma
-----
The gamma curve is the sRGB transfer function (IEC 61966-2-1):

    decode:  v / 12.92                          if v <= 0.04045
             ((v + 0.055) / 1.055) ** 2.4       otherwise

    encode:  12.92 * v                          if v <= 0.0031308
             1.055 * v ** (1 / 2.4) - 0.055     otherwise

Clamping
--------
Out-of-range values are clamped to ``[0, 1]`` (NaN becomes 0). Pass
``strict=True`` to raise :class:`~chromapix.errors.InvalidChannelValue`
instead.
"""

from __future__ import annotations
from typing import Union

import numpy as np
from numpy import ndarray
from boundednumbers import bound_type_to_np_function, BoundType

from .errors import InvalidChannelValue
from .types.format_type import ChannelType, channel_dtypes, channel_maxima, channel_quanta

ArrayOrScalar = Union[float, int, ndarray]

SRGB_DECODE_THRESHOLD = 0.04045
SRGB_ENCODE_THRESHOLD = 0.0031308
SRGB_SLOPE = 12.92
SRGB_OFFSET = 0.055
SRGB_EXPONENT = 2.4

_clamp = bound_type_to_np_function[BoundType.CLAMP]


def _unwrap(result: ndarray, original: ArrayOrScalar) -> ArrayOrScalar:
    if isinstance(original, ndarray):
        return result
    return result.item() if result.ndim == 0 else result


def clamp_unit(value: ArrayOrScalar, strict: bool = False) -> ndarray:
    """Clamp to ``[0, 1]`` with NaN mapped to 0, or reject in strict mode."""
    v = np.asarray(value, dtype=np.float64)
    if strict:
        if np.any(np.isnan(v)) or np.any(v < 0.0) or np.any(v > 1.0):
            raise InvalidChannelValue(value)
        return v
    return _clamp(np.nan_to_num(v, nan=0.0), 0.0, 1.0)


def to_normalized(raw: ArrayOrScalar, channel: ChannelType) -> ArrayOrScalar:
    """
    Convert stored channel values to normalized floats.

    Args:
        raw: Stored value(s), e.g. 0-255 for ``UINT8``
        channel: Channel type the values are stored as

    Returns:
        Value(s) in ``[0, 1]``
    """
    channel = ChannelType(channel)
    v = np.asarray(raw, dtype=np.float64)
    if channel == ChannelType.FLOAT32:
        v = clamp_unit(v)
    else:
        v = v / channel_maxima[channel]
    return _unwrap(v, raw)


def from_normalized(value: ArrayOrScalar, channel: ChannelType, strict: bool = False) -> ArrayOrScalar:
    """
    Convert normalized floats to stored channel values.

    Integer channels round half to even. The result has the channel's dtype.

    Raises:
        InvalidChannelValue: in strict mode, for values outside ``[0, 1]``
    """
    channel = ChannelType(channel)
    v = clamp_unit(value, strict)
    if channel == ChannelType.FLOAT32:
        out = v.astype(channel_dtypes[channel])
    else:
        out = np.rint(v * channel_maxima[channel]).astype(channel_dtypes[channel])
    return _unwrap(out, value)


def quantum(channel: ChannelType) -> float:
    """Size of one quantization step in the normalized domain."""
    return channel_quanta[ChannelType(channel)]


def decode_gamma(value: ArrayOrScalar, strict: bool = False) -> ArrayOrScalar:
    """Decode sRGB gamma-encoded value(s) into linear intensity."""
    v = clamp_unit(value, strict)
    linear = np.where(
        v <= SRGB_DECODE_THRESHOLD,
        v / SRGB_SLOPE,
        np.power((v + SRGB_OFFSET) / (1.0 + SRGB_OFFSET), SRGB_EXPONENT),
    )
    return _unwrap(linear, value)


def encode_gamma(value: ArrayOrScalar, strict: bool = False) -> ArrayOrScalar:
    """Encode linear intensity value(s) with the sRGB gamma curve."""
    v = clamp_unit(value, strict)
    encoded = np.where(
        v <= SRGB_ENCODE_THRESHOLD,
        v * SRGB_SLOPE,
        (1.0 + SRGB_OFFSET) * np.power(v, 1.0 / SRGB_EXPONENT) - SRGB_OFFSET,
    )
    return _unwrap(_clamp(encoded, 0.0, 1.0), value)


def multiply(a: ArrayOrScalar, b: ArrayOrScalar) -> ArrayOrScalar:
    """Multiply normalized values, treating them as fractions of one."""
    result = clamp_unit(a) * clamp_unit(b)
    return _unwrap(result, a if isinstance(a, ndarray) else b)


def divide(a: ArrayOrScalar, b: ArrayOrScalar) -> ArrayOrScalar:
    """Divide normalized values; the quotient saturates at 1 and ``x / 0`` is 0."""
    num = clamp_unit(a)
    den = clamp_unit(b)
    safe = np.where(den > 0.0, den, 1.0)
    result = np.where(den > 0.0, np.minimum(num / safe, 1.0), 0.0)
    return _unwrap(result, a if isinstance(a, ndarray) else b)


def lerp_alpha(top: ArrayOrScalar, bottom: ArrayOrScalar, alpha: ArrayOrScalar) -> ArrayOrScalar:
    """
    Blend ``top`` over ``bottom`` by ``alpha``.

    ``alpha * top + (1 - alpha) * bottom``, written as a lerp from ``bottom``.
    """
    t = np.asarray(top, dtype=np.float64)
    b = np.asarray(bottom, dtype=np.float64)
    a = np.asarray(alpha, dtype=np.float64)
    result = b + a * (t - b)
    for original in (top, bottom, alpha):
        if isinstance(original, ndarray):
            return result
    return _unwrap(result, top)
