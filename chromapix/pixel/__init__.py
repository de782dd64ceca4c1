"""
Chromapix Pixel Formats
=======================

Descriptors of stored pixels and the vectorised encode / decode pipeline
between model values and quantized channels.

Usage
-----
>>> from chromapix.pixel import RGBA8, convert_pixels, HSV32F
>>> RGBA8.byte_size
4
>>> raw = RGBA8.encode([[1.0, 0.0, 0.0]], alpha=[0.5])
"""

from .format import (
    CMYK8,
    GRAY8,
    HSV32F,
    LAB32F,
    RGB8,
    RGB16,
    RGB32F,
    RGBA8,
    RGBA8P,
    RGBA16,
    RGBA32F,
    SGRAY8,
    SRGB8,
    SRGBA8,
    PixelFormat,
    convert_pixels,
    premultiply,
    unpremultiply,
)

__all__ = [
    'PixelFormat',
    'convert_pixels',
    'premultiply',
    'unpremultiply',
    'RGB8',
    'RGBA8',
    'RGBA8P',
    'SRGB8',
    'SRGBA8',
    'RGB16',
    'RGBA16',
    'RGB32F',
    'RGBA32F',
    'GRAY8',
    'SGRAY8',
    'HSV32F',
    'LAB32F',
    'CMYK8',
]
