from .colors import (
    REFERENCE_COLORS,
    samples_for,
    samples_rgb_cmyk,
    samples_rgb_hsi,
    samples_rgb_hsl,
    samples_rgb_hsv,
    samples_rgb_hwb,
    samples_rgb_xyz,
)

__all__ = [
    'REFERENCE_COLORS',
    'samples_for',
    'samples_rgb_cmyk',
    'samples_rgb_hsi',
    'samples_rgb_hsl',
    'samples_rgb_hsv',
    'samples_rgb_hwb',
    'samples_rgb_xyz',
]
