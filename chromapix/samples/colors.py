"""
Reference colors with their exact values in every RGB-family model.

Values are linear unit RGB and its hexcone / geometric derivatives; hues are
in degrees.
"""

THIRD = 1.0 / 3.0
TWO_THIRDS = 2.0 / 3.0

# name: (rgb, hsv, hsl, hsi, hwb, cmyk)
REFERENCE_COLORS = {
    "red": ((1.0, 0.0, 0.0), (0.0, 1.0, 1.0), (0.0, 1.0, 0.5), (0.0, 1.0, THIRD), (0.0, 0.0, 0.0), (0.0, 1.0, 1.0, 0.0)),
    "green": ((0.0, 1.0, 0.0), (120.0, 1.0, 1.0), (120.0, 1.0, 0.5), (120.0, 1.0, THIRD), (120.0, 0.0, 0.0), (1.0, 0.0, 1.0, 0.0)),
    "blue": ((0.0, 0.0, 1.0), (240.0, 1.0, 1.0), (240.0, 1.0, 0.5), (240.0, 1.0, THIRD), (240.0, 0.0, 0.0), (1.0, 1.0, 0.0, 0.0)),
    "yellow": ((1.0, 1.0, 0.0), (60.0, 1.0, 1.0), (60.0, 1.0, 0.5), (60.0, 1.0, TWO_THIRDS), (60.0, 0.0, 0.0), (0.0, 0.0, 1.0, 0.0)),
    "cyan": ((0.0, 1.0, 1.0), (180.0, 1.0, 1.0), (180.0, 1.0, 0.5), (180.0, 1.0, TWO_THIRDS), (180.0, 0.0, 0.0), (1.0, 0.0, 0.0, 0.0)),
    "magenta": ((1.0, 0.0, 1.0), (300.0, 1.0, 1.0), (300.0, 1.0, 0.5), (300.0, 1.0, TWO_THIRDS), (300.0, 0.0, 0.0), (0.0, 1.0, 0.0, 0.0)),
    "white": ((1.0, 1.0, 1.0), (0.0, 0.0, 1.0), (0.0, 0.0, 1.0), (0.0, 0.0, 1.0), (0.0, 1.0, 0.0), (0.0, 0.0, 0.0, 0.0)),
    "black": ((0.0, 0.0, 0.0), (0.0, 0.0, 0.0), (0.0, 0.0, 0.0), (0.0, 0.0, 0.0), (0.0, 0.0, 1.0), (0.0, 0.0, 0.0, 1.0)),
    "gray": ((0.5, 0.5, 0.5), (0.0, 0.0, 0.5), (0.0, 0.0, 0.5), (0.0, 0.0, 0.5), (0.0, 0.5, 0.5), (0.0, 0.0, 0.0, 0.5)),
}

_MODELS = ("rgb", "hsv", "hsl", "hsi", "hwb", "cmyk")


def samples_for(target: str):
    """``{rgb: expected}`` pairs for one target model."""
    column = _MODELS.index(target)
    return {row[0]: row[column] for row in REFERENCE_COLORS.values()}


samples_rgb_hsv = samples_for("hsv")
samples_rgb_hsl = samples_for("hsl")
samples_rgb_hsi = samples_for("hsi")
samples_rgb_hwb = samples_for("hwb")
samples_rgb_cmyk = samples_for("cmyk")

# Linear sRGB (D65) to XYZ, from the primaries' published matrix
samples_rgb_xyz = {
    (1.0, 1.0, 1.0): (0.95047, 1.0, 1.08883),
    (1.0, 0.0, 0.0): (0.41239, 0.21264, 0.01933),
    (0.0, 1.0, 0.0): (0.35758, 0.71517, 0.11919),
    (0.0, 0.0, 1.0): (0.18048, 0.07219, 0.95053),
}
