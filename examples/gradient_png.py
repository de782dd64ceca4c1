"""Gradient rendering examples.

Paints a linear RGB gradient and a radial HSV gradient with a clockwise hue
sweep into sRGB rasters, then saves both as PNGs.

Run directly with:
    python examples/gradient_png.py [output_dir]
"""
import sys
from pathlib import Path

from PIL import Image

from chromapix import Color, Gradient, Raster, linear_positions, radial_positions
from chromapix.pixel import SRGBA8
from chromapix.types import ExtensionMode


def save(raster: Raster, path: Path) -> None:
    img = Image.frombytes("RGBA", (raster.width, raster.height), raster.to_bytes())
    img.save(path)
    print(f"Saved {raster} to {path}")


def linear_demo(width: int = 256, height: int = 64) -> Raster:
    gradient = Gradient([
        (0.0, Color.from_hex("#ff5f00")),
        (0.5, Color.from_hex("#ffffff")),
        (1.0, Color.from_hex("#0057b8").with_alpha(0.25)),
    ])
    raster = Raster.create(width, height, SRGBA8)
    gradient.paint(raster, linear_positions(width, height, (0, 0), (width - 1, 0)))
    return raster


def radial_demo(size: int = 128) -> Raster:
    # Hue runs clockwise from red to blue; REPEAT tiles rings past the radius.
    gradient = Gradient(
        [
            (0.0, Color("hsv", (0.0, 1.0, 1.0))),
            (1.0, Color("hsv", (240.0, 1.0, 1.0))),
        ],
        model="hsv",
        extension=ExtensionMode.REPEAT,
        hue_direction="cw",
    )
    raster = Raster.create(size, size, SRGBA8)
    gradient.paint(raster, radial_positions(size, size, radius=size / 4))
    return raster


def main() -> None:
    output_dir = Path(sys.argv[1] if len(sys.argv) > 1 else ".")
    output_dir.mkdir(parents=True, exist_ok=True)
    save(linear_demo(), output_dir / "linear_gradient.png")
    save(radial_demo(), output_dir / "radial_gradient.png")


if __name__ == "__main__":
    main()
