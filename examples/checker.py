"""Checkerboard raster example.

Builds a 16x16 sRGB gray raster with alternating black and white pixels and
saves it as a PNG.

Run directly with:
    python examples/checker.py [output.png]
"""
import sys
from pathlib import Path

from PIL import Image

from chromapix import Raster
from chromapix.pixel import SGRAY8


def build_checker(size: int = 16) -> Raster:
    raster = Raster.create(size, size, SGRAY8)
    for y in range(size):
        row = raster.row(y)
        for x in range(size):
            if (x + y) % 2:
                row[x, 0] = 255
    return raster


def main() -> None:
    output_path = Path(sys.argv[1] if len(sys.argv) > 1 else "checker.png")
    raster = build_checker()
    # one uint8 channel per pixel maps straight onto Pillow's 'L' mode
    img = Image.frombytes("L", (raster.width, raster.height), raster.to_bytes())
    img.save(output_path)
    print(f"Saved {raster} to {output_path}")


if __name__ == "__main__":
    main()
