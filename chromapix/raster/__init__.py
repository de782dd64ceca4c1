"""
Chromapix Rasters
=================

Raster buffers and the rectangular regions used to address parts of them.
"""

from .raster import Raster, RasterPixels
from .region import Region

__all__ = ['Raster', 'RasterPixels', 'Region']
