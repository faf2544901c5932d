"""Image I/O layer for sketchshape.

This module handles everything outside the pure pipeline that touches image
files, using Pillow.

Key responsibilities:
- Load image files of any Pillow-supported format as RGBA pixel buffers
- Render debug overlays of the pipeline artifacts
- Write overlays next to their source images

Key classes:
- ImageReader: Load images and convert them to PixelBuffer
- OverlayRenderer: Draw contours, hull, polygon and centroid as a PNG
"""

from sketchshape.io.overlay import OverlayRenderer
from sketchshape.io.reader import ImageReader, read_image
from sketchshape.io.writer import get_debug_path, write_debug_image

__all__ = [
    "ImageReader",
    "OverlayRenderer",
    "get_debug_path",
    "read_image",
    "write_debug_image",
]
