"""Raster types consumed by the vision pipeline.

This module defines the two raster representations used by the pipeline:
- PixelBuffer: Immutable RGBA snapshot of a drawing surface
- BinaryMask: Per-pixel foreground/background classification
"""

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from sketchshape.exceptions import ImageFormatError

CHANNELS = 4


@dataclass(frozen=True, slots=True)
class PixelBuffer:
    """An RGBA pixel buffer captured from a drawing surface.

    Pixels are stored row-major, four bytes per pixel (R, G, B, A). The buffer
    is owned by the caller and never modified by the pipeline.

    Attributes:
        width: Image width in pixels
        height: Image height in pixels
        data: Raw RGBA bytes, ``width * height * 4`` long
    """

    width: int
    height: int
    data: bytes

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ImageFormatError(
                f"dimensions must be positive, got {self.width}x{self.height}"
            )
        expected = self.width * self.height * CHANNELS
        if len(self.data) != expected:
            raise ImageFormatError(
                f"expected {expected} bytes for {self.width}x{self.height} RGBA, "
                f"got {len(self.data)}"
            )

    def as_array(self) -> NDArray[np.uint8]:
        """Return a read-only ``(height, width, 4)`` view of the pixel data."""
        return np.frombuffer(self.data, dtype=np.uint8).reshape(
            self.height, self.width, CHANNELS
        )

    @classmethod
    def from_array(cls, array: NDArray[np.uint8]) -> "PixelBuffer":
        """Build a buffer from a ``(height, width, 4)`` uint8 array.

        Args:
            array: RGBA pixel array

        Returns:
            PixelBuffer holding a copy of the array data

        Raises:
            ImageFormatError: If the array is not an RGBA uint8 image
        """
        if array.ndim != 3 or array.shape[2] != CHANNELS:
            raise ImageFormatError(f"expected (height, width, 4) array, got {array.shape}")
        if array.dtype != np.uint8:
            raise ImageFormatError(f"expected uint8 pixels, got {array.dtype}")
        height, width = array.shape[:2]
        return cls(width=width, height=height, data=np.ascontiguousarray(array).tobytes())


@dataclass(frozen=True)
class BinaryMask:
    """Foreground/background classification of every pixel.

    Attributes:
        pixels: Boolean array of shape ``(height, width)``; True is foreground
    """

    pixels: NDArray[np.bool_]

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])

    def foreground_count(self) -> int:
        """Number of foreground pixels."""
        return int(np.count_nonzero(self.pixels))

    def is_empty(self) -> bool:
        """Check if the mask has no foreground at all."""
        return not self.pixels.any()
