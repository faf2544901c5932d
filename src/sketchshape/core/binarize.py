"""Binarization of RGBA snapshots.

Converts a PixelBuffer to a BinaryMask with one fixed global threshold. There
is no adaptive thresholding or local equalization: drawing surfaces produce
flat ink on a flat background.
"""

import logging

import numpy as np
from numpy.typing import NDArray

from sketchshape.config import BinarizeConfig
from sketchshape.domain import BinaryMask, PixelBuffer

logger = logging.getLogger(__name__)

# ITU-R BT.601 luma weights
LUMA_WEIGHTS = np.array([0.299, 0.587, 0.114])


def grayscale(rgba: NDArray[np.uint8], alpha_boost: float = 1.5, alpha_cutoff: int = 200) -> NDArray[np.uint8]:
    """Convert RGBA pixels to 8-bit gray levels.

    Nearly opaque pixels (alpha above the cutoff) have their luminance
    multiplied by the boost factor so that faint but solid strokes clear the
    threshold. Results are clamped to 255 and truncated to integers.

    Args:
        rgba: Array of shape (height, width, 4)
        alpha_boost: Luminance multiplier for nearly opaque pixels
        alpha_cutoff: Alpha value a pixel must exceed to be boosted

    Returns:
        uint8 array of shape (height, width)
    """
    luminance = rgba[..., :3].astype(np.float64) @ LUMA_WEIGHTS
    boost = np.where(rgba[..., 3] > alpha_cutoff, alpha_boost, 1.0)
    return np.minimum(luminance * boost, 255.0).astype(np.uint8)


def binarize(buffer: PixelBuffer, config: BinarizeConfig | None = None) -> BinaryMask:
    """Threshold a pixel buffer into a foreground mask.

    Args:
        buffer: Input RGBA snapshot (not modified)
        config: Threshold settings (defaults if None)

    Returns:
        BinaryMask with the same dimensions as the buffer
    """
    config = config or BinarizeConfig()

    gray = grayscale(buffer.as_array(), config.alpha_boost, config.alpha_cutoff)
    pixels = gray > config.threshold
    if config.invert:
        pixels = ~pixels

    mask = BinaryMask(pixels=pixels)
    logger.debug(
        "Binarized %dx%d buffer: %d foreground pixels (threshold=%.1f)",
        buffer.width, buffer.height, mask.foreground_count(), config.threshold
    )
    return mask
