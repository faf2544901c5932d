"""Unit tests for binarization.

Tests cover:
- Luminance weights and truncation
- Alpha boost for nearly opaque pixels
- Strict global threshold
- Inverted (dark ink) mode
"""

import numpy as np

from sketchshape.config import BinarizeConfig
from sketchshape.core.binarize import binarize, grayscale
from sketchshape.domain import PixelBuffer


def single_pixel_row(*pixels: tuple[int, int, int, int]) -> PixelBuffer:
    """Build a one-row buffer from RGBA tuples."""
    array = np.array([pixels], dtype=np.uint8)
    return PixelBuffer.from_array(array)


class TestGrayscale:
    """Tests for the RGBA to gray conversion."""

    def test_transparent_pixel_is_not_boosted(self):
        """Luminance of a transparent pixel is the plain weighted sum, truncated."""
        gray = grayscale(np.array([[[100, 0, 0, 0]]], dtype=np.uint8))
        assert gray[0, 0] == 29

    def test_opaque_pixel_is_boosted(self):
        """Pixels with alpha above the cutoff get the 1.5x boost."""
        gray = grayscale(np.array([[[0, 100, 0, 255]]], dtype=np.uint8))
        assert gray[0, 0] == 88

    def test_cutoff_is_strict(self):
        """Alpha equal to the cutoff is not boosted, one above is."""
        rgba = np.array([[[0, 0, 100, 200], [0, 0, 100, 201]]], dtype=np.uint8)
        gray = grayscale(rgba)
        assert list(gray[0]) == [11, 17]

    def test_clamped_to_255(self):
        """Boosted white saturates at 255."""
        gray = grayscale(np.array([[[255, 255, 255, 255]]], dtype=np.uint8))
        assert gray.dtype == np.uint8
        assert gray[0, 0] == 255


class TestBinarize:
    """Tests for threshold binarization."""

    def test_threshold_is_strict(self):
        """Gray 5 is background, gray 6 is foreground at the default threshold."""
        # 0.114 * 50 = 5.7 -> 5, 0.114 * 60 = 6.84 -> 6
        buffer = single_pixel_row((0, 0, 50, 0), (0, 0, 60, 0))
        mask = binarize(buffer)
        assert list(mask.pixels[0]) == [False, True]

    def test_blank_canvas_is_empty(self, blank_canvas):
        """A fully transparent black canvas has no foreground."""
        mask = binarize(blank_canvas)
        assert mask.is_empty()
        assert (mask.width, mask.height) == (100, 100)

    def test_white_ink_is_foreground(self, disk_buffer):
        """Every inked pixel of a white disk is foreground."""
        mask = binarize(disk_buffer)
        inked = disk_buffer.as_array()[..., 3] > 0
        assert np.array_equal(mask.pixels, inked)

    def test_custom_threshold(self):
        """A higher threshold drops faint ink."""
        buffer = single_pixel_row((0, 100, 0, 255), (255, 255, 255, 255))
        mask = binarize(buffer, BinarizeConfig(threshold=100.0))
        assert list(mask.pixels[0]) == [False, True]

    def test_invert(self):
        """Inverted mode marks dark pixels as foreground."""
        buffer = single_pixel_row((0, 0, 0, 255), (255, 255, 255, 255))
        mask = binarize(buffer, BinarizeConfig(invert=True))
        assert list(mask.pixels[0]) == [True, False]
