"""Image reader for loading drawing snapshots.

This module provides the ImageReader class for loading image files with
Pillow and converting them into PixelBuffer domain models.
"""

from pathlib import Path

from PIL import Image, UnidentifiedImageError

from sketchshape.domain import PixelBuffer
from sketchshape.exceptions import ImageLoadError


class ImageReader:
    """Loads image files and exposes them as RGBA pixel buffers.

    Any format Pillow can open is accepted; pixels are converted to RGBA.

    Example:
        reader = ImageReader(Path("drawing.png"))
        reader.load()
        buffer = reader.to_buffer()
        reader.close()
    """

    def __init__(self, image_path: Path) -> None:
        """Initialize the image reader.

        Args:
            image_path: Path to the image file
        """
        self._image_path = image_path
        self._image: Image.Image | None = None
        self._format = "unknown"

    def load(self) -> None:
        """Load the image file.

        Raises:
            FileNotFoundError: If the image file does not exist
            ImageLoadError: If the file is not a readable image
        """
        if not self._image_path.exists():
            raise FileNotFoundError(f"Image file not found: {self._image_path}")

        try:
            with Image.open(self._image_path) as image:
                image.load()
                self._format = image.format or "unknown"
                self._image = image.convert("RGBA")
        except (UnidentifiedImageError, OSError) as e:
            raise ImageLoadError(str(self._image_path), str(e)) from e

    def _require_image(self) -> Image.Image:
        if self._image is None:
            raise RuntimeError("Image not loaded. Call load() first.")
        return self._image

    @property
    def format(self) -> str:
        """Return the source file format reported by Pillow (e.g. 'PNG').

        Raises:
            RuntimeError: If the image has not been loaded yet
        """
        self._require_image()
        return self._format

    @property
    def size(self) -> tuple[int, int]:
        """Return (width, height) in pixels.

        Raises:
            RuntimeError: If the image has not been loaded yet
        """
        return self._require_image().size

    def to_buffer(self) -> PixelBuffer:
        """Convert the loaded image to a PixelBuffer.

        Raises:
            RuntimeError: If the image has not been loaded yet
        """
        image = self._require_image()
        width, height = image.size
        return PixelBuffer(width=width, height=height, data=image.tobytes())

    def close(self) -> None:
        """Release the loaded image."""
        if self._image is not None:
            self._image.close()
            self._image = None


def read_image(path: Path) -> PixelBuffer:
    """Load an image file straight into a PixelBuffer.

    Args:
        path: Path to the image file

    Returns:
        RGBA pixel buffer

    Raises:
        FileNotFoundError: If the image file does not exist
        ImageLoadError: If the file is not a readable image
    """
    reader = ImageReader(path)
    reader.load()
    try:
        return reader.to_buffer()
    finally:
        reader.close()
