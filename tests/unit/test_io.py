"""Unit tests for image reading, overlay rendering and debug output paths."""

import io
from pathlib import Path

import pytest
from PIL import Image, ImageDraw

from sketchshape.core.detector import DetectionArtifacts
from sketchshape.domain import Contour, PixelBuffer, Point
from sketchshape.exceptions import ImageLoadError
from sketchshape.io import (
    ImageReader,
    OverlayRenderer,
    get_debug_path,
    read_image,
    write_debug_image,
)


@pytest.fixture
def png_path(tmp_path: Path) -> Path:
    """A 20x10 transparent PNG with a white dot."""
    image = Image.new("RGBA", (20, 10), (0, 0, 0, 0))
    ImageDraw.Draw(image).ellipse((5, 2, 11, 8), fill=(255, 255, 255, 255))
    path = tmp_path / "dot.png"
    image.save(path)
    return path


class TestImageReader:
    """Tests for ImageReader."""

    def test_load_png(self, png_path):
        """A PNG loads into an RGBA buffer of the right size."""
        reader = ImageReader(png_path)
        reader.load()
        buffer = reader.to_buffer()

        assert reader.format == "PNG"
        assert reader.size == (20, 10)
        assert len(buffer.data) == 20 * 10 * 4
        reader.close()

    def test_rgb_is_converted_to_rgba(self, tmp_path):
        """Images without alpha get an opaque alpha channel."""
        path = tmp_path / "rgb.png"
        Image.new("RGB", (4, 3), (10, 20, 30)).save(path)

        buffer = read_image(path)

        assert buffer.as_array()[0, 0].tolist() == [10, 20, 30, 255]

    def test_missing_file(self, tmp_path):
        """Missing files raise FileNotFoundError."""
        reader = ImageReader(tmp_path / "missing.png")
        with pytest.raises(FileNotFoundError):
            reader.load()

    def test_not_an_image(self, tmp_path):
        """Unreadable files raise ImageLoadError carrying the path."""
        path = tmp_path / "notes.png"
        path.write_text("not an image")

        with pytest.raises(ImageLoadError) as exc_info:
            read_image(path)
        assert exc_info.value.path == str(path)

    def test_access_before_load(self, png_path):
        """Using the reader before load() is an error."""
        reader = ImageReader(png_path)
        with pytest.raises(RuntimeError):
            reader.to_buffer()
        with pytest.raises(RuntimeError):
            _ = reader.format


class TestOverlayRenderer:
    """Tests for the Pillow debug overlay."""

    def test_renders_png(self):
        """Artifacts are drawn onto a PNG of the source size."""
        buffer = PixelBuffer(width=30, height=20, data=bytes(30 * 20 * 4))
        contour = Contour(points=(Point(5, 5), Point(20, 5), Point(12, 15)))
        artifacts = DetectionArtifacts(
            contours=[contour],
            main_contour=contour,
            hull=list(contour.points),
            polygon=list(contour.points),
            centroid=(12.0, 12.0),
            is_triangle=True,
        )

        data = OverlayRenderer().render(buffer, artifacts)

        assert data.startswith(b"\x89PNG")
        with Image.open(io.BytesIO(data)) as image:
            assert image.size == (30, 20)
            # Polygon edges are drawn in the triangle color
            colors = {color for _, color in image.convert("RGB").getcolors()}
            assert (255, 0, 0) in colors

    def test_renders_without_contours(self, blank_canvas):
        """An empty artifact set still produces an image."""
        data = OverlayRenderer().render(blank_canvas, DetectionArtifacts(contours=[]))
        assert data.startswith(b"\x89PNG")


class TestDebugOutput:
    """Tests for debug overlay paths."""

    def test_debug_path(self):
        """The overlay sits next to the source with a -debug.png suffix."""
        assert get_debug_path(Path("sketches/circle.jpg")) == Path("sketches/circle-debug.png")

    def test_write_creates_parents(self, tmp_path):
        """Missing parent directories are created."""
        output = write_debug_image(b"data", tmp_path / "a" / "b" / "out.png")
        assert output.read_bytes() == b"data"
