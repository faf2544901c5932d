"""Unit tests for batch classification.

Tests cover:
- The picklable per-image worker function
- BatchClassifier results and statistics
- Debug overlays written next to source images
"""

from pathlib import Path

import pytest
from PIL import Image

from sketchshape.config import DebugConfig, DetectorSettings
from sketchshape.core.batch import BatchClassifier, classify_image
from sketchshape.domain import PixelBuffer, ShapeLabel
from sketchshape.utils import BatchStats


def save_png(buffer: PixelBuffer, path: Path) -> Path:
    """Write a buffer to disk as PNG."""
    Image.frombytes("RGBA", (buffer.width, buffer.height), buffer.data).save(path)
    return path


@pytest.fixture
def image_dir(tmp_path, disk_buffer, triangle_buffer) -> Path:
    save_png(disk_buffer, tmp_path / "circle.png")
    save_png(triangle_buffer, tmp_path / "triangle.png")
    (tmp_path / "broken.png").write_bytes(b"not a png")
    return tmp_path


class TestClassifyImage:
    """Tests for the worker function."""

    def test_success(self, image_dir):
        """A readable image yields a serialized result."""
        settings = DetectorSettings().model_dump(mode="json")
        outcome = classify_image(str(image_dir / "triangle.png"), settings)

        assert "error" not in outcome
        assert outcome["result"]["shape"] == "triangle"
        assert outcome["debug_image"] is None
        assert outcome["duration_ms"] >= 0

    def test_error(self, image_dir):
        """Failures are returned, not raised."""
        settings = DetectorSettings().model_dump(mode="json")
        outcome = classify_image(str(image_dir / "broken.png"), settings)

        assert outcome["image"] == str(image_dir / "broken.png")
        assert "Failed to load image" in outcome["error"]
        assert "Traceback" in outcome["traceback"]

    def test_debug_overlay_returned(self, image_dir):
        """With debugging enabled the overlay bytes are returned."""
        settings = DetectorSettings(debug=DebugConfig(enabled=True)).model_dump(mode="json")
        outcome = classify_image(str(image_dir / "circle.png"), settings)

        assert outcome["debug_image"].startswith(b"\x89PNG")


class TestBatchClassifier:
    """Tests for the batch orchestrator."""

    def test_classify_batch(self, image_dir):
        """Good images are classified and bad ones are counted as errors."""
        paths = [image_dir / "circle.png", image_dir / "triangle.png", image_dir / "broken.png"]
        progress: list[tuple[int, int, str, bool]] = []

        classifier = BatchClassifier(DetectorSettings())
        results, stats = classifier.classify(
            paths,
            max_workers=1,
            progress_callback=lambda *args: progress.append(args),
        )

        assert results[image_dir / "circle.png"].shape is ShapeLabel.CIRCLE
        assert results[image_dir / "triangle.png"].shape is ShapeLabel.TRIANGLE
        assert image_dir / "broken.png" not in results

        assert isinstance(stats, BatchStats)
        assert stats.processed_count == 2
        assert stats.error_count == 1
        assert stats.shape_counts == {"circle": 1, "triangle": 1}
        assert stats.errors[0][0] == str(image_dir / "broken.png")
        assert len(progress) == 3
        assert progress[-1][:2] == (3, 3)

    def test_debug_overlays_written(self, image_dir):
        """Overlays land next to their source images."""
        settings = DetectorSettings(debug=DebugConfig(enabled=True))
        BatchClassifier(settings).classify([image_dir / "circle.png"], max_workers=1)

        assert (image_dir / "circle-debug.png").read_bytes().startswith(b"\x89PNG")
