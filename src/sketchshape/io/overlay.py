"""Debug overlay rendering.

Draws the pipeline artifacts on top of the source snapshot with Pillow and
encodes the result as PNG bytes:

- every traced contour (blue, thin)
- the main contour (lime)
- its convex hull (orange)
- the simplified polygon (red when the triangle hypothesis held, purple otherwise)
- the centroid (blue dot)
"""

import io
from collections.abc import Sequence
from typing import TYPE_CHECKING

from PIL import Image, ImageDraw

from sketchshape.domain import PixelBuffer, Point
from sketchshape.exceptions import RenderError

if TYPE_CHECKING:
    from sketchshape.core.detector import DetectionArtifacts

CONTOUR_COLOR = "blue"
MAIN_CONTOUR_COLOR = "lime"
HULL_COLOR = "orange"
TRIANGLE_COLOR = "red"
POLYGON_COLOR = "purple"
CENTROID_COLOR = "blue"
CENTROID_RADIUS = 4


def _closed_line(points: Sequence[Point]) -> list[tuple[int, int]]:
    coords = [p.to_tuple() for p in points]
    if len(coords) > 1:
        coords.append(coords[0])
    return coords


class OverlayRenderer:
    """Renders DetectionArtifacts over the source snapshot as a PNG."""

    def __init__(self, image_format: str = "PNG") -> None:
        """Initialize the renderer.

        Args:
            image_format: Pillow format name used to encode the overlay
        """
        self.image_format = image_format

    def render(self, buffer: PixelBuffer, artifacts: "DetectionArtifacts") -> bytes:
        """Draw the artifacts and encode the image.

        Args:
            buffer: Source snapshot (not modified)
            artifacts: Pipeline outputs to draw

        Returns:
            Encoded image bytes

        Raises:
            RenderError: If the image cannot be encoded
        """
        image = Image.frombytes("RGBA", (buffer.width, buffer.height), buffer.data)
        draw = ImageDraw.Draw(image)

        for contour in artifacts.contours:
            draw.line(_closed_line(contour.points), fill=CONTOUR_COLOR, width=1)

        if artifacts.main_contour is not None:
            draw.line(_closed_line(artifacts.main_contour.points), fill=MAIN_CONTOUR_COLOR, width=2)

        if artifacts.hull:
            draw.line(_closed_line(artifacts.hull), fill=HULL_COLOR, width=1)

        if artifacts.polygon:
            color = TRIANGLE_COLOR if artifacts.is_triangle else POLYGON_COLOR
            draw.line(_closed_line(artifacts.polygon), fill=color, width=2)

        if artifacts.centroid is not None:
            cx, cy = artifacts.centroid
            draw.ellipse(
                (cx - CENTROID_RADIUS, cy - CENTROID_RADIUS, cx + CENTROID_RADIUS, cy + CENTROID_RADIUS),
                fill=CENTROID_COLOR,
            )

        output = io.BytesIO()
        try:
            image.save(output, format=self.image_format)
        except (KeyError, OSError, ValueError) as e:
            raise RenderError(str(e)) from e
        return output.getvalue()
