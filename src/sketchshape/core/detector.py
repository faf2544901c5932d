"""Shape detection pipeline.

This module wires the pipeline stages together, strictly forward:

1. binarize the RGBA snapshot
2. trace contours in the mask
3. select the main contour
4. measure area, perimeter, circularity and centroid
5. compute the convex hull and solidity
6. simplify the contour to count corners
7. decide between circle and triangle

Key components:
- measure_contour: Compute ShapeMetrics for one contour
- ShapeDetector: Pipeline orchestrator configured once, reusable across calls
- detect_shape: Functional entry point
"""

import logging
from dataclasses import dataclass, field
from typing import Protocol

from sketchshape.config import DetectorSettings
from sketchshape.core.binarize import binarize
from sketchshape.core.classifier import ShapeClassifier, format_message
from sketchshape.core.geometry import centroid, circularity, contour_area, contour_perimeter
from sketchshape.core.hull import convex_hull, solidity
from sketchshape.core.selector import select_main_contour
from sketchshape.core.simplify import approximate_polygon
from sketchshape.core.tracer import ContourTracer
from sketchshape.domain import ClassificationResult, Contour, PixelBuffer, Point, ShapeMetrics

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DetectionArtifacts:
    """Intermediate pipeline outputs handed to a debug renderer.

    Attributes:
        contours: Every traced contour
        main_contour: The selected contour (None if none survived filtering)
        hull: Convex hull of the main contour
        polygon: Simplified polygon of the main contour
        centroid: Centroid of the main contour
        is_triangle: Whether the triangle hypothesis held
    """

    contours: list[Contour]
    main_contour: Contour | None = None
    hull: list[Point] = field(default_factory=list)
    polygon: list[Point] = field(default_factory=list)
    centroid: tuple[float, float] | None = None
    is_triangle: bool = False


class DebugRenderer(Protocol):
    """Produces an opaque debug image from the pipeline artifacts."""

    def render(self, buffer: PixelBuffer, artifacts: DetectionArtifacts) -> bytes:
        ...


@dataclass(frozen=True)
class ContourMeasurement:
    """Metrics of a contour together with the geometry they were read from."""

    metrics: ShapeMetrics
    hull: list[Point]
    polygon: list[Point]


def measure_contour(contour: Contour, triangle_tolerance: float) -> ContourMeasurement:
    """Compute the shape metrics of one contour.

    Args:
        contour: Contour to measure (not modified)
        triangle_tolerance: Simplification epsilon as a fraction of the perimeter

    Returns:
        ContourMeasurement with metrics, hull and simplified polygon
    """
    points = contour.points
    area = contour_area(points)
    perimeter = contour_perimeter(points)
    hull = convex_hull(points)
    polygon = approximate_polygon(points, triangle_tolerance)

    metrics = ShapeMetrics(
        area=area,
        perimeter=perimeter,
        circularity=circularity(area, perimeter),
        solidity=solidity(area, contour_area(hull)),
        centroid=centroid(points),
        corner_count=len(polygon),
    )
    return ContourMeasurement(metrics=metrics, hull=hull, polygon=polygon)


class ShapeDetector:
    """Classifies a sketch as circle, triangle, or unknown.

    The detector only holds configuration; every call allocates its own
    masks and intermediate structures, so one instance can be shared across
    threads.

    Example:
        detector = ShapeDetector(DetectorSettings())
        result = detector.detect(buffer)
        print(result.shape, result.confidence)
    """

    def __init__(
        self,
        settings: DetectorSettings | None = None,
        renderer: DebugRenderer | None = None,
    ) -> None:
        """Initialize the detector.

        Args:
            settings: Pipeline settings (defaults if None)
            renderer: Debug overlay renderer used when debugging is enabled
                (Pillow overlay renderer if None)
        """
        self.settings = settings or DetectorSettings()
        self.tracer = ContourTracer(self.settings.tracer)
        self.classifier = ShapeClassifier(self.settings.classifier)
        self._renderer = renderer

    def detect(self, buffer: PixelBuffer) -> ClassificationResult:
        """Run the full pipeline on one snapshot.

        Args:
            buffer: RGBA snapshot (not modified)

        Returns:
            ClassificationResult with label, confidence, message and metrics
        """
        logger.debug("Processing buffer of size %dx%d", buffer.width, buffer.height)

        mask = binarize(buffer, self.settings.binarize)
        contours = self.tracer.find_contours(mask)
        main_contour = select_main_contour(contours, self.settings.contour.min_area)

        if main_contour is None:
            logger.debug("No valid contours found")
            debug_image = self._render(buffer, DetectionArtifacts(contours=contours))
            return ClassificationResult.unknown("No valid contours found", debug_image)

        measurement = measure_contour(main_contour, self.settings.classifier.triangle_tolerance)
        metrics = measurement.metrics
        logger.debug(
            "Shape metrics: area=%.1f perimeter=%.1f circularity=%.3f solidity=%s corners=%d",
            metrics.area, metrics.perimeter, metrics.circularity,
            f"{metrics.solidity:.3f}" if metrics.solidity is not None else "n/a",
            metrics.corner_count
        )

        decision = self.classifier.decide(metrics)

        debug_image = self._render(
            buffer,
            DetectionArtifacts(
                contours=contours,
                main_contour=main_contour,
                hull=measurement.hull,
                polygon=measurement.polygon,
                centroid=metrics.centroid,
                is_triangle=decision.is_triangle,
            ),
        )

        return ClassificationResult(
            shape=decision.shape,
            confidence=decision.confidence,
            message=format_message(decision.shape, decision.confidence),
            metrics=metrics,
            debug_image=debug_image,
        )

    def _render(self, buffer: PixelBuffer, artifacts: DetectionArtifacts) -> bytes | None:
        """Render the debug overlay if debugging is enabled."""
        if not self.settings.debug.enabled:
            return None

        renderer = self._renderer
        if renderer is None:
            from sketchshape.io.overlay import OverlayRenderer

            renderer = OverlayRenderer()
        return renderer.render(buffer, artifacts)


def detect_shape(
    buffer: PixelBuffer,
    settings: DetectorSettings | None = None,
) -> ClassificationResult:
    """Classify one snapshot with the given settings.

    Args:
        buffer: RGBA snapshot (not modified)
        settings: Pipeline settings (defaults if None)

    Returns:
        ClassificationResult for the snapshot
    """
    return ShapeDetector(settings).detect(buffer)
