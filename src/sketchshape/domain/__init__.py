"""Domain models for sketchshape.

This module contains the value types flowing through the vision pipeline.
All models are designed to be:

- Immutable (frozen dataclasses, read-only pixel views)
- Created fresh for every classification call
- Serializable for inter-process communication (batch processing)

Key classes:
- PixelBuffer: RGBA input snapshot
- BinaryMask: Foreground/background mask
- Point: An integer pixel coordinate
- Contour: Ordered point sequence bounding a stroke
- ShapeMetrics: Geometric measurements of the main contour
- ClassificationResult: Label, confidence and metrics
"""

from sketchshape.domain.contour import Contour, Point
from sketchshape.domain.image import BinaryMask, PixelBuffer
from sketchshape.domain.result import (
    ClassificationResult,
    ShapeLabel,
    ShapeMetrics,
    clamp01,
)

__all__: list[str] = [
    # Enums
    "ShapeLabel",
    # Raster types
    "PixelBuffer",
    "BinaryMask",
    # Geometry types
    "Point",
    "Contour",
    # Results
    "ShapeMetrics",
    "ClassificationResult",
    "clamp01",
]
