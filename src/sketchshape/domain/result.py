"""Classification outcome types.

This module defines the value records produced at the end of the pipeline:
- ShapeLabel: The closed set of shapes the classifier can report
- ShapeMetrics: Geometric measurements of the main contour
- ClassificationResult: Label, confidence, message and metrics
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ShapeLabel(str, Enum):
    """Shape reported by the classifier."""

    CIRCLE = "circle"
    TRIANGLE = "triangle"
    UNKNOWN = "unknown"


def clamp01(value: float) -> float:
    """Clamp a value into the closed unit interval."""
    return min(1.0, max(0.0, value))


@dataclass(frozen=True, slots=True)
class ShapeMetrics:
    """Geometric measurements of the main contour.

    Attributes:
        area: Shoelace area in square pixels
        perimeter: Closed polyline length in pixels
        circularity: 4*pi*area / perimeter**2 (0 when the perimeter is 0)
        solidity: Area over convex hull area, None when the hull is degenerate
        centroid: Mean of the contour points
        corner_count: Vertex count of the simplified polygon
    """

    area: float
    perimeter: float
    circularity: float
    solidity: float | None
    centroid: tuple[float, float]
    corner_count: int

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "area": self.area,
            "perimeter": self.perimeter,
            "circularity": self.circularity,
            "solidity": self.solidity,
            "centroid": list(self.centroid),
            "corner_count": self.corner_count,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ShapeMetrics":
        """Deserialize from dictionary."""
        cx, cy = data["centroid"]
        return cls(
            area=data["area"],
            perimeter=data["perimeter"],
            circularity=data["circularity"],
            solidity=data["solidity"],
            centroid=(cx, cy),
            corner_count=data["corner_count"],
        )


@dataclass(frozen=True)
class ClassificationResult:
    """Outcome of classifying one sketch.

    Confidence is clamped into [0, 1] on construction, and an ``unknown``
    result always carries confidence 0.

    Attributes:
        shape: Detected shape label
        confidence: Confidence in [0, 1]
        message: Human-readable summary
        metrics: Measurements of the main contour (None if no contour survived)
        debug_image: Opaque debug overlay produced when debugging is enabled
    """

    shape: ShapeLabel
    confidence: float
    message: str
    metrics: ShapeMetrics | None = None
    debug_image: bytes | None = None

    def __post_init__(self) -> None:
        confidence = 0.0 if self.shape is ShapeLabel.UNKNOWN else clamp01(self.confidence)
        object.__setattr__(self, "confidence", confidence)

    @classmethod
    def unknown(cls, message: str, debug_image: bytes | None = None) -> "ClassificationResult":
        """Build the zero-confidence result for an unclassifiable sketch."""
        return cls(
            shape=ShapeLabel.UNKNOWN,
            confidence=0.0,
            message=message,
            debug_image=debug_image,
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the label/confidence/message layout shared with model classifiers.

        The debug image is left out; it is an opaque side artifact.
        """
        return {
            "shape": self.shape.value,
            "confidence": self.confidence,
            "message": self.message,
            "metrics": self.metrics.to_dict() if self.metrics else None,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ClassificationResult":
        """Deserialize from dictionary."""
        metrics = data.get("metrics")
        return cls(
            shape=ShapeLabel(data["shape"]),
            confidence=data["confidence"],
            message=data["message"],
            metrics=ShapeMetrics.from_dict(metrics) if metrics else None,
        )
