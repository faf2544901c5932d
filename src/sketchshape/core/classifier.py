"""Confidence-scored circle/triangle decision policy.

Fuses three signals of the main contour into one label:

- circularity, for the circle hypothesis
- simplified corner count and solidity, for the triangle hypothesis

When both hypotheses hold, the larger confidence wins and the reported
confidence is the margin between the two. When neither holds, a fixed-
confidence guess based on corner count alone is returned.
"""

import logging
from dataclasses import dataclass

from sketchshape.config import ClassifierConfig
from sketchshape.domain import ShapeLabel, ShapeMetrics, clamp01

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ShapeDecision:
    """Outcome of the decision policy, before it is wrapped in a result.

    Attributes:
        shape: Chosen label
        confidence: Confidence in [0, 1]
        is_circle: Whether the circle hypothesis held
        is_triangle: Whether the triangle hypothesis held
        circle_confidence: Circle score (0 when the hypothesis failed)
        triangle_confidence: Triangle score (0 when the hypothesis failed)
    """

    shape: ShapeLabel
    confidence: float
    is_circle: bool
    is_triangle: bool
    circle_confidence: float
    triangle_confidence: float

    @property
    def is_fallback(self) -> bool:
        """True when neither hypothesis held and the corner-count guess was used."""
        return not (self.is_circle or self.is_triangle)


class ShapeClassifier:
    """Decides between circle and triangle from contour metrics.

    Example:
        classifier = ShapeClassifier()
        decision = classifier.decide(metrics)
    """

    def __init__(self, config: ClassifierConfig | None = None) -> None:
        """Initialize the classifier.

        Args:
            config: Decision thresholds (defaults if None)
        """
        self.config = config or ClassifierConfig()

    def circle_confidence(self, circularity: float) -> float | None:
        """Score the circle hypothesis.

        Returns:
            Confidence scaled over (threshold, 1], or None if circularity
            does not exceed the threshold
        """
        threshold = self.config.circularity_threshold
        if circularity <= threshold:
            return None
        return clamp01((circularity - threshold) / (1.0 - threshold))

    def triangle_confidence(self, corner_count: int, solidity: float | None) -> float | None:
        """Score the triangle hypothesis.

        A degenerate hull (solidity None) always rules the triangle out.

        Returns:
            The solidity clamped to [0, 1], or None if the hypothesis fails
        """
        if corner_count != self.config.triangle_corners or solidity is None:
            return None
        if solidity <= self.config.triangle_min_solidity:
            return None
        return clamp01(solidity)

    def decide(self, metrics: ShapeMetrics) -> ShapeDecision:
        """Apply the decision policy to a contour's metrics.

        Args:
            metrics: Measurements of the main contour

        Returns:
            ShapeDecision with the chosen label and confidence
        """
        circle = self.circle_confidence(metrics.circularity)
        triangle = self.triangle_confidence(metrics.corner_count, metrics.solidity)
        circle_score = circle if circle is not None else 0.0
        triangle_score = triangle if triangle is not None else 0.0

        if circle is not None and triangle is None:
            shape, confidence = ShapeLabel.CIRCLE, circle
        elif triangle is not None and circle is None:
            shape, confidence = ShapeLabel.TRIANGLE, triangle
        elif circle is not None and triangle is not None:
            # Exact ties go to the triangle with a zero margin
            if circle > triangle:
                shape, confidence = ShapeLabel.CIRCLE, circle - triangle
            else:
                shape, confidence = ShapeLabel.TRIANGLE, triangle - circle
        else:
            # Corner-count guess only; round blobs with few corners land on triangle
            if metrics.corner_count <= self.config.fallback_max_corners:
                shape = ShapeLabel.TRIANGLE
            else:
                shape = ShapeLabel.CIRCLE
            confidence = self.config.fallback_confidence

        decision = ShapeDecision(
            shape=shape,
            confidence=clamp01(confidence),
            is_circle=circle is not None,
            is_triangle=triangle is not None,
            circle_confidence=circle_score,
            triangle_confidence=triangle_score,
        )
        logger.debug(
            "Shape decision: %s (%.3f) circle=%s(%.3f) triangle=%s(%.3f)",
            decision.shape.value, decision.confidence,
            decision.is_circle, circle_score, decision.is_triangle, triangle_score
        )
        return decision


def format_message(shape: ShapeLabel, confidence: float) -> str:
    """Human-readable summary of a decision."""
    return f"Detected {shape.value} with confidence {confidence * 100:.1f}%"
