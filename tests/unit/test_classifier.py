"""Unit tests for the circle/triangle decision policy.

Tests cover:
- Single hypothesis decisions
- Margin scoring when both hypotheses hold
- Tie breaking
- Corner-count fallback
- Degenerate solidity
"""

import pytest

from sketchshape.config import ClassifierConfig
from sketchshape.core.classifier import ShapeClassifier, format_message
from sketchshape.domain import ShapeLabel, ShapeMetrics


def metrics(circularity: float, corners: int, solidity: float | None) -> ShapeMetrics:
    """Build metrics with only the fields the policy reads set meaningfully."""
    return ShapeMetrics(
        area=400.0,
        perimeter=80.0,
        circularity=circularity,
        solidity=solidity,
        centroid=(50.0, 50.0),
        corner_count=corners,
    )


@pytest.fixture
def classifier() -> ShapeClassifier:
    return ShapeClassifier()


class TestSingleHypothesis:
    """Tests for inputs where exactly one hypothesis holds."""

    def test_circle(self, classifier):
        """Circularity above threshold scales into (0, 1]."""
        decision = classifier.decide(metrics(0.9, 2, 0.99))

        assert decision.shape is ShapeLabel.CIRCLE
        assert decision.confidence == pytest.approx(0.75)
        assert decision.is_circle and not decision.is_triangle

    def test_triangle(self, classifier):
        """Three corners with high solidity is a triangle scored by solidity."""
        decision = classifier.decide(metrics(0.5, 3, 0.95))

        assert decision.shape is ShapeLabel.TRIANGLE
        assert decision.confidence == pytest.approx(0.95)

    def test_circularity_above_one_is_clamped(self, classifier):
        """Discretized outlines can exceed 1; confidence cannot."""
        decision = classifier.decide(metrics(1.2, 2, 0.99))
        assert decision.confidence == 1.0

    def test_solidity_above_one_is_clamped(self, classifier):
        """Self-overlapping traces can exceed solidity 1; confidence cannot."""
        decision = classifier.decide(metrics(0.4, 3, 1.3))

        assert decision.shape is ShapeLabel.TRIANGLE
        assert decision.confidence == 1.0

    def test_thresholds_are_strict(self, classifier):
        """Values exactly at the thresholds do not satisfy a hypothesis."""
        assert classifier.circle_confidence(0.6) is None
        assert classifier.triangle_confidence(3, 0.85) is None


class TestBothHypotheses:
    """Tests for margin scoring."""

    def test_triangle_wins_with_margin(self, classifier):
        """When both hold, the larger score wins and the margin is reported."""
        decision = classifier.decide(metrics(0.61, 3, 0.9))

        assert decision.shape is ShapeLabel.TRIANGLE
        assert decision.confidence == pytest.approx(0.875)
        assert decision.circle_confidence == pytest.approx(0.025)
        assert decision.triangle_confidence == pytest.approx(0.9)

    def test_circle_wins_with_margin(self, classifier):
        """A very round three-corner contour is a low-confidence circle."""
        decision = classifier.decide(metrics(0.98, 3, 0.86))

        assert decision.shape is ShapeLabel.CIRCLE
        assert decision.confidence == pytest.approx(0.95 - 0.86)

    def test_exact_tie_goes_to_triangle(self):
        """Equal scores pick triangle with zero confidence."""
        # Threshold 0 makes the circle score equal to the circularity itself
        classifier = ShapeClassifier(ClassifierConfig(circularity_threshold=0.0))
        decision = classifier.decide(metrics(0.9, 3, 0.9))

        assert decision.shape is ShapeLabel.TRIANGLE
        assert decision.confidence == 0.0


class TestFallback:
    """Tests for the corner-count guess when neither hypothesis holds."""

    def test_few_corners_guess_triangle(self, classifier):
        """Up to four corners guesses triangle."""
        decision = classifier.decide(metrics(0.3, 4, 0.7))

        assert decision.shape is ShapeLabel.TRIANGLE
        assert decision.confidence == 0.5
        assert decision.is_fallback

    def test_many_corners_guess_circle(self, classifier):
        """More than four corners guesses circle."""
        decision = classifier.decide(metrics(0.3, 6, 0.7))

        assert decision.shape is ShapeLabel.CIRCLE
        assert decision.confidence == 0.5

    def test_degenerate_solidity(self, classifier):
        """Missing solidity rules out the triangle hypothesis but not the guess."""
        decision = classifier.decide(metrics(0.2, 3, None))

        assert not decision.is_triangle
        assert decision.shape is ShapeLabel.TRIANGLE
        assert decision.confidence == 0.5

    def test_configured_fallback(self):
        """The fallback confidence and corner limit come from the config."""
        classifier = ShapeClassifier(
            ClassifierConfig(fallback_max_corners=2, fallback_confidence=0.3)
        )
        decision = classifier.decide(metrics(0.3, 3, 0.5))

        assert decision.shape is ShapeLabel.CIRCLE
        assert decision.confidence == 0.3


class TestMessage:
    """Tests for the human-readable summary."""

    def test_format(self):
        assert format_message(ShapeLabel.CIRCLE, 0.75) == "Detected circle with confidence 75.0%"
        assert format_message(ShapeLabel.TRIANGLE, 0.9876) == "Detected triangle with confidence 98.8%"
