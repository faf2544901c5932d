"""Sketchshape - Classify hand-drawn sketches as simple geometric shapes.

Sketchshape takes a raster snapshot of a drawing surface and decides whether the
dominant stroke is a circle, a triangle, or neither. Classification is purely
algorithmic: binarization, gap-tolerant contour tracing, convex hull and
Douglas-Peucker simplification feed a small confidence-scored decision policy.

Example:
    $ sketchshape drawing.png

This prints the detected shape, its confidence and the geometric metrics
behind the decision.
"""

__version__ = "0.1.0"
__author__ = "Sketchshape Developers"

__all__ = ["__author__", "__version__"]
