"""Core processing algorithms for sketchshape.

This module contains the vision pipeline stages:

- Binarization (RGBA to foreground mask)
- Contour tracing (gap-bridging blur, greedy walk)
- Main contour selection
- Geometry (area, perimeter, circularity, centroid)
- Convex hull (Graham scan) and solidity
- Polygon simplification (Douglas-Peucker)
- Shape classification (circle/triangle decision policy)

All stages are designed to be:
- Stateless (safe for use in worker processes)
- Pure (no side effects, inputs never modified)

Key functions:
- binarize: Threshold a pixel buffer
- find_contours: Trace contours in a mask
- select_main_contour: Pick the largest contour above a minimum area
- contour_area / contour_perimeter / circularity / centroid: Shape metrics
- convex_hull / solidity: Hull geometry
- douglas_peucker / approximate_polygon: Simplification
- detect_shape: Run the whole pipeline

Key classes:
- ContourTracer: Gap-tolerant contour walk
- ShapeClassifier: Decision policy
- ShapeDetector: Pipeline orchestrator
- BatchClassifier: Parallel classification of image files
"""

from sketchshape.core.batch import BatchClassifier, classify_image
from sketchshape.core.binarize import binarize, grayscale
from sketchshape.core.classifier import ShapeClassifier, ShapeDecision, format_message
from sketchshape.core.detector import (
    DebugRenderer,
    DetectionArtifacts,
    ShapeDetector,
    detect_shape,
    measure_contour,
)
from sketchshape.core.geometry import (
    centroid,
    circularity,
    contour_area,
    contour_perimeter,
    cross,
    perpendicular_distance,
    signed_area,
)
from sketchshape.core.hull import contour_solidity, convex_hull, solidity
from sketchshape.core.selector import filter_contours, select_main_contour
from sketchshape.core.simplify import approximate_polygon, douglas_peucker, simplify_closed
from sketchshape.core.tracer import (
    ContourTracer,
    boundary_pixels,
    bridge_gaps,
    find_contours,
    outer_boundary_pixels,
)

__all__ = [
    # Processor classes
    "BatchClassifier",
    # Tracer classes
    "ContourTracer",
    # Debug rendering
    "DebugRenderer",
    "DetectionArtifacts",
    # Classifier classes
    "ShapeClassifier",
    "ShapeDecision",
    "ShapeDetector",
    # Pipeline functions
    "approximate_polygon",
    "binarize",
    "boundary_pixels",
    "bridge_gaps",
    "centroid",
    "circularity",
    "classify_image",
    "contour_area",
    "contour_perimeter",
    "contour_solidity",
    "convex_hull",
    "cross",
    "detect_shape",
    "douglas_peucker",
    "filter_contours",
    "find_contours",
    "format_message",
    "grayscale",
    "measure_contour",
    "outer_boundary_pixels",
    "perpendicular_distance",
    "select_main_contour",
    "signed_area",
    "simplify_closed",
    "solidity",
]
