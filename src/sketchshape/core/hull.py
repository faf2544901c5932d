"""Convex hull (Graham scan) and solidity.

The hull is used to measure how concave the main contour is. Solidity close
to 1 means the contour fills its hull; hand-drawn triangles and circles both
score high, scribbles and open strokes score low.
"""

import math
from collections.abc import Sequence

from sketchshape.core.geometry import contour_area, cross
from sketchshape.domain import Point

# Hull areas at or below this are treated as degenerate
DEGENERATE_AREA = 1e-9


def convex_hull(points: Sequence[Point]) -> list[Point]:
    """Compute the convex hull of a point set with Graham scan.

    The anchor is the point with the smallest y (smallest x on ties). The
    remaining points are sorted by polar angle around the anchor, nearer
    points first on equal angles, and swept with a stack that pops while the
    last three points fail a strict counter-clockwise turn.

    Args:
        points: Source points (not modified)

    Returns:
        Hull vertices, anchor first, in increasing polar angle order; a
        subset of the input points. Inputs with fewer than 3 points are
        returned as a copy.

    Examples:
        >>> square = [Point(0, 0), Point(4, 0), Point(2, 2), Point(4, 4), Point(0, 4)]
        >>> convex_hull(square)
        [Point(x=0, y=0), Point(x=4, y=0), Point(x=4, y=4), Point(x=0, y=4)]
    """
    if len(points) < 3:
        return list(points)

    anchor_index = min(range(len(points)), key=lambda i: (points[i].y, points[i].x))
    anchor = points[anchor_index]
    rest = [p for i, p in enumerate(points) if i != anchor_index]

    rest.sort(
        key=lambda p: (
            math.atan2(p.y - anchor.y, p.x - anchor.x),
            (p.x - anchor.x) ** 2 + (p.y - anchor.y) ** 2,
        )
    )

    hull = [anchor, rest[0]]
    for point in rest[1:]:
        while len(hull) > 1 and cross(hull[-2], hull[-1], point) <= 0:
            hull.pop()
        hull.append(point)

    return hull


def solidity(area: float, hull_area: float) -> float | None:
    """Ratio of contour area to hull area.

    Args:
        area: Contour area
        hull_area: Area of its convex hull

    Returns:
        The ratio, or None when the hull is degenerate (near-zero area)
    """
    if hull_area <= DEGENERATE_AREA:
        return None
    return area / hull_area


def contour_solidity(points: Sequence[Point]) -> float | None:
    """Solidity of a point sequence against its own convex hull."""
    return solidity(contour_area(points), contour_area(convex_hull(points)))
