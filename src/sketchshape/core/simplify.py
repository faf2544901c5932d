"""Polygon simplification (Douglas-Peucker).

Reduces a traced contour to a handful of vertices so that its corner count
can be read off directly. The classic algorithm is recursive; here the
pending sub-chains live on an explicit work stack so that long, nearly
collinear contours cannot exhaust the interpreter's call stack.
"""

from collections.abc import Sequence

from sketchshape.core.geometry import contour_perimeter, perpendicular_distance
from sketchshape.domain import Point


def douglas_peucker(points: Sequence[Point], epsilon: float) -> list[Point]:
    """Simplify an open polyline.

    For a chain, find the interior point farthest from the line through the
    chain's endpoints. If that distance exceeds ``epsilon`` the chain is split
    there and both halves are simplified; otherwise it collapses to its two
    endpoints. Chains of two points or fewer are returned unchanged.

    The result equals the recursive formulation that concatenates both
    halves and drops the shared split point once, and re-simplifying it at
    the same epsilon returns it unchanged.

    Args:
        points: Polyline vertices (not modified)
        epsilon: Maximum allowed deviation, in pixels

    Returns:
        Retained vertices in their original order
    """
    n = len(points)
    if n <= 2:
        return list(points)

    keep = [False] * n
    keep[0] = keep[-1] = True
    pending = [(0, n - 1)]

    while pending:
        start, end = pending.pop()
        if end - start < 2:
            continue

        max_distance = 0.0
        split = start
        for i in range(start + 1, end):
            distance = perpendicular_distance(points[i], points[start], points[end])
            if distance > max_distance:
                max_distance = distance
                split = i

        if max_distance > epsilon:
            keep[split] = True
            pending.append((start, split))
            pending.append((split, end))

    return [p for p, kept in zip(points, keep) if kept]


def simplify_closed(points: Sequence[Point], epsilon: float) -> list[Point]:
    """Simplify a contour treated as a closed ring.

    The first point is appended to close the ring before simplifying, and the
    repeated closing point is dropped from the result. Without closing, the
    endpoints of a traced outline are neighboring pixels and the reference
    line for the first split is meaningless.

    Args:
        points: Contour vertices in trace order (not modified)
        epsilon: Maximum allowed deviation, in pixels

    Returns:
        Ring vertices without repetition; at least two points for inputs of
        two or more points
    """
    if len(points) <= 2:
        return list(points)

    ring = douglas_peucker([*points, points[0]], epsilon)[:-1]
    if len(ring) < 2:
        # Whole ring within epsilon of its start point
        return [points[0], points[-1]]
    return ring


def approximate_polygon(points: Sequence[Point], tolerance: float) -> list[Point]:
    """Simplify a closed contour with epsilon relative to its perimeter.

    Args:
        points: Contour vertices
        tolerance: Epsilon as a fraction of the contour perimeter

    Returns:
        Simplified polygon; its length is the corner count
    """
    return simplify_closed(points, tolerance * contour_perimeter(points))
