"""Geometric measurements for traced contours.

This module provides the mathematical utilities behind the shape metrics:
- Signed and absolute area (shoelace formula)
- Closed perimeter
- Circularity
- Centroid
- Turn direction (cross product) and point-to-line distance

Every function treats a point sequence as implicitly closed: the last point
connects back to the first. All functions are pure and stateless.
"""

import math
from collections.abc import Sequence

from sketchshape.domain import Point


def signed_area(points: Sequence[Point]) -> float:
    """Calculate signed area of a polygon using the shoelace formula.

    With the raster's downward y axis, a positive area means the points run
    clockwise on screen.

    Args:
        points: Points forming the polygon boundary

    Returns:
        Signed area in square pixels. Returns 0.0 for fewer than 3 points.

    Examples:
        >>> square = [Point(0, 0), Point(2, 0), Point(2, 2), Point(0, 2)]
        >>> signed_area(square)
        4.0
        >>> signed_area(square[::-1])
        -4.0
    """
    n = len(points)
    if n < 3:
        return 0.0

    area = 0.0
    for i in range(n):
        j = (i + 1) % n
        area += points[i].x * points[j].y
        area -= points[j].x * points[i].y

    return area / 2.0


def contour_area(points: Sequence[Point]) -> float:
    """Calculate the unsigned shoelace area of a closed point sequence.

    Args:
        points: Points forming the polygon boundary

    Returns:
        Non-negative area in square pixels
    """
    return abs(signed_area(points))


def contour_perimeter(points: Sequence[Point]) -> float:
    """Calculate the length of the closed polyline through the points.

    Args:
        points: Points in traversal order

    Returns:
        Sum of Euclidean distances between consecutive points, including the
        closing segment from last to first. 0.0 for fewer than 2 points.
    """
    n = len(points)
    if n < 2:
        return 0.0

    perimeter = 0.0
    for i in range(n):
        j = (i + 1) % n
        perimeter += math.hypot(points[j].x - points[i].x, points[j].y - points[i].y)

    return perimeter


def circularity(area: float, perimeter: float) -> float:
    """Calculate circularity, 4*pi*area / perimeter**2.

    A perfect circle scores 1.0; elongated or irregular outlines score lower.
    Pixel discretization can push compact shapes slightly above 1.

    Args:
        area: Enclosed area
        perimeter: Boundary length

    Returns:
        Circularity, or 0.0 when the perimeter is zero
    """
    if perimeter <= 0.0:
        return 0.0
    return (4.0 * math.pi * area) / (perimeter * perimeter)


def centroid(points: Sequence[Point]) -> tuple[float, float]:
    """Calculate the arithmetic mean of the point coordinates.

    This is the vertex centroid, not the area-weighted centroid.

    Args:
        points: Non-empty point sequence

    Returns:
        Tuple of (x, y) mean coordinates

    Raises:
        ValueError: If points is empty
    """
    if not points:
        raise ValueError("Cannot compute centroid of an empty point sequence")

    n = len(points)
    return (sum(p.x for p in points) / n, sum(p.y for p in points) / n)


def cross(origin: Point, a: Point, b: Point) -> float:
    """Z component of the cross product of (a - origin) and (b - origin).

    Positive for a counter-clockwise turn origin -> a -> b in standard
    (y-up) orientation, negative for clockwise, zero when collinear.
    """
    return (a.x - origin.x) * (b.y - origin.y) - (a.y - origin.y) * (b.x - origin.x)


def perpendicular_distance(point: Point, line_start: Point, line_end: Point) -> float:
    """Distance from a point to the infinite line through two points.

    Args:
        point: The point to measure
        line_start: First point on the line
        line_end: Second point on the line

    Returns:
        Perpendicular distance. When the two line points coincide, the plain
        distance to that point.
    """
    dx = line_end.x - line_start.x
    dy = line_end.y - line_start.y
    length = math.hypot(dx, dy)

    if length == 0.0:
        return math.hypot(point.x - line_start.x, point.y - line_start.y)

    doubled_area = abs(
        dy * point.x - dx * point.y + line_end.x * line_start.y - line_end.y * line_start.x
    )
    return doubled_area / length
