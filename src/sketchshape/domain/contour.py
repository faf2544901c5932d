"""Core geometric types for contour representation.

This module defines the fundamental geometric types used throughout sketchshape:
- Point: An integer pixel coordinate
- Contour: An ordered point sequence approximating a stroke boundary
"""

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Point:
    """A pixel coordinate.

    Immutable and hashable for use in sets/dicts. The y axis points down,
    as in the source raster.

    Attributes:
        x: Column index
        y: Row index
    """

    x: int
    y: int

    def to_tuple(self) -> tuple[int, int]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with x and y fields
        """
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with x and y fields

        Returns:
            Point instance
        """
        return cls(x=data["x"], y=data["y"])


@dataclass(frozen=True)
class Contour:
    """An ordered sequence of points in trace order.

    The sequence is not explicitly closed; area and perimeter computations
    treat the last point as connected back to the first.

    Attributes:
        points: Points in the order they were traced
    """

    points: tuple[Point, ...]

    def __post_init__(self) -> None:
        # Accept any sequence but always store an immutable tuple
        if not isinstance(self.points, tuple):
            object.__setattr__(self, "points", tuple(self.points))

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    def __getitem__(self, index: int) -> Point:
        return self.points[index]

    def is_empty(self) -> bool:
        """Check if contour has no points."""
        return not self.points

    def bounding_box(self) -> tuple[int, int, int, int]:
        """Calculate bounding box of the contour.

        Returns:
            Tuple of (min_x, min_y, max_x, max_y)
        """
        if not self.points:
            return (0, 0, 0, 0)

        xs = [p.x for p in self.points]
        ys = [p.y for p in self.points]
        return (min(xs), min(ys), max(xs), max(ys))

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary representation of the contour
        """
        return {"points": [p.to_dict() for p in self.points]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Contour":
        """Deserialize from dictionary.

        Args:
            data: Dictionary representation of a contour

        Returns:
            Contour instance
        """
        return cls(points=tuple(Point.from_dict(p) for p in data["points"]))
