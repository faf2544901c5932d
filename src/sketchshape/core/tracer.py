"""Gap-tolerant contour tracing over a binary mask.

Hand-drawn strokes are thin and often broken. Tracing therefore runs in
these steps:

1. A gap-bridging blur keeps a pixel as foreground when at least 2 of the 9
   cells in its 3x3 neighborhood are foreground. The bar is deliberately low
   so that lightly broken strokes reconnect.
2. Optionally, only the outer boundary pixels of the blurred mask are kept,
   which turns filled blobs and outlined shapes alike into one closed outline.
3. A greedy walk follows the pixels one neighbor at a time using a fixed
   direction priority. When the walk runs dry it searches small rings around
   the last pixel and jumps across the gap.

The walk follows a single branch; it is not a region flood nor a
Moore-neighbor boundary follower, so the side branches of a forked stroke
become separate traces.
"""

import logging

import numpy as np
from numpy.typing import NDArray
from scipy import ndimage

from sketchshape.config import TracerConfig
from sketchshape.domain import BinaryMask, Contour, Point

logger = logging.getLogger(__name__)

# Neighbor priority: NW, N, NE, W, E, SW, S, SE (dx, dy with y pointing down)
DIRECTIONS: tuple[tuple[int, int], ...] = (
    (-1, -1), (0, -1), (1, -1),
    (-1, 0), (1, 0),
    (-1, 1), (0, 1), (1, 1),
)


def bridge_gaps(mask: BinaryMask) -> BinaryMask:
    """Apply the gap-bridging blur to a mask.

    Interior pixels survive when their 3x3 neighborhood (self included) holds
    at least two foreground cells. The one-pixel border is always background.

    Args:
        mask: Binarized input (not modified)

    Returns:
        New mask with the same dimensions
    """
    height, width = mask.pixels.shape
    blurred = np.zeros((height, width), dtype=bool)
    if height < 3 or width < 3:
        return BinaryMask(pixels=blurred)

    cells = mask.pixels.astype(np.uint8)
    counts = np.zeros((height - 2, width - 2), dtype=np.uint8)
    for dy in range(3):
        for dx in range(3):
            counts += cells[dy : dy + height - 2, dx : dx + width - 2]

    blurred[1:-1, 1:-1] = counts >= 2
    return BinaryMask(pixels=blurred)


def boundary_pixels(mask: BinaryMask) -> BinaryMask:
    """Keep only foreground pixels that touch the background.

    A pixel is on the boundary when any of its 4-neighbors is background or
    lies outside the image.

    Args:
        mask: Input mask (not modified)

    Returns:
        New mask holding only the boundary pixels
    """
    padded = np.pad(mask.pixels, 1, mode="constant", constant_values=False)
    interior = (
        padded[1:-1, 1:-1]
        & padded[:-2, 1:-1]
        & padded[2:, 1:-1]
        & padded[1:-1, :-2]
        & padded[1:-1, 2:]
    )
    return BinaryMask(pixels=mask.pixels & ~interior)


def outer_boundary_pixels(mask: BinaryMask) -> BinaryMask:
    """Keep only foreground pixels that touch the background outside the shape.

    Holes (background not 4-connected to the image border) are filled first,
    so the inner edge of a drawn outline is dropped and a thin ring yields a
    single closed edge instead of two.

    Args:
        mask: Input mask (not modified)

    Returns:
        New mask holding only the outer boundary pixels
    """
    filled = ndimage.binary_fill_holes(mask.pixels)
    return boundary_pixels(BinaryMask(pixels=filled))


class ContourTracer:
    """Extracts contours from a mask with a greedy single-branch walk.

    Example:
        tracer = ContourTracer()
        contours = tracer.find_contours(mask)
    """

    def __init__(self, config: TracerConfig | None = None) -> None:
        """Initialize the tracer.

        Args:
            config: Walk settings (defaults if None)
        """
        self.config = config or TracerConfig()

    def prepare(self, mask: BinaryMask) -> BinaryMask:
        """Blur the mask and, if configured, reduce it to its outer boundary."""
        prepared = bridge_gaps(mask)
        if self.config.boundary_only:
            prepared = outer_boundary_pixels(prepared)
        return prepared

    def find_contours(self, mask: BinaryMask) -> list[Contour]:
        """Trace every stroke in a mask.

        Traces start at unvisited walkable pixels in row-major order, border
        excluded. Each call owns its own visited bitmap.

        Args:
            mask: Binarized input (not modified)

        Returns:
            Contours with at least ``min_points`` points, in discovery order
        """
        walkable = self.prepare(mask).pixels
        visited = np.zeros_like(walkable)
        contours: list[Contour] = []

        # argwhere yields (row, col) pairs in row-major order; the blurred
        # border is background so every seed is an interior pixel
        for y, x in np.argwhere(walkable):
            if visited[y, x]:
                continue
            points = self._trace(walkable, visited, int(x), int(y))
            if len(points) >= self.config.min_points:
                contours.append(Contour(points=tuple(points)))

        logger.debug(
            "Traced %d contours (boundary_only=%s)", len(contours), self.config.boundary_only
        )
        return contours

    def _trace(
        self,
        walkable: NDArray[np.bool_],
        visited: NDArray[np.bool_],
        start_x: int,
        start_y: int,
    ) -> list[Point]:
        """Walk a single stroke starting at (start_x, start_y).

        The stack never holds more than the current pixel: each step pops it
        and pushes the pixel moved to, so the walk ends as soon as no move
        is found.

        Args:
            walkable: Pixels the walk may visit
            visited: Visited bitmap, updated in place
            start_x: Seed column
            start_y: Seed row

        Returns:
            Points in walk order, seed first
        """
        visited[start_y, start_x] = True
        points = [Point(start_x, start_y)]
        stack = [(start_x, start_y)]

        while stack:
            x, y = stack.pop()

            step = _next_neighbor(walkable, visited, x, y)
            if step is None and not stack and len(points) > 1:
                step = self._jump_gap(walkable, visited, x, y)

            if step is not None:
                nx, ny = step
                visited[ny, nx] = True
                points.append(Point(nx, ny))
                stack.append(step)

        return points

    def _jump_gap(
        self,
        walkable: NDArray[np.bool_],
        visited: NDArray[np.bool_],
        x: int,
        y: int,
    ) -> tuple[int, int] | None:
        """Search growing squares around (x, y) for a pixel to continue from.

        Each radius scans its whole square row by row, so the first free
        pixel found is the top-most, then left-most, within the smallest
        radius that has one.
        """
        height, width = walkable.shape
        for radius in self.config.gap_radii:
            for dy in range(-radius, radius + 1):
                ny = y + dy
                if ny < 0 or ny >= height:
                    continue
                for dx in range(-radius, radius + 1):
                    nx = x + dx
                    if (dx == 0 and dy == 0) or nx < 0 or nx >= width:
                        continue
                    if walkable[ny, nx] and not visited[ny, nx]:
                        return (nx, ny)
        return None


def _next_neighbor(
    walkable: NDArray[np.bool_],
    visited: NDArray[np.bool_],
    x: int,
    y: int,
) -> tuple[int, int] | None:
    """First unvisited walkable 8-neighbor in direction priority order."""
    height, width = walkable.shape
    for dx, dy in DIRECTIONS:
        nx = x + dx
        ny = y + dy
        if nx < 0 or ny < 0 or nx >= width or ny >= height:
            continue
        if walkable[ny, nx] and not visited[ny, nx]:
            return (nx, ny)
    return None


def find_contours(mask: BinaryMask, config: TracerConfig | None = None) -> list[Contour]:
    """Trace all contours in a mask with the given settings."""
    return ContourTracer(config).find_contours(mask)
