"""Main contour selection.

Filters traced contours by enclosed area and picks the dominant one. Small
traces left over from noise or stroke fragments never reach the metrics stage.
"""

import logging

from sketchshape.core.geometry import contour_area
from sketchshape.domain import Contour

logger = logging.getLogger(__name__)


def filter_contours(contours: list[Contour], min_area: float) -> list[Contour]:
    """Keep contours whose area strictly exceeds ``min_area``.

    Args:
        contours: Traced contours
        min_area: Minimum enclosed area in square pixels

    Returns:
        Surviving contours in their original order
    """
    return [c for c in contours if contour_area(c.points) > min_area]


def select_main_contour(contours: list[Contour], min_area: float) -> Contour | None:
    """Pick the contour with the largest area among those above ``min_area``.

    On equal areas the contour traced first wins.

    Args:
        contours: Traced contours
        min_area: Minimum enclosed area in square pixels

    Returns:
        The main contour, or None if no contour is large enough
    """
    valid = filter_contours(contours, min_area)
    logger.debug("%d of %d contours exceed min_area=%.1f", len(valid), len(contours), min_area)

    if not valid:
        return None
    return max(valid, key=lambda c: contour_area(c.points))
