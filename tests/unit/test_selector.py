"""Unit tests for main contour selection."""

from sketchshape.core.selector import filter_contours, select_main_contour
from sketchshape.domain import Contour, Point

SQUARE = Contour(points=(Point(0, 0), Point(10, 0), Point(10, 10), Point(0, 10)))
SMALL = Contour(points=(Point(0, 0), Point(4, 0), Point(0, 4)))
RECT_20 = Contour(points=(Point(0, 0), Point(5, 0), Point(5, 4), Point(0, 4)))


class TestSelection:
    """Tests for filtering and picking the dominant contour."""

    def test_filter_drops_small_contours(self):
        """Contours at or below min_area are removed."""
        assert filter_contours([SMALL, SQUARE], min_area=20.0) == [SQUARE]

    def test_min_area_is_strict(self):
        """Area exactly equal to min_area does not pass."""
        assert filter_contours([RECT_20], min_area=20.0) == []
        assert filter_contours([RECT_20], min_area=19.9) == [RECT_20]

    def test_largest_wins(self):
        """The contour with the largest area is selected."""
        assert select_main_contour([RECT_20, SQUARE, SMALL], min_area=0.0) is SQUARE

    def test_first_wins_on_ties(self):
        """Among equal areas the earlier contour is kept."""
        shifted = Contour(points=tuple(Point(p.x + 50, p.y) for p in SQUARE))
        assert select_main_contour([shifted, SQUARE], min_area=0.0) is shifted

    def test_nothing_large_enough(self):
        """No surviving contour yields None."""
        assert select_main_contour([SMALL], min_area=20.0) is None
        assert select_main_contour([], min_area=20.0) is None
