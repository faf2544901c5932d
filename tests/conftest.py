"""Shared fixtures: synthetic drawing snapshots rendered with numpy."""

import math
from collections.abc import Callable
from types import SimpleNamespace

import numpy as np
import pytest

from sketchshape.domain import PixelBuffer

INK = (255, 255, 255, 255)

Predicate = Callable[[int, int], bool]


def make_buffer(
    width: int,
    height: int,
    inside: Predicate,
    ink: tuple[int, int, int, int] = INK,
    background: tuple[int, int, int, int] = (0, 0, 0, 0),
) -> PixelBuffer:
    """Rasterize a predicate: pixels where inside(x, y) holds get the ink color."""
    pixels = np.empty((height, width, 4), dtype=np.uint8)
    pixels[:, :] = background
    for y in range(height):
        for x in range(width):
            if inside(x, y):
                pixels[y, x] = ink
    return PixelBuffer.from_array(pixels)


def disk(cx: float, cy: float, radius: float) -> Predicate:
    """Filled disk."""
    return lambda x, y: (x - cx) ** 2 + (y - cy) ** 2 <= radius * radius


def ring(cx: float, cy: float, radius: float, half_width: float) -> Predicate:
    """Circular stroke of the given half width."""
    return lambda x, y: abs(math.hypot(x - cx, y - cy) - radius) <= half_width


def filled_triangle(
    a: tuple[float, float], b: tuple[float, float], c: tuple[float, float]
) -> Predicate:
    """Filled triangle, edges included."""

    def side(p, q, r):
        return (p[0] - r[0]) * (q[1] - r[1]) - (q[0] - r[0]) * (p[1] - r[1])

    def inside(x: int, y: int) -> bool:
        p = (x, y)
        d1, d2, d3 = side(p, a, b), side(p, b, c), side(p, c, a)
        has_neg = d1 < 0 or d2 < 0 or d3 < 0
        has_pos = d1 > 0 or d2 > 0 or d3 > 0
        return not (has_neg and has_pos)

    return inside


def _segment_distance(x: float, y: float, a: tuple[float, float], b: tuple[float, float]) -> float:
    dx, dy = b[0] - a[0], b[1] - a[1]
    t = ((x - a[0]) * dx + (y - a[1]) * dy) / (dx * dx + dy * dy)
    t = max(0.0, min(1.0, t))
    return math.hypot(x - a[0] - t * dx, y - a[1] - t * dy)


def triangle_outline(
    a: tuple[float, float],
    b: tuple[float, float],
    c: tuple[float, float],
    half_width: float,
) -> Predicate:
    """Triangle drawn as a stroke of the given half width."""
    return lambda x, y: min(
        _segment_distance(x, y, a, b),
        _segment_distance(x, y, b, c),
        _segment_distance(x, y, c, a),
    ) <= half_width


@pytest.fixture
def blank_canvas() -> PixelBuffer:
    """100x100 canvas with no ink at all."""
    return make_buffer(100, 100, lambda x, y: False)


@pytest.fixture
def disk_buffer() -> PixelBuffer:
    """Filled circle of radius 10 centered at (50, 50) on a 100x100 canvas."""
    return make_buffer(100, 100, disk(50, 50, 10))


@pytest.fixture
def triangle_buffer() -> PixelBuffer:
    """Filled triangle with vertices (50, 20), (80, 80), (20, 80)."""
    return make_buffer(100, 100, filled_triangle((50, 20), (80, 80), (20, 80)))


@pytest.fixture
def sketch() -> SimpleNamespace:
    """Raster helpers for building custom snapshots inside a test."""
    return SimpleNamespace(
        buffer=make_buffer,
        disk=disk,
        ring=ring,
        triangle=filled_triangle,
        outline=triangle_outline,
    )
