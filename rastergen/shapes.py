"""
rastergen/shapes.py
Shape rasterizers

Each shape is an immutable value with one capability: paint itself onto an
(H, W, 3) uint8 pixel array in a single color. Anything outside the array is
clipped, so painting never fails for well-typed input.
"""

from dataclasses import dataclass
from typing import Tuple, Union

import numpy as np

from .color import Color

# Doubled offsets up to this size square and sum without overflowing int64
INT64_SAFE_EXTENT = 1 << 29


def _span(start: int, stop: int, limit: int) -> Tuple[int, int]:
    """Clip the half-open range [start, stop) to [0, limit)."""
    return max(0, min(start, limit)), max(0, min(stop, limit))


def _check_extent(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


@dataclass(frozen=True)
class Point:
    x: int
    y: int

    def paint(self, pixels: np.ndarray, color: Color) -> None:
        height, width = pixels.shape[:2]
        if 0 <= self.x < width and 0 <= self.y < height:
            pixels[self.y, self.x] = color


@dataclass(frozen=True)
class Rect:
    """
    Axis-aligned rectangle with top-left corner (x, y).

    The far edge is inclusive: pixels x..x+w and y..y+h are filled, so a
    0x0 rect still covers one pixel.
    """
    x: int
    y: int
    w: int
    h: int

    def __post_init__(self):
        _check_extent("w", self.w)
        _check_extent("h", self.h)

    def paint(self, pixels: np.ndarray, color: Color) -> None:
        height, width = pixels.shape[:2]
        x0, x1 = _span(self.x, self.x + self.w + 1, width)
        y0, y1 = _span(self.y, self.y + self.h + 1, height)
        if x0 < x1 and y0 < y1:
            pixels[y0:y1, x0:x1] = color


@dataclass(frozen=True)
class Circle:
    """
    Filled disk centered at (x, y).

    A pixel is inside when its center (px + 0.5, py + 0.5) lies within
    ``radius`` of the center. Terms are doubled to stay in integers:
    (2(px-x)+1)^2 + (2(py-y)+1)^2 <= (2r)^2. A zero radius covers just the
    center pixel.
    """
    x: int
    y: int
    radius: int

    def __post_init__(self):
        _check_extent("radius", self.radius)

    def contains(self, px: int, py: int) -> bool:
        if self.radius == 0:
            return px == self.x and py == self.y
        dx = 2 * (px - self.x) + 1
        dy = 2 * (py - self.y) + 1
        return dx * dx + dy * dy <= (2 * self.radius) ** 2

    def paint(self, pixels: np.ndarray, color: Color) -> None:
        if self.radius == 0:
            Point(self.x, self.y).paint(pixels, color)
            return

        height, width = pixels.shape[:2]
        r = self.radius
        # Bounding box [x-r, x+r) x [y-r, y+r) holds every inside pixel
        x0, x1 = _span(self.x - r, self.x + r, width)
        y0, y1 = _span(self.y - r, self.y + r, height)
        if x0 >= x1 or y0 >= y1:
            return

        # Squared offsets must stay exact; fall back to Python ints past int64
        extent = max(abs(x0 - self.x), abs(x1 - self.x), abs(y0 - self.y), abs(y1 - self.y), r)
        dtype = np.int64 if extent < INT64_SAFE_EXTENT else object

        xs = np.arange(x0, x1).astype(dtype)
        ys = np.arange(y0, y1).astype(dtype)
        dx = 2 * (xs - self.x) + 1
        dy = 2 * (ys - self.y) + 1
        mask = (dx * dx)[np.newaxis, :] + (dy * dy)[:, np.newaxis] <= (2 * r) ** 2
        pixels[y0:y1, x0:x1][np.asarray(mask, dtype=bool)] = color


Shape = Union[Point, Rect, Circle]
