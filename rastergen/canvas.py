"""
rastergen/canvas.py
Fixed-size RGB pixel grid

Pixels live in one (height, width, 3) uint8 array, so flat index
y * width + x is the row-major cell and tobytes() is the PPM body.
"""

from typing import Tuple
import logging

import numpy as np
from PIL import Image

from .color import BLACK, Color
from .ppm import Sink, write_ppm
from .shapes import Shape

logger = logging.getLogger(__name__)


class Canvas:
    """
    Mutable pixel grid that shapes are drawn onto.

    Width and height are fixed for the canvas's lifetime. All writes are
    bounds-checked: shapes clip to the grid, set_pixel ignores positions
    outside it.
    """

    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise ValueError(f"Canvas dimensions must be positive, got {width}x{height}")
        self._width = int(width)
        self._height = int(height)
        self._pixels = np.zeros((self._height, self._width, 3), dtype=np.uint8)
        logger.debug(f"Allocated {self._width}x{self._height} canvas")

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def size(self) -> Tuple[int, int]:
        return (self._width, self._height)

    @property
    def pixels(self) -> np.ndarray:
        """Underlying (height, width, 3) array; writes go straight to the canvas."""
        return self._pixels

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def draw(self, shape: Shape, color: Color) -> "Canvas":
        """Rasterize shape in color. Returns self for chaining."""
        shape.paint(self._pixels, color)
        return self

    def set_pixel(self, x: int, y: int, color: Color) -> bool:
        """Write one pixel. Out-of-range positions are a no-op returning False."""
        if not self.in_bounds(x, y):
            return False
        self._pixels[y, x] = color
        return True

    def get_pixel(self, x: int, y: int) -> Color:
        if not self.in_bounds(x, y):
            raise IndexError(f"Pixel ({x}, {y}) outside {self._width}x{self._height} canvas")
        r, g, b = self._pixels[y, x]
        return (int(r), int(g), int(b))

    def clear(self, color: Color = BLACK) -> "Canvas":
        self._pixels[:, :] = color
        return self

    def save(self, sink: Sink) -> int:
        """Serialize as PPM P6. Returns bytes written; OSError propagates."""
        return write_ppm(self._pixels, sink)

    def to_image(self) -> Image.Image:
        """Pillow RGB copy of the pixels, for previewing or other formats."""
        return Image.fromarray(self._pixels.copy())

    def __repr__(self) -> str:
        return f"Canvas({self._width}, {self._height})"
