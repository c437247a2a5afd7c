"""
rastergen - Deterministic procedural raster images

Stamps circles, rectangles and single pixels onto a fixed-size canvas using
colors from a seeded hash stream, then writes the result as a PPM P6 file.

Usage:
    python -m rastergen render --seed 4 --output output/test_image.ppm

    from rastergen import Canvas, Circle, from_hsl
    Canvas(64, 64).draw(Circle(32, 32, 10), from_hsl(200, 0.8, 0.5)).save("out.ppm")
"""

__version__ = "0.1.0"

from .color import Color, HSL, from_hsl, BLACK, WHITE
from .stream import HashStream, stable_u32
from .shapes import Point, Rect, Circle, Shape
from .canvas import Canvas
from .ppm import ppm_header, write_ppm
from .compose import compose_scene, SceneReport

__all__ = [
    # Version
    "__version__",
    # Color
    "Color",
    "HSL",
    "from_hsl",
    "BLACK",
    "WHITE",
    # Stream
    "HashStream",
    "stable_u32",
    # Shapes
    "Point",
    "Rect",
    "Circle",
    "Shape",
    # Canvas / output
    "Canvas",
    "ppm_header",
    "write_ppm",
    # Composition
    "compose_scene",
    "SceneReport",
]
