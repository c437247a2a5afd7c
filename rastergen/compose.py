"""
rastergen/compose.py
Scene composition: turns a seeded stream into a list of drawn shapes

Each shape is anchored on a ring around the canvas center. The angle is the
product of two uniform draws, so it skews toward -pi, and the shape size
grows with the angle. Colors stay within 45 degrees of red.
"""

import math
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple
import logging

from .canvas import Canvas
from .color import from_hsl
from .config import RENDER_CONFIG
from .shapes import Circle, Rect, Shape
from .stream import HashStream

logger = logging.getLogger(__name__)


@dataclass
class SceneReport:
    """What compose_scene drew."""
    seed: Optional[int] = None
    shape_count: int = 0
    by_kind: Dict[str, int] = field(default_factory=dict)
    shapes: List[Shape] = field(default_factory=list)


def _next_anchor(rand: HashStream, size: int, radius_step: int) -> Tuple[int, int, int]:
    # Legacy width/height draws; unused but kept so sequences stay aligned
    rand.next_u64()
    rand.next_u64()

    theta = (rand.next_f32() * rand.next_f32() - 0.5) * 2.0 * math.pi
    ring = size / 3.0
    center = size / 2.0
    x = max(0, int(ring * math.cos(theta) + center))
    y = max(0, int(ring * math.sin(theta) + center))

    # Legacy rgb draws
    rand.next_u8()
    rand.next_u8()
    rand.next_u8()

    radius = int(theta + math.pi) * radius_step
    return x, y, radius


def compose_scene(
    canvas: Canvas,
    rand: HashStream,
    count: int = RENDER_CONFIG.shape_count,
    radius_step: int = RENDER_CONFIG.radius_step,
    seed: Optional[int] = None,
) -> SceneReport:
    """
    Draw ``count`` circles and squares onto canvas.

    The ring is sized from the canvas's shorter side. Output depends only on
    the stream's state, so the same seed gives the same image.

    Args:
        canvas: Target canvas (mutated)
        rand: Seeded stream, advanced by every draw
        count: Number of shapes
        radius_step: Shape size per whole radian of angle
        seed: Recorded in the report only
    """
    size = min(canvas.width, canvas.height)
    report = SceneReport(seed=seed)

    for i in range(count):
        x, y, radius = _next_anchor(rand, size, radius_step)

        color = from_hsl(
            -45.0 + rand.next_f32() * 90.0,
            rand.next_f32(),
            rand.next_f32(),
        )

        if rand.next_u8() & 1:
            shape = Circle(x, y, radius)
        else:
            half = radius // 2
            shape = Rect(x - half, y - half, radius, radius)

        canvas.draw(shape, color)

        kind = type(shape).__name__.lower()
        report.by_kind[kind] = report.by_kind.get(kind, 0) + 1
        report.shapes.append(shape)
        logger.debug(f"[{i + 1}/{count}] {shape} color={color}")

    report.shape_count = len(report.shapes)
    return report
