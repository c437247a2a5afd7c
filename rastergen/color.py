"""
rastergen/color.py
HSL to RGB conversion

Uses the chroma / hue-sector form:
https://en.wikipedia.org/wiki/HSL_and_HSV#HSL_to_RGB_alternative
"""

from dataclasses import dataclass
from typing import Tuple

Color = Tuple[int, int, int]

BLACK: Color = (0, 0, 0)
WHITE: Color = (255, 255, 255)


def _clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


@dataclass(frozen=True)
class HSL:
    """Hue in degrees (any real), saturation and lightness in 0-1."""
    h: float
    s: float
    l: float

    def rectified(self) -> "HSL":
        """Hue reduced into [0, 360), s and l clamped to [0, 1]."""
        return HSL(
            h=self.h % 360.0,
            s=_clamp(self.s, 0.0, 1.0),
            l=_clamp(self.l, 0.0, 1.0),
        )

    def to_rgb(self) -> Color:
        hsl = self.rectified()
        h, s, l = hsl.h, hsl.s, hsl.l

        a = s * min(l, 1.0 - l)

        def f(n: float) -> float:
            k = (n + h / 30.0) % 12.0
            return l - a * max(-1.0, min(k - 3.0, 9.0 - k, 1.0))

        # Truncate, not round
        return tuple(_to_byte(v) for v in (f(0.0), f(8.0), f(4.0)))


def _to_byte(value: float) -> int:
    return int(_clamp(int(value * 255.0), 0, 255))


def from_hsl(h: float, s: float, l: float) -> Color:
    """Convert HSL to an (r, g, b) triple of 0-255 ints."""
    return HSL(h, s, l).to_rgb()
