"""
rastergen/config.py
Default settings for rendering

No configuration files are read; the command line overrides these.
"""

from dataclasses import dataclass

# =============================================================================
# Version
# =============================================================================

FORMAT_VERSION = "P6"

# =============================================================================
# PPM output
# =============================================================================

# Max channel value written into every header
PPM_MAX_VALUE = 255

# =============================================================================
# Numeric stream
# =============================================================================

@dataclass
class StreamConfig:
    """Hash stream constants."""
    mix_constant: int = 7     # mixed into the state on every draw
    seed_bytes: int = 4       # seeds are written as u32
    word_bytes: int = 4       # width of the mix constant
    draw_bytes: int = 8       # digest bytes taken per draw (u64)


STREAM_CONFIG = StreamConfig()

# Legal integer draw widths (bits)
INTEGER_WIDTHS = (8, 16, 32, 64)
FLOAT_WIDTHS = (32, 64)

# =============================================================================
# Render defaults
# =============================================================================

@dataclass
class RenderConfig:
    """Defaults for a single scene render."""
    size: int = 2 << 10          # square canvas, 2048 px
    seed: int = 4
    shape_count: int = 1 << 7    # 128 shapes
    radius_step: int = 45        # circle/square size per whole radian
    output: str = "output/test_image.ppm"


RENDER_CONFIG = RenderConfig()
