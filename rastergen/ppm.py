"""
rastergen/ppm.py
Raw pixmap (PPM P6) writer

Layout:
    P6\\n<width> <height>\\n255\\n     ASCII header
    <width*height*3 bytes>           row-major RGB, top row first, no padding

I/O errors propagate as OSError. A failed write leaves an incomplete file
that the caller must treat as invalid.
"""

import os
from typing import BinaryIO, Union
import logging

import numpy as np

from .config import FORMAT_VERSION, PPM_MAX_VALUE

logger = logging.getLogger(__name__)

Sink = Union[str, "os.PathLike[str]", BinaryIO]


def ppm_header(width: int, height: int) -> bytes:
    """Header bytes for a width x height image."""
    return f"{FORMAT_VERSION}\n{width} {height}\n{PPM_MAX_VALUE}\n".encode("ascii")


def _payload(pixels: np.ndarray) -> bytes:
    if pixels.ndim != 3 or pixels.shape[2] != 3:
        raise ValueError(f"Expected (H, W, 3) pixel array, got shape {pixels.shape}")
    if pixels.dtype != np.uint8:
        raise ValueError(f"Expected uint8 pixels, got dtype {pixels.dtype}")
    return np.ascontiguousarray(pixels).tobytes()


def write_ppm(pixels: np.ndarray, sink: Sink) -> int:
    """
    Write pixels as a P6 image.

    Args:
        pixels: (H, W, 3) uint8 array
        sink: File path, or a writable binary stream (left open)

    Returns:
        Number of bytes written

    Raises:
        OSError: If the sink can't be created or written
    """
    height, width = pixels.shape[:2]
    header = ppm_header(width, height)
    body = _payload(pixels)

    if isinstance(sink, (str, os.PathLike)):
        with open(sink, "wb") as f:
            f.write(header)
            f.write(body)
        logger.debug(f"Wrote {width}x{height} PPM to {os.fspath(sink)}")
    else:
        sink.write(header)
        sink.write(body)
        logger.debug(f"Wrote {width}x{height} PPM to stream")

    return len(header) + len(body)
