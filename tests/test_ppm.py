"""
Tests for rastergen/ppm.py
P6 header layout, byte counts and I/O error propagation
"""

import io

import numpy as np
import pytest
from PIL import Image

from rastergen import Canvas, Circle, from_hsl, ppm_header, write_ppm


def test_header_layout():
    assert ppm_header(4, 3) == b"P6\n4 3\n255\n"
    assert ppm_header(2048, 1) == b"P6\n2048 1\n255\n"


@pytest.mark.parametrize("w,h", [(1, 1), (4, 4), (7, 3), (16, 9)])
def test_fresh_canvas_bytes(w, h):
    buf = io.BytesIO()
    written = Canvas(w, h).save(buf)
    data = buf.getvalue()
    header = f"P6\n{w} {h}\n255\n".encode("ascii")
    assert written == len(data) == len(header) + w * h * 3
    assert data.startswith(header)
    assert data[len(header):] == bytes(w * h * 3)


def test_write_to_path(tmp_path):
    c = Canvas(5, 3)
    c.draw(Circle(2, 1, 2), (12, 34, 56))
    path = tmp_path / "img.ppm"
    written = c.save(path)

    data = path.read_bytes()
    assert len(data) == written
    assert data[len(ppm_header(5, 3)):] == c.pixels.tobytes()


def test_write_to_str_path(tmp_path):
    path = str(tmp_path / "img.ppm")
    write_ppm(np.zeros((2, 2, 3), dtype=np.uint8), path)
    with open(path, "rb") as f:
        assert f.read() == b"P6\n2 2\n255\n" + bytes(12)


def test_stream_left_open():
    buf = io.BytesIO()
    Canvas(2, 2).save(buf)
    assert not buf.closed


def test_pillow_reads_output(tmp_path):
    c = Canvas(8, 5)
    color = from_hsl(200.0, 0.8, 0.5)
    c.set_pixel(7, 4, color)
    c.set_pixel(0, 0, (255, 255, 255))
    path = tmp_path / "check.ppm"
    c.save(path)

    with Image.open(path) as img:
        assert img.format == "PPM"
        assert img.mode == "RGB"
        assert img.size == (8, 5)
        assert img.getpixel((7, 4)) == color
        assert img.getpixel((0, 0)) == (255, 255, 255)
        assert np.array_equal(np.asarray(img), c.pixels)


def test_missing_directory_raises(tmp_path):
    with pytest.raises(OSError):
        Canvas(2, 2).save(tmp_path / "missing" / "img.ppm")


def test_stream_error_propagates():
    class BrokenSink:
        def write(self, data):
            raise OSError("disk full")

    with pytest.raises(OSError, match="disk full"):
        Canvas(2, 2).save(BrokenSink())


def test_rejects_non_rgb_array():
    with pytest.raises(ValueError):
        write_ppm(np.zeros((2, 2), dtype=np.uint8), io.BytesIO())


@pytest.mark.parametrize("dtype", [np.float64, np.int32, np.uint16])
def test_rejects_non_uint8_pixels(dtype):
    buf = io.BytesIO()
    with pytest.raises(ValueError):
        write_ppm(np.full((2, 2, 3), 0.5).astype(dtype), buf)
    assert buf.getvalue() == b""
