"""Pytest configuration - consistent CWD plus shared canvas fixtures."""
from __future__ import annotations

import logging
import os
from pathlib import Path

import numpy as np
import pytest

from rastergen import Canvas

ROOT = Path(__file__).resolve().parents[1]


def pytest_sessionstart(session):
    os.chdir(ROOT)


@pytest.fixture
def project_root():
    """Return path to project root."""
    return ROOT


@pytest.fixture
def canvas():
    """Fresh 10x10 black canvas."""
    return Canvas(10, 10)


@pytest.fixture
def changed_pixels():
    """Return a function listing (x, y) positions that differ between two pixel arrays."""
    def _changed(before: np.ndarray, after: np.ndarray):
        ys, xs = np.nonzero(np.any(before != after, axis=2))
        return sorted(zip(xs.tolist(), ys.tolist()))
    return _changed


@pytest.fixture(autouse=True)
def reset_cli_logging():
    """The CLI binds a handler to the current stdout; drop it after each test."""
    yield
    logger = logging.getLogger("rastergen")
    logger.handlers[:] = []
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
