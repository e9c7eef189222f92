import io

import numpy as np
import pytest
from PIL import Image


def _gray_to_rgb(gray: np.ndarray) -> np.ndarray:
    return np.stack([gray] * 3, axis=-1).astype(np.uint8)


@pytest.fixture
def uniform_image():
    def make(brightness, size=(200, 200)):
        width, height = size
        return np.full((height, width, 3), brightness, dtype=np.uint8)
    return make


@pytest.fixture
def diagonal_line():
    """A single 2px-wide black diagonal on a brightness-200 background."""
    y, x = np.mgrid[0:200, 0:200]
    offset = x - y
    gray = np.where((offset == 0) | (offset == 1), 0, 200)
    return _gray_to_rgb(gray)


@pytest.fixture
def crack_network():
    """Parallel 2px-wide black diagonals repeating every ``period`` pixels."""
    def make(period, size=200):
        y, x = np.mgrid[0:size, 0:size]
        offset = (x - y) % period
        gray = np.where((offset == 0) | (offset == 1), 0, 200)
        return _gray_to_rgb(gray)
    return make


@pytest.fixture
def png_bytes():
    def encode(array, fmt="PNG"):
        buf = io.BytesIO()
        Image.fromarray(array).save(buf, format=fmt)
        return buf.getvalue()
    return encode
