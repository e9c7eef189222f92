"""
Crack complexity heuristic.

The image is shrunk to a fixed analysis size and every interior pixel is
checked for darkness and for a brightness step against its right, bottom
and diagonal neighbours. The resulting ratios are blended into a single
score in [0, 1] that the classifier keys its tiers off.
"""

import logging

import numpy as np
from PIL import Image

from .config import (
    ANALYSIS_SIZE,
    COMPLEXITY_FLOOR,
    COMPLEXITY_WEIGHTS,
    CRACK_LIKE_BRIGHTNESS,
    DARK_BRIGHTNESS,
    EDGE_GRADIENT,
    FALLBACK_COMPLEXITY,
    MIN_COMPLEXITY,
    STRONG_EDGE_GRADIENT,
)
from .exceptions import ImageProcessingError
from .models import PixelStatistics

logger = logging.getLogger(__name__)


# -----------------------------
# Pixel helpers
# -----------------------------
def _to_pil(image) -> Image.Image:
    if isinstance(image, Image.Image):
        return image
    if isinstance(image, np.ndarray):
        if image.ndim < 2 or image.shape[0] == 0 or image.shape[1] == 0:
            raise ImageProcessingError(f"Image array has no pixels: shape={image.shape}")
        if image.dtype != np.uint8:
            raise ImageProcessingError(f"Expected uint8 pixel data, got {image.dtype}")
        return Image.fromarray(image)
    raise ImageProcessingError(f"Unsupported image type: {type(image).__name__}")


def _brightness(image) -> np.ndarray:
    """Integer mean of R, G, B at the analysis resolution."""
    pil = _to_pil(image)
    width, height = pil.size
    if width == 0 or height == 0:
        raise ImageProcessingError(f"Image has zero dimension: {width}x{height}")

    small = pil.convert("RGB").resize(ANALYSIS_SIZE, Image.Resampling.BILINEAR)
    rgb = np.asarray(small, dtype=np.int32)
    return rgb.sum(axis=2) // 3


def _max_gradient(brightness: np.ndarray) -> np.ndarray:
    centre = brightness[1:-1, 1:-1]
    right = brightness[1:-1, 2:]
    bottom = brightness[2:, 1:-1]
    diagonal = brightness[2:, 2:]

    return np.maximum.reduce([
        np.abs(centre - right),
        np.abs(centre - bottom),
        np.abs(centre - diagonal),
    ])


# -----------------------------
# Public API
# -----------------------------
def pixel_statistics(image) -> PixelStatistics:
    brightness = _brightness(image)
    interior = brightness[1:-1, 1:-1]
    total = interior.size
    if total == 0:
        raise ImageProcessingError("Analysis grid has no interior pixels")

    gradient = _max_gradient(brightness)

    return PixelStatistics(
        edge_ratio=float(np.count_nonzero(gradient > EDGE_GRADIENT)) / total,
        strong_edge_ratio=float(np.count_nonzero(gradient > STRONG_EDGE_GRADIENT)) / total,
        dark_ratio=float(np.count_nonzero(interior < DARK_BRIGHTNESS)) / total,
        crack_like_ratio=float(np.count_nonzero(interior < CRACK_LIKE_BRIGHTNESS)) / total,
        scanned_pixels=int(total),
    )


def combine_ratios(stats: PixelStatistics) -> float:
    """Weighted blend of the ratios, clamped to [0, 1] and floored."""
    complexity = (
        stats.edge_ratio * COMPLEXITY_WEIGHTS["edge"]
        + stats.strong_edge_ratio * COMPLEXITY_WEIGHTS["strong_edge"]
        + stats.dark_ratio * COMPLEXITY_WEIGHTS["dark"]
        + stats.crack_like_ratio * COMPLEXITY_WEIGHTS["crack_like"]
    )
    complexity = min(max(complexity, 0.0), 1.0)

    # a flat surface still reports a minimal severity
    if complexity < MIN_COMPLEXITY:
        return COMPLEXITY_FLOOR
    return complexity


def analyze_complexity(image) -> float:
    """
    Score an image in [0.05, 1.0].

    Never raises. If the pixel scan fails for any reason (zero-sized or
    corrupt image, unsupported input) the failure is logged and
    FALLBACK_COMPLEXITY is returned so classification can still proceed.
    """
    try:
        stats = pixel_statistics(image)
        complexity = combine_ratios(stats)
    except Exception:
        logger.exception("Complexity scan failed, using fallback score %.2f", FALLBACK_COMPLEXITY)
        return FALLBACK_COMPLEXITY

    logger.debug(
        "edge=%.4f strong=%.4f dark=%.4f crack_like=%.4f -> complexity=%.4f",
        stats.edge_ratio, stats.strong_edge_ratio, stats.dark_ratio,
        stats.crack_like_ratio, complexity,
    )
    return complexity


def gradient_map(image) -> np.ndarray:
    """Max-gradient magnitude per interior pixel, for display."""
    return _max_gradient(_brightness(image)).astype(np.uint8)
