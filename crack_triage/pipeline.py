import logging

import numpy as np
from PIL import Image

from .classifier import classify
from .complexity import analyze_complexity
from .exceptions import ImageLoadError
from .imaging import load_image
from .models import AnalysisError, AnalysisResult, AnalysisSuccess

logger = logging.getLogger(__name__)


def _image_height(image) -> int:
    if isinstance(image, Image.Image):
        return image.height
    if isinstance(image, np.ndarray) and image.ndim >= 2:
        return image.shape[0]
    return 0


def analyze_bitmap(image) -> AnalysisSuccess:
    """Run the heuristic on an already decoded image. Always succeeds."""
    score = analyze_complexity(image)
    result = classify(score, _image_height(image))
    logger.info(
        "Classified as %s (complexity=%.3f, severity=%.0f%%)",
        result.damage_type.value, score, result.severity_percent,
    )
    return result


def analyze_image(source) -> AnalysisResult:
    """Decode ``source`` and classify it; decode failures become AnalysisError."""
    try:
        image = load_image(source)
    except ImageLoadError as e:
        logger.warning("Image rejected before analysis: %s", e)
        return AnalysisError(message=str(e))

    return analyze_bitmap(image)
