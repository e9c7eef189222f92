from .classifier import classify
from .complexity import analyze_complexity
from .damage_types import DamageType
from .exceptions import ImageLoadError, ImageProcessingError
from .models import AnalysisError, AnalysisResult, AnalysisSuccess, CrackMeasurement
from .pipeline import analyze_bitmap, analyze_image

__all__ = [
    "AnalysisError",
    "AnalysisResult",
    "AnalysisSuccess",
    "CrackMeasurement",
    "DamageType",
    "ImageLoadError",
    "ImageProcessingError",
    "analyze_bitmap",
    "analyze_complexity",
    "analyze_image",
    "classify",
]
