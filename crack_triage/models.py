from dataclasses import dataclass
from typing import Union

from .damage_types import DamageType


@dataclass(frozen=True)
class PixelStatistics:
    """Ratios collected over the interior of the downsampled image."""

    edge_ratio: float
    strong_edge_ratio: float
    dark_ratio: float
    crack_like_ratio: float
    scanned_pixels: int


@dataclass(frozen=True)
class CrackMeasurement:
    estimated_length_cm: float
    estimated_width_mm: float
    crack_area_cm2: float


@dataclass(frozen=True)
class AnalysisSuccess:
    damage_type: DamageType
    crack_width_mm: float
    crack_length_cm: float
    crack_area_cm2: float
    severity_percent: float
    description: str
    recommendation: str
    complexity: float


@dataclass(frozen=True)
class AnalysisError:
    message: str


AnalysisResult = Union[AnalysisSuccess, AnalysisError]
