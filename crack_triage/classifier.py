from .config import MEASUREMENT_BANDS, TIER_BOUNDS, TOP_BAND, TOP_TIER
from .damage_types import DamageType
from .models import AnalysisSuccess, CrackMeasurement


# -----------------------------
# Lookups
# -----------------------------
def damage_type_for(score: float) -> DamageType:
    for upper, tier in TIER_BOUNDS:
        if score < upper:
            return DamageType(tier)
    return DamageType(TOP_TIER)


def measure_crack(score: float, image_height: int) -> CrackMeasurement:
    """
    Width comes straight from the band table. Length treats the image
    height in pixels as a proxy for physical scale.
    """
    width_mm, factor = TOP_BAND
    for upper, band_width, band_factor in MEASUREMENT_BANDS:
        if score < upper:
            width_mm, factor = band_width, band_factor
            break

    length_cm = image_height * factor / 10
    return CrackMeasurement(
        estimated_length_cm=length_cm,
        estimated_width_mm=width_mm,
        crack_area_cm2=length_cm * width_mm / 10,
    )


def severity_percent(score: float) -> float:
    return min(max(score * 100, 0.0), 100.0)


def describe(damage_type: DamageType, measurement: CrackMeasurement) -> str:
    return (
        f"{damage_type.display_name}: {damage_type.symptoms}. "
        f"Estimated crack width {measurement.estimated_width_mm:.1f} mm, "
        f"length {measurement.estimated_length_cm:.1f} cm, "
        f"area {measurement.crack_area_cm2:.2f} cm²."
    )


# -----------------------------
# Classification
# -----------------------------
def classify(score: float, image_height: int) -> AnalysisSuccess:
    damage_type = damage_type_for(score)
    measurement = measure_crack(score, image_height)

    return AnalysisSuccess(
        damage_type=damage_type,
        crack_width_mm=measurement.estimated_width_mm,
        crack_length_cm=measurement.estimated_length_cm,
        crack_area_cm2=measurement.crack_area_cm2,
        severity_percent=severity_percent(score),
        description=describe(damage_type, measurement),
        recommendation=damage_type.recommendation,
        complexity=score,
    )
