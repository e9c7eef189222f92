"""
Thresholds, weights and tier tables for the crack triage heuristic.

None of these are calibrated against structural ground truth. Tune them
here, not in the analyzer or classifier.
"""

# -----------------------------
# Complexity analysis
# -----------------------------
ANALYSIS_SIZE: tuple[int, int] = (200, 200)

DARK_BRIGHTNESS: int = 130
CRACK_LIKE_BRIGHTNESS: int = 80

EDGE_GRADIENT: int = 20
STRONG_EDGE_GRADIENT: int = 50

COMPLEXITY_WEIGHTS: dict[str, float] = {
    "edge": 0.4,
    "strong_edge": 0.3,
    "dark": 0.2,
    "crack_like": 0.1,
}

# Below MIN_COMPLEXITY the score is replaced by COMPLEXITY_FLOOR
MIN_COMPLEXITY: float = 0.02
COMPLEXITY_FLOOR: float = 0.05

# Returned when the scan itself fails
FALLBACK_COMPLEXITY: float = 0.15

# -----------------------------
# Classification
# -----------------------------
# (exclusive upper bound, tier name); the last tier catches everything else
TIER_BOUNDS: list[tuple[float, str]] = [
    (0.15, "TYPE_O"),
    (0.30, "TYPE_A"),
    (0.50, "TYPE_B"),
    (0.75, "TYPE_C"),
]
TOP_TIER: str = "TYPE_D"

# Six finer bands used for width and length: (upper bound, width mm, length factor)
MEASUREMENT_BANDS: list[tuple[float, float, float]] = [
    (0.05, 0.2, 0.1),
    (0.15, 0.4, 0.2),
    (0.30, 1.2, 0.4),
    (0.50, 2.5, 0.6),
    (0.75, 6.0, 0.8),
]
TOP_BAND: tuple[float, float] = (12.0, 0.95)

# -----------------------------
# Image acquisition
# -----------------------------
MAX_LONG_EDGE: int = 1024
