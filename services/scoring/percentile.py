# services/scoring/percentile.py
import logging

logger = logging.getLogger(__name__)

# (percentile, z threshold) pairs, highest first; approximates the normal CDF
# at the bands used when the reference constants were derived
PERCENTILE_TABLE = (
    (99, 2.33),
    (95, 1.65),
    (90, 1.28),
    (85, 1.04),
    (80, 0.84),
    (75, 0.67),
    (70, 0.52),
    (60, 0.25),
    (50, 0.0),
    (40, -0.25),
    (30, -0.52),
    (25, -0.67),
    (20, -0.84),
    (15, -1.04),
    (10, -1.28),
    (5, -1.65),
    (1, -2.33),
)

MIN_PERCENTILE = 1
MEDIAN_PERCENTILE = 50


def z_score(score: float, mean: float, sd: float) -> float:
    return (score - mean) / sd


def percentile_of(score: float, mean: float, sd: float) -> int:
    """
    Convert a raw mean score to a percentile rank against reference stats.

    Walks PERCENTILE_TABLE and returns the first band whose threshold the
    z-score meets or exceeds. A non-positive SD means every score sits on the
    mean, so the 50th percentile is returned instead of dividing by zero.
    """
    if sd <= 0:
        logger.warning(f"Degenerate reference SD ({sd}) for mean {mean}; using median percentile")
        return MEDIAN_PERCENTILE

    z = z_score(score, mean, sd)
    for percentile, threshold in PERCENTILE_TABLE:
        if z >= threshold:
            return percentile

    return MIN_PERCENTILE
