# lib/reference_stats.py
"""
Frozen statistics from the research reference sample.

n=401 participants from "The Dark at the End of the Tunnel" study. These are
constants baked from the original analysis, never recomputed at runtime.
"""
from models.assessment_models import ConstructId, DimensionId, ReferenceStat
from shared.exceptions import ConfigurationError
from utils.helpers import round_half_up

SAMPLE_SIZE = 401
DATA_SOURCE = "The Dark at the End of the Tunnel study (n=401)"

OVERALL_STATS = ReferenceStat(mean=3.55, sd=0.72, n=SAMPLE_SIZE)

CONSTRUCT_STATS = {
    ConstructId.FREQUENCY: ReferenceStat(mean=3.39, sd=0.86),     # DS1
    ConstructId.CONTROL: ReferenceStat(mean=2.73, sd=1.19),       # DS2
    ConstructId.EMOTIONAL: ReferenceStat(mean=3.38, sd=1.12),     # DS3
    ConstructId.TIME: ReferenceStat(mean=3.89, sd=0.78),          # DS4
    ConstructId.COMPULSIVE: ReferenceStat(mean=3.04, sd=0.95),    # DS5
    ConstructId.AWARENESS: ReferenceStat(mean=3.96, sd=0.75),     # DS6
    ConstructId.INTERFERENCE: ReferenceStat(mean=3.84, sd=0.88),  # DS7
    ConstructId.COPING: ReferenceStat(mean=4.16, sd=0.73),        # DS8
}

DIMENSION_STATS = {
    DimensionId.BEHAVIORAL_CONTROL: ReferenceStat(mean=2.89, sd=1.07),   # DS2 + DS5
    DimensionId.EMOTIONAL_WELLBEING: ReferenceStat(mean=3.77, sd=0.93),  # DS3 + DS8
    DimensionId.TIME_MANAGEMENT: ReferenceStat(mean=3.64, sd=0.82),      # DS4 + DS1
    DimensionId.DAILY_FUNCTIONING: ReferenceStat(mean=3.84, sd=0.88),    # DS7
    DimensionId.SELF_AWARENESS: ReferenceStat(mean=3.96, sd=0.75),       # DS6
}

CONSTRUCT_INTERPRETATIONS = {
    ConstructId.FREQUENCY: "How often you engage with social media",
    ConstructId.CONTROL: "Your ability to stop scrolling when you want",
    ConstructId.EMOTIONAL: "How scrolling affects your emotions",
    ConstructId.TIME: "How aware you are of time while scrolling",
    ConstructId.COMPULSIVE: "The urge to constantly check social media",
    ConstructId.AWARENESS: "Your recognition of potential harm",
    ConstructId.INTERFERENCE: "How scrolling affects daily life",
    ConstructId.COPING: "Using scrolling to manage emotions",
}

# Overall-score distribution of the sample (counts sum to 401)
SCORE_DISTRIBUTION = (
    {"range": "1.0-1.5", "count": 0, "percentage": 0.0},
    {"range": "1.5-2.0", "count": 5, "percentage": 1.2},
    {"range": "2.0-2.5", "count": 15, "percentage": 3.7},
    {"range": "2.5-3.0", "count": 64, "percentage": 16.0},
    {"range": "3.0-3.5", "count": 111, "percentage": 27.7},
    {"range": "3.5-4.0", "count": 109, "percentage": 27.2},
    {"range": "4.0-4.5", "count": 60, "percentage": 15.0},
    {"range": "4.5-5.0", "count": 25, "percentage": 6.2},
    {"range": "5.0-5.5", "count": 9, "percentage": 2.2},
    {"range": "5.5-6.0", "count": 1, "percentage": 0.2},
    {"range": "6.0+", "count": 2, "percentage": 0.5},
)

# Participants per severity tier: low <=2.5, moderate <=4.0, high <=5.5, severe >5.5
SEVERITY_COUNTS = {"low": 22, "moderate": 282, "high": 94, "severe": 3}


def get_construct_stats(construct_id) -> ReferenceStat:
    try:
        return CONSTRUCT_STATS[ConstructId(construct_id)]
    except (KeyError, ValueError):
        raise ConfigurationError(f"No reference statistics configured for construct: {construct_id}")


def get_dimension_stats(dimension_id) -> ReferenceStat:
    try:
        return DIMENSION_STATS[DimensionId(dimension_id)]
    except (KeyError, ValueError):
        raise ConfigurationError(f"No reference statistics configured for dimension: {dimension_id}")


def severity_breakdown_percentages() -> dict:
    """Severity tier shares of the sample as whole-number percentages"""
    return {
        tier: round_half_up(count * 100 / SAMPLE_SIZE)
        for tier, count in SEVERITY_COUNTS.items()
    }
