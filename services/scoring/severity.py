# services/scoring/severity.py
from lib.constructs import SEVERITY_LEVELS
from models.assessment_models import SeverityLevel, SeverityTier

SCALE_REFLECTION = 8


def invert_score(score: float) -> float:
    """Reflect a 1-7 score so that 7 becomes 1 and 1 becomes 7"""
    return SCALE_REFLECTION - score


def classify(score: float, invert: bool = False) -> SeverityLevel:
    """
    Map a 1-7 score to its severity tier.

    Tiers are keyed by fixed upper bounds (Low <=2.5, Moderate <=4.0,
    High <=5.5, Severe above). With ``invert`` the score is reflected first,
    which is how a protective dimension is read: high awareness, low severity.
    """
    effective = invert_score(score) if invert else score

    for tier, level in SEVERITY_LEVELS.items():
        if effective <= level["max"]:
            return _build_level(tier)

    return _build_level(SeverityTier.SEVERE)


def _build_level(tier: SeverityTier) -> SeverityLevel:
    level = SEVERITY_LEVELS[tier]
    return SeverityLevel(
        tier=tier,
        label=level["label"],
        color=level["color"],
        description=level["description"],
    )
