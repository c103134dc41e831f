import pytest

from models.assessment_models import SeverityTier
from services.scoring.severity import classify, invert_score


@pytest.mark.parametrize("score, tier", [
    (1.0, SeverityTier.LOW),
    (2.5, SeverityTier.LOW),
    (2.51, SeverityTier.MODERATE),
    (4.0, SeverityTier.MODERATE),
    (4.01, SeverityTier.HIGH),
    (5.5, SeverityTier.HIGH),
    (5.51, SeverityTier.SEVERE),
    (7.0, SeverityTier.SEVERE),
])
def test_tier_boundaries(score, tier):
    assert classify(score).tier == tier


def test_inverted_reading_reflects_score():
    assert invert_score(7) == 1
    assert invert_score(1) == 7
    assert classify(7.0, invert=True).tier == SeverityTier.LOW
    assert classify(1.0, invert=True).tier == SeverityTier.SEVERE


def test_severity_is_monotonic():
    ranks = [classify(1 + i * 0.1).tier.rank for i in range(61)]
    assert ranks == sorted(ranks)


def test_level_carries_display_fields():
    level = classify(3.0)
    assert level.label == "Moderate"
    assert level.color.startswith("#")
    assert level.description
