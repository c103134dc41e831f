import pytest

from models.assessment_models import RiskLevel
from services.scoring.predictions import (
    PREDICTION_RULES,
    classify_risk_level,
    describe_percentile,
    estimate_weekly_hours,
    get_risk_level_label,
    predict,
    predict_from_result,
)
from services.scoring.results import assemble
from conftest import build_responses


def _ids(profile):
    return [p.id for p in profile.predictions]


def test_minimal_risk_profile():
    result = assemble(build_responses(default=2, awareness=6), session_id="minimal")
    profile = predict_from_result(result)

    assert result.overall_score == 2.0
    assert result.overall_severity.label == "Low"
    assert profile.risk_level == RiskLevel.MINIMAL

    healthy = next(p for p in profile.predictions if p.id == "healthy")
    assert healthy.title == "Healthy Digital Habits"
    assert healthy.probability == 85
    assert profile.risk_factors == ()
    assert "Balanced approach to social media" in profile.protective_factors


def test_escalation_rule():
    profile = predict({"control": 5.0, "compulsive": 5.0}, overall_score=3.5)

    escalation = next(p for p in profile.predictions if p.id == "escalation")
    assert escalation.title == "Escalation Risk"
    assert escalation.probability == 55
    assert escalation.severity == "high"
    assert profile.risk_factors.count("Low perceived control over scrolling behavior") == 1


def test_escalation_critical_above_five_and_a_half():
    profile = predict({"control": 6.0, "compulsive": 6.0}, overall_score=4.0)
    escalation = next(p for p in profile.predictions if p.id == "escalation")

    assert escalation.severity == "critical"
    assert escalation.probability == 75


def test_predictions_sorted_by_probability():
    profile = predict(
        {"control": 6.0, "compulsive": 6.0, "interference": 6.0, "emotional": 6.0, "coping": 6.0, "awareness": 5.0},
        overall_score=5.5,
    )
    probabilities = [p.probability for p in profile.predictions]

    assert probabilities == sorted(probabilities, reverse=True)
    assert {"escalation", "sleep", "mood", "fatigue", "productivity"} <= set(_ids(profile))


def test_probability_is_clamped():
    profile = predict({"emotional": 7.0, "coping": 7.0}, overall_score=5.0)
    mood = next(p for p in profile.predictions if p.id == "mood")

    # 50 + 18 * 3 would be 104
    assert mood.probability == 100


def test_missing_constructs_default_to_three():
    profile = predict({}, overall_score=3.0)

    assert profile.predictions == ()
    assert profile.weekly_time_estimate.min == 3


def test_factor_lists_have_no_duplicates():
    profile = predict(
        {"control": 6.0, "compulsive": 6.0, "coping": 5.0, "frequency": 5.0, "awareness": 2.0},
        overall_score=5.0,
    )

    assert len(profile.risk_factors) == len(set(profile.risk_factors))
    assert "Strong reliance on scrolling for emotional regulation" in profile.risk_factors
    assert "Very high frequency of social media checking" in profile.risk_factors
    assert "Low awareness of scrolling's impact on wellbeing" in profile.risk_factors


def test_recovery_rule_is_positive():
    profile = predict({"awareness": 5.0, "control": 2.0}, overall_score=3.0)
    recovery = next(p for p in profile.predictions if p.id == "recovery")

    assert recovery.category == "positive"
    assert recovery.probability == 75
    assert "Maintained ability to self-regulate" in profile.protective_factors


@pytest.mark.parametrize("score, level", [
    (1.5, RiskLevel.MINIMAL),
    (2.0, RiskLevel.MINIMAL),
    (2.8, RiskLevel.LOW),
    (3.8, RiskLevel.MODERATE),
    (4.8, RiskLevel.ELEVATED),
    (4.81, RiskLevel.HIGH),
])
def test_risk_level_cutoffs(score, level):
    assert classify_risk_level(score) == level


def test_weekly_estimate():
    estimate = estimate_weekly_hours(4.0, 3.5)
    assert (estimate.min, estimate.max) == (5, 10)


def test_weekly_estimate_floor():
    estimate = estimate_weekly_hours(1.0, 1.0)
    assert estimate.min == 2
    assert estimate.max >= estimate.min


def test_supplied_percentile_is_authoritative():
    profile = predict({}, overall_score=3.55, overall_percentile=62)
    assert profile.risk_score == 62
    assert profile.comparison_to_sample.percentile == 62


def test_percentile_recomputed_when_missing():
    profile = predict({}, overall_score=3.55)
    assert profile.risk_score == 50
    assert "around the average" in profile.comparison_to_sample.description


@pytest.mark.parametrize("percentile, fragment", [
    (25, "lower than most"),
    (50, "around the average"),
    (75, "higher than most"),
    (76, "significantly higher"),
])
def test_describe_percentile(percentile, fragment):
    assert fragment in describe_percentile(percentile)


def test_risk_level_label():
    label = get_risk_level_label(RiskLevel.ELEVATED)
    assert label.label == "Elevated Risk"


def test_rule_ids_unique():
    ids = [r.id for r in PREDICTION_RULES]
    assert len(ids) == len(set(ids)) == 7
