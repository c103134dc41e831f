# services/scoring/predictions.py
"""
Predictive Analysis

Threshold rules over construct scores, derived from correlations observed in
the research dataset (n=401). Every rule is a data record evaluated the same
way, so the battery can be audited and tested one rule at a time.
"""
import logging
import math
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Mapping, Optional, Tuple

from lib.constructs import RISK_LEVEL_LABELS
from lib.reference_stats import OVERALL_STATS
from models.assessment_models import (
    AssessmentResult,
    PredictiveInsight,
    PredictiveProfile,
    RiskLevel,
    RiskLevelLabel,
    SampleComparison,
    WeeklyTimeEstimate,
)
from utils.helpers import round_half_up
from .percentile import percentile_of

logger = logging.getLogger(__name__)

DEFAULT_CONSTRUCT_SCORE = 3.0

# Upper bounds on the overall score; anything above the last is "high"
RISK_LEVEL_CUTOFFS = (
    (2.0, RiskLevel.MINIMAL),
    (2.8, RiskLevel.LOW),
    (3.8, RiskLevel.MODERATE),
    (4.8, RiskLevel.ELEVATED),
)

MIN_WEEKLY_HOURS = 2
HOURS_PER_FREQUENCY_POINT = 2
TIME_DISTORTION_PIVOT = 3.5
TIME_DISTORTION_FACTOR = 0.2
ESTIMATE_LOW_FACTOR = 0.7
ESTIMATE_HIGH_FACTOR = 1.3


@dataclass(frozen=True)
class Signals:
    """Construct scores the rules read, with unanswered constructs defaulted"""
    frequency: float
    control: float
    emotional: float
    time: float
    compulsive: float
    awareness: float
    interference: float
    coping: float
    overall: float

    @classmethod
    def from_scores(cls, construct_scores: Mapping[str, float], overall_score: float) -> "Signals":
        def read(construct_id: str) -> float:
            # a zero score means the construct was never answered
            return construct_scores.get(construct_id) or DEFAULT_CONSTRUCT_SCORE

        return cls(
            frequency=read("frequency"),
            control=read("control"),
            emotional=read("emotional"),
            time=read("time"),
            compulsive=read("compulsive"),
            awareness=read("awareness"),
            interference=read("interference"),
            coping=read("coping"),
            overall=overall_score,
        )

    @property
    def escalation(self) -> float:
        return (self.control + self.compulsive) / 2

    @property
    def sleep(self) -> float:
        return self.interference * 0.6 + self.time * 0.4

    @property
    def mood(self) -> float:
        return self.emotional * 0.5 + self.coping * 0.5

    @property
    def productivity(self) -> float:
        return self.interference * 0.6 + self.compulsive * 0.4


@dataclass(frozen=True)
class PredictionRule:
    id: str
    category: str
    title: str
    description: str
    icon: str
    recommendation: str
    subscore: Callable[[Signals], float]
    triggers: Callable[[Signals], bool]
    base: float
    pivot: float
    scale: float
    severity: Callable[[float], str]
    risk_factors: Tuple[str, ...] = ()
    protective_factors: Tuple[str, ...] = ()

    def probability(self, subscore: float) -> int:
        raw = round_half_up(self.base + self.scale * (subscore - self.pivot))
        return max(0, min(100, raw))

    def evaluate(self, signals: Signals) -> Optional[PredictiveInsight]:
        if not self.triggers(signals):
            return None

        subscore = self.subscore(signals)
        return PredictiveInsight(
            id=self.id,
            category=self.category,
            title=self.title,
            description=self.description,
            probability=self.probability(subscore),
            severity=self.severity(subscore),
            icon=self.icon,
            recommendation=self.recommendation,
        )


@dataclass(frozen=True)
class FactorRule:
    """A risk or protective factor that stands on its own without an insight"""
    kind: str
    text: str
    applies: Callable[[Signals], bool] = field(repr=False)


def _tiered(cutoff: float, above: str, otherwise: str) -> Callable[[float], str]:
    return lambda s: above if s > cutoff else otherwise


PREDICTION_RULES: Tuple[PredictionRule, ...] = (
    # Behavioral
    PredictionRule(
        id="escalation",
        category="risk",
        title="Escalation Risk",
        description=(
            "Your pattern suggests difficulty regulating usage. Without intervention, "
            "scrolling time may increase over the next 3 months."
        ),
        icon="TrendingUp",
        recommendation="Set daily time limits using built-in phone features and track your progress weekly.",
        subscore=lambda s: s.escalation,
        triggers=lambda s: s.escalation > 4.5,
        base=45, pivot=4.5, scale=20,
        severity=_tiered(5.5, "critical", "high"),
        risk_factors=("Low perceived control over scrolling behavior",),
    ),
    PredictionRule(
        id="sleep",
        category="behavior",
        title="Sleep Pattern Impact",
        description=(
            "Based on your time distortion and life interference scores, you likely experience "
            "delayed sleep onset or reduced sleep quality."
        ),
        icon="Moon",
        recommendation="Establish a phone-free period 1 hour before bed. Keep your phone outside the bedroom.",
        subscore=lambda s: s.sleep,
        triggers=lambda s: s.sleep > 4.0,
        base=40, pivot=4.0, scale=15,
        severity=_tiered(5.0, "high", "moderate"),
        risk_factors=("Evening/nighttime scrolling affecting sleep",),
    ),
    # Emotional wellbeing
    PredictionRule(
        id="mood",
        category="wellbeing",
        title="Mood Vulnerability",
        description=(
            "Your emotional sensitivity to content combined with coping-driven scrolling creates "
            "a cycle that may worsen anxiety or low mood."
        ),
        icon="Cloud",
        recommendation=(
            'Practice the "STOP" technique: Stop, Take a breath, Observe your feelings, Proceed mindfully.'
        ),
        subscore=lambda s: s.mood,
        triggers=lambda s: s.mood > 4.0,
        base=50, pivot=4.0, scale=18,
        severity=_tiered(5.0, "high", "moderate"),
        risk_factors=("Using scrolling to cope with negative emotions",),
    ),
    PredictionRule(
        id="fatigue",
        category="wellbeing",
        title="News Fatigue Syndrome",
        description=(
            "High emotional reactivity plus awareness of harm indicates you may be experiencing "
            "or developing news fatigue and information overload."
        ),
        icon="Battery",
        recommendation=(
            'Schedule specific "news windows" (e.g., 15 min morning, 15 min evening) '
            "instead of constant checking."
        ),
        subscore=lambda s: s.emotional,
        triggers=lambda s: s.emotional > 4.0 and s.awareness > 4.0,
        base=55, pivot=4.0, scale=10,
        severity=_tiered(5.0, "high", "moderate"),
    ),
    # Productivity
    PredictionRule(
        id="productivity",
        category="behavior",
        title="Productivity Impact",
        description=(
            "Your compulsive checking patterns suggest likely work interruptions and reduced "
            "focus during tasks."
        ),
        icon="Clock",
        recommendation=(
            'Use "Do Not Disturb" mode during work blocks. Try the Pomodoro technique: '
            "25 min work, 5 min break."
        ),
        subscore=lambda s: s.productivity,
        triggers=lambda s: s.productivity > 3.5,
        base=35, pivot=3.5, scale=20,
        severity=_tiered(4.5, "high", "moderate"),
        risk_factors=("Compulsive checking interfering with focused work",),
    ),
    # Positive
    PredictionRule(
        id="recovery",
        category="positive",
        title="High Recovery Potential",
        description=(
            "Your strong awareness combined with maintained self-control suggests excellent "
            "potential for positive behavior change."
        ),
        icon="Sunrise",
        recommendation="Channel your awareness into action. Start with one small change this week.",
        subscore=lambda s: s.awareness,
        triggers=lambda s: s.awareness > 4.0 and s.control < 3.5,
        base=60, pivot=4.0, scale=15,
        severity=lambda _: "low",
        protective_factors=(
            "Strong awareness of scrolling's impact",
            "Maintained ability to self-regulate",
        ),
    ),
    PredictionRule(
        id="healthy",
        category="positive",
        title="Healthy Digital Habits",
        description=(
            "Your scores indicate a balanced relationship with social media. "
            "You're at low risk for problematic doomscrolling."
        ),
        icon="Check",
        recommendation="Maintain your current habits. Consider helping friends who struggle with overuse.",
        subscore=lambda s: s.overall,
        triggers=lambda s: s.overall < 2.8,
        base=85, pivot=0, scale=0,
        severity=lambda _: "low",
        protective_factors=(
            "Balanced approach to social media",
            "Low emotional dependence on scrolling",
        ),
    ),
)

FACTOR_RULES: Tuple[FactorRule, ...] = (
    FactorRule("protective", "Strong self-regulation abilities", lambda s: s.escalation < 2.5),
    FactorRule("risk", "Strong reliance on scrolling for emotional regulation", lambda s: s.coping > 4.5),
    FactorRule("protective", "Low emotional reactivity to content", lambda s: s.emotional < 2.5),
    FactorRule("protective", "Good awareness of time spent scrolling", lambda s: s.time < 3.0),
    FactorRule("risk", "Very high frequency of social media checking", lambda s: s.frequency > 4.5),
    FactorRule("protective", "High self-awareness of scrolling's negative effects", lambda s: s.awareness > 4.5),
    FactorRule("risk", "Low awareness of scrolling's impact on wellbeing", lambda s: s.awareness < 2.5),
)


def classify_risk_level(overall_score: float) -> RiskLevel:
    for cutoff, level in RISK_LEVEL_CUTOFFS:
        if overall_score <= cutoff:
            return level
    return RiskLevel.HIGH


def get_risk_level_label(level: RiskLevel) -> RiskLevelLabel:
    return RiskLevelLabel(**RISK_LEVEL_LABELS[RiskLevel(level)])


def estimate_weekly_hours(frequency_score: float, time_score: float) -> WeeklyTimeEstimate:
    """
    Rough weekly scrolling hours from frequency, stretched by time distortion.

    The lower bound is truncated and floored at MIN_WEEKLY_HOURS; the upper
    bound is rounded and never falls below the lower one.
    """
    base_hours = frequency_score * HOURS_PER_FREQUENCY_POINT
    multiplier = 1 + (time_score - TIME_DISTORTION_PIVOT) * TIME_DISTORTION_FACTOR
    estimate = base_hours * multiplier

    low = max(MIN_WEEKLY_HOURS, math.floor(estimate * ESTIMATE_LOW_FACTOR))
    high = max(low, round_half_up(estimate * ESTIMATE_HIGH_FACTOR))
    return WeeklyTimeEstimate(min=low, max=high)


def describe_percentile(percentile: int) -> str:
    if percentile <= 25:
        return (
            "Your scores are lower than most participants in the research study. "
            "This suggests healthier scrolling habits than average."
        )
    elif percentile <= 50:
        return (
            "Your scores are around the average of the research sample. "
            "You show typical patterns of social media use."
        )
    elif percentile <= 75:
        return (
            "Your scores are higher than most study participants. "
            "Consider implementing some protective strategies."
        )
    return (
        "Your scores are significantly higher than most study participants. "
        "We recommend taking proactive steps to manage your scrolling habits."
    )


def _unique(items: List[str]) -> Tuple[str, ...]:
    return tuple(dict.fromkeys(items))


def resolve_percentile(overall_score: float, overall_percentile: Optional[int] = None) -> int:
    """
    Percentile used for the risk score and sample comparison.

    A supplied percentile (the one stored on the assessment result) is
    authoritative. Without one, the same table lookup used by the result
    assembler is applied, so both paths agree for any score.
    """
    computed = percentile_of(overall_score, OVERALL_STATS.mean, OVERALL_STATS.sd)
    if overall_percentile is None:
        return computed

    if overall_percentile != computed:
        logger.warning(
            f"Supplied overall percentile {overall_percentile} differs from table lookup "
            f"{computed} for score {overall_score}; using the supplied value"
        )
    return overall_percentile


def predict(
    construct_scores: Mapping[str, float],
    overall_score: float,
    overall_percentile: Optional[int] = None,
) -> PredictiveProfile:
    """Generate the predictive profile for one set of construct scores"""
    signals = Signals.from_scores(construct_scores, overall_score)

    predictions: List[PredictiveInsight] = []
    risk_factors: List[str] = []
    protective_factors: List[str] = []

    for rule in PREDICTION_RULES:
        insight = rule.evaluate(signals)
        if insight is None:
            continue
        predictions.append(insight)
        risk_factors.extend(rule.risk_factors)
        protective_factors.extend(rule.protective_factors)

    for factor in FACTOR_RULES:
        if not factor.applies(signals):
            continue
        if factor.kind == "risk":
            risk_factors.append(factor.text)
        else:
            protective_factors.append(factor.text)

    percentile = resolve_percentile(overall_score, overall_percentile)

    profile = PredictiveProfile(
        risk_level=classify_risk_level(overall_score),
        risk_score=percentile,
        predictions=tuple(sorted(predictions, key=lambda p: p.probability, reverse=True)),
        protective_factors=_unique(protective_factors),
        risk_factors=_unique(risk_factors),
        weekly_time_estimate=estimate_weekly_hours(signals.frequency, signals.time),
        comparison_to_sample=SampleComparison(
            percentile=percentile,
            description=describe_percentile(percentile),
        ),
    )

    logger.debug(
        f"Predictive profile: level={profile.risk_level.value} score={profile.risk_score} "
        f"insights={[p.id for p in profile.predictions]}"
    )
    return profile


def predict_from_result(result: AssessmentResult) -> PredictiveProfile:
    """Regenerate the profile from a stored result so the two can never drift"""
    return predict(result.construct_score_map, result.overall_score, result.overall_percentile)
