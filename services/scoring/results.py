# services/scoring/results.py
import logging
from datetime import datetime, timezone
from typing import Iterable, List, Optional

from lib.constructs import CONSTRUCTS, USER_DIMENSIONS
from lib.reference_stats import OVERALL_STATS
from models.assessment_models import (
    AssessmentResponse,
    AssessmentResult,
    DimensionScore,
    ResearchComparison,
)
from shared.exceptions import NoResponsesError
from utils.helpers import round_half_up
from .aggregation import (
    latest_responses,
    overall_score,
    require_question,
    score_construct,
    score_dimension,
)
from .percentile import percentile_of
from .severity import classify

logger = logging.getLogger(__name__)

TOP_CONCERN_LIMIT = 3
TOP_CONCERN_MIN_SCORE = 3.5
COMPARISON_BAND = 0.5


def find_top_concerns(dimension_scores: Iterable[DimensionScore]) -> List[DimensionScore]:
    """Highest-scoring non-protective dimensions at or above the moderate threshold"""
    candidates = sorted(
        (d for d in dimension_scores if not d.is_protective),
        key=lambda d: d.score,
        reverse=True,
    )
    return [d for d in candidates[:TOP_CONCERN_LIMIT] if d.score >= TOP_CONCERN_MIN_SCORE]


def assemble(
    responses: Iterable[AssessmentResponse],
    session_id: str,
    completed_at: Optional[datetime] = None,
) -> AssessmentResult:
    """
    Score a completed submission into a single immutable result.

    Duplicate answers collapse to the latest one per question. Constructs and
    dimensions with no answered items are dropped from the result.

    Raises:
        NoResponsesError: if responses is empty
        InvalidResponseError: if any response names an unknown question
    """
    responses = latest_responses(responses)
    if not responses:
        raise NoResponsesError()

    for response in responses:
        require_question(response)

    construct_scores = tuple(
        cs for cs in (score_construct(responses, c.id) for c in CONSTRUCTS)
        if cs.item_count > 0
    )
    dimension_scores = tuple(
        ds for ds in (score_dimension(responses, d.id) for d in USER_DIMENSIONS)
        if ds.score > 0
    )

    score = overall_score(responses)
    percentile = percentile_of(score, OVERALL_STATS.mean, OVERALL_STATS.sd)

    result = AssessmentResult(
        session_id=session_id,
        overall_score=score,
        overall_percentile=percentile,
        overall_severity=classify(score),
        construct_scores=construct_scores,
        dimension_scores=dimension_scores,
        top_concerns=tuple(find_top_concerns(dimension_scores)),
        completed_at=completed_at or datetime.now(timezone.utc),
    )

    logger.info(
        f"Assessment {session_id} scored: overall={score} percentile={percentile} "
        f"severity={result.overall_severity.label} responses={len(responses)}"
    )
    return result


def get_score_interpretation(score: float, percentile: int) -> str:
    """Generate interpretation text based on score"""
    if score <= 2.5:
        return (
            f"Your score is in the {percentile}th percentile, which is below average. "
            "Your scrolling habits appear to be generally healthy compared to the research sample."
        )
    elif score <= 4.0:
        return (
            f"Your score is in the {percentile}th percentile, which is around average. "
            "You show some patterns that could benefit from mindful attention."
        )
    elif score <= 5.5:
        return (
            f"Your score is in the {percentile}th percentile, which is above average. "
            "Your scrolling habits may be having a noticeable impact on your wellbeing."
        )
    return (
        f"Your score is in the {percentile}th percentile, indicating significant concerns. "
        "We strongly recommend implementing some changes to your scrolling habits."
    )


def compare_to_research_sample(score: float) -> ResearchComparison:
    """Place an overall score below, around or above the study mean"""
    mean = OVERALL_STATS.mean
    difference = abs(score - mean)
    rounded = round_half_up(difference, 2)

    if score < mean - COMPARISON_BAND:
        return ResearchComparison(
            comparison="below",
            difference=rounded,
            description=f"Your score is {difference:.1f} points below the study average of {mean:.1f}",
        )
    if score > mean + COMPARISON_BAND:
        return ResearchComparison(
            comparison="above",
            difference=rounded,
            description=f"Your score is {difference:.1f} points above the study average of {mean:.1f}",
        )
    return ResearchComparison(
        comparison="around",
        difference=rounded,
        description=f"Your score is very close to the study average of {mean:.1f}",
    )
