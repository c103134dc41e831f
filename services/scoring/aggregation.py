# services/scoring/aggregation.py
import logging
from datetime import datetime, timezone
from typing import Iterable, List

from lib.constructs import get_construct, get_dimension
from lib.questions import get_question
from lib.reference_stats import get_construct_stats, get_dimension_stats
from models.assessment_models import (
    AssessmentResponse,
    ConstructScore,
    DimensionScore,
    Question,
)
from shared.exceptions import InvalidResponseError, NoResponsesError
from utils.helpers import round_half_up
from .percentile import percentile_of
from .severity import classify, invert_score

logger = logging.getLogger(__name__)

UNKNOWN_SEVERITY = "unknown"


def _as_aware(timestamp: datetime) -> datetime:
    if timestamp.tzinfo is None:
        return timestamp.replace(tzinfo=timezone.utc)
    return timestamp


def latest_responses(responses: Iterable[AssessmentResponse]) -> List[AssessmentResponse]:
    """
    Collapse duplicate answers to one per question.

    The most recent timestamp wins; on equal timestamps the later entry wins.
    First-seen question order is preserved.
    """
    latest = {}
    for response in responses:
        current = latest.get(response.question_id)
        if current is None or _as_aware(response.timestamp) >= _as_aware(current.timestamp):
            latest[response.question_id] = response

    return list(latest.values())


def require_question(response: AssessmentResponse) -> Question:
    question = get_question(response.question_id)
    if question is None:
        raise InvalidResponseError(f"Unknown question id: {response.question_id}")
    return question


def _mean(scores: List[int]) -> float:
    return sum(scores) / len(scores)


def score_construct(responses: Iterable[AssessmentResponse], construct_id) -> ConstructScore:
    """Average the responses belonging to one construct and rank them against the sample"""
    construct = get_construct(construct_id)
    stats = get_construct_stats(construct.id)

    scores = [
        r.score for r in responses
        if (q := get_question(r.question_id)) is not None and q.construct_id == construct.id
    ]

    if not scores:
        return ConstructScore(
            construct_id=construct.id,
            name=construct.name,
            score=0,
            percentile=0,
            item_count=0,
        )

    average = _mean(scores)

    return ConstructScore(
        construct_id=construct.id,
        name=construct.name,
        score=round_half_up(average, 2),
        percentile=percentile_of(average, stats.mean, stats.sd),
        item_count=len(scores),
    )


def recommendation_count(effective_score: float) -> int:
    if effective_score > 4:
        return 4
    if effective_score > 3:
        return 3
    return 2


def score_dimension(responses: Iterable[AssessmentResponse], dimension_id) -> DimensionScore:
    """
    Average the responses reported under one user-facing dimension.

    Severity and the number of recommendations follow the effective score,
    which is reflected (8 - mean) for the protective dimension. The percentile
    always compares the raw mean against the dimension's own reference stats.
    """
    dimension = get_dimension(dimension_id)
    stats = get_dimension_stats(dimension.id)

    scores = [
        r.score for r in responses
        if (q := get_question(r.question_id)) is not None and q.dimension == dimension.id
    ]

    if not scores:
        return DimensionScore(
            dimension_id=dimension.id,
            name=dimension.name,
            score=0,
            percentile=0,
            severity=UNKNOWN_SEVERITY,
            is_protective=dimension.is_protective,
            recommendations=(),
        )

    average = _mean(scores)
    effective = invert_score(average) if dimension.is_protective else average
    severity = classify(average, invert=dimension.is_protective)

    return DimensionScore(
        dimension_id=dimension.id,
        name=dimension.name,
        score=round_half_up(average, 2),
        percentile=percentile_of(average, stats.mean, stats.sd),
        severity=severity.label,
        is_protective=dimension.is_protective,
        recommendations=dimension.recommendations[:recommendation_count(effective)],
    )


def effective_item_score(response: AssessmentResponse) -> int:
    """A response's contribution to the overall score; protective items are reflected"""
    question = require_question(response)
    if get_dimension(question.dimension).is_protective:
        return invert_score(response.score)
    return response.score


def overall_score(responses: Iterable[AssessmentResponse]) -> float:
    """
    Mean of every response, with each protective-dimension item replaced by
    8 - score before summing so that more awareness lowers the risk number.

    Raises:
        NoResponsesError: if there is nothing to average
        InvalidResponseError: if a response names an unknown question
    """
    responses = list(responses)
    if not responses:
        raise NoResponsesError()

    total = sum(effective_item_score(r) for r in responses)
    return round_half_up(total / len(responses), 2)
