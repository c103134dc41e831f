from datetime import timedelta

import pytest

from models.assessment_models import AssessmentResponse, ConstructId, DimensionId
from services.scoring.aggregation import (
    latest_responses,
    overall_score,
    score_construct,
    score_dimension,
)
from shared.exceptions import InvalidResponseError, NoResponsesError
from conftest import BASE_TIME, build_responses


def test_latest_timestamp_wins():
    earlier = AssessmentResponse(question_id="q1", score=2, timestamp=BASE_TIME)
    later = AssessmentResponse(question_id="q1", score=6, timestamp=BASE_TIME + timedelta(minutes=1))

    assert [r.score for r in latest_responses([later, earlier])] == [6]


def test_equal_timestamps_keep_the_later_entry():
    first = AssessmentResponse(question_id="q1", score=2, timestamp=BASE_TIME)
    second = AssessmentResponse(question_id="q1", score=5, timestamp=BASE_TIME)

    assert [r.score for r in latest_responses([first, second])] == [5]


def test_construct_average_and_percentile():
    responses = [
        AssessmentResponse(question_id="q4", score=5),
        AssessmentResponse(question_id="q5", score=6),
        AssessmentResponse(question_id="q6", score=4),
    ]
    score = score_construct(responses, ConstructId.CONTROL)

    assert score.score == 5.0
    assert score.item_count == 3
    # z = (5 - 2.73) / 1.19 = 1.91
    assert score.percentile == 95


def test_construct_without_answers_is_degenerate():
    score = score_construct([AssessmentResponse(question_id="q1", score=4)], ConstructId.COPING)
    assert (score.score, score.percentile, score.item_count) == (0, 0, 0)


def test_construct_score_rounds_half_up():
    responses = [
        AssessmentResponse(question_id="q1", score=1),
        AssessmentResponse(question_id="q2", score=1),
        AssessmentResponse(question_id="q3", score=2),
    ]
    assert score_construct(responses, "frequency").score == 1.33


def test_protective_dimension_reads_inverted():
    responses = build_responses(default=4, awareness=7)
    dimension = score_dimension(responses, DimensionId.SELF_AWARENESS)

    assert dimension.is_protective
    assert dimension.score == 7.0
    assert dimension.severity == "Low"
    assert len(dimension.recommendations) == 2
    assert dimension.percentile == 99


def test_low_awareness_gets_most_recommendations():
    responses = build_responses(default=4, awareness=1)
    dimension = score_dimension(responses, DimensionId.SELF_AWARENESS)

    assert dimension.severity == "Severe"
    assert len(dimension.recommendations) == 4


@pytest.mark.parametrize("score, count", [(5, 4), (4, 3), (3, 2)])
def test_recommendation_count_follows_score(score, count):
    dimension = score_dimension(build_responses(default=score), DimensionId.BEHAVIORAL_CONTROL)
    assert len(dimension.recommendations) == count


def test_dimension_without_answers_is_unknown():
    dimension = score_dimension([AssessmentResponse(question_id="q1", score=4)], DimensionId.DAILY_FUNCTIONING)
    assert dimension.score == 0
    assert dimension.severity == "unknown"
    assert dimension.recommendations == ()


def test_overall_score_reflects_awareness_items():
    # 21 items at 2, 3 awareness items at 6 -> (42 + 3 * 2) / 24
    assert overall_score(build_responses(default=2, awareness=6)) == 2.0


def test_more_awareness_never_raises_overall():
    base = build_responses(default=4, awareness=3)
    more_aware = build_responses(default=4, awareness=6)
    assert overall_score(more_aware) < overall_score(base)


def test_overall_requires_responses():
    with pytest.raises(NoResponsesError):
        overall_score([])


def test_overall_rejects_unknown_question():
    with pytest.raises(InvalidResponseError):
        overall_score([AssessmentResponse(question_id="q42", score=3)])


def test_response_score_is_validated():
    with pytest.raises(ValueError):
        AssessmentResponse(question_id="q1", score=8)
