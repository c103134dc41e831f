import pytest
from pydantic import BaseModel

from api.assessment.schemas import QuestionItem
from lib.constructs import CONSTRUCTS, USER_DIMENSIONS, get_construct, get_dimension
from lib.questions import (
    ASSESSMENT_QUESTIONS,
    QUESTION_TO_DATASET_MAP,
    get_question,
    get_questions_by_construct,
    get_questions_by_dimension,
    get_total_question_count,
    validate_catalog,
)
from lib.reference_stats import (
    SAMPLE_SIZE,
    SCORE_DISTRIBUTION,
    get_construct_stats,
    severity_breakdown_percentages,
)
from models.assessment_models import ConstructId, DimensionId, Question
from shared.exceptions import ConfigurationError


def test_catalog_shape():
    assert get_total_question_count() == 24
    assert len(CONSTRUCTS) == 8
    assert len(USER_DIMENSIONS) == 5
    for construct in CONSTRUCTS:
        assert len(get_questions_by_construct(construct.id)) == 3


def test_question_lookups():
    assert get_question("q4").construct_id == ConstructId.CONTROL
    assert get_question("q99") is None
    assert QUESTION_TO_DATASET_MAP["q16"] == "DS6_2"
    assert {q.id for q in get_questions_by_dimension(DimensionId.SELF_AWARENESS)} == {"q16", "q17", "q18"}


def test_only_self_awareness_is_protective():
    protective = [d.id for d in USER_DIMENSIONS if d.is_protective]
    assert protective == [DimensionId.SELF_AWARENESS]


def test_unknown_ids_fail_fast():
    with pytest.raises(ConfigurationError):
        get_construct("sleep")
    with pytest.raises(ConfigurationError):
        get_dimension("sleep")
    with pytest.raises(ConfigurationError):
        get_construct_stats("sleep")


def test_duplicate_question_id_rejected():
    questions = list(ASSESSMENT_QUESTIONS) + [ASSESSMENT_QUESTIONS[0]]
    with pytest.raises(ConfigurationError, match="Duplicate"):
        validate_catalog(questions)


def test_question_with_unconfigured_construct_rejected():
    with pytest.raises(ConfigurationError, match="unknown construct"):
        validate_catalog(ASSESSMENT_QUESTIONS, constructs=CONSTRUCTS[:-1])


def test_construct_feeding_two_dimensions_rejected():
    moved = Question(
        id="q1",
        original_item="DS1_1",
        construct=ConstructId.FREQUENCY,
        dimension=DimensionId.DAILY_FUNCTIONING,
        text="moved",
    )
    questions = [moved] + list(ASSESSMENT_QUESTIONS[1:])
    with pytest.raises(ConfigurationError, match="feeds both"):
        validate_catalog(questions)


def test_missing_question_rejected():
    with pytest.raises(ConfigurationError, match="expected 3"):
        validate_catalog(ASSESSMENT_QUESTIONS[:-1])


def test_exactly_one_protective_dimension_required():
    dimensions = [d.model_copy(update={"is_protective": False}) for d in USER_DIMENSIONS]
    with pytest.raises(ConfigurationError, match="protective"):
        validate_catalog(ASSESSMENT_QUESTIONS, dimensions=dimensions)


def test_reference_distribution_counts_match_sample():
    assert sum(b["count"] for b in SCORE_DISTRIBUTION) == SAMPLE_SIZE


def test_severity_breakdown_percentages():
    assert severity_breakdown_percentages() == {"low": 5, "moderate": 70, "high": 23, "severe": 1}


@pytest.mark.parametrize("model", [Question, QuestionItem])
def test_catalog_fields_do_not_shadow_base_model(model):
    assert [name for name in model.model_fields if hasattr(BaseModel, name)] == []


def test_question_accepts_construct_key():
    question = Question.model_validate(
        {"id": "qx", "original_item": "DS1_1", "construct": "frequency", "dimension": "time_management", "text": "x"}
    )
    assert question.construct_id == ConstructId.FREQUENCY
