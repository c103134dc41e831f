# api/assessment/usecases.py
import logging
from typing import Any, Dict

from lib.constructs import CONSTRUCTS, SCALE_INFO, USER_DIMENSIONS
from lib.questions import ASSESSMENT_QUESTIONS
from services.scoring import assemble, predict_from_result
from shared.exceptions import NoResponsesError
from shared.session_manager import SessionManager
from utils.helpers import log_assessment_event
from .schemas import (
    AnswerRequest,
    ConstructItem,
    DimensionItem,
    QuestionCatalogResponse,
    QuestionItem,
    SubmitAssessmentRequest,
)
from .utils import build_result_payload

logger = logging.getLogger(__name__)


def get_question_catalog() -> QuestionCatalogResponse:
    return QuestionCatalogResponse(
        questions=[
            QuestionItem(id=q.id, text=q.text, construct_id=q.construct_id.value, dimension=q.dimension.value)
            for q in ASSESSMENT_QUESTIONS
        ],
        dimensions=[
            DimensionItem(id=d.id.value, name=d.name, description=d.description, is_protective=d.is_protective)
            for d in USER_DIMENSIONS
        ],
        constructs=[
            ConstructItem(id=c.id.value, name=c.name, short_name=c.short_name, description=c.description)
            for c in CONSTRUCTS
        ],
        scale=SCALE_INFO,
        total_questions=len(ASSESSMENT_QUESTIONS),
    )


def record_answer(manager: SessionManager, answer: AnswerRequest) -> dict:
    manager.record_response(answer.to_response())
    log_assessment_event("answer_recorded", manager.session_id, {"question_id": answer.question_id})
    return manager.get_progress()


def submit_assessment(manager: SessionManager, submission: SubmitAssessmentRequest) -> Dict[str, Any]:
    """
    Score the submitted responses (or the session's stored answers) and
    attach the result and its predictive profile to the session.
    """
    responses = submission.responses
    if responses is None:
        responses = manager.get_responses()

    if not responses:
        raise NoResponsesError()

    result = assemble(responses, session_id=manager.session_id)
    profile = predict_from_result(result)
    manager.store_result(result, profile)

    log_assessment_event("assessment_submitted", manager.session_id, {
        "responses": len(responses),
        "overall_score": result.overall_score,
        "risk_level": profile.risk_level.value,
    })
    return build_result_payload(result, profile)
