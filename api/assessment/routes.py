# api/assessment/routes.py
from flask import request, jsonify
import logging

from ..base.base_schemas import BaseResponse
from shared.session_manager import get_or_create_session
from .usecases import get_question_catalog, record_answer, submit_assessment
from .schemas import AnswerRequest, ProgressResponse, SubmitAssessmentRequest
from . import assessment_bp

logger = logging.getLogger("debug_logger")


@assessment_bp.route('/questions', methods=['GET'])
def get_questions():
    """Get the question catalog, dimensions, constructs and scale labels"""
    try:
        response = BaseResponse.success(
            data=get_question_catalog(),
            message="Questions retrieved successfully"
        )
        return jsonify(response.model_dump(by_alias=True)), 200

    except Exception as e:
        logger.error(f"Error in get_questions: {e}", exc_info=True)
        response, status = BaseResponse.from_exception(e, "Failed to get questions")
        return jsonify(response.model_dump()), status


@assessment_bp.route('/answer', methods=['POST'])
def submit_answer():
    """Store a single answer on the session"""
    try:
        manager = get_or_create_session()

        if not request.is_json:
            return jsonify(BaseResponse.error(message="Request must be JSON").model_dump()), 400

        answer = AnswerRequest.model_validate(request.get_json())
        progress = record_answer(manager, answer)

        data = ProgressResponse(
            session_id=manager.session_id,
            current_phase=manager.context["current_phase"],
            **progress
        )
        response = BaseResponse.success(data=data, message="Answer recorded")
        return jsonify(response.model_dump()), 200

    except Exception as e:
        logger.warning(f"Rejected answer: {e}")
        response, status = BaseResponse.from_exception(e, "Failed to record answer")
        return jsonify(response.model_dump()), status


@assessment_bp.route('/progress', methods=['GET'])
def get_progress():
    """Get answered / total for the current session"""
    try:
        manager = get_or_create_session()
        data = ProgressResponse(
            session_id=manager.session_id,
            current_phase=manager.context["current_phase"],
            **manager.get_progress()
        )
        return jsonify(BaseResponse.success(data=data).model_dump()), 200

    except Exception as e:
        logger.error(f"Error in get_progress: {e}", exc_info=True)
        response, status = BaseResponse.from_exception(e, "Failed to get progress")
        return jsonify(response.model_dump()), status


@assessment_bp.route('/submit', methods=['POST'])
def submit():
    """Score the assessment and generate the predictive profile"""
    logger.debug("=== submit called ===")
    try:
        manager = get_or_create_session()
        logger.debug(f"Session ID: {manager.session_id}")

        data = request.get_json(silent=True) or {}
        submission = SubmitAssessmentRequest.model_validate(data)

        result = submit_assessment(manager, submission)

        response = BaseResponse.success(
            data=result,
            message="Assessment scored successfully"
        )
        return jsonify(response.model_dump()), 200

    except Exception as e:
        logger.warning(f"Assessment submission failed: {e}", exc_info=True)
        response, status = BaseResponse.from_exception(e, "Failed to score assessment")
        return jsonify(response.model_dump()), status
