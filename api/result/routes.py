# api/result/routes.py
from flask import jsonify
import logging

from config.settings import settings
from shared.session_manager import get_or_create_session
from shared.async_utils import run_async
from ..base.base_schemas import BaseResponse
from .schemas import SuggestionsResponse
from .usecases import generate_suggestions, get_stored_results
from . import result_bp

logger = logging.getLogger("debug_logger")

NO_RESULT_MESSAGE = "No assessment result for this session. Submit the assessment first."


@result_bp.route('/get_results', methods=['GET'])
def get_results():
    """Get the stored assessment result and predictive profile"""
    try:
        manager = get_or_create_session()

        data = get_stored_results(manager)
        if data is None:
            return jsonify(BaseResponse.error(message=NO_RESULT_MESSAGE).model_dump()), 404

        return jsonify(
            BaseResponse.success(
                data=data,
                message="Results retrieved successfully"
            ).model_dump()
        ), 200

    except Exception as e:
        logger.error(f"Error in get_results: {e}", exc_info=True)
        response, status = BaseResponse.from_exception(e, "Failed to get results")
        return jsonify(response.model_dump()), status


@result_bp.route('/suggestions', methods=['POST'])
def get_suggestions():
    """Generate AI coaching suggestions for the stored result"""
    try:
        manager = get_or_create_session()

        if manager.get_result() is None:
            return jsonify(BaseResponse.error(message=NO_RESULT_MESSAGE).model_dump()), 404

        suggestions = run_async(generate_suggestions(manager), timeout=settings.LLM_TIMEOUT)

        data = SuggestionsResponse(
            session_id=manager.session_id,
            suggestions=suggestions.model_dump(by_alias=True),
        )
        return jsonify(
            BaseResponse.success(
                data=data,
                message="Suggestions generated successfully"
            ).model_dump()
        ), 200

    except Exception as e:
        logger.error(f"Error in get_suggestions: {e}", exc_info=True)
        response, status = BaseResponse.from_exception(e, "Failed to generate suggestions")
        return jsonify(response.model_dump()), status
