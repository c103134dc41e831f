# api/sessions/routes.py
from flask import request, jsonify
import logging

from ..base.base_schemas import BaseResponse
from .schemas import LogEventRequest, ManualLogRequest
from .usecases import (
    create_manual_log,
    get_session_detail,
    get_user_session_list,
    list_manual_logs,
    log_scroll_event,
)
from services.activity_store import activity_store
from . import sessions_bp

logger = logging.getLogger("debug_logger")


def _query_param(*names):
    for name in names:
        value = request.args.get(name)
        if value:
            return value
    return None


@sessions_bp.route('/log', methods=['POST'])
def log_event():
    """Log a scroll-session event"""
    try:
        if not request.is_json:
            return jsonify(BaseResponse.error(message="Request must be JSON").model_dump()), 400

        body = LogEventRequest.model_validate(request.get_json())
        data = log_scroll_event(body)

        return jsonify(BaseResponse.success(data=data, message="Event logged").model_dump()), 200

    except Exception as e:
        logger.warning(f"Session logging error: {e}")
        response, status = BaseResponse.from_exception(e, "Failed to log session event")
        return jsonify(response.model_dump()), status


@sessions_bp.route('/log', methods=['GET'])
def get_event_log():
    """Get one session with its summary, a user's sessions, or aggregate totals"""
    try:
        session_id = _query_param('session_id', 'sessionId')
        user_id = _query_param('user_id', 'userId')

        if session_id:
            data = get_session_detail(session_id)
            if data is None:
                return jsonify(BaseResponse.error(message="Session not found").model_dump()), 404
            return jsonify(BaseResponse.success(data=data).model_dump()), 200

        if user_id:
            return jsonify(BaseResponse.success(data=get_user_session_list(user_id)).model_dump()), 200

        return jsonify(BaseResponse.success(data=activity_store.aggregate()).model_dump()), 200

    except Exception as e:
        logger.error(f"Error reading session log: {e}", exc_info=True)
        response, status = BaseResponse.from_exception(e, "Failed to read session log")
        return jsonify(response.model_dump()), status


@sessions_bp.route('', methods=['POST'])
def create_session_log():
    """Record a manually reported scrolling session"""
    try:
        if not request.is_json:
            return jsonify(BaseResponse.error(message="Request must be JSON").model_dump()), 400

        body = ManualLogRequest.model_validate(request.get_json())
        log = create_manual_log(body)

        return jsonify(
            BaseResponse.success(data=log.model_dump(mode="json"), message="Session logged").model_dump()
        ), 201

    except Exception as e:
        logger.warning(f"Error creating session log: {e}")
        response, status = BaseResponse.from_exception(e, "Failed to create session")
        return jsonify(response.model_dump()), status


@sessions_bp.route('', methods=['GET'])
def get_session_logs():
    """List a user's manually reported sessions"""
    user_id = _query_param('user_id', 'userId')
    if not user_id:
        return jsonify(BaseResponse.error(message="User ID is required").model_dump()), 400

    return jsonify(BaseResponse.success(data=list_manual_logs(user_id)).model_dump()), 200
