# api/journal/routes.py
from flask import request, jsonify
import logging

from config.settings import settings
from shared.session_manager import get_or_create_session
from shared.async_utils import run_async
from ..base.base_schemas import BaseResponse
from .schemas import JournalAnalyzeRequest, JournalAnalyzeResponse, TrendsRequest, TrendsResponse
from .usecases import analyze_journal_entry, analyze_trends, resolve_trend_entries
from . import journal_bp

logger = logging.getLogger("debug_logger")


@journal_bp.route('/analyze', methods=['POST'])
def analyze():
    """Analyze a journal entry about a scrolling episode"""
    try:
        manager = get_or_create_session()

        if not request.is_json:
            return jsonify(BaseResponse.error(message="Request must be JSON").model_dump()), 400

        body = JournalAnalyzeRequest.model_validate(request.get_json())
        entry = run_async(
            analyze_journal_entry(manager, body.content, body.date),
            timeout=settings.LLM_TIMEOUT
        )

        data = JournalAnalyzeResponse(
            session_id=manager.session_id,
            entry=entry,
            entries_count=len(manager.get_journal_entries()),
        )
        return jsonify(
            BaseResponse.success(data=data, message="Journal entry analyzed").model_dump()
        ), 200

    except Exception as e:
        logger.error(f"Error in journal analyze: {e}", exc_info=True)
        response, status = BaseResponse.from_exception(e, "Failed to analyze journal entry. Please try again.")
        return jsonify(response.model_dump()), status


@journal_bp.route('/trends', methods=['POST'])
def trends():
    """Analyze trends across analyzed journal entries"""
    try:
        manager = get_or_create_session()

        body = TrendsRequest.model_validate(request.get_json(silent=True) or {})
        entries = resolve_trend_entries(manager, body.entries)

        trend_analysis = run_async(analyze_trends(entries), timeout=settings.LLM_TIMEOUT)

        data = TrendsResponse(
            session_id=manager.session_id,
            entries_analyzed=len(entries),
            trend_analysis=trend_analysis,
        )
        return jsonify(
            BaseResponse.success(data=data, message="Trend analysis complete").model_dump()
        ), 200

    except Exception as e:
        logger.error(f"Error in journal trends: {e}", exc_info=True)
        response, status = BaseResponse.from_exception(e, "Failed to analyze trends. Please try again.")
        return jsonify(response.model_dump()), status
