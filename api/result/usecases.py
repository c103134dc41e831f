# api/result/usecases.py
import logging
from typing import Any, Dict, Optional

from models.journal_models import AISuggestionsResult
from services.llm_service import llm_service
from shared.session_manager import SessionManager
from api.assessment.utils import build_result_payload
from .prompts import build_suggestions_messages
from .utils import format_concern_lines, format_dimension_lines, format_weekly_range

logger = logging.getLogger(__name__)


def get_stored_results(manager: SessionManager) -> Optional[Dict[str, Any]]:
    result = manager.get_result()
    profile = manager.get_profile()
    if result is None or profile is None:
        return None
    return build_result_payload(result, profile)


async def generate_suggestions(manager: SessionManager) -> AISuggestionsResult:
    """
    Ask the LLM for coaching suggestions grounded in the stored result.

    The stored result and profile are read, never modified; an LLM failure
    leaves them exactly as they were.
    """
    result = manager.get_result()
    profile = manager.get_profile()

    messages = build_suggestions_messages(
        overall_score=result.overall_score,
        severity=result.overall_severity.label,
        percentile=result.overall_percentile,
        risk_level=profile.risk_level.value,
        dimensions=format_dimension_lines(result.dimension_scores),
        concerns=format_concern_lines(result.top_concerns),
        weekly_time=format_weekly_range(profile.weekly_time_estimate),
        risk_factors=list(profile.risk_factors),
        protective_factors=list(profile.protective_factors),
    )

    logger.info(f"Generating suggestions for session {manager.session_id}")
    suggestions = await llm_service.generate_json(messages, AISuggestionsResult)
    manager.context["suggestions"] = suggestions
    return suggestions
