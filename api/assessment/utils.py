# api/assessment/utils.py
from typing import Any, Dict

from models.assessment_models import AssessmentResult, PredictiveProfile
from services.scoring import (
    compare_to_research_sample,
    get_risk_level_label,
    get_score_interpretation,
)


def build_result_payload(result: AssessmentResult, profile: PredictiveProfile) -> Dict[str, Any]:
    """Result, profile and the derived texts shown alongside them, as JSON-ready dicts"""
    return {
        "session_id": result.session_id,
        "result": result.model_dump(mode="json"),
        "profile": profile.model_dump(mode="json"),
        "interpretation": get_score_interpretation(result.overall_score, result.overall_percentile),
        "research_comparison": compare_to_research_sample(result.overall_score).model_dump(),
        "risk_level_label": get_risk_level_label(profile.risk_level).model_dump(),
    }
