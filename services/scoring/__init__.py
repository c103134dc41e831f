from .percentile import percentile_of, z_score
from .severity import classify, invert_score
from .aggregation import (
    latest_responses,
    overall_score,
    score_construct,
    score_dimension,
)
from .results import (
    assemble,
    compare_to_research_sample,
    find_top_concerns,
    get_score_interpretation,
)
from .predictions import (
    classify_risk_level,
    describe_percentile,
    estimate_weekly_hours,
    get_risk_level_label,
    predict,
    predict_from_result,
)

__all__ = [
    "percentile_of",
    "z_score",
    "classify",
    "invert_score",
    "latest_responses",
    "overall_score",
    "score_construct",
    "score_dimension",
    "assemble",
    "compare_to_research_sample",
    "find_top_concerns",
    "get_score_interpretation",
    "classify_risk_level",
    "describe_percentile",
    "estimate_weekly_hours",
    "get_risk_level_label",
    "predict",
    "predict_from_result",
]
