# api/result/utils.py
from typing import Iterable

from models.assessment_models import DimensionScore, WeeklyTimeEstimate


def format_dimension_lines(dimension_scores: Iterable[DimensionScore]) -> str:
    return "\n".join(
        f"- {d.name}: {d.score:.1f}/7 ({d.severity})" for d in dimension_scores
    )


def format_concern_lines(top_concerns: Iterable[DimensionScore]) -> str:
    return "\n".join(f"- {c.name}: {c.score:.1f}/7" for c in top_concerns)


def format_weekly_range(estimate: WeeklyTimeEstimate) -> str:
    return f"{estimate.min}-{estimate.max}"
