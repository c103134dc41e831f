# api/dashboard/usecases.py
"""
Researcher dashboard statistics.

Everything here is read from the frozen reference sample; nothing is
simulated and nothing depends on live traffic.
"""
from utils.helpers import utc_now_iso
from lib.constructs import USER_DIMENSIONS
from lib.reference_stats import (
    CONSTRUCT_STATS,
    DATA_SOURCE,
    OVERALL_STATS,
    SAMPLE_SIZE,
    SCORE_DISTRIBUTION,
    SEVERITY_COUNTS,
    get_dimension_stats,
    severity_breakdown_percentages,
)

PERIOD_DAYS = {"7d": 7, "30d": 30, "90d": 90}
DEFAULT_PERIOD = "30d"
FALLBACK_PERIOD_DAYS = 365


def period_days(period: str) -> int:
    return PERIOD_DAYS.get(period, FALLBACK_PERIOD_DAYS)


def get_dashboard_stats(period: str = DEFAULT_PERIOD) -> dict:
    return {
        "summary": {
            "total_assessments": SAMPLE_SIZE,
            "unique_users": SAMPLE_SIZE,
            "average_score": OVERALL_STATS.mean,
            "completion_rate": 1.0,
            "period": period,
            "period_days": period_days(period),
        },
        "score_distribution": [dict(bin_) for bin_ in SCORE_DISTRIBUTION],
        "severity_breakdown": severity_breakdown_percentages(),
        "dimension_averages": [
            {
                "dimension_id": d.id.value,
                "name": d.name,
                "average_score": get_dimension_stats(d.id).mean,
                "standard_deviation": get_dimension_stats(d.id).sd,
                "assessment_count": SAMPLE_SIZE,
            }
            for d in USER_DIMENSIONS
        ],
        "generated_at": utc_now_iso(),
        "data_source": DATA_SOURCE,
    }


def get_admin_stats() -> dict:
    return {
        "overview": {
            "total_assessments": OVERALL_STATS.n,
            "total_users": OVERALL_STATS.n,
            "average_score": OVERALL_STATS.mean,
        },
        "averages": {construct_id.value: stat.mean for construct_id, stat in CONSTRUCT_STATS.items()},
        "distribution": dict(SEVERITY_COUNTS),
        "data_source": DATA_SOURCE,
    }
