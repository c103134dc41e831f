# models/__init__.py
from .assessment_models import (
    ConstructId,
    DimensionId,
    SeverityTier,
    RiskLevel,
    Construct,
    Dimension,
    Question,
    ReferenceStat,
    AssessmentResponse,
    SeverityLevel,
    ConstructScore,
    DimensionScore,
    AssessmentResult,
    PredictiveInsight,
    WeeklyTimeEstimate,
    SampleComparison,
    PredictiveProfile,
    ResearchComparison,
    RiskLevelLabel,
)
from .journal_models import JournalAnalysisResult, TrendAnalysisResult, AISuggestionsResult

__all__ = [
    "ConstructId",
    "DimensionId",
    "SeverityTier",
    "RiskLevel",
    "Construct",
    "Dimension",
    "Question",
    "ReferenceStat",
    "AssessmentResponse",
    "SeverityLevel",
    "ConstructScore",
    "DimensionScore",
    "AssessmentResult",
    "PredictiveInsight",
    "WeeklyTimeEstimate",
    "SampleComparison",
    "PredictiveProfile",
    "ResearchComparison",
    "RiskLevelLabel",
    "JournalAnalysisResult",
    "TrendAnalysisResult",
    "AISuggestionsResult",
]
