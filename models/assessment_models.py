# models/assessment_models.py
from enum import Enum
from datetime import datetime, timezone
from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, computed_field


class ConstructId(str, Enum):
    """The 8 research sub-scales (DS1-DS8)"""
    FREQUENCY = "frequency"
    CONTROL = "control"
    EMOTIONAL = "emotional"
    TIME = "time"
    COMPULSIVE = "compulsive"
    AWARENESS = "awareness"
    INTERFERENCE = "interference"
    COPING = "coping"


class DimensionId(str, Enum):
    """The 5 user-facing groupings"""
    BEHAVIORAL_CONTROL = "behavioral_control"
    EMOTIONAL_WELLBEING = "emotional_wellbeing"
    TIME_MANAGEMENT = "time_management"
    DAILY_FUNCTIONING = "daily_functioning"
    SELF_AWARENESS = "self_awareness"


class SeverityTier(str, Enum):
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"
    SEVERE = "severe"

    @property
    def rank(self) -> int:
        return list(SeverityTier).index(self)


class RiskLevel(str, Enum):
    MINIMAL = "minimal"
    LOW = "low"
    MODERATE = "moderate"
    ELEVATED = "elevated"
    HIGH = "high"


# ============== CATALOG ==============

class Construct(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: ConstructId
    name: str
    short_name: str
    description: str
    color: str
    icon: str


class Dimension(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: DimensionId
    name: str
    description: str
    constructs: Tuple[ConstructId, ...]
    weight: float
    is_protective: bool = False
    recommendations: Tuple[str, ...]


class Question(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    original_item: str = Field(..., description="Research dataset column, e.g. DS2_5")
    construct_id: ConstructId = Field(..., alias="construct")
    dimension: DimensionId
    text: str


class ReferenceStat(BaseModel):
    model_config = ConfigDict(frozen=True)

    mean: float
    sd: float
    n: Optional[int] = None


# ============== INPUT ==============

class AssessmentResponse(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    question_id: str = Field(..., alias="questionId")
    score: int = Field(..., ge=1, le=7)
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


# ============== SCORES ==============

class SeverityLevel(BaseModel):
    model_config = ConfigDict(frozen=True)

    tier: SeverityTier
    label: str
    color: str
    description: str


class ConstructScore(BaseModel):
    model_config = ConfigDict(frozen=True)

    construct_id: ConstructId
    name: str
    score: float = Field(..., ge=0, le=7)
    percentile: int = Field(..., ge=0, le=99)
    item_count: int = Field(..., ge=0)


class DimensionScore(BaseModel):
    model_config = ConfigDict(frozen=True)

    dimension_id: DimensionId
    name: str
    score: float = Field(..., ge=0, le=7)
    percentile: int = Field(..., ge=0, le=99)
    severity: str
    is_protective: bool = False
    recommendations: Tuple[str, ...] = ()


class AssessmentResult(BaseModel):
    """Terminal record of one completed submission"""
    model_config = ConfigDict(frozen=True)

    session_id: str
    overall_score: float = Field(..., ge=1, le=7)
    overall_percentile: int = Field(..., ge=1, le=99)
    overall_severity: SeverityLevel
    construct_scores: Tuple[ConstructScore, ...]
    dimension_scores: Tuple[DimensionScore, ...]
    top_concerns: Tuple[DimensionScore, ...]
    completed_at: datetime

    @computed_field
    @property
    def construct_score_map(self) -> Dict[str, float]:
        return {cs.construct_id.value: cs.score for cs in self.construct_scores}


# ============== PREDICTIONS ==============

class PredictiveInsight(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    category: str = Field(..., description="'risk', 'behavior', 'wellbeing' or 'positive'")
    title: str
    description: str
    probability: int = Field(..., ge=0, le=100)
    severity: str = Field(..., description="'low', 'moderate', 'high' or 'critical'")
    icon: str
    recommendation: str


class WeeklyTimeEstimate(BaseModel):
    model_config = ConfigDict(frozen=True)

    min: int
    max: int


class SampleComparison(BaseModel):
    model_config = ConfigDict(frozen=True)

    percentile: int
    description: str


class PredictiveProfile(BaseModel):
    model_config = ConfigDict(frozen=True)

    risk_level: RiskLevel
    risk_score: int = Field(..., ge=0, le=100)
    predictions: Tuple[PredictiveInsight, ...]
    protective_factors: Tuple[str, ...]
    risk_factors: Tuple[str, ...]
    weekly_time_estimate: WeeklyTimeEstimate
    comparison_to_sample: SampleComparison


class ResearchComparison(BaseModel):
    comparison: str = Field(..., description="'below', 'around' or 'above'")
    difference: float
    description: str


class RiskLevelLabel(BaseModel):
    label: str
    color: str
    description: str
