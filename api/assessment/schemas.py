# api/assessment/schemas.py
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from models.assessment_models import AssessmentResponse


# REQUEST SCHEMAS
class AnswerRequest(BaseModel):
    """Request body for POST /answer"""
    model_config = ConfigDict(populate_by_name=True)

    session_id: Optional[str] = None
    question_id: str = Field(..., alias="questionId")
    score: int = Field(..., ge=1, le=7)
    timestamp: Optional[datetime] = None

    def to_response(self) -> AssessmentResponse:
        if self.timestamp is None:
            return AssessmentResponse(question_id=self.question_id, score=self.score)
        return AssessmentResponse(question_id=self.question_id, score=self.score, timestamp=self.timestamp)


class SubmitAssessmentRequest(BaseModel):
    """Request body for POST /submit; responses default to the answers stored on the session"""
    session_id: Optional[str] = None
    responses: Optional[List[AssessmentResponse]] = None


# RESPONSE SCHEMAS
class QuestionItem(BaseModel):
    id: str
    text: str
    construct_id: str = Field(..., serialization_alias="construct")
    dimension: str


class DimensionItem(BaseModel):
    id: str
    name: str
    description: str
    is_protective: bool


class ConstructItem(BaseModel):
    id: str
    name: str
    short_name: str
    description: str


class QuestionCatalogResponse(BaseModel):
    questions: List[QuestionItem]
    dimensions: List[DimensionItem]
    constructs: List[ConstructItem]
    scale: dict
    total_questions: int


class ProgressResponse(BaseModel):
    session_id: str
    answered: int
    total: int
    percentage: int
    complete: bool
    current_phase: str
