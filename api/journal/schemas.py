# api/journal/schemas.py
from typing import List, Optional

from pydantic import BaseModel, Field

from models.journal_models import JournalAnalysisResult, TrendAnalysisResult


# REQUEST SCHEMAS
class JournalAnalyzeRequest(BaseModel):
    """Request body for POST /analyze"""
    session_id: Optional[str] = None
    content: str
    date: Optional[str] = Field(None, description="ISO date of the entry; defaults to now")


class JournalEntry(BaseModel):
    date: str = Field(..., min_length=1)
    content: str = Field(..., min_length=1)
    analysis: JournalAnalysisResult


class TrendsRequest(BaseModel):
    """Request body for POST /trends; entries default to the session's analyzed history"""
    session_id: Optional[str] = None
    entries: Optional[List[JournalEntry]] = None


# RESPONSE SCHEMAS
class JournalAnalyzeResponse(BaseModel):
    session_id: str
    entry: JournalEntry
    entries_count: int


class TrendsResponse(BaseModel):
    session_id: str
    entries_analyzed: int
    trend_analysis: TrendAnalysisResult
