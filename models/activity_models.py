# models/activity_models.py
from datetime import datetime, timezone
from typing import List, Literal, Optional

from pydantic import BaseModel, Field

EventType = Literal["scroll", "pause", "exit", "switch_app"]


def _now() -> datetime:
    return datetime.now(timezone.utc)


class ScrollEvent(BaseModel):
    type: EventType
    timestamp: datetime = Field(default_factory=_now)
    duration: Optional[float] = Field(None, ge=0, description="Seconds")
    scroll_depth: Optional[float] = Field(None, ge=0)
    platform: Optional[str] = None


class ScrollSession(BaseModel):
    session_id: str
    user_id: Optional[str] = None
    start_time: datetime = Field(default_factory=_now)
    events: List[ScrollEvent] = Field(default_factory=list)


class ScrollSessionSummary(BaseModel):
    duration: int = Field(..., description="Seconds from session start to the last event")
    scroll_count: int
    pause_count: int
    average_scroll_depth: float


class ManualSessionLog(BaseModel):
    id: str
    user_id: str
    duration: int = Field(..., gt=0, description="Minutes")
    platform: Optional[str] = None
    mood_before: Optional[int] = Field(None, ge=1, le=10)
    mood_after: Optional[int] = Field(None, ge=1, le=10)
    notes: Optional[str] = None
    started_at: datetime = Field(default_factory=_now)
