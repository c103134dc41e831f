# api/sessions/schemas.py
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from models.activity_models import EventType


# REQUEST SCHEMAS
class EventPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    type: EventType
    duration: Optional[float] = Field(None, ge=0)
    scroll_depth: Optional[float] = Field(None, ge=0, alias="scrollDepth")
    platform: Optional[str] = None


class LogEventRequest(BaseModel):
    """Request body for POST /log"""
    model_config = ConfigDict(populate_by_name=True)

    session_id: str = Field(..., min_length=1, alias="sessionId")
    user_id: Optional[str] = Field(None, alias="userId")
    event: EventPayload


class ManualLogRequest(BaseModel):
    """Request body for POST /"""
    model_config = ConfigDict(populate_by_name=True)

    user_id: str = Field(..., min_length=1, alias="userId")
    duration: int = Field(..., gt=0)
    platform: Optional[str] = None
    mood_before: Optional[int] = Field(None, ge=1, le=10, alias="moodBefore")
    mood_after: Optional[int] = Field(None, ge=1, le=10, alias="moodAfter")
    notes: Optional[str] = None


# RESPONSE SCHEMAS
class LogEventResponse(BaseModel):
    session_id: str
    event_count: int
    session_duration: int
