# api/result/schemas.py
from typing import Any, Dict, Optional

from pydantic import BaseModel


# REQUEST SCHEMAS
class SuggestionsRequest(BaseModel):
    """Request body for POST /suggestions"""
    session_id: Optional[str] = None


# RESPONSE SCHEMAS
class SuggestionsResponse(BaseModel):
    session_id: str
    suggestions: Dict[str, Any]
