# api/base/base_schemas.py
import asyncio
from typing import Any, Generic, Optional, Tuple, TypeVar

from pydantic import BaseModel, Field, ConfigDict, ValidationError

from shared.exceptions import ConfigurationError, LLMConfigurationError, LLMServiceError

T = TypeVar("T")


class BaseResponse(BaseModel, Generic[T]):
    model_config = ConfigDict(exclude_none=True)

    status: str = Field(..., description="'success' or 'error'")
    message: Optional[str] = Field(None, description="Human-friendly message")
    errors: Optional[Any] = Field(None, description="Error details")
    data: Optional[T] = Field(None, description="Payload data")

    @classmethod
    def success(cls, data: Optional[T] = None, message: Optional[str] = None):
        return cls(status="success", message=message, data=data)

    @classmethod
    def error(cls, message: str, errors: Optional[Any] = None):
        return cls(status="error", message=message, errors=errors)

    @classmethod
    def from_exception(cls, exc: Exception, message: str) -> Tuple["BaseResponse", int]:
        """Map a raised exception to an error envelope and its HTTP status"""
        if isinstance(exc, ValidationError):
            return cls.error(message="Invalid request", errors=exc.errors(include_url=False, include_context=False)), 400
        if isinstance(exc, LLMConfigurationError):
            return cls.error(message="API configuration error", errors=str(exc)), 500
        if isinstance(exc, (LLMServiceError, asyncio.TimeoutError)):
            return cls.error(message="AI service is temporarily unavailable", errors=str(exc) or "timeout"), 503
        if isinstance(exc, ConfigurationError):
            return cls.error(message=message, errors=str(exc)), 500
        if isinstance(exc, ValueError):
            return cls.error(message=str(exc), errors=str(exc)), 400
        return cls.error(message=message, errors=str(exc)), 500
