"""API Pydantic models."""

from .responses import CalendarEventResponse, ErrorCodes, ErrorResponse, HealthResponse

__all__ = ["HealthResponse", "CalendarEventResponse", "ErrorResponse", "ErrorCodes"]
