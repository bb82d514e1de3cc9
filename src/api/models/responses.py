"""Pydantic response models for API endpoints."""

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Health check response."""

    status: str  # "healthy" or "unhealthy"
    version: str
    database_available: bool
    timestamp: str  # ISO 8601 UTC
    utc_offset: str  # current Pacific offset, e.g. "-07:00"
    error: str | None = None


class CalendarEventResponse(BaseModel):
    """Resolved event plus both export targets."""

    title: str
    start: str  # ISO 8601 UTC
    end: str  # ISO 8601 UTC
    location: str
    description: str
    dates: str  # <UTCSTART>/<UTCEND>, compact form
    google_url: str
    ics_filename: str
    ics_url: str


class ErrorResponse(BaseModel):
    """Standard error response."""

    error: str
    code: str
    details: list[str] = []


class ErrorCodes:
    """Error code constants."""

    INVALID_REQUEST = "INVALID_REQUEST"
    UNAUTHORIZED = "UNAUTHORIZED"
    INVALID_DATE_FORMAT = "INVALID_DATE_FORMAT"
    MISSING_ATTRIBUTE = "MISSING_ATTRIBUTE"
    INTERNAL_ERROR = "INTERNAL_ERROR"
