"""FastAPI dependencies for authentication."""

import secrets

from fastapi import Header, HTTPException, status

from api.models.responses import ErrorCodes, ErrorResponse
from core.config import API_DEBUG, CALENDAR_API_KEY


def _auth_error(status_code: int, message: str, code: str) -> HTTPException:
    return HTTPException(
        status_code=status_code,
        detail=ErrorResponse(error=message, code=code).model_dump(),
    )


async def verify_api_key(x_api_key: str | None = Header(None, alias="X-API-Key")) -> str | None:
    """
    Guard for the HTML rendering endpoint.

    With no key configured, requests are only allowed when API_DEBUG is on.

    Raises:
        HTTPException: 401 if the key is missing or wrong, 500 if no key is configured
    """
    if not CALENDAR_API_KEY:
        if API_DEBUG:
            return None
        raise _auth_error(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "API key not configured on server",
            ErrorCodes.INTERNAL_ERROR,
        )

    # Constant-time comparison
    if not x_api_key or not secrets.compare_digest(x_api_key, CALENDAR_API_KEY):
        raise _auth_error(
            status.HTTP_401_UNAUTHORIZED,
            "Invalid or missing API key",
            ErrorCodes.UNAUTHORIZED,
        )

    return x_api_key
