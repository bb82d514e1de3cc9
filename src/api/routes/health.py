"""Health check endpoint."""

from datetime import datetime, timezone

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from api.models.responses import HealthResponse
from core.config import API_VERSION, DB_PATH
from core.timezone import PACIFIC, to_wall_clock

router = APIRouter()


def current_utc_offset(now: datetime) -> str:
    """Pacific offset in effect at the given instant, e.g. '-07:00'."""
    local = to_wall_clock(now)
    offset = PACIFIC.utc_offset(local)
    hours, remainder = divmod(abs(int(offset.total_seconds())), 3600)
    sign = "-" if offset.total_seconds() < 0 else "+"
    return f"{sign}{hours:02d}:{remainder // 60:02d}"


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """
    Health check endpoint for monitoring.

    Returns 200 if healthy, 503 if the request log database is missing.
    """
    now = datetime.now(timezone.utc)
    database_available = DB_PATH.exists()

    if database_available:
        return HealthResponse(
            status="healthy",
            version=API_VERSION,
            database_available=True,
            timestamp=now.isoformat(),
            utc_offset=current_utc_offset(now),
        )
    else:
        return JSONResponse(
            status_code=503,
            content=HealthResponse(
                status="unhealthy",
                version=API_VERSION,
                database_available=False,
                timestamp=now.isoformat(),
                utc_offset=current_utc_offset(now),
                error="Request log database not found (run scripts/init_db.py)",
            ).model_dump(),
        )
