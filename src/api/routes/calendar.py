"""Calendar export endpoints: event JSON, Google link, .ics download, widget rendering."""

import asyncio
import time
from typing import Annotated
from urllib.parse import urlencode

from bs4 import BeautifulSoup
from fastapi import APIRouter, Depends, HTTPException, Query, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse, Response

from api.dependencies import verify_api_key
from api.logging import RequestLog, log_request
from api.models.responses import CalendarEventResponse, ErrorCodes
from core.config import ICS_ENDPOINT, ICS_MEDIA_TYPE
from core.errors import InvalidDateFormat, MissingRequiredAttribute
from models.events import ResolvedEvent
from services.calendar import event_from_attributes
from services.deeplink import encode_deep_link, format_dates
from services.ics import encode_interchange_file, ics_filename
from services.widgets import render_soup

router = APIRouter(prefix="/v1/calendar")


def get_client_ip(request: Request) -> str:
    """Extract client IP from request, handling proxies."""
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.client.host if request.client else "unknown"


def _elapsed_ms(start_time: float) -> int:
    return int((time.time() - start_time) * 1000)


def _resolve(attrs: dict[str, str], request_log: RequestLog) -> ResolvedEvent:
    """
    Normalize query attributes, translating failures into HTTP errors.

    The request log is updated with the outcome either way.
    """
    try:
        event = event_from_attributes(attrs)
    except MissingRequiredAttribute as e:
        request_log.status_code = status.HTTP_400_BAD_REQUEST
        request_log.error_code = ErrorCodes.MISSING_ATTRIBUTE
        request_log.error_message = str(e)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={
                "error": "Missing required attribute",
                "code": ErrorCodes.MISSING_ATTRIBUTE,
                "details": [e.attribute],
            },
        )
    except InvalidDateFormat as e:
        request_log.status_code = status.HTTP_422_UNPROCESSABLE_ENTITY
        request_log.error_code = ErrorCodes.INVALID_DATE_FORMAT
        request_log.error_message = str(e)
        request_log.details.append(("validation_error", str(e)))
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={
                "error": "Invalid date format",
                "code": ErrorCodes.INVALID_DATE_FORMAT,
                "details": [str(e)],
            },
        )

    request_log.event_start = event.start.isoformat()
    request_log.event_end = event.end.isoformat()
    return event


def _finish(request_log: RequestLog, start_time: float):
    """Record timing and write the log; logging never fails the request."""
    if not request_log.status_code:
        request_log.status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    request_log.processing_time_ms = _elapsed_ms(start_time)
    try:
        log_request(request_log)
    except Exception:
        pass


def _query_attributes(
    title: str | None,
    start: str | None,
    end: str | None,
    location: str | None,
    description: str | None,
) -> dict[str, str]:
    attrs = {
        "title": title,
        "start": start,
        "end": end,
        "location": location,
        "description": description,
    }
    return {name: value for name, value in attrs.items() if value is not None}


EventQuery = Annotated[str | None, Query()]


@router.get("/event", response_model=CalendarEventResponse)
async def resolve_event_endpoint(
    request: Request,
    title: EventQuery = None,
    start: EventQuery = None,
    end: EventQuery = None,
    location: EventQuery = None,
    description: EventQuery = None,
):
    """
    Resolve an event's Pacific wall-clock times and return both export targets.
    """
    start_time = time.time()
    request_log = RequestLog(
        endpoint="/v1/calendar/event",
        method="GET",
        client_ip=get_client_ip(request),
        event_title=title,
    )
    attrs = _query_attributes(title, start, end, location, description)

    try:
        event = _resolve(attrs, request_log)
        request_log.status_code = 200
        return CalendarEventResponse(
            title=event.title,
            start=event.start.isoformat(),
            end=event.end.isoformat(),
            location=event.location,
            description=event.description,
            dates=format_dates(event),
            google_url=encode_deep_link(event),
            ics_filename=ics_filename(event.title),
            ics_url=f"{ICS_ENDPOINT}?{urlencode(attrs)}",
        )
    finally:
        _finish(request_log, start_time)


@router.get("/link")
async def google_link_endpoint(
    request: Request,
    title: EventQuery = None,
    start: EventQuery = None,
    end: EventQuery = None,
    location: EventQuery = None,
    description: EventQuery = None,
):
    """Redirect to the Google Calendar event-creation page."""
    start_time = time.time()
    request_log = RequestLog(
        endpoint="/v1/calendar/link",
        method="GET",
        client_ip=get_client_ip(request),
        event_title=title,
    )

    try:
        event = _resolve(_query_attributes(title, start, end, location, description), request_log)
        request_log.status_code = status.HTTP_307_TEMPORARY_REDIRECT
        return RedirectResponse(encode_deep_link(event), status_code=status.HTTP_307_TEMPORARY_REDIRECT)
    finally:
        _finish(request_log, start_time)


@router.get("/event.ics")
async def ics_download_endpoint(
    request: Request,
    title: EventQuery = None,
    start: EventQuery = None,
    end: EventQuery = None,
    location: EventQuery = None,
    description: EventQuery = None,
):
    """
    Download the event as a calendar interchange file.

    A fresh UID and DTSTAMP are generated on every request.
    """
    start_time = time.time()
    request_log = RequestLog(
        endpoint="/v1/calendar/event.ics",
        method="GET",
        client_ip=get_client_ip(request),
        event_title=title,
    )

    try:
        event = _resolve(_query_attributes(title, start, end, location, description), request_log)
        content = encode_interchange_file(event)
        request_log.status_code = 200
        return Response(
            content=content.encode("utf-8"),
            media_type=ICS_MEDIA_TYPE,
            headers={"Content-Disposition": f'attachment; filename="{ics_filename(event.title)}"'},
        )
    finally:
        _finish(request_log, start_time)


def _render_in_thread(html: str) -> tuple[str, int]:
    """Parse and render widgets off the event loop."""
    soup = BeautifulSoup(html, "html.parser")
    count = render_soup(soup, ICS_ENDPOINT)
    return str(soup), count


@router.post("/widgets/render", response_class=HTMLResponse)
async def render_widgets_endpoint(
    request: Request,
    _api_key: str | None = Depends(verify_api_key),
):
    """
    Render 'Add to Calendar' buttons into every calendar widget of an HTML page.

    The request body is the page HTML; the response is the rendered page.
    Widgets that fail to resolve are left without buttons.
    """
    start_time = time.time()
    request_log = RequestLog(
        endpoint="/v1/calendar/widgets/render",
        method="POST",
        client_ip=get_client_ip(request),
    )

    try:
        body = await request.body()
        try:
            html = body.decode("utf-8")
        except UnicodeDecodeError:
            request_log.status_code = status.HTTP_400_BAD_REQUEST
            request_log.error_code = ErrorCodes.INVALID_REQUEST
            request_log.error_message = "Body is not valid UTF-8"
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail={
                    "error": "Request body must be UTF-8 encoded HTML",
                    "code": ErrorCodes.INVALID_REQUEST,
                    "details": [],
                },
            )

        rendered, count = await asyncio.to_thread(_render_in_thread, html)
        request_log.status_code = 200
        request_log.widgets_rendered = count
        return HTMLResponse(content=rendered)
    finally:
        _finish(request_log, start_time)
