"""Session endpoints - open, inspect, configure and discard capture sessions."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status

from ..auth import get_owned_session, get_user_id_from_key, verify_api_key
from ..capture import DrawingSession
from ..config import settings
from ..models import (
    SessionCreateRequest,
    SessionListResponse,
    SessionSummary,
    SessionUpdateRequest,
)
from ..services.registry import SessionLimitError, registry, summarize

logger = logging.getLogger("inkpath.routes.sessions")

router = APIRouter()


@router.post("/sessions", response_model=SessionSummary, status_code=status.HTTP_201_CREATED)
async def create_session(
    request: SessionCreateRequest,
    api_key: str = Depends(verify_api_key),
):
    """Open a capture session for the authenticated user.

    Omitted canvas size and style fall back to the configured defaults.
    """
    user_id = get_user_id_from_key(api_key)

    try:
        session = registry.create(
            user_id=user_id,
            config=settings.get_capture_config(),
            canvas_size=request.canvas_size,
            tool=request.tool,
            style=request.style,
            intent=request.intent,
        )
    except SessionLimitError as e:
        raise HTTPException(
            status_code=status.HTTP_429_TOO_MANY_REQUESTS,
            detail=str(e),
        )

    return summarize(session)


@router.get("/sessions", response_model=SessionListResponse)
async def list_sessions(
    limit: int = Query(default=100, ge=1, le=1000, description="Maximum number of results"),
    api_key: str = Depends(verify_api_key),
):
    """List the caller's open sessions, newest first."""
    user_id = get_user_id_from_key(api_key)
    sessions = registry.get_user_sessions(user_id, limit=limit)
    summaries = [summarize(s) for s in sessions]
    return SessionListResponse(sessions=summaries, total=len(summaries))


@router.get("/sessions/{session_id}")
async def get_session_data(session: DrawingSession = Depends(get_owned_session)):
    """Export the session record.

    Only committed strokes are included; a stroke still being drawn is not.
    """
    return session.get_session_data().to_payload()


@router.get("/sessions/{session_id}/summary", response_model=SessionSummary)
async def get_session_summary(session: DrawingSession = Depends(get_owned_session)):
    return summarize(session)


@router.patch("/sessions/{session_id}", response_model=SessionSummary)
async def update_session(
    request: SessionUpdateRequest,
    session: DrawingSession = Depends(get_owned_session),
):
    """Change tool, style, intent or surface size.

    Style and tool changes apply from the next stroke on. A new surface size
    is adopted when the next stroke starts.
    """
    if request.tool is not None:
        session.set_tool(request.tool)

    if request.style is not None:
        try:
            session.set_style(**request.style.model_dump())
        except ValueError as e:
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                detail=str(e),
            )

    if request.intent is not None:
        session.set_intent(request.intent)

    if request.canvas_size is not None:
        session.set_canvas_size(request.canvas_size)

    return summarize(session)


@router.delete("/sessions/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
async def discard_session(session: DrawingSession = Depends(get_owned_session)):
    """Drop a session and everything in it."""
    registry.discard(session.session_id)
