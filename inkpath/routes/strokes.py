"""Stroke endpoints - pointer events and undo/redo/clear."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from ..auth import get_owned_session
from ..capture import DrawingSession
from ..config import settings
from ..models import (
    EventBatchResponse,
    PointerEventBatch,
    SessionSummary,
)
from ..services.registry import summarize

logger = logging.getLogger("inkpath.routes.strokes")

router = APIRouter()


@router.post("/sessions/{session_id}/events", response_model=EventBatchResponse)
async def apply_events(
    batch: PointerEventBatch,
    session: DrawingSession = Depends(get_owned_session),
):
    """Feed pointer events to a session in order.

    Coordinates are device pixels relative to the session's surface. Events
    that do not fit the capture state (a move with no stroke open, an up
    without a down) are ignored.

    **Event types:**
    - `down`: start a stroke
    - `move`: extend the open stroke
    - `up`: end and commit the open stroke
    """
    if len(batch.events) > settings.max_events_per_request:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=(
                f"Batch of {len(batch.events)} events exceeds limit "
                f"({settings.max_events_per_request})"
            ),
        )

    committed = []
    for event in batch.events:
        stroke = session.apply_event(event)
        if stroke is not None:
            committed.append(stroke.stroke_id)

    if committed:
        logger.info(f"Session {session.session_id}: committed {len(committed)} strokes")

    return EventBatchResponse(
        session_id=session.session_id,
        events_applied=len(batch.events),
        committed_stroke_ids=committed,
        summary=summarize(session),
    )


@router.post("/sessions/{session_id}/undo", response_model=SessionSummary)
async def undo(session: DrawingSession = Depends(get_owned_session)):
    session.undo()
    return summarize(session)


@router.post("/sessions/{session_id}/redo", response_model=SessionSummary)
async def redo(session: DrawingSession = Depends(get_owned_session)):
    session.redo()
    return summarize(session)


@router.post("/sessions/{session_id}/clear", response_model=SessionSummary)
async def clear(session: DrawingSession = Depends(get_owned_session)):
    """Empty the canvas. Undo brings the strokes back."""
    session.clear()
    return summarize(session)
