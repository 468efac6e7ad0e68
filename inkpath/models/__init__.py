"""Data models for inkpath."""

from .api import (
    EventBatchResponse,
    PointerEvent,
    PointerEventBatch,
    PointerEventType,
    PointerSample,
    SessionCreateRequest,
    SessionListResponse,
    SessionSummary,
    SessionUpdateRequest,
    StylePatch,
)
from .session import FORMAT_VERSION, DrawingIntent, IntentAction, SessionRecord
from .stroke import CanvasSize, Point, Stroke, StrokeStyle, Tool

__all__ = [
    "CanvasSize",
    "Point",
    "Stroke",
    "StrokeStyle",
    "Tool",
    "FORMAT_VERSION",
    "DrawingIntent",
    "IntentAction",
    "SessionRecord",
    "EventBatchResponse",
    "PointerEvent",
    "PointerEventBatch",
    "PointerEventType",
    "PointerSample",
    "SessionCreateRequest",
    "SessionListResponse",
    "SessionSummary",
    "SessionUpdateRequest",
    "StylePatch",
]
