"""Request/response models for the capture HTTP API."""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field, model_validator

from .session import DrawingIntent
from .stroke import CanvasSize, StrokeStyle, Tool


class PointerEventType(str, Enum):
    DOWN = "down"
    MOVE = "move"
    UP = "up"


class PointerSample(BaseModel):
    """A raw pointer or touch sample in device pixels."""
    x: float
    y: float
    t: float
    pressure: Optional[float] = None


class PointerEvent(PointerSample):
    """A pointer sample tagged with what happened.

    Coordinates and timestamp are required for down and move. An up event
    carries no position.
    """
    type: PointerEventType
    x: Optional[float] = None
    y: Optional[float] = None
    t: Optional[float] = None

    @model_validator(mode="after")
    def check_position(self):
        if self.type != PointerEventType.UP:
            missing = [name for name in ("x", "y", "t") if getattr(self, name) is None]
            if missing:
                raise ValueError(f"{self.type.value} event requires {', '.join(missing)}")
        return self

    class Config:
        json_schema_extra = {
            "example": {"type": "move", "x": 540.0, "y": 960.0, "t": 1739296800016, "pressure": 0.5}
        }


class SessionCreateRequest(BaseModel):
    """Request to open a capture session."""
    canvas_size: Optional[CanvasSize] = None
    tool: Tool = Tool.PEN
    style: Optional[StrokeStyle] = None
    intent: Optional[DrawingIntent] = None

    class Config:
        json_schema_extra = {
            "example": {
                "canvas_size": {"w": 1080, "h": 1920},
                "tool": "pen",
                "style": {"color": "#000000", "width": 3, "opacity": 1},
            }
        }


class StylePatch(BaseModel):
    """Partial style change; unset fields keep their current value."""
    color: Optional[str] = None
    width: Optional[float] = Field(default=None, gt=0)
    opacity: Optional[float] = Field(default=None, ge=0, le=1)


class SessionUpdateRequest(BaseModel):
    """Change tool, style, intent or surface size of a session."""
    tool: Optional[Tool] = None
    style: Optional[StylePatch] = None
    intent: Optional[DrawingIntent] = None
    canvas_size: Optional[CanvasSize] = None


class PointerEventBatch(BaseModel):
    """Ordered pointer events, applied one at a time."""
    events: List[PointerEvent]


class SessionSummary(BaseModel):
    """Short view of a session's capture state."""
    session_id: str
    stroke_count: int
    is_drawing: bool
    can_undo: bool
    can_redo: bool
    tool: Tool
    canvas_size: CanvasSize
    start_time: float


class EventBatchResponse(BaseModel):
    """Result of applying a batch of pointer events."""
    session_id: str
    events_applied: int
    committed_stroke_ids: List[str]
    summary: SessionSummary


class SessionListResponse(BaseModel):
    sessions: List[SessionSummary]
    total: int
