"""Session record: the exportable description of one capture lifetime."""

from enum import Enum
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from .stroke import CanvasSize, Stroke

# Stamped on every exported record so consumers can detect format changes
FORMAT_VERSION = "1.0.0"


class IntentAction(str, Enum):
    """What the user wants done with the drawing."""
    ADD_TEXT_ANIMATION = "add_text_animation"
    HIGHLIGHT = "highlight"
    ANIMATE = "animate"
    MASK = "mask"
    NONE = "none"


class DrawingIntent(BaseModel):
    """Intent metadata, kept separate from the geometry."""
    action: IntentAction = IntentAction.NONE
    text: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None

    class Config:
        frozen = True


class SessionRecord(BaseModel):
    """Plain structured data handed to transport and storage collaborators."""
    session_id: str
    user_id: str = ""
    canvas_size: CanvasSize
    strokes: Tuple[Stroke, ...] = ()
    intent: DrawingIntent = Field(default_factory=DrawingIntent)
    start_time: float
    format_version: str = Field(default=FORMAT_VERSION, alias="version")

    class Config:
        frozen = True
        alias_generator = to_camel
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "sessionId": "session_1739296800000_a8f3k2m1q",
                "userId": "iks_live_abc123",
                "canvasSize": {"w": 1080, "h": 1920},
                "strokes": [],
                "intent": {"action": "none"},
                "startTime": 1739296800000,
                "version": "1.0.0",
            }
        }

    def to_payload(self) -> Dict[str, Any]:
        """Serialize to the persisted/transmitted camelCase shape."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "SessionRecord":
        """Parse a payload produced by to_payload()."""
        return cls.model_validate(payload)
