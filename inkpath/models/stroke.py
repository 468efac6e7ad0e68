"""Stroke models: points, styles, tools and committed strokes."""

import re
from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel

HEX_COLOR = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


def _clamp_unit(value: float) -> float:
    return max(0.0, min(1.0, value))


class Tool(str, Enum):
    """Drawing tool. Affects compositing downstream, not geometry."""
    PEN = "pen"
    ERASER = "eraser"
    SHAPE = "shape"
    TEXT = "text"


class Point(BaseModel):
    """A captured sample in normalized [0, 1] space.

    x and y are clamped on construction, so a Point can never sit outside
    the unit square. t is milliseconds since an arbitrary epoch.
    """
    x: float
    y: float
    t: float
    pressure: Optional[float] = None

    class Config:
        frozen = True
        alias_generator = to_camel
        populate_by_name = True

    @field_validator("x", "y")
    @classmethod
    def _clamp_coordinate(cls, value: float) -> float:
        return _clamp_unit(value)

    @field_validator("pressure")
    @classmethod
    def _clamp_pressure(cls, value: Optional[float]) -> Optional[float]:
        if value is None:
            return None
        return _clamp_unit(value)


class StrokeStyle(BaseModel):
    """Visual style copied into each stroke when it starts."""
    color: str = "#000000"
    width: float = Field(default=3, gt=0)
    opacity: float = Field(default=1, ge=0, le=1)

    class Config:
        frozen = True
        alias_generator = to_camel
        populate_by_name = True

    @field_validator("color")
    @classmethod
    def _check_color(cls, value: str) -> str:
        if not HEX_COLOR.match(value):
            raise ValueError(f"color must be a hex string like #1a2b3c, got {value!r}")
        return value


class CanvasSize(BaseModel):
    """Surface dimensions in device pixels."""
    w: float = Field(gt=0)
    h: float = Field(gt=0)

    class Config:
        frozen = True


class Stroke(BaseModel):
    """One pointer-down to pointer-up gesture."""
    stroke_id: str
    tool: Tool = Tool.PEN
    points: Tuple[Point, ...] = ()
    start_time: float
    end_time: float
    style: StrokeStyle = Field(default_factory=StrokeStyle)

    class Config:
        frozen = True
        alias_generator = to_camel
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "strokeId": "stroke_1739296800000_k3j9x0a1b",
                "tool": "pen",
                "points": [
                    {"x": 0.5, "y": 0.5, "t": 0, "pressure": 0.5},
                    {"x": 0.51, "y": 0.5, "t": 10, "pressure": 0.5},
                ],
                "startTime": 0,
                "endTime": 10,
                "style": {"color": "#000000", "width": 3, "opacity": 1},
            }
        }
