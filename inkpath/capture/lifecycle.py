"""Stroke capture state machine for inkpath.

A DrawingSession owns all capture state for one drawing surface: the open
stroke, the committed stroke collection and its undo/redo history. The host
event loop must deliver events to a session one at a time.

States are Idle and Active. start() moves Idle to Active, end() commits
the processed stroke and returns to Idle. Calls that do not fit the current
state are ignored rather than raised, so a misbehaving host cannot corrupt
committed strokes.
"""

import logging
import time
from typing import List, Optional, Tuple

from ..models import (
    FORMAT_VERSION,
    CanvasSize,
    DrawingIntent,
    Point,
    PointerEvent,
    PointerEventType,
    PointerSample,
    SessionRecord,
    Stroke,
    StrokeStyle,
    Tool,
)
from .cleanup import process_stroke
from .config import CaptureConfig, CleanupConfig
from .history import StrokeHistory
from .ids import generate_session_id, generate_stroke_id
from .normalization import point_from_sample

logger = logging.getLogger("inkpath.capture.lifecycle")


class DrawingSession:
    """Capture state for one session, from first stroke to export."""

    def __init__(
        self,
        canvas_size: Optional[CanvasSize] = None,
        user_id: str = "",
        session_id: Optional[str] = None,
        tool: Tool = Tool.PEN,
        style: Optional[StrokeStyle] = None,
        intent: Optional[DrawingIntent] = None,
        config: Optional[CaptureConfig] = None,
        start_time: Optional[float] = None,
    ):
        self.config = config or CaptureConfig()
        if canvas_size is None:
            canvas_size = CanvasSize(w=self.config.canvas.width, h=self.config.canvas.height)
        if style is None:
            default = self.config.default_style
            style = StrokeStyle(color=default.color, width=default.width, opacity=default.opacity)

        self.session_id = session_id or generate_session_id()
        self.user_id = user_id
        self.start_time = start_time if start_time is not None else time.time() * 1000
        self.tool = tool
        self.style = style
        self.intent = intent or DrawingIntent()

        # Size recorded for the session; the host's latest size is adopted
        # only when a stroke starts.
        self.canvas_size = canvas_size
        self._surface_size = canvas_size

        self._strokes: Tuple[Stroke, ...] = ()
        self._history = StrokeHistory()

        self._open_id: Optional[str] = None
        self._open_tool: Tool = tool
        self._open_style: StrokeStyle = style
        self._open_points: List[Point] = []
        self._open_start = 0.0
        self._open_end = 0.0

    @property
    def cleanup(self) -> CleanupConfig:
        return self.config.cleanup

    @property
    def strokes(self) -> Tuple[Stroke, ...]:
        return self._strokes

    @property
    def is_drawing(self) -> bool:
        return self._open_id is not None

    @property
    def current_stroke(self) -> Optional[Stroke]:
        """The in-progress stroke, unprocessed, or None when Idle."""
        if self._open_id is None:
            return None
        return Stroke(
            stroke_id=self._open_id,
            tool=self._open_tool,
            points=tuple(self._open_points),
            start_time=self._open_start,
            end_time=self._open_end,
            style=self._open_style,
        )

    @property
    def can_undo(self) -> bool:
        return self._history.can_undo

    @property
    def can_redo(self) -> bool:
        return self._history.can_redo

    @property
    def history(self) -> StrokeHistory:
        return self._history

    def set_user_id(self, user_id: str):
        self.user_id = user_id

    def set_tool(self, tool: Tool):
        self.tool = Tool(tool)

    def set_style(self, **changes) -> StrokeStyle:
        """Merge a partial style change into the current style.

        Strokes already started keep the style they were created with.
        """
        changes = {k: v for k, v in changes.items() if v is not None}
        self.style = StrokeStyle(**{**self.style.model_dump(), **changes})
        return self.style

    def set_intent(self, intent: DrawingIntent):
        self.intent = intent

    def set_canvas_size(self, canvas_size: CanvasSize):
        """Record the host's current surface size.

        Takes effect at the next stroke start. Existing points are not
        renormalized.
        """
        self._surface_size = canvas_size

    def start(self, point: Point):
        """Open a new stroke at point. Ignored if a stroke is already open."""
        if self._open_id is not None:
            logger.debug("start ignored: stroke %s is still open", self._open_id)
            return

        self.canvas_size = self._surface_size
        self._history.push(self._strokes)

        self._open_id = generate_stroke_id()
        self._open_tool = self.tool
        self._open_style = self.style
        self._open_points = [point]
        self._open_start = point.t
        self._open_end = point.t

    def extend(self, point: Point):
        """Append a point to the open stroke. Ignored when Idle."""
        if self._open_id is None:
            return
        self._open_points.append(point)
        self._open_end = point.t

    def end(self) -> Optional[Stroke]:
        """Clean up and commit the open stroke.

        Returns the committed stroke, or None when Idle. A stroke that ends
        up with no points is still committed.
        """
        stroke = self.current_stroke
        if stroke is None:
            return None

        processed = process_stroke(stroke, self.cleanup)
        self._strokes = self._strokes + (processed,)
        self._reset_open()

        logger.debug(
            "Committed %s: %d raw points, %d after cleanup",
            processed.stroke_id, len(stroke.points), len(processed.points),
        )
        return processed

    def _reset_open(self):
        self._open_id = None
        self._open_points = []
        self._open_start = 0.0
        self._open_end = 0.0

    def pointer_down(self, sample: PointerSample):
        """Start a stroke from a raw device sample."""
        if self._open_id is None:
            self.canvas_size = self._surface_size
        self.start(point_from_sample(sample, self.canvas_size))

    def pointer_move(self, sample: PointerSample):
        if self._open_id is None:
            return
        self.extend(point_from_sample(sample, self.canvas_size))

    def pointer_up(self) -> Optional[Stroke]:
        return self.end()

    def apply_event(self, event: PointerEvent) -> Optional[Stroke]:
        """Dispatch one tagged pointer event. Returns a stroke if one was committed."""
        if event.type == PointerEventType.DOWN:
            self.pointer_down(event)
        elif event.type == PointerEventType.MOVE:
            self.pointer_move(event)
        else:
            return self.pointer_up()
        return None

    def undo(self):
        """Step back one commit. Ignored while a stroke is open."""
        if self._open_id is not None:
            logger.debug("undo ignored: stroke %s is still open", self._open_id)
            return
        previous = self._history.undo(self._strokes)
        if previous is not None:
            self._strokes = previous

    def redo(self):
        if self._open_id is not None:
            logger.debug("redo ignored: stroke %s is still open", self._open_id)
            return
        following = self._history.redo(self._strokes)
        if following is not None:
            self._strokes = following

    def clear(self):
        """Empty the canvas as one undoable step.

        An open stroke is discarded without being committed. Its start()
        already pushed the pre-clear collection.
        """
        if self._open_id is not None:
            logger.debug("clear discarded open stroke %s", self._open_id)
            self._reset_open()
        else:
            self._history.push(self._strokes)
        self._strokes = ()

    def get_session_data(self) -> SessionRecord:
        """Snapshot the session for transport or storage.

        Pure read; an open stroke is never included.
        """
        return SessionRecord(
            session_id=self.session_id,
            user_id=self.user_id,
            canvas_size=self.canvas_size,
            strokes=self._strokes,
            intent=self.intent,
            start_time=self.start_time,
            format_version=FORMAT_VERSION,
        )
