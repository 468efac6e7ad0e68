"""Registry of live capture sessions.

MVP: in-memory, one process. Sessions are lost on restart, the same as an
abandoned open stroke.
"""

import logging
from typing import Dict, List, Optional

from ..capture import CaptureConfig, DrawingSession
from ..config import settings
from ..models import CanvasSize, DrawingIntent, SessionSummary, StrokeStyle, Tool

logger = logging.getLogger("inkpath.registry")


class SessionLimitError(Exception):
    """Raised when the registry is full."""


class SessionRegistry:
    """Holds DrawingSession objects keyed by session id."""

    def __init__(self, max_sessions: int | None = None):
        """Initialize an empty registry."""
        self.max_sessions = max_sessions or settings.max_sessions
        self.sessions: Dict[str, DrawingSession] = {}
        logger.info("SessionRegistry initialized")

    def create(
        self,
        user_id: str,
        config: CaptureConfig,
        canvas_size: Optional[CanvasSize] = None,
        tool: Tool = Tool.PEN,
        style: Optional[StrokeStyle] = None,
        intent: Optional[DrawingIntent] = None,
    ) -> DrawingSession:
        """Open a new capture session for a user.

        Raises:
            SessionLimitError: if max_sessions sessions are already open
        """
        if len(self.sessions) >= self.max_sessions:
            raise SessionLimitError(f"Session limit reached ({self.max_sessions})")

        session = DrawingSession(
            canvas_size=canvas_size,
            user_id=user_id,
            tool=tool,
            style=style,
            intent=intent,
            config=config,
        )
        self.sessions[session.session_id] = session
        logger.info(f"Created session {session.session_id} for user {user_id}")
        return session

    def get(self, session_id: str) -> DrawingSession | None:
        return self.sessions.get(session_id)

    def get_user_sessions(self, user_id: str, limit: int = 100) -> List[DrawingSession]:
        """Get sessions for a user, newest first."""
        user_sessions = [s for s in self.sessions.values() if s.user_id == user_id]
        user_sessions.sort(key=lambda s: s.start_time, reverse=True)
        return user_sessions[:limit]

    def discard(self, session_id: str) -> bool:
        """Drop a session. An open stroke is discarded with it."""
        session = self.sessions.pop(session_id, None)
        if session is None:
            return False
        if session.is_drawing:
            logger.info(f"Discarded session {session_id} with an open stroke")
        else:
            logger.info(f"Discarded session {session_id}")
        return True

    def clear(self):
        self.sessions.clear()


def summarize(session: DrawingSession) -> SessionSummary:
    """Build the short status view of a session."""
    return SessionSummary(
        session_id=session.session_id,
        stroke_count=len(session.strokes),
        is_drawing=session.is_drawing,
        can_undo=session.can_undo,
        can_redo=session.can_redo,
        tool=session.tool,
        canvas_size=session.canvas_size,
        start_time=session.start_time,
    )


# Global registry instance
registry = SessionRegistry()
