"""Snapshot-based undo/redo over the committed stroke collection."""

import logging
from typing import List, Optional, Tuple

from ..models import Stroke

logger = logging.getLogger("inkpath.capture.history")

# A snapshot is a tuple of frozen strokes, so it can never change after push
Snapshot = Tuple[Stroke, ...]


class StrokeHistory:
    """Undo and redo sequences of full stroke-collection snapshots.

    Every mutating commit pushes exactly one snapshot and discards the redo
    sequence. Undo and redo only move snapshots across between the two.
    """

    def __init__(self):
        self._undo: List[Snapshot] = []
        self._redo: List[Snapshot] = []

    @property
    def can_undo(self) -> bool:
        return bool(self._undo)

    @property
    def can_redo(self) -> bool:
        return bool(self._redo)

    @property
    def undo_depth(self) -> int:
        return len(self._undo)

    @property
    def redo_depth(self) -> int:
        return len(self._redo)

    def push(self, snapshot: Snapshot):
        """Record the collection as it was before a mutating commit."""
        self._undo.append(tuple(snapshot))
        self._redo.clear()

    def undo(self, current: Snapshot) -> Optional[Snapshot]:
        """Step back one frame.

        Returns the snapshot that should become current, or None if there is
        nothing to undo.
        """
        if not self._undo:
            logger.debug("Undo ignored: history is empty")
            return None
        previous = self._undo.pop()
        self._redo.append(tuple(current))
        return previous

    def redo(self, current: Snapshot) -> Optional[Snapshot]:
        """Step forward one frame, or return None if there is nothing to redo."""
        if not self._redo:
            logger.debug("Redo ignored: nothing to redo")
            return None
        following = self._redo.pop()
        self._undo.append(tuple(current))
        return following
