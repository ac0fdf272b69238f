"""
Command interface for an editing host, with snapshot undo/redo.
"""

import logging
from collections import deque

import numpy as np

from .constants import DEFAULT_HISTORY_LIMIT
from .path import CurvePath

logger = logging.getLogger(__name__)


class CurveEditSession:
    """
    Owns one CurvePath and records a PathState before every edit.

    Each apply_* call returns the snapshot taken before the edit so a host
    with its own undo stack can keep it instead of using undo()/redo().
    A command rejected by validation leaves both the path and the history
    untouched; an edit that completed is always recorded.
    """

    def __init__(self, path=None, history_limit=DEFAULT_HISTORY_LIMIT):
        if history_limit < 1:
            raise ValueError("history_limit must be >= 1")
        self.path = path if path is not None else CurvePath()
        self.history_limit = history_limit
        self._undo = deque(maxlen=history_limit)
        self._redo = []

    @property
    def can_undo(self):
        return bool(self._undo)

    @property
    def can_redo(self):
        return bool(self._redo)

    def apply_move(self, index, position):
        """
        Drag handle index to position.

        Returns None without recording anything when the handle is already
        at position, or when auto-set snaps a dragged control straight back.
        """
        current = self.path.point_at(index)
        if np.array_equal(current, np.asarray(position, dtype=float).reshape(-1)):
            return None
        return self._run("move point", self.path.move_point, index, position)

    def apply_append(self, position):
        return self._run("add segment", self.path.append_segment, position)

    def apply_toggle_closed(self):
        return self._run("toggle closed", self.path.toggle_closed)

    def apply_toggle_auto_set(self, enabled):
        if bool(enabled) == self.path.is_auto_set_enabled():
            return None
        return self._run("toggle auto-set", self.path.set_auto_set_control_points, enabled)

    def undo(self):
        if not self._undo:
            return False
        self._redo.append(self.path.get_state())
        self.path.set_state(self._undo.pop())
        logger.debug("Undo")
        return True

    def redo(self):
        if not self._redo:
            return False
        self._undo.append(self.path.get_state())
        self.path.set_state(self._redo.pop())
        logger.debug("Redo")
        return True

    def clear_history(self):
        self._undo.clear()
        self._redo.clear()

    def _run(self, label, operation, *args):
        before = self.path.get_state()
        try:
            operation(*args)
        finally:
            # a warning escalated to an error surfaces after the edit is done
            changed = self.path.get_state() != before
            if changed:
                self._undo.append(before)
                self._redo.clear()
                logger.debug(f"Recorded '{label}' ({len(self._undo)} undo steps)")
        return before if changed else None
