"""
Undo/Redo History Stack for the Sprite Grid Editor

Each frame layer owns one HistoryStack of full buffer snapshots. The top of
the undo stack is always the current committed state, so the stack never
drops below one entry (the initial state).
"""

import logging
from typing import Callable, List, Optional, Sequence, Tuple

from spritegrid.constants import MAX_HISTORY_ENTRIES


Snapshot = Tuple


class HistoryStack:
    """Manages undo/redo stacks of immutable snapshots"""

    def __init__(self, initial: Sequence, max_history: int = MAX_HISTORY_ENTRIES,
                 description: str = "Initial state"):
        """
        Initialize the history stack

        Args:
            initial: Snapshot of the starting state (bottom of the undo stack)
            max_history: Maximum number of snapshots kept on the undo stack
            description: Label for the starting state
        """
        if max_history < 1:
            raise ValueError(f"max_history must be at least 1, got {max_history}")
        self.max_history = max_history
        self.undo_stack: List[dict] = [self._entry(initial, description)]  # oldest -> newest
        self.redo_stack: List[dict] = []  # only filled by undo
        self._listeners: List[Callable[[bool, bool], None]] = []
        self._logger = logging.getLogger('HistoryStack')

    @staticmethod
    def _entry(snapshot: Sequence, description: str) -> dict:
        # Tuples of immutable Colors are safe to share, no deep copy needed
        return {'data': tuple(snapshot), 'description': description}

    @property
    def current(self) -> Snapshot:
        """Snapshot at the top of the undo stack"""
        return self.undo_stack[-1]['data']

    def commit(self, snapshot: Sequence, description: str = ""):
        """
        Push a new snapshot after a discrete user action

        Evicts the oldest entry past max_history and clears the redo stack.

        Args:
            snapshot: Full copy of the buffer
            description: Optional description of the change
        """
        self.undo_stack.append(self._entry(snapshot, description))
        while len(self.undo_stack) > self.max_history:
            self.undo_stack.pop(0)
        self.redo_stack = []

        self._notify_listeners()
        self._logger.debug(f"Committed: {description} (depth: {len(self.undo_stack)})")

    def undo(self) -> Optional[Snapshot]:
        """
        Step back one snapshot

        Returns:
            The snapshot to restore, or None if only the initial state remains
        """
        if not self.can_undo():
            self._logger.debug("Cannot undo - at beginning of history")
            return None

        entry = self.undo_stack.pop()
        self.redo_stack.append(entry)

        self._notify_listeners()
        self._logger.debug(f"Undo: {entry['description']} (depth: {len(self.undo_stack)})")
        return self.current

    def redo(self) -> Optional[Snapshot]:
        """
        Step forward one snapshot

        Returns:
            The snapshot to restore, or None if nothing was undone
        """
        if not self.can_redo():
            self._logger.debug("Cannot redo - redo stack empty")
            return None

        entry = self.redo_stack.pop()
        self.undo_stack.append(entry)
        while len(self.undo_stack) > self.max_history:
            self.undo_stack.pop(0)

        self._notify_listeners()
        self._logger.debug(f"Redo: {entry['description']} (depth: {len(self.undo_stack)})")
        return self.current

    def can_undo(self) -> bool:
        """Check if undo is available"""
        return len(self.undo_stack) > 1

    def can_redo(self) -> bool:
        """Check if redo is available"""
        return len(self.redo_stack) > 0

    # ========================================
    # Listeners
    # ========================================

    def add_listener(self, callback: Callable[[bool, bool], None]):
        """
        Add a listener to be notified when history state changes

        Args:
            callback: Function receiving (can_undo, can_redo)
        """
        self._listeners.append(callback)

    def remove_listener(self, callback):
        """Remove a listener"""
        if callback in self._listeners:
            self._listeners.remove(callback)

    def _notify_listeners(self):
        for callback in self._listeners:
            callback(self.can_undo(), self.can_redo())

    # ========================================
    # Descriptions
    # ========================================

    def get_current_description(self) -> str:
        """Get the description of the current state"""
        return self.undo_stack[-1]['description']

    def get_undo_description(self) -> str:
        """Get the description of the action that undo would revert"""
        if self.can_undo():
            return self.undo_stack[-1]['description']
        return ""

    def get_redo_description(self) -> str:
        """Get the description of the action that redo would reapply"""
        if self.can_redo():
            return self.redo_stack[-1]['description']
        return ""

    def __len__(self) -> int:
        return len(self.undo_stack)
