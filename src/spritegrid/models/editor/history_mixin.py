"""
History Mixin for EditorState

Commit, undo and redo against the active layer's HistoryStack.

Snapshots record the layer as displayed: the floating layer is merged over
the base buffer. Lifting a selection therefore never changes history, and
undo/redo drop any floating state before restoring a snapshot into the
buffer, so lifted pixels cannot be lost.
"""

from typing import Tuple


class EditorHistoryMixin:
    """Mixin providing history operations for EditorState

    This mixin expects the parent class to have:
    - self._logger: logging.Logger
    - self.playing: bool
    - self.floating: FloatingLayer
    - self.selection: SelectionModel
    - self.active_buffer: GridBuffer of the active layer
    - self.active_history: HistoryStack of the active layer
    - self.composite_cells(): displayed cells of the active layer
    """

    def _capture(self) -> Tuple:
        return tuple(self.composite_cells())

    def commit(self, description: str = "") -> bool:
        """Push the displayed state of the active layer onto its history

        Called at the end of a discrete user action. A snapshot identical to
        the current history top is not pushed, so no-op actions never create
        undo steps.

        Returns:
            True if a snapshot was pushed
        """
        snapshot = self._capture()
        history = self.active_history
        if snapshot == history.current:
            self._logger.debug(f"Skipped commit '{description}': no change")
            return False
        history.commit(snapshot, description)
        return True

    def _restore(self, snapshot: Tuple):
        self.floating.discard()
        self.selection.clear()
        self.active_buffer.restore(snapshot)

    def undo(self) -> bool:
        """Step the active layer back one commit

        Uncommitted changes (a moved or transformed floating selection) are
        reverted first, back to the last commit.

        Returns:
            False if only the initial state remains or playback is running
        """
        if self.playing:
            return False
        history = self.active_history
        if self._capture() != history.current:
            self._logger.debug("Undo: reverting uncommitted changes")
            self._restore(history.current)
            return True

        snapshot = history.undo()
        if snapshot is None:
            return False
        self._restore(snapshot)
        return True

    def redo(self) -> bool:
        """Reapply the last undone commit of the active layer

        Returns:
            False if the redo stack is empty or playback is running
        """
        if self.playing:
            return False
        snapshot = self.active_history.redo()
        if snapshot is None:
            return False
        self._restore(snapshot)
        return True

    def can_undo(self) -> bool:
        return self.active_history.can_undo()

    def can_redo(self) -> bool:
        return self.active_history.can_redo()
