"""
Frame Mixin for EditorState

Interactive frame management. Every operation that changes which frame is
edited commits the floating selection of the current frame first.
Capacity refusals are reported through notify() instead of raising. While
playback runs it owns the active frame, so frame changes are refused.
"""

from typing import Optional

from spritegrid.models.frame import Frame
from spritegrid.utils.logger import notify


class EditorFrameMixin:
    """Mixin providing frame operations for EditorState

    This mixin expects the parent class to have:
    - self._logger: logging.Logger
    - self.playing: bool
    - self.animation: AnimationSet
    - self.clear_selection(): from EditorSelectionMixin
    """

    def add_frame(self) -> Optional[str]:
        """Append a blank frame and make it active

        Returns:
            The new frame id, or None at the frame cap or while playing
        """
        if self.playing:
            return None
        self.clear_selection()
        if self.animation.is_full():
            notify(f"Maximum of {self.animation.max_frames} frames reached", "Frame limit")
            return None
        return self.animation.append_frame().id

    def duplicate_frame(self, frame_id: Optional[str] = None) -> Optional[str]:
        """Copy a frame (default: active) directly after itself and activate it

        Returns:
            The new frame id, or None at the frame cap or while playing
        """
        if self.playing:
            return None
        self.clear_selection()
        if self.animation.is_full():
            notify(f"Maximum of {self.animation.max_frames} frames reached", "Frame limit")
            return None
        return self.animation.duplicate_frame(frame_id).id

    def delete_frame(self, frame_id: Optional[str] = None) -> bool:
        """Delete a frame (default: active); the last frame is never deleted"""
        if self.playing:
            return False
        self.clear_selection()
        if len(self.animation) <= 1:
            notify("Cannot delete the last frame", "Delete frame")
            return False
        return self.animation.delete_frame(frame_id)

    def move_frame(self, old_index: int, new_index: int):
        """Reorder frames; the active frame stays active

        Raises:
            IndexError: If either index is out of range
        """
        if self.playing:
            return
        self.animation.move_frame(old_index, new_index)

    def select_frame(self, frame_id: str):
        """Make a frame the editing target

        Raises:
            FrameNotFoundError: If no frame has this id
        """
        if self.playing:
            return
        if frame_id == self.animation.active_id:
            return
        self.animation.get_frame(frame_id)
        self.clear_selection()
        self.animation.set_active(frame_id)
        self._logger.debug(f"Active frame: {frame_id}")

    def previous_frame(self) -> Optional[Frame]:
        """Frame before the active one (onion skin source), or None"""
        return self.animation.previous_frame()
