"""
Animation playback

Advances the active frame at a fixed rate. There is no timer here: the
front end calls tick() every `interval` seconds while is_playing() holds.
Editing operations on the EditorState are refused while playback runs.
"""

import logging
from typing import Optional

logger = logging.getLogger(__name__)


class Playback:
    """Cycles the active frame of an editor"""

    def __init__(self, editor, fps: Optional[int] = None):
        """
        Args:
            editor: EditorState to animate
            fps: Frames per second (default: editor.config.fps)
        """
        fps = editor.config.fps if fps is None else fps
        if fps < 1:
            raise ValueError(f"fps must be at least 1, got {fps}")
        self.editor = editor
        self.fps = fps

    @property
    def interval(self) -> float:
        """Seconds between ticks"""
        return 1.0 / self.fps

    def is_playing(self) -> bool:
        return self.editor.playing

    def start(self):
        """Begin playback; any floating selection is committed first"""
        if self.editor.playing:
            return
        self.editor.clear_selection()
        self.editor.playing = True
        logger.debug(f"Playback started at {self.fps} fps")

    def stop(self):
        self.editor.playing = False
        logger.debug("Playback stopped")

    def toggle(self) -> bool:
        """Start or stop; returns the new playing state"""
        if self.editor.playing:
            self.stop()
        else:
            self.start()
        return self.editor.playing

    def tick(self) -> str:
        """Advance to the next frame (wrapping) when playing with several frames

        Returns:
            The active frame id after the tick
        """
        animation = self.editor.animation
        if self.editor.playing and len(animation) > 1:
            return animation.advance()
        return animation.active_id
