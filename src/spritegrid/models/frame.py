"""
Sprite Grid Editor - Frames and Animation Set

A Frame owns a base buffer, an overlay buffer and one HistoryStack per
buffer. The AnimationSet is the ordered frame collection plus the active
frame pointer. At least one frame always exists.

Usage:
    animation = AnimationSet(size=16)
    frame_id = animation.append_frame().id
    animation.move_frame(1, 0)
    animation.delete_frame(frame_id)
"""

import logging
import uuid as uuid_module
from typing import List, Optional, Sequence

from spritegrid.constants import (
    DEFAULT_FRAME_NAME, DUPLICATE_SUFFIX,
    MAX_FRAMES, MAX_HISTORY_ENTRIES,
)
from spritegrid.errors import FrameLimitError, FrameNotFoundError
from spritegrid.models.color import Color
from spritegrid.models.grid import GridBuffer, LayerKind
from spritegrid.models.history import HistoryStack


class Frame:
    """One animation step: base and overlay buffers with independent histories

    Properties:
        id: UUID string, stable across reordering
        name: Display name
    """

    def __init__(self, size: int, name: str, frame_id: Optional[str] = None,
                 max_history: int = MAX_HISTORY_ENTRIES,
                 base: Optional[Sequence[Optional[Color]]] = None,
                 overlay: Optional[Sequence[Optional[Color]]] = None):
        self.id = frame_id or str(uuid_module.uuid4())
        self.name = name
        self._size = size
        self._base = GridBuffer(size, base)
        self._overlay = GridBuffer(size, overlay)
        self._base_history = HistoryStack(self._base.snapshot(), max_history)
        self._overlay_history = HistoryStack(self._overlay.snapshot(), max_history)

    @property
    def size(self) -> int:
        return self._size

    @property
    def base(self) -> GridBuffer:
        return self._base

    @property
    def overlay(self) -> GridBuffer:
        return self._overlay

    def buffer(self, kind: LayerKind) -> GridBuffer:
        """Buffer for a layer"""
        if kind is LayerKind.BASE:
            return self._base
        elif kind is LayerKind.OVERLAY:
            return self._overlay
        raise ValueError(f"Unknown layer: {kind!r}")

    def history(self, kind: LayerKind) -> HistoryStack:
        """History stack for a layer"""
        if kind is LayerKind.BASE:
            return self._base_history
        elif kind is LayerKind.OVERLAY:
            return self._overlay_history
        raise ValueError(f"Unknown layer: {kind!r}")

    def commit(self, kind: LayerKind, description: str = ""):
        """Snapshot a layer's buffer onto its history"""
        self.history(kind).commit(self.buffer(kind).snapshot(), description)

    def is_blank(self) -> bool:
        """True when both layers are entirely empty"""
        return self._base.is_blank() and self._overlay.is_blank()

    def copy(self, name: str, max_history: int = MAX_HISTORY_ENTRIES) -> 'Frame':
        """Duplicate with a new id and a fresh history seeded from the current buffers"""
        return Frame(self._size, name, max_history=max_history,
                     base=self.base.snapshot(), overlay=self.overlay.snapshot())

    def __repr__(self) -> str:
        return f"Frame({self.name!r}, id={self.id})"


class AnimationSet:
    """Ordered collection of frames with an active-frame pointer"""

    def __init__(self, size: int, max_frames: int = MAX_FRAMES,
                 max_history: int = MAX_HISTORY_ENTRIES):
        self._logger = logging.getLogger('AnimationSet')
        self._size = size
        self.max_frames = max_frames
        self.max_history = max_history
        self._frames: List[Frame] = []
        self._name_counter = 0

        first = self._new_frame()
        self._frames.append(first)
        self._active_id = first.id

    def _next_name(self) -> str:
        name = f"{DEFAULT_FRAME_NAME} {self._name_counter}"
        self._name_counter += 1
        return name

    def _new_frame(self, name: Optional[str] = None,
                   base: Optional[Sequence[Optional[Color]]] = None) -> Frame:
        return Frame(self._size, name or self._next_name(),
                     max_history=self.max_history, base=base)

    # ========================================
    # Queries
    # ========================================

    @property
    def size(self) -> int:
        return self._size

    @property
    def frames(self) -> List[Frame]:
        """Frames in display order (copy of the list)"""
        return list(self._frames)

    @property
    def active_id(self) -> str:
        return self._active_id

    @property
    def active_frame(self) -> Frame:
        return self.get_frame(self._active_id)

    @property
    def active_index(self) -> int:
        return self.index_of(self._active_id)

    def is_full(self) -> bool:
        return len(self._frames) >= self.max_frames

    def get_frame(self, frame_id: str) -> Frame:
        """
        Raises:
            FrameNotFoundError: If no frame has this id
        """
        for frame in self._frames:
            if frame.id == frame_id:
                return frame
        raise FrameNotFoundError(f"Frame with id '{frame_id}' not found")

    def index_of(self, frame_id: str) -> int:
        for i, frame in enumerate(self._frames):
            if frame.id == frame_id:
                return i
        raise FrameNotFoundError(f"Frame with id '{frame_id}' not found")

    def previous_frame(self) -> Optional[Frame]:
        """Frame before the active one, for onion skinning"""
        index = self.active_index
        return self._frames[index - 1] if index > 0 else None

    # ========================================
    # Frame CRUD Operations
    # ========================================

    def set_active(self, frame_id: str):
        """
        Raises:
            FrameNotFoundError: If no frame has this id
        """
        self.get_frame(frame_id)
        self._active_id = frame_id

    def append_frame(self, name: Optional[str] = None,
                     base: Optional[Sequence[Optional[Color]]] = None) -> Frame:
        """Append a frame and make it active

        Raises:
            FrameLimitError: If the set is already at max_frames
        """
        if self.is_full():
            raise FrameLimitError(f"Maximum of {self.max_frames} frames reached")
        frame = self._new_frame(name, base)
        self._frames.append(frame)
        self._active_id = frame.id
        self._logger.debug(f"Appended frame: {frame.id}")
        return frame

    def duplicate_frame(self, frame_id: Optional[str] = None) -> Frame:
        """Insert a copy directly after the source frame and make it active

        Raises:
            FrameLimitError: If the set is already at max_frames
            FrameNotFoundError: If the source id is unknown
        """
        source_id = frame_id or self._active_id
        index = self.index_of(source_id)
        if self.is_full():
            raise FrameLimitError(f"Maximum of {self.max_frames} frames reached")

        source = self._frames[index]
        duplicate = source.copy(f"{source.name}{DUPLICATE_SUFFIX}", self.max_history)
        self._frames.insert(index + 1, duplicate)
        self._active_id = duplicate.id
        self._logger.debug(f"Duplicated frame {source_id} -> {duplicate.id}")
        return duplicate

    def delete_frame(self, frame_id: Optional[str] = None) -> bool:
        """Remove a frame

        Deleting the active frame activates its predecessor, or the new first
        frame when the first one was removed.

        Returns:
            False if this is the last remaining frame (nothing removed)

        Raises:
            FrameNotFoundError: If the id is unknown
        """
        target_id = frame_id or self._active_id
        index = self.index_of(target_id)
        if len(self._frames) <= 1:
            self._logger.debug("Refusing to delete the last frame")
            return False

        del self._frames[index]
        if target_id == self._active_id:
            self._active_id = self._frames[max(index - 1, 0)].id

        self._logger.debug(f"Deleted frame: {target_id}")
        return True

    def move_frame(self, old_index: int, new_index: int):
        """Reorder: take the frame at old_index and insert it at new_index

        Raises:
            IndexError: If either index is out of range
        """
        count = len(self._frames)
        if not (0 <= old_index < count and 0 <= new_index < count):
            raise IndexError(f"Frame move {old_index} -> {new_index} out of range (0-{count - 1})")
        frame = self._frames.pop(old_index)
        self._frames.insert(new_index, frame)
        self._logger.debug(f"Moved frame {frame.id}: {old_index} -> {new_index}")

    def advance(self, step: int = 1) -> str:
        """Move the active pointer cyclically (used by playback)

        Returns:
            The new active frame id
        """
        index = (self.active_index + step) % len(self._frames)
        self._active_id = self._frames[index].id
        return self._active_id

    def __len__(self) -> int:
        return len(self._frames)

    def __iter__(self):
        return iter(self._frames)
