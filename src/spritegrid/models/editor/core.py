"""
Sprite Grid Editor - Editor State

THE MODEL for one editing session. Owns all mutable editing state and is
passed explicitly to every caller (gestures, services, front end).

This class handles:
- The animation (frames, active frame, per-layer history)
- Current tool, current color and the recent-color list
- Active drawing layer (base or overlay)
- Selection and floating layer of the active layer
- Composite read-back for rendering

The EditorState is INDEPENDENT of UI:
- No toolkit imports
- No rendering beyond composited cell arrays
- No timers (playback is ticked from outside)

Usage:
    editor = EditorState()
    editor.set_current_color('#ff0000')
    editor.paint_cell(0)
    editor.commit("Brush stroke")
    editor.undo()
"""

import logging
from typing import List, Optional, Union

import numpy as np

from spritegrid.config import EditorConfig
from spritegrid.constants import DEFAULT_COLOR, PRESET_COLORS
from spritegrid.models.color import Color
from spritegrid.models.floating import FloatingLayer
from spritegrid.models.frame import AnimationSet, Frame
from spritegrid.models.grid import GridBuffer, LayerKind, cells_to_rgba
from spritegrid.models.history import HistoryStack
from spritegrid.models.selection import SelectionModel

from .frame_mixin import EditorFrameMixin
from .history_mixin import EditorHistoryMixin
from .paint_mixin import EditorPaintMixin
from .selection_mixin import EditorSelectionMixin
from .tools import Tool


class EditorState(EditorPaintMixin, EditorSelectionMixin, EditorHistoryMixin, EditorFrameMixin):
    """Editing session aggregate

    Properties:
        config: EditorConfig the session was built from
        animation: AnimationSet of frames
        selection: SelectionModel of the active layer
        floating: FloatingLayer of the active layer
        palette: Preset colors offered by the front end
        tool: Current Tool
        current_color: Color or None (the "clear" swatch)
        recent_colors: Most recent first, unique
        active_layer: LayerKind edited by paint operations
        playing: True while animation playback runs (editing is refused)
    """

    def __init__(self, config: Optional[EditorConfig] = None):
        self._logger = logging.getLogger('EditorState')
        self.config = config or EditorConfig()

        size = self.config.grid_size
        self.animation = AnimationSet(size, self.config.max_frames, self.config.max_history)
        self.selection = SelectionModel(size)
        self.floating = FloatingLayer(size)

        self.palette: List[Color] = [Color.from_hex(c) for c in PRESET_COLORS]
        self.tool = Tool.BRUSH
        self.current_color: Optional[Color] = Color.from_hex(DEFAULT_COLOR)
        self.recent_colors: List[Color] = []
        self.active_layer = LayerKind.BASE
        self.playing = False

        self._logger.debug(f"Created editor ({size}x{size})")

    # ========================================
    # Properties
    # ========================================

    @property
    def size(self) -> int:
        return self.config.grid_size

    @property
    def total(self) -> int:
        return self.size * self.size

    @property
    def active_frame(self) -> Frame:
        return self.animation.active_frame

    @property
    def active_buffer(self) -> GridBuffer:
        """Buffer of the active layer in the active frame"""
        return self.active_frame.buffer(self.active_layer)

    @property
    def active_history(self) -> HistoryStack:
        return self.active_frame.history(self.active_layer)

    # ========================================
    # Tool and color
    # ========================================

    def set_tool(self, tool: Tool):
        """Switch tools; leaving the select tool keeps the selection floating"""
        self.tool = Tool(tool)

    def set_current_color(self, color: Union[Color, str, None]):
        """Choose the paint color

        A real color is recorded in the recent list. Unless the fill tool is
        active, choosing a color switches back to the brush.
        """
        self.current_color = Color.coerce(color)
        if self.current_color is not None:
            self.add_recent_color(self.current_color)
        if self.tool is not Tool.FILL:
            self.tool = Tool.BRUSH

    def add_recent_color(self, color: Union[Color, str]):
        """Move color to the front of the recent list, dropping the oldest at the cap"""
        color = Color.coerce(color)
        if color is None:
            return
        recent = [c for c in self.recent_colors if c != color]
        recent.insert(0, color)
        limit = self.config.max_recent_colors
        if len(recent) > limit:
            self._logger.debug(f"Recent colors at cap ({limit}), dropping {recent[limit:]}")
            recent = recent[:limit]
        self.recent_colors = recent

    def paint_color(self) -> Optional[Color]:
        """Color the current tool writes (None erases)"""
        return None if self.tool is Tool.ERASER else self.current_color

    def set_active_layer(self, kind: LayerKind):
        """Switch the drawing surface; any floating selection is committed first"""
        kind = LayerKind(kind)
        if kind is self.active_layer:
            return
        self.clear_selection()
        self.active_layer = kind

    # ========================================
    # Composite read-back
    # ========================================

    def display_color(self, index: int) -> Optional[Color]:
        """Color shown at index on the active layer (floating overrides base)"""
        return self.floating.composite(self.active_buffer, index)

    def layer_cells(self, kind: Optional[LayerKind] = None) -> List[Optional[Color]]:
        """Displayed cells of a layer of the active frame (default: active layer)"""
        kind = self.active_layer if kind is None else LayerKind(kind)
        buffer = self.active_frame.buffer(kind)
        if kind is not self.active_layer:
            return list(buffer)
        return [self.floating.composite(buffer, i) for i in range(self.total)]

    def composite_cells(self) -> List[Optional[Color]]:
        """Displayed cells of the active layer, floating merged in"""
        return self.layer_cells(self.active_layer)

    def composite_rgba(self) -> np.ndarray:
        """Overlay over base for the active frame as an (N, N, 4) uint8 array"""
        base = cells_to_rgba(self.layer_cells(LayerKind.BASE), self.size)
        overlay = cells_to_rgba(self.layer_cells(LayerKind.OVERLAY), self.size)
        covered = overlay[..., 3] > 0
        base[covered] = overlay[covered]
        return base

    def __repr__(self) -> str:
        return (f"EditorState(size={self.size}, frames={len(self.animation)}, "
                f"tool={self.tool.value}, selected={len(self.selection)})")
