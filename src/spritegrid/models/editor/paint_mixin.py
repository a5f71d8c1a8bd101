"""
Paint Mixin for EditorState

Brush, eraser and fill bucket operations on the active layer.

All painting follows the mask discipline: with a selection present, an
operation is limited to the inside or the outside of it, decided by the
cell where the gesture started. Cells inside an active floating selection
are written to the floating layer; everything else goes to the base buffer.
"""

from typing import List, Optional

from spritegrid.models.color import Color
from spritegrid.models.selection import MaskConstraint
from spritegrid.utils.flood_fill import flood_fill
from spritegrid.utils.line import get_line_pixels

from .tools import Tool

# Marker for "use the color of the current tool"
TOOL_COLOR = object()


class EditorPaintMixin:
    """Mixin providing paint operations for EditorState

    This mixin expects the parent class to have:
    - self._logger: logging.Logger
    - self.tool, self.current_color, self.playing
    - self.selection: SelectionModel
    - self.floating: FloatingLayer
    - self.active_buffer: GridBuffer of the active layer
    - self.paint_color(): color the current tool writes
    - self.commit(description): from EditorHistoryMixin
    """

    def _resolve_color(self, color):
        return self.paint_color() if color is TOOL_COLOR else Color.coerce(color)

    def paint_cell(self, index: int, color=TOOL_COLOR,
                   constraint: Optional[MaskConstraint] = None) -> bool:
        """Write one cell of the active layer (no history commit)

        Args:
            index: Cell to paint
            color: Color, hex string or None to erase; defaults to the tool color
            constraint: Mask constraint fixed for the current stroke; when
                omitted it is derived from index itself

        Returns:
            True if the displayed cell changed
        """
        if self.playing:
            return False

        color = self._resolve_color(color)
        if constraint is None:
            constraint = self.selection.constraint_for(index)
        if not self.selection.allows(index, constraint):
            return False

        if self.floating.active and self.selection.contains(index):
            return self.floating.paint(self.active_buffer, index, color)

        buffer = self.active_buffer
        if buffer.get(index) == color:
            return False
        buffer.set(index, color)
        return True

    def paint_line(self, start: int, end: int, color=TOOL_COLOR,
                   constraint: Optional[MaskConstraint] = None) -> List[int]:
        """Paint every cell on the straight line from start to end

        Returns:
            Indices that changed
        """
        if constraint is None:
            constraint = self.selection.constraint_for(start)
        return [i for i in get_line_pixels(start, end, self.size)
                if self.paint_cell(i, color, constraint)]

    def fill(self, index: int, color=TOOL_COLOR) -> List[int]:
        """Flood fill from index with the current color and commit

        Inside an active floating selection the fill reads composite colors
        and writes the floating layer. Otherwise the base buffer is filled,
        walled in by the selection mask. Switches the fill tool back to the
        brush afterwards.

        Returns:
            Indices written (empty for a no-op fill)
        """
        if self.playing:
            return []

        color = self.current_color if color is TOOL_COLOR else Color.coerce(color)

        if self.floating.active and self.selection.contains(index):
            written = self.floating.fill(self.active_buffer, self.selection, index, color)
        else:
            constraint = self.selection.constraint_for(index)
            contains = None
            if constraint is not MaskConstraint.NONE:
                def contains(i):
                    return self.selection.allows(i, constraint)
            written = flood_fill(self.active_buffer, index, color, contains)

        if written:
            self._logger.debug(f"Filled {len(written)} cells from {index}")
            self.commit("Fill")
        if self.tool is Tool.FILL:
            self.tool = Tool.BRUSH
        return written

    def clear_canvas(self) -> bool:
        """Erase the whole active layer, dropping any selection, and commit

        Returns:
            True if a history step was recorded
        """
        if self.playing:
            return False
        self.floating.discard()
        self.selection.clear()
        self.active_buffer.fill(None)
        return self.commit("Clear canvas")
