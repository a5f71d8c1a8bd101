"""
Sprite Grid Editor - Floating Layer

Cells lifted off the base buffer into a sparse index -> Color map. While an
index is in the map, the displayed color there is the floating color, not
the base color.

This module contains:
- Lift / stamp / commit against a base buffer
- Masked painting and filling inside the selection
- Geometric transforms (flip, rotate, nudge)

Transforms act on the floating map and the selection together, in the
local frame of the selection's bounding box, and replace both wholesale.
A selected cell with no floating color carries no color through a
transform.
"""

import logging
from typing import Callable, Dict, Optional, Tuple

from spritegrid.models.color import Color
from spritegrid.models.grid import GridBuffer, in_bounds, index_to_xy, xy_to_index
from spritegrid.models.selection import BoundingBox, SelectionModel
from spritegrid.utils.flood_fill import flood_region


# Maps (x, y, bounding box) to new (x, y), or None to drop the cell
CellMapper = Callable[[int, int, BoundingBox], Optional[Tuple[int, int]]]


class FloatingLayer:
    """Sparse layer of lifted cells, composited over the base buffer

    Lifecycle: created empty and inactive; lift() activates it; transforms
    and masked paint mutate it; stamp() merges it down and keeps it;
    commit() merges it down and discards it together with the selection.
    """

    def __init__(self, size: int):
        self._size = size
        self._cells: Dict[int, Color] = {}
        self._active = False
        self._logger = logging.getLogger('FloatingLayer')

    @property
    def size(self) -> int:
        return self._size

    @property
    def active(self) -> bool:
        """True between lift and commit"""
        return self._active

    @property
    def cells(self) -> Dict[int, Color]:
        """Copy of the index -> color map"""
        return dict(self._cells)

    def get(self, index: int) -> Optional[Color]:
        return self._cells.get(index)

    def has(self, index: int) -> bool:
        return index in self._cells

    def composite(self, base: GridBuffer, index: int) -> Optional[Color]:
        """Displayed color at index: floating overrides base"""
        if index in self._cells:
            return self._cells[index]
        return base.get(index)

    def __len__(self) -> int:
        return len(self._cells)

    # ========================================
    # Lifecycle
    # ========================================

    def lift(self, base: GridBuffer, selection: SelectionModel) -> bool:
        """Move selected, painted base cells into the floating map

        Returns:
            True if the layer was lifted, False for an empty selection or a
            layer that is already floating
        """
        if selection.is_empty() or self._active:
            return False

        self._cells = {}
        for index in selection:
            color = base.get(index)
            if color is not None:
                self._cells[index] = color
                base.set(index, None)

        self._active = True
        self._logger.debug(f"Lifted {len(self._cells)} cells from {len(selection)} selected")
        return True

    def stamp(self, base: GridBuffer) -> bool:
        """Merge floating colors into the base buffer, keeping the floating layer

        Returns:
            True if anything was merged
        """
        if not self._active or not self._cells:
            return False
        for index, color in self._cells.items():
            base.set(index, color)
        self._logger.debug(f"Stamped {len(self._cells)} cells")
        return True

    def commit(self, base: GridBuffer, selection: SelectionModel) -> bool:
        """Merge into the base buffer, then discard the floating state and selection

        Returns:
            True if anything was merged
        """
        merged = self.stamp(base)
        self._cells = {}
        self._active = False
        selection.clear()
        return merged

    def discard(self):
        """Drop floating state without merging (used when history is restored)"""
        self._cells = {}
        self._active = False

    # ========================================
    # Masked editing
    # ========================================

    def paint(self, base: GridBuffer, index: int, color: Optional[Color]) -> bool:
        """Paint or erase a selected cell

        Erasing removes the floating entry and clears the base cell under it.

        Returns:
            True if anything changed
        """
        if color is None:
            changed = index in self._cells or base.get(index) is not None
            self._cells.pop(index, None)
            base.set(index, None)
            return changed

        if self._cells.get(index) == color:
            return False
        self._cells[index] = color
        return True

    def fill(self, base: GridBuffer, selection: SelectionModel, start: int,
             color: Optional[Color]) -> list:
        """Flood fill inside the selection using composite colors

        Returns:
            Indices written (empty when the start color already matches)
        """
        def read(i):
            return self.composite(base, i)

        if read(start) == color:
            return []

        region = flood_region(read, start, self._size, selection.contains)
        for index in region:
            self.paint(base, index, color)
        return region

    # ========================================
    # Transforms
    # ========================================

    def _apply(self, selection: SelectionModel, mapper: CellMapper) -> bool:
        """Remap every selected cell; replaces floating map and selection"""
        bbox = selection.bounding_box()
        if bbox is None or not self._active:
            return False

        new_cells = {}
        new_selection = set()
        for index in selection:
            x, y = index_to_xy(index, self._size)
            target = mapper(x, y, bbox)
            if target is None:
                continue
            nx, ny = target
            if not in_bounds(nx, ny, self._size):
                continue
            new_index = xy_to_index(nx, ny, self._size)
            new_selection.add(new_index)
            if index in self._cells:
                new_cells[new_index] = self._cells[index]

        self._cells = new_cells
        selection.replace(new_selection)
        return True

    def flip_horizontal(self, selection: SelectionModel) -> bool:
        """Mirror across the vertical axis of the bounding box"""
        return self._apply(selection, lambda x, y, b: (b.min_x + (b.max_x - x), y))

    def flip_vertical(self, selection: SelectionModel) -> bool:
        """Mirror across the horizontal axis of the bounding box"""
        return self._apply(selection, lambda x, y, b: (x, b.min_y + (b.max_y - y)))

    def rotate_left(self, selection: SelectionModel) -> bool:
        """Rotate 90 degrees counter-clockwise within the bounding box

        The width x height box becomes a height x width box anchored at the
        same top-left corner. Cells rotated off the grid are dropped.
        """
        def mapper(x, y, b):
            rel_x, rel_y = x - b.min_x, y - b.min_y
            return _place(b, rel_y, b.width - 1 - rel_x, b.height, b.width)
        return self._apply(selection, mapper)

    def rotate_right(self, selection: SelectionModel) -> bool:
        """Rotate 90 degrees clockwise within the bounding box

        The width x height box becomes a height x width box anchored at the
        same top-left corner. Cells rotated off the grid are dropped.
        """
        def mapper(x, y, b):
            rel_x, rel_y = x - b.min_x, y - b.min_y
            return _place(b, b.height - 1 - rel_y, rel_x, b.height, b.width)
        return self._apply(selection, mapper)

    def nudge(self, selection: SelectionModel, dx: int, dy: int) -> bool:
        """Translate by (dx, dy), all or nothing

        Returns:
            False (state untouched) if any selected cell would leave the grid
        """
        if selection.is_empty() or not self._active:
            return False

        for index in selection:
            x, y = index_to_xy(index, self._size)
            if not in_bounds(x + dx, y + dy, self._size):
                self._logger.debug(f"Nudge ({dx}, {dy}) rejected at cell {index}")
                return False

        return self._apply(selection, lambda x, y, b: (x + dx, y + dy))


def _place(bbox: BoundingBox, rel_x: int, rel_y: int, width: int,
           height: int) -> Optional[Tuple[int, int]]:
    """Absolute position of box-relative coords, or None outside width x height"""
    if not (0 <= rel_x < width and 0 <= rel_y < height):
        return None
    return bbox.min_x + rel_x, bbox.min_y + rel_y
