"""
Selection Mixin for EditorState

Selection lifecycle on the active layer: select, lasso, lift, stamp,
commit, and the geometric transforms of the floating selection.

Lift and transforms change neither the displayed state at lift time nor
history; stamp and commit merge the floating layer down and record one
history step.
"""

from typing import FrozenSet, Iterable

from spritegrid.utils.lasso import calculate_lasso_selection, trim_to_content


class EditorSelectionMixin:
    """Mixin providing selection operations for EditorState

    This mixin expects the parent class to have:
    - self._logger: logging.Logger
    - self.playing: bool
    - self.selection: SelectionModel
    - self.floating: FloatingLayer
    - self.active_buffer: GridBuffer of the active layer
    - self.commit(description): from EditorHistoryMixin
    """

    # ========================================
    # Selecting
    # ========================================

    def select_cells(self, indices: Iterable[int], lift: bool = True) -> FrozenSet[int]:
        """Replace the selection, committing any previous floating selection

        Args:
            indices: Cells to select
            lift: Lift the selected cells into the floating layer

        Returns:
            The new selection (unchanged while playing)
        """
        if self.playing:
            return self.selection.indices
        self.clear_selection()
        self.selection.replace(indices)
        if lift:
            self.lift_selection()
        return self.selection.indices

    def lasso_select(self, boundary: Iterable[int]) -> FrozenSet[int]:
        """Select the region enclosed by a lasso path and lift it

        Any floating selection is merged down first. The enclosed area is
        then trimmed to painted cells of the active layer unless none of it
        is painted.

        Returns:
            The new selection (unchanged while playing)
        """
        if self.playing:
            return self.selection.indices
        self.clear_selection()
        region = calculate_lasso_selection(boundary, self.size)
        trimmed = trim_to_content(region, self.active_buffer)
        self._logger.debug(f"Lasso enclosed {len(region)} cells, kept {len(trimmed)}")
        return self.select_cells(trimmed, lift=True)

    def lift_selection(self) -> bool:
        """Move selected painted cells into the floating layer"""
        return self.floating.lift(self.active_buffer, self.selection)

    # ========================================
    # Merging
    # ========================================

    def stamp_selection(self) -> bool:
        """Copy the floating layer into the base buffer, keeping it floating

        Returns:
            True if anything was merged
        """
        merged = self.floating.stamp(self.active_buffer)
        if merged:
            self.commit("Stamp selection")
        return merged

    def clear_selection(self) -> bool:
        """Merge the floating layer down and deselect

        Returns:
            True if anything was merged
        """
        was_floating = self.floating.active
        merged = self.floating.commit(self.active_buffer, self.selection)
        self.selection.clear()
        if was_floating:
            self.commit("Commit selection")
        return merged

    # ========================================
    # Transforms
    # ========================================

    def flip_horizontal(self) -> bool:
        if self.playing:
            return False
        return self.floating.flip_horizontal(self.selection)

    def flip_vertical(self) -> bool:
        if self.playing:
            return False
        return self.floating.flip_vertical(self.selection)

    def rotate_left(self) -> bool:
        if self.playing:
            return False
        return self.floating.rotate_left(self.selection)

    def rotate_right(self) -> bool:
        if self.playing:
            return False
        return self.floating.rotate_right(self.selection)

    def nudge_selection(self, dx: int, dy: int) -> bool:
        """Move the floating selection, all or nothing

        Returns:
            False (nothing moved) if any cell would leave the grid
        """
        if self.playing:
            return False
        return self.floating.nudge(self.selection, dx, dy)
