"""
Sprite Grid Editor - Grid Buffer

A GridBuffer is a fixed-length, row-major array of size*size cells.
Each cell is a Color or None (empty). Identity is purely positional:
index i sits at (x, y) = (i % size, i // size).
"""

from enum import Enum
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

import numpy as np

from spritegrid.models.color import Color


class LayerKind(Enum):
    """The two drawing surfaces owned by every frame"""
    BASE = 'base'
    OVERLAY = 'overlay'


# ========================================
# Coordinate helpers
# ========================================

def index_to_xy(index: int, size: int) -> Tuple[int, int]:
    """Convert a row-major index to (x, y)"""
    return index % size, index // size


def xy_to_index(x: int, y: int, size: int) -> int:
    """Convert (x, y) to a row-major index"""
    return y * size + x


def in_bounds(x: int, y: int, size: int) -> bool:
    """Check whether (x, y) lies on the grid"""
    return 0 <= x < size and 0 <= y < size


def neighbors4(index: int, size: int) -> List[int]:
    """In-bounds 4-connected neighbors of a cell (up, down, left, right)"""
    x, y = index_to_xy(index, size)
    result = []
    if y > 0:
        result.append(index - size)
    if y < size - 1:
        result.append(index + size)
    if x > 0:
        result.append(index - 1)
    if x < size - 1:
        result.append(index + 1)
    return result


def border_indices(size: int) -> List[int]:
    """Every cell on row 0, row size-1, column 0 and column size-1 (each once)"""
    cells = []
    for x in range(size):
        cells.append(x)
        if size > 1:
            cells.append((size - 1) * size + x)
    for y in range(1, size - 1):
        row = y * size
        cells.append(row)
        cells.append(row + size - 1)
    return cells


class GridBuffer:
    """Fixed-size cell buffer

    The length is always size*size. Callers pass valid indices; every
    algorithm that produces indices bound-checks against the grid edges.
    """

    __slots__ = ('_size', '_cells')

    def __init__(self, size: int, cells: Optional[Iterable[Optional[Color]]] = None):
        """
        Args:
            size: Cells per side
            cells: Optional initial contents, exactly size*size entries

        Raises:
            ValueError: If size is not positive or cells has the wrong length
        """
        if size <= 0:
            raise ValueError(f"Grid size must be positive, got {size}")
        self._size = size
        if cells is None:
            self._cells = [None] * (size * size)
        else:
            self._cells = list(cells)
            if len(self._cells) != size * size:
                raise ValueError(
                    f"Expected {size * size} cells, got {len(self._cells)}"
                )

    @property
    def size(self) -> int:
        return self._size

    @property
    def total(self) -> int:
        return self._size * self._size

    def get(self, index: int) -> Optional[Color]:
        return self._cells[index]

    def set(self, index: int, color: Optional[Color]):
        self._cells[index] = color

    def get_xy(self, x: int, y: int) -> Optional[Color]:
        return self._cells[xy_to_index(x, y, self._size)]

    def fill(self, color: Optional[Color] = None):
        """Set every cell to color (default: clear)"""
        self._cells = [color] * self.total

    def is_blank(self) -> bool:
        """True when no cell holds a color"""
        return all(c is None for c in self._cells)

    def painted_indices(self) -> List[int]:
        """Indices of every non-empty cell"""
        return [i for i, c in enumerate(self._cells) if c is not None]

    # ========================================
    # Snapshot API (for undo/redo support)
    # ========================================

    def snapshot(self) -> Tuple[Optional[Color], ...]:
        """Immutable copy of the current contents"""
        return tuple(self._cells)

    def restore(self, snapshot: Sequence[Optional[Color]]):
        """Replace contents from a snapshot

        Raises:
            ValueError: If the snapshot has the wrong length
        """
        if len(snapshot) != self.total:
            raise ValueError(f"Snapshot has {len(snapshot)} cells, expected {self.total}")
        self._cells = list(snapshot)

    def copy(self) -> 'GridBuffer':
        return GridBuffer(self._size, self._cells)

    # ========================================
    # Rendering output
    # ========================================

    def to_rgba_array(self) -> np.ndarray:
        """Rasterize to an (size, size, 4) uint8 array; empty cells are transparent"""
        return cells_to_rgba(self._cells, self._size)

    def __len__(self) -> int:
        return len(self._cells)

    def __iter__(self) -> Iterator[Optional[Color]]:
        return iter(self._cells)

    def __eq__(self, other) -> bool:
        if not isinstance(other, GridBuffer):
            return False
        return self._size == other._size and self._cells == other._cells

    def __repr__(self) -> str:
        return f"GridBuffer(size={self._size}, painted={len(self.painted_indices())})"


def cells_to_rgba(cells: Sequence[Optional[Color]], size: int) -> np.ndarray:
    """Rasterize a row-major cell sequence to an (size, size, 4) uint8 array"""
    rgba = np.zeros((size * size, 4), dtype=np.uint8)
    for i, color in enumerate(cells):
        if color is not None:
            rgba[i] = color.to_rgba255()
    return rgba.reshape((size, size, 4))
