"""
Sprite Grid Editor - Selection Model

The selection is a set of unique cell indices. An empty selection means
unconstrained editing. Membership is independent of color: a selected
cell may be empty.
"""

from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, Iterable, Optional

from spritegrid.models.grid import index_to_xy


class MaskConstraint(Enum):
    """Which side of the selection a stroke may touch

    Decided once from the stroke's starting cell and fixed for its duration.
    """
    NONE = 'none'
    INSIDE = 'inside'
    OUTSIDE = 'outside'


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned bounds of a selection, inclusive on both ends"""
    min_x: int
    max_x: int
    min_y: int
    max_y: int

    @property
    def width(self) -> int:
        return self.max_x - self.min_x + 1

    @property
    def height(self) -> int:
        return self.max_y - self.min_y + 1


class SelectionModel:
    """Set of selected indices plus the masking rule for paint operations"""

    def __init__(self, size: int, indices: Optional[Iterable[int]] = None):
        self._size = size
        self._indices = set(indices) if indices else set()

    @property
    def size(self) -> int:
        return self._size

    @property
    def indices(self) -> FrozenSet[int]:
        """Read-only view of the selected indices"""
        return frozenset(self._indices)

    def is_empty(self) -> bool:
        return not self._indices

    def contains(self, index: int) -> bool:
        return index in self._indices

    def add(self, index: int):
        self._indices.add(index)

    def add_many(self, indices: Iterable[int]):
        self._indices.update(indices)

    def replace(self, indices: Iterable[int]):
        """Swap in a new selection wholesale"""
        self._indices = set(indices)

    def clear(self):
        self._indices = set()

    # ========================================
    # Masking
    # ========================================

    def constraint_for(self, index: int) -> MaskConstraint:
        """Mask constraint for a gesture starting at index"""
        if not self._indices:
            return MaskConstraint.NONE
        return MaskConstraint.INSIDE if index in self._indices else MaskConstraint.OUTSIDE

    def allows(self, index: int, constraint: MaskConstraint) -> bool:
        """Check whether a cell may be touched under a constraint"""
        if constraint is MaskConstraint.INSIDE:
            return index in self._indices
        if constraint is MaskConstraint.OUTSIDE:
            return index not in self._indices
        return True

    # ========================================
    # Geometry
    # ========================================

    def bounding_box(self) -> Optional[BoundingBox]:
        """Bounds derived fresh from current membership (None if empty)"""
        if not self._indices:
            return None
        xs = []
        ys = []
        for index in self._indices:
            x, y = index_to_xy(index, self._size)
            xs.append(x)
            ys.append(y)
        return BoundingBox(min(xs), max(xs), min(ys), max(ys))

    def __len__(self) -> int:
        return len(self._indices)

    def __iter__(self):
        return iter(sorted(self._indices))

    def __repr__(self) -> str:
        return f"SelectionModel({len(self._indices)} cells)"
