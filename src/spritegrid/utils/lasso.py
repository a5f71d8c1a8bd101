"""Lasso selection: interior detection by flooding inward from the grid border"""
from collections import deque
from typing import Iterable, Set

from spritegrid.models.grid import GridBuffer, border_indices, neighbors4


def calculate_lasso_selection(boundary: Iterable[int], size: int) -> Set[int]:
    """Calculate the filled interior of a lasso path

    The boundary cells are walls. Every non-wall cell reachable from the grid
    border is outside; everything else (walls included) is selected. Open or
    self-intersecting paths need no special handling.

    Args:
        boundary: Cells traced by the drag
        size: Grid cells per side

    Returns:
        Boundary plus enclosed interior
    """
    walls = set(boundary)
    explored = set()
    queue = deque(i for i in border_indices(size) if i not in walls)

    while queue:
        index = queue.popleft()
        if index in explored:
            continue
        explored.add(index)

        for n in neighbors4(index, size):
            if n not in explored and n not in walls:
                queue.append(n)

    return {i for i in range(size * size) if i not in explored}


def trim_to_content(selection: Set[int], buffer: GridBuffer) -> Set[int]:
    """Keep only selected cells that hold a color

    Falls back to the full selection when none of it is painted, so a lasso
    around empty space still yields a shape.
    """
    trimmed = {i for i in selection if buffer.get(i) is not None}
    return trimmed if trimmed else set(selection)
