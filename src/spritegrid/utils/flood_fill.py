"""
4-connected flood fill

Shared by the fill bucket on the base buffer and the masked fill inside a
floating selection. The region search is separated from the write so the
floating fill can read composite colors while writing only the floating map.
"""
from collections import deque
from typing import Callable, List, Optional

from spritegrid.models.color import Color
from spritegrid.models.grid import GridBuffer, neighbors4


def flood_region(read: Callable[[int], Optional[Color]], start: int, size: int,
                 contains: Optional[Callable[[int], bool]] = None) -> List[int]:
    """Find the 4-connected region of cells matching the start cell's color

    Args:
        read: Returns the current color of a cell
        start: Starting index
        size: Grid cells per side
        contains: Optional containment predicate; cells failing it act as walls

    Returns:
        Indices in breadth-first visiting order (empty if start fails contains)
    """
    start_color = read(start)
    region = []
    visited = {start}
    queue = deque([start])

    while queue:
        index = queue.popleft()
        if contains is not None and not contains(index):
            continue
        if read(index) != start_color:
            continue

        region.append(index)
        for n in neighbors4(index, size):
            if n not in visited:
                visited.add(n)
                queue.append(n)

    return region


def flood_fill(buffer: GridBuffer, start: int, replacement: Optional[Color],
               contains: Optional[Callable[[int], bool]] = None) -> List[int]:
    """Flood fill a buffer in place

    Args:
        buffer: Buffer to read and write
        start: Starting index
        replacement: Color to write (None erases)
        contains: Optional containment predicate from the selection mask

    Returns:
        Indices written; empty when the start color already equals replacement
    """
    if buffer.get(start) == replacement:
        return []

    region = flood_region(buffer.get, start, buffer.size, contains)
    for index in region:
        buffer.set(index, replacement)
    return region
