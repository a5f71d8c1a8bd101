"""Bresenham line rasterization between two grid cells"""
from typing import List

from spritegrid.models.grid import in_bounds, index_to_xy, xy_to_index


def get_line_pixels(start_index: int, end_index: int, size: int) -> List[int]:
    """Calculate all cell indices on the straight path between two cells

    Integer error accumulation only. Used to interpolate between two pointer
    samples so a fast drag does not leave gaps. The path is always traced
    from the lower index to the higher one, so swapping the endpoints gives
    the same cells in reverse order.

    Args:
        start_index: First cell (included)
        end_index: Last cell (included)
        size: Grid cells per side

    Returns:
        Ordered list of indices from start to end; consecutive entries are
        8-adjacent
    """
    if start_index > end_index:
        return _bresenham(end_index, start_index, size)[::-1]
    return _bresenham(start_index, end_index, size)


def _bresenham(start_index: int, end_index: int, size: int) -> List[int]:
    x0, y0 = index_to_xy(start_index, size)
    x1, y1 = index_to_xy(end_index, size)

    pixels = []
    dx = abs(x1 - x0)
    dy = abs(y1 - y0)
    sx = 1 if x0 < x1 else -1
    sy = 1 if y0 < y1 else -1
    err = dx - dy

    x, y = x0, y0
    while True:
        if in_bounds(x, y, size):
            pixels.append(xy_to_index(x, y, size))

        if x == x1 and y == y1:
            break

        e2 = 2 * err
        if e2 > -dy:
            err -= dy
            x += sx
        if e2 < dx:
            err += dx
            y += sy

    return pixels
