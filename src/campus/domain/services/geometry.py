"""Grid geometry helpers for building footprints and room rectangles.

All functions are pure and work on integer grid cells. A building of
width W and length L covers columns 0..W-1 and rows 0..L-1.
"""

from __future__ import annotations

from ..value_objects import Coordinates

__all__ = [
    "is_inside_building",
    "is_inside_rectangle",
    "is_on_border",
    "is_on_rectangle_border",
]


def is_on_border(point: Coordinates, width: int, length: int) -> bool:
    """Check if a cell lies on the outer border of a building footprint.

    Args:
        point: The cell to test.
        width: Building width in cells.
        length: Building length in cells.

    Returns:
        True if the cell is inside the footprint and touches one of its edges.
    """
    if point.x > width - 1 or point.y > length - 1:
        return False
    return point.x == 0 or point.x == width - 1 or point.y == 0 or point.y == length - 1


def is_inside_building(x: int, y: int, width: int, length: int) -> bool:
    """Check if a cell falls within [0, width) x [0, length)."""
    return 0 <= x < width and 0 <= y < length


def is_inside_rectangle(
    x: int, y: int, initial_x: int, initial_y: int, final_x: int, final_y: int
) -> bool:
    """Check if a cell falls within the closed rectangle of a room."""
    return initial_x <= x <= final_x and initial_y <= y <= final_y


def is_on_rectangle_border(
    x: int, y: int, initial_x: int, initial_y: int, final_x: int, final_y: int
) -> bool:
    """Check if a cell lies on the edge of the closed rectangle of a room."""
    on_vertical_edge = x in (initial_x, final_x) and initial_y <= y <= final_y
    on_horizontal_edge = y in (initial_y, final_y) and initial_x <= x <= final_x
    return on_vertical_edge or on_horizontal_edge
