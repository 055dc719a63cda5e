"""Domain services for floor-plan geometry and placement validation."""

from .door_position import DoorPositionChecker
from .geometry import (
    is_inside_building,
    is_inside_rectangle,
    is_on_border,
    is_on_rectangle_border,
)
from .position import PassagePositionChecker, PositionChecker

__all__ = [
    "DoorPositionChecker",
    "PassagePositionChecker",
    "PositionChecker",
    "is_inside_building",
    "is_inside_rectangle",
    "is_on_border",
    "is_on_rectangle_border",
]
