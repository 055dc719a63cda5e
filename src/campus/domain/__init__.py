"""Domain layer - core business logic."""

from .entities import Building, Floor
from .passage import Passage, PassagePoint
from .results import FailureType, Result
from .services import DoorPositionChecker, PassagePositionChecker, PositionChecker
from .value_objects import (
    BuildingCode,
    BuildingDimensions,
    Coordinates,
    DoorOrientation,
    FloorNumber,
)

__all__ = [
    "Building",
    "BuildingCode",
    "BuildingDimensions",
    "Coordinates",
    "DoorOrientation",
    "DoorPositionChecker",
    "FailureType",
    "Floor",
    "FloorNumber",
    "Passage",
    "PassagePoint",
    "PassagePositionChecker",
    "PositionChecker",
    "Result",
]
